"""
Command line interface for csvwatch
"""

from .main import main

__all__ = ['main']
