"""
Startup helpers for the CLI
"""

import sys
from pathlib import Path
from typing import Optional

import click
from colorama import Fore, Style

from csvwatch.core.config import DEFAULT_CONFIG_NAME, ServerConfig, load_config
from csvwatch.core.errors import ConfigError
from csvwatch.utils.logging_utils import get_logger

logger = get_logger('csvwatch.cli')


def load_config_with_fallback(config_file: Optional[str], search_dir: Path, verbose: bool = False) -> ServerConfig:
    """Settings from ``--config``, else ``csvwatch.config.toml`` in ``search_dir``, else defaults.

    An explicitly named file that is missing or unparsable is fatal.
    """
    if config_file is None:
        candidate = search_dir / DEFAULT_CONFIG_NAME
        if not candidate.exists():
            return ServerConfig()
        config_file = str(candidate)
        if verbose:
            click.echo(f"{Fore.CYAN}Using config: {config_file}{Style.RESET_ALL}")

    try:
        config_obj = load_config(config_file)
    except ConfigError as e:
        fail(str(e))
    if config_obj is None:
        fail(f"Could not load config file: {config_file}")
    return config_obj


def fail(message: str, verbose: bool = False) -> None:
    """Log a fatal startup error, echo it in red and exit with status 1."""
    logger.error(message)
    click.echo(f"{Fore.RED}Error: {message}{Style.RESET_ALL}", err=True)
    if verbose:
        import traceback
        traceback.print_exc()
    sys.exit(1)
