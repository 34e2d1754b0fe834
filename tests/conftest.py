"""
Shared fixtures for csvwatch tests
"""

import pytest

from csvwatch.core.config import ServerConfig

SAMPLE_ROWS = "A,foo,1\nB,bar,2\nA,baz,3\n"


@pytest.fixture
def sample_csv(tmp_path):
    """CSV file with two A rows and one B row"""
    path = tmp_path / "data.csv"
    path.write_text(SAMPLE_ROWS, encoding="utf-8")
    return path


@pytest.fixture
def server_config(sample_csv):
    return ServerConfig(target=sample_csv)
