"""
Pytest configuration and fixtures for Insert Batcher tests.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))


# Define test markers
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "core: tests that don't require database connections"
    )
    config.addinivalue_line(
        "markers", "cli: tests that drive the command-line interface"
    )


@pytest.fixture
def sql_file(tmp_path):
    """Write a small SQL file with mixed statements and return its path."""
    path = tmp_path / "statements.sql"
    path.write_text(
        "-- users\n"
        "INSERT INTO users (id, name) VALUES (?, ?);\n"
        "\n"
        "INSERT INTO users\n"
        "    (id, name)\n"
        "VALUES (?, ?);\n"
        "INSERT INTO users (id, name) VALUES (1, 'John');\n"
        "SELECT * FROM users;\n"
    )
    return str(path)
