import logging

import duckdb
import pytest


@pytest.fixture
def con():
    """In-memory DuckDB connection, closed after the test."""
    connection = duckdb.connect(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def debug_logging(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")


@pytest.fixture
def sqlname_caplog(caplog):
    """caplog attached straight to the non-propagating "sqlname" logger."""
    logger = logging.getLogger("sqlname")
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)
