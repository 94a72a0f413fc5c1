"""
Fixtures for pytest.  Functions defined here can be passed as arguments to
pytest tests.  scope parameter describes how often they are recreated e.g.
once per module.
"""
import logging
import os
import socket

import pytest

from customerdb import (
    DbParams,
    log_to_console,
    open_connection,
)


@pytest.fixture(scope="function")
def logger() -> logging.Logger:
    """
    Return an enabled customerdb logger for tests.
    The logger handlers are cleared afterwards.
    """
    log_to_console()
    logger = logging.getLogger("customerdb")
    yield logger
    logger.handlers.clear()


@pytest.fixture(scope='function')
def sqlitedb(tmp_path):
    """Get DbParams for temporary SQLite database."""
    filename = f'{tmp_path.absolute()}.db'
    yield DbParams(dbtype='SQLITE', filename=filename)


@pytest.fixture(scope='function')
def testdb_conn(sqlitedb):
    """Get connection to test SQLite database."""
    with open_connection(sqlitedb) as conn:
        yield conn


@pytest.fixture(scope='module')
def pgtestdb_params():
    """
    Create DbParams object for test PostgreSQL database.  Host and port can be
    overridden from environment variables to allow CI pipeline to use its own
    database.
    """
    return DbParams(
        dbtype='PG',
        host=os.getenv('TEST_PG_HOST', 'localhost'),
        port=os.getenv('TEST_PG_PORT', '5432'),
        dbname='customerdb',
        user='customerdb_user')


@pytest.fixture(scope='function')
def pgtestdb_conn(pgtestdb_params):
    """Get connection to test PostgreSQL database, or skip if unavailable."""
    if db_is_unreachable(pgtestdb_params.host, pgtestdb_params.port):
        pytest.skip(f"PostgreSQL not reachable at {pgtestdb_params.host}:{pgtestdb_params.port}")
    if 'TEST_PG_PASSWORD' not in os.environ:
        pytest.skip("TEST_PG_PASSWORD is not set")

    with open_connection(pgtestdb_params, 'TEST_PG_PASSWORD') as conn:
        yield conn


def db_is_unreachable(host, port):
    """
    Attempt to connect to generic host, port combination to check network.
    :param host:
    :param port:
    :return: boolean
    """
    s = socket.socket()
    s.settimeout(5)
    try:
        s.connect((host, int(port)))
        return False
    except OSError:
        return True
    finally:
        s.close()
