"""
Connect to database
"""
import logging
from contextlib import contextmanager

from customerdb.db_helper_factory import helper_for_dbtype

logger = logging.getLogger('customerdb')


def connect(db_params, password_variable=None, **kwargs):
    """
    Return a new DBAPI connection.  The caller must close it.

    :param db_params: DbParams object or similar with appropriate attributes
    :param password_variable: str, name of environment variable with password
    :param kwargs: passed to the driver's connect function e.g. detect_types
    :raises CustomerDBConnectionError: if the connection cannot be made
    """
    helper = helper_for_dbtype(db_params.dbtype)
    return helper.connect(db_params, password_variable, **kwargs)


@contextmanager
def open_connection(db_params, password_variable=None, **kwargs):
    """
    Yield a connection and close it on exit, whether the block succeeds or
    raises.  The `with conn:` block of DBAPI drivers only ends the
    transaction; it does not close the connection.
    """
    conn = connect(db_params, password_variable, **kwargs)
    logger.debug("Opened connection: %s", conn)
    try:
        yield conn
    finally:
        conn.close()
        logger.debug("Closed connection: %s", conn)
