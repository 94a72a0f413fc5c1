"""
Base class for engine-specific helpers
"""
import importlib
import logging
import os
from contextlib import contextmanager

from customerdb.exceptions import CustomerDBConnectionError

logger = logging.getLogger('customerdb')


class DbHelper:
    """
    Wraps one DBAPI driver.  Subclasses name the driver module and describe
    the SQL dialect; the driver is imported when the helper is created so
    that optional drivers are only needed for the engines actually used.
    """
    driver_name = ''
    install_hint = ''
    required_params = frozenset()
    placeholder = ''
    serial_primary_key = ''

    def __init__(self):
        try:
            self.driver = importlib.import_module(self.driver_name)
        except ImportError:
            self.driver = None
            self.errors = ()
            self.paramstyle = 'unknown'
        else:
            # Every PEP 249 driver defines these
            self.errors = (self.driver.DatabaseError, self.driver.InterfaceError)
            self.paramstyle = self.driver.paramstyle

    def connect(self, db_params, password_variable=None, **kwargs):
        """
        Open a connection with the driver.

        :param db_params: DbParams for this engine
        :param password_variable: str, name of environment variable with password
        :param kwargs: passed to the driver's connect function
        :raises CustomerDBConnectionError: if the driver is missing or fails
        """
        if self.driver is None:
            msg = f"Driver module {self.driver_name} is not installed.  {self.install_hint}"
            raise CustomerDBConnectionError(msg)

        dsn = self.dsn(db_params, password_variable)
        try:
            return self.driver.connect(dsn, **kwargs)
        except self.errors as exc:
            msg = f"Could not connect to {self.describe(db_params)}: {exc}"
            raise CustomerDBConnectionError(msg)

    def dsn(self, db_params, password_variable):
        """Return the string passed to the driver's connect function."""
        raise NotImplementedError

    def describe(self, db_params):
        """Return a password-free description of the database for messages."""
        raise NotImplementedError

    def placeholders(self, count):
        """Return count positional placeholders, comma-separated."""
        return ', '.join([self.placeholder] * count)

    @staticmethod
    @contextmanager
    def cursor(conn):
        """Yield a cursor on conn and close it afterwards."""
        cursor = conn.cursor()
        try:
            yield cursor
        finally:
            cursor.close()

    def executemany(self, cursor, query, rows):
        """Run query once per parameter row in rows."""
        cursor.executemany(query, rows)


def password_from_environment(password_variable):
    """
    Return the password held in environment variable password_variable.

    :raises CustomerDBConnectionError: if no variable is named or it is unset
    """
    if not password_variable:
        msg = "Name of password environment variable e.g. CUSTOMERDB_PASSWORD is required"
        logger.error(msg)
        raise CustomerDBConnectionError(msg)
    try:
        return os.environ[password_variable]
    except KeyError:
        msg = f"Password environment variable ({password_variable}) is not set"
        logger.error(msg)
        raise CustomerDBConnectionError(msg) from None
