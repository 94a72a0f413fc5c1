"""
Library to seed and query a customers table through DBAPI connections
"""
import logging
import sys
from importlib.metadata import (
    PackageNotFoundError,
    version,
)
from typing import TextIO

# Import helper functions here for more convenient access
from customerdb.db_params import DbParams
from customerdb.template import (
    execute,
    executemany,
    fetchall,
    iter_rows,
)
from customerdb.connect import (
    connect,
    open_connection,
)
from customerdb.customers import (
    Customer,
    customer_from_row,
    find_customers_by_first_name,
    insert_customers,
    reset_customers_table,
    split_name,
    split_names,
)
from customerdb.runner import SeedAndQueryRunner

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = "0.0.0"

# Nothing is output until log_to_console() is called or the application
# configures logging
logging.getLogger("customerdb").handlers.clear()

INFO_FORMAT = '%(asctime)s %(funcName)s: %(message)s'
DEBUG_FORMAT = '%(message)s'


class _LevelFormatter(logging.Formatter):
    """Timestamp INFO and above; show DEBUG text (SQL, parameters) bare."""
    info_formatter = logging.Formatter(INFO_FORMAT)
    debug_formatter = logging.Formatter(DEBUG_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno >= logging.INFO:
            return self.info_formatter.format(record)
        return self.debug_formatter.format(record)


def log_to_console(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
) -> None:
    """
    Send customerdb log messages to output, replacing any earlier handler.

    :param level: logger level
    :param output: stream for the messages
    """
    handler = logging.StreamHandler(output)
    handler.setFormatter(_LevelFormatter())

    logger = logging.getLogger('customerdb')
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)


__all__ = [
    "Customer",
    "DbParams",
    "SeedAndQueryRunner",
    "connect",
    "customer_from_row",
    "execute",
    "executemany",
    "fetchall",
    "find_customers_by_first_name",
    "insert_customers",
    "iter_rows",
    "log_to_console",
    "open_connection",
    "reset_customers_table",
    "split_name",
    "split_names",
]
