"""
Run SQL against a DBAPI connection.  Every function binds parameters through
the driver, closes its cursor and, if the driver raises, rolls back the
failed transaction and raises a CustomerDBError subclass instead.
"""
import logging
from contextlib import contextmanager
from itertools import islice
from typing import Any, Collection, Iterable, Iterator, Optional

from customerdb.db_helper_factory import helper_for_conn
from customerdb.exceptions import (
    CustomerDBExtractError,
    CustomerDBInsertError,
    CustomerDBQueryError,
    sql_error_message,
)
from customerdb.row_factories import namedtuple_row_factory
from customerdb.types import Connection, InputRow, Row, Transform

logger = logging.getLogger('customerdb')
BATCH_SIZE = 5000


@contextmanager
def _driver_errors_as(error_class, query, conn, helper):
    try:
        yield
    except helper.errors as exc:
        # A failed transaction must be cleared before the connection is reused
        conn.rollback()
        raise error_class(sql_error_message(query, helper, exc)) from exc


def execute(
        query: str,
        conn: Connection,
        parameters: Collection[Any] = ()
        ) -> None:
    """
    Run a single statement, e.g. DDL, and commit.

    :raises CustomerDBQueryError: if SQL raises an error
    """
    logger.info("Executing query")
    logger.debug("Executing:\n\n%s\n\nwith parameters: %s", query, parameters)

    helper = helper_for_conn(conn)
    with helper.cursor(conn) as cursor, \
            _driver_errors_as(CustomerDBQueryError, query, conn, helper):
        cursor.execute(query, parameters)
        conn.commit()


def executemany(
        query: str,
        conn: Connection,
        rows: Iterable[InputRow],
        batch_size: int = BATCH_SIZE,
        ) -> int:
    """
    Run query once for each row of parameters.  Rows are sent to the database
    in batches of batch_size and each batch is committed.

    :param query: SQL with positional placeholders for each row's values
    :param conn: dbapi connection
    :param rows: iterable of parameter sequences
    :param batch_size: number of rows sent per batch
    :return: the number of rows processed
    :raises CustomerDBInsertError: if SQL raises an error
    """
    logger.info("Executing many (batch_size=%s)", batch_size)
    logger.debug("Executing:\n\n%s", query)

    helper = helper_for_conn(conn)
    rows = iter(rows)
    processed = 0

    with helper.cursor(conn) as cursor:
        while True:
            batch = list(islice(rows, batch_size))
            if not batch:
                break

            with _driver_errors_as(CustomerDBInsertError, query, conn, helper):
                helper.executemany(cursor, query, batch)
                conn.commit()

            processed += len(batch)
            logger.debug("%s rows processed", processed)

    logger.info("%s rows processed in total", processed)
    return processed


def iter_rows(
        select_query: str,
        conn: Connection,
        parameters: Collection[Any] = (),
        transform: Optional[Transform] = None,
        ) -> Iterator[Row]:
    """
    Run a query and yield each result row as a namedtuple, or as whatever
    transform returns for it, e.g. a Customer.

    :raises CustomerDBExtractError: if SQL raises an error
    """
    logger.info("Fetching rows")
    logger.debug("Fetching:\n\n%s\n\nwith parameters: %s", select_query, parameters)

    helper = helper_for_conn(conn)
    with helper.cursor(conn) as cursor:
        with _driver_errors_as(CustomerDBExtractError, select_query, conn, helper):
            cursor.execute(select_query, parameters)

        make_row = namedtuple_row_factory(cursor)
        returned = 0
        for values in cursor:
            row = make_row(values)
            yield transform(row) if transform else row
            returned += 1

        logger.info("%s rows returned", returned)
        # End the read transaction
        conn.commit()


def fetchall(
        select_query: str,
        conn: Connection,
        parameters: Collection[Any] = (),
        transform: Optional[Transform] = None,
        ) -> list[Row]:
    """Return all rows of iter_rows as a list; no rows is an empty list."""
    return list(iter_rows(select_query, conn, parameters, transform))
