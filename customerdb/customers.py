"""
The customers table: Customer records, name preparation and the SQL used to
reset, seed and query the table.
"""
import re
from typing import Iterable, NamedTuple

from customerdb.db_helper_factory import helper_for_conn
from customerdb.exceptions import CustomerDBNameError
from customerdb.template import execute, executemany, fetchall
from customerdb.types import Connection, NamePair


FULL_NAMES = ("John Woo", "Jeff Dean", "Josh Bloch", "Josh Long")

DROP_CUSTOMERS_SQL = "DROP TABLE IF EXISTS customers"
CREATE_CUSTOMERS_SQL = """
    CREATE TABLE customers (
        id {serial_primary_key},
        first_name VARCHAR(255),
        last_name VARCHAR(255)
    )
    """
INSERT_CUSTOMER_SQL = """
    INSERT INTO customers (first_name, last_name)
    VALUES ({placeholders})
    """
SELECT_BY_FIRST_NAME_SQL = """
    SELECT id, first_name, last_name
    FROM customers
    WHERE first_name = {placeholder}
    """


class Customer(NamedTuple):
    id: int
    first_name: str
    last_name: str

    def __str__(self):
        return (f"Customer[id={self.id}, firstName='{self.first_name}', "
                f"lastName='{self.last_name}']")


def split_name(full_name: str) -> NamePair:
    """
    Split a full name at its first whitespace character into (first, last).
    Nothing is stripped: the last name is everything after that character,
    including any further spaces, e.g. 'Josh  Long' -> ('Josh', ' Long').

    :param full_name: str, e.g. 'Josh Bloch'
    :return: tuple of first and last name
    :raises CustomerDBNameError: if the name has no whitespace character
    """
    parts = re.split(r'\s', full_name, maxsplit=1)
    if len(parts) != 2:
        msg = f"Cannot split '{full_name}' into first and last name"
        raise CustomerDBNameError(msg)
    first_name, last_name = parts
    return first_name, last_name


def split_names(full_names: Iterable[str]) -> list[NamePair]:
    """Return (first, last) pairs in the same order as full_names."""
    return [split_name(full_name) for full_name in full_names]


def customer_from_row(row) -> Customer:
    """Map one result row with id, first_name and last_name to a Customer."""
    return Customer(row.id, row.first_name, row.last_name)


def reset_customers_table(conn: Connection) -> None:
    """
    Drop the customers table if it exists and create it again, empty.  The id
    column is assigned by the database.

    :param conn: dbapi connection
    """
    helper = helper_for_conn(conn)
    execute(DROP_CUSTOMERS_SQL, conn)
    execute(CREATE_CUSTOMERS_SQL.format(
        serial_primary_key=helper.serial_primary_key), conn)


def insert_customers(conn: Connection, name_pairs: Iterable[NamePair]) -> int:
    """
    Insert (first_name, last_name) pairs into customers in a single batch.

    :param conn: dbapi connection
    :param name_pairs: iterable of (first_name, last_name) tuples
    :return: the number of rows inserted
    """
    helper = helper_for_conn(conn)
    insert_sql = INSERT_CUSTOMER_SQL.format(placeholders=helper.placeholders(2))
    return executemany(insert_sql, conn, name_pairs)


def find_customers_by_first_name(conn: Connection, first_name: str) -> list[Customer]:
    """
    Return customers whose first_name equals first_name, in the order the
    database returns them.

    :param conn: dbapi connection
    :param first_name: str, bound as a query parameter
    :return: list of Customer
    """
    helper = helper_for_conn(conn)
    select_sql = SELECT_BY_FIRST_NAME_SQL.format(
        placeholder=helper.placeholder)
    return fetchall(select_sql, conn, parameters=(first_name,),
                    transform=customer_from_row)
