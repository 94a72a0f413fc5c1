"""
A row factory takes a cursor after execute() and returns the function that
builds each result row.
"""
from collections import namedtuple


def namedtuple_row_factory(cursor):
    """
    Return function converting plain result tuples into namedtuples named
    after the result columns, so that row.first_name and row[1] both work.
    """
    Row = namedtuple('Row', [column[0] for column in cursor.description])
    return Row._make
