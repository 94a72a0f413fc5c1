"""
Find the DbHelper for a dbtype name or for an open connection.
"""
from functools import lru_cache

from customerdb.db_helpers import PostgresDbHelper, SQLiteDbHelper
from customerdb.exceptions import CustomerDBHelperError

HELPERS = {
    'SQLITE': SQLiteDbHelper,
    'PG': PostgresDbHelper,
}

# Connection classes are named rather than imported, so psycopg2 stays optional
CONNECTION_DBTYPES = {
    ('sqlite3', 'Connection'): 'SQLITE',
    ('psycopg2.extensions', 'connection'): 'PG',
}


@lru_cache(maxsize=None)
def helper_for_dbtype(dbtype):
    """
    Return the helper for dbtype, e.g. 'SQLITE' or 'PG' (any case).

    :raises CustomerDBHelperError: for unknown dbtypes
    """
    try:
        helper_class = HELPERS[dbtype.upper()]
    except KeyError:
        msg = f"Unsupported dbtype: {dbtype} (expected one of {sorted(HELPERS)})"
        raise CustomerDBHelperError(msg) from None
    return helper_class()


def helper_for_conn(conn):
    """
    Return the helper matching the class of an open DBAPI connection.

    :raises CustomerDBHelperError: for connections of other drivers
    """
    conn_class = type(conn)
    key = (conn_class.__module__, conn_class.__qualname__)
    try:
        dbtype = CONNECTION_DBTYPES[key]
    except KeyError:
        msg = f"Unsupported connection type: {'.'.join(key)}"
        raise CustomerDBHelperError(msg) from None
    return helper_for_dbtype(dbtype)
