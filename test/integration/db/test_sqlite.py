"""Integration tests for SQLite database."""
# pylint: disable=unused-argument, missing-docstring
import os
import sqlite3
import sys

import pytest

from customerdb import (
    DbParams,
    connect,
    execute,
    executemany,
    fetchall,
    iter_rows,
    open_connection,
)
from customerdb.exceptions import (
    CustomerDBConnectionError,
    CustomerDBExtractError,
    CustomerDBInsertError,
    CustomerDBQueryError,
)

CREATE_SQL = "CREATE TABLE src (id integer primary key, name text unique)"
INSERT_SQL = "INSERT INTO src (id, name) VALUES (?, ?)"
ROWS = [(1, 'basalt'), (2, 'granite'), (3, 'gabbro')]


# -- Tests here --


def test_connect(sqlitedb):
    conn = connect(sqlitedb)
    try:
        assert isinstance(conn, sqlite3.Connection)
        assert os.path.isfile(sqlitedb.filename)
    finally:
        conn.close()


@pytest.mark.skipif(sys.platform != 'linux', reason='Requires Linux OS')
def test_bad_connect():
    # Attempting to create file in non-existent directory should fail
    db_params = DbParams(dbtype='SQLITE', filename='/does/not/exist')
    with pytest.raises(CustomerDBConnectionError):
        connect(db_params)


def test_open_connection_closes_connection(sqlitedb):
    with open_connection(sqlitedb) as conn:
        execute("SELECT 1", conn)

    with pytest.raises(sqlite3.ProgrammingError):
        conn.execute("SELECT 1")


def test_open_connection_closes_connection_on_error(sqlitedb):
    with pytest.raises(CustomerDBQueryError):
        with sqlitedb.open_connection() as conn:
            execute("SELECT * FROM bad_table", conn)

    with pytest.raises(sqlite3.ProgrammingError):
        conn.execute("SELECT 1")


def test_bad_select(testdb_conn):
    with pytest.raises(CustomerDBQueryError, match=r"(?s)SELECT \* FROM bad_table.*qmark"):
        execute("SELECT * FROM bad_table", testdb_conn)


def test_bad_insert(testdb_conn):
    with pytest.raises(CustomerDBQueryError):
        execute("INSERT INTO bad_table (id) VALUES (1)", testdb_conn)


def test_executemany_happy_path(testdb_conn, src_table):
    processed = executemany(INSERT_SQL, testdb_conn, ROWS)

    result = fetchall("SELECT * FROM src ORDER BY id", testdb_conn)
    assert processed == 3
    assert result == ROWS


def test_executemany_batches(testdb_conn, src_table):
    processed = executemany(INSERT_SQL, testdb_conn, iter(ROWS), batch_size=2)

    assert processed == 3
    assert len(fetchall("SELECT * FROM src", testdb_conn)) == 3


def test_executemany_empty(testdb_conn, src_table):
    assert executemany(INSERT_SQL, testdb_conn, []) == 0


def test_executemany_bad_constraint(testdb_conn, src_table):
    rows = [(1, 'basalt'), (2, 'basalt')]

    with pytest.raises(CustomerDBInsertError, match=r"UNIQUE constraint failed"):
        executemany(INSERT_SQL, testdb_conn, rows)

    # Failed batch is rolled back
    assert fetchall("SELECT * FROM src", testdb_conn) == []


def test_executemany_bad_param_style(testdb_conn, src_table):
    bad_sql = "INSERT INTO src (id, name) VALUES (%s, %s)"

    with pytest.raises(CustomerDBInsertError, match=r"Required paramstyle: qmark"):
        executemany(bad_sql, testdb_conn, ROWS)


def test_fetchall_with_parameters(testdb_conn, src_table):
    executemany(INSERT_SQL, testdb_conn, ROWS)

    result = fetchall("SELECT * FROM src WHERE id = ?", testdb_conn, parameters=(2,))

    assert len(result) == 1
    assert result[0].name == 'granite'


def test_fetchall_no_rows_is_empty_list(testdb_conn, src_table):
    result = fetchall("SELECT * FROM src WHERE name = ?", testdb_conn,
                      parameters=('obsidian',))

    assert result == []


def test_fetchall_transform(testdb_conn, src_table):
    executemany(INSERT_SQL, testdb_conn, ROWS)

    result = fetchall("SELECT * FROM src ORDER BY id", testdb_conn,
                      transform=lambda row: row.name.upper())

    assert result == ['BASALT', 'GRANITE', 'GABBRO']


def test_iter_rows(testdb_conn, src_table):
    executemany(INSERT_SQL, testdb_conn, ROWS)

    names = [row.name for row in iter_rows("SELECT * FROM src ORDER BY id",
                                           testdb_conn)]

    assert names == ['basalt', 'granite', 'gabbro']


def test_iter_rows_bad_select(testdb_conn):
    with pytest.raises(CustomerDBExtractError):
        list(iter_rows("SELECT * FROM bad_table", testdb_conn))


# -- Fixtures here --

@pytest.fixture(scope='function')
def src_table(testdb_conn):
    """Create an empty src table."""
    execute("DROP TABLE IF EXISTS src", testdb_conn)
    execute(CREATE_SQL, testdb_conn)
