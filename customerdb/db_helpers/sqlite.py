"""
Database helper for SQLite
"""
from customerdb.db_helpers.db_helper import DbHelper


class SQLiteDbHelper(DbHelper):
    """SQLite through the standard library sqlite3 module."""
    driver_name = 'sqlite3'
    install_hint = "It is part of the standard library; check the Python build."
    required_params = frozenset({'filename'})
    placeholder = '?'
    # AUTOINCREMENT stops SQLite reusing the ids of deleted rows
    serial_primary_key = 'INTEGER PRIMARY KEY AUTOINCREMENT'

    def dsn(self, db_params, password_variable=None):
        # SQLite has no password; password_variable is accepted and ignored
        return db_params.filename

    def describe(self, db_params):
        return f"SQLite database {db_params.filename}"
