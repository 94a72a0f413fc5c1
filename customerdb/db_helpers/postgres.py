"""
Database helper for PostgreSQL
"""
from customerdb.db_helpers.db_helper import DbHelper, password_from_environment


class PostgresDbHelper(DbHelper):
    """PostgreSQL through psycopg2."""
    driver_name = 'psycopg2'
    install_hint = "Install with: pip install customerdb[postgres]"
    required_params = frozenset({'host', 'port', 'dbname', 'user'})
    placeholder = '%s'
    serial_primary_key = 'SERIAL PRIMARY KEY'

    def dsn(self, db_params, password_variable):
        password = password_from_environment(password_variable)
        return (f'host={db_params.host} port={db_params.port} '
                f'dbname={db_params.dbname} user={db_params.user} '
                f'password={password}')

    def describe(self, db_params):
        return (f"PostgreSQL database {db_params.dbname} on "
                f"{db_params.host}:{db_params.port} as {db_params.user}")

    def executemany(self, cursor, query, rows):
        # execute_batch sends many statements per round trip, where
        # cursor.executemany() sends one per row
        from psycopg2.extras import execute_batch

        execute_batch(cursor, query, rows, page_size=len(rows))
