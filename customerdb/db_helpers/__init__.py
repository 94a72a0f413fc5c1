"""
DbHelper classes hold what differs between database engines: the driver,
connection settings, placeholder and auto-increment column syntax, and how a
batch of rows is sent.  They are looked up through customerdb.db_helper_factory.
"""
# flake8: noqa
from customerdb.db_helpers.db_helper import DbHelper
from customerdb.db_helpers.postgres import PostgresDbHelper
from customerdb.db_helpers.sqlite import SQLiteDbHelper
