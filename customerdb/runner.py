"""
Seed the customers table from a fixed list of names and query it back.
"""
import argparse
import logging
import os
import sys
from textwrap import dedent

from customerdb.connect import open_connection
from customerdb.customers import (
    FULL_NAMES,
    find_customers_by_first_name,
    insert_customers,
    reset_customers_table,
    split_names,
)
from customerdb.db_params import ENV_PREFIX, DbParams
from customerdb.exceptions import CustomerDBError

DEFAULT_FIRST_NAME = 'Josh'
DEFAULT_PASSWORD_VARIABLE = f'{ENV_PREFIX}PASSWORD'


class SeedAndQueryRunner:
    """
    Reset the customers table, insert one row per full name and log the
    customers matching first_name.

    :param conn: open dbapi connection
    :param logger: logger for progress and result messages
    :param full_names: names to split into first and last names and insert
    :param first_name: first name to query for
    """
    def __init__(self, conn, logger=None, full_names=FULL_NAMES,
                 first_name=DEFAULT_FIRST_NAME):
        self.conn = conn
        self.logger = logger or logging.getLogger('customerdb.runner')
        self.full_names = full_names
        self.first_name = first_name

    def run(self):
        """
        Run each step in order.  Any database error is raised to the caller;
        the table is left as the failing step left it.

        :return: list of Customer matching first_name
        """
        self.logger.info("Creating tables")
        reset_customers_table(self.conn)

        name_pairs = split_names(self.full_names)
        for first_name, last_name in name_pairs:
            self.logger.info("Inserting customer record for %s %s",
                             first_name, last_name)
        insert_customers(self.conn, name_pairs)

        self.logger.info("Querying for customer records where first_name = '%s':",
                         self.first_name)
        customers = find_customers_by_first_name(self.conn, self.first_name)
        for customer in customers:
            self.logger.info(str(customer))

        return customers


def get_db_params(prefix=ENV_PREFIX):
    """
    Return DbParams from environment variables, or an in-memory SQLite
    database if no dbtype variable is set.
    """
    if f'{prefix}DBTYPE' not in os.environ:
        return DbParams(dbtype='SQLITE', filename=':memory:')
    return DbParams.from_environment(prefix=prefix)


HELP_DESCRIPTION = dedent(f"""
    Create a customers table, insert customers for a fixed list of names and
    log those with the given first name.

    Connection parameters are read from environment variables prefixed with
    {ENV_PREFIX}, e.g. {ENV_PREFIX}DBTYPE=PG, {ENV_PREFIX}HOST, {ENV_PREFIX}PORT,
    {ENV_PREFIX}DBNAME and {ENV_PREFIX}USER.  If {ENV_PREFIX}DBTYPE is not
    set, an in-memory SQLite database is used.
    """).strip()


def main(argv=None):
    """Parse args, connect and run SeedAndQueryRunner.  Return exit status."""
    from customerdb import log_to_console

    parser = argparse.ArgumentParser(description=HELP_DESCRIPTION,
                                     formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument(
        "--first-name", default=DEFAULT_FIRST_NAME,
        help=f"first name to query for (default: {DEFAULT_FIRST_NAME})")
    parser.add_argument(
        "--password-variable", default=DEFAULT_PASSWORD_VARIABLE,
        help=("name of environment variable holding the database password "
              f"(default: {DEFAULT_PASSWORD_VARIABLE})"))
    parser.add_argument(
        "-v", "--verbose", help="print debug-level logging output",
        action="store_true")
    args = parser.parse_args(argv)

    log_to_console(level=logging.DEBUG if args.verbose else logging.INFO)
    logger = logging.getLogger('customerdb.runner')

    try:
        db_params = get_db_params()
        with open_connection(db_params, args.password_variable) as conn:
            SeedAndQueryRunner(conn, logger=logger,
                               first_name=args.first_name).run()
    except CustomerDBError as exc:
        logger.error(exc)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
