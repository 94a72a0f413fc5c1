"""
DbParams holds the connection settings for one database.
"""
import os

from customerdb.connect import open_connection
from customerdb.db_helper_factory import helper_for_dbtype
from customerdb.exceptions import CustomerDBDbParamsError, CustomerDBHelperError

ENV_PREFIX = 'CUSTOMERDB_'


def _required_params(dbtype):
    try:
        return helper_for_dbtype(dbtype).required_params
    except CustomerDBHelperError as exc:
        raise CustomerDBDbParamsError(str(exc)) from None


class DbParams(dict):
    """
    Connection settings keyed by name, also readable as attributes, e.g.
    DbParams(dbtype='SQLITE', filename='customers.db').filename.  The keys
    must be exactly those required by the helper for dbtype.
    """
    def __init__(self, dbtype='dbtype not set', **kwargs):
        super().__init__(kwargs, dbtype=dbtype.upper())
        self.validate_params()

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            # getattr should raise AttributeError, not KeyError
            raise AttributeError(f'No such attribute: {item}') from None

    def validate_params(self):
        """
        :raises CustomerDBDbParamsError: for unknown dbtypes, missing or extra keys
        """
        required = _required_params(self['dbtype'])
        given = self.keys() - {'dbtype'}

        missing = required - given
        if missing:
            msg = f"{self['dbtype']} requires {sorted(missing)} to be set"
            raise CustomerDBDbParamsError(msg)

        extra = given - required
        if extra:
            msg = f"Invalid parameter(s) for {self['dbtype']}: {sorted(extra)}"
            raise CustomerDBDbParamsError(msg)

    @classmethod
    def from_environment(cls, prefix=ENV_PREFIX):
        """
        Create DbParams from environment variables named prefix + parameter,
        e.g. CUSTOMERDB_DBTYPE=PG, CUSTOMERDB_HOST, CUSTOMERDB_PORT.  Other
        variables with the prefix, such as the password, are ignored.

        :param prefix: str, prefix to environment variable names
        """
        settings = {key[len(prefix):].lower(): value
                    for key, value in os.environ.items()
                    if key.startswith(prefix)}

        if 'dbtype' not in settings:
            msg = f"{prefix}DBTYPE environment variable is not set"
            raise CustomerDBDbParamsError(msg)

        required = _required_params(settings['dbtype'])
        missing = sorted(f'{prefix}{key.upper()}' for key in required - settings.keys())
        if missing:
            msg = f"Environment variable(s) not set: {missing}"
            raise CustomerDBDbParamsError(msg)

        return cls(settings['dbtype'], **{key: settings[key] for key in required})

    def open_connection(self, password_variable=None, **kwargs):
        """
        Return context manager yielding a connection that is closed on exit.

        :param password_variable: str, name of environment variable with password
        :param kwargs: passed to the driver's connect function
        """
        return open_connection(self, password_variable, **kwargs)

    def __repr__(self):
        settings = ", ".join(f"{key}={value!r}" for key, value in self.items())
        return f"DbParams({settings})"
