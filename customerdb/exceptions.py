"""
customerdb Exception classes
"""


class CustomerDBError(Exception):
    """Base class for exceptions in this module"""


class CustomerDBConnectionError(CustomerDBError):
    """Exception raised for bad database connections"""


class CustomerDBQueryError(CustomerDBError):
    """Exception raised for SQL query errors and similar"""


class CustomerDBDbParamsError(CustomerDBError):
    """Exception raised for bad database parameters"""


class CustomerDBExtractError(CustomerDBError):
    """Exception raised when extracting data."""


class CustomerDBInsertError(CustomerDBError):
    """Exception raised when inserting data."""


class CustomerDBHelperError(CustomerDBError):
    """Exception raised when helper selection fails."""


class CustomerDBNameError(CustomerDBError):
    """Exception raised when a full name cannot be split into first and last."""


def sql_error_message(query, helper, exc):
    """Return the message used for SQL errors raised by the driver."""
    return (f"SQL query raised an error.\n\n{query}\n\n"
            f"Required paramstyle: {helper.paramstyle}\n\n{exc}\n")
