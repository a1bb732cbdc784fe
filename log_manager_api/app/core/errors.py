"""
Error hierarchy for the Log Manager API.

Every guard failure raises a subclass of ``LogManagerError``.  Each
error carries its ``ErrorKind`` and the exact user-facing message.
Errors are raised at the point of violation and propagate unchanged
to the API boundary, where ``api.error_handlers`` maps the kind to an
HTTP status.  The transaction around the request is rolled back on
the way out.
"""

from enum import Enum
from typing import Iterable, Optional, Union

from .messages import ErrorMessages


class ErrorKind(str, Enum):
    PARAMETER_MISSING = "parameter_missing"
    PARAMETER_FORMAT = "parameter_format"
    ILLEGAL_COLOR = "illegal_color"
    ILLEGAL_SEVERITY = "illegal_severity"
    USER_ALREADY_EXISTS = "user_already_exists"
    NO_USERS_YET = "no_users_yet"
    USER_NOT_FOUND = "user_not_found"
    USER_CANNOT_DELETE_SELF = "user_cannot_delete_self"
    USER_REFERENCED = "user_referenced"
    USERS_REFERENCED = "users_referenced"
    LOG_NOT_FOUND = "log_not_found"


class LogManagerError(Exception):
    """Base exception for all business-rule and input failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParameterMissing(LogManagerError):
    kind = ErrorKind.PARAMETER_MISSING

    def __init__(self, message: str = ErrorMessages.PARAMETER_IS_MISSING):
        super().__init__(message)


class ParameterFormat(LogManagerError):
    """A path, query or body value could not be converted."""

    kind = ErrorKind.PARAMETER_FORMAT

    def __init__(self, detail: str = "", message: Optional[str] = None):
        super().__init__(message or ErrorMessages.PARAMETER_WRONG_FORMAT + detail)


class IllegalColor(LogManagerError):
    kind = ErrorKind.ILLEGAL_COLOR

    def __init__(self, choices: Iterable[str]):
        super().__init__(
            ErrorMessages.COLOR_ILLEGAL_PLUS_CHOICE.format(choices=", ".join(choices))
        )


class IllegalSeverity(LogManagerError):
    kind = ErrorKind.ILLEGAL_SEVERITY

    def __init__(self, choices: Iterable[str]):
        super().__init__(
            ErrorMessages.SEVERITY_ILLEGAL_PLUS_CHOICE.format(choices=", ".join(choices))
        )


class UserAlreadyExists(LogManagerError):
    kind = ErrorKind.USER_ALREADY_EXISTS

    def __init__(self, name: str):
        super().__init__(ErrorMessages.USER_EXISTS.format(name))


class NoUsersYet(LogManagerError):
    kind = ErrorKind.NO_USERS_YET

    def __init__(self, candidate_name: str, actor_name: str):
        super().__init__(ErrorMessages.NO_USERS_YET + f"{candidate_name} unequal {actor_name}")


class UserNotFound(LogManagerError):
    """Raised with either the numeric id or the name that was looked up."""

    kind = ErrorKind.USER_NOT_FOUND

    def __init__(self, key: Union[int, str, None]):
        if isinstance(key, int):
            message = ErrorMessages.USER_NOT_FOUND_ID.format(key)
        else:
            message = ErrorMessages.USER_NOT_FOUND_NAME.format(key)
        super().__init__(message)


class UserCannotDeleteSelf(LogManagerError):
    kind = ErrorKind.USER_CANNOT_DELETE_SELF

    def __init__(self):
        super().__init__(ErrorMessages.USER_DELETE_HIMSELF)


class UserReferenced(LogManagerError):
    kind = ErrorKind.USER_REFERENCED

    def __init__(self, name: str):
        super().__init__(ErrorMessages.USER_REFERENCED.format(name))


class UsersReferenced(LogManagerError):
    kind = ErrorKind.USERS_REFERENCED

    def __init__(self):
        super().__init__(ErrorMessages.USERS_REFERENCED)


class LogNotFound(LogManagerError):
    kind = ErrorKind.LOG_NOT_FOUND

    def __init__(self, log_id: int):
        super().__init__(ErrorMessages.LOG_NOT_FOUND.format(log_id))
