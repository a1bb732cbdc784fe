"""
User-facing message catalogue.

Every text returned to API clients or written into the audit log is
defined here so wording stays identical between the service layer,
the error handlers and the tests.  Templates use ``str.format``
placeholders.
"""


class ErrorMessages:
    PARAMETER_IS_MISSING = (
        "Some parameters are missing or empty! "
        "Please provide name, birthdate, weight, height and favouriteColor."
    )
    LOG_MESSAGE_MISSING = "The log message must not be empty!"
    LOG_FILTER_MISSING = "Give either the IDs of the entries to delete or at least one filter!"
    COLOR_ILLEGAL_PLUS_CHOICE = "The color is not allowed! Please choose one of: {choices}"
    SEVERITY_ILLEGAL_PLUS_CHOICE = "The severity is not allowed! Please choose one of: {choices}"
    NO_USERS_YET = "There are no users in the database yet, so the first user has to create himself! "
    USER_NOT_FOUND_ID = "User with the ID {} was not found!"
    USER_NOT_FOUND_NAME = "User {} was not found!"
    USER_EXISTS = "User {} already exists!"
    USER_DELETE_HIMSELF = "A user cannot delete himself!"
    USER_REFERENCED = "User {} cannot be deleted because he is referenced in the logs!"
    USERS_REFERENCED = "Users cannot be deleted because at least one of them is referenced in the logs!"
    LOG_NOT_FOUND = "No log entry with id {} exists!"
    PARAMETER_WRONG_FORMAT = "Required path variable was not found or request param has wrong format! "
    PARAMETER_CONVERSION = "Failed to convert value '{value}' of parameter '{name}': {reason}"
    ACTOR_NOT_PRESENT = "Required String parameter 'actor' is not present"
    INTERNAL_ERROR = "An unexpected error occurred"


class InfoMessages:
    USER_CREATED = "User {} was created. "
    BMI_MESSAGE = "User has a BMI of {} and therewith he has {}."
    UNDERWEIGHT = "underweight"
    NORMAL_WEIGHT = "normal weight"
    OVERWEIGHT = "overweight"
    OBESITY = "obesity"
    ENTRIES_DELETED = "Entries with the ID(s) {} were deleted from database."
    NO_ENTRIES_DELETED = "No entries matched, nothing was deleted from database."
    ALL_USERS_DELETED = "All users were deleted from database."
