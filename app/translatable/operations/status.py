"""Operation status enumeration.

Status codes for translation results, used to classify the outcome of a
dynamic translation so callers can decide how to report a failure.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Translation produced a string
        PERMANENT_ERROR: Invalid input (language code, placeholder, values)
        NOT_FOUND: Path or language has no translation in the store
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
