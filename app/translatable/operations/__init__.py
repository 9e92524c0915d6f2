"""Operation result types and status enums.

This module contains the standardized result type returned by the dynamic
translation entry points, its status enum, and the classifier that turns
translation exceptions into results.
"""

from translatable.operations.classifiers import classify_translation_error
from translatable.operations.result import OperationResult
from translatable.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_translation_error",
]
