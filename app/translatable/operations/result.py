"""Operation result dataclass.

Uniform result type returned by the dynamic translation entry points,
carrying either the translated string or the error that prevented it.
"""

from typing import Optional, Any
from dataclasses import dataclass

from translatable.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- payload (the translated string on success)
        error_code: Optional[str] -- optional machine error code
        error: Optional[Exception] -- the exception behind a failed result
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == OperationStatus.SUCCESS

    def unwrap(self) -> Any:
        """Return the payload of a successful result.

        Returns:
            The data of the result

        Raises:
            The stored error when the result is not successful
        """
        if self.is_success:
            return self.data
        if self.error is not None:
            raise self.error
        raise RuntimeError(self.message)

    def unwrap_or(self, default: Any) -> Any:
        """Return the payload on success, default otherwise."""
        return self.data if self.is_success else default

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data.

        Args:
            data: Optional payload to include with the result
            message: Human-friendly success message

        Returns:
            OperationResult with SUCCESS status
        """
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        error: Optional[Exception] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            error: Optional exception that caused the failure

        Returns:
            OperationResult with specified error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            error=error,
        )

    @classmethod
    def permanent_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        error: Optional[Exception] = None,
    ) -> "OperationResult":
        """Create a permanent (non-retryable) error result.

        Use for invalid input: unknown language codes, malformed
        placeholders, missing placeholder values.
        """
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code, error)

    @classmethod
    def not_found(
        cls,
        message: str,
        error_code: Optional[str] = None,
        error: Optional[Exception] = None,
    ) -> "OperationResult":
        """Create a NOT_FOUND error result for missing paths or languages."""
        return cls.error(OperationStatus.NOT_FOUND, message, error_code, error)
