"""
Error Definitions

Defines the exception classes raised by the repository layer, so callers can
tell bad input, bad wiring and an unreachable store apart.
"""

from typing import Any, Optional


class AppError(Exception):
    """
    Repository Base Exception

    Base class for all custom exceptions, containing error message, type, and code.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "app_error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_type: Error type
            code: Error code
            details: Extra error details
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary format (for logging or API responses)

        Returns:
            dict: Error information dictionary
        """
        result = {
            "error": {
                "message": self.message,
                "type": self.error_type,
                "code": self.code,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result


class InvalidArgumentError(AppError, ValueError):
    """
    Invalid Argument Error

    Raised before any store call when a key is empty/blank or an entity is missing.
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        code: str = "invalid_argument",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="invalid_argument_error",
            code=code,
            details=details,
        )


class ConfigurationError(AppError):
    """
    Configuration Error

    Raised when a repository or client is built without a required collaborator
    or with unusable settings.
    """

    def __init__(
        self,
        message: str = "Invalid configuration",
        code: str = "invalid_configuration",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="configuration_error",
            code=code,
            details=details,
        )


class StoreUnavailableError(AppError):
    """
    Store Unavailable Error

    Raised when communicating with the backing store fails (timeout, connection
    failure, protocol error). The original exception is kept as ``__cause__``.
    """

    def __init__(
        self,
        message: str = "Backing store unavailable",
        code: str = "store_unavailable",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="store_unavailable_error",
            code=code,
            details=details,
        )
