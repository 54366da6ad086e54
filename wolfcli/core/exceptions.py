"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class TransportError(ApplicationError):
    """Raised when the HTTP request to the API fails."""

    def __init__(self, message: str = "Request to the API failed") -> None:
        super().__init__(message, code="SYS_EXTERNAL_SERVICE_ERROR")


class DecodeError(ApplicationError):
    """Raised when the response body is not valid JSON."""

    def __init__(self, message: str = "Response is not valid JSON") -> None:
        super().__init__(message, code="SYS_DECODE_ERROR")


class ConfigurationError(ApplicationError):
    """Raised when a configuration file cannot be parsed or validated."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="SYS_CONFIGURATION_ERROR")


class ArgumentError(ApplicationError):
    """Raised when query parameters fail validation."""

    def __init__(self, message: str = "Invalid arguments", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")
