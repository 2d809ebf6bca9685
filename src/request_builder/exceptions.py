"""
Custom exceptions for the request_builder module.

Transport failures raised by ``requests`` are not wrapped; only the
conditions this package checks itself get their own exception class.
"""

from typing import Optional, Any


class RequestBuilderError(Exception):
    """Base exception class for all request_builder related errors."""

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional details about the error
        """
        self.message = message
        self.details = details
        super().__init__(self.message)


class InvalidArgumentError(RequestBuilderError):
    """Raised when invalid arguments are passed to methods."""

    def __init__(self, argument_name: str, argument_value: Any, expected: str) -> None:
        """Initialize the exception.

        Args:
            argument_name: Name of the invalid argument
            argument_value: The invalid value that was provided
            expected: Description of what was expected
        """
        self.argument_name = argument_name
        self.argument_value = argument_value
        self.expected = expected

        message = (
            f"Invalid argument '{argument_name}': got {type(argument_value).__name__} "
            f"({argument_value!r}), expected {expected}"
        )

        super().__init__(
            message,
            {
                "argument_name": argument_name,
                "argument_value": argument_value,
                "expected": expected,
            },
        )


class BodyReadError(RequestBuilderError):
    """Raised when a response arrived but its body could not be read."""

    def __init__(self, url: str, read_error: Exception) -> None:
        """Initialize the exception.

        Args:
            url: The URL whose response body failed to read
            read_error: The original exception raised while reading
        """
        self.url = url
        self.read_error = read_error

        message = f"Failed to read response body from {url}: {str(read_error)}"

        super().__init__(message, {"url": url, "read_error": read_error})
