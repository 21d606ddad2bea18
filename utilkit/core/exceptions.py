"""
Custom exception hierarchy for utilkit.

Provides specific exception types for the failure modes the library adds
on top of Python's own errors: configuration problems, mutation of
read-only containers, and temp directory exhaustion.
"""


class UtilKitError(Exception):
    """Base exception for all utilkit errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(UtilKitError):
    """Raised when configuration is invalid."""
    pass


class UnsupportedOperationError(UtilKitError, TypeError):
    """Raised when a read-only, fixed-size or sorted container is mutated."""

    def __init__(self, message: str, operation: str = None, details: dict = None):
        """
        Initialize unsupported operation error.

        Args:
            message: Error description.
            operation: Name of the rejected operation (e.g. "append").
            details: Additional context.
        """
        super().__init__(message, details)
        self.operation = operation


class TempDirectoryError(UtilKitError, OSError):
    """Raised when no unique temp directory could be created."""

    def __init__(
        self,
        message: str,
        base_directory: str = None,
        attempts: int = None,
        details: dict = None
    ):
        """
        Initialize temp directory error.

        Args:
            message: Error description.
            base_directory: Directory under which creation was attempted.
            attempts: Number of names tried.
            details: Additional context.
        """
        super().__init__(message, details)
        self.base_directory = base_directory
        self.attempts = attempts


if __name__ == "__main__":
    try:
        raise UnsupportedOperationError("Immutable list", operation="append")
    except UtilKitError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message} ({e.operation})")

    try:
        raise TempDirectoryError("No free name", base_directory="/tmp", attempts=10000)
    except OSError as e:
        print(f"Temp dir failed under: {e.base_directory}")
