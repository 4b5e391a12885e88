"""
Base exception classes for backoff_retrier.

These cover failures of the retrier itself. Errors raised by the wrapped
operation are never wrapped in these; they reach the caller verbatim.
"""


class BackoffRetrierError(Exception):
    """Base exception for all errors raised by the retrier itself."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(BackoffRetrierError):
    """Raised when the retry policy cannot be resolved. Never retried."""

    def __init__(
        self,
        message: str = "Invalid retry configuration",
        *,
        variable: str | None = None,
    ):
        super().__init__(message)
        self.variable = variable

    def __str__(self) -> str:
        if self.variable:
            return f"{self.message} ({self.variable})"
        return self.message
