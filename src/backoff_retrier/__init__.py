"""
backoff_retrier - Retry with exponential backoff.

Runs a fallible operation and retries every failure with a capped,
doubling delay until it succeeds or the retry budget is spent.
"""

from .clients import RetryingHTTPClient
from .exceptions import BackoffRetrierError, ConfigurationError
from .retry import (
    RetryConfig,
    calculate_backoff,
    retry_with_backoff,
    retry_with_backoff_sync,
    with_retry,
    async_with_retry,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Clients
    "RetryingHTTPClient",
    # Exceptions
    "BackoffRetrierError",
    "ConfigurationError",
    # Retry
    "RetryConfig",
    "calculate_backoff",
    "retry_with_backoff",
    "retry_with_backoff_sync",
    "with_retry",
    "async_with_retry",
]
