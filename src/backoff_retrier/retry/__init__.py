"""
backoff_retrier - Retry Logic.

Retry loops with capped exponential backoff and environment-driven policy.
"""

from .config import RetryConfig
from .backoff import (
    calculate_backoff,
    retry_with_backoff,
    retry_with_backoff_sync,
    with_retry,
    async_with_retry,
)

__all__ = [
    "RetryConfig",
    "calculate_backoff",
    "retry_with_backoff",
    "retry_with_backoff_sync",
    "with_retry",
    "async_with_retry",
]
