"""
backoff_retrier - Exception Hierarchy.
"""

from .base import BackoffRetrierError, ConfigurationError

__all__ = [
    "BackoffRetrierError",
    "ConfigurationError",
]
