"""
backoff_retrier - Clients.

Network clients built on the retry loop.
"""

from .http import RetryingHTTPClient

__all__ = [
    "RetryingHTTPClient",
]
