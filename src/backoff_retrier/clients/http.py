"""
HTTP client with retry.

Wraps httpx so each request runs through retry_with_backoff.
"""

import logging

import httpx

from ..retry import RetryConfig, retry_with_backoff

logger = logging.getLogger(__name__)


class RetryingHTTPClient:
    """
    Async HTTP client that retries failed requests with exponential backoff.

    Every transport error and every non-2xx status is retried; once the
    budget is spent the last httpx exception is raised as-is.
    """

    def __init__(
        self,
        base_url: str,
        retry_config: RetryConfig | None = None,
        timeout: float = 30.0,
        headers: dict | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL prepended to request paths
            retry_config: Retry configuration (default: read from the
                environment on every request)
            timeout: Request timeout in seconds
            headers: Headers sent with every request
        """
        self.base_url = base_url.rstrip("/")
        self.retry_config = retry_config
        self.timeout = timeout
        self.headers = headers or {}

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send a request, retrying on any failure. Returns the successful response."""
        url = self._url(path)
        headers = {**self.headers, **(kwargs.pop("headers", None) or {})}

        async def attempt() -> httpx.Response:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(method, url, headers=headers, **kwargs)
                response.raise_for_status()
                return response

        response = await retry_with_backoff(attempt, self.retry_config)
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    async def get(self, path: str, **kwargs) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def health_check(self, path: str = "/") -> bool:
        """Check if the service answers with 2xx. Single attempt, never raises."""
        try:
            async with httpx.AsyncClient(timeout=5.0) as client:
                response = await client.request("GET", self._url(path), headers=self.headers)
                return response.is_success
        except Exception as e:
            logger.debug(f"Health check for {self.base_url} failed: {e}")
            return False
