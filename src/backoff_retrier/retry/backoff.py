"""
Backoff calculation, retry loops and retry decorators.
"""

import asyncio
import functools
import logging
import time
from typing import Awaitable, Callable, ParamSpec, TypeVar

from .config import RetryConfig
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

ConfigProvider = Callable[[], RetryConfig]
RetryObserver = Callable[[int, int, Exception, float], None]

# 2**64 seconds is beyond any sensible cap.
_MAX_EXPONENT = 64


def calculate_backoff(attempt: int, config: RetryConfig) -> float:
    """
    Calculate backoff delay for a given attempt.

    Args:
        attempt: Zero-based retry counter, before it is incremented
        config: Retry configuration

    Returns:
        Delay in seconds, doubled per attempt and capped at max_delay
    """
    delay = config.base_delay * (2 ** min(attempt, _MAX_EXPONENT))
    return max(0.0, min(delay, config.max_delay))


def _resolve_config(
    config: RetryConfig | None,
    config_provider: ConfigProvider | None,
) -> RetryConfig:
    if config is not None:
        return config

    provider = config_provider or RetryConfig.from_env
    try:
        return provider()
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to load retry configuration: {e!r}") from e


def _report_retry(
    retries: int,
    config: RetryConfig,
    error: Exception,
    delay: float,
    on_retry: RetryObserver | None,
) -> None:
    if on_retry:
        on_retry(retries, config.max_retries, error, delay)
    else:
        logger.warning(
            f"Error: {error!r}. Retrying ({retries}/{config.max_retries}) "
            f"in {delay:.1f}s..."
        )


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    config: RetryConfig | None = None,
    *,
    config_provider: ConfigProvider | None = None,
    on_retry: RetryObserver | None = None,
) -> T:
    """
    Run an async operation, retrying every failure with exponential backoff.

    The policy is resolved once, before the first attempt: ``config`` when
    given, otherwise ``config_provider()`` (default: RetryConfig.from_env).
    A failing resolution raises ConfigurationError and the operation is
    never invoked.

    Any ``Exception`` from the operation is retried until max_retries is
    spent, after which the last error is re-raised unchanged. Cancellation
    is not caught and interrupts both the attempt and the sleep.

    Args:
        operation: Zero-argument callable returning an awaitable
        config: Explicit retry configuration
        config_provider: Callable resolving the configuration when config is None
        on_retry: Optional callback(retries, max_retries, error, delay) called
            before each sleep instead of the default warning log

    Returns:
        The first successful result
    """
    config = _resolve_config(config, config_provider)
    retries = 0

    while True:
        try:
            return await operation()
        except Exception as e:
            if retries >= config.max_retries:
                raise
            delay = calculate_backoff(retries, config)
            retries += 1
            _report_retry(retries, config, e, delay, on_retry)
        await asyncio.sleep(delay)


def retry_with_backoff_sync(
    operation: Callable[[], T],
    config: RetryConfig | None = None,
    *,
    config_provider: ConfigProvider | None = None,
    on_retry: RetryObserver | None = None,
) -> T:
    """Blocking counterpart of retry_with_backoff, sleeping with time.sleep."""
    config = _resolve_config(config, config_provider)
    retries = 0

    while True:
        try:
            return operation()
        except Exception as e:
            if retries >= config.max_retries:
                raise
            delay = calculate_backoff(retries, config)
            retries += 1
            _report_retry(retries, config, e, delay, on_retry)
        time.sleep(delay)


def with_retry(
    config: RetryConfig | None = None,
    on_retry: RetryObserver | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator for synchronous functions with retry logic.

    Args:
        config: Retry configuration (default: read from the environment per call)
        on_retry: Optional callback(retries, max_retries, error, delay)

    Returns:
        Decorated function with retry behavior
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return retry_with_backoff_sync(
                functools.partial(func, *args, **kwargs),
                config,
                on_retry=on_retry,
            )

        return wrapper

    return decorator


def async_with_retry(
    config: RetryConfig | None = None,
    on_retry: RetryObserver | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        config: Retry configuration (default: read from the environment per call)
        on_retry: Optional callback(retries, max_retries, error, delay)

    Returns:
        Decorated async function with retry behavior
    """

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return await retry_with_backoff(
                functools.partial(func, *args, **kwargs),
                config,
                on_retry=on_retry,
            )

        return wrapper

    return decorator
