"""
Retry configuration and environment loading.
"""

import math
import os
from dataclasses import dataclass
from typing import Mapping

from ..exceptions import ConfigurationError

MAX_RETRIES_VAR = "MAX_RETRIES"
BASE_DELAY_VAR = "RETRY_BASE_DELAY"
MAX_DELAY_VAR = "RETRY_MAX_DELAY"


@dataclass
class RetryConfig:
    """
    Configuration for retry behavior.

    Attributes:
        max_retries: Retries allowed after the first failure (default: 3)
        base_delay: Delay before the first retry in seconds (default: 1.0)
        max_delay: Maximum delay cap in seconds (default: 10.0)
    """

    max_retries: int = 3
    base_delay: float = 1.0
    max_delay: float = 10.0

    def __post_init__(self) -> None:
        for name in ("max_retries", "base_delay", "max_delay"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ConfigurationError(
                    f"{name} must be a finite number >= 0, got {value}",
                    variable=name,
                )

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_retries=0)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = "",
    ) -> "RetryConfig":
        """
        Build a config from environment variables.

        Reads MAX_RETRIES, RETRY_BASE_DELAY and RETRY_MAX_DELAY, each
        optionally namespaced by ``prefix`` (``prefix="WORKER_"`` reads
        WORKER_MAX_RETRIES). Unset variables fall back to the defaults.

        Args:
            environ: Mapping to read from (default: os.environ)
            prefix: Prefix prepended to every variable name

        Returns:
            A validated RetryConfig

        Raises:
            ConfigurationError: If a variable is malformed or out of range
        """
        if environ is None:
            environ = os.environ

        defaults = cls()
        return cls(
            max_retries=_read(environ, prefix + MAX_RETRIES_VAR, int, defaults.max_retries),
            base_delay=_read(environ, prefix + BASE_DELAY_VAR, float, defaults.base_delay),
            max_delay=_read(environ, prefix + MAX_DELAY_VAR, float, defaults.max_delay),
        )


def _read(environ: Mapping[str, str], name: str, convert, default):
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = convert(raw.strip())
    except ValueError:
        raise ConfigurationError(
            f"Cannot parse {raw!r} as {convert.__name__}", variable=name
        ) from None
    if not math.isfinite(value) or value < 0:
        raise ConfigurationError(
            f"Value must be a finite number >= 0, got {value}", variable=name
        )
    return value
