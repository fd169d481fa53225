"""Credential and client configuration for marvelfetch.

Keys are read once and kept in an immutable value object whose ``repr``
never exposes the private key. Two loading strategies are supported:

* ``"environment"``: ``MARVEL_PUBLIC_KEY`` and ``MARVEL_PRIVATE_KEY``.
* ``"dotenv"``: the same keys read from a ``.env`` file (``MARVEL_DOTENV``
  or ``./.env``) without touching ``os.environ``.

``"all"`` tries them in that order.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values

from marvelfetch._core._validators import require_non_empty, validate_page_size
from marvelfetch.exceptions import LoginStrategyUnavailable

logger = logging.getLogger(__name__)

__all__ = [
    "ClientConfig",
    "Credentials",
    "DEFAULT_API_PREFIX",
    "MAX_PAGE_SIZE",
    "STRATEGIES",
    "load_credentials",
]


# =============================================================================
# Constants
# =============================================================================

DEFAULT_API_PREFIX = "https://gateway.marvel.com"

# The gateway refuses ``limit`` values above this.
MAX_PAGE_SIZE = 100

DEFAULT_TIMEOUT = 30

PUBLIC_KEY_VAR = "MARVEL_PUBLIC_KEY"
PRIVATE_KEY_VAR = "MARVEL_PRIVATE_KEY"
API_PREFIX_VAR = "MARVEL_API_PREFIX"
DOTENV_PATH_VAR = "MARVEL_DOTENV"

STRATEGIES = ("environment", "dotenv")


# =============================================================================
# Credentials
# =============================================================================


@dataclass(frozen=True)
class Credentials:
    """Immutable public/private key pair.

    Attributes:
        public_key: Public API key, sent with every request.
        private_key: Private API key, only ever used as hash input.
    """

    public_key: str
    private_key: str = field(repr=False)

    def __post_init__(self) -> None:
        require_non_empty(
            {"public_key": self.public_key, "private_key": self.private_key},
            ["public_key", "private_key"],
        )

    def __repr__(self) -> str:
        return f"Credentials(public_key='{self.public_key[:4]}...', private_key='***')"

    __str__ = __repr__

    @classmethod
    def from_mapping(cls, values: Dict[str, Optional[str]], source: str) -> "Credentials":
        """Build credentials from a mapping holding the two key variables.

        Raises:
            LoginStrategyUnavailable: if either key is absent or empty.
        """
        public_key = values.get(PUBLIC_KEY_VAR)
        private_key = values.get(PRIVATE_KEY_VAR)
        if not public_key or not private_key:
            raise LoginStrategyUnavailable(
                f"{PUBLIC_KEY_VAR} and {PRIVATE_KEY_VAR} are not both set in {source}"
            )
        return cls(public_key=public_key, private_key=private_key)


def _from_environment() -> Credentials:
    return Credentials.from_mapping(dict(os.environ), "the environment")


def _from_dotenv(path: Union[str, Path, None] = None) -> Credentials:
    dotenv_path = Path(path or os.environ.get(DOTENV_PATH_VAR, ".env"))
    if not dotenv_path.is_file():
        raise LoginStrategyUnavailable(f"No dotenv file at {dotenv_path}")
    return Credentials.from_mapping(dotenv_values(dotenv_path), str(dotenv_path))


def load_credentials(
    strategy: str = "all", dotenv_path: Union[str, Path, None] = None
) -> Credentials:
    """Load credentials using the given strategy.

    Parameters:
        strategy: ``"environment"``, ``"dotenv"`` or ``"all"`` (each strategy
            in turn until one succeeds).
        dotenv_path: Explicit ``.env`` path for the ``"dotenv"`` strategy.

    Returns:
        The loaded ``Credentials``.

    Raises:
        ValueError: for an unknown strategy name.
        LoginStrategyUnavailable: when no requested strategy yields keys.
    """
    if strategy == "all":
        strategies = list(STRATEGIES)
    elif strategy in STRATEGIES:
        strategies = [strategy]
    else:
        raise ValueError(
            f"Unknown strategy {strategy!r}; expected 'all' or one of {STRATEGIES}"
        )

    for name in strategies:
        try:
            if name == "environment":
                credentials = _from_environment()
            else:
                credentials = _from_dotenv(dotenv_path)
        except LoginStrategyUnavailable as err:
            logger.debug(err)
            if len(strategies) == 1:
                raise
            continue
        logger.info("Loaded API credentials using the %r strategy", name)
        return credentials

    raise LoginStrategyUnavailable(
        f"No credentials found using strategies: {', '.join(strategies)}"
    )


# =============================================================================
# Client configuration
# =============================================================================


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings for a ``MarvelClient``.

    Attributes:
        api_prefix: Scheme and host of the API gateway.
        page_size: ``limit`` sent with each page request, at most ``MAX_PAGE_SIZE``.
        timeout: Per-request deadline in seconds.
        max_retries: Extra attempts for a transient failure; 0 means fail fast.
        backoff_factor: Base of the exponential wait between attempts.
    """

    api_prefix: str = DEFAULT_API_PREFIX
    page_size: int = MAX_PAGE_SIZE
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = 0
    backoff_factor: float = 0.5

    def __post_init__(self) -> None:
        validate_page_size(self.page_size, MAX_PAGE_SIZE)
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        object.__setattr__(self, "api_prefix", self.api_prefix.rstrip("/"))

    @classmethod
    def from_environment(cls, **overrides) -> "ClientConfig":
        """Build a config, taking ``api_prefix`` from ``MARVEL_API_PREFIX`` if set."""
        if API_PREFIX_VAR in os.environ and "api_prefix" not in overrides:
            overrides["api_prefix"] = os.environ[API_PREFIX_VAR]
        return cls(**overrides)
