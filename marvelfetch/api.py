import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import marvelfetch

from .auth import ClientConfig, load_credentials
from .client import MarvelClient

logger = logging.getLogger(__name__)


def login(
    strategy: str = "all",
    config: Optional[ClientConfig] = None,
    dotenv_path: Union[str, Path, None] = None,
) -> MarvelClient:
    """Load credentials and install the module-level client.

    Parameters:
        strategy:
            How to find the API keys.

            * `"all"`: try each of the following methods, in order, until one
              succeeds.
            * `"environment"`: read `MARVEL_PUBLIC_KEY` and
              `MARVEL_PRIVATE_KEY` from the environment.
            * `"dotenv"`: read the same keys from a `.env` file, located by
              `dotenv_path`, the `MARVEL_DOTENV` variable, or `./.env`.
        config: Client settings; defaults to `ClientConfig.from_environment()`.
        dotenv_path: Explicit `.env` file for the `"dotenv"` strategy.

    Returns:
        The new `MarvelClient`, also used by `fetch_characters()` and
        `fetch_comics()`.

    Raises:
        LoginStrategyUnavailable: If no strategy could supply both keys.

    Examples:
        ```python
        import marvelfetch

        marvelfetch.login(strategy="environment")
        characters = marvelfetch.fetch_characters()
        ```
    """
    credentials = load_credentials(strategy, dotenv_path=dotenv_path)
    client = MarvelClient(credentials, config or ClientConfig.from_environment())

    with marvelfetch._lock:
        previous = marvelfetch._client
        marvelfetch._client = client
    if previous is not None:
        previous.close()

    logger.debug("Installed %r", client)
    return client


def _require_client() -> MarvelClient:
    client = marvelfetch._client
    if client is None:
        raise RuntimeError(
            "No client is configured. Please call marvelfetch.login() first."
        )
    return client


def fetch_characters() -> List[Dict[str, Any]]:
    """Fetch every character using the client installed by `login()`.

    Raises:
        RuntimeError: If `login()` has not been called.
        TransportError: If any page request fails.
        ProtocolError: If any page envelope is malformed.
    """
    return _require_client().fetch_characters()


def fetch_comics() -> List[Dict[str, Any]]:
    """Fetch every comic using the client installed by `login()`.

    Raises:
        RuntimeError: If `login()` has not been called.
        TransportError: If any page request fails.
        ProtocolError: If any page envelope is malformed.
    """
    return _require_client().fetch_comics()
