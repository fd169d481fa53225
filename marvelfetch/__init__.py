"""marvelfetch: complete result sets from the Marvel Comics API.

The Marvel gateway serves at most 100 records per request and requires every
request to be signed with a fresh timestamp. marvelfetch hides both: it signs
each page request and drains a collection until the reported total is reached.

Quick Start:
    ```python
    import marvelfetch

    # Keys from MARVEL_PUBLIC_KEY / MARVEL_PRIVATE_KEY or a .env file
    marvelfetch.login()

    characters = marvelfetch.fetch_characters()
    comics = marvelfetch.fetch_comics()
    ```

Main Functions:
    - `login()`: Load API keys and configure the module-level client
    - `fetch_characters()`: Every record of `/v1/public/characters`
    - `fetch_comics()`: Every record of `/v1/public/comics`
"""

import logging
import threading
from importlib.metadata import version
from typing import Optional

from .api import fetch_characters, fetch_comics, login
from .auth import ClientConfig, Credentials, NonceFactory, load_credentials, sign
from .client import CHARACTERS_ENDPOINT, COMICS_ENDPOINT, MarvelClient
from .exceptions import (
    LoginStrategyUnavailable,
    MarvelFetchError,
    ProtocolError,
    TransportError,
)

logger = logging.getLogger(__name__)

__all__ = [
    # api.py
    "login",
    "fetch_characters",
    "fetch_comics",
    # client.py
    "MarvelClient",
    "CHARACTERS_ENDPOINT",
    "COMICS_ENDPOINT",
    # auth
    "ClientConfig",
    "Credentials",
    "NonceFactory",
    "load_credentials",
    "sign",
    # exceptions.py
    "MarvelFetchError",
    "TransportError",
    "ProtocolError",
    "LoginStrategyUnavailable",
]

__version__ = version("marvelfetch")

_client: Optional[MarvelClient] = None
_lock = threading.Lock()
