"""Authentication: credentials, configuration and request signing."""

from marvelfetch.auth.credentials import (
    DEFAULT_API_PREFIX,
    MAX_PAGE_SIZE,
    ClientConfig,
    Credentials,
    load_credentials,
)
from marvelfetch.auth.signer import NonceFactory, sign, signed_params

__all__ = [
    # credentials.py
    "ClientConfig",
    "Credentials",
    "DEFAULT_API_PREFIX",
    "MAX_PAGE_SIZE",
    "load_credentials",
    # signer.py
    "NonceFactory",
    "sign",
    "signed_params",
]
