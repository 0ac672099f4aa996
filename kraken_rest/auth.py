"""
Auth — Credentials, request signing and nonce issuance for private endpoints.

API-Sign = base64(HMAC-SHA512(base64decode(secret), path + SHA256(nonce + body)))
"""

from __future__ import annotations
import base64
import binascii
import hashlib
import hmac
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from . import config
from .config import logger
from .errors import CredentialsError, MissingCredentialsError


def _log(msg: str):
    logger.log("AUTH", msg)


# ── Credentials ──────────────────────────────────────────────────────────────

@dataclass(frozen=True, eq=False)
class Credentials:
    """Public API key plus base64 private key. Compared by identity only."""

    api_key: str
    private_key: str = field(repr=False)

    def __repr__(self) -> str:
        return f"Credentials(api_key={config.mask(self.api_key)!r})"

    @classmethod
    def from_env(cls) -> Credentials:
        """Build credentials from KRAKEN_API_KEY / KRAKEN_API_SECRET."""
        if not config.has_credentials():
            raise MissingCredentialsError("KRAKEN_API_KEY and KRAKEN_API_SECRET must both be set")
        _log(f"Credentials loaded from environment (key={config.mask(config.API_KEY)})")
        return cls(config.API_KEY, config.API_SECRET)


# ── Signing ──────────────────────────────────────────────────────────────────


def decode_secret(secret: Union[str, bytes]) -> bytes:
    try:
        return base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError):
        # Do not chain: the partial decode must not travel with the traceback.
        raise CredentialsError("private key is not valid base64") from None


def sign(path: str, nonce: int, encoded_params: Union[str, bytes], secret: Union[str, bytes]) -> str:
    """Return the base64 API-Sign value for one private request."""
    key = decode_secret(secret)
    if isinstance(encoded_params, str):
        encoded_params = encoded_params.encode("utf-8")

    message = str(nonce).encode("ascii") + encoded_params
    digest = hashlib.sha256(message).digest()
    mac = hmac.new(key, path.encode("utf-8") + digest, hashlib.sha512)
    return base64.b64encode(mac.digest()).decode("ascii")


# ── Nonce ────────────────────────────────────────────────────────────────────


def _millis() -> int:
    return time.time_ns() // 1_000_000


class NonceGenerator:
    """
    Strictly increasing nonces for one client.

    Millisecond clock, bumped by one whenever the clock has not moved past
    the last issued value. The lock covers only the read-modify-write.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _millis
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            nonce = max(int(self._clock()), self._last + 1)
            self._last = nonce
        return nonce

    @property
    def last(self) -> int:
        return self._last
