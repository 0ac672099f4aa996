"""
Client — Dispatches endpoint descriptors to the Kraken REST API.

Handles:
- Public endpoints (GET, no credentials)
- Private endpoints (POST, nonce + API-Key/API-Sign headers)
- Envelope decoding into the caller's result type

Service errors come back inside the Response; only transport, credential
and decode failures raise.
"""

from __future__ import annotations
import asyncio
from typing import Any, Optional, Union

from . import config
from .api import Api, ApiBuilder, encode_params
from .auth import Credentials, NonceGenerator, sign
from .config import logger
from .errors import InvalidUserAgentError, MissingCredentialsError
from .response import Response, decode_response
from .transport import HttpRequest, RequestsTransport, Transport


# ── Logging ──────────────────────────────────────────────────────────────────

def _log(msg: str):
    logger.log("CLIENT", msg)


def _warn(msg: str):
    logger.log("CLIENT", f"⚠ {msg}")


FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


def _check_user_agent(user_agent: str) -> str:
    if not user_agent or any((ord(c) < 0x20 and c != "\t") or ord(c) == 0x7F for c in user_agent):
        raise InvalidUserAgentError(f"invalid user agent: {user_agent!r}")
    try:
        user_agent.encode("latin-1")
    except UnicodeEncodeError as e:
        raise InvalidUserAgentError(f"invalid user agent: {user_agent!r}", cause=e) from e
    return user_agent


# ── The Client ───────────────────────────────────────────────────────────────

class Client:
    """
    HTTP client for public and private Kraken APIs.

    A client built without credentials can only query public endpoints.
    One client may be shared by many threads or tasks; nonces stay strictly
    increasing across all of them.
    """

    def __init__(
        self,
        user_agent: str = config.USER_AGENT,
        credentials: Optional[Credentials] = None,
        transport: Optional[Transport] = None,
        nonce: Optional[NonceGenerator] = None,
        base_url: Optional[str] = None,
    ):
        self.user_agent = _check_user_agent(user_agent)
        self.credentials = credentials
        self.transport = transport or RequestsTransport()
        self.base = (base_url or config.REST_BASE).rstrip("/")
        self._nonce = nonce or NonceGenerator()

        _log(f"Client ready: {self!r} ({'private+public' if credentials else 'public only'})")

    @classmethod
    def from_env(cls, **kwargs) -> Client:
        """Client with credentials from KRAKEN_API_KEY / KRAKEN_API_SECRET."""
        return cls(credentials=Credentials.from_env(), **kwargs)

    def __repr__(self) -> str:
        return f"<Client {self.user_agent} <{config.LIBRARY_AGENT}>>"

    # ── Dispatch ─────────────────────────────────────────────────────────────

    def send(self, api: Union[Api, ApiBuilder], result_type: Any = Any) -> Response:
        """
        Send one request and decode its envelope.

        `result_type` is what `result` is projected onto: a dataclass,
        dict[str, str], list[...], or Any for raw JSON values.
        """
        req = self.prepare(api)
        resp = self.transport.request(req)
        out = decode_response(resp.body, resp.status, result_type)

        if out.errors:
            _warn(f"{req.method} {req.url.split('?')[0]} -> {resp.status} {out.errors}")
        return out

    async def send_async(self, api: Union[Api, ApiBuilder], result_type: Any = Any) -> Response:
        """Same as send(), run in a worker thread."""
        return await asyncio.to_thread(self.send, api, result_type)

    def prepare(self, api: Union[Api, ApiBuilder]) -> HttpRequest:
        """Build the wire request. Private endpoints consume one nonce here."""
        if isinstance(api, ApiBuilder):
            api = api.build()

        headers = {"User-Agent": self.user_agent}

        if api.is_public:
            _log(f"GET {api}")
            return HttpRequest("GET", api.url(self.base), headers)

        if self.credentials is None:
            raise MissingCredentialsError(f"{api.path} is private and this client has no credentials")

        params = dict(api.params)
        nonce = self._nonce.next()
        params["nonce"] = str(nonce)
        body = encode_params(params)

        headers["API-Key"] = self.credentials.api_key
        headers["API-Sign"] = sign(api.path, nonce, body, self.credentials.private_key)
        headers["Content-Type"] = FORM_CONTENT_TYPE

        _log(f"POST {api.path} nonce={nonce}")
        return HttpRequest("POST", api.url(self.base), headers, body.encode("utf-8"))

    # ── Lifecycle ────────────────────────────────────────────────────────────

    def close(self):
        self.transport.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc):
        self.close()
