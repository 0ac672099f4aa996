"""
Transport — Moves one prepared request over HTTP and returns the raw reply.

The client only depends on the `Transport` protocol; `RequestsTransport` is
the default, backed by a pooled requests.Session.
"""

from __future__ import annotations
import socket
from dataclasses import dataclass, field
from typing import Optional, Protocol

import requests
from requests.adapters import HTTPAdapter

from .config import REQUEST_TIMEOUT, logger
from .errors import TransportError


def _err(msg: str):
    logger.log("HTTP", f"❌ {msg}")


@dataclass(slots=True)
class HttpRequest:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


@dataclass(slots=True)
class HttpResponse:
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


class Transport(Protocol):
    def request(self, req: HttpRequest) -> HttpResponse: ...

    def close(self) -> None: ...


class RequestsTransport:
    """Blocking transport. The session's connection pool is thread-safe for concurrent sends."""

    def __init__(self, timeout: float = REQUEST_TIMEOUT, pool_size: int = 10,
                 session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or self._make_session(pool_size)

    @staticmethod
    def _make_session(pool_size: int) -> requests.Session:
        session = requests.Session()
        adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size)
        # Disable Nagle: requests are small and latency bound
        adapter.poolmanager.connection_pool_kw["socket_options"] = [
            (socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        ]
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def request(self, req: HttpRequest) -> HttpResponse:
        try:
            resp = self.session.request(
                req.method,
                req.url,
                headers=req.headers,
                data=req.body,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            _err(f"{req.method} {req.url.split('?')[0]} failed: {e}")
            raise TransportError(str(e), method=req.method, url=req.url, cause=e) from e

        return HttpResponse(
            status=resp.status_code,
            headers=dict(resp.headers),
            body=resp.content,
        )

    def close(self) -> None:
        self.session.close()
