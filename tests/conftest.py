from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:  # pragma: no cover - import side-effect
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("KRAKEN_LOG", "0")

from kraken_rest import Credentials, HttpResponse  # noqa: E402


# Example key pair and signature from the service's REST documentation.
DOC_SECRET = "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="
DOC_NONCE = 1616492376594


class StubTransport:
    """Records every request and replays one canned response."""

    def __init__(self, body: bytes = b'{"error":[],"result":{}}', status: int = 200,
                 exc: Exception | None = None):
        self.body = body
        self.status = status
        self.exc = exc
        self.requests = []
        self.closed = False

    def request(self, req):
        self.requests.append(req)
        if self.exc is not None:
            raise self.exc
        return HttpResponse(status=self.status, headers={}, body=self.body)

    def close(self):
        self.closed = True


@pytest.fixture
def doc_secret() -> str:
    return DOC_SECRET


@pytest.fixture
def doc_nonce() -> int:
    return DOC_NONCE


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key="test-api-key-0123456789", private_key=DOC_SECRET)


@pytest.fixture
def make_transport():
    return StubTransport


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()
