"""
API — Endpoint descriptors and the builder that produces them.

Public endpoints are sent as GET with a query string, private ones as POST
with a form body. Both use the same canonical encoding: `nonce` first, the
remaining keys in sorted order, form-urlencoded and joined with `&`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import parse_qsl, urlencode

from .config import API_VERSION, REST_BASE


class ApiKind(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


def to_param(value: Any) -> str:
    """Canonical string form of a parameter value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _canonical_order(key: str) -> tuple[bool, str]:
    return (key != "nonce", key)


def encode_params(params: Mapping[str, str]) -> str:
    """Encode params into the exact string sent on the wire and signed."""
    return urlencode([(k, params[k]) for k in sorted(params, key=_canonical_order)])


def decode_params(body: str) -> dict[str, str]:
    return dict(parse_qsl(body, keep_blank_values=True))


# ── Descriptor ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Api:
    """An immutable, fully specified request prior to signing."""

    kind: ApiKind
    name: str
    params: Mapping[str, str] = field(default_factory=dict)
    version: str = API_VERSION

    def __post_init__(self):
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __hash__(self) -> int:
        return hash((self.kind, self.name, self.version, tuple(sorted(self.params.items()))))

    @property
    def is_public(self) -> bool:
        return self.kind is ApiKind.PUBLIC

    @property
    def is_private(self) -> bool:
        return self.kind is ApiKind.PRIVATE

    @property
    def method(self) -> str:
        return "GET" if self.is_public else "POST"

    @property
    def path(self) -> str:
        """URI path, also the prefix of the signed message."""
        return f"/{self.version}/{self.kind.value}/{self.name}"

    def url(self, base: str = REST_BASE) -> str:
        url = base.rstrip("/") + self.path
        if self.is_public and self.params:
            url += "?" + encode_params(self.params)
        return url

    def __str__(self) -> str:
        if self.is_private and self.params:
            return f"{self.url()}?{encode_params(self.params)}"
        return self.url()


# ── Builder ──────────────────────────────────────────────────────────────────

class ApiBuilder:
    """Accumulates parameters for one endpoint. Last write wins per key."""

    def __init__(self, kind: ApiKind, name: str, version: str = API_VERSION):
        self.kind = kind
        self.name = name
        self.version = version
        self.params: dict[str, str] = {}

    def with_param(self, key: Any, value: Any) -> ApiBuilder:
        self.params[str(key)] = to_param(value)
        return self

    def with_params(self, params: Mapping[Any, Any]) -> ApiBuilder:
        for key, value in params.items():
            self.with_param(key, value)
        return self

    def build(self) -> Api:
        return Api(self.kind, self.name, self.params, self.version)

    def __repr__(self) -> str:
        return f"ApiBuilder({self.kind.value}/{self.name}, {len(self.params)} params)"

    @classmethod
    def public(cls, name: str) -> ApiBuilder:
        return cls(ApiKind.PUBLIC, name)

    @classmethod
    def private(cls, name: str) -> ApiBuilder:
        return cls(ApiKind.PRIVATE, name)
