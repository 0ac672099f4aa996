"""
Response — The {error, result} envelope returned by every endpoint.

The envelope is parsed into plain JSON values first, then `result` is
projected onto the caller's type. `error` and `result` are decoded
independently: a result that does not fit the requested type raises
DecodeError carrying the error list that did decode.
"""

from __future__ import annotations
import dataclasses
import types
import typing
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar, Union

import orjson as json

from .config import logger
from .errors import DecodeError, ServiceError

T = TypeVar("T")


def _warn(msg: str):
    logger.log("DECODE", f"⚠ {msg}")


@dataclass(slots=True)
class Response(Generic[T]):
    errors: list[str] = field(default_factory=list)
    result: Optional[T] = None
    status: int = 0

    @property
    def error(self) -> list[str]:
        """Same list, under the field name used on the wire."""
        return self.errors

    @property
    def is_success(self) -> bool:
        """No service errors and a 2xx HTTP status."""
        return not self.errors and 200 <= self.status < 300

    def get(self, key: Any, default: Any = None) -> Any:
        """Look up a key of a mapping result."""
        if isinstance(self.result, dict):
            return self.result.get(key, default)
        return default

    def raise_for_errors(self) -> Response[T]:
        if self.errors:
            raise ServiceError(self.errors, self.status)
        return self


# ── Projection ───────────────────────────────────────────────────────────────

class _Mismatch(Exception):
    pass


def _describe(tp: Any) -> str:
    return getattr(tp, "__name__", None) or str(tp)


def project(value: Any, tp: Any) -> Any:
    """Convert a JSON value into `tp`. Raises _Mismatch when it does not fit."""
    if tp is Any or tp is object:
        return value

    origin = typing.get_origin(tp)
    if origin is Union or origin is getattr(types, "UnionType", None):
        args = typing.get_args(tp)
        if value is None and type(None) in args:
            return None
        for arg in args:
            if arg is type(None):
                continue
            try:
                return project(value, arg)
            except _Mismatch:
                continue
        raise _Mismatch(f"{value!r} matches no member of {tp}")

    if origin in (list, tuple, set, frozenset):
        if not isinstance(value, list):
            raise _Mismatch(f"expected array, got {type(value).__name__}")
        args = typing.get_args(tp)
        if origin is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
            if args == ((),):
                args = ()
            if len(value) != len(args):
                raise _Mismatch(f"expected {len(args)} items, got {len(value)}")
            return tuple(project(v, a) for v, a in zip(value, args))
        item_tp = args[0] if args else Any
        items = [project(v, item_tp) for v in value]
        try:
            return origin(items)
        except TypeError as e:
            raise _Mismatch(f"{_describe(tp)}: {e}") from e

    if origin is dict:
        if not isinstance(value, dict):
            raise _Mismatch(f"expected object, got {type(value).__name__}")
        args = typing.get_args(tp)
        val_tp = args[1] if len(args) == 2 else Any
        return {k: project(v, val_tp) for k, v in value.items()}

    if tp in (list, dict):
        if not isinstance(value, tp):
            raise _Mismatch(f"expected {tp.__name__}, got {type(value).__name__}")
        return value

    if tp is bool:
        if not isinstance(value, bool):
            raise _Mismatch(f"expected bool, got {value!r}")
        return value

    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _Mismatch(f"expected integer, got {value!r}")
        return value

    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _Mismatch(f"expected number, got {value!r}")
        return float(value)

    if tp is str:
        if not isinstance(value, str):
            raise _Mismatch(f"expected string, got {value!r}")
        return value

    if dataclasses.is_dataclass(tp) and isinstance(tp, type):
        return _project_dataclass(value, tp)

    if callable(tp):
        try:
            return tp(value)
        except (TypeError, ValueError, ArithmeticError) as e:
            raise _Mismatch(f"{_describe(tp)}: {e}") from e

    raise _Mismatch(f"unsupported result type {tp!r}")


def _project_dataclass(value: Any, tp: type) -> Any:
    if not isinstance(value, dict):
        raise _Mismatch(f"expected object for {tp.__name__}, got {type(value).__name__}")

    try:
        hints = typing.get_type_hints(tp)
    except NameError:
        hints = {f.name: f.type for f in dataclasses.fields(tp) if not isinstance(f.type, str)}
    kwargs = {}
    for f in dataclasses.fields(tp):
        if not f.init:
            continue
        if f.name in value:
            try:
                kwargs[f.name] = project(value[f.name], hints.get(f.name, Any))
            except _Mismatch as e:
                raise _Mismatch(f"{tp.__name__}.{f.name}: {e}") from e
        elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
            raise _Mismatch(f"{tp.__name__}.{f.name}: missing field")
    try:
        return tp(**kwargs)
    except (TypeError, ValueError) as e:
        raise _Mismatch(f"{tp.__name__}: {e}") from e


# ── Envelope ─────────────────────────────────────────────────────────────────


def decode_response(body: bytes, status: int, result_type: Any = Any) -> Response:
    """Decode a raw response body into Response[result_type]."""
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        _warn(f"Body is not JSON (status={status})")
        raise DecodeError("response body is not JSON", status=status, field="envelope", body=body, cause=e) from e

    if not isinstance(data, dict):
        raise DecodeError(
            f"expected JSON object, got {type(data).__name__}",
            status=status, field="envelope", body=body,
        )

    raw_errors = data.get("error")
    if raw_errors is None:
        errors: list[str] = []
    elif isinstance(raw_errors, list) and all(isinstance(e, str) for e in raw_errors):
        errors = list(raw_errors)
    else:
        _warn(f"Malformed error field: {raw_errors!r}")
        raise DecodeError("'error' is not a list of strings", status=status, field="error", body=body)

    raw_result = data.get("result")
    if raw_result is None:
        return Response(errors=errors, result=None, status=status)

    try:
        result = project(raw_result, result_type)
    except _Mismatch as e:
        _warn(f"Result does not fit {_describe(result_type)}: {e}")
        raise DecodeError(
            f"result does not match {_describe(result_type)}: {e}",
            status=status, field="result", errors=errors, body=body, cause=e,
        ) from e

    return Response(errors=errors, result=result, status=status)
