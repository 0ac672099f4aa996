"""
Models — Enums and result types shared by callers of the client.

Asset codes follow the service's naming (XBT, not BTC). The service adds
assets over time, so parsing never fails on an unknown code: it returns an
UnknownAsset carrying the raw string instead.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union


# ── Assets ───────────────────────────────────────────────────────────────────

_FIAT = {"AUD", "CAD", "CHF", "EUR", "GBP", "JPY", "USD"}


class Asset(str, Enum):
    # Crypto currencies
    ADA = "ADA"
    ALGO = "ALGO"
    ATOM = "ATOM"
    BCH = "BCH"
    DAI = "DAI"
    DOT = "DOT"
    EOS = "EOS"
    ETC = "ETC"
    ETH = "ETH"
    FIL = "FIL"
    LINK = "LINK"
    LTC = "LTC"
    SOL = "SOL"
    UNI = "UNI"
    USDC = "USDC"
    USDT = "USDT"
    XBT = "XBT"
    XDG = "XDG"
    XLM = "XLM"
    XMR = "XMR"
    XRP = "XRP"
    XTZ = "XTZ"
    ZEC = "ZEC"
    # Fiat currencies
    AUD = "AUD"
    CAD = "CAD"
    CHF = "CHF"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    USD = "USD"

    def __str__(self) -> str:
        return self.value

    @property
    def is_fiat(self) -> bool:
        return self.value in _FIAT

    @property
    def is_crypto(self) -> bool:
        return not self.is_fiat

    def with_prefix(self) -> str:
        """Legacy classified name: X for crypto, Z for fiat (XXBT, ZEUR)."""
        return ("Z" if self.is_fiat else "X") + self.value

    def pair(self, other: Asset) -> str:
        """Pair name as listed by AssetPairs, e.g. XXBTZEUR or ETHXBT."""
        if self.is_fiat != other.is_fiat:
            return self.with_prefix() + other.with_prefix()
        return self.value + other.value


@dataclass(frozen=True, slots=True)
class UnknownAsset:
    """An asset code the client does not know yet."""

    code: str

    def __str__(self) -> str:
        return self.code


AnyAsset = Union[Asset, UnknownAsset]


def parse_asset(code: str) -> AnyAsset:
    """
    Map a code from the service onto an Asset.

    Accepts both plain (XBT) and classified (XXBT, ZEUR) forms. Anything
    else becomes UnknownAsset(code).
    """
    try:
        return Asset(code)
    except ValueError:
        pass
    if len(code) == 4 and code[0] in "XZ":
        try:
            asset = Asset(code[1:])
        except ValueError:
            return UnknownAsset(code)
        if asset.with_prefix() == code:
            return asset
    return UnknownAsset(code)


# ── Orders ───────────────────────────────────────────────────────────────────

class Order(str, Enum):
    BUY = "buy"
    SELL = "sell"

    def __str__(self) -> str:
        return self.value


class OrderType(str, Enum):
    MARKET = "market"
    LIMIT = "limit"
    SETTLE_POSITION = "settle-position"
    STOP_LOSS = "stop-loss"               # market once last price crosses stop
    STOP_LOSS_LIMIT = "stop-loss-limit"
    TAKE_PROFIT = "take-profit"
    TAKE_PROFIT_LIMIT = "take-profit-limit"

    def __str__(self) -> str:
        return self.value


# ── Results ──────────────────────────────────────────────────────────────────

@dataclass(slots=True)
class ServerTime:
    unixtime: int
    rfc1123: str = ""


@dataclass(slots=True)
class SystemStatus:
    status: str             # online | maintenance | cancel_only | post_only
    timestamp: str = ""
