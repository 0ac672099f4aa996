"""Public endpoints. No credentials required; sent as GET."""

from .api import ApiBuilder


def endpoint(name: str) -> ApiBuilder:
    """Any public method by its service name, e.g. endpoint("Time")."""
    return ApiBuilder.public(name)


def time() -> ApiBuilder:
    """Get server time."""
    return endpoint("Time")


def system_status() -> ApiBuilder:
    """Get system status."""
    return endpoint("SystemStatus")


def assets() -> ApiBuilder:
    """Get asset info."""
    return endpoint("Assets")


def asset_pairs() -> ApiBuilder:
    """Get tradable asset pairs."""
    return endpoint("AssetPairs")


def ticker() -> ApiBuilder:
    return endpoint("Ticker")


def ohlc() -> ApiBuilder:
    return endpoint("OHLC")


def depth() -> ApiBuilder:
    """Get order book."""
    return endpoint("Depth")


def trades() -> ApiBuilder:
    """Get recent trades."""
    return endpoint("Trades")


def spread() -> ApiBuilder:
    """Get recent spread data."""
    return endpoint("Spread")
