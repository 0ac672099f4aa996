"""
Kraken REST — Typed HTTP client for the Kraken REST API

Usage:
    from kraken_rest import Client, Credentials, ServerTime, public, private

    client = Client(user_agent="my-bot/1.0")
    resp = client.send(public.time(), ServerTime)
    print(resp.errors, resp.result.unixtime)

    client = Client(credentials=Credentials(api_key, private_key))
    resp = client.send(private.balance(), dict[str, str])
    if resp.errors:
        ...

    resp = client.send(
        private.add_order()
        .with_param("validate", True)
        .with_param("pair", Asset.XBT.pair(Asset.EUR))
        .with_param("type", Order.BUY)
        .with_param("ordertype", OrderType.LIMIT)
        .with_param("price", 37500)
        .with_param("volume", 1.25)
    )
"""

from . import private, public
from .api import Api, ApiBuilder, ApiKind, decode_params, encode_params
from .auth import Credentials, NonceGenerator, sign
from .client import Client
from .errors import (
    KrakenError, CredentialsError, MissingCredentialsError, InvalidUserAgentError,
    TransportError, DecodeError, ServiceError,
)
from .models import (
    Asset, UnknownAsset, parse_asset, Order, OrderType, ServerTime, SystemStatus,
)
from .response import Response, decode_response
from .transport import HttpRequest, HttpResponse, RequestsTransport, Transport

__all__ = [
    "Client",
    "Credentials", "NonceGenerator", "sign",
    "Api", "ApiBuilder", "ApiKind", "encode_params", "decode_params",
    "public", "private",
    "Response", "decode_response",
    "HttpRequest", "HttpResponse", "RequestsTransport", "Transport",
    "KrakenError", "CredentialsError", "MissingCredentialsError", "InvalidUserAgentError",
    "TransportError", "DecodeError", "ServiceError",
    "Asset", "UnknownAsset", "parse_asset", "Order", "OrderType", "ServerTime", "SystemStatus",
]
