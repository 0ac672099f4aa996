"""
Test Suite: Public API — Time, SystemStatus, Assets, Ticker.
Live calls to endpoints that don't require authentication.
"""

import time

from kraken_rest import Asset, ServerTime, SystemStatus, public
from ..fixtures.expected_schemas import (
    ASSET_INFO_FIELDS,
    STATUS_VALUES,
    TICKER_FIELDS,
)


def run(config: dict) -> list[dict]:
    """Run all public diagnostic tests. Returns list of result dicts."""
    client = config["client"]
    return [
        _test_time(client),
        _test_system_status(client),
        _test_assets(client),
        _test_ticker(client, Asset.XBT.pair(Asset.EUR)),
        _test_bad_pair(client),
    ]


def _test_time(client) -> dict:
    name = "Public: Server Time"
    try:
        resp = client.send(public.time(), ServerTime)
        assert resp.is_success, f"errors={resp.errors} status={resp.status}"
        drift = abs(resp.result.unixtime - int(time.time()))
        assert drift < 300, f"Clock drift too large: {drift}s"
        return _pass(name, f"unixtime={resp.result.unixtime}, drift={drift}s")
    except Exception as e:
        return _fail(name, str(e))


def _test_system_status(client) -> dict:
    name = "Public: System Status"
    try:
        resp = client.send(public.system_status(), SystemStatus)
        assert resp.is_success, f"errors={resp.errors}"
        assert resp.result.status in STATUS_VALUES, f"Unexpected status: {resp.result.status}"
        return _pass(name, resp.result.status)
    except Exception as e:
        return _fail(name, str(e))


def _test_assets(client) -> dict:
    name = "Public: Assets (XBT, ETH, EUR)"
    try:
        codes = ",".join(a.value for a in (Asset.XBT, Asset.ETH, Asset.EUR))
        resp = client.send(public.assets().with_param("asset", codes), dict[str, dict])
        assert resp.is_success, f"errors={resp.errors}"
        assert len(resp.result) == 3, f"Expected 3 assets, got {sorted(resp.result)}"
        for key, info in resp.result.items():
            for field in ASSET_INFO_FIELDS:
                assert field in info, f"{key} missing field: {field}"
        return _pass(name, ", ".join(sorted(resp.result)))
    except Exception as e:
        return _fail(name, str(e))


def _test_ticker(client, pair: str) -> dict:
    name = f"Public: Ticker ({pair})"
    try:
        resp = client.send(public.ticker().with_param("pair", pair), dict[str, dict])
        assert resp.is_success, f"errors={resp.errors}"
        ticker = resp.result.get(pair)
        assert ticker is not None, f"Pair missing from result: {sorted(resp.result)}"
        for field in TICKER_FIELDS:
            assert field in ticker, f"Ticker missing field: {field}"
        ask, bid = float(ticker["a"][0]), float(ticker["b"][0])
        assert ask >= bid, f"Ask ({ask}) below bid ({bid})"
        return _pass(name, f"ask={ask}, bid={bid}")
    except Exception as e:
        return _fail(name, str(e))


def _test_bad_pair(client) -> dict:
    # Service errors must come back as data, not as an exception
    name = "Public: Unknown Pair Reports Error"
    try:
        resp = client.send(public.ticker().with_param("pair", "NOPENOPE"))
        assert resp.errors, "Expected a service error for an unknown pair"
        assert resp.result is None, f"Unexpected result: {resp.result}"
        return _pass(name, resp.errors[0])
    except Exception as e:
        return _fail(name, str(e))


# ── Result Helpers ───────────────────────────────────────────────────────────


def _pass(name: str, detail: str = "") -> dict:
    return {"name": name, "passed": True, "detail": detail}


def _fail(name: str, reason: str) -> dict:
    return {"name": name, "passed": False, "detail": reason}
