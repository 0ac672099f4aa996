"""
Test Suite: Authentication — Signing and authenticated endpoint access.
The signing check is offline; the rest needs credentials.
"""

from kraken_rest import Client, MissingCredentialsError, parse_asset, private, sign
from kraken_rest.models import UnknownAsset
from ..fixtures.mock_responses import DOC_BODY, DOC_NONCE, DOC_PATH, DOC_SECRET, DOC_SIGNATURE


def run(config: dict) -> list[dict]:
    """Run all auth diagnostic tests."""
    results = [
        _test_documented_signature(),
        _test_private_without_credentials(config["client"]),
    ]

    credentials = config.get("credentials")
    if credentials is None:
        return results

    client = Client(credentials=credentials, transport=config["client"].transport)
    results.append(_test_balance(client))
    results.append(_test_nonce_sequence(client))
    return results


def _test_documented_signature() -> dict:
    name = "Auth: HMAC-SHA512 Signing"
    try:
        sig = sign(DOC_PATH, DOC_NONCE, DOC_BODY, DOC_SECRET)
        assert sig == DOC_SIGNATURE, f"Signature mismatch: {sig[:12]}..."
        return _pass(name, f"sig={sig[:12]}...")
    except Exception as e:
        return _fail(name, str(e))


def _test_private_without_credentials(client) -> dict:
    name = "Auth: Private Call Without Credentials"
    try:
        client.send(private.balance())
        return _fail(name, "Request was sent without credentials")
    except MissingCredentialsError as e:
        return _pass(name, str(e))
    except Exception as e:
        return _fail(name, f"Wrong error: {type(e).__name__}: {e}")


def _test_balance(client) -> dict:
    name = "Auth: Balance"
    try:
        resp = client.send(private.balance(), dict[str, str])
        assert resp.is_success, f"errors={resp.errors} status={resp.status}"
        assets = [parse_asset(code) for code in resp.result]
        unknown = [str(a) for a in assets if isinstance(a, UnknownAsset)]
        detail = f"{len(assets)} assets"
        if unknown:
            detail += f" (unrecognised: {', '.join(unknown)})"
        return _pass(name, detail)
    except Exception as e:
        return _fail(name, str(e))


def _test_nonce_sequence(client) -> dict:
    name = "Auth: Back-to-back Nonces Accepted"
    try:
        for _ in range(3):
            resp = client.send(private.open_orders())
            assert not resp.errors, f"errors={resp.errors}"
        return _pass(name, "3 consecutive private calls")
    except Exception as e:
        return _fail(name, str(e))


# ── Result Helpers ───────────────────────────────────────────────────────────


def _pass(name: str, detail: str = "") -> dict:
    return {"name": name, "passed": True, "detail": detail}


def _fail(name: str, reason: str) -> dict:
    return {"name": name, "passed": False, "detail": reason}
