"""
Diagnostics Runner — Runs the live suites and prints a verdict.

Usage:
    python -m kraken_rest.diagnostics.runner              # Run all suites
    python -m kraken_rest.diagnostics.runner public auth  # Run specific suites
    python -m kraken_rest.diagnostics.runner --list       # List available suites
"""

import importlib
import sys
import time

from kraken_rest import Client, Credentials, config
from .report import print_banner, print_section, print_result, print_verdict

# ── Available Suites ─────────────────────────────────────────────────────────

SUITE_MAP = {
    "decode": ("Decoding", "kraken_rest.diagnostics.suites.test_decode"),
    "public": ("Public API", "kraken_rest.diagnostics.suites.test_public"),
    "auth": ("Authentication", "kraken_rest.diagnostics.suites.test_auth"),
}

DEFAULT_ORDER = ["decode", "public", "auth"]


def build_config() -> dict:
    """Shared objects handed to each suite."""
    return {
        "client": Client(user_agent=config.USER_AGENT),
        "credentials": Credentials.from_env() if config.has_credentials() else None,
    }


def run_suite(suite_key: str, cfg: dict) -> list[dict]:
    label, module_path = SUITE_MAP[suite_key]
    print_section(label)

    try:
        results = importlib.import_module(module_path).run(cfg)
    except Exception as e:
        results = [{"name": f"{label}: Import/Run Error", "passed": False, "detail": str(e)}]

    for r in results:
        print_result(r)
    return results


def main():
    args = sys.argv[1:]

    if "--list" in args:
        print("\nAvailable diagnostic suites:")
        for key, (label, _) in SUITE_MAP.items():
            print(f"  {key:<12} {label}")
        print()
        return

    print_banner()
    config.print_config()

    unknown = [s for s in args if s not in SUITE_MAP]
    if unknown:
        print(f"  ⚠ Unknown suites: {', '.join(unknown)}")
    suites_to_run = [s for s in args if s in SUITE_MAP] or DEFAULT_ORDER

    if not config.has_credentials():
        print("  ⚠ No API credentials: skipping authenticated checks")

    cfg = build_config()
    start = time.time()
    all_results = []
    try:
        for suite_key in suites_to_run:
            all_results.extend(run_suite(suite_key, cfg))
    finally:
        cfg["client"].close()

    all_passed = print_verdict(all_results, time.time() - start)
    config.logger.shutdown()
    sys.exit(0 if all_passed else 1)


if __name__ == "__main__":
    main()
