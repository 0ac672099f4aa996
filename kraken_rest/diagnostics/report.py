"""
Diagnostics Report — Console output for suite results.
"""

from datetime import datetime


def print_banner():
    print()
    print("  ╔═══════════════════════════════════════════════╗")
    print("  ║     K R A K E N   R E S T                     ║")
    print("  ║        Live Diagnostics                       ║")
    print("  ╚═══════════════════════════════════════════════╝")
    print()


def print_section(title: str):
    print(f"\n  ── {title} {'─' * max(0, 48 - len(title))}")


def print_result(result: dict):
    icon = "✅" if result["passed"] else "❌"
    print(f"    {icon} {result['name']}")
    if result.get("detail"):
        print(f"        → {result['detail']}")


def summarize(all_results: list[dict]) -> dict[str, tuple[int, int]]:
    """Passed/total per suite, keyed by the name prefix before ':'."""
    suites: dict[str, tuple[int, int]] = {}
    for r in all_results:
        suite = r["name"].split(":")[0].strip()
        passed, total = suites.get(suite, (0, 0))
        suites[suite] = (passed + bool(r["passed"]), total + 1)
    return suites


def print_verdict(all_results: list[dict], elapsed: float) -> bool:
    failed = sum(1 for r in all_results if not r["passed"])

    print()
    print("  ══ Verdict ════════════════════════════════════════")
    print()
    for suite, (passed, total) in summarize(all_results).items():
        icon = "✅" if passed == total else "❌"
        print(f"    {icon} {suite}: {passed}/{total}")
    print()
    print(f"    Total: {len(all_results) - failed}/{len(all_results)} passed")
    print(f"    Time:  {elapsed:.1f}s  ({datetime.now():%Y-%m-%d %H:%M:%S})")
    print()
    print("  🟢 ALL DIAGNOSTICS PASSED" if failed == 0 else "  🔴 DIAGNOSTICS FAILED — Review errors above")
    print()
    return failed == 0
