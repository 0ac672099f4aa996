"""
Config — Loads .env credentials and exposes the Kraken REST endpoints.

Values already present in the process environment win over the .env file.
"""

import os
import queue
import threading
from pathlib import Path
from dotenv import load_dotenv

VERSION = "0.1.0"

# ── Load .env from same directory ────────────────────────────────────────────

_env_path = Path(__file__).parent / ".env"
load_dotenv(_env_path)

# ── Credential Resolution ────────────────────────────────────────────────────

API_KEY = os.getenv("KRAKEN_API_KEY", "").strip()
API_SECRET = os.getenv("KRAKEN_API_SECRET", "").strip()

# ── Endpoints ────────────────────────────────────────────────────────────────

REST_BASE = os.getenv("KRAKEN_REST_BASE", "https://api.kraken.com").strip().rstrip("/")
API_VERSION = os.getenv("KRAKEN_API_VERSION", "0").strip()
USER_AGENT = os.getenv("KRAKEN_USER_AGENT", f"kraken-rest/{VERSION}").strip()
REQUEST_TIMEOUT = float(os.getenv("KRAKEN_TIMEOUT", "10"))

LIBRARY_AGENT = f"kraken-rest/{VERSION}"


# ── Async Logger ─────────────────────────────────────────────────────────────

class AsyncLogger:
    def __init__(self):
        self._q = queue.Queue()
        self._closed = False
        self._t = threading.Thread(target=self._worker, daemon=True)
        self._t.start()
        self.enabled = os.getenv("KRAKEN_LOG", "1").lower() not in ("0", "false", "off")

    def _worker(self):
        while True:
            msg = self._q.get()
            if msg is None:
                break
            print(msg, flush=True)
            self._q.task_done()

    def log(self, prefix, msg):
        if self.enabled and not self._closed:
            self._q.put(f"[{prefix}] {msg}")

    def shutdown(self):
        if self._closed:
            return
        self._closed = True
        self._q.put(None)
        self._t.join(timeout=1.0)

logger = AsyncLogger()


# ── Validation ───────────────────────────────────────────────────────────────


def has_credentials() -> bool:
    return bool(API_KEY and API_SECRET)


def mask(value: str) -> str:
    if len(value) > 10:
        return value[:6] + "..." + value[-4:]
    return "*" * len(value)


def describe() -> dict:
    """Summary of the active configuration, safe to print."""
    return {
        "rest": REST_BASE,
        "version": API_VERSION,
        "user_agent": USER_AGENT,
        "api_key": mask(API_KEY) if API_KEY else "(none)",
        "secret": f"{len(API_SECRET)} chars" if API_SECRET else "(none)",
    }


def print_config():
    print()
    print(f"  ┌─ Kraken REST Config ──────────────────────────┐")
    for label, value in describe().items():
        print(f"  │  {label + ':':<12}{value:<34}│")
    print(f"  └───────────────────────────────────────────────┘")
    print()
