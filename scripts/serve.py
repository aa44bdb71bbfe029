#!/usr/bin/env python3
"""
Serve the ledger API with Uvicorn.

Host and port come from ``LEDGER_HOST`` / ``LEDGER_PORT`` (defaults
``127.0.0.1`` and ``8000``).

Usage:
    python scripts/serve.py
"""
from __future__ import annotations

import os
import sys
from pathlib import Path

import uvicorn

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from employee_office.app import create_app


def main() -> None:
    host = os.getenv("LEDGER_HOST", "127.0.0.1")
    port = int(os.getenv("LEDGER_PORT", "8000"))
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    main()
