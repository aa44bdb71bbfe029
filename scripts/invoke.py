#!/usr/bin/env python3
"""
Run one ledger operation against the configured database.

Uso:
  python scripts/invoke.py initLedger
  python scripts/invoke.py createEmployee EMP2001 EMP2001 Ana Lima 01/02/2020 OFF1
  python scripts/invoke.py queryEmployeesInOffice 2
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Garantir que o pacote seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from employee_office.core.config import get_settings
from employee_office.core.logging_config import setup_logging
from employee_office.db.create_tables import create_all
from employee_office.services.dispatcher import Dispatcher


def main() -> int:
    ap = argparse.ArgumentParser(description="Invoke a ledger operation")
    ap.add_argument("function", help="Operation name (ex.: queryAllEmployees)")
    ap.add_argument("args", nargs="*", help="Ordered string arguments")
    ap.add_argument("--no-create", action="store_true", help="Do not create missing tables first")
    ns = ap.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)
    if not ns.no_create:
        create_all()

    result = Dispatcher(seed_key_style=settings.seed_key_style).invoke(ns.function, ns.args)
    if not result.ok:
        sys.stderr.write(f"Erro: {result.message}\n")
        return 1
    if result.payload:
        print(result.payload.decode("utf-8"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
