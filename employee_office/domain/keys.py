"""Store key scheme: seed keys and the fixed bounds used by full scans."""
from __future__ import annotations

from dataclasses import dataclass

EMPLOYEE_SEED_PREFIX = "EMPLOYEE"
OFFICE_SEED_PREFIX = "OFFICE"


@dataclass(frozen=True)
class KeyRange:
    """Half-open key interval: ``start`` inclusive, ``end`` exclusive; empty ``end`` is unbounded."""

    start: str
    end: str


# Literal bounds matching the seeded identities. Keys outside them are not scanned.
EMPLOYEE_RANGE = KeyRange("EMP1001", "EMP1006")
OFFICE_RANGE = KeyRange("OFF1", "OFF3")


def indexed_key(prefix: str, index: int) -> str:
    return f"{prefix}{index}"


def seed_key(identity: str, prefix: str, index: int, style: str = "identity") -> str:
    """Key a seed record is stored under.

    ``identity`` stores it under its own id (``EMP1001``), ``indexed`` under
    ``<prefix><index>`` (``EMPLOYEE0``).
    """
    if style == "indexed":
        return indexed_key(prefix, index)
    return identity
