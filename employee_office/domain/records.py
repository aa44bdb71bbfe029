"""Employee and Office record shapes and their stored JSON form."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from employee_office.core.errors import MalformedRecordError


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def decode_document(raw: bytes | None, key: str | None = None) -> dict:
    """Parse stored bytes into a dict; empty bytes mean "absent" and give ``{}``."""
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise MalformedRecordError(f"Stored value for {key!r} is not valid JSON: {exc}", key) from exc
    if not isinstance(data, dict):
        raise MalformedRecordError(f"Stored value for {key!r} is not a JSON object", key)
    return data


class Record:
    """Flat record serialized as one JSON object with a ``docType`` discriminator."""

    DOC_TYPE: ClassVar[str] = ""
    # (attribute, JSON field) pairs in serialization order
    FIELDS: ClassVar[tuple[tuple[str, str], ...]] = ()
    ALIASES: ClassVar[Mapping[str, str]] = {}

    def to_dict(self) -> dict:
        data = {"docType": self.DOC_TYPE}
        for attr, name in self.FIELDS:
            data[name] = getattr(self, attr)
        return data

    def to_bytes(self) -> bytes:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":")).encode("utf-8")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        values = {}
        for attr, name in cls.FIELDS:
            value = data.get(name)
            if value is None:
                legacy = cls.ALIASES.get(name)
                value = data.get(legacy) if legacy else None
            values[attr] = _text(value)
        return cls(**values)

    @classmethod
    def from_bytes(cls, raw: bytes | None, key: str | None = None):
        return cls.from_dict(decode_document(raw, key))


@dataclass
class Employee(Record):
    DOC_TYPE: ClassVar[str] = "employee"
    FIELDS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("employee_id", "employeeId"),
        ("first_name", "firstName"),
        ("last_name", "lastName"),
        ("date_of_joining", "dateOfJoining"),
        ("office_id", "officeId"),
    )
    ALIASES: ClassVar[Mapping[str, str]] = {"employeeId": "empId"}

    employee_id: str = ""
    first_name: str = ""
    last_name: str = ""
    date_of_joining: str = ""
    office_id: str = ""


@dataclass
class Office(Record):
    DOC_TYPE: ClassVar[str] = "office"
    FIELDS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("office_id", "officeId"),
        ("building_name", "buildingName"),
        ("street_name", "streetName"),
        ("city", "city"),
        ("state", "state"),
        ("country", "country"),
    )

    office_id: str = ""
    building_name: str = ""
    street_name: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
