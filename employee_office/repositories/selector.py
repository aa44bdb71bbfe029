"""Rich-query selectors: ``{"selector": {field: value, ...}}`` equality filters."""
from __future__ import annotations

import json
from typing import Any, Mapping

from employee_office.core.errors import StoreAccessError


def build_query(**constraints: str) -> str:
    return json.dumps({"selector": constraints}, separators=(",", ":"))


def parse_query(query: str) -> dict[str, Any]:
    """Return the field -> expected value mapping of a query string.

    Only equality is supported, either as a bare value or as ``{"$eq": value}``.
    """
    try:
        spec = json.loads(query or "")
    except ValueError as exc:
        raise StoreAccessError(f"Invalid query string: {exc}") from exc
    if not isinstance(spec, dict) or not isinstance(spec.get("selector"), dict):
        raise StoreAccessError("Query must be a JSON object with a 'selector' object")
    selector: dict[str, Any] = {}
    for field, condition in spec["selector"].items():
        if isinstance(condition, dict):
            if set(condition) != {"$eq"}:
                raise StoreAccessError(f"Unsupported selector for {field!r}: {sorted(condition)}")
            condition = condition["$eq"]
        selector[field] = condition
    return selector


def matches(selector: Mapping[str, Any], document: Mapping[str, Any] | None) -> bool:
    if document is None:
        return False
    return all(field in document and document[field] == expected for field, expected in selector.items())
