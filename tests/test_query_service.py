from __future__ import annotations

import json

import pytest

from employee_office.repositories.ledger_repository import LedgerRepository
from employee_office.services.command_service import CommandService
from employee_office.services.query_service import QueryService, build_envelope
from employee_office.services.seed_service import SeedService


@pytest.fixture()
def seeded(temp_db):
    repo = LedgerRepository()
    SeedService(repo, key_style="identity").init_ledger()
    return repo


def test_build_envelope_embeds_raw_records():
    payload = build_envelope([("K1", b'{"a":1}'), ("K2", b'{"b":2}')])
    assert payload == b'[{"Key":"K1", "Record":{"a":1}},{"Key":"K2", "Record":{"b":2}}]'


def test_empty_range_is_literal_empty_array(temp_db):
    assert QueryService().query_all_employees() == b"[]"
    assert QueryService().query_all_offices() == b"[]"


def test_query_all_employees_excludes_upper_bound(seeded):
    rows = json.loads(QueryService(seeded).query_all_employees())
    assert [row["Key"] for row in rows] == ["EMP1001", "EMP1002", "EMP1003", "EMP1004", "EMP1005"]
    assert rows[0]["Record"]["firstName"] == "Vineet"
    assert rows[0]["Record"]["docType"] == "employee"


def test_query_all_offices_excludes_upper_bound(seeded):
    rows = json.loads(QueryService(seeded).query_all_offices())
    assert [row["Key"] for row in rows] == ["OFF1", "OFF2"]
    assert rows[1]["Record"]["city"] == "Bangalore"


def test_range_misses_keys_outside_literal_bounds(seeded):
    CommandService(seeded).create_employee(["EMP2001", "EMP2001", "Ana", "Lima", "d", "2"])
    keys = [row["Key"] for row in json.loads(QueryService(seeded).query_all_employees())]
    assert "EMP2001" not in keys


def test_indexed_seed_keys_fall_outside_scan_bounds(temp_db):
    repo = LedgerRepository()
    SeedService(repo, key_style="indexed").init_ledger()
    assert repo.store.get_state("EMPLOYEE0") != b""
    assert repo.store.get_state("OFFICE2") != b""
    assert QueryService(repo).query_all_employees() == b"[]"


def test_employees_in_office(seeded):
    rows = json.loads(QueryService(seeded).query_employees_in_office(["2"]))
    assert sorted(row["Key"] for row in rows) == ["EMP1002", "EMP1003", "EMP1005", "EMP1006"]
    assert all(row["Record"]["officeId"] == "2" for row in rows)


def test_employees_in_office_ignores_offices_with_same_id(seeded):
    CommandService(seeded).create_office(["O-2", "2", "Tower", "Main", "Pune", "MH", "India"])
    rows = json.loads(QueryService(seeded).query_employees_in_office(["2"]))
    assert "O-2" not in [row["Key"] for row in rows]


def test_employee_office_name_returns_matching_office(seeded):
    commands = CommandService(seeded)
    commands.create_office(["O-2", "2", "Global Axis", "Road No 9", "Bangalore", "Karnataka", "India"])
    rows = json.loads(QueryService(seeded).query_employee_office_name(["EMP1002"]))
    assert [row["Key"] for row in rows] == ["O-2"]
    assert rows[0]["Record"]["buildingName"] == "Global Axis"


def test_employee_office_name_for_missing_employee_is_empty(seeded):
    assert QueryService(seeded).query_employee_office_name(["NOPE"]) == b"[]"


def test_employee_office_name_ignores_office_with_empty_id(seeded):
    CommandService(seeded).create_office(["O-EMPTY", "", "Nowhere", "", "", "", ""])
    assert QueryService(seeded).query_employee_office_name(["NOPE"]) == b"[]"
