from __future__ import annotations

import pytest

from employee_office.core.errors import ArgumentCountError, MalformedRecordError
from employee_office.domain.records import Employee, Office
from employee_office.repositories.ledger_repository import LedgerRepository
from employee_office.repositories.state_store import SQLStateStore
from employee_office.services.command_service import CommandService


class RecordingStore(SQLStateStore):
    def __init__(self) -> None:
        super().__init__()
        self.writes: list[str] = []

    def put_state(self, key, value):
        self.writes.append(key)
        super().put_state(key, value)


def test_create_employee_round_trip(temp_db):
    repo = LedgerRepository()
    svc = CommandService(repo)
    svc.create_employee(["K1", "EMP9", "Ana", "Lima", "01/02/2020", "OFF2"])
    assert repo.get("K1", Employee) == Employee("EMP9", "Ana", "Lima", "01/02/2020", "OFF2")


def test_store_key_is_independent_of_employee_id(temp_db):
    repo = LedgerRepository()
    CommandService(repo).create_employee(["STORE-KEY", "EMP9", "Ana", "Lima", "x", "OFF2"])
    assert repo.get("EMP9", Employee) == Employee()
    assert repo.get("STORE-KEY", Employee).employee_id == "EMP9"


def test_update_employee_keeps_employee_id(temp_db):
    repo = LedgerRepository()
    svc = CommandService(repo)
    svc.create_employee(["K1", "EMP9", "Ana", "Lima", "01/02/2020", "OFF2"])
    svc.update_employee(["K1", "K1", "Ana Maria", "Souza", "02/03/2021", "OFF3"])
    assert repo.get("K1", Employee) == Employee("EMP9", "Ana Maria", "Souza", "02/03/2021", "OFF3")


def test_update_can_clone_under_new_key(temp_db):
    repo = LedgerRepository()
    svc = CommandService(repo)
    svc.create_employee(["K1", "EMP9", "Ana", "Lima", "01/02/2020", "OFF2"])
    svc.update_employee(["K2", "K1", "Bia", "Lima", "01/02/2020", "OFF2"])
    assert repo.get("K1", Employee).first_name == "Ana"
    assert repo.get("K2", Employee) == Employee("EMP9", "Bia", "Lima", "01/02/2020", "OFF2")


def test_update_of_missing_source_writes_zero_based_record(temp_db):
    repo = LedgerRepository()
    CommandService(repo).update_employee(["K1", "missing", "Ana", "Lima", "d", "OFF1"])
    assert repo.get("K1", Employee) == Employee("", "Ana", "Lima", "d", "OFF1")


def test_assign_office_changes_only_office_id(temp_db):
    repo = LedgerRepository()
    svc = CommandService(repo)
    svc.create_employee(["K1", "EMP9", "Ana", "Lima", "01/02/2020", "OFF2"])
    svc.assign_office(["K1", "K1", "OFF7"])
    assert repo.get("K1", Employee) == Employee("EMP9", "Ana", "Lima", "01/02/2020", "OFF7")


def test_create_office_round_trip(temp_db):
    repo = LedgerRepository()
    CommandService(repo).create_office(["O-1", "OFF9", "Tower", "Main St", "Pune", "MH", "India"])
    assert repo.get("O-1", Office) == Office("OFF9", "Tower", "Main St", "Pune", "MH", "India")


@pytest.mark.parametrize(
    "method, args, expected",
    [
        ("create_employee", ["K", "E", "F", "L", "D"], 6),
        ("update_employee", ["K", "K", "F", "L", "D", "O", "extra"], 6),
        ("assign_office", ["K", "OFF1"], 3),
        ("create_office", ["K", "O", "B", "S", "C", "ST"], 7),
    ],
)
def test_wrong_arity_fails_without_writing(temp_db, method, args, expected):
    store = RecordingStore()
    svc = CommandService(LedgerRepository(store))
    with pytest.raises(ArgumentCountError) as exc:
        getattr(svc, method)(args)
    assert exc.value.expected == expected
    assert exc.value.message == f"Incorrect number of arguments. Expecting {expected}"
    assert store.writes == []


def test_malformed_source_record_is_not_overwritten(temp_db):
    store = RecordingStore()
    store.put_state("BAD", b"{broken")
    store.writes.clear()
    svc = CommandService(LedgerRepository(store))
    with pytest.raises(MalformedRecordError):
        svc.assign_office(["NEW", "BAD", "OFF1"])
    assert store.writes == []
    assert store.get_state("NEW") == b""
