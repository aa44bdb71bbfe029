"""Create/update/assign commands: parse args, build or merge a record, write it."""
from __future__ import annotations

from typing import Optional, Sequence

from employee_office.domain.records import Employee, Office
from employee_office.repositories.ledger_repository import LedgerRepository
from employee_office.services.arguments import expect_args


class CommandService:
    """Each command touches exactly one key: ``args[0]``.

    update/assign read from ``args[1]`` and write to ``args[0]``, so a
    record can be copied under a new key while being modified.
    """

    def __init__(self, repository: Optional[LedgerRepository] = None) -> None:
        self.repository = repository or LedgerRepository()

    def create_employee(self, args: Sequence[str]) -> None:
        expect_args(args, 6)
        key, employee_id, first_name, last_name, date_of_joining, office_id = args
        employee = Employee(
            employee_id=employee_id,
            first_name=first_name,
            last_name=last_name,
            date_of_joining=date_of_joining,
            office_id=office_id,
        )
        self.repository.put(key, employee)

    def update_employee(self, args: Sequence[str]) -> None:
        expect_args(args, 6)
        key, source_key, first_name, last_name, date_of_joining, office_id = args
        employee = self.repository.get(source_key, Employee)
        employee.first_name = first_name
        employee.last_name = last_name
        employee.date_of_joining = date_of_joining
        employee.office_id = office_id
        self.repository.put(key, employee)

    def assign_office(self, args: Sequence[str]) -> None:
        expect_args(args, 3)
        key, source_key, office_id = args
        employee = self.repository.get(source_key, Employee)
        employee.office_id = office_id
        self.repository.put(key, employee)

    def create_office(self, args: Sequence[str]) -> None:
        expect_args(args, 7)
        key, office_id, building_name, street_name, city, state, country = args
        office = Office(
            office_id=office_id,
            building_name=building_name,
            street_name=street_name,
            city=city,
            state=state,
            country=country,
        )
        self.repository.put(key, office)
