"""Route an operation name and its argument list to the matching handler."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from employee_office.core.errors import LedgerError, UnknownOperationError
from employee_office.repositories.ledger_repository import LedgerRepository
from employee_office.services.command_service import CommandService
from employee_office.services.query_service import QueryService
from employee_office.services.seed_service import SeedService

logger = logging.getLogger(__name__)

Handler = Callable[[Sequence[str]], Optional[bytes]]


@dataclass
class InvokeResult:
    status_code: int
    payload: bytes = b""
    message: str = ""
    code: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    @classmethod
    def success(cls, payload: Optional[bytes] = None) -> "InvokeResult":
        return cls(200, payload or b"")

    @classmethod
    def error(cls, err: LedgerError) -> "InvokeResult":
        return cls(err.status_code, b"", err.message, err.code)


class Dispatcher:
    """Name -> handler table over one injected repository."""

    def __init__(self, repository: Optional[LedgerRepository] = None, seed_key_style: Optional[str] = None) -> None:
        repository = repository or LedgerRepository()
        commands = CommandService(repository)
        queries = QueryService(repository)
        seeds = SeedService(repository, seed_key_style)
        self.handlers: dict[str, Handler] = {
            "initLedger": seeds.init_ledger,
            "createEmployee": commands.create_employee,
            "updateEmployee": commands.update_employee,
            "assignOffice": commands.assign_office,
            "createOffice": commands.create_office,
            "queryAllEmployees": queries.query_all_employees,
            "queryAllOffices": queries.query_all_offices,
            "queryAllOffice": queries.query_all_offices,
            "queryEmployeeOfficeName": queries.query_employee_office_name,
            "queryEmployeesInOffice": queries.query_employees_in_office,
        }

    def invoke(self, function: str, args: Sequence[str] = ()) -> InvokeResult:
        handler = self.handlers.get(function)
        try:
            if handler is None:
                raise UnknownOperationError(function)
            payload = handler(list(args))
        except LedgerError as exc:
            logger.warning("%s failed: %s", function, exc.message)
            return InvokeResult.error(exc)
        return InvokeResult.success(payload)
