"""Range and rich queries returning ``[{"Key": ..., "Record": ...}]`` envelopes."""
from __future__ import annotations

import json
import logging
from typing import Iterable, Optional, Sequence

from employee_office.domain.keys import EMPLOYEE_RANGE, OFFICE_RANGE, KeyRange
from employee_office.domain.records import Employee, Office
from employee_office.repositories.ledger_repository import LedgerRepository
from employee_office.repositories.selector import build_query
from employee_office.services.arguments import expect_args

logger = logging.getLogger(__name__)


def build_envelope(rows: Iterable[tuple[str, bytes]]) -> bytes:
    """JSON array of key/record pairs; stored records are embedded as-is."""
    members = [
        b'{"Key":' + json.dumps(key, ensure_ascii=False).encode("utf-8") + b', "Record":' + value + b"}"
        for key, value in rows
    ]
    return b"[" + b",".join(members) + b"]"


class QueryService:
    def __init__(self, repository: Optional[LedgerRepository] = None) -> None:
        self.repository = repository or LedgerRepository()

    def query_all_employees(self, args: Sequence[str] = ()) -> bytes:
        expect_args(args, 0)
        return self._range("queryAllEmployees", EMPLOYEE_RANGE)

    def query_all_offices(self, args: Sequence[str] = ()) -> bytes:
        expect_args(args, 0)
        return self._range("queryAllOffices", OFFICE_RANGE)

    def query_employee_office_name(self, args: Sequence[str]) -> bytes:
        """Offices whose officeId matches the employee stored at ``args[0]``.

        A missing employee, or one without an officeId, gives ``[]``.
        """
        expect_args(args, 1)
        employee = self.repository.get(args[0], Employee)
        if not employee.office_id:
            return build_envelope(())
        query = build_query(docType=Office.DOC_TYPE, officeId=employee.office_id)
        return self._rich("queryEmployeeOfficeName", query)

    def query_employees_in_office(self, args: Sequence[str]) -> bytes:
        expect_args(args, 1)
        query = build_query(docType=Employee.DOC_TYPE, officeId=args[0])
        return self._rich("queryEmployeesInOffice", query)

    def _range(self, name: str, key_range: KeyRange) -> bytes:
        with self.repository.scan_range(key_range) as results:
            payload = build_envelope(results)
        logger.debug("- %s:\n%s", name, payload.decode("utf-8", "replace"))
        return payload

    def _rich(self, name: str, query: str) -> bytes:
        with self.repository.scan_query(query) as results:
            payload = build_envelope(results)
        logger.debug("- %s %s:\n%s", name, query, payload.decode("utf-8", "replace"))
        return payload
