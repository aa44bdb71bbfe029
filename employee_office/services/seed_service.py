"""Default ledger contents written by ``initLedger``."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from employee_office.core.config import get_settings
from employee_office.domain.keys import EMPLOYEE_SEED_PREFIX, OFFICE_SEED_PREFIX, seed_key
from employee_office.domain.records import Employee, Office
from employee_office.repositories.ledger_repository import LedgerRepository
from employee_office.services.arguments import expect_args

logger = logging.getLogger(__name__)

SEED_EMPLOYEES = (
    Employee("EMP1001", "Vineet", "Timble", "01/01/2000", "3"),
    Employee("EMP1002", "Amit", "Saxena", "01/01/2006", "2"),
    Employee("EMP1003", "Ashutosh", "Phoujdar", "01/01/2014", "2"),
    Employee("EMP1004", "Niraj", "Pandey", "01/01/2012", "1"),
    Employee("EMP1005", "Dinesh", "Juturu", "01/01/2015", "2"),
    Employee("EMP1006", "Rajesh", "Annaji", "01/01/2012", "2"),
)

SEED_OFFICES = (
    Office("OFF1", "Nirlon Compound", "Off Western Express Highway", "Mumbai", "Maharashtra", "India"),
    Office("OFF2", "Global Axis", "Road No 9", "Bangalore", "Karnataka", "India"),
    Office("OFF3", "Ambrosia", "Bavdhan Khurd", "Pune", "Maharashtra", "India"),
)


class SeedService:
    def __init__(self, repository: Optional[LedgerRepository] = None, key_style: Optional[str] = None) -> None:
        self.repository = repository or LedgerRepository()
        self.key_style = key_style or get_settings().seed_key_style

    def init_ledger(self, args: Sequence[str] = ()) -> None:
        expect_args(args, 0)
        for index, employee in enumerate(SEED_EMPLOYEES):
            key = seed_key(employee.employee_id, EMPLOYEE_SEED_PREFIX, index, self.key_style)
            self.repository.put(key, employee)
            logger.info("Added employee %s under %s", employee.employee_id, key)
        for index, office in enumerate(SEED_OFFICES):
            key = seed_key(office.office_id, OFFICE_SEED_PREFIX, index, self.key_style)
            self.repository.put(key, office)
            logger.info("Added office %s under %s", office.office_id, key)
