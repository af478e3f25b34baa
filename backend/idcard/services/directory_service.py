"""Employee lookup over the sheet, degrading to the demo employees."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from idcard.models.employee import EmployeeProfile, EmployeeRecord
from idcard.services.demo_data import DEMO_EMPLOYEES
from idcard.services.sheets_service import SheetsService, sheets_service

logger = logging.getLogger(__name__)

SOURCE_SHEET = "google_sheets"
SOURCE_DEMO = "demo"


@dataclass
class FetchResult:
    employees: list[EmployeeRecord] = field(default_factory=list)
    source: str = SOURCE_SHEET
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _same_username(stored: str, candidate: str) -> bool:
    return stored.lower() == candidate.lower()


def find_matching_employee(
    employees: Sequence[EmployeeRecord], username: str, password: str
) -> EmployeeRecord | None:
    # First match in sheet order wins when usernames are duplicated.
    for employee in employees:
        if _same_username(employee.username, username) and employee.password == password:
            return employee
    return None


class DirectoryService:
    def __init__(
        self,
        sheets: SheetsService | None = None,
        fallback_employees: Sequence[EmployeeRecord] = DEMO_EMPLOYEES,
    ) -> None:
        self.sheets = sheets or sheets_service
        self.fallback_employees = tuple(fallback_employees)

    async def try_remote(self) -> FetchResult:
        try:
            employees = await self.sheets.fetch_employees()
        except Exception as e:
            return FetchResult(source=SOURCE_SHEET, error=e)
        return FetchResult(employees=employees, source=SOURCE_SHEET)

    def fallback(self) -> list[EmployeeRecord]:
        return list(self.fallback_employees)

    async def load_employees(self) -> FetchResult:
        result = await self.try_remote()
        if result.ok:
            return result

        logger.warning("Google Sheets fetch failed, using demo data: %s", result.error)
        return FetchResult(employees=self.fallback(), source=SOURCE_DEMO)

    async def authenticate(self, username: str, password: str) -> EmployeeProfile | None:
        result = await self.load_employees()
        employee = find_matching_employee(result.employees, username, password)
        if employee is None:
            logger.info("Login failed for username=%s (source=%s)", username, result.source)
            return None

        logger.info("Login succeeded for username=%s (source=%s)", employee.username, result.source)
        return employee.to_profile()

    async def list_employees(self) -> list[EmployeeProfile]:
        result = await self.load_employees()
        return [employee.to_profile() for employee in result.employees]

    async def find_employee(self, username: str) -> EmployeeProfile | None:
        result = await self.load_employees()
        for employee in result.employees:
            if _same_username(employee.username, username):
                return employee.to_profile()
        return None


directory_service = DirectoryService()
