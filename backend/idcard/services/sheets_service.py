"""Google Sheets employee source (read-only)."""

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import quote

import aiohttp

from idcard.core.config import Settings
from idcard.models.employee import EmployeeRecord

logger = logging.getLogger(__name__)

# Spreadsheet column (A..T) → EmployeeRecord attribute name
COLUMN_MAPPING: list[tuple[str, int]] = [
    ("username", 0),
    ("password", 1),
    ("office", 2),
    ("employee_no", 3),
    ("last_name", 4),
    ("first_name", 5),
    ("middle_initial", 6),
    ("suffix", 7),
    ("status_of_employment", 8),
    ("position", 9),
    ("name_of_contact_person", 10),
    ("contact_no", 11),
    ("home_address", 12),
    ("birthday", 13),
    ("tin", 14),
    ("gsis", 15),
    ("pag_ibig", 16),
    ("philhealth", 17),
    ("blood_type", 18),
    ("photo_url", 19),
]

COLUMN_COUNT = 20
SHEET_RANGE_COLUMNS = "A:T"

DIRECT_VIEW_URL = "https://drive.google.com/uc?id={file_id}&export=view"

_FILE_PATH_ID = re.compile(r"/file/d/([A-Za-z0-9_-]+)")
_QUERY_ID = re.compile(r"id=([A-Za-z0-9_-]+)")


class SheetsError(RuntimeError):
    """Base class for failures reading the employee sheet."""


class SheetsConfigError(SheetsError):
    pass


class SheetsTransportError(SheetsError):
    pass


class SheetsAccessDeniedError(SheetsError):
    pass


class SheetsNotFoundError(SheetsError):
    pass


class SheetsApiError(SheetsError):
    def __init__(self, status: int, reason: str | None = None) -> None:
        self.status = status
        super().__init__(f"Google Sheets API error: {status} {reason or ''}".rstrip())


class SheetsNoDataError(SheetsError):
    pass


def normalize_photo_url(share_url: str | None) -> str:
    """Turn a Google Drive sharing link into a URL usable as an image source.

    Handles ``/file/d/<id>/view`` and ``open?id=<id>`` links. Direct links
    (``googleusercontent.com`` or ``uc?id=``) and anything unrecognised are
    returned as given.
    """
    if not share_url:
        return ""

    try:
        file_id = ""

        if "/file/d/" in share_url:
            match = _FILE_PATH_ID.search(share_url)
            if match:
                file_id = match.group(1)
        elif "open?id=" in share_url:
            match = _QUERY_ID.search(share_url)
            if match:
                file_id = match.group(1)
        elif "googleusercontent.com" in share_url or "uc?id=" in share_url:
            return share_url

        if file_id:
            return DIRECT_VIEW_URL.format(file_id=file_id)
        return share_url
    except Exception:
        logger.exception("Failed to convert photo URL %r", share_url)
        return share_url


def _pad_row(row: list[Any] | None) -> list[str]:
    cells = row or []
    return [
        str(cells[i]) if i < len(cells) and cells[i] is not None else ""
        for i in range(COLUMN_COUNT)
    ]


def parse_employee_rows(values: list[list[Any]] | None) -> list[EmployeeRecord]:
    """Parse a sheet value matrix (header row first) into employee records.

    Rows without a username or password are dropped.
    """
    if not values or len(values) < 2:
        return []

    employees: list[EmployeeRecord] = []
    for row in values[1:]:
        cells = _pad_row(row)
        data = {field: cells[index].strip() for field, index in COLUMN_MAPPING}
        data["photo_url"] = normalize_photo_url(data["photo_url"])

        if not data["username"] or not data["password"]:
            continue
        employees.append(EmployeeRecord(**data))

    return employees


class SheetsService:
    def __init__(self) -> None:
        self.initialized = False
        self.api_key = ""
        self.sheet_id = ""
        self.sheet_name = ""
        self.base_url = ""

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.GOOGLE_SHEETS_API_KEY or not settings.GOOGLE_SHEET_ID:
            logger.warning("Google Sheets credentials missing — SheetsService not initialized")
            return

        self.api_key = settings.GOOGLE_SHEETS_API_KEY
        self.sheet_id = settings.GOOGLE_SHEET_ID
        self.sheet_name = settings.GOOGLE_SHEET_NAME or "Employees"
        self.base_url = settings.GOOGLE_SHEETS_API_URL.rstrip("/")
        self.initialized = True
        logger.info("SheetsService initialized (sheet=%s)", self.sheet_name)

    async def close(self) -> None:
        self.initialized = False
        self.api_key = ""
        self.sheet_id = ""
        self.sheet_name = ""
        self.base_url = ""

    def _values_url(self) -> str:
        sheet_range = quote(f"{self.sheet_name}!{SHEET_RANGE_COLUMNS}", safe="!:")
        return f"{self.base_url}/{self.sheet_id}/values/{sheet_range}"

    async def fetch_values(self) -> list[list[Any]]:
        if not self.initialized:
            raise SheetsConfigError(
                "Google Sheets API configuration is missing. Please check your environment variables."
            )

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self._values_url(), params={"key": self.api_key}) as response:
                    if response.status == 403:
                        raise SheetsAccessDeniedError("Access denied. Please check your API key and sheet permissions.")
                    if response.status == 404:
                        raise SheetsNotFoundError("Sheet not found. Please check your Sheet ID and sheet name.")
                    if not 200 <= response.status < 300:
                        raise SheetsApiError(response.status, response.reason)

                    data = await response.json()
        except aiohttp.ClientError as e:
            raise SheetsTransportError(f"Could not reach Google Sheets: {e}") from e

        values = data.get("values") if isinstance(data, dict) else None
        if not values:
            raise SheetsNoDataError("No data found in the specified sheet range.")
        return values

    async def fetch_employees(self) -> list[EmployeeRecord]:
        values = await self.fetch_values()
        employees = parse_employee_rows(values)
        logger.debug("Parsed %d employees from %d sheet rows", len(employees), len(values))
        return employees

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False
        try:
            await self.fetch_values()
            return True
        except SheetsNoDataError:
            # reachable, just empty
            return True
        except SheetsError:
            logger.exception("SheetsService connection check failed")
            return False


sheets_service = SheetsService()
