from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from idcard.main import app
from idcard.services.sheets_service import sheets_service


@pytest.fixture(autouse=True)
def _sheet_settings():
    from idcard.core.config import settings

    original_key = settings.GOOGLE_SHEETS_API_KEY
    original_sheet = settings.GOOGLE_SHEET_ID
    settings.GOOGLE_SHEETS_API_KEY = ""
    settings.GOOGLE_SHEET_ID = ""
    yield
    settings.GOOGLE_SHEETS_API_KEY = original_key
    settings.GOOGLE_SHEET_ID = original_sheet


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def header_row() -> list[str]:
    return [
        "Username",
        "Password",
        "Office",
        "Employee No",
        "Last Name",
        "First Name",
        "M.I.",
        "Suffix",
        "Status of Employment",
        "Position",
        "Name of Contact Person",
        "Contact No",
        "Home Address",
        "Birthday",
        "TIN",
        "GSIS",
        "Pag-IBIG",
        "PhilHealth",
        "Blood Type",
        "Photo URL",
    ]


@pytest.fixture
def sheet_row() -> list[str]:
    return [
        " maria.cruz ",
        "s3cret ",
        "Records Section",
        "EMP104",
        "Cruz",
        "Maria",
        "L",
        "",
        "Permanent",
        "Records Officer",
        "Pedro Cruz",
        "0917-555-0101",
        "12 Rizal St, Quezon City",
        "1992-03-04",
        "111-222-333",
        "GSIS0001",
        "PAG0001",
        "PH0001",
        "O+",
        "https://drive.google.com/file/d/1AbC-d_E/view?usp=sharing",
    ]


@pytest.fixture(autouse=True)
def _reset_sheets_service():
    yield
    sheets_service.initialized = False
