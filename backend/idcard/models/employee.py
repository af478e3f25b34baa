"""Employee models for spreadsheet-backed employee data."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EmployeeProfile(BaseModel):
    """Employee data that is safe to send to a client (no password)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    username: str = ""
    office: str = ""
    employee_no: str = ""
    last_name: str = ""
    first_name: str = ""
    middle_initial: str = ""
    suffix: str = ""
    status_of_employment: str = ""
    position: str = ""
    name_of_contact_person: str = ""
    contact_no: str = ""
    home_address: str = ""
    birthday: str = ""
    tin: str = ""
    gsis: str = ""
    pag_ibig: str = ""
    philhealth: str = ""
    blood_type: str = ""
    photo_url: str = ""


class EmployeeRecord(EmployeeProfile):
    """Full spreadsheet row, including the stored password."""

    password: str = ""

    def to_profile(self) -> EmployeeProfile:
        return EmployeeProfile(**self.model_dump(exclude={"password"}))


class EmployeeCardData(BaseModel):
    """Fields printed on the digital ID card."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: str
    employee_no: str = ""
    position: str = ""
    office: str = ""
    photo_url: str = ""
    contact_no: str = ""
    blood_type: str = ""
    status_of_employment: str = ""
    birthday: str = ""
    home_address: str = ""
    tin: str = ""
    gsis: str = ""
    pag_ibig: str = ""
    philhealth: str = ""


class ApiResponse(BaseModel):
    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None
