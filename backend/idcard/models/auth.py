"""Login request/response and client session models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from idcard.models.employee import EmployeeProfile


class LoginCredentials(BaseModel):
    username: str | None = None
    password: str | None = None


class AuthResponse(BaseModel):
    success: bool
    message: str
    employee: EmployeeProfile | None = None


class SessionData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_authenticated: bool
    employee: EmployeeProfile | None = None
    login_time: int
