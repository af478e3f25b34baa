from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from idcard.models.auth import AuthResponse, LoginCredentials
from idcard.services.demo_data import DEMO_CREDENTIALS
from idcard.services.directory_service import directory_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password. Please check your credentials and try again."


def _auth_response(status_code: int, response: AuthResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


async def _read_credentials(request: Request) -> LoginCredentials | None:
    body = await request.body()
    if not body:
        return None
    try:
        return LoginCredentials.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Rejected login body (%d validation errors)", e.error_count())
        return None


@router.post("/login")
async def login(request: Request):
    credentials = await _read_credentials(request)
    if credentials is None or not credentials.username or not credentials.password:
        return _auth_response(
            status.HTTP_400_BAD_REQUEST,
            AuthResponse(success=False, message="Username and password are required"),
        )

    try:
        employee = await directory_service.authenticate(credentials.username, credentials.password)
    except Exception:
        logger.exception("Authentication error")
        return _auth_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            AuthResponse(
                success=False,
                message="Authentication service is temporarily unavailable. Please try again later.",
            ),
        )

    if employee is None:
        return _auth_response(
            status.HTTP_401_UNAUTHORIZED,
            AuthResponse(success=False, message=INVALID_CREDENTIALS_MESSAGE),
        )

    return _auth_response(
        status.HTTP_200_OK,
        AuthResponse(success=True, message="Login successful", employee=employee),
    )


@router.get("/login")
async def login_info():
    return {
        "message": "Authentication endpoint. Use POST method to login.",
        "endpoints": {"login": "POST /api/v1/auth/login"},
        "demoCredentials": DEMO_CREDENTIALS,
    }
