from __future__ import annotations

import logging

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from idcard.models.employee import ApiResponse
from idcard.services.card_service import format_employee_card_data
from idcard.services.directory_service import directory_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

UNAVAILABLE_MESSAGE = "Employee service is temporarily unavailable. Please try again later."


def _api_response(status_code: int, response: ApiResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json", exclude_none=True),
    )


def _not_found() -> JSONResponse:
    return _api_response(
        status.HTTP_404_NOT_FOUND,
        ApiResponse(success=False, message="Employee not found"),
    )


def _unavailable() -> JSONResponse:
    return _api_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ApiResponse(success=False, error="Failed to fetch employee data", message=UNAVAILABLE_MESSAGE),
    )


@router.get("")
async def get_employees(username: str | None = None):
    try:
        if username:
            employee = await directory_service.find_employee(username)
            if employee is None:
                return _not_found()
            return _api_response(
                status.HTTP_200_OK,
                ApiResponse(success=True, data=employee.model_dump(by_alias=True)),
            )

        employees = await directory_service.list_employees()
    except Exception:
        logger.exception("Error fetching employee data")
        return _unavailable()

    return _api_response(
        status.HTTP_200_OK,
        ApiResponse(
            success=True,
            data=[employee.model_dump(by_alias=True) for employee in employees],
            message=f"Found {len(employees)} employees",
        ),
    )


@router.head("")
async def employees_liveness():
    return Response(status_code=status.HTTP_200_OK, media_type="application/json")


@router.get("/card")
async def get_employee_card(username: str):
    try:
        employee = await directory_service.find_employee(username)
    except Exception:
        logger.exception("Error building card for %s", username)
        return _unavailable()

    if employee is None:
        return _not_found()

    card = format_employee_card_data(employee)
    return _api_response(
        status.HTTP_200_OK,
        ApiResponse(success=True, data=card.model_dump(by_alias=True)),
    )
