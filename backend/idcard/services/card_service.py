from __future__ import annotations

from idcard.models.employee import EmployeeCardData, EmployeeProfile


def get_full_name(employee: EmployeeProfile) -> str:
    parts = [
        employee.first_name,
        f"{employee.middle_initial}." if employee.middle_initial else "",
        employee.last_name,
        employee.suffix,
    ]
    return " ".join(part.strip() for part in parts if part and part.strip())


def format_employee_card_data(employee: EmployeeProfile) -> EmployeeCardData:
    return EmployeeCardData(
        full_name=get_full_name(employee),
        employee_no=employee.employee_no,
        position=employee.position,
        office=employee.office,
        photo_url=employee.photo_url,
        contact_no=employee.contact_no,
        blood_type=employee.blood_type,
        status_of_employment=employee.status_of_employment,
        birthday=employee.birthday,
        home_address=employee.home_address,
        tin=employee.tin,
        gsis=employee.gsis,
        pag_ibig=employee.pag_ibig,
        philhealth=employee.philhealth,
    )
