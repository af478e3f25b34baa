"""Built-in sample employees used when the Google Sheet is unavailable."""

from __future__ import annotations

from idcard.models.employee import EmployeeRecord

DEMO_EMPLOYEES: tuple[EmployeeRecord, ...] = (
    EmployeeRecord(
        username="john.doe",
        password="demo123",
        office="Main Office",
        employee_no="EMP001",
        last_name="Doe",
        first_name="John",
        middle_initial="M",
        suffix="",
        status_of_employment="Regular",
        position="Software Developer",
        name_of_contact_person="Jane Smith",
        contact_no="+1-555-0123",
        home_address="123 Main St, Anytown, USA 12345",
        birthday="1990-05-15",
        tin="123-456-789",
        gsis="GSIS123456",
        pag_ibig="PAGIBIG789",
        philhealth="PH123456789",
        blood_type="A+",
        photo_url=(
            "https://storage.googleapis.com/workspace-0f70711f-8b4e-4d94-86f1-2a93ccde5887/"
            "image/3504af9e-1fd2-4a97-ab3d-466cd2cffe51.png"
        ),
    ),
    EmployeeRecord(
        username="jane.smith",
        password="demo456",
        office="Branch Office",
        employee_no="EMP002",
        last_name="Smith",
        first_name="Jane",
        middle_initial="A",
        suffix="",
        status_of_employment="Regular",
        position="Project Manager",
        name_of_contact_person="Bob Johnson",
        contact_no="+1-555-0456",
        home_address="456 Oak Ave, Somewhere, USA 67890",
        birthday="1988-08-22",
        tin="987-654-321",
        gsis="GSIS654321",
        pag_ibig="PAGIBIG456",
        philhealth="PH987654321",
        blood_type="B+",
        photo_url=(
            "https://storage.googleapis.com/workspace-0f70711f-8b4e-4d94-86f1-2a93ccde5887/"
            "image/e70e705f-f0e1-4eaa-8064-e13d5feccba9.png"
        ),
    ),
)

DEMO_CREDENTIALS: list[dict[str, str]] = [
    {"username": employee.username, "password": employee.password} for employee in DEMO_EMPLOYEES
]
