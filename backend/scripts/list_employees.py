#!/usr/bin/env python3
"""Print the employee directory as the API would serve it.

Run from the backend/ directory:

    python3 scripts/list_employees.py [--username NAME] [--no-fallback] [--verbose]

Reads the Google Sheet configured in the environment (or .env) and prints
password-free employee records as JSON. Without --no-fallback an unreachable
sheet falls back to the built-in demo employees, like the login endpoint does.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from idcard.core.config import Settings  # noqa: E402
from idcard.models.employee import EmployeeProfile  # noqa: E402
from idcard.services.directory_service import DirectoryService  # noqa: E402
from idcard.services.sheets_service import SheetsService  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="List employees from the configured Google Sheet",
    )
    parser.add_argument(
        "--username",
        default=None,
        help="Only print the employee with this username (case-insensitive)",
    )
    parser.add_argument(
        "--no-fallback",
        action="store_true",
        help="Fail instead of using demo employees when the sheet cannot be read",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


def render_employees(employees: list[EmployeeProfile]) -> str:
    return json.dumps([e.model_dump(by_alias=True) for e in employees], indent=2)


async def list_employees(args: argparse.Namespace, settings: Settings | None = None) -> int:
    settings = settings or Settings()
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    sheets = SheetsService()
    await sheets.initialize(settings)
    directory = DirectoryService(sheets)

    try:
        if args.no_fallback:
            result = await directory.try_remote()
            if not result.ok:
                logger.error("Could not read employee sheet: %s", result.error)
                return 1
            employees = [e.to_profile() for e in result.employees]
        else:
            result = await directory.load_employees()
            logger.info("Loaded %d employees (source=%s)", len(result.employees), result.source)
            employees = [e.to_profile() for e in result.employees]
    finally:
        await sheets.close()

    if args.username:
        wanted = args.username.lower()
        employees = [e for e in employees if e.username.lower() == wanted]
        if not employees:
            logger.warning("No employee found with username %s", args.username)
            return 1

    print(render_employees(employees))
    return 0


def main() -> None:
    args = parse_args()
    sys.exit(asyncio.run(list_employees(args)))


if __name__ == "__main__":
    main()
