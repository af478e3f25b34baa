import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    GOOGLE_SHEETS_API_KEY: str = ""
    GOOGLE_SHEET_ID: str = ""
    GOOGLE_SHEET_NAME: str = "Employees"
    GOOGLE_SHEETS_API_URL: str = "https://sheets.googleapis.com/v4/spreadsheets"

    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
