import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    EMPLOYEES_API_URL: str = "http://localhost:3001"
    EMPLOYEES_RESOURCE: str = "employees"
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    AUTH_SECRET_KEY: str = "employee-hub-dev-secret"
    AUTH_TOKEN_TTL_MINUTES: int = 480
    AUTH_LATENCY_SECONDS: float = 0.8

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:8080",
    ]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
