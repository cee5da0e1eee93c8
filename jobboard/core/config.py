from pydantic_settings import BaseSettings
from typing import List, Literal, Union
from pydantic import field_validator
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    API_PREFIX: str = ""
    PROJECT_NAME: str = "Job Board API"
    PORT: int = 5000

    # Database Settings
    DATABASE_URL: str = "sqlite:///./userInfo.db"
    DB_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    # Credentials
    BCRYPT_ROUNDS: int = 10
    PASSWORD_MIN_LENGTH: int = 4

    # Bearer tokens. "user_id" hands out the raw user id (legacy clients
    # depend on it); "jwt" issues signed, expiring tokens instead.
    TOKEN_SCHEME: Literal["user_id", "jwt"] = "user_id"
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # When enabled only the original poster may edit or delete a job
    ENFORCE_JOB_OWNERSHIP: bool = False

    # CORS Settings - can be set as JSON string or comma separated list in .env
    FRONTEND_URL: Union[List[str], str] = ["*"]

    @field_validator("FRONTEND_URL", mode="before")
    @classmethod
    def parse_frontend_url(cls, v: Union[List[str], str]) -> List[str]:
        """Parse allowed origins from JSON string or list"""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [origin.strip() for origin in v.split(",") if origin.strip()]
            return parsed if isinstance(parsed, list) else [str(parsed)]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
