import os
from pydantic_settings import BaseSettings
from pydantic import ConfigDict, field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import to_uppercase, to_lowercase, split_csv, is_true_flag

# Read on every call that needs it (not part of Settings, which is cached).
OBJECT_LOGGING_ENV_VAR = "LOGS_LOG_OBJ"


class Settings(BaseSettings):
    """
    Request logger settings loaded from environment.
    """

    # Environment
    ENVIRONMENT: Literal["development", "testing", "staging", "production"] = "development"
    SERVICE_NAME: str = "request-logger"

    # Logging sink
    LOG_LEVEL: Literal["VERBOSE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/request-logger")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5

    # Masking
    LOG_MASK_FIELDS: str = "password,Password,UserKey"

    # Correlation
    REQUEST_ID_HEADER: str = "X-Request-ID"

    # --- Derived settings ---
    @property
    def mask_fields(self) -> tuple[str, ...]:
        """
        Sensitive field paths as an immutable tuple, in configured order.
        """
        return split_csv(self.LOG_MASK_FIELDS)

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize the LOG_LEVEL environment variable value to uppercase.
        """
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", mode="before")
    def normalize_log_format(cls, v: str | None) -> str | None:
        """
        Normalize the LOG_FORMAT environment variable value to lowercase.
        """
        return to_lowercase(v)

    model_config = ConfigDict(
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def object_logging_enabled() -> bool:
    """
    Whether structured (non-error) log arguments should be serialized.

    Read from the environment on every call so the flag can be flipped on a
    running process without rebuilding loggers.
    """
    return is_true_flag(os.environ.get(OBJECT_LOGGING_ENV_VAR))
