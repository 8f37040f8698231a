from functools import lru_cache
from typing import Any, Literal
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    TASKBOARD_VERSION: str = "v0.1.x"
    API_NAME: str = "Taskboard"
    API_SUMMARY: str = "A kanban board and Gantt timeline for tracking tasks"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    CORS_ENABLED: bool = False
    CORS_ORIGINS: list[str] = ["*"]

    # Task Settings
    TASK_CODE_MIN: int = 100
    TASK_CODE_MAX: int = 999

    # OpenTelemetry Settings
    OTEL_ENABLED: bool = False
    OTEL_SERVICE_NAME: str = "taskboard"

    @model_validator(mode="after")
    def validate_task_code_range(self):
        if self.TASK_CODE_MIN > self.TASK_CODE_MAX:
            raise ValueError("TASK_CODE_MIN must not be greater than TASK_CODE_MAX")
        return self

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    def validate_list_from_string(cls, v: Any):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",")]
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
