"""Configuration for the mermaid-workflow command-line tools.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Nothing is required: every setting has a usable default.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class WorkflowSettings(BaseSettings):
    """Settings for compiling workflows.

    Environment variables:
    - LOG_LEVEL                     (optional)
    - MERMAID_WORKFLOW_JSON_INDENT  (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `WorkflowSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        validation_alias="MERMAID_WORKFLOW_JSON_INDENT",
        description="Indentation used when printing workflow descriptors as JSON",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level
