from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid",
    )

    APP_NAME: str = "Quiz Pages"
    APP_ENV: str = Field(
        "dev",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Application environment: dev|staging|prod",
    )

    HOST: str = Field(
        "127.0.0.1",
        validation_alias=AliasChoices("HOST", "app_host"),
        description="Interface to bind",
    )
    BACKEND_PORT: int = Field(
        8000,
        validation_alias=AliasChoices("BACKEND_PORT", "app_port"),
        description="Backend port to bind",
    )

    QUIZ_FILE: Path = Field(
        Path("data/questions.json"),
        validation_alias=AliasChoices("QUIZ_FILE", "quiz_file"),
        description="JSON file with quiz meta and questions, loaded once at startup",
    )
    STATIC_DIR: Path = Field(
        Path("static"),
        validation_alias=AliasChoices("STATIC_DIR", "static_dir"),
        description="Directory served under /static",
    )
    TEMPLATES_DIR: Path | None = Field(
        None,
        validation_alias=AliasChoices("TEMPLATES_DIR", "templates_dir"),
        description="Overrides the bundled page templates",
    )

    LOG_LEVEL: str = Field(
        "INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _parse_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            name = v.strip().upper()
            if not isinstance(logging.getLevelName(name), int):
                raise ValueError(f"unknown log level: {v}")
            return name
        return v


settings = Settings()
