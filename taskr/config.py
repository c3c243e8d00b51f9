# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Taskr"
    DATABASE_URL: str = "sqlite:///./taskr.db"
    LOG_LEVEL: str = "INFO"

    # Frontend origins allowed by CORS
    ALLOW_ORIGINS: list[str] = ["http://localhost:3000"]


settings = Settings()
