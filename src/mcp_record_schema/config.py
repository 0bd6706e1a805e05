"""Settings loaded from the environment (RECORD_SCHEMA_*) or a .env file."""
import logging
import sys
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RECORD_SCHEMA_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Database
    DB_PATH: str = "company.db"

    # Logging
    LOG_LEVEL: str = "INFO"
    ECHO_SQL: bool = True


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    # stdout carries the MCP stdio transport
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
