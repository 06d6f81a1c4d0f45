"""Configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from SOUKSOFT_* environment variables or a .env file.

    Attributes:
        app_name: Application name, used in job titles and temp file names.
        default_printer: Printer used by the CLI when none is given.
        paper_width_mm: Paper width used when a request does not set one.
        temp_dir: Directory for receipt files (None = OS temp dir).
        unique_receipt_files: Write each receipt to its own file and delete
            it afterwards. When False a single fixed file is reused.
        command_timeout: Seconds allowed per external command (None = no limit).
        host_family: Force a backend ('windows'/'unix') instead of detecting it.
        log_level: Logging level.
        bridge_host: Address the local bridge binds to.
        bridge_port: Port the local bridge listens on.
        cors_origins: Web-view origins allowed to call the bridge.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOUKSOFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "SoukSoft"

    # Printing
    default_printer: str | None = None
    paper_width_mm: int = Field(80, gt=0)
    temp_dir: Path | None = None
    unique_receipt_files: bool = True
    command_timeout: float | None = Field(None, gt=0)
    host_family: Literal["auto", "windows", "unix"] = "auto"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Local bridge
    bridge_host: str = "127.0.0.1"
    bridge_port: int = 1420
    cors_origins: list[str] = [
        "tauri://localhost",
        "http://tauri.localhost",
        "http://localhost:1420",
        "http://127.0.0.1:1420",
    ]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings.
    """
    return Settings()
