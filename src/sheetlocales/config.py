"""Application configuration using pydantic-settings.

Values come from environment variables prefixed with ``SHEETLOCALES_``
(or a ``.env`` file). Command-line flags take precedence over them.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sheetlocales.transport import DEFAULT_TIMEOUT
from sheetlocales.writer import OutputFormat


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Environment variables:
    - SHEETLOCALES_SPREADSHEET_ID: Spreadsheet to read
    - SHEETLOCALES_API_KEY: Google Cloud API key with the Sheets API enabled
    - SHEETLOCALES_OUTPUT_DIR: Directory for generated files
    - SHEETLOCALES_OUTPUT_FORMAT: json, cjs or esm
    - SHEETLOCALES_BEAUTIFY: Indentation width of generated files
    """

    model_config = SettingsConfigDict(
        env_prefix="SHEETLOCALES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars not defined in Settings
    )

    # Source spreadsheet
    spreadsheet_id: str = ""
    api_key: str = ""
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    # Output
    output_dir: Path = Path("./locales")
    output_format: OutputFormat = OutputFormat.JSON
    beautify: int = Field(default=4, ge=0)

    # Custom language catalog (JSON); the built-in ISO 639-1 table otherwise
    catalog_path: Path | None = None

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known value."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of: {allowed}")
        return v_upper


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the process.
    """
    return Settings()
