"""
Configuration system for numshift.

This module provides the Pydantic-based settings used by the renamer, with
environment variable support (prefix ``NUMSHIFT_``) and validation. Command-line
flags are layered on top by ``build_config``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "0.1.0"

# =============================================================================
# SCAN SETTINGS
# =============================================================================

class ScanSettings(BaseModel):
    """Settings for directory scanning and filename parsing."""

    int_bits: Annotated[Literal[16, 32, 64], Field(
        description="Width of the native signed integer used for the numeric prefix"
    )] = 32

    @field_validator('int_bits', mode="before")
    @classmethod
    def coerce_int_bits(cls, v):
        """Environment values arrive as strings."""
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return v

    @property
    def max_number(self) -> int:
        """Largest numeric prefix that fits the configured integer width."""
        return 2 ** (self.int_bits - 1) - 1


# =============================================================================
# CONSOLE SETTINGS
# =============================================================================

class ConsoleSettings(BaseModel):
    """Console and log output settings."""

    show_banner: Annotated[bool, Field(
        description="Print the explanatory banner before prompting"
    )] = True

    pause_on_exit: Annotated[bool, Field(
        description="Wait for Enter before exiting (interactive terminals only)"
    )] = False

    log_file: Annotated[Path | None, Field(
        description="Optional file that receives a copy of every log line"
    )] = None


# =============================================================================
# MAIN APPLICATION CONFIGURATION
# =============================================================================

class AppConfig(BaseSettings):
    """
    Main application configuration with environment variable support.

    All settings can be overridden via environment variables with NUMSHIFT_ prefix.
    Example: NUMSHIFT_CONSOLE__PAUSE_ON_EXIT=1
    """

    scan: ScanSettings = ScanSettings()
    console: ConsoleSettings = ConsoleSettings()

    model_config = SettingsConfigDict(
        env_prefix="NUMSHIFT_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def create_config_from_env() -> AppConfig:
    """Create a new configuration instance from environment variables."""
    return AppConfig()


def build_config(pause_on_exit: bool = False, log_file: Path | None = None) -> AppConfig:
    """Load the environment configuration and apply command-line overrides.

    Args:
        pause_on_exit: Force the exit pause on (a False value keeps the environment setting)
        log_file: Log file path overriding the environment setting

    Returns:
        AppConfig with overrides applied
    """
    cfg = create_config_from_env()
    updates: dict[str, object] = {}
    if pause_on_exit:
        updates["pause_on_exit"] = True
    if log_file is not None:
        updates["log_file"] = log_file
    if updates:
        cfg = cfg.model_copy(update={"console": cfg.console.model_copy(update=updates)})
    return cfg
