"""Environment based settings."""
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Runtime settings for node decoding."""

    skip_malformed: bool = Field(
        False,
        description="Drop malformed records in batch decoding instead of raising"
    )
    log_level: str = Field("INFO", description="Level for the package loggers")


def load_settings() -> Settings:
    """Read settings from the environment.

    Returns:
        Settings: Current settings
    """
    skip = os.environ.get("DATASOURCE_NODES_SKIP_MALFORMED", "false")
    return Settings(
        skip_malformed=skip.strip().lower() in _TRUE_VALUES,
        log_level=os.environ.get("DATASOURCE_NODES_LOG_LEVEL", "INFO").upper()
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured level to the package logger."""
    settings = settings or load_settings()
    logging.getLogger("datasource_nodes").setLevel(settings.log_level)
