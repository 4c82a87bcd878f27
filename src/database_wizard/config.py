"""Environment-driven settings."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_COMMAND_TIMEOUT = 120  # seconds per batch
DEFAULT_FRONTEND_ORIGIN = "http://localhost:3000"


@dataclass(frozen=True)
class Settings:
    server_url: Optional[str] = None
    command_timeout: int = DEFAULT_COMMAND_TIMEOUT
    frontend_origin: str = DEFAULT_FRONTEND_ORIGIN
    log_level: str = "INFO"

    @property
    def execution_enabled(self) -> bool:
        return bool(self.server_url)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from the environment, reading .env first if present."""
        load_dotenv()

        return cls(
            server_url=os.getenv("SQLSERVER_URL") or None,
            command_timeout=_read_timeout(os.getenv("SQLSERVER_COMMAND_TIMEOUT")),
            frontend_origin=os.getenv("FRONTEND_ORIGIN", DEFAULT_FRONTEND_ORIGIN),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _read_timeout(value: Optional[str]) -> int:
    if not value:
        return DEFAULT_COMMAND_TIMEOUT
    try:
        timeout = int(value)
    except ValueError:
        raise ConfigurationError("SQLSERVER_COMMAND_TIMEOUT", f"'{value}' is not a whole number of seconds")
    if timeout <= 0:
        raise ConfigurationError("SQLSERVER_COMMAND_TIMEOUT", "must be greater than zero")
    return timeout
