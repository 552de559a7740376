"""Configuration management for Catholic Quotes."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def get_data_dir() -> Path:
    """Get the data directory."""
    return get_project_root() / "data"


def get_default_state_dir() -> Path:
    """Get the default directory for rotation state."""
    return get_project_root() / ".state"


@dataclass(frozen=True)
class Config:
    """Immutable application configuration."""

    quotes_source: str = str(get_data_dir() / "quotes_database.json")
    calendar_source: str = str(get_data_dir() / "liturgical_calendar.json")
    state_dir: Path = get_default_state_dir()
    log_level: str = "INFO"
    request_timeout: int = 10

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {log_level!r}"
            )

        timeout_raw = os.getenv("REQUEST_TIMEOUT", "10")
        try:
            request_timeout = int(timeout_raw)
        except ValueError:
            raise ValueError(
                f"REQUEST_TIMEOUT must be an integer, got {timeout_raw!r}"
            ) from None
        if request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be positive")

        state_dir = os.getenv("QUOTES_STATE_DIR")

        config = cls(
            quotes_source=os.getenv("QUOTES_SOURCE", cls.quotes_source),
            calendar_source=os.getenv("CALENDAR_SOURCE", cls.calendar_source),
            state_dir=Path(state_dir) if state_dir else get_default_state_dir(),
            log_level=log_level,
            request_timeout=request_timeout,
        )
        logger.debug(f"Rotation state directory: {config.state_dir}")
        return config

    def setup_logging(self) -> None:
        """Configure application logging."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper()),
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
