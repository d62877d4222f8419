"""Configuration utilities for infrastructure layer."""

import logging
import os
from pathlib import Path
from typing import Optional

import structlog
from dotenv import load_dotenv

_ENV_LOADED = False


def load_environment(env_path: Optional[Path] = None) -> None:
    """
    Load variables from a .env file once.

    Existing environment variables are never overridden.

    Args:
        env_path: Explicit .env location (defaults to project root)
    """
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    load_dotenv(env_path or Path(__file__).parent.parent / ".env")
    _ENV_LOADED = True


def get_health_data_backend() -> str:
    """
    Get health data store backend name.

    Returns:
        Backend from HEALTH_DATA_BACKEND env var, defaults to "inmemory"
    """
    load_environment()
    return os.getenv("HEALTH_DATA_BACKEND", "inmemory").strip().lower()


def get_log_level() -> int:
    """
    Get logging level.

    Returns:
        Level from LOG_LEVEL env var (name like "DEBUG"), defaults to INFO
    """
    load_environment()
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Configure stdlib logging and structlog with the configured level."""
    level = get_log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
