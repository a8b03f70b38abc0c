"""Settings for the API process, read from environment variables (and .env)."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"

# Repo root: from src/api/config.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def _load_dotenv() -> None:
    # Load .env from repo root or current dir; real env vars win
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"CONTACTBOOK_PORT must be an integer, got {raw!r}.") from None
    if not 1 <= port <= 65535:
        raise ValueError(f"CONTACTBOOK_PORT must be between 1 and 65535, got {port}.")
    return port


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environ (defaults to os.environ after loading .env).

    Raises ValueError for a port that is not an integer in range or an unknown log level.
    """
    if environ is None:
        _load_dotenv()
        environ = os.environ

    host = environ.get("CONTACTBOOK_HOST", "").strip() or DEFAULT_HOST
    raw_port = environ.get("CONTACTBOOK_PORT", "").strip()
    port = _parse_port(raw_port) if raw_port else DEFAULT_PORT
    log_level = environ.get("CONTACTBOOK_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"CONTACTBOOK_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}."
        )
    return Settings(host=host, port=port, log_level=log_level)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=level, force=True)
