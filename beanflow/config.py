"""
Configuration loading.

Settings come from a YAML file and can be overridden from the
environment (a ``.env`` file is honoured through python-dotenv), which
keeps the auth token out of the config file when needed::

    session:
      base_url: https://membean.com
      session_id: "12345"
      auth_token: "..."
      time_on_page: 5
    logging:
      level: INFO

Environment overrides: ``MEMBEAN_AUTH_TOKEN``, ``MEMBEAN_SESSION_ID``,
``MEMBEAN_BASE_URL``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml  # type: ignore
from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError
from .session.controller import DEFAULT_TIME_ON_PAGE
from .session.transport import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

ENV_OVERRIDES = {
    "auth_token": "MEMBEAN_AUTH_TOKEN",
    "session_id": "MEMBEAN_SESSION_ID",
    "base_url": "MEMBEAN_BASE_URL",
}


@dataclass
class SessionConfig:
    session_id: str
    auth_token: str
    base_url: str = DEFAULT_BASE_URL
    time_on_page: int = DEFAULT_TIME_ON_PAGE
    log_level: str = "INFO"


def check_log_level(name: Any) -> str:
    """Upper-case `name` and make sure `logging` knows it as a level."""
    level = str(name).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown log level: {name!r}")
    return level


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML configuration {path}: {exc}") from exc


def load_config(path: Optional[str] = None) -> SessionConfig:
    """Build a `SessionConfig` from `path` and the environment.

    Args:
        path: Optional YAML file.  A missing file is only an error when
            the environment does not supply the required values either.

    Raises:
        ConfigError: if the file is unreadable YAML, no session id or
            auth token can be found, or a value has the wrong type.
    """
    load_dotenv(find_dotenv(usecwd=True))
    raw: Dict[str, Any] = {}
    if path:
        config_path = Path(path)
        if config_path.exists():
            raw = _read_yaml(config_path)
            logger.debug("Loaded configuration from %s", config_path)
        else:
            logger.warning("Configuration file not found: %s", config_path)

    session = dict(raw.get("session") or {})
    for key, env_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            session[key] = value

    missing = [key for key in ("session_id", "auth_token") if not session.get(key)]
    if missing:
        raise ConfigError(f"Missing configuration values: {', '.join(missing)}")

    time_on_page = session.get("time_on_page", DEFAULT_TIME_ON_PAGE)
    try:
        time_on_page = int(time_on_page)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"time_on_page must be an integer, got {time_on_page!r}") from exc

    return SessionConfig(
        session_id=str(session["session_id"]),
        auth_token=str(session["auth_token"]),
        base_url=session.get("base_url") or DEFAULT_BASE_URL,
        time_on_page=time_on_page,
        log_level=check_log_level((raw.get("logging") or {}).get("level", "INFO")),
    )
