"""Runtime settings read from the environment.

Decisions:
- Real environment variables win over the optional project .env file.
- Unknown keys in .env are ignored; malformed lines are skipped.
- Nothing here affects how user input is routed; only presentation and
  diagnostics are configurable.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

ENV_PATH = Path(__file__).resolve().parent.parent / '.env'
ENV_PREFIX = 'CYBERGUARDIAN_'

DEFAULT_TYPING_DELAY_MS = 30
DEFAULT_LOG_LEVEL = 'WARNING'

logger = logging.getLogger(__name__)


def load_env_file(path: Path = ENV_PATH) -> Dict[str, str]:
    """Parse KEY=VALUE lines from a .env file (only CYBERGUARDIAN_* keys)."""
    values: Dict[str, str] = {}
    if not path.exists():
        return values
    try:
        text = path.read_text()
    except OSError as exc:
        logger.warning("could not read %s: %s", path, exc)
        return values
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        if k.startswith(ENV_PREFIX):
            values[k] = v.strip().strip('"').strip("'")
    return values


_ENV_OVERRIDES = load_env_file()


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Resolve a setting: real env var > .env override > default."""
    key = ENV_PREFIX + name
    return os.environ.get(key) or _ENV_OVERRIDES.get(key, default)


def _int_setting(name: str, default: int) -> int:
    raw = get_setting(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring non-integer %s%s=%r", ENV_PREFIX, name, raw)
        return default
    return max(0, value)


@dataclass
class Settings:
    typing_delay_ms: int = DEFAULT_TYPING_DELAY_MS
    welcome_sound: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load(cls) -> "Settings":
        level = (get_setting('LOG_LEVEL', DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(level), int):
            level = DEFAULT_LOG_LEVEL
        return cls(
            typing_delay_ms=_int_setting('TYPING_DELAY', DEFAULT_TYPING_DELAY_MS),
            welcome_sound=get_setting('WELCOME_SOUND') or None,
            log_level=level,
        )
