"""Environment-backed settings for Yabber.

Recognised variables:
    - `YABBER_LOG_LEVEL`
    - `YABBER_GAME` (explicit game profile, skips detection)
    - `YABBER_DESCRIPTOR_NAME`
    - `YABBER_NO_BACKUP`
"""

import os
from typing import Optional, Mapping

from .constants import DEFAULT_DESCRIPTOR_NAME


def env_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class YabberSettings:
    """Resolve environment configuration for yabber."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._environ.get(key, default)

    def log_level(self) -> Optional[str]:
        return self.get("YABBER_LOG_LEVEL")

    def game(self) -> Optional[str]:
        value = (self.get("YABBER_GAME") or "").strip()
        return value or None

    def descriptor_name(self) -> str:
        return self.get("YABBER_DESCRIPTOR_NAME") or DEFAULT_DESCRIPTOR_NAME

    def backups_enabled(self) -> bool:
        return not env_bool(self.get("YABBER_NO_BACKUP"), False)
