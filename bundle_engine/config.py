"""Bundle engine settings: process environment first, then ./.env, then defaults."""

from __future__ import annotations

import os
from pathlib import Path

SETTING_KEYS = ("LOG_LEVEL", "BUNDLE_TEXT_ENCODING")


def read_env_file(keys: list[str], env_file: Path | None = None) -> dict[str, str]:
    """Return the requested KEY=value pairs from a .env file without exporting them."""
    try:
        lines = (env_file or Path.cwd() / ".env").read_text(encoding="utf-8").splitlines()
    except OSError:
        return {}

    found: dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or key.startswith("#") or key not in keys:
            continue
        value = value.strip().strip("'\"")
        if value:
            found[key] = value
    return found


def get_setting(key: str, default: str, env_config: dict[str, str] | None = None) -> str:
    """Resolve a setting: process environment, then .env, then default."""
    if env_config is None:
        env_config = read_env_file([key])
    return os.environ.get(key) or env_config.get(key, default)


_env_config = read_env_file(list(SETTING_KEYS))

LOG_LEVEL: str = get_setting("LOG_LEVEL", "INFO", _env_config).upper()
TEXT_ENCODING: str = get_setting("BUNDLE_TEXT_ENCODING", "utf-8", _env_config)
