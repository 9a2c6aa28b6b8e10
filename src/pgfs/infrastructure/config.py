"""Configuration constants and .env parsing."""

from __future__ import annotations

import os
from pathlib import Path


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Parse .env file and return values for requested keys.

    Does NOT load into os.environ — callers decide what to do with values.
    """
    env_file = Path.cwd() / ".env"
    try:
        content = env_file.read_text()
    except OSError:
        return {}

    result: dict[str, str] = {}
    wanted = set(keys)

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        eq_idx = trimmed.find("=")
        if eq_idx == -1:
            continue
        key = trimmed[:eq_idx].strip()
        if key not in wanted:
            continue
        value = trimmed[eq_idx + 1 :].strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if value:
            result[key] = value

    return result


def get_setting(name: str, default: str, env_config: dict[str, str] | None = None) -> str:
    """Resolve a setting: process environment first, then .env, then the default."""
    if env_config is None:
        env_config = read_env_file([name])
    return os.environ.get(name) or env_config.get(name, default)


# Read config values from .env (falls back to os.environ).
_env_config = read_env_file(["LOG_LEVEL", "PGFS_FUNCTION_NAME", "PGFS_DATABASE"])

LOG_LEVEL: str = get_setting("LOG_LEVEL", "INFO", _env_config).upper()
FUNCTION_NAME: str = get_setting("PGFS_FUNCTION_NAME", "pgfs_copy_dir", _env_config)
DATABASE_PATH: str = get_setting("PGFS_DATABASE", ":memory:", _env_config)
