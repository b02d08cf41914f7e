"""Settings loaded from environment variables (+ optional project .env file).

Priority: real environment variable > .env entry > default. The .env file is
read from the project root (next to src/) and only TODO_* keys are honored.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

ENV_PREFIX = "TODO"
ENV_FILE = Path(__file__).resolve().parent.parent / '.env'


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def read_env_file(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    if not path.exists():
        return values
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        if k.startswith(ENV_PREFIX + "_"):
            values[k] = v.strip().strip('"').strip("'")
    return values


def _lookup(name: str, file_values: Dict[str, str]) -> Optional[str]:
    v = os.getenv(name)
    if v is not None:
        return v
    return file_values.get(name)


def _truthy(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    banner: bool = True


def load_settings(env_file: Path = ENV_FILE) -> Settings:
    file_values = read_env_file(env_file)
    log_level = (_lookup(_k("LOG_LEVEL"), file_values) or "WARNING").strip().upper()
    raw_file = _lookup(_k("LOG_FILE"), file_values)
    log_file = Path(raw_file).expanduser() if raw_file and raw_file.strip() else None
    banner = _truthy(_lookup(_k("BANNER"), file_values), True)
    return Settings(log_level=log_level, log_file=log_file, banner=banner)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, resolved once."""
    return load_settings()
