"""
Runtime settings for the hsacl command line.

Each value comes from the command line when given, otherwise from the
environment, otherwise from the defaults below:

- HSACL_DIR        base directory holding profiles/ (default: current directory)
- HSACL_OUTPUT     file that `apply` overwrites (default: ./acl.hujson)
- HSACL_LOG_LEVEL  logging level name (default: WARNING)
- HSACL_LOG_FILE   optional log file, rotated at 1 MB
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_BASE_DIR = "."
DEFAULT_OUTPUT = "acl.hujson"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    base_dir: Path
    output_path: Path
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None


def _pick(explicit: Optional[str], env: Mapping[str, str], key: str, default: Optional[str]) -> Optional[str]:
    if explicit:
        return explicit
    value = env.get(key, "").strip()
    return value or default


def load_settings(
    base_dir: Optional[str] = None,
    output_path: Optional[str] = None,
    log_level: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Resolve settings from explicit values, then the environment, then defaults."""
    if env is None:
        env = os.environ

    log_file = _pick(None, env, "HSACL_LOG_FILE", None)
    return Settings(
        base_dir=Path(_pick(base_dir, env, "HSACL_DIR", DEFAULT_BASE_DIR)),
        output_path=Path(_pick(output_path, env, "HSACL_OUTPUT", DEFAULT_OUTPUT)),
        log_level=_pick(log_level, env, "HSACL_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_file=Path(log_file) if log_file else None,
    )
