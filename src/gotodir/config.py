"""Configuration loading from environment variables and gotodir.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_DB_PATH = Path.home() / ".goto"
_DEFAULT_CONFIG_PATH = Path.home() / ".config" / "gotodir" / "gotodir.toml"


@dataclass
class GotoConfig:
    """Top-level gotodir configuration."""

    db_path: Path = _DEFAULT_DB_PATH
    log_level: str = "WARNING"


def load_config(config_path: Path | None = None) -> GotoConfig:
    """Load configuration from environment variables and optional gotodir.toml.

    Priority: environment variables > gotodir.toml > defaults.
    """
    file_data: dict = {}
    candidate = config_path or _DEFAULT_CONFIG_PATH
    if candidate.exists():
        file_data = tomllib.loads(candidate.read_text(encoding="utf-8"))

    db_path = os.getenv("GOTO_DB") or file_data.get("db_path") or str(_DEFAULT_DB_PATH)

    return GotoConfig(
        db_path=Path(db_path).expanduser(),
        log_level=os.getenv("GOTO_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )
