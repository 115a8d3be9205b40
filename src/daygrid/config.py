"""Configuration management for daygrid."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.tasks import COMPLETED_SUFFIX, DEFAULT_CATEGORIES

logger = logging.getLogger(__name__)

DAYGRID_HOME = Path(os.environ.get("DAYGRID_HOME", Path.home() / "daygrid"))
CONFIG_FILE = DAYGRID_HOME / "config" / "daygrid.conf"
DATA_DIR = DAYGRID_HOME / "data"


@dataclass
class Config:
    """daygrid configuration."""

    tasks_file: str = str(DATA_DIR / "tasks.json")
    categories: list[str] = field(default_factory=lambda: list(DEFAULT_CATEGORIES))
    completed_suffix: str = COMPLETED_SUFFIX


def _strip_value(value: str) -> str:
    """Unquote a value and drop any inline comment."""
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from daygrid.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _strip_value(value.strip())

        match key:
            case "tasks_file":
                config.tasks_file = value
            case "categories":
                config.categories = [c.strip() for c in value.split(",") if c.strip()]
            case "completed_suffix":
                config.completed_suffix = value
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
