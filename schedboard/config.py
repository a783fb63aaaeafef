"""Configuration management."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from schedboard.errors import InvalidConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "schedboard" / "config.ini"
DEFAULT_DB_PATH = Path.home() / ".config" / "schedboard" / "schedboard.db"
DEFAULT_SORT_STEP = 10


def parse_step(value: str) -> int:
    """Validate a sort order step, which must be a positive integer."""
    try:
        step = int(value)
    except ValueError as e:
        msg = f"sort step must be an integer, got {value!r}"
        raise InvalidConfigError(msg) from e
    if step <= 0:
        msg = f"sort step must be positive, got {step}"
        raise InvalidConfigError(msg)
    return step


@dataclass
class Config:
    """Storage location and ordering settings."""

    db_path: Path = DEFAULT_DB_PATH
    sort_step: int = DEFAULT_SORT_STEP

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        try:
            db_path = os.environ["SCHEDBOARD_DB_PATH"]
        except KeyError:
            return None
        step = os.environ.get("SCHEDBOARD_SORT_STEP")
        return cls(
            db_path=Path(db_path),
            sort_step=parse_step(step) if step else DEFAULT_SORT_STEP,
        )

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path)
        section = config["schedboard"]
        return cls(
            db_path=Path(section.get("dbPath", str(DEFAULT_DB_PATH))),
            sort_step=parse_step(section.get("sortStep", str(DEFAULT_SORT_STEP))),
        )

    @classmethod
    def resolve(cls) -> "Config":
        """Environment first, then the config file, then defaults."""
        return cls.from_env() or cls.load() or cls()

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["schedboard"] = {
            "dbPath": str(self.db_path),
            "sortStep": str(self.sort_step),
        }
        with path.open("w") as config_file:
            config.write(config_file)
