"""Journal configuration loaded from TOML."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Mapping

import platformdirs
import tomli_w

from .collection import CollectionConfig
from .errors import ConfigNotFoundError, ConfigParseError
from .state import get_global, set_global
from .tag_config import TagConfig

_KNOWN_FIELDS = frozenset(
    {"data_dir", "use_unique_file_name", "index_file_names", "tags", "collections"}
)


def get_local_config_path(path: str | PathLike[str]) -> Path:
    """Return the configuration file inside a journal directory."""
    return Path(path) / ".bjim" / "config.toml"


def get_user_config_path() -> Path | None:
    """Return the per-user configuration file, or None if there is no config directory."""
    base = platformdirs.user_config_dir()
    if not base:
        return None
    return Path(base) / "bjim" / "config.toml"


def _table(name: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{name!r} must be a table")
    return value


@dataclass
class Config:
    """Settings of a journal.

    ``use_unique_file_name``: matching uses only file names, not directories.
    ``index_file_names``: file names such as ``index.md`` for which the parent
    directory stands in for the name in matching.
    """

    data_dir: Path = Path(".")
    dry_run: bool = False
    use_unique_file_name: bool = False
    index_file_names: set[str] = field(default_factory=set)
    tags: dict[str, TagConfig] = field(default_factory=dict)
    collections: dict[str, CollectionConfig] = field(default_factory=dict)

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> Config:
        unknown = sorted(set(data) - _KNOWN_FIELDS)
        if unknown:
            raise ValueError(f"unknown field {unknown[0]!r}")
        data_dir = data.get("data_dir", ".")
        if not isinstance(data_dir, str):
            raise ValueError("'data_dir' must be a string")
        unique = data.get("use_unique_file_name", False)
        if not isinstance(unique, bool):
            raise ValueError("'use_unique_file_name' must be a boolean")
        names = data.get("index_file_names", [])
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ValueError("'index_file_names' must be a list of strings")
        tags = {
            name: TagConfig.from_dict(_table(f"tags.{name}", value))
            for name, value in _table("tags", data.get("tags", {})).items()
        }
        collections = {
            name: CollectionConfig.from_dict(_table(f"collections.{name}", value))
            for name, value in _table("collections", data.get("collections", {})).items()
        }
        return cls(
            data_dir=Path(data_dir),
            use_unique_file_name=unique,
            index_file_names=set(names),
            tags=tags,
            collections=collections,
        )

    @classmethod
    def from_toml(cls, raw: str) -> Config:
        """Parse configuration text; a leading ``~`` in ``data_dir`` means the home directory.

        Raises ConfigParseError on invalid TOML or unknown or malformed fields.
        """
        try:
            data = tomllib.loads(raw)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(e) from e
        try:
            config = cls._from_mapping(data)
        except (ValueError, TypeError) as e:
            raise ConfigParseError(e) from e
        parts = config.data_dir.parts
        if parts[:1] == ("~",):
            config.data_dir = Path.home().joinpath(*parts[1:])
        return config

    @classmethod
    def from_path(cls, path: str | PathLike[str]) -> Config:
        """Load configuration from a file; raises ConfigNotFoundError if it cannot be read."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigNotFoundError(e) from e
        return cls.from_toml(text)

    @classmethod
    def from_journal_dir(cls, path: str | PathLike[str]) -> Config:
        """Load the journal's own configuration; an unset data_dir becomes ``path``."""
        config = cls.from_path(get_local_config_path(path))
        if config.data_dir == Path("."):
            config.data_dir = Path(path)
        return config

    @classmethod
    def from_path_and_journal_dir(
        cls, path: str | PathLike[str], journal_dir: str | PathLike[str]
    ) -> Config:
        """Load configuration from ``path`` and use ``journal_dir`` as data_dir."""
        config = cls.from_path(path)
        config.data_dir = Path(journal_dir)
        return config

    @classmethod
    def from_user_config(cls) -> Config:
        """Load the per-user configuration."""
        path = get_user_config_path()
        if path is None:
            raise ConfigNotFoundError("User config not found")
        return cls.from_path(path)

    @classmethod
    def current(cls) -> Config:
        """Return the process-wide configuration."""
        return get_global()

    def globalize(self) -> None:
        """Make this the process-wide configuration; raises ConfigError if one is set."""
        set_global(self)

    def show(self) -> None:
        """Print the configuration as TOML."""
        print(self.to_toml())

    def to_toml(self) -> str:
        """Serialise the configuration as TOML."""
        data: dict[str, Any] = {"data_dir": str(self.data_dir)}
        if self.dry_run:
            data["dry_run"] = True
        data["use_unique_file_name"] = self.use_unique_file_name
        if self.index_file_names:
            data["index_file_names"] = sorted(self.index_file_names)
        if self.tags:
            data["tags"] = {name: tag.to_dict() for name, tag in self.tags.items()}
        if self.collections:
            data["collections"] = {
                name: c.to_dict() for name, c in self.collections.items()
            }
        return tomli_w.dumps(data)