"""Collections: regularly created logs such as a daily log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from .page import Page
from .period import Period
from .period_format import PeriodFormat

if TYPE_CHECKING:
    from .config import Config


def _format_from(name: str, value: Any) -> PeriodFormat | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"collection option {name!r} must be a string, got {value!r}")
    return PeriodFormat(value)


def _latest(
    fmt: PeriodFormat | None, exists: Iterable[str | PathLike[str]]
) -> tuple[Path, Period] | None:
    if fmt is None:
        return None
    latest = fmt.find_latest_path(exists)
    if latest is None:
        return None
    period = fmt.get_period(str(latest))
    if period is None:
        return None
    return latest, period


@dataclass
class CollectionConfig:
    """Settings of one collection.

    ``archetype_path``: template file for pages created without migration.
    ``auto_migration``: the collection is migrated by the update command.
    ``path``: format of the working page path.
    ``archive_path``: format of the archived page path.
    """

    archetype_path: Path | None = None
    auto_migration: bool = False
    path: PeriodFormat | None = None
    archive_path: PeriodFormat | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CollectionConfig:
        """Build a collection from a mapping; missing keys take their defaults."""
        archetype = data.get("archetype_path")
        if archetype is not None and not isinstance(archetype, str):
            raise ValueError("collection option 'archetype_path' must be a string")
        auto_migration = data.get("auto_migration", False)
        if not isinstance(auto_migration, bool):
            raise ValueError("collection option 'auto_migration' must be a boolean")
        return cls(
            archetype_path=Path(archetype) if archetype is not None else None,
            auto_migration=auto_migration,
            path=_format_from("path", data.get("path")),
            archive_path=_format_from("archive_path", data.get("archive_path")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a mapping suitable for serialisation; unset options are omitted."""
        result: dict[str, Any] = {}
        if self.archetype_path is not None:
            result["archetype_path"] = str(self.archetype_path)
        result["auto_migration"] = self.auto_migration
        if self.path is not None:
            result["path"] = self.path.format
        if self.archive_path is not None:
            result["archive_path"] = self.archive_path.format
        return result

    def get_path(self, date: date) -> Path | None:
        """Return the working path for ``date``, else the archive path, else None."""
        working = self.get_working_path(date)
        return working if working is not None else self.get_archive_path(date)

    def get_working_path(self, date: date) -> Path | None:
        """Return the working path for ``date``, or None without a working format."""
        return self.path.get_path(date) if self.path is not None else None

    def get_archive_path(self, date: date) -> Path | None:
        """Return the archive path for ``date``, or None without an archive format."""
        return self.archive_path.get_path(date) if self.archive_path is not None else None

    def get_latest_path_period(
        self, exists: Iterable[str | PathLike[str]]
    ) -> tuple[Path, Period] | None:
        """Return the latest working page and its period, else the latest archived one."""
        exists = list(exists)
        working = self.get_latest_working_path_period(exists)
        return working if working is not None else self.get_latest_archive_path_period(exists)

    def get_latest_working_path_period(
        self, exists: Iterable[str | PathLike[str]]
    ) -> tuple[Path, Period] | None:
        """Return the latest path matching the working format and its period."""
        return _latest(self.path, exists)

    def get_latest_archive_path_period(
        self, exists: Iterable[str | PathLike[str]]
    ) -> tuple[Path, Period] | None:
        """Return the latest path matching the archive format and its period."""
        return _latest(self.archive_path, exists)

    def migrate(self, config: Config, exists: Iterable[str | PathLike[str]]) -> None:
        """Migrate the latest page of the collection to today's page.

        Raises RuntimeError if no page of the collection exists or if the
        latest one already covers today.
        """
        today = date.today()
        latest = self.get_latest_path_period(exists)
        if latest is None:
            raise RuntimeError("Latest page is not found")
        latest_path, period = latest
        if period.contains(today):
            raise RuntimeError("Migration is not needed")

        relative = self.get_path(today)
        if relative is None:
            raise RuntimeError("Collection has no path format")
        latest_page = Page(latest_path)
        today_page = Page(Path(config.data_dir) / relative)
        latest_page.read()
        latest_page.migrate_to(today_page)
        if not config.dry_run:
            latest_page.write()
            today_page.write()

        if self.archive_path is not None:
            archive = self.archive_path.get_path(period.start)
            if archive != latest_path:
                latest_path.rename(archive)