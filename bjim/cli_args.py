"""Option groups shared by the command-line subcommands."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .config import Config
from .errors import ConfigError


def find_git_workdir(path: str | PathLike[str]) -> Path:
    """Return the working directory of the git repository containing ``path``.

    Raises FileNotFoundError if ``path`` is not inside a repository.
    """
    start = Path(path).resolve()
    for candidate in (start, *start.parents):
        if (candidate / ".git").exists():
            return candidate
    raise FileNotFoundError(f"could not find repository from {str(path)!r}")


@dataclass
class GlobalArgs:
    """Options accepted by every subcommand."""

    config_path: Path | None = None
    journal_dir: Path | None = None
    verbose: bool = False

    def to_config(self) -> Config:
        """Load the configuration these options point at.

        With a config path the file must load. Otherwise the journal's own
        configuration is tried (the given journal directory, else the git
        repository around the working directory) and defaults are used if it
        cannot be loaded. A given journal directory always becomes data_dir.
        Raises FileNotFoundError if neither option is given and the working
        directory is not inside a git repository.
        """
        if self.config_path is not None and self.journal_dir is not None:
            config = Config.from_path_and_journal_dir(self.config_path, self.journal_dir)
        elif self.config_path is not None:
            config = Config.from_path(self.config_path)
        else:
            journal = (
                self.journal_dir
                if self.journal_dir is not None
                else find_git_workdir(Path.cwd())
            )
            try:
                config = Config.from_journal_dir(journal)
            except ConfigError:
                config = Config()
        if self.journal_dir is not None:
            config.data_dir = Path(self.journal_dir)
        return config


@dataclass
class ModeArgs:
    """Options of subcommands that write files."""

    dry_run: bool = False
    interactive: bool = False
    force: bool = False

    def add_config(self, config: Config) -> None:
        """Apply these options to ``config``."""
        config.dry_run = self.dry_run


@dataclass
class PageArgs:
    """Filters for selecting pages."""

    date: str | None = None
    tags: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    title: str | None = None