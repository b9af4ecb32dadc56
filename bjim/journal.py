"""A journal: the markdown pages under the configured data directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .page import Page
from .state import get_global

logger = logging.getLogger(__name__)


class Journal:
    """The pages of the process-wide configured journal."""

    def __init__(self) -> None:
        self.pages: list[Page] = []
        self.reload()

    def reload(self) -> None:
        """Add a page for every ``.md`` file under the data directory."""
        data_dir = Path(get_global().data_dir)
        for root, _dirs, files in os.walk(data_dir):
            for name in files:
                path = Path(root) / name
                if path.suffix == ".md":
                    self.pages.append(Page(path))

    def read(self) -> None:
        """Read every page from disk."""
        for page in self.pages:
            page.read()

    def update(self) -> None:
        """Bring the journal up to date by migrating the regular logs."""
        print("Migrating regular log")
        try:
            self.migrate_collections()
        except (ValueError, RuntimeError, OSError) as e:
            logger.warning("%s", e)
        else:
            logger.info("done")

    def migrate_collections(self) -> None:
        """Migrate every collection configured for automatic migration."""
        for name, collection in get_global().collections.items():
            if collection.auto_migration:
                self.migrate_collection(name)

    def migrate_collection(self, name: str) -> None:
        """Migrate one collection; a migration that cannot run is logged and skipped.

        Raises ValueError if no collection of that name is configured.
        """
        config = get_global()
        paths = [page.path for page in self.pages]
        logger.debug("Migrating: %s", name)
        collection = config.collections.get(name)
        if collection is None:
            raise ValueError(f"Template {name} is nothing in configure")
        try:
            collection.migrate(config, paths)
        except (RuntimeError, OSError):
            logger.info("Skip Migration: %s", name)
        else:
            logger.info("Done migration: %s", name)