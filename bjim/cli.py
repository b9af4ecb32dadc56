"""Command-line interface of the journal manager."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .cli_args import GlobalArgs, ModeArgs
from .config import Config
from .errors import ConfigError
from .journal import Journal
from .page import Page


def _add_global_options(parser: argparse.ArgumentParser, suppress: bool) -> None:
    extra = {"default": argparse.SUPPRESS} if suppress else {}
    parser.add_argument("-c", "--config-path", type=Path, **extra)
    parser.add_argument("-j", "--journal-dir", type=Path, **extra)
    parser.add_argument("-v", "--verbose", action="store_true", **extra)


def _add_mode_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-d", "--dry-run", action="store_true")
    parser.add_argument("-i", "--interactive", action="store_true")
    parser.add_argument("-f", "--force", action="store_true")


def _global_args(args: argparse.Namespace) -> GlobalArgs:
    return GlobalArgs(
        config_path=getattr(args, "config_path", None),
        journal_dir=getattr(args, "journal_dir", None),
        verbose=getattr(args, "verbose", False),
    )


def _mode_args(args: argparse.Namespace) -> ModeArgs:
    return ModeArgs(
        dry_run=args.dry_run, interactive=args.interactive, force=args.force
    )


def _globalize_quietly(config: Config) -> None:
    try:
        config.globalize()
    except ConfigError:
        pass


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(prog="bjim", description="Manage a bullet journal.")
    _add_global_options(parser, suppress=False)
    common = argparse.ArgumentParser(add_help=False)
    _add_global_options(common, suppress=True)

    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", parents=[common], help="list journal pages")
    check.add_argument("-o", "--open", action="store_true")
    check.set_defaults(func=run_check)

    config = commands.add_parser("config", parents=[common], help="show configuration")
    _add_mode_options(config)
    config.set_defaults(func=run_config)

    migrate = commands.add_parser("migrate", parents=[common], help="migrate pages")
    migrate.add_argument("-n", "--dry-run", action="store_true")
    migrate.add_argument("sources", nargs="+", type=Path, metavar="SOURCE")
    migrate.add_argument("destination", type=Path, metavar="DESTINATION")
    migrate.set_defaults(func=run_migrate)

    listing = commands.add_parser("list", parents=[common], help="list pages with open tasks")
    listing.add_argument("-t", "--task-open", action="store_true")
    listing.set_defaults(func=run_list)

    collection = commands.add_parser("collection", parents=[common], help="use collections")
    collection_commands = collection.add_subparsers(dest="collection_command", required=True)
    collection_migrate = collection_commands.add_parser(
        "migrate", parents=[common], help="migrate files based on collections"
    )
    collection_migrate.add_argument("-n", "--dry-run", action="store_true")
    collection_migrate.add_argument("collections", nargs="*")
    collection_migrate.set_defaults(func=run_collection_migrate)

    update = commands.add_parser("update", parents=[common], help="update the journal")
    _add_mode_options(update)
    update.add_argument("--push", action="store_true")
    update.add_argument("--pull", action="store_true")
    update.set_defaults(func=run_update)

    return parser


def run_check(args: argparse.Namespace) -> None:
    """Print the path of every page in the journal."""
    _globalize_quietly(_global_args(args).to_config())
    journal = Journal()
    for page in journal.pages:
        print(page.path)


def run_config(args: argparse.Namespace) -> None:
    """Print the effective configuration."""
    config = _global_args(args).to_config()
    _mode_args(args).add_config(config)
    try:
        config.globalize()
    except ConfigError as e:
        print(e, file=sys.stderr)
    else:
        Config.current().show()


def run_list(args: argparse.Namespace) -> None:
    """Print the path of every page holding an open task."""
    _globalize_quietly(_global_args(args).to_config())
    journal = Journal()
    journal.read()
    for page in journal.pages:
        if page.has_open_task:
            print(page.path)


def _source_pages(paths: Sequence[Path]) -> list[Page]:
    pages: list[Page] = []
    for path in paths:
        if path.is_file():
            pages.append(Page(path))
        elif path.is_dir():
            pages.extend(Page(p) for p in sorted(path.iterdir()) if p.is_file())
        else:
            raise FileNotFoundError(f"source not found: {path}")
    return pages


def run_migrate(args: argparse.Namespace) -> None:
    """Migrate open tasks from the source pages to the destination."""
    print("Execute migrate")
    _globalize_quietly(_global_args(args).to_config())
    src_paths: list[Path] = list(args.sources)
    dst_path: Path = args.destination
    if len(src_paths) > 2:
        if dst_path.is_file():
            print("Destination is not dir!")
        elif not dst_path.exists():
            dst_path.mkdir()
        if not dst_path.is_dir():
            raise NotADirectoryError(f"destination is not a directory: {dst_path}")

    src_pages = _source_pages(src_paths)
    if dst_path.is_dir():
        dst_pages = [Page(dst_path / page.path.name) for page in src_pages]
    else:
        dst_pages = [Page(dst_path)]
    if len(src_pages) != len(dst_pages):
        raise ValueError(
            f"{len(src_pages)} source pages cannot be migrated to {len(dst_pages)} destinations"
        )
    for src_page, dst_page in zip(src_pages, dst_pages):
        src_page.read()
        src_page.migrate_to(dst_page)
        if not args.dry_run:
            src_page.write()
            dst_page.write()


def run_collection_migrate(args: argparse.Namespace) -> None:
    """Migrate the named collections, or every auto-migrated one if none is named."""
    try:
        _global_args(args).to_config().globalize()
    except ConfigError as e:
        print(e, file=sys.stderr)
    journal = Journal()
    journal.reload()
    if not args.collections:
        journal.migrate_collections()
    else:
        for name in args.collections:
            journal.migrate_collection(name)


def run_update(args: argparse.Namespace) -> None:
    """Show the configuration and bring the journal up to date."""
    try:
        _global_args(args).to_config().globalize()
    except ConfigError as e:
        print(e, file=sys.stderr)
    else:
        Config.current().show()
    journal = Journal()
    journal.reload()
    journal.update()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s %(name)s] %(message)s")
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except (ConfigError, ValueError, RuntimeError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())