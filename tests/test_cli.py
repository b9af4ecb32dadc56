from datetime import date
from pathlib import Path

import pytest

from bjim.cli import build_parser, main
from bjim.state import get_global, reset_global


@pytest.fixture(autouse=True)
def _fresh_state():
    reset_global()
    yield
    reset_global()


def test_parser_splits_sources_and_destination():
    args = build_parser().parse_args(["migrate", "a", "b", "c"])
    assert args.sources == [Path("a"), Path("b")]
    assert args.destination == Path("c")
    assert args.dry_run is False


def test_parser_accepts_global_option_after_subcommand():
    args = build_parser().parse_args(["check", "-j", "journal"])
    assert args.journal_dir == Path("journal")


def test_parser_accepts_global_option_before_subcommand():
    args = build_parser().parse_args(["-j", "journal", "list", "-t"])
    assert args.journal_dir == Path("journal")
    assert args.task_open is True


def test_parser_rejects_migrate_with_single_path():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["migrate", "only"])


def test_parser_requires_subcommand():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_check_lists_markdown_pages(tmp_path, capsys):
    (tmp_path / "a.md").write_text("text\n", encoding="utf-8")
    (tmp_path / "b.txt").write_text("text\n", encoding="utf-8")
    assert main(["check", "-j", str(tmp_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(tmp_path / "a.md")]
    assert get_global().data_dir == tmp_path


def test_list_prints_pages_with_open_tasks(tmp_path, capsys):
    (tmp_path / "open.md").write_text("- [ ] Task\n", encoding="utf-8")
    (tmp_path / "done.md").write_text("- [x] Task\n", encoding="utf-8")
    assert main(["list", "-j", str(tmp_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(tmp_path / "open.md")]


def test_config_shows_dry_run(tmp_path, capsys):
    assert main(["config", "-j", str(tmp_path), "-d"]) == 0
    out = capsys.readouterr().out
    assert "dry_run = true" in out
    assert get_global().dry_run is True


def test_migrate_moves_open_tasks(tmp_path, capsys):
    src = tmp_path / "src.md"
    dst = tmp_path / "out" / "dst.md"
    src.write_text("- [ ] Task\n- [x] Done\n", encoding="utf-8")
    assert main(["migrate", "-j", str(tmp_path), str(src), str(dst)]) == 0
    assert "Execute migrate" in capsys.readouterr().out
    assert "- [>] Task" in src.read_text(encoding="utf-8")
    written = dst.read_text(encoding="utf-8")
    assert "- [ ] Task" in written
    assert "Done" not in written


def test_migrate_dry_run_writes_nothing(tmp_path):
    src = tmp_path / "src.md"
    dst = tmp_path / "dst.md"
    original = "- [ ] Task\n"
    src.write_text(original, encoding="utf-8")
    assert main(["migrate", "-n", "-j", str(tmp_path), str(src), str(dst)]) == 0
    assert src.read_text(encoding="utf-8") == original
    assert not dst.exists()


def test_migrate_missing_source_fails(tmp_path):
    assert main(["migrate", "-j", str(tmp_path), str(tmp_path / "no.md"), str(tmp_path / "d.md")]) == 1


def test_migrate_two_sources_to_file_fails(tmp_path):
    first = tmp_path / "one.md"
    second = tmp_path / "two.md"
    first.write_text("- [ ] A\n", encoding="utf-8")
    second.write_text("- [ ] B\n", encoding="utf-8")
    code = main(["migrate", "-j", str(tmp_path), str(first), str(second), str(tmp_path / "x.md")])
    assert code == 1


def test_collection_migrate_unknown_name_fails(tmp_path):
    assert main(["collection", "migrate", "-j", str(tmp_path), "Nothing"]) == 1


def test_collection_migrate_creates_todays_page(tmp_path):
    (tmp_path / ".bjim").mkdir()
    (tmp_path / ".bjim" / "config.toml").write_text(
        '[collections.Daily]\nauto_migration = true\npath = "daily/%Y-%m-%d.md"\n',
        encoding="utf-8",
    )
    (tmp_path / "daily").mkdir()
    old = tmp_path / "daily" / "2000-01-01.md"
    old.write_text("- [ ] Task\n- [x] Done\n", encoding="utf-8")
    assert main(["collection", "migrate", "-j", str(tmp_path)]) == 0
    today = tmp_path / "daily" / date.today().strftime("%Y-%m-%d.md")
    written = today.read_text(encoding="utf-8")
    assert "- [ ] Task" in written
    assert "Done" not in written
    assert "- [>] Task" in old.read_text(encoding="utf-8")


def test_update_shows_config_and_migrates(tmp_path, capsys):
    assert main(["update", "-j", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Migrating regular log" in out
    assert "data_dir" in out