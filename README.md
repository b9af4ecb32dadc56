# bjim

`bjim` manages a journal kept as Markdown files, in the style of a bullet journal.

- It lists the pages that still hold open tasks.
- It carries unfinished tasks over from one page to another.
- It keeps periodic collections, such as a daily log, up to date.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
```

## Configuration

The configuration is a TOML file. It is found as follows:

- With `--config-path PATH`, that file is loaded. It must exist and parse.
- Otherwise `.bjim/config.toml` is tried inside the journal directory. That directory is the one given with `--journal-dir`, or else the root of the git work tree around the current directory. If that file cannot be loaded, the built-in defaults are used.
- A directory given with `--journal-dir` always becomes `data_dir`.

If neither option is given and the current directory is not inside a git repository, the command fails.

```toml
data_dir = "."

[tags.Daily]
repeat = true

[collections.Dailylog]
auto_migration = true
path = "dailylog/%Y/%m/%d.md"
archive_path = "archive/%Y/%m/%d.md"
```

### Top-level keys

Unknown top-level keys are rejected.

- `data_dir`: the root of the journal. A leading `~` is expanded to your home directory. When the file is loaded from a journal directory and `data_dir` is `"."`, the journal directory is used.
- `use_unique_file_name`, `index_file_names`: read and shown by `bjim config`. Nothing else uses them yet.

### Tags

`tags.<name>` holds the settings for one tag:

- `repeat`: default `false`.
- `inherit`: default `true`.
- `migrate`: default `true`.
- `value_type`: one of `None`, `Date`, `Time`, `DateTime`, `Number`.
- `assigned`: one of `StartDate`, `CloseDate`, `DueDate`, `Date`.

Of these, only `repeat` affects migration. A closed task that carries `#<name>` for a repeating tag is kept and reopened.

### Collections

`collections.<name>` describes a periodic log:

- `auto_migration`: default `false`. The collection is migrated by `bjim update` and by `bjim collection migrate` run without names.
- `path`: the date format of the working page.
- `archive_path`: the date format of the archived page.
- `archetype_path`: read and shown by `bjim config`, but not used.

A date format must contain `%Y` or `%G`. These fields are understood:

- `%Y`, `%m` and `%d` give yearly, monthly or daily periods.
- `%G` and `%V` give ISO-week periods, or ISO years if `%V` is absent.

## Task markers

| Marker  | Status      |
|---------|-------------|
| `- [ ]` | open        |
| `- [x]` | closed      |
| `- [>]` | migrated    |
| `- [<]` | scheduled   |
| `- [/]` | in progress |
| `- [-]` | canceled    |

## Usage

Every command accepts these options:

- `-c/--config-path PATH`
- `-j/--journal-dir DIR`
- `-v/--verbose`

```
bjim check                        # print the path of every .md page under data_dir
bjim list                         # print pages that contain "- [ ] "
bjim config                       # print the effective configuration as TOML
bjim config -d                    # the same, with dry_run = true
bjim migrate SRC... DST           # migrate open tasks from SRC pages to DST
bjim migrate -n old.md new.md     # dry run: migrate in memory, write nothing
bjim collection migrate           # migrate every collection with auto_migration
bjim collection migrate Dailylog  # migrate the named collections
bjim update                       # show the configuration, then migrate auto collections
```

### `bjim migrate`

- A source that is a directory contributes each file directly inside it.
- If the destination is a directory, each source page goes to a file of the same name in it.
- With more than two sources, a missing destination directory is created.

### Collection migration

A collection is migrated only under two conditions:

- a page matching its format exists;
- the period of the latest such page does not include today.

The latest page is migrated to today's page under `data_dir`. With an `archive_path`, the latest page is then renamed to the archive path of its period. That archive path is taken relative to the current directory. A collection that cannot be migrated is logged and skipped.

### Exit status

`bjim` exits with status 1 and prints `error: ...` on configuration, file or migration errors.

### What a migration does

- Open tasks on the source page are marked as migrated (`[>]`).
- The new page keeps only these lines:
  - headings and blank lines;
  - open tasks;
  - in-progress tasks;
  - closed tasks carrying a repeating tag.
- On the new page, migrated and closed markers become open.
- Front matter (between `---` lines) is copied to the new page. Every `YYYY-MM-DD` date in it is set to today.

## Library use

```python
from datetime import date
from pathlib import Path

from bjim.config import Config
from bjim.journal import Journal
from bjim.period_format import PeriodFormat

Config.from_journal_dir(Path.home() / "journal").globalize()
journal = Journal()
journal.read()
open_pages = [page.path for page in journal.pages if page.has_open_task]

fmt = PeriodFormat("dailylog/%Y/%m/%d")
print(fmt.get_path(date(2022, 1, 1)))          # dailylog/2022/01/01
print(fmt.get_period("dailylog/2022/06/15"))   # Period(start=..., end=...)
```

## Not provided

- `update --push`, `update --pull`, `check --open`, `list --task-open`, and `--interactive`/`--force` are accepted but do nothing. There is no syncing with a remote repository.
- Pages cannot be filtered by date, tag, category or title.
- No page is created from an archetype, and no link to the current log is maintained.