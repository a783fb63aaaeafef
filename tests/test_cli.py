"""Tests for the command line entry point."""

import pytest

from schedboard.__main__ import main
from schedboard.database import MasterDatabase


@pytest.fixture
def cli_db(monkeypatch, tmp_path):
    """Point the CLI at a temporary database."""
    db_path = tmp_path / "cli.db"
    monkeypatch.setenv("SCHEDBOARD_DB_PATH", str(db_path))
    monkeypatch.delenv("SCHEDBOARD_SORT_STEP", raising=False)
    return MasterDatabase(db_path)


def test_holidays_command(capsys):
    """Lists a year's holidays."""
    assert main(["holidays", "2026"]) == 0
    out = capsys.readouterr().out
    assert "2026-02-11" in out
    assert "Substitute Holiday" in out


def test_calendar_command(capsys, cli_db):
    """Classifies each day of a range."""
    assert main(["calendar", "2026-02-21", "2026-02-24"]) == 0
    out = capsys.readouterr().out
    assert "2026-02-23" in out
    assert "holiday" in out
    assert "weekend" in out


def test_calendar_rejects_bad_date(cli_db):
    """Argument parsing refuses impossible dates."""
    with pytest.raises(SystemExit):
        main(["calendar", "2026-02-30", "2026-03-01"])


def test_add_and_move_commands(cli_db):
    """Entries can be appended and reordered."""
    assert main(["add", "channels", "A"]) == 0
    assert main(["add", "channels", "B"]) == 0
    a, b = cli_db.list_items("channels")

    assert main(["move", "channels", b.id, a.id, "before"]) == 0

    assert [item.name for item in cli_db.list_items("channels")] == ["B", "A"]


def test_seed_and_normalize_commands(cli_db):
    """Seeding fills defaults and normalizing keeps them spaced."""
    assert main(["seed"]) == 0
    assert len(cli_db.list_items("task_types")) == 10
    assert main(["normalize", "task_types"]) == 0
    assert [item.sort_order for item in cli_db.list_items("channels")] == [10, 20, 30]


def test_unsupported_resource_reports_error(capsys, cli_db):
    """Unknown resources exit non-zero with a message."""
    assert main(["masters", "scripts"]) == 1
    assert "Unsupported resource" in capsys.readouterr().out


def test_calendar_command_default_range(capsys, cli_db):
    """Without dates the window around today is shown."""
    assert main(["calendar"]) == 0
    assert "working_day" in capsys.readouterr().out


@pytest.mark.parametrize("step", ["ten", "0", "-5"])
def test_config_command_rejects_bad_step(monkeypatch, capsys, step):
    """An invalid step is reported instead of being saved."""
    answers = iter(["", step])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))

    assert main(["config"]) == 1
    assert "sort step must be" in capsys.readouterr().out
