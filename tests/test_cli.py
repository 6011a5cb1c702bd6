"""
Tests for the click CLI and the interactive menu.
"""

import pytest
from click.testing import CliRunner

from ebookshelf import cli
from ebookshelf.activity_log import ActivityLog
from ebookshelf.errors import RepositoryNotReadyError
from ebookshelf.models import Book


@pytest.fixture
def runner():
    return CliRunner()


def _run(runner, settings_file, args=(), user_input=None):
    return runner.invoke(
        cli.main, ["--settings", str(settings_file), *args], input=user_input
    )


def test_import_command(runner, settings_file, books_csv):
    result = _run(runner, settings_file, ["import", str(books_csv)])

    assert result.exit_code == 0, result.output
    assert "Imported 3 books (2 skipped)" in result.output
    assert "Neuromancer" in result.output


def test_import_command_verbose(runner, settings_file, books_csv):
    result = _run(runner, settings_file, ["import", "--verbose", str(books_csv)])

    assert result.exit_code == 0, result.output
    assert "Added: #1" in result.output
    assert "Skipped: Orphan Title" in result.output


def test_import_missing_file(runner, settings_file, tmp_path):
    result = _run(runner, settings_file, ["import", str(tmp_path / "nope.csv")])
    assert result.exit_code != 0


def test_activity_command(runner, settings_file, tmp_path):
    ActivityLog(tmp_path / "activity.log").record(
        "create", "cli", Book.create(4, "Dune", "Frank Herbert", "", "EPUB")
    )

    result = _run(runner, settings_file, ["activity"])

    assert result.exit_code == 0, result.output
    assert "create" in result.output
    assert "Dune" in result.output


def test_activity_command_empty(runner, settings_file):
    result = _run(runner, settings_file, ["activity"])
    assert "No activity recorded." in result.output


def test_menu_add_list_delete(runner, settings_file, tmp_path):
    user_input = "\n".join(
        [
            "a", "  Dune ", "Frank Herbert", "Science Fiction", "EPUB",
            "a", "Emma", "Jane Austen", "", "",
            "l",
            "d", "1",
            "s", "emma",
            "q",
        ]
    ) + "\n"

    result = _run(runner, settings_file, user_input=user_input)

    assert result.exit_code == 0, result.output
    assert "Added #1: Dune" in result.output
    assert "Added #2: Emma" in result.output
    assert "Deleted #1" in result.output
    assert "Goodbye!" in result.output

    actions = [e.action for e in ActivityLog(tmp_path / "activity.log").recent()]
    assert sorted(actions) == ["create", "create", "delete"]


def test_menu_reports_errors(runner, settings_file, tmp_path):
    user_input = "\n".join(
        [
            "a", "   ", "Someone", "", "",
            "d", "0",
            "d", "abc", "7",
            "q",
        ]
    ) + "\n"

    result = _run(runner, settings_file, user_input=user_input)

    assert result.exit_code == 0, result.output
    assert "Title and author are required" in result.output
    assert "Invalid book id: 0" in result.output
    assert "No book found with id 7" in result.output
    assert ActivityLog(tmp_path / "activity.log").recent() == []


def test_missing_repository_aborts(runner, settings_file, monkeypatch):
    def broken_service(repository=None):
        raise RepositoryNotReadyError("Book repository is not initialised")

    monkeypatch.setattr(cli, "build_service", broken_service)

    result = _run(runner, settings_file)

    assert result.exit_code == 1
    assert "not initialised" in result.output


def test_import_command_logs_import(runner, settings_file, books_csv, tmp_path):
    result = _run(runner, settings_file, ["import", str(books_csv)])

    assert result.exit_code == 0, result.output
    entries = ActivityLog(tmp_path / "activity.log").recent()
    assert [e.action for e in entries] == ["import"]
    assert entries[0].details == {"file": str(books_csv), "added": 3, "skipped": 2}


def test_import_command_unreadable_csv(runner, settings_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "empty.csv").write_text("")

    result = _run(runner, settings_file, ["import", "empty.csv"])

    assert result.exit_code == 1
    assert "empty.csv has no CSV data" in result.output
    assert ActivityLog(tmp_path / "activity.log").recent() == []


def test_menu_survives_unreadable_csv(runner, settings_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "empty.csv").write_text("")
    user_input = "\n".join(
        [
            "a", "Dune", "Frank Herbert", "", "",
            "i", "empty.csv",
            "l",
            "q",
        ]
    ) + "\n"

    result = _run(runner, settings_file, user_input=user_input)

    assert result.exit_code == 0, result.output
    assert "empty.csv has no CSV data" in result.output
    assert result.output.count("Dune") >= 2
    assert "Goodbye!" in result.output

    actions = [e.action for e in ActivityLog(tmp_path / "activity.log").recent()]
    assert actions == ["create"]


def test_menu_import_is_logged(runner, settings_file, books_csv, tmp_path):
    user_input = "\n".join(["i", str(books_csv), "q"]) + "\n"

    result = _run(runner, settings_file, user_input=user_input)

    assert result.exit_code == 0, result.output
    entries = ActivityLog(tmp_path / "activity.log").recent()
    assert [e.action for e in entries] == ["import"]
    assert entries[0].details["added"] == 3
