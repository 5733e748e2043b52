import json

import pytest
from typer.testing import CliRunner

from habitlog import configuration
from habitlog.initialize import initialize
from habitlog.repository.configuration import CONFIGURATION_REPO
from habitlog.repository.entry import get_entry_repository, set_entry_repository
from habitlog.terminal.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path, monkeypatch):
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    initialize()
    CONFIGURATION_REPO.reload()
    set_entry_repository(None)
    yield
    set_entry_repository(None)
    CONFIGURATION_REPO.reload()


def _entries():
    return get_entry_repository().get_all_entries()


def test_add_and_list():
    result = runner.invoke(app, ["entry", "add", "読書", "--tag", "学習", "-v", "42"])
    assert result.exit_code == 0, result.output

    entries = _entries()
    assert len(entries) == 1
    assert entries[0]["title"] == "読書"
    assert entries[0]["tags"] == ["学習"]
    assert entries[0]["value"] == 42

    result = runner.invoke(app, ["e", "ls", "--tag", "学習"])
    assert result.exit_code == 0
    assert "読書" in result.output


def test_add_with_comma_tags_and_bad_value():
    result = runner.invoke(app, ["entry", "add", "Run", "-tg", "a, b", "-v", "lots"])
    assert result.exit_code == 0, result.output
    assert _entries()[0]["tags"] == ["a", "b"]
    assert _entries()[0]["value"] == 0


def test_add_rejects_blank_title():
    result = runner.invoke(app, ["entry", "add", "   "])
    assert result.exit_code == 1
    assert "title" in result.output
    assert _entries() == []


def test_add_rejects_bad_date():
    result = runner.invoke(app, ["entry", "add", "Run", "--date", "not-a-date"])
    assert result.exit_code == 1
    assert _entries() == []


def test_modify_and_delete():
    runner.invoke(app, ["entry", "add", "Run", "--note", "slow", "-v", "5"])
    entry_id = _entries()[0]["id"]

    result = runner.invoke(app, ["entry", "modify", entry_id, "-v", "9", "-rn"])
    assert result.exit_code == 0, result.output
    entry = _entries()[0]
    assert entry["value"] == 9
    assert entry["title"] == "Run"
    assert "note" not in entry

    result = runner.invoke(app, ["entry", "delete", entry_id])
    assert result.exit_code == 0
    assert _entries() == []


def test_modify_unknown_id_is_not_an_error():
    result = runner.invoke(app, ["entry", "modify", "nope", "-v", "1"])
    assert result.exit_code == 0
    assert "No entry" in result.output


def test_export_import_round_trip(tmp_path):
    runner.invoke(app, ["entry", "add", "瞑想", "-v", "3"])
    runner.invoke(app, ["entry", "add", "筋トレ", "-v", "8"])
    before = _entries()

    export_path = tmp_path / "export.json"
    result = runner.invoke(app, ["data", "export", "-o", str(export_path)])
    assert result.exit_code == 0
    assert json.loads(export_path.read_text(encoding="utf-8")) == {"entries": before}

    runner.invoke(app, ["data", "reset", "--yes"])
    assert _entries() == []

    result = runner.invoke(app, ["data", "import", str(export_path)])
    assert result.exit_code == 0, result.output
    assert _entries() == before


@pytest.mark.parametrize("text", ['{"foo": []}', '{"entries": [1]}'])
def test_import_rejects_malformed_file(tmp_path, text):
    runner.invoke(app, ["entry", "add", "瞑想"])
    before = _entries()

    bad = tmp_path / "bad.json"
    bad.write_text(text, encoding="utf-8")
    result = runner.invoke(app, ["data", "import", str(bad)])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert _entries() == before


def test_export_to_stdout():
    runner.invoke(app, ["entry", "add", "瞑想"])
    result = runner.invoke(app, ["data", "export"])
    assert result.exit_code == 0
    assert json.loads(result.output)["entries"][0]["title"] == "瞑想"


def test_dashboard_seeds_empty_store():
    result = runner.invoke(app, ["dashboard"])
    assert result.exit_code == 0, result.output
    assert len(_entries()) >= 30
    assert "goal rate" in result.output


def test_dashboard_without_seeding():
    CONFIGURATION_REPO.update_config(seed_when_empty=False)
    result = runner.invoke(app, ["d", "--period", "30"])
    assert result.exit_code == 0, result.output
    assert _entries() == []


def test_seed_command_replaces_entries():
    runner.invoke(app, ["entry", "add", "mine"])
    result = runner.invoke(app, ["data", "seed", "--yes"])
    assert result.exit_code == 0
    assert all(entry["title"] != "mine" for entry in _entries())


def test_config_set_rejects_unknown_sort():
    result = runner.invoke(app, ["config", "set", "--default-sort", "sideways"])
    assert result.exit_code == 1
    assert CONFIGURATION_REPO.get_config()["default_sort"] == "date-desc"


def test_config_set_and_view():
    result = runner.invoke(app, ["c", "set", "--weekly-goal", "5"])
    assert result.exit_code == 0, result.output
    assert CONFIGURATION_REPO.get_config()["weekly_goal"] == 5

    result = runner.invoke(app, ["config", "view"])
    assert result.exit_code == 0
    assert "weekly_goal" in result.output
