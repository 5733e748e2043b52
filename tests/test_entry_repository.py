import json
import logging

import pytest

from conftest import make_entry
from habitlog.configuration import STORAGE_KEY
from habitlog.repository.backend import FileBackend, MemoryBackend
from habitlog.repository.entry import EntryRepository, parse_entries_record


def _seed(repository: EntryRepository) -> None:
    repository.save_new_entry(make_entry("a", "2025-06-15T10:00:00.000Z", "読書", 10))
    repository.save_new_entry(
        make_entry("b", "2025-06-16T10:00:00.000Z", "瞑想", 20, note="静かに")
    )
    repository.save_new_entry(make_entry("c", "2025-06-17T10:00:00.000Z", "筋トレ", 30))


class TestGetAll:
    def test_absent_record_is_empty(self, repository):
        assert repository.get_all_entries() == []

    def test_corrupt_record_soft_fails(self, backend, repository, caplog):
        backend.set(STORAGE_KEY, "{not json")
        with caplog.at_level(logging.WARNING):
            assert repository.get_all_entries() == []
        assert "unreadable" in caplog.text

    def test_record_without_entries_is_empty(self, backend, repository):
        backend.set(STORAGE_KEY, json.dumps({"foo": []}))
        assert repository.get_all_entries() == []

    def test_record_with_non_object_items_is_empty(self, backend, repository):
        backend.set(STORAGE_KEY, json.dumps({"entries": [1, None]}))
        assert repository.get_all_entries() == []
        repository.delete_entry("a")
        assert repository.get_all_entries() == []

    def test_insertion_order(self, repository):
        _seed(repository)
        assert [e["id"] for e in repository.get_all_entries()] == ["a", "b", "c"]

    def test_append_does_not_enforce_unique_ids(self, repository):
        _seed(repository)
        repository.save_new_entry(make_entry("a", "2025-06-18T10:00:00.000Z"))
        assert [e["id"] for e in repository.get_all_entries()] == ["a", "b", "c", "a"]


class TestModify:
    def test_shallow_merge_keeps_other_fields(self, repository):
        _seed(repository)
        repository.modify_entry("b", {"title": "ヨガ", "value": 99})

        entry = repository.get_all_entries()[1]
        assert entry["title"] == "ヨガ"
        assert entry["value"] == 99
        assert entry["note"] == "静かに"
        assert entry["date"] == "2025-06-16T10:00:00.000Z"

    def test_note_set_to_none_is_dropped(self, backend, repository):
        _seed(repository)
        repository.modify_entry("b", {"note": None})

        assert "note" not in repository.get_all_entries()[1]
        assert "note" not in backend.get(STORAGE_KEY)

    def test_unknown_id_is_noop(self, backend, repository):
        _seed(repository)
        before = backend.get(STORAGE_KEY)
        repository.modify_entry("missing", {"title": "x"})
        assert backend.get(STORAGE_KEY) == before

    def test_only_first_match_is_updated(self, repository):
        repository.save_new_entry(make_entry("dup", "2025-06-15T10:00:00.000Z", "A"))
        repository.save_new_entry(make_entry("dup", "2025-06-16T10:00:00.000Z", "B"))
        repository.modify_entry("dup", {"title": "C"})
        assert [e["title"] for e in repository.get_all_entries()] == ["C", "B"]


class TestDelete:
    def test_deletes_every_match(self, repository):
        _seed(repository)
        repository.save_new_entry(make_entry("a", "2025-06-18T10:00:00.000Z"))
        repository.delete_entry("a")
        assert [e["id"] for e in repository.get_all_entries()] == ["b", "c"]

    def test_unknown_id_leaves_collection_unchanged(self, backend, repository):
        _seed(repository)
        before_text = backend.get(STORAGE_KEY)
        before = repository.get_all_entries()

        repository.delete_entry("missing")

        assert repository.get_all_entries() == before
        assert backend.get(STORAGE_KEY) == before_text


class TestExportImport:
    def test_export_is_pretty_printed_record(self, repository):
        _seed(repository)
        text = repository.export_data()

        assert text.startswith("{\n  \"entries\": [")
        assert "読書" in text
        assert json.loads(text) == {"entries": repository.get_all_entries()}

    def test_export_of_empty_store(self, repository):
        assert json.loads(repository.export_data()) == {"entries": []}

    def test_round_trip(self, repository):
        _seed(repository)
        exported = repository.export_data()
        original = repository.get_all_entries()

        other = EntryRepository(MemoryBackend())
        assert other.import_data(exported) is True
        assert other.get_all_entries() == original
        assert {e["id"] for e in other.get_all_entries()} == {"a", "b", "c"}

    def test_import_replaces_everything(self, repository):
        _seed(repository)
        text = json.dumps({"entries": [make_entry("z", "2025-01-01T00:00:00.000Z")]})
        assert repository.import_data(text) is True
        assert [e["id"] for e in repository.get_all_entries()] == ["z"]

    def test_import_drops_extra_top_level_fields(self, backend, repository):
        assert repository.import_data('{"entries": [], "theme": "dark"}') is True
        assert json.loads(backend.get(STORAGE_KEY)) == {"entries": []}

    @pytest.mark.parametrize(
        "text",
        [
            "{not json",
            '{"foo": []}',
            '{"entries": "nope"}',
            '{"entries": {}}',
            '{"entries": [1]}',
            '{"entries": [null]}',
            '{"entries": [["a"]]}',
            "[]",
            "null",
            "",
        ],
    )
    def test_malformed_import_leaves_store_untouched(self, backend, repository, text):
        _seed(repository)
        before = backend.get(STORAGE_KEY)

        assert repository.import_data(text) is False
        assert backend.get(STORAGE_KEY) == before


class TestReset:
    def test_reset_removes_record(self, backend, repository):
        _seed(repository)
        repository.reset()
        assert backend.get(STORAGE_KEY) is None
        assert repository.get_all_entries() == []
        assert repository.is_empty()

    def test_reset_of_empty_store(self, repository):
        repository.reset()
        assert repository.get_all_entries() == []


def test_parse_entries_record_reports_errors():
    assert parse_entries_record('{"entries": []}').ok
    result = parse_entries_record('{"entries": 1}')
    assert not result.ok
    assert result.entries == []


class TestFileBackend:
    def test_persists_across_repositories(self, tmp_path):
        first = EntryRepository(FileBackend(tmp_path))
        _seed(first)

        second = EntryRepository(FileBackend(tmp_path))
        assert [e["id"] for e in second.get_all_entries()] == ["a", "b", "c"]
        assert (tmp_path / f"{STORAGE_KEY}.json").is_file()

    def test_no_temp_files_left_behind(self, tmp_path):
        repository = EntryRepository(FileBackend(tmp_path))
        _seed(repository)
        assert [p.name for p in tmp_path.iterdir()] == [f"{STORAGE_KEY}.json"]

    def test_reset_deletes_file(self, tmp_path):
        repository = EntryRepository(FileBackend(tmp_path))
        _seed(repository)
        repository.reset()
        assert not (tmp_path / f"{STORAGE_KEY}.json").exists()
        repository.reset()

    def test_creates_missing_directory(self, tmp_path):
        backend = FileBackend(tmp_path / "nested" / "data")
        backend.set("k", "v")
        assert backend.get("k") == "v"
