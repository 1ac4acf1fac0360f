"""Tests for the settings repo and the persisted selection slot."""

import sqlite3

from weatherwidget.models.location import Location
from weatherwidget.storage import settings_repo
from weatherwidget.storage.selection_store import SelectionStore


class TestSettingsRepo:
    def test_get_missing(self, db: sqlite3.Connection):
        assert settings_repo.get_setting(db, "nope") is None

    def test_set_and_overwrite(self, db: sqlite3.Connection):
        settings_repo.set_setting(db, "k", "v1")
        settings_repo.set_setting(db, "k", "v2")
        assert settings_repo.get_setting(db, "k") == "v2"
        count = db.execute("SELECT COUNT(*) FROM settings").fetchone()[0]
        assert count == 1

    def test_delete(self, db: sqlite3.Connection):
        settings_repo.set_setting(db, "k", "v")
        assert settings_repo.delete_setting(db, "k") is True
        assert settings_repo.delete_setting(db, "k") is False
        assert settings_repo.get_setting(db, "k") is None


class TestSelectionStore:
    def test_empty_loads_none(self, store: SelectionStore):
        assert store.load() is None

    def test_round_trip(self, store: SelectionStore, paris: Location):
        store.save(paris)
        assert store.load() == paris

    def test_stored_as_json_record(
        self, db: sqlite3.Connection, store: SelectionStore, paris: Location
    ):
        store.save(paris)
        raw = settings_repo.get_setting(db, "selectedLocation")
        assert '"id": 2988507' in raw
        assert '"admin1": "\\u00cele-de-France"' in raw

    def test_overwrites_single_slot(
        self, store: SelectionStore, paris: Location, london: Location
    ):
        store.save(paris)
        store.save(london)
        assert store.load() == london

    def test_corrupt_json_is_no_selection(self, db: sqlite3.Connection, store: SelectionStore):
        settings_repo.set_setting(db, "selectedLocation", "{not json")
        assert store.load() is None

    def test_wrong_shape_is_no_selection(self, db: sqlite3.Connection, store: SelectionStore):
        settings_repo.set_setting(db, "selectedLocation", '{"name": "Paris"}')
        assert store.load() is None

    def test_custom_key(self, db: sqlite3.Connection, paris: Location):
        SelectionStore(db, key="lastCity").save(paris)
        assert SelectionStore(db).load() is None
        assert SelectionStore(db, key="lastCity").load() == paris

    def test_clear(self, store: SelectionStore, paris: Location):
        store.save(paris)
        assert store.clear() is True
        assert store.load() is None
