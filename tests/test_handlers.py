"""Tests for the Gradio event handlers."""

import json
from pathlib import Path

from json_key_filter.handlers import (
    deselect_all_handler,
    download_handler,
    expand_handler,
    load_json_handler,
    search_handler,
    select_all_handler,
    toggle_key_handler,
)
from json_key_filter.session import FilterSession


class TestLoadJsonHandler:

    def test_no_file(self):
        session, status, original, filtered, download, button = load_json_handler(None)
        assert session == FilterSession()
        assert status == "No file uploaded."
        assert original is None and filtered is None and download is None
        assert button["interactive"] is False

    def test_valid_file(self, users_file, users_doc):
        session, status, original, filtered, download, button = load_json_handler(str(users_file))
        assert session.loaded
        assert status == "Successfully loaded users.json. Found 4 unique keys."
        assert original == users_doc
        assert filtered == users_doc
        assert download is None
        assert button["interactive"] is True

    def test_invalid_json_resets_session(self, temp_dir):
        path = temp_dir / "bad.json"
        path.write_text("{nope", encoding="utf-8")
        session, status, original, filtered, _, _ = load_json_handler(str(path))
        assert not session.loaded
        assert status.startswith("Error: Invalid JSON")
        assert original is None and filtered is None

    def test_document_without_keys(self, temp_dir):
        path = temp_dir / "scalar.json"
        path.write_text("42", encoding="utf-8")
        session, status, *_ = load_json_handler(str(path))
        assert not session.loaded
        assert status == "Error: No keys found in JSON."


class TestSelectionHandlers:

    def test_toggle(self, users_doc):
        session = FilterSession.load_document(users_doc)
        session, filtered, status = toggle_key_handler("users.[].age", session)
        assert filtered == {"users": [{"name": "Al"}, {"name": "Bo"}]}
        assert status == "3 of 4 keys selected."

    def test_bulk(self, users_doc):
        session = FilterSession.load_document(users_doc)
        session, filtered, status = deselect_all_handler(session)
        assert filtered is None
        assert status == "0 of 4 keys selected."
        session, filtered, _ = select_all_handler(session)
        assert filtered == users_doc

    def test_missing_state(self):
        session, filtered, status = toggle_key_handler("a", None)
        assert not session.loaded
        assert filtered is None
        assert status == "No document loaded."

    def test_search_and_expand(self, users_doc):
        session = FilterSession.load_document(users_doc)
        assert search_handler("name", session).search_term == "name"
        assert expand_handler("users", True, session).expanded == frozenset({"users"})


class TestDownloadHandler:

    def test_download(self, users_doc, export_config):
        session = FilterSession.load_document(users_doc, "users.json")
        path, status = download_handler(session)
        assert Path(path).name == "filtered_users.json"
        assert Path(path).parent.parent == export_config.export_dir
        assert status == f"Export successful! Saved to {path}"
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == users_doc

    def test_download_without_data(self, users_doc):
        path, status = download_handler(FilterSession.load_document(users_doc).deselect_all())
        assert path is None
        assert status == "Error: No data to download."

    def test_download_without_document(self):
        assert download_handler(None) == (None, "Error: No document loaded.")
