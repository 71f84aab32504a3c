"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from json_key_filter.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestKeysCommand:

    def test_lists_indented_tree(self, runner, users_file):
        result = runner.invoke(main, ["keys", str(users_file)])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines == [
            "users  (users)",
            "  []  (users.[])",
            "    [].age  (users.[].age)",
            "    [].name  (users.[].name)",
        ]

    def test_json_output(self, runner, users_file):
        result = runner.invoke(main, ["keys", "--json", str(users_file)])
        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert rows[1] == {"path": "users.[]", "display_name": "[]", "depth": 1, "parent_path": "users"}

    def test_document_without_keys(self, runner, temp_dir):
        path = temp_dir / "scalar.json"
        path.write_text("42", encoding="utf-8")
        result = runner.invoke(main, ["keys", str(path)])
        assert result.exit_code == 1
        assert "No keys found in JSON." in result.output


class TestFilterCommand:

    def test_drop(self, runner, users_file):
        result = runner.invoke(main, ["filter", str(users_file), "--drop", "users.[].age"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"users": [{"name": "Al"}, {"name": "Bo"}]}

    def test_keep(self, runner, users_file):
        result = runner.invoke(main, ["filter", str(users_file), "-k", "users.[].age"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"users": [{"age": 1}, {"age": 2}]}

    def test_keep_everything_by_default(self, runner, users_file, users_doc):
        result = runner.invoke(main, ["filter", str(users_file)])
        assert json.loads(result.stdout) == users_doc

    def test_output_file(self, runner, users_file, temp_dir):
        out = temp_dir / "out.json"
        result = runner.invoke(main, ["filter", str(users_file), "-d", "users", "-k", "users.[].name", "-o", str(out)])
        assert result.exit_code == 1
        assert "Nothing selected" in result.output
        assert not out.exists()

        result = runner.invoke(main, ["filter", str(users_file), "-d", "users.[].name", "-o", str(out)])
        assert result.exit_code == 0
        assert json.loads(out.read_text(encoding="utf-8")) == {"users": [{"age": 1}, {"age": 2}]}

    def test_unknown_path(self, runner, users_file):
        result = runner.invoke(main, ["filter", str(users_file), "--drop", "users.[].zip"])
        assert result.exit_code == 2
        assert "Unknown key path: users.[].zip" in result.output

    def test_invalid_json(self, runner, temp_dir):
        path = temp_dir / "bad.json"
        path.write_text("[1, 2", encoding="utf-8")
        result = runner.invoke(main, ["filter", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output
