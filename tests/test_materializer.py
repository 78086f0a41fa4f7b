"""Tests for project file materializers."""

import json
import logging

from prettier_setup.setup.materializer import (
    create_config_pointer,
    create_editor_settings,
    create_ignore_file,
    merge_settings,
)
from prettier_setup.setup.settings import SetupSettings


class TestCreateConfigPointer:
    """Test suite for create_config_pointer."""

    def test_writes_package_reference(self, files, settings):
        assert create_config_pointer(files, settings) is True
        assert files.read_text(".prettierrc") == '"@dheerajmahra/prettier-config"'

    def test_never_overwrites(self, files, settings, caplog):
        files.write_text(".prettierrc", "{}")

        with caplog.at_level(logging.WARNING, logger="prettier_setup"):
            assert create_config_pointer(files, settings) is False

        assert files.read_text(".prettierrc") == "{}"
        assert ".prettierrc already exists. Skipping..." in caplog.text

    def test_custom_package(self, make_memory_files):
        files = make_memory_files()
        settings = SetupSettings(config_package="@acme/prettier-config")

        create_config_pointer(files, settings)
        assert files.contents[".prettierrc"] == '"@acme/prettier-config"'


class TestCreateIgnoreFile:
    """Test suite for create_ignore_file."""

    def test_copies_template_verbatim(self, files, settings, template_dir):
        assert create_ignore_file(files, settings, template_dir) is True
        assert files.read_text(".prettierignore") == (template_dir / "prettierignore").read_text(encoding="utf-8")

    def test_default_template_dir(self, files, settings):
        assert create_ignore_file(files, settings) is True
        assert "node_modules" in files.read_text(".prettierignore")

    def test_skips_existing(self, files, settings, caplog):
        files.write_text(".prettierignore", "custom\n")

        with caplog.at_level(logging.WARNING, logger="prettier_setup"):
            assert create_ignore_file(files, settings) is False

        assert files.read_text(".prettierignore") == "custom\n"
        assert "already exists" in caplog.text

    def test_missing_template(self, files, settings, tmp_path, caplog):
        empty = tmp_path / "no-templates"
        empty.mkdir()

        with caplog.at_level(logging.ERROR, logger="prettier_setup"):
            assert create_ignore_file(files, settings, empty) is False

        assert not files.exists(".prettierignore")
        assert "Failed to create .prettierignore from template" in caplog.text


class TestMergeSettings:
    """Test suite for merge_settings."""

    def test_template_wins(self):
        merged = merge_settings({"a": 1, "b": 2}, {"b": 3, "c": 4})
        assert merged == {"a": 1, "b": 3, "c": 4}

    def test_shallow(self):
        """Nested objects are replaced, not merged."""
        merged = merge_settings({"[json]": {"x": 1}}, {"[json]": {"y": 2}})
        assert merged == {"[json]": {"y": 2}}


class TestCreateEditorSettings:
    """Test suite for create_editor_settings."""

    def test_creates_directory_and_file(self, files, settings, template_dir):
        assert create_editor_settings(files, settings, template_dir) is True

        created = files.path(".vscode/settings.json")
        assert created.parent.is_dir()
        assert created.read_text(encoding="utf-8") == (template_dir / "settings.json").read_text(encoding="utf-8")

    def test_merges_existing(self, files, settings, template_dir):
        files.ensure_dir(".vscode")
        existing = {"files.autoSave": "onFocusChange", "editor.formatOnSave": False}
        files.write_text(".vscode/settings.json", json.dumps(existing))

        assert create_editor_settings(files, settings, template_dir) is True

        merged = json.loads(files.read_text(".vscode/settings.json"))
        assert merged["files.autoSave"] == "onFocusChange"
        assert merged["editor.formatOnSave"] is True
        assert merged["editor.defaultFormatter"] == "esbenp.prettier-vscode"

    def test_merged_output_pretty_printed(self, files, settings):
        files.ensure_dir(".vscode")
        files.write_text(".vscode/settings.json", '{"a": 1}')

        create_editor_settings(files, settings)

        assert files.read_text(".vscode/settings.json").startswith('{\n  "a": 1,\n')

    def test_invalid_existing_json(self, files, settings, caplog):
        files.ensure_dir(".vscode")
        files.write_text(".vscode/settings.json", "{ // comments are not JSON")

        with caplog.at_level(logging.ERROR, logger="prettier_setup"):
            assert create_editor_settings(files, settings) is False

        assert files.read_text(".vscode/settings.json") == "{ // comments are not JSON"
        assert "Failed to update .vscode/settings.json" in caplog.text

    def test_existing_not_an_object(self, files, settings):
        files.ensure_dir(".vscode")
        files.write_text(".vscode/settings.json", "[]")

        assert create_editor_settings(files, settings) is False
        assert files.read_text(".vscode/settings.json") == "[]"

    def test_in_memory_files(self, make_memory_files, template_dir):
        """No real filesystem needed."""
        files = make_memory_files({".vscode/settings.json": '{"keep": true}'})

        assert create_editor_settings(files, SetupSettings(), template_dir) is True
        assert ".vscode" in files.dirs
        assert json.loads(files.contents[".vscode/settings.json"])["keep"] is True

    def test_custom_editor_dir(self, files):
        settings = SetupSettings(editor_dir=".editor", editor_settings_file="prefs.json")

        assert create_editor_settings(files, settings) is True
        assert files.exists(".editor/prefs.json")

    def test_missing_template_for_new_file(self, files, settings, tmp_path, caplog):
        empty = tmp_path / "no-templates"
        empty.mkdir()

        with caplog.at_level(logging.ERROR, logger="prettier_setup"):
            assert create_editor_settings(files, settings, empty) is False

        assert not files.exists(".vscode/settings.json")
        assert "Failed to create .vscode/settings.json from template" in caplog.text

    def test_editor_dir_is_a_file(self, files, settings, caplog):
        """A regular file named .vscode blocks directory creation."""
        files.write_text(".vscode", "not a directory")

        with caplog.at_level(logging.ERROR, logger="prettier_setup"):
            assert create_editor_settings(files, settings) is False

        assert files.read_text(".vscode") == "not a directory"
        assert "Failed to create .vscode" in caplog.text
