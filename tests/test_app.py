"""Tests for the application settings helpers."""

from pointtrigger.app import last_export_dir, remember_export_dir


class TestExportDirSetting:

    def test_defaults_to_home(self, isolated_settings):
        assert last_export_dir() == isolated_settings

    def test_remembered_directory_is_returned(self, isolated_settings):
        target = isolated_settings / "exports"
        target.mkdir()
        remember_export_dir(target)
        assert last_export_dir() == target

    def test_deleted_directory_falls_back_to_home(self, isolated_settings):
        remember_export_dir(isolated_settings / "gone")
        assert last_export_dir() == isolated_settings
