"""
Tests for the JSON preference store.
"""

import json

from store.preferences import NASA_API_KEY, PreferenceStore


class TestPreferenceStore:
    """Tests for PreferenceStore."""

    def test_missing_file(self, preferences):
        """A missing file means nothing is configured."""
        assert preferences.get("anything") is None
        assert preferences.get_nasa_api_key() is None

    def test_set_and_get(self, preferences):
        preferences.set("units", "metric")

        assert preferences.get("units") == "metric"

    def test_persists_to_file(self, tmp_path):
        path = tmp_path / "nested" / "preferences.json"
        PreferenceStore(path).set_nasa_api_key("abc123")

        assert json.loads(path.read_text()) == {NASA_API_KEY: "abc123"}
        assert PreferenceStore(path).get_nasa_api_key() == "abc123"

    def test_api_key_stripped(self, preferences):
        preferences.set_nasa_api_key("  abc123  ")

        assert preferences.get_nasa_api_key() == "abc123"

    def test_blank_api_key_is_absent(self, preferences):
        preferences.set(NASA_API_KEY, "   ")

        assert preferences.get_nasa_api_key() is None

    def test_clear_api_key(self, preferences):
        preferences.set_nasa_api_key("abc123")

        assert preferences.clear_nasa_api_key() is True
        assert preferences.get_nasa_api_key() is None
        assert preferences.clear_nasa_api_key() is False

    def test_other_keys_untouched(self, preferences):
        preferences.set("units", "metric")
        preferences.set_nasa_api_key("abc123")
        preferences.clear_nasa_api_key()

        assert preferences.get("units") == "metric"

    def test_path_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "env-preferences.json"
        monkeypatch.setenv("MYCOSMO_PREFERENCES_PATH", str(path))

        PreferenceStore().set_nasa_api_key("abc123")

        assert path.exists()

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        """An unreadable file should behave like a missing one."""
        path = tmp_path / "preferences.json"
        path.write_text("{not json")
        store = PreferenceStore(path)

        assert store.get_nasa_api_key() is None

        store.set_nasa_api_key("abc123")
        assert store.get_nasa_api_key() == "abc123"

    def test_non_object_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_text("[1, 2, 3]")

        assert PreferenceStore(path).get("units") is None
