"""Tests for configuration settings."""

import json

import pytest

from youtube_caption_fetcher.config import Settings, DEFAULT_SETTINGS


class TestSettings:
    def test_defaults(self):
        assert DEFAULT_SETTINGS.language_code == "en"
        assert DEFAULT_SETTINGS.timeout == 20.0
        assert DEFAULT_SETTINGS.max_redirects == 10
        assert DEFAULT_SETTINGS.verify_ssl is True
        assert DEFAULT_SETTINGS.user_agent is None

    def test_from_dict_ignores_unknown_keys(self):
        settings = Settings.from_dict({"language_code": "fr", "retries": 3})
        assert settings.language_code == "fr"
        assert settings.timeout == 20.0

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("language_code: ja\ntimeout: 5\nverify_ssl: false\nuser_agent: test-agent\n")

        settings = Settings.from_file(str(path))

        assert settings.language_code == "ja"
        assert settings.timeout == 5
        assert settings.verify_ssl is False
        assert settings.user_agent == "test-agent"

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"max_redirects": 3}))

        assert Settings.from_file(str(path)).max_redirects == 3

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")

        assert Settings.from_file(str(path)) == Settings()

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError):
            Settings.from_file(str(path))

    def test_round_trip_dict(self):
        settings = Settings(language_code="de", user_agent="ua")
        assert Settings.from_dict(settings.to_dict()) == settings

    def test_malformed_yaml_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("language_code: [unclosed\n")

        with pytest.raises(ValueError) as exc_info:
            Settings.from_file(str(path))
        assert "Invalid config file" in str(exc_info.value)
