#!/usr/bin/env python3
"""Tests for extractor settings, the builder and the JSONC config loader."""

import dataclasses

import pytest

from twextract import ConfigurationError, ExtractorConfig, ExtractorConfigBuilder, load_config
from twextract.core.config import ConfigLoader

JSONC_CONFIG = """{
  // extractor settings
  "extractor": {
    "allow_url_without_protocol": false,  // bare domains off
    "index_unit": "utf16"
  },
  "docs": "https://example.com/twextract"
}
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "twextract.jsonc"
    path.write_text(JSONC_CONFIG, encoding="utf-8")
    return path


class TestExtractorConfig:
    """Test the immutable settings object."""

    def test_defaults(self):
        config = ExtractorConfig()

        assert config.allow_url_without_protocol is True
        assert config.index_unit == "codepoint"

    def test_frozen(self):
        config = ExtractorConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.index_unit = "utf8"

    def test_evolve(self):
        config = ExtractorConfig().evolve(index_unit="utf8")

        assert config == ExtractorConfig(index_unit="utf8")

    def test_invalid_values(self):
        with pytest.raises(ConfigurationError):
            ExtractorConfig(index_unit="bytes")
        with pytest.raises(ConfigurationError):
            ExtractorConfig(allow_url_without_protocol="yes")

    def test_builder(self):
        config = ExtractorConfig.builder().allow_url_without_protocol(False).index_unit("utf16").build()

        assert config == ExtractorConfig(allow_url_without_protocol=False, index_unit="utf16")

    def test_builder_from_base(self):
        base = ExtractorConfig(index_unit="utf8")
        config = ExtractorConfigBuilder(base).allow_url_without_protocol(False).build()

        assert config.index_unit == "utf8"
        assert config.allow_url_without_protocol is False

    def test_builder_validates_on_build(self):
        builder = ExtractorConfig.builder().index_unit("nope")

        with pytest.raises(ConfigurationError):
            builder.build()


class TestConfigLoader:
    """Test loading settings from JSONC files and the environment."""

    def test_load_jsonc(self, config_file):
        config = load_config(config_file)

        assert config == ExtractorConfig(allow_url_without_protocol=False, index_unit="utf16")

    def test_comment_stripping_keeps_urls(self, config_file):
        loader = ConfigLoader(config_file)

        assert loader.get("docs") == "https://example.com/twextract"
        assert loader.get("extractor.index_unit") == "utf16"
        assert loader.get("extractor.missing", "fallback") == "fallback"
        assert loader["extractor"]["allow_url_without_protocol"] is False

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert load_config() == ExtractorConfig()

    def test_config_found_in_working_directory(self, config_file, monkeypatch):
        monkeypatch.chdir(config_file.parent)

        assert load_config().index_unit == "utf16"

    def test_config_path_from_environment(self, config_file, monkeypatch):
        monkeypatch.setenv("TWEXTRACT_CONFIG", str(config_file))

        assert load_config().allow_url_without_protocol is False

    def test_environment_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("TWEXTRACT_ALLOW_URL_WITHOUT_PROTOCOL", "yes")
        monkeypatch.setenv("TWEXTRACT_INDEX_UNIT", "UTF8")

        assert load_config(config_file) == ExtractorConfig(allow_url_without_protocol=True, index_unit="utf8")

    def test_invalid_boolean_from_environment(self, config_file, monkeypatch):
        monkeypatch.setenv("TWEXTRACT_ALLOW_URL_WITHOUT_PROTOCOL", "maybe")

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_invalid_index_unit_in_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"extractor": {"index_unit": "utf32"}}', encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config(tmp_path / "missing.jsonc")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_config(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(path)
