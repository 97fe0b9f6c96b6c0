"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest

from workflow_entity.exceptions import ConfigurationError
from workflow_entity.models.config import (
    EntityConfig,
    load_config,
    save_config,
    validate_config_json,
)


class TestEntityConfig:
    """Test the configuration model."""

    def test_defaults(self):
        config = EntityConfig.default()
        assert config.object_type == "files"
        assert config.show_file_route == "files.viewcontroller.showFile"
        assert config.icon_app == "core"
        assert config.icon_path == "categories/files.svg"
        assert config.l10n_dir is None
        assert config.log_level == "WARNING"

    def test_from_dict(self):
        config = EntityConfig.from_dict({
            "base_url": "https://cloud.example.com",
            "locale": "de_DE",
            "l10n_dir": "/srv/l10n",
        })
        assert config.base_url == "https://cloud.example.com"
        assert config.locale == "de_DE"
        assert config.l10n_dir == Path("/srv/l10n")

    @pytest.mark.parametrize("data", [
        {"base_url": "ftp://example.com"},
        {"log_level": "LOUD"},
        {"locale": "German"},
        {"object_type": ""},
        {"unexpected": True},
    ])
    def test_from_dict_rejects_invalid(self, data):
        with pytest.raises(ConfigurationError):
            EntityConfig.from_dict(data)

    def test_to_dict_round_trips_paths(self):
        config = EntityConfig(l10n_dir=Path("/srv/l10n"))
        assert config.to_dict()["l10n_dir"] == "/srv/l10n"
        assert EntityConfig.from_dict(config.to_dict()) == config


class TestValidateConfigJson:
    """Test schema validation messages."""

    def test_valid(self):
        assert validate_config_json({"locale": "en"}) == []

    def test_error_path(self):
        errors = validate_config_json({"log_level": "LOUD"})
        assert len(errors) == 1
        assert errors[0].startswith("Validation error at log_level")

    def test_root_error(self):
        errors = validate_config_json(["not", "an", "object"])
        assert errors[0].startswith("Validation error at root")


class TestLoadSaveConfig:
    """Test reading and writing configuration files."""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        config = EntityConfig(base_url="https://cloud.example.com", log_level="DEBUG")
        save_config(config, path)

        assert json.loads(path.read_text())["base_url"] == "https://cloud.example.com"
        assert load_config(path) == config

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{")
        with pytest.raises(ConfigurationError, match="invalid JSON"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config(tmp_path / "missing.json")
