"""Tests for config loading."""

import json

import pytest

from acctestlint.config import CONFIG_ENV_VAR, CONFIG_FILE, LintConfig, load_config
from acctestlint.errors import (
    ConfigNotFoundError,
    InvalidConfigError,
    InvalidSchemaVersionError,
)


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestLoadConfig:
    def test_defaults_when_missing(self, temp_dir):
        config = load_config(cwd=temp_dir)
        assert config == LintConfig()
        assert config.exclude == []
        assert config.include_vendor is False
        assert config.format == "text"

    def test_reads_default_file(self, temp_dir):
        (temp_dir / CONFIG_FILE).write_text(
            json.dumps({"schema_version": 1, "exclude": ["legacy/*"], "format": "json"})
        )
        config = load_config(cwd=temp_dir)
        assert config.exclude == ["legacy/*"]
        assert config.format == "json"

    def test_explicit_path(self, temp_dir):
        path = temp_dir / "custom.json"
        path.write_text(json.dumps({"include_vendor": True}))
        assert load_config(path).include_vendor is True

    def test_explicit_path_missing(self, temp_dir):
        with pytest.raises(ConfigNotFoundError) as exc_info:
            load_config(temp_dir / "nope.json")
        assert "nope.json" in str(exc_info.value)

    def test_env_var(self, temp_dir, monkeypatch):
        path = temp_dir / "env.json"
        path.write_text(json.dumps({"exclude": ["*_gen_test.go"]}))
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config(cwd=temp_dir).exclude == ["*_gen_test.go"]

    def test_invalid_json(self, temp_dir):
        (temp_dir / CONFIG_FILE).write_text("{not json")
        with pytest.raises(InvalidConfigError):
            load_config(cwd=temp_dir)


class TestFromDict:
    def test_round_trip(self):
        config = LintConfig(exclude=["a/*"], include_vendor=True, format="json")
        assert LintConfig.from_dict(config.to_dict()) == config

    def test_unsupported_schema_version(self):
        with pytest.raises(InvalidSchemaVersionError) as exc_info:
            LintConfig.from_dict({"schema_version": 2})
        assert exc_info.value.found == 2
        assert exc_info.value.supported == 1

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"exclude": "legacy/*"},
            {"exclude": [1]},
            {"include_vendor": "yes"},
            {"format": "xml"},
        ],
    )
    def test_invalid_values(self, data):
        with pytest.raises(InvalidConfigError):
            LintConfig.from_dict(data)
