"""Tests for environment driven settings."""

import pytest

from metafilter.settings import MetaFilterSettings

SETTING_NAMES = ("LOG_LEVEL", "DEFAULT_DIALECT", "JSON_PATH_PREFIX", "METADATA_COLUMN")


@pytest.fixture
def clean_env(monkeypatch):
    for name in SETTING_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    config = MetaFilterSettings(_env_file=None)
    assert config.LOG_LEVEL == "INFO"
    assert config.DEFAULT_DIALECT == "generic"
    assert config.JSON_PATH_PREFIX == "$."
    assert config.METADATA_COLUMN == "metadata"


def test_environment_overrides(clean_env):
    clean_env.setenv("DEFAULT_DIALECT", "pgvector")
    clean_env.setenv("METADATA_COLUMN", "meta")
    config = MetaFilterSettings(_env_file=None)
    assert config.DEFAULT_DIALECT == "pgvector"
    assert config.METADATA_COLUMN == "meta"


def test_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("JSON_PATH_PREFIX=doc.\nUNRELATED_KEY=ignored\n")
    config = MetaFilterSettings(_env_file=env_file)
    assert config.JSON_PATH_PREFIX == "doc."
