"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from blogsmith.config import (
    Config,
    ConfigModel,
    IngestionConfig,
    default_config_path,
    load_config,
    save_config,
)


def test_defaults():
    config = ConfigModel()

    assert config.ingestion.map_limit == 100
    assert config.ingestion.batch_size == 5
    assert config.ingestion.exclude_segments == ["/page/", "/tag/", "/category/"]
    assert config.ingestion.skip_known_urls is False
    assert config.enhancement.search_limit == 2
    assert config.enhancement.max_reference_chars == 2000


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "ingestion:\n"
        "  target_root: https://example.com/blogs\n"
        "  batch_size: 3\n"
        "llm:\n"
        "  model: test-model\n"
    )

    config = load_config(path)

    assert config.ingestion.target_root == "https://example.com/blogs"
    assert config.ingestion.batch_size == 3
    assert config.llm.model == "test-model"
    assert config.postgres.database == "blogsmith"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert load_config(path) == ConfigModel()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_invalid_values_raise_value_error(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("ingestion:\n  batch_size: 0\n")

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(path)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("ingestion: [unclosed\n")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(path)


def test_target_root_must_be_http():
    with pytest.raises(ValidationError):
        IngestionConfig(target_root="example.com/blog")


def test_secrets_come_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    save_config(ConfigModel(), path)
    monkeypatch.setenv("FIRECRAWL_API_KEY", "fc-key")
    monkeypatch.setenv("LLM_API_KEY", "llm-key")
    monkeypatch.delenv("BLOGSMITH_DB_PASSWORD", raising=False)

    config = Config(path)

    assert config.get_firecrawl_config()["api_key"] == "fc-key"
    assert config.get_llm_config()["api_key"] == "llm-key"
    assert config.get_db_config()["password"] is None


def test_config_path_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("BLOGSMITH_CONFIG", str(tmp_path / "custom.yaml"))

    assert default_config_path() == tmp_path / "custom.yaml"
    assert Config().config_path == tmp_path / "custom.yaml"


def test_save_and_reload_roundtrip(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    original = ConfigModel(ingestion={"target_root": "https://example.com/posts"})

    save_config(original, path)

    assert load_config(path) == original
