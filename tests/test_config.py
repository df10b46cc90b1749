# tests/test_config.py
"""Tests for file and environment based configuration."""

import os

import pytest

from ragnotes.config import (
    DEFAULT_DATA_DIR,
    DEFAULT_EMBEDDING_MODEL,
    DEFAULT_LLM_MODEL,
    ConfigError,
    RagNotesConfig,
    build_settings,
    find_config_file,
    get_ragnotes_config,
    get_settings_from_env,
    import_class,
    load_config,
    load_env_file,
    validate_config,
)
from ragnotes.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from RAGNOTES_* variables and config files on this machine."""
    for key in list(os.environ):
        if key.startswith("RAGNOTES_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


class TestLoadEnvFile:
    def test_loads_missing_keys(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\nRAGNOTES_LLM_MODEL='openai/gpt-5-mini'\n\nNO_EQUALS\n")

        load_env_file(env_file)

        assert os.environ["RAGNOTES_LLM_MODEL"] == "openai/gpt-5-mini"
        monkeypatch.delenv("RAGNOTES_LLM_MODEL")

    def test_does_not_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RAGNOTES_LLM_MODEL", "from-env")
        (tmp_path / ".env").write_text("RAGNOTES_LLM_MODEL=from-file\n")

        load_env_file(tmp_path / ".env")

        assert os.environ["RAGNOTES_LLM_MODEL"] == "from-env"

    def test_missing_file(self, tmp_path):
        load_env_file(tmp_path / "nope.env")


class TestConfigFile:
    def test_find_in_parent(self, tmp_path):
        (tmp_path / "ragnotes.yaml").write_text("provider: litellm\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == tmp_path / "ragnotes.yaml"

    def test_load_config(self, tmp_path):
        path = tmp_path / "ragnotes.yaml"
        path.write_text("llm_model: openai/gpt-5-mini\nsettings:\n  chunk_size: 800\n")

        config = load_config(path)

        assert config["llm_model"] == "openai/gpt-5-mini"
        assert config["settings"]["chunk_size"] == 800

    def test_load_config_none_found(self):
        assert load_config() == {}

    def test_load_config_empty_file(self, tmp_path):
        path = tmp_path / "ragnotes.yaml"
        path.write_text("")
        assert load_config(path) == {}

    def test_load_config_not_a_mapping(self, tmp_path):
        path = tmp_path / "ragnotes.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_validate_config_warns_on_unknown_keys(self):
        warnings = validate_config({"provider": "litellm", "colour": "red", "settings": {"zz": 1}})
        assert any("colour" in w for w in warnings)
        assert any("zz" in w for w in warnings)

    def test_validate_config_clean(self):
        assert validate_config({"provider": "litellm", "settings": {"chunk_size": 10}}) == []


class TestBuildSettings:
    def test_defaults(self):
        assert build_settings({}) == Settings()

    def test_yaml_settings(self):
        settings = build_settings({"settings": {"chunk_size": 800, "default_k": 3}})
        assert settings.chunk_size == 800
        assert settings.default_k == 3

    def test_env_overrides_yaml(self, monkeypatch):
        monkeypatch.setenv("RAGNOTES_CHUNK_SIZE", "900")
        settings = build_settings({"settings": {"chunk_size": 800}})
        assert settings.chunk_size == 900

    def test_invalid_env_int_ignored(self, monkeypatch):
        monkeypatch.setenv("RAGNOTES_DEFAULT_K", "many")
        assert "default_k" not in get_settings_from_env()

    def test_empty_env_values_disable(self, monkeypatch):
        monkeypatch.setenv("RAGNOTES_EMBEDDING_DIMENSIONS", "")
        monkeypatch.setenv("RAGNOTES_SYNTHESIS_PROMPT", "")

        settings = build_settings({})

        assert settings.embedding_dimensions is None
        assert settings.synthesis_prompt is None

    def test_rate_limit_profile(self):
        settings = build_settings({"settings": {"rate_limit_profile": "conservative"}})
        assert settings.max_concurrent_embeddings == 1

    def test_rate_limit_profile_from_env_with_yaml_override(self, monkeypatch):
        monkeypatch.setenv("RAGNOTES_RATE_LIMIT_PROFILE", "aggressive")
        settings = build_settings({"settings": {"num_retries": 1}})
        assert settings.max_concurrent_embeddings == 10
        assert settings.num_retries == 1

    def test_unknown_yaml_keys_ignored(self):
        assert build_settings({"settings": {"unknown": 1}}) == Settings()


class TestGetRagNotesConfig:
    def test_defaults(self):
        config = get_ragnotes_config()

        assert isinstance(config, RagNotesConfig)
        assert config.provider == "litellm"
        assert config.llm_model == DEFAULT_LLM_MODEL
        assert config.embedding_model == DEFAULT_EMBEDDING_MODEL
        assert config.data_dir == DEFAULT_DATA_DIR

    def test_env_models_and_keys(self, monkeypatch):
        monkeypatch.setenv("RAGNOTES_LLM_MODEL", "openai/gpt-5-mini")
        monkeypatch.setenv("RAGNOTES_EMBEDDING_MODEL", "openai/text-embedding-3-small")
        monkeypatch.setenv("RAGNOTES_LLM_API_KEY", "llm-key")
        monkeypatch.setenv("RAGNOTES_DATA_DIR", "/tmp/notes")

        config = get_ragnotes_config()

        assert config.llm_model == "openai/gpt-5-mini"
        assert config.embedding_model == "openai/text-embedding-3-small"
        assert config.llm_api_key == "llm-key"
        assert config.embedding_api_key is None
        assert config.data_dir == "/tmp/notes"

    def test_explicit_data_dir_wins(self, monkeypatch):
        monkeypatch.setenv("RAGNOTES_DATA_DIR", "/tmp/env")
        assert get_ragnotes_config(data_dir="/tmp/arg").data_dir == "/tmp/arg"

    def test_config_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(
            "llm_model: anthropic/claude\ndata_dir: ./elsewhere\nsettings:\n  default_k: 2\n"
        )

        config = get_ragnotes_config(config_path=path)

        assert config.llm_model == "anthropic/claude"
        assert config.data_dir == "./elsewhere"
        assert config.settings.default_k == 2

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "ragnotes.yaml"
        path.write_text("settings: [unclosed\n")

        config = get_ragnotes_config(config_path=path)

        assert isinstance(config, ConfigError)
        assert "Could not read config file" in config.message

    def test_invalid_settings(self, monkeypatch):
        monkeypatch.setenv("RAGNOTES_CHUNK_OVERLAP", "600")
        config = get_ragnotes_config()
        assert isinstance(config, ConfigError)
        assert "Invalid settings" in config.message

    def test_unknown_provider(self, tmp_path):
        path = tmp_path / "ragnotes.yaml"
        path.write_text("provider: magic\n")

        config = get_ragnotes_config(config_path=path)

        assert isinstance(config, ConfigError)
        assert "magic" in config.message

    def test_custom_provider_requires_classes(self, tmp_path):
        path = tmp_path / "ragnotes.yaml"
        path.write_text("provider: custom\nembedder: my.Embedder\n")

        config = get_ragnotes_config(config_path=path)

        assert isinstance(config, ConfigError)
        assert "embedder and generator" in config.message

    def test_custom_provider(self, tmp_path):
        path = tmp_path / "ragnotes.yaml"
        path.write_text(
            "provider: custom\n"
            "embedder: my.Embedder\n"
            "generator: my.Generator\n"
            "generator_kwargs:\n  temperature: 0.1\n"
        )

        config = get_ragnotes_config(config_path=path)

        assert config.provider == "custom"
        assert config.embedder_class == "my.Embedder"
        assert config.generator_kwargs == {"temperature": 0.1}
        assert config.llm_model is None


class TestImportClass:
    def test_import_class(self):
        from collections import OrderedDict

        assert import_class("collections.OrderedDict") is OrderedDict

    def test_import_missing_module(self):
        with pytest.raises(ImportError):
            import_class("not_a_module_xyz.Thing")
