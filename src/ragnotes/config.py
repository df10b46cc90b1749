# src/ragnotes/config.py
"""Configuration loading utilities for ragnotes.

This module provides configuration loading for the CLI and for external
applications that prefer file/env based setup over passing values to
RagNotes directly.

It handles:
- Finding and loading ragnotes.yaml config files
- Loading .env files for API keys
- Building Settings objects from YAML and RAGNOTES_* environment variables
- Creating RagNotes instances from configuration
"""

from __future__ import annotations

import importlib
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import yaml

from ragnotes.providers.litellm import ChatModels, EmbeddingModels

if TYPE_CHECKING:
    from ragnotes.ragnotes import RagNotes
    from ragnotes.settings import Settings

# Default paths
DEFAULT_DATA_DIR = "./ragnotes_data"
CONFIG_FILES = ["ragnotes.yaml", "ragnotes.yml", ".ragnotesrc"]
ENV_FILE = ".env"

DEFAULT_LLM_MODEL = ChatModels.GEMINI_FLASH
DEFAULT_EMBEDDING_MODEL = EmbeddingModels.GEMINI_004


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from a .env file if it exists.

    Existing environment variables are never overridden.
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip("'\"")
                if key not in os.environ:
                    os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file in start_dir (default: cwd) or its parents."""
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# Valid configuration keys for validation
VALID_ROOT_KEYS = {
    "provider",
    "llm_model",
    "embedding_model",
    "data_dir",
    # Custom provider
    "embedder",
    "generator",
    "embedder_kwargs",
    "generator_kwargs",
    # Settings section
    "settings",
}

VALID_SETTINGS_KEYS = {
    "chunk_size",
    "chunk_overlap",
    "embedding_dimensions",
    "default_k",
    "synthesis_prompt",
    "synthesis_temperature",
    "flashcard_prompt",
    "flashcard_temperature",
    "max_concurrent_embeddings",
    "num_retries",
    "serialize_reindex",
    "task_max_attempts",
    "rate_limit_profile",
}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys."""
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from RAGNOTES_* environment variables.

    Only explicitly set variables are returned, so YAML settings apply
    unless overridden.
    """
    result: dict[str, Any] = {}

    int_settings = {
        "RAGNOTES_CHUNK_SIZE": "chunk_size",
        "RAGNOTES_CHUNK_OVERLAP": "chunk_overlap",
        "RAGNOTES_DEFAULT_K": "default_k",
        "RAGNOTES_NUM_RETRIES": "num_retries",
        "RAGNOTES_MAX_CONCURRENT_EMBEDDINGS": "max_concurrent_embeddings",
    }
    for env_key, settings_key in int_settings.items():
        if (val := _safe_int(os.environ.get(env_key))) is not None:
            result[settings_key] = val

    if "RAGNOTES_EMBEDDING_DIMENSIONS" in os.environ:
        # Empty value disables the dimension check
        result["embedding_dimensions"] = _safe_int(os.environ["RAGNOTES_EMBEDDING_DIMENSIONS"])
    if "RAGNOTES_SYNTHESIS_PROMPT" in os.environ:
        result["synthesis_prompt"] = os.environ["RAGNOTES_SYNTHESIS_PROMPT"] or None
    if "RAGNOTES_FLASHCARD_PROMPT" in os.environ:
        result["flashcard_prompt"] = os.environ["RAGNOTES_FLASHCARD_PROMPT"] or None
    if "RAGNOTES_RATE_LIMIT_PROFILE" in os.environ:
        result["rate_limit_profile"] = os.environ["RAGNOTES_RATE_LIMIT_PROFILE"]

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract the known keys of the 'settings:' section."""
    yaml_settings = config.get("settings", {}) or {}
    return {key: value for key, value in yaml_settings.items() if key in VALID_SETTINGS_KEYS}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build a Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Settings class defaults
    """
    from ragnotes.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    merged = {**yaml_settings, **env_settings}

    # rate_limit_profile affects multiple settings
    rate_limit_profile = merged.pop("rate_limit_profile", None)
    if rate_limit_profile:
        return Settings.with_profile(rate_limit_profile, **merged)
    return Settings(**merged)


def import_class(class_path: str) -> type[Any]:
    """Import a class from a dotted path like 'my_package.module.ClassName'."""
    module_path, class_name = class_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return cast(type[Any], getattr(module, class_name))


@dataclass
class RagNotesConfig:
    """Configuration for creating a RagNotes instance."""

    provider: str
    llm_model: str | None
    embedding_model: str | None
    data_dir: str
    settings: Settings
    llm_api_key: str | None = None
    embedding_api_key: str | None = None
    # Custom provider fields
    embedder_class: str | None = None
    generator_class: str | None = None
    embedder_kwargs: dict[str, Any] | None = None
    generator_kwargs: dict[str, Any] | None = None


def get_ragnotes_config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> RagNotesConfig | ConfigError:
    """Get configuration for creating a RagNotes instance.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        RagNotesConfig, or ConfigError if the configuration is invalid
    """
    try:
        config = load_config(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        return ConfigError(
            message=f"Could not read config file: {e}",
            suggestion="Check the YAML syntax of ragnotes.yaml",
        )

    effective_data_dir = (
        data_dir or config.get("data_dir") or os.environ.get("RAGNOTES_DATA_DIR") or DEFAULT_DATA_DIR
    )
    provider = config.get("provider", "litellm")

    try:
        settings = build_settings(config)
    except ValueError as e:
        return ConfigError(message=f"Invalid settings: {e}")

    if provider == "litellm":
        return RagNotesConfig(
            provider=provider,
            llm_model=config.get("llm_model")
            or os.environ.get("RAGNOTES_LLM_MODEL")
            or DEFAULT_LLM_MODEL,
            embedding_model=config.get("embedding_model")
            or os.environ.get("RAGNOTES_EMBEDDING_MODEL")
            or DEFAULT_EMBEDDING_MODEL,
            data_dir=effective_data_dir,
            settings=settings,
            llm_api_key=os.environ.get("RAGNOTES_LLM_API_KEY"),
            embedding_api_key=os.environ.get("RAGNOTES_EMBEDDING_API_KEY"),
        )

    elif provider == "custom":
        embedder_class = config.get("embedder")
        generator_class = config.get("generator")

        if not embedder_class or not generator_class:
            return ConfigError(
                message="Custom provider requires embedder and generator.",
                suggestion="Add these to ragnotes.yaml as dotted class paths",
            )

        return RagNotesConfig(
            provider=provider,
            llm_model=None,
            embedding_model=None,
            data_dir=effective_data_dir,
            settings=settings,
            embedder_class=embedder_class,
            generator_class=generator_class,
            embedder_kwargs=config.get("embedder_kwargs", {}),
            generator_kwargs=config.get("generator_kwargs", {}),
        )

    else:
        return ConfigError(
            message=f"Unknown provider '{provider}'",
            suggestion="Supported providers: litellm, custom",
        )


@dataclass(frozen=True)
class _CustomProvider:
    """Provider wrapping already-built custom components."""

    embedder: Any
    generator: Any

    def build_embedder(self, settings: Settings) -> Any:
        return self.embedder

    def build_generator(self, settings: Settings) -> Any:
        return self.generator


def create_ragnotes(config: RagNotesConfig) -> RagNotes:
    """Create a RagNotes instance from configuration.

    Raises:
        ImportError: If custom provider classes cannot be imported
        ValueError: If the configuration is incomplete
    """
    from ragnotes.configuration import LiteLLMProvider, LocalStorage
    from ragnotes.ragnotes import RagNotes

    if config.provider == "litellm":
        if not config.llm_model or not config.embedding_model:
            raise ValueError("LiteLLM provider requires llm_model and embedding_model")

        return RagNotes(
            provider=LiteLLMProvider(
                llm=config.llm_model,
                embedding=config.embedding_model,
                llm_api_key=config.llm_api_key,
                embedding_api_key=config.embedding_api_key,
            ),
            storage=LocalStorage(config.data_dir),
            settings=config.settings,
        )

    elif config.provider == "custom":
        if not config.embedder_class or not config.generator_class:
            raise ValueError("Custom provider requires embedder and generator class paths")

        embedder = import_class(config.embedder_class)(**(config.embedder_kwargs or {}))
        generator = import_class(config.generator_class)(**(config.generator_kwargs or {}))

        return RagNotes(
            provider=_CustomProvider(embedder=embedder, generator=generator),
            storage=LocalStorage(config.data_dir),
            settings=config.settings,
        )

    else:
        raise ValueError(f"Unknown provider: {config.provider}")


def get_ragnotes(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> RagNotes | ConfigError:
    """Create a RagNotes instance based on configuration.

    Convenience wrapper around get_ragnotes_config and create_ragnotes.
    """
    config = get_ragnotes_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return config
    return create_ragnotes(config)
