"""Configuration loader with YAML merging and environment overrides."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from narration_sync.config.schema import NarrationSyncConfig
from narration_sync.core.exceptions import ConfigError
from narration_sync.utils.logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "NARRATION_SYNC"


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, override takes precedence.

    Args:
        base: Base dictionary
        override: Override dictionary (takes precedence)

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML as dictionary

    Raises:
        ConfigError: If file not found or invalid YAML
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return data


def apply_env_overrides(
    config: dict[str, Any],
    prefix: str = ENV_PREFIX,
    environ: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Apply environment variable overrides to config.

    Environment variables follow pattern: {PREFIX}__{SECTION}__{KEY}
    Example: NARRATION_SYNC__ALIGNMENT__FALLBACK_DURATION=0.75

    Args:
        config: Configuration dictionary
        prefix: Environment variable prefix
        environ: Variables to read, defaults to os.environ

    Returns:
        Config with environment overrides applied
    """
    environ = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}

    for key, value in environ.items():
        if not key.startswith(f"{prefix}__"):
            continue

        # NARRATION_SYNC__ALIGNMENT__LOG_MISMATCHES -> ['alignment', 'log_mismatches']
        parts = key[len(prefix) + 2:].lower().split("__")

        target = overrides
        for part in parts[:-1]:
            target = target.setdefault(part, {})

        target[parts[-1]] = _convert_value(value)
        logger.debug(f"Env override: {'.'.join(parts)} = {value}")

    return deep_merge(config, overrides)


def _convert_value(value: str) -> Any:
    """Convert string value to appropriate type."""
    lowered = value.lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    if lowered in ("null", "none"):
        return None

    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        pass

    return value


def load_config(
    config_path: Path | str | None = None,
    env: str | None = None,
    config_dir: Path | str = "configs",
) -> NarrationSyncConfig:
    """Load configuration from YAML files with environment overrides.

    Loading order (each overrides previous):
    1. Default values from schema
    2. base.yaml (if exists)
    3. {env}.yaml (if env specified and exists)
    4. config_path (if specified)
    5. Environment variables

    Args:
        config_path: Optional specific config file to load
        env: Environment name (development, production, etc.)
        config_dir: Directory containing config files

    Returns:
        Validated NarrationSyncConfig instance

    Raises:
        ConfigError: If configuration is invalid
    """
    config_dir = Path(config_dir)
    config: dict[str, Any] = {}

    base_path = config_dir / "base.yaml"
    if base_path.exists():
        logger.debug(f"Loading base config: {base_path}")
        config = deep_merge(config, load_yaml(base_path))

    if env:
        env_path = config_dir / f"{env}.yaml"
        if env_path.exists():
            logger.debug(f"Loading {env} config: {env_path}")
            config = deep_merge(config, load_yaml(env_path))

    if config_path:
        config_path = Path(config_path)
        logger.debug(f"Loading config: {config_path}")
        config = deep_merge(config, load_yaml(config_path))

    config = apply_env_overrides(config)

    try:
        return NarrationSyncConfig(**config)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}")
