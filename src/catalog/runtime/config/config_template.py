"""Configuration template substitution utilities."""

import os
import re
from collections.abc import Mapping
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.catalog.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(text: str, environ: Mapping[str, str] | None = None) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message

    Values are looked up in ``environ``, or in ``os.environ`` when omitted.
    """
    env = os.environ if environ is None else environ

    def replacer(match: re.Match) -> str:
        expression = match.group(1)

        if ":-" in expression:
            name, default = expression.split(":-", 1)
            return env.get(name, default)

        if ":?" in expression:
            name, error_msg = expression.split(":?", 1)
            value = env.get(name)
            if value is None:
                raise ValueError(f"Required environment variable {name}: {error_msg}")
            return value

        value = env.get(expression)
        if value is None:
            raise ValueError(f"Required environment variable {expression} not set")
        return value

    return _PLACEHOLDER.sub(replacer, text)


def environment_with_overrides(env_mode: str) -> dict[str, str]:
    """Copy of the environment with ``<ENV>_NAME`` variables promoted to ``NAME``."""
    prefix = f"{env_mode.upper()}_"
    environ = dict(os.environ)
    for name, value in os.environ.items():
        if name.startswith(prefix):
            environ[name[len(prefix):]] = value
            logger.debug(f"Using {name} for environment variable {name[len(prefix):]}")
    return environ


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML config file with environment variable substitution.

    Args:
        file_path: Path to the YAML file

    Returns:
        The validated ``config`` section

    Raises:
        ValueError: If required environment variables are missing or the
            file does not contain a valid configuration
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    env_mode = os.getenv("APP_ENVIRONMENT", "development")
    logger.info(f"Loading configuration for environment: {env_mode}")
    environ = environment_with_overrides(env_mode)

    substituted_content = substitute_env_vars(content, environ)

    try:
        loaded = yaml.safe_load(substituted_content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        return ConfigData(**(loaded.get("config") or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
