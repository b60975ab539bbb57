"""
Client Configuration

Loads client.yaml, applies client.local.yaml overrides and resolves the
settings the number-properties client uses into typed, validated objects.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class APIConfig:
    """Where the calculator server lives and how hard to try reaching it."""
    endpoint: str = "http://localhost:8000/api/v1"
    timeout: int = 30
    retry_attempts: int = 3


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class NumtheoryClientConfig:
    api: APIConfig = field(default_factory=APIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NumtheoryClientConfig":
        """
        Build config from a parsed YAML mapping, filling in defaults.

        Raises:
            ValueError: If a value has the wrong type or is out of range
        """
        api_data = _section(data, 'api')
        logging_data = _section(data, 'logging')
        defaults_api = APIConfig()

        endpoint = api_data.get('endpoint', defaults_api.endpoint)
        if not isinstance(endpoint, str) or not endpoint.startswith(('http://', 'https://')):
            raise ValueError(f"api.endpoint must be an http(s) URL, got {endpoint!r}")

        timeout = _positive_int(api_data, 'timeout', defaults_api.timeout)
        retry_attempts = _positive_int(api_data, 'retry_attempts', defaults_api.retry_attempts)

        level = str(logging_data.get('level', LoggingConfig.level)).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")

        return cls(
            api=APIConfig(endpoint=endpoint.rstrip('/'), timeout=timeout, retry_attempts=retry_attempts),
            logging=LoggingConfig(level=level),
        )


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"'{name}' section must be a mapping")
    return value


def _positive_int(section: Dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    # bool is an int subclass; "timeout: yes" is a typo, not 1
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"api.{key} must be a positive integer, got {value!r}")
    return value


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if data is None:
        logger.warning(f"Configuration file is empty: {path}")
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return data


def load_client_config(config_path: str) -> NumtheoryClientConfig:
    """
    Load client configuration.

    A missing base file means all defaults. A client.local.yaml next to the
    base file is merged on top; if it cannot be parsed it is skipped with an
    error logged.

    Raises:
        yaml.YAMLError: If the base file is not valid YAML
        ValueError: If a setting is invalid
    """
    config_file = Path(config_path)
    if not config_file.exists():
        logger.debug(f"No configuration file at {config_path}, using defaults")
        return NumtheoryClientConfig()

    data = _read_yaml(config_file)

    local_file = config_file.parent / f"{config_file.stem}.local.yaml"
    if local_file.exists():
        logger.info(f"Loading local configuration overrides from: {local_file}")
        try:
            data = _merge(data, _read_yaml(local_file))
        except (yaml.YAMLError, ValueError) as e:
            logger.error(f"Failed to parse local configuration {local_file}: {e}")

    return NumtheoryClientConfig.from_dict(data)
