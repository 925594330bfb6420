from dataclasses import dataclass
from typing import Any

import yaml

from .common import ConfigError


@dataclass
class ClientConfig:
    """
    Settings needed to reach a node's personal API
    """

    endpoint: str
    timeout: float = 30.0


def config_from_dict(data: Any) -> ClientConfig:
    """
    Build client settings out of a dictionary (usually loaded from yaml).

    Args:
        data: dictionary with an "endpoint" and an optional "timeout" in seconds

    Returns:
        client settings

    Raises:
        ConfigError: if the endpoint is missing or the timeout is not a positive number
    """
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping")
    if not isinstance(data.get("endpoint"), str) or not data["endpoint"]:
        raise ConfigError("Config is missing required field 'endpoint'")

    timeout = data.get("timeout", 30.0)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"Config field 'timeout' must be a positive number, got {timeout!r}")

    return ClientConfig(endpoint=data["endpoint"], timeout=float(timeout))


def config_from_yaml(filename: str) -> ClientConfig:
    """
    Load client settings from a yaml file.

    Args:
        filename: path to the config file

    Returns:
        client settings

    The file looks like this:

    .. code-block:: yaml

        endpoint: http://127.0.0.1:8545
        timeout: 30
    """
    with open(filename, "r") as file_handle:
        data = yaml.safe_load(file_handle)
        return config_from_dict(data)
