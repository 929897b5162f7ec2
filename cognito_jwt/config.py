"""Configuration handling for the Cognito JWT tool."""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


CONFIG_PATH_ENV = "COGNITO_POOL_CONFIG"
CONFIG_SUBPATH = (".aws", "cognito_pool.json")

# Cognito user pool ids are "<region>_<suffix>", e.g. "us-east-1_AbCdEf123".
_POOL_REGION_RE = re.compile(r"^([a-z]{2}(?:-[a-z]+)+-\d+)_\w+$")


class ConfigError(RuntimeError):
    """Raised when the pool configuration cannot be loaded."""


@dataclass(frozen=True)
class PoolConfig:
    """User pool identifiers read from the local config file."""

    user_pool_id: str
    client_id: str
    region: Optional[str] = None


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigError(f"Environment variable '{name}' must be set")
    return value


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    return value if value else None


def _home_env_name() -> str:
    # Windows exposes the profile directory through HOMEPATH.
    if sys.platform.startswith("win"):
        return "HOMEPATH"
    return "HOME"


def resolve_config_path() -> Path:
    """Return the location of the user pool config file."""

    explicit = _optional_env(CONFIG_PATH_ENV)
    if explicit:
        return Path(explicit)

    home = _required_env(_home_env_name())
    return Path(home).joinpath(*CONFIG_SUBPATH)


def region_from_pool_id(user_pool_id: str) -> str | None:
    """Extract the AWS region encoded in a user pool id, if any."""

    match = _POOL_REGION_RE.match(user_pool_id)
    if not match:
        return None
    return match.group(1)


def _required_field(data: Dict[str, Any], key: str, path: Path) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string in {path}")
    return value


def load_pool_config(path: Path) -> PoolConfig:
    """Read and validate the JSON pool config at ``path``."""

    logger.debug("Reading pool config from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Config file {path} could not be read: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    user_pool_id = _required_field(data, "user_pool_id", path)
    client_id = _required_field(data, "client_id", path)

    region = data.get("region")
    if region is not None and (not isinstance(region, str) or not region.strip()):
        raise ConfigError(f"'region' must be a non-empty string in {path}")
    if region is None:
        region = region_from_pool_id(user_pool_id)

    return PoolConfig(user_pool_id=user_pool_id, client_id=client_id, region=region)
