"""
Configuration for hostfit.

Configuration is read from a YAML file and HOSTFIT_* environment variables
and validated with pydantic.

Example file:
    facts_file: /etc/hostfit/facts.yaml
    facts:
      osfamily: Debian
    search_path:
      - /usr/local/sbin
      - /usr/sbin
      - /usr/bin
    command_timeout: 300
    log_level: INFO
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from hostfit.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("/etc/hostfit/hostfit.yaml")
ENV_PREFIX = "HOSTFIT_"


class HostfitConfig(BaseModel):
    """
    Settings for fact gathering, binary resolution and command execution.

    Example:
        config = HostfitConfig(
            facts={"osfamily": "RedHat"},
            search_path=["/usr/sbin", "/usr/bin"],
            command_timeout=120,
        )
        context = HostfitContext.from_config(config)
    """

    facts_file: str | None = Field(
        default=None, description="YAML file with pinned facts"
    )
    facts: dict[str, Any] = Field(
        default_factory=dict, description="Inline fact overrides"
    )
    use_host_facts: bool = Field(
        default=True, description="Fall back to facts detected from this machine"
    )
    search_path: list[str] | None = Field(
        default=None, description="Directories searched for commands (default: $PATH)"
    )
    command_timeout: float | None = Field(
        default=None, description="Seconds before an external command is killed"
    )
    log_level: str = Field(default="WARNING", description="Logging level name")

    class Config:
        extra = "forbid"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("search_path", mode="before")
    @classmethod
    def split_search_path(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part for part in value.split(os.pathsep) if part]
        return value


def _env_overrides(environ: dict[str, str]) -> dict[str, Any]:
    """Collect HOSTFIT_* variables that name a config field."""
    overrides: dict[str, Any] = {}
    for field in ("facts_file", "search_path", "command_timeout", "log_level"):
        key = ENV_PREFIX + field.upper()
        if environ.get(key):
            overrides[field] = environ[key]
    if environ.get(ENV_PREFIX + "USE_HOST_FACTS"):
        flag = environ[ENV_PREFIX + "USE_HOST_FACTS"].lower()
        overrides["use_host_facts"] = flag not in ("0", "false", "no", "off")
    return overrides


def load_config(
    path: str | Path | None = None,
    environ: dict[str, str] | None = None,
) -> HostfitConfig:
    """
    Load configuration from YAML and the environment.

    Args:
        path: Config file. When omitted, HOSTFIT_CONFIG or the system-wide
            default is used if it exists; otherwise defaults apply.
        environ: Environment to read overrides from (default: os.environ)

    Returns:
        Validated HostfitConfig

    Raises:
        ConfigError: If the file cannot be read or the values are invalid
    """
    environ = dict(os.environ if environ is None else environ)

    if path is None:
        if environ.get(ENV_PREFIX + "CONFIG"):
            path = environ[ENV_PREFIX + "CONFIG"]
        elif DEFAULT_CONFIG_PATH.exists():
            path = DEFAULT_CONFIG_PATH

    data: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as fh:
                loaded = yaml.safe_load(fh)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        data = loaded or {}
        logger.debug("Loaded configuration from %s", path)

    data.update(_env_overrides(environ))

    try:
        return HostfitConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
