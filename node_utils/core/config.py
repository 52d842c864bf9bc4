"""
Configuration management for node utilities.

Provides the configuration schema, validation, loading and the process-wide
active configuration read by sentinel synthesis and classification.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import (
    DEFAULT_CLOSE_SUFFIX,
    DEFAULT_JOIN_SEPARATOR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OPEN_SUFFIX,
    LOG_LEVELS,
)
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class NodeUtilsConfig(BaseModel):
    """Node utilities configuration."""

    model_config = {"extra": "forbid"}  # Reject unknown fields

    open_suffix: str = Field(
        default=DEFAULT_OPEN_SUFFIX, description="Type suffix of open sentinel nodes"
    )
    close_suffix: str = Field(
        default=DEFAULT_CLOSE_SUFFIX, description="Type suffix of close sentinel nodes"
    )
    join_separator: str = Field(
        default=DEFAULT_JOIN_SEPARATOR, description="Separator used by stringify()"
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL, description="Level used by setup_logging()"
    )

    @field_validator("open_suffix", "close_suffix")
    @classmethod
    def validate_suffix(cls, v: str) -> str:
        """Validate sentinel suffix format."""
        if len(v) < 2 or not v.startswith("."):
            raise ValueError(f"Suffix must start with '.' and be non-empty: {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v_upper = v.strip().upper()
        if v_upper not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return v_upper

    @model_validator(mode="after")
    def validate_suffixes_differ(self) -> "NodeUtilsConfig":
        """Open and close sentinels must be distinguishable."""
        if self.open_suffix == self.close_suffix:
            raise ValueError("open_suffix and close_suffix must differ")
        return self


_active_config: Optional[NodeUtilsConfig] = None


def get_config() -> NodeUtilsConfig:
    """Return the active configuration, creating defaults on first use."""
    global _active_config
    if _active_config is None:
        _active_config = NodeUtilsConfig()
    return _active_config


def set_config(config: NodeUtilsConfig) -> NodeUtilsConfig:
    """
    Replace the active configuration.

    Args:
        config: Validated configuration object

    Returns:
        The configuration that was installed
    """
    global _active_config
    if not isinstance(config, NodeUtilsConfig):
        raise ConfigurationError(
            f"Expected NodeUtilsConfig, got {type(config).__name__}"
        )
    _active_config = config
    logger.debug(f"Active configuration replaced: {config.model_dump()}")
    return config


def reset_config() -> None:
    """Drop the active configuration so defaults are used again."""
    global _active_config
    _active_config = None


def validate_config(
    config_path: Path,
) -> tuple[bool, Optional[str], Optional[NodeUtilsConfig]]:
    """
    Validate configuration file.

    Args:
        config_path: Path to configuration file

    Returns:
        Tuple of (is_valid, error_message, config_object)
    """
    try:
        if not config_path.exists():
            return False, f"Configuration file not found: {config_path}", None

        with open(config_path, "r", encoding="utf-8") as f:
            config_data = json.load(f)

        if not isinstance(config_data, dict):
            return False, "Configuration root must be a JSON object", None

        config = NodeUtilsConfig(**config_data)
        return True, None, config

    except json.JSONDecodeError as e:
        return False, f"Invalid JSON: {str(e)}", None
    except ValueError as e:
        return False, f"Validation error: {str(e)}", None


def load_config(config_path: Path, activate: bool = False) -> NodeUtilsConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Path to configuration file
        activate: Install the loaded configuration as the active one

    Returns:
        NodeUtilsConfig object

    Raises:
        ConfigurationError: If configuration is invalid
    """
    is_valid, error, config = validate_config(Path(config_path))
    if not is_valid or config is None:
        raise ConfigurationError(
            error or "Invalid configuration", details={"path": str(config_path)}
        )
    logger.debug(f"Loaded configuration from {config_path}")
    if activate:
        set_config(config)
    return config


def save_config(config: NodeUtilsConfig, config_path: Path) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration object
        config_path: Path to save configuration
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    data: Dict[str, Any] = config.model_dump()
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
