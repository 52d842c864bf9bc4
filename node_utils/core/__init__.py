"""
Core infrastructure: exceptions, constants and configuration.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .config import (
    NodeUtilsConfig,
    get_config,
    load_config,
    reset_config,
    save_config,
    set_config,
    validate_config,
)
from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    MatcherParseError,
    NestingStateError,
    NodeUtilsError,
)

__all__ = [
    "NodeUtilsConfig",
    "get_config",
    "load_config",
    "reset_config",
    "save_config",
    "set_config",
    "validate_config",
    "ConfigurationError",
    "InvalidArgumentError",
    "MatcherParseError",
    "NestingStateError",
    "NodeUtilsError",
]
