"""
Project-wide constants.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from typing import Set, Tuple

# ============================================================================
# Sentinel Nodes
# ============================================================================

DEFAULT_OPEN_SUFFIX: str = ".open"
DEFAULT_CLOSE_SUFFIX: str = ".close"

# Type assigned by to_noop()
NOOP_NODE_TYPE: str = "text"


# ============================================================================
# Node Fields
# ============================================================================

# Identity marker checked by is_node()
NODE_MARKER_ATTR: str = "is_node"

# Payload fields, primary first
VALUE_FIELDS: Tuple[str, ...] = ("value", "val")

# Output sink method names, preferred first
SINK_METHODS: Tuple[str, ...] = ("append", "emit")


# ============================================================================
# Primitives / Logging
# ============================================================================

DEFAULT_JOIN_SEPARATOR: str = ","

DEFAULT_LOG_LEVEL: str = "WARNING"

LOG_LEVELS: Set[str] = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Name of the package root logger
ROOT_LOGGER_NAME: str = "node_utils"
