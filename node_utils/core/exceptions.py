"""
Base exception hierarchy for node utility operations.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""


class NodeUtilsError(Exception):
    """Base exception for node utility operations."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class InvalidArgumentError(NodeUtilsError, TypeError):
    """Raised when an argument fails its type/shape precondition."""

    def __init__(self, message: str, argument: str = None, details: dict = None):
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            argument: Optional name of the offending argument
            details: Optional additional details
        """
        super().__init__(message, code="INVALID_ARGUMENT", details=details)
        self.argument = argument


class NestingStateError(NodeUtilsError):
    """Raised when a nesting state is popped before anything was pushed."""

    def __init__(self, message: str, node_type: str = None, details: dict = None):
        """
        Initialize nesting state error.

        Args:
            message: Error message
            node_type: Optional tracking key that was being popped
            details: Optional additional details
        """
        super().__init__(message, code="NESTING_STATE_ERROR", details=details)
        self.node_type = node_type


class MatcherParseError(NodeUtilsError, ValueError):
    """Raised when a matcher expression cannot be parsed."""

    def __init__(self, message: str, expression: str = None, details: dict = None):
        super().__init__(message, code="MATCHER_PARSE_ERROR", details=details)
        self.expression = expression


class ConfigurationError(NodeUtilsError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, config_key: str = None, details: dict = None):
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key that is invalid
            details: Optional additional details
        """
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
        self.config_key = config_key
