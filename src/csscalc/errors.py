"""
Error types for the CSS math expression builder.

All builder errors extend CalcError for consistent handling. They signal
programmer mistakes (missing operands), never malformed CSS: units, keywords
and raw text are accepted unchecked.
"""

from typing import Optional


class CalcError(Exception):
    """
    Base error class for all expression-building errors.
    """

    def __init__(self, message: str, function_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.function_name = function_name


class EmptyInputError(CalcError):
    """
    Error thrown when no operand remains after dropping None placeholders.
    """

    def __init__(self, function_name: Optional[str] = None):
        super().__init__("Expected at least one item.", function_name)


class MissingArgumentError(CalcError):
    """
    Error thrown when a required function argument is None.
    """

    def __init__(self, function_name: str, argument: str):
        message = f"{function_name}: missing required argument '{argument}'"
        super().__init__(message, function_name)
        self.argument = argument


class LimitExceededError(CalcError):
    """
    Error thrown when a tree exceeds the configured limits.
    """

    def __init__(self, limit_name: str, limit: int, actual: int):
        message = f"Limit exceeded: {limit_name} (limit: {limit}, actual: {actual})"
        super().__init__(message)
        self.limit_name = limit_name
        self.limit = limit
        self.actual = actual
