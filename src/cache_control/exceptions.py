"""
Errors raised by the strict Cache-Control parsing functions.
"""
from typing import Optional


class CacheControlParseError(Exception):
    """Base error for a Cache-Control header that could not be parsed."""

    code = "CACHE_CONTROL_PARSE_ERROR"


class InvalidDirectiveValueError(CacheControlParseError):
    """A directive that requires delta-seconds has a missing or invalid value."""

    code = "INVALID_DIRECTIVE_VALUE"

    def __init__(self, directive: str, value: Optional[str]) -> None:
        self.directive = directive
        self.value = value
        if value is None:
            message = f"Directive '{directive}' requires a value"
        else:
            message = f"Directive '{directive}' has invalid value '{value}'"
        super().__init__(message)


class MalformedHeaderLineError(CacheControlParseError):
    """Header line has no ':' separating name and value."""

    code = "MALFORMED_HEADER_LINE"

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Header line '{line}' has no ':' separator")


class HeaderNameMismatchError(CacheControlParseError):
    """Header line names a field other than Cache-Control."""

    code = "HEADER_NAME_MISMATCH"

    def __init__(self, name: str, expected: str) -> None:
        self.name = name
        self.expected = expected
        super().__init__(f"Expected header '{expected}', got '{name}'")
