"""
HTTP Cache-Control header parsing.

Example:
    cache_control = parse_header("Cache-Control: public, max-age=60")
    assert cache_control.cachability == Cachability.PUBLIC
    assert cache_control.max_age == timedelta(seconds=60)
"""
from .types import (
    Cachability,
    CacheControl,
)
from .config import (
    CacheControlParserConfig,
    DEFAULT_PARSER_CONFIG,
    merge_parser_config,
)
from .exceptions import (
    CacheControlParseError,
    InvalidDirectiveValueError,
    MalformedHeaderLineError,
    HeaderNameMismatchError,
)
from .parser import (
    parse_value,
    parse_header,
    parse_value_strict,
    parse_header_strict,
    parse_seconds,
)


__all__ = [
    # Types
    "Cachability",
    "CacheControl",
    # Config
    "CacheControlParserConfig",
    "DEFAULT_PARSER_CONFIG",
    "merge_parser_config",
    # Errors
    "CacheControlParseError",
    "InvalidDirectiveValueError",
    "MalformedHeaderLineError",
    "HeaderNameMismatchError",
    # Parser
    "parse_value",
    "parse_header",
    "parse_value_strict",
    "parse_header_strict",
    "parse_seconds",
]

__version__ = "1.0.0"
