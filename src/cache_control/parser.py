"""
Cache-Control header parsing.

Directive names are matched exactly (case-sensitive) against a fixed
vocabulary; unknown directives are ignored. A duration directive with a
missing or invalid value rejects the whole header.
"""
import logging
import re
from datetime import timedelta
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from .config import CacheControlParserConfig, merge_parser_config
from .exceptions import (
    CacheControlParseError,
    HeaderNameMismatchError,
    InvalidDirectiveValueError,
    MalformedHeaderLineError,
)
from .types import Cachability, CacheControl

logger = logging.getLogger(__name__)

# Unsigned 64-bit delta-seconds, optional leading '+'.
_DELTA_SECONDS_RE = re.compile(r"\+?[0-9]+")
_MAX_DELTA_SECONDS = 2**64 - 1

DirectiveHandler = Callable[[Dict[str, Any], str, Optional[str]], None]
"""Applies one directive to the field accumulator."""


def parse_seconds(value: str) -> timedelta:
    """
    Parse a delta-seconds value into a timedelta.

    Args:
        value: Trimmed directive value, e.g. "60"

    Returns:
        Duration with one-second resolution

    Raises:
        ValueError: If the value is not a non-negative integer that fits
            both an unsigned 64-bit integer and a timedelta
    """
    if not _DELTA_SECONDS_RE.fullmatch(value):
        raise ValueError(f"invalid delta-seconds: {value!r}")
    seconds = int(value)
    if seconds > _MAX_DELTA_SECONDS:
        raise ValueError(f"delta-seconds out of range: {value!r}")
    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise ValueError(f"delta-seconds out of range: {value!r}") from e


def _set_cachability(cachability: Cachability) -> DirectiveHandler:
    def handler(fields: Dict[str, Any], directive: str, value: Optional[str]) -> None:
        fields["cachability"] = cachability

    return handler


def _set_duration(field_name: str) -> DirectiveHandler:
    def handler(fields: Dict[str, Any], directive: str, value: Optional[str]) -> None:
        if value is None:
            raise InvalidDirectiveValueError(directive, value)
        try:
            fields[field_name] = parse_seconds(value)
        except ValueError as e:
            raise InvalidDirectiveValueError(directive, value) from e

    return handler


def _set_flag(field_name: str) -> DirectiveHandler:
    def handler(fields: Dict[str, Any], directive: str, value: Optional[str]) -> None:
        fields[field_name] = True

    return handler


_DIRECTIVE_HANDLERS: Mapping[str, DirectiveHandler] = MappingProxyType(
    {
        "public": _set_cachability(Cachability.PUBLIC),
        "private": _set_cachability(Cachability.PRIVATE),
        "no-cache": _set_cachability(Cachability.NO_CACHE),
        "only-if-cached": _set_cachability(Cachability.ONLY_IF_CACHED),
        "max-age": _set_duration("max_age"),
        "max-stale": _set_duration("max_stale"),
        "min-fresh": _set_duration("min_fresh"),
        "must-revalidate": _set_flag("must_revalidate"),
        "proxy-revalidate": _set_flag("proxy_revalidate"),
        "immutable": _set_flag("immutable"),
        "no-store": _set_flag("no_store"),
        "no-transform": _set_flag("no_transform"),
    }
)

_DIRECTIVE_HANDLERS_WITH_S_MAXAGE: Mapping[str, DirectiveHandler] = MappingProxyType(
    {**_DIRECTIVE_HANDLERS, "s-maxage": _set_duration("s_max_age")}
)


def _handlers_for(config: CacheControlParserConfig) -> Mapping[str, DirectiveHandler]:
    if config.parse_s_maxage:
        return _DIRECTIVE_HANDLERS_WITH_S_MAXAGE
    return _DIRECTIVE_HANDLERS


def parse_value_strict(
    text: str, config: Optional[CacheControlParserConfig] = None
) -> CacheControl:
    """
    Parse a Cache-Control header value, raising on failure.

    Tokens are split on ',' without quoted-string awareness, so a comma
    inside a quoted value splits the token.

    Args:
        text: Header value, e.g. "public, max-age=60"
        config: Parser options (defaults when omitted)

    Returns:
        Parsed directives

    Raises:
        InvalidDirectiveValueError: If max-age, max-stale or min-fresh
            (or s-maxage, when enabled) has a missing or invalid value
    """
    handlers = _handlers_for(merge_parser_config(config))
    fields: Dict[str, Any] = {}

    for token in text.split(","):
        key, sep, raw_value = token.partition("=")
        key = key.strip()
        value = raw_value.strip() if sep else None

        handler = handlers.get(key)
        if handler is not None:
            handler(fields, key, value)

    return CacheControl(**fields)


def parse_header_strict(
    line: str, config: Optional[CacheControlParserConfig] = None
) -> CacheControl:
    """
    Parse a full "Cache-Control: <value>" header line, raising on failure.

    Raises:
        MalformedHeaderLineError: If the line has no ':'
        HeaderNameMismatchError: If the field name is not the configured header
        InvalidDirectiveValueError: See parse_value_strict
    """
    config = merge_parser_config(config)

    name, sep, value = line.partition(":")
    if not sep:
        raise MalformedHeaderLineError(line)

    name = name.strip()
    if name.lower() != config.header_name.lower():
        raise HeaderNameMismatchError(name, config.header_name)

    return parse_value_strict(value, config=config)


def parse_value(
    text: str, config: Optional[CacheControlParserConfig] = None
) -> Optional[CacheControl]:
    """Parse a Cache-Control header value. Returns None if it is invalid."""
    try:
        return parse_value_strict(text, config=config)
    except CacheControlParseError as e:
        logger.debug("Rejected Cache-Control value: %s", e)
        return None


def parse_header(
    line: str, config: Optional[CacheControlParserConfig] = None
) -> Optional[CacheControl]:
    """Parse a full "Cache-Control: <value>" header line. Returns None if it is invalid."""
    try:
        return parse_header_strict(line, config=config)
    except CacheControlParseError as e:
        logger.debug("Rejected Cache-Control header: %s", e)
        return None
