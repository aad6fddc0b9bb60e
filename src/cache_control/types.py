"""
Types for parsed HTTP Cache-Control headers.
"""
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import CacheControlParserConfig


class Cachability(str, Enum):
    """How the data may be cached."""

    PUBLIC = "public"
    """Any cache can cache this data."""

    PRIVATE = "private"
    """Data cannot be cached in shared caches."""

    NO_CACHE = "no-cache"
    """No one can cache this data."""

    ONLY_IF_CACHED = "only-if-cached"
    """Cache the data the first time, and use the cache from then on."""


@dataclass(frozen=True)
class CacheControl:
    """Parsed Cache-Control directives."""

    cachability: Optional[Cachability] = None
    """Last visibility directive seen (public, private, no-cache, only-if-cached)."""

    max_age: Optional[timedelta] = None
    """Maximum time a resource is considered fresh, relative to the request."""

    s_max_age: Optional[timedelta] = None
    """Overrides max-age for shared caches. Only set when s-maxage parsing is enabled."""

    max_stale: Optional[timedelta] = None
    """Upper limit of staleness the client will accept."""

    min_fresh: Optional[timedelta] = None
    """Time the response must still be fresh for."""

    must_revalidate: bool = False
    """Stale copies must not be used without successful validation."""

    proxy_revalidate: bool = False
    """Like must-revalidate, but only for shared caches."""

    immutable: bool = False
    """Response body will not change over time."""

    no_store: bool = False
    """Response may not be stored in any cache."""

    no_transform: bool = False
    """Intermediaries may not edit the body, Content-Encoding, Content-Range or Content-Type."""

    @classmethod
    def from_value(
        cls, value: str, config: Optional["CacheControlParserConfig"] = None
    ) -> Optional["CacheControl"]:
        """Parse the value of a Cache-Control header (everything after "Cache-Control:")."""
        from .parser import parse_value

        return parse_value(value, config=config)

    @classmethod
    def from_header(
        cls, line: str, config: Optional["CacheControlParserConfig"] = None
    ) -> Optional["CacheControl"]:
        """Parse a full "Cache-Control: ..." header line."""
        from .parser import parse_header

        return parse_header(line, config=config)
