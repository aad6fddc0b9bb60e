"""
Configuration for the Cache-Control parser.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CacheControlParserConfig(BaseModel):
    """Parser options. Defaults reproduce the reference parsing behavior."""

    model_config = ConfigDict(frozen=True)

    header_name: str = "Cache-Control"
    """Header field name accepted by parse_header (compared case-insensitively)."""

    parse_s_maxage: bool = False
    """Populate s_max_age from s-maxage. Off by default: the field stays absent."""


DEFAULT_PARSER_CONFIG = CacheControlParserConfig()


def merge_parser_config(
    config: Optional[CacheControlParserConfig] = None,
) -> CacheControlParserConfig:
    """Return the given config, or the defaults when none is given."""
    if config is None:
        return DEFAULT_PARSER_CONFIG
    return config
