"""Pytest configuration for cache_control tests."""
import pytest

from cache_control import CacheControlParserConfig


@pytest.fixture
def s_maxage_config():
    """Parser config with s-maxage parsing enabled."""
    return CacheControlParserConfig(parse_s_maxage=True)


@pytest.fixture
def boolean_directives():
    """Flag directives and the field each one sets."""
    return {
        "must-revalidate": "must_revalidate",
        "proxy-revalidate": "proxy_revalidate",
        "immutable": "immutable",
        "no-store": "no_store",
        "no-transform": "no_transform",
    }
