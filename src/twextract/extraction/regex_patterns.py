#!/usr/bin/env python3
"""
Named pattern catalog for tweet entity extraction.

This module is the single lookup point the extractors use: every pattern is
requested by name through ``get_pattern``. Patterns are compiled on first use
and shared by all extraction sessions afterwards.
"""
from __future__ import annotations

import re
from typing import Callable, Pattern

import regex

from ..core.config import ConfigurationError, setup_logging
from . import pattern_modules

logger = setup_logging(__name__, include_console=False)

_PATTERN_BUILDERS: dict[str, Callable[[], Pattern[str]]] = {
    # Hashtags and cashtags
    "valid_hashtag": pattern_modules.build_valid_hashtag_pattern,
    "end_hashtag_match": pattern_modules.build_end_hashtag_pattern,
    "valid_cashtag": pattern_modules.build_valid_cashtag_pattern,
    # URLs
    "valid_url": pattern_modules.build_valid_url_pattern,
    "valid_ascii_domain": pattern_modules.build_valid_ascii_domain_pattern,
    "invalid_short_domain": pattern_modules.build_invalid_short_domain_pattern,
    "valid_tco_url": pattern_modules.build_valid_tco_url_pattern,
    "invalid_url_without_protocol_match_begin": pattern_modules.build_invalid_url_without_protocol_begin_pattern,
    # Mentions, lists and replies
    "valid_mentions_or_lists": pattern_modules.build_valid_mentions_or_lists_pattern,
    "valid_reply": pattern_modules.build_valid_reply_pattern,
    "end_mention_match": pattern_modules.build_end_mention_pattern,
}

PATTERN_NAMES: tuple[str, ...] = tuple(_PATTERN_BUILDERS)


def get_pattern(pattern_name: str) -> Pattern[str]:
    """
    Get a compiled pattern by name.

    Raises:
        ConfigurationError: the name is unknown or the pattern does not compile
    """
    builder = _PATTERN_BUILDERS.get(pattern_name)
    if builder is None:
        raise ConfigurationError(f"Unknown pattern: {pattern_name!r}")

    try:
        return builder()
    except (re.error, regex.error) as e:
        raise ConfigurationError(f"Pattern {pattern_name!r} failed to compile: {e}") from e


def require_patterns(*pattern_names: str) -> dict[str, Pattern[str]]:
    """Resolve several patterns at once, failing on the first missing one."""
    patterns = {name: get_pattern(name) for name in pattern_names}
    logger.debug(f"Resolved {len(patterns)} catalog pattern(s)")
    return patterns
