#!/usr/bin/env python3
"""
Hashtag and cashtag patterns.

Named groups:
    valid_hashtag:  before, hash, tag
    valid_cashtag:  before, dollar, tag

The hashtag body is defined by Unicode general categories, so
``valid_hashtag`` is compiled with the ``regex`` library.
"""
from __future__ import annotations

import re

import regex

from ..pattern_cache import cached_pattern
from .character_classes import (
    ASCII_PUNCTUATION,
    HASH_SIGNS,
    HASHTAG_ALPHA,
    HASHTAG_ALPHANUMERIC,
    UNICODE_SPACES,
)


@cached_pattern
def build_valid_hashtag_pattern() -> regex.Pattern:
    """
    ``#tag`` / ``＃tag`` preceded by start of text, a variation selector, or
    any character that cannot be part of a tag (``&`` excluded so HTML
    entities such as ``&#39;`` never start a hashtag).
    """
    pattern_str = rf"""
    (?P<before>
        ^
        |\U0000fe0e|\U0000fe0f          # text / emoji variation selectors
        |[^&{HASHTAG_ALPHANUMERIC}]
    )
    (?P<hash>[{HASH_SIGNS}])
    (?!\U0000fe0f|\U000020e3)           # not a keycap emoji sequence
    (?P<tag>[{HASHTAG_ALPHANUMERIC}]*[{HASHTAG_ALPHA}][{HASHTAG_ALPHANUMERIC}]*)
    """
    return regex.compile(pattern_str, regex.VERBOSE)


@cached_pattern
def build_end_hashtag_pattern() -> re.Pattern[str]:
    """Applied with ``match()`` right after a tag: another hash or a URL scheme."""
    return re.compile(rf"[{HASH_SIGNS}]|://")


@cached_pattern
def build_valid_cashtag_pattern() -> re.Pattern[str]:
    """``$AAPL``, ``$BRK.A``: up to six letters with an optional short suffix."""
    pattern_str = rf"""
    (?P<before>^|[{UNICODE_SPACES}])
    (?P<dollar>\$)
    (?P<tag>[a-z]{{1,6}}(?:[._][a-z]{{1,2}})?)
    (?=\Z|[{UNICODE_SPACES}]|[{ASCII_PUNCTUATION}])
    """
    return re.compile(pattern_str, re.VERBOSE | re.IGNORECASE | re.ASCII)
