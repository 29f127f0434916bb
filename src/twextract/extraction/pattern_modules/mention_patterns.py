#!/usr/bin/env python3
"""
@mention, @user/list and reply patterns.

Named groups:
    valid_mentions_or_lists:  before, at, screen_name, list_slug
    valid_reply:              screen_name
"""
from __future__ import annotations

import re

from ..pattern_cache import cached_pattern
from .character_classes import AT_SIGNS, LATIN_ACCENTS, UNICODE_SPACES

SCREEN_NAME = r"[a-z0-9_]{1,20}"

# Slug keeps its leading slash; the detector strips it
LIST_SLUG = r"/[a-z][-_a-z0-9\x80-\xff]{0,24}"


@cached_pattern
def build_valid_mentions_or_lists_pattern() -> re.Pattern[str]:
    """
    A mention may follow start of text, a character that cannot end an
    e-mail local part or another entity, or a retweet marker (``RT @user``).
    """
    pattern_str = rf"""
    (?P<before>
        ^
        |[^a-z0-9_!#$%&*{AT_SIGNS}]
        |(?:^|[^a-z0-9_+~.-])RT:?
    )
    (?P<at>[{AT_SIGNS}])
    (?P<screen_name>{SCREEN_NAME})
    (?P<list_slug>{LIST_SLUG})?
    """
    return re.compile(pattern_str, re.VERBOSE | re.IGNORECASE | re.ASCII)


@cached_pattern
def build_valid_reply_pattern() -> re.Pattern[str]:
    """A mention at the very start of the text, optionally after whitespace."""
    pattern_str = rf"""
    ^(?:[{UNICODE_SPACES}])*
    [{AT_SIGNS}]
    (?P<screen_name>{SCREEN_NAME})
    """
    return re.compile(pattern_str, re.VERBOSE | re.IGNORECASE | re.ASCII)


@cached_pattern
def build_end_mention_pattern() -> re.Pattern[str]:
    """Applied with ``match()`` after a mention: another at-sign, an accented letter or a scheme."""
    return re.compile(rf"[{AT_SIGNS}]|[{LATIN_ACCENTS}]|://", re.IGNORECASE)
