#!/usr/bin/env python3
"""
URL and domain patterns for tweets.

Named groups of ``valid_url``: before, url, protocol, domain, port, path,
query. The remaining patterns are helpers used by the URL detector to
post-filter protocol-less candidates and t.co links.
"""
from __future__ import annotations

import re

from ..pattern_cache import cached_pattern
from .character_classes import (
    CONTROL_CHARACTERS,
    CYRILLIC,
    INVALID_CHARACTERS,
    LATIN_ACCENTS,
    PUNCTUATION_CHARACTERS,
    UNICODE_SPACES,
)

# ==============================================================================
# TOP LEVEL DOMAINS
# ==============================================================================

GENERIC_TLDS = [
    "aero", "asia", "biz", "cat", "com", "coop", "edu", "gov", "info", "int", "jobs",
    "mil", "mobi", "museum", "name", "net", "org", "pro", "tel", "travel", "xxx",
]

COUNTRY_TLDS = [
    "ac", "ad", "ae", "af", "ag", "ai", "al", "am", "an", "ao", "aq", "ar", "as", "at",
    "au", "aw", "ax", "az", "ba", "bb", "bd", "be", "bf", "bg", "bh", "bi", "bj", "bm",
    "bn", "bo", "br", "bs", "bt", "bv", "bw", "by", "bz", "ca", "cc", "cd", "cf", "cg",
    "ch", "ci", "ck", "cl", "cm", "cn", "co", "cr", "cs", "cu", "cv", "cx", "cy", "cz",
    "dd", "de", "dj", "dk", "dm", "do", "dz", "ec", "ee", "eg", "eh", "er", "es", "et",
    "eu", "fi", "fj", "fk", "fm", "fo", "fr", "ga", "gb", "gd", "ge", "gf", "gg", "gh",
    "gi", "gl", "gm", "gn", "gp", "gq", "gr", "gs", "gt", "gu", "gw", "gy", "hk", "hm",
    "hn", "hr", "ht", "hu", "id", "ie", "il", "im", "in", "io", "iq", "ir", "is", "it",
    "je", "jm", "jo", "jp", "ke", "kg", "kh", "ki", "km", "kn", "kp", "kr", "kw", "ky",
    "kz", "la", "lb", "lc", "li", "lk", "lr", "ls", "lt", "lu", "lv", "ly", "ma", "mc",
    "md", "me", "mg", "mh", "mk", "ml", "mm", "mn", "mo", "mp", "mq", "mr", "ms", "mt",
    "mu", "mv", "mw", "mx", "my", "mz", "na", "nc", "ne", "nf", "ng", "ni", "nl", "no",
    "np", "nr", "nu", "nz", "om", "pa", "pe", "pf", "pg", "ph", "pk", "pl", "pm", "pn",
    "pr", "ps", "pt", "pw", "py", "qa", "re", "ro", "rs", "ru", "rw", "sa", "sb", "sc",
    "sd", "se", "sg", "sh", "si", "sj", "sk", "sl", "sm", "sn", "so", "sr", "ss", "st",
    "su", "sv", "sx", "sy", "sz", "tc", "td", "tf", "tg", "th", "tj", "tk", "tl", "tm",
    "tn", "to", "tp", "tr", "tt", "tv", "tw", "tz", "ua", "ug", "uk", "us", "uy", "uz",
    "va", "vc", "ve", "vg", "vi", "vn", "vu", "wf", "ws", "ye", "yt", "za", "zm", "zw",
]

# A TLD must not run into more letters, digits or an at-sign
_TLD_END = r"(?=[^0-9a-z@]|$)"

VALID_GTLD = rf"(?:(?:{'|'.join(GENERIC_TLDS)}){_TLD_END})"
VALID_CCTLD = rf"(?:(?:{'|'.join(COUNTRY_TLDS)}){_TLD_END})"
VALID_PUNYCODE = r"(?:xn--[0-9a-z]+)"

# ==============================================================================
# DOMAIN BUILDING BLOCKS
# ==============================================================================

DOMAIN_VALID_CHARS = rf"[^{PUNCTUATION_CHARACTERS}{UNICODE_SPACES}{CONTROL_CHARACTERS}{INVALID_CHARACTERS}]"

VALID_SUBDOMAIN = rf"(?:(?:{DOMAIN_VALID_CHARS}(?:[_-]|{DOMAIN_VALID_CHARS})*)?{DOMAIN_VALID_CHARS}\.)"
VALID_DOMAIN_NAME = rf"(?:(?:{DOMAIN_VALID_CHARS}(?:-|{DOMAIN_VALID_CHARS})*)?{DOMAIN_VALID_CHARS}\.)"

VALID_DOMAIN = rf"(?:{VALID_SUBDOMAIN}*{VALID_DOMAIN_NAME}(?:{VALID_GTLD}|{VALID_CCTLD}|{VALID_PUNYCODE}))"

VALID_URL_PRECEDING_CHARS = rf"(?:[^a-z0-9@\U0000ff20$#\U0000ff03{INVALID_CHARACTERS}]|^)"

# ==============================================================================
# PATH AND QUERY
# ==============================================================================

VALID_GENERAL_URL_PATH_CHARS = rf"[a-z{CYRILLIC}0-9!*;:=+,.$/%#\[\]\-_~&|@{LATIN_ACCENTS}]"

# Allow one level of balanced parentheses, as in Wikipedia links
VALID_URL_BALANCED_PARENS = rf"\({VALID_GENERAL_URL_PATH_CHARS}+\)"

# A path may not end in most punctuation: "example.com/foo." keeps the dot out
VALID_URL_PATH_ENDING_CHARS = rf"(?:[a-z{CYRILLIC}0-9=_#/+\-{LATIN_ACCENTS}]|{VALID_URL_BALANCED_PARENS})"

VALID_URL_PATH = rf"""(?:
    (?:
        {VALID_GENERAL_URL_PATH_CHARS}*
        (?:{VALID_URL_BALANCED_PARENS}{VALID_GENERAL_URL_PATH_CHARS}*)*
        {VALID_URL_PATH_ENDING_CHARS}
    )
    |(?:@{VALID_GENERAL_URL_PATH_CHARS}+/)
)"""

VALID_URL_QUERY_CHARS = r"[a-z0-9!?*'();:&=+$/%#\[\]\-_.,~|@]"
VALID_URL_QUERY_ENDING_CHARS = r"[a-z0-9_&=#/\-]"


# ==============================================================================
# COMPILED PATTERNS
# ==============================================================================


@cached_pattern
def build_valid_url_pattern() -> re.Pattern[str]:
    """Builds the URL pattern; protocol, port, path and query are optional."""
    pattern_str = rf"""
    (?P<before>{VALID_URL_PRECEDING_CHARS})
    (?P<url>
        (?P<protocol>https?://)?
        (?P<domain>{VALID_DOMAIN})
        (?::(?P<port>[0-9]+))?
        (?P<path>/{VALID_URL_PATH}*)?
        (?P<query>\?{VALID_URL_QUERY_CHARS}*{VALID_URL_QUERY_ENDING_CHARS})?
    )
    """
    return re.compile(pattern_str, re.VERBOSE | re.IGNORECASE)


@cached_pattern
def build_valid_ascii_domain_pattern() -> re.Pattern[str]:
    """ASCII (plus Latin accented letters) run ending in a known TLD."""
    pattern_str = rf"""
    (?:(?:[a-z0-9\-_]|[{LATIN_ACCENTS}])+\.)+
    (?:{VALID_GTLD}|{VALID_CCTLD}|{VALID_PUNYCODE})
    """
    return re.compile(pattern_str, re.VERBOSE | re.IGNORECASE | re.ASCII)


@cached_pattern
def build_invalid_short_domain_pattern() -> re.Pattern[str]:
    """A single label under a ccTLD (``t.co``, ``bit.ly``): too ambiguous without a protocol."""
    return re.compile(rf"\A{VALID_DOMAIN_NAME}{VALID_CCTLD}\Z", re.IGNORECASE)


@cached_pattern
def build_valid_tco_url_pattern() -> re.Pattern[str]:
    return re.compile(r"^https?://t\.co/[a-z0-9]+", re.IGNORECASE | re.ASCII)


@cached_pattern
def build_invalid_url_without_protocol_begin_pattern() -> re.Pattern[str]:
    """Preceding character that makes a bare domain part of something else."""
    return re.compile(r"[-_./]\Z")
