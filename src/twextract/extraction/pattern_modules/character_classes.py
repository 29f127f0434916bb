#!/usr/bin/env python3
"""
Character class fragments shared by the tweet entity patterns.

Bodies are written without the surrounding brackets. The Unicode property
classes at the bottom use ``\\p{..}`` and only compile with the ``regex``
library.
"""
from __future__ import annotations

# ==============================================================================
# FIXED CHARACTER SETS (class bodies, without the surrounding brackets)
# ==============================================================================

UNICODE_SPACES = (
    r"\x09-\x0d"                # Cc   [5] <control-0009>..<control-000D>
    r"\x20"                     # Zs       SPACE
    r"\x85"                     # Cc       <control-0085>
    r"\xa0"                     # Zs       NO-BREAK SPACE
    r"\U00001680"               # Zs       OGHAM SPACE MARK
    r"\U0000180e"               # Zs       MONGOLIAN VOWEL SEPARATOR
    r"\U00002000-\U0000200a"    # Zs  [11] EN QUAD..HAIR SPACE
    r"\U00002028"               # Zl       LINE SEPARATOR
    r"\U00002029"               # Zp       PARAGRAPH SEPARATOR
    r"\U0000202f"               # Zs       NARROW NO-BREAK SPACE
    r"\U0000205f"               # Zs       MEDIUM MATHEMATICAL SPACE
    r"\U00003000"               # Zs       IDEOGRAPHIC SPACE
)

# Noncharacters, BOM and bidi embedding/override controls
INVALID_CHARACTERS = r"\U0000fffe\U0000feff\U0000ffff\U0000202a-\U0000202e"

CONTROL_CHARACTERS = r"\x00-\x1f\x7f"

# ASCII punctuation as used for domain boundaries (no backtick, no backslash)
PUNCTUATION_CHARACTERS = r"""!"#$%&'()*+,\-./:;<=>?@\[\]^_{|}~"""

# POSIX [[:punct:]]
ASCII_PUNCTUATION = r"!-/:-@\[-`{-~"

LATIN_ACCENTS = (
    r"\xc0-\xd6\xd8-\xf6\xf8-\xff"
    r"\U00000100-\U0000024f"
    r"\U00000253\U00000254\U00000256\U00000257\U00000259\U0000025b\U00000263"
    r"\U00000268\U0000026f\U00000272\U00000289\U000002bb"
    r"\U00001e00-\U00001eff"
)

CYRILLIC = r"\U00000400-\U000004ff"

AT_SIGNS = r"@\U0000ff20"
HASH_SIGNS = r"\#\U0000ff03"

# Joiners and script-specific marks that may appear inside a hashtag body
HASHTAG_SPECIAL_CHARS = (
    r"_\U0000200c\U0000200d\U0000a67e\U000005be\U000005f3\U000005f4\U0000ff5e\U0000301c"
    r"\U0000309b\U0000309c\U000030a0\U000030fb\U00003003\U00000f0b\U00000f0c\xb7"
)


# ==============================================================================
# UNICODE PROPERTY CLASSES (``regex`` syntax, not understood by ``re``)
# ==============================================================================

# Letters and marks: a hashtag needs at least one of these
HASHTAG_ALPHA = r"\p{L}\p{M}"

# Everything allowed in a hashtag body
HASHTAG_ALPHANUMERIC = r"\p{L}\p{M}\p{Nd}" + HASHTAG_SPECIAL_CHARS
