"""Pattern builders for tweet entities, grouped by entity kind."""

from .hashtag_patterns import (
    build_end_hashtag_pattern,
    build_valid_cashtag_pattern,
    build_valid_hashtag_pattern,
)
from .mention_patterns import (
    build_end_mention_pattern,
    build_valid_mentions_or_lists_pattern,
    build_valid_reply_pattern,
)
from .web_patterns import (
    build_invalid_short_domain_pattern,
    build_invalid_url_without_protocol_begin_pattern,
    build_valid_ascii_domain_pattern,
    build_valid_tco_url_pattern,
    build_valid_url_pattern,
)

__all__ = [
    "build_end_hashtag_pattern",
    "build_end_mention_pattern",
    "build_invalid_short_domain_pattern",
    "build_invalid_url_without_protocol_begin_pattern",
    "build_valid_ascii_domain_pattern",
    "build_valid_cashtag_pattern",
    "build_valid_hashtag_pattern",
    "build_valid_mentions_or_lists_pattern",
    "build_valid_reply_pattern",
    "build_valid_tco_url_pattern",
    "build_valid_url_pattern",
]
