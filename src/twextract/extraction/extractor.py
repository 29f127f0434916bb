#!/usr/bin/env python3
"""
Extractor: public entry point for tweet entity extraction.

An ``Extractor`` wraps one tweet and an immutable ``ExtractorConfig``.
Every call re-scans the text; nothing is cached between calls, so the same
instance can be queried any number of times.

Example:
    >>> extractor = Extractor("Hello #world, check http://example.com")
    >>> extractor.extract_hashtags()
    ['world']
    >>> [e.indices for e in extractor.extract_urls_with_indices()]
    [(20, 38)]
"""
from __future__ import annotations

import warnings
from typing import Any, Callable

from twextract.core.config import ExtractorConfig, setup_logging
from twextract.extraction.common import Entity
from twextract.extraction.detectors import (
    CashtagEntityDetector,
    HashtagEntityDetector,
    MentionEntityDetector,
    UrlEntityDetector,
)
from twextract.extraction.indexer import CodepointIndexer
from twextract.extraction.regex_patterns import PATTERN_NAMES, require_patterns
from twextract.extraction.utils import remove_overlapping_entities

logger = setup_logging(__name__, include_console=False)


def _deprecated_alias(alias_name: str, canonical_name: str, since: str = "1.1.0") -> Callable[..., Any]:
    """Build a method that warns and forwards to ``canonical_name``."""

    def alias(self, *args, **kwargs):
        warnings.warn(
            f"{alias_name}() is deprecated since version {since}, use {canonical_name}() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return getattr(self, canonical_name)(*args, **kwargs)

    alias.__name__ = alias_name
    alias.__doc__ = f"Deprecated since {since}: use :meth:`{canonical_name}`."
    return alias


class Extractor:
    """Extracts hashtags, cashtags, URLs, mentions and lists from a tweet."""

    def __init__(self, text: str | bytes, config: ExtractorConfig | None = None):
        """
        Args:
            text: The tweet. ``bytes`` are decoded as UTF-8.
            config: Extraction settings (defaults to ``ExtractorConfig()``)

        Raises:
            ConfigurationError: the pattern catalog is incomplete or broken
        """
        if isinstance(text, bytes):
            text = text.decode("utf-8")

        self.text = text
        self.config = config or ExtractorConfig()

        # Fail at construction rather than on the first call
        require_patterns(*PATTERN_NAMES)

        self._url_detector = UrlEntityDetector(
            allow_url_without_protocol=self.config.allow_url_without_protocol
        )
        self._hashtag_detector = HashtagEntityDetector(url_detector=self._url_detector)
        self._cashtag_detector = CashtagEntityDetector()
        self._mention_detector = MentionEntityDetector()
        self._indexer: CodepointIndexer | None = None

    @classmethod
    def create(cls, text: str | bytes, config: ExtractorConfig | None = None) -> Extractor:
        return cls(text, config)

    def with_config(self, **changes: Any) -> Extractor:
        """New session over the same text with some settings replaced."""
        return type(self)(self.text, self.config.evolve(**changes))

    @property
    def allow_url_without_protocol(self) -> bool:
        return self.config.allow_url_without_protocol

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r}, config={self.config!r})"

    # ------------------------------------------------------------------
    # Combined extraction
    # ------------------------------------------------------------------

    def extract(self) -> dict[str, Any]:
        """All entity kinds at once, in wire form."""
        return {
            "hashtags": self.extract_hashtags(),
            "cashtags": self.extract_cashtags(),
            "urls": self.extract_urls(),
            "mentions": self.extract_mentioned_screen_names(),
            "replyto": self.extract_reply_screen_name(),
            "hashtags_with_indices": [e.to_dict() for e in self.extract_hashtags_with_indices()],
            "cashtags_with_indices": [e.to_dict() for e in self.extract_cashtags_with_indices()],
            "urls_with_indices": [e.to_dict() for e in self.extract_urls_with_indices()],
            "mentions_with_indices": [e.to_dict() for e in self.extract_mentioned_screen_names_with_indices()],
        }

    def extract_entities_with_indices(self) -> list[Entity]:
        """
        URLs, hashtags, mentions/lists and cashtags resolved against each other.

        Hashtags skip their own URL check here because the combined pass
        resolves every kind at once. URLs go first into the resolver, so on an
        exact tie of start offsets the URL is kept.
        """
        candidates = [
            *self._url_detector.detect(self.text),
            *self._hashtag_detector.detect(self.text, check_url_overlap=False),
            *self._mention_detector.detect(self.text),
            *self._cashtag_detector.detect(self.text),
        ]
        entities = remove_overlapping_entities(candidates)
        logger.debug(f"Resolved {len(candidates)} candidate(s) into {len(entities)} entities")
        return self._report(entities)

    # ------------------------------------------------------------------
    # Per-kind accessors
    # ------------------------------------------------------------------

    def extract_hashtags(self) -> list[str]:
        return [entity.text for entity in self.extract_hashtags_with_indices()]

    def extract_hashtags_with_indices(self, check_url_overlap: bool = True) -> list[Entity]:
        """
        Args:
            check_url_overlap: Drop hashtags that overlap an extracted URL
        """
        return self._report(self._hashtag_detector.detect(self.text, check_url_overlap=check_url_overlap))

    def extract_cashtags(self) -> list[str]:
        return [entity.text for entity in self.extract_cashtags_with_indices()]

    def extract_cashtags_with_indices(self) -> list[Entity]:
        return self._report(self._cashtag_detector.detect(self.text))

    def extract_urls(self) -> list[str]:
        return [entity.text for entity in self.extract_urls_with_indices()]

    def extract_urls_with_indices(self) -> list[Entity]:
        return self._report(self._url_detector.detect(self.text))

    def extract_mentioned_screen_names(self) -> list[str]:
        """Screen names mentioned anywhere in the tweet, in order of appearance."""
        return [entity.text for entity in self.extract_mentions_or_lists_with_indices() if entity.text]

    def extract_mentioned_screen_names_with_indices(self) -> list[Entity]:
        """Mentions without list slugs; spans still cover ``@user/slug``."""
        return [entity.without_list_slug() for entity in self.extract_mentions_or_lists_with_indices()]

    def extract_mentions_or_lists_with_indices(self) -> list[Entity]:
        return self._report(self._mention_detector.detect(self.text))

    def extract_reply_screen_name(self) -> str | None:
        """Screen name the tweet replies to (a mention at its very start)."""
        return self._mention_detector.detect_reply(self.text)

    # Deprecated names kept for callers of the 1.0 API
    extract_mentioned_usernames = _deprecated_alias(
        "extract_mentioned_usernames", "extract_mentioned_screen_names"
    )
    extract_mentioned_usernames_with_indices = _deprecated_alias(
        "extract_mentioned_usernames_with_indices", "extract_mentioned_screen_names_with_indices"
    )
    extract_mentioned_usernames_or_lists_with_indices = _deprecated_alias(
        "extract_mentioned_usernames_or_lists_with_indices", "extract_mentions_or_lists_with_indices"
    )
    extract_replied_usernames = _deprecated_alias("extract_replied_usernames", "extract_reply_screen_name")

    # ------------------------------------------------------------------

    def _report(self, entities: list[Entity]) -> list[Entity]:
        """Express spans in the configured index unit."""
        unit = self.config.index_unit
        if unit == "codepoint":
            return entities

        if self._indexer is None:
            self._indexer = CodepointIndexer(self.text)
        return [entity.with_span(self._indexer.convert_span(entity.span, unit)) for entity in entities]
