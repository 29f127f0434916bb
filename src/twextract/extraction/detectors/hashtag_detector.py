#!/usr/bin/env python3
"""Hashtag and cashtag detection."""
from __future__ import annotations

import re

from twextract.core.config import setup_logging
from twextract.extraction.common import Cashtag, Entity, EntityType, Hashtag, Span
from twextract.extraction.detectors.web_detector import UrlEntityDetector
from twextract.extraction.pattern_modules.character_classes import HASH_SIGNS
from twextract.extraction.regex_patterns import get_pattern
from twextract.extraction.utils import remove_overlapping_entities

logger = setup_logging(__name__, include_console=False)

_HASH_SIGN_PATTERN = re.compile(rf"[{HASH_SIGNS}]")


class HashtagEntityDetector:
    def __init__(self, url_detector: UrlEntityDetector | None = None):
        """
        Initialize HashtagEntityDetector.

        Args:
            url_detector: Detector used to drop hashtags inside URLs. A default
                one is created when not given.

        """
        self.url_detector = url_detector or UrlEntityDetector()
        self.hashtag_pattern = get_pattern("valid_hashtag")
        self.end_hashtag_pattern = get_pattern("end_hashtag_match")

    def detect(self, text: str, check_url_overlap: bool = True) -> list[Entity]:
        """
        Detects hashtags; the span includes the hash mark, the text does not.

        With ``check_url_overlap`` a hashtag that overlaps a URL (for example
        the fragment in ``http://example.com/#anchor``) is dropped.
        """
        if not _HASH_SIGN_PATTERN.search(text):
            return []

        tags: list[Entity] = []
        for match in self.hashtag_pattern.finditer(text):
            if self.end_hashtag_pattern.match(text, match.end("tag")):
                continue
            tags.append(Hashtag(match.group("tag"), Span(match.start("hash"), match.end("tag"))))

        if not check_url_overlap or not tags:
            return tags

        urls = self.url_detector.detect(text)
        if not urls:
            return tags

        resolved = remove_overlapping_entities([*tags, *urls])
        valid_tags = [entity for entity in resolved if entity.type is EntityType.HASHTAG]
        if len(valid_tags) != len(tags):
            logger.debug(f"Dropped {len(tags) - len(valid_tags)} hashtag(s) overlapping URLs")
        return valid_tags


class CashtagEntityDetector:
    def __init__(self):
        self.cashtag_pattern = get_pattern("valid_cashtag")
        self.end_hashtag_pattern = get_pattern("end_hashtag_match")

    def detect(self, text: str) -> list[Entity]:
        """Detects cashtags such as ``$TWTR``; no URL overlap check."""
        if "$" not in text:
            return []

        tags: list[Entity] = []
        for match in self.cashtag_pattern.finditer(text):
            if self.end_hashtag_pattern.match(text, match.end("tag")):
                continue
            tags.append(Cashtag(match.group("tag"), Span(match.start("dollar"), match.end("tag"))))
        return tags
