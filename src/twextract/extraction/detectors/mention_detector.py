#!/usr/bin/env python3
"""@mention, @user/list and reply detection."""
from __future__ import annotations

import re

from twextract.core.config import setup_logging
from twextract.extraction.common import Entity, Mention, Span
from twextract.extraction.pattern_modules.character_classes import AT_SIGNS
from twextract.extraction.regex_patterns import get_pattern

logger = setup_logging(__name__, include_console=False)

_AT_SIGN_PATTERN = re.compile(rf"[{AT_SIGNS}]")


class MentionEntityDetector:
    def __init__(self):
        self.mention_pattern = get_pattern("valid_mentions_or_lists")
        self.reply_pattern = get_pattern("valid_reply")
        self.end_mention_pattern = get_pattern("end_mention_match")

    def detect(self, text: str) -> list[Entity]:
        """
        Detects mentions and list references.

        The span starts at the at-sign and covers ``/slug`` when a list slug
        is present; ``list_slug`` is reported without its slash.
        """
        if not _AT_SIGN_PATTERN.search(text):
            return []

        mentions: list[Entity] = []
        for match in self.mention_pattern.finditer(text):
            # e-mail local parts, "@user@host", accented continuations
            if self.end_mention_pattern.match(text, match.end()):
                continue

            end = match.end("screen_name")
            list_slug = match.group("list_slug")
            if list_slug:
                end = match.end("list_slug")
                list_slug = list_slug[1:]

            mentions.append(Mention(match.group("screen_name"), Span(match.start("at"), end), list_slug))

        return mentions

    def detect_reply(self, text: str) -> str | None:
        """Screen name of a mention that opens the text, if any."""
        match = self.reply_pattern.match(text)
        if match is None:
            return None
        if self.end_mention_pattern.match(text, match.end()):
            logger.debug(f"Reply candidate @{match.group('screen_name')} rejected by trailing text")
            return None
        return match.group("screen_name")
