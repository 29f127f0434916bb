#!/usr/bin/env python3
"""URL detection for tweets, including protocol-less domains and t.co links."""
from __future__ import annotations

import re

from twextract.core.config import setup_logging
from twextract.extraction.common import Entity, Span, Url
from twextract.extraction.regex_patterns import get_pattern

logger = setup_logging(__name__, include_console=False)


class UrlEntityDetector:
    def __init__(self, allow_url_without_protocol: bool = True):
        """
        Initialize UrlEntityDetector.

        Args:
            allow_url_without_protocol: Also extract bare domains such as
                ``example.com`` (default: True)

        """
        self.allow_url_without_protocol = allow_url_without_protocol

        self.url_pattern = get_pattern("valid_url")
        self.tco_url_pattern = get_pattern("valid_tco_url")
        self.ascii_domain_pattern = get_pattern("valid_ascii_domain")
        self.invalid_short_domain_pattern = get_pattern("invalid_short_domain")
        self.invalid_begin_pattern = get_pattern("invalid_url_without_protocol_match_begin")

    def detect(self, text: str) -> list[Entity]:
        """Detects all URLs, left to right."""
        # A URL needs a dot in its domain; a protocol URL also needs a colon
        needle = "." if self.allow_url_without_protocol else ":"
        if needle not in text:
            return []

        urls: list[Entity] = []
        for match in self.url_pattern.finditer(text):
            if match.group("protocol"):
                urls.append(self._protocol_url(match))
                continue

            entity = self._protocol_less_url(text, match)
            if entity is not None:
                urls.append(entity)

        return urls

    def _protocol_url(self, match: re.Match) -> Entity:
        """URL with an explicit scheme; t.co links lose any trailing path junk."""
        url = match.group("url")
        start = match.start("url")

        tco_match = self.tco_url_pattern.match(url)
        if tco_match:
            url = tco_match.group(0)

        return Url(url, Span(start, start + len(url)))

    def _protocol_less_url(self, text: str, match: re.Match) -> Entity | None:
        """
        Bare domain such as ``example.com/path``.

        Only the longest ASCII run of the domain (ending in a known TLD) is
        kept, so text glued to a domain in another script is not swallowed.
        A short ccTLD domain (``t.co``) needs a path, port or query to be
        accepted. The path is only attached when the ASCII run reaches the
        end of the captured domain; otherwise the domain alone is reported.
        """
        if not self.allow_url_without_protocol:
            return None
        if self.invalid_begin_pattern.search(match.group("before")):
            return None

        domain = match.group("domain")
        ascii_match = max(
            self.ascii_domain_pattern.finditer(domain),
            key=lambda m: m.end() - m.start(),
            default=None,
        )
        if ascii_match is None:
            logger.debug(f"No ASCII domain in bare URL candidate {domain!r}")
            return None

        domain_start = match.start("domain")
        start = domain_start + ascii_match.start()
        end = domain_start + ascii_match.end()

        has_tail = match.end("url") > match.end("domain")
        extendable = has_tail and ascii_match.end() == len(domain)

        if self.invalid_short_domain_pattern.search(ascii_match.group(0)) and not extendable:
            logger.debug(f"Skipping short bare domain {ascii_match.group(0)!r}")
            return None

        if extendable:
            end = match.end("url")

        return Url(text[start:end], Span(start, end))
