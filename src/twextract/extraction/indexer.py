#!/usr/bin/env python3
"""
Offset conversion between UTF-8 bytes, codepoints and UTF-16 code units.

Python strings index by codepoint, so spans produced by the extractors are
already codepoint spans. Clients that store tweets as UTF-8 (byte offsets)
or talk to UTF-16 platforms need the other units; this module converts in
both directions for a single text.
"""
from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate

from .common import Span


class CodepointIndexer:
    """Converts offsets for one text between the supported index units."""

    def __init__(self, text: str):
        self.text = text
        # Prefix sums: _utf8[i] / _utf16[i] = size of text[:i] in that unit
        self._utf8 = [0, *accumulate(_utf8_width(ch) for ch in text)]
        self._utf16 = [0, *accumulate(2 if ord(ch) > 0xFFFF else 1 for ch in text)]

    def __len__(self) -> int:
        return len(self.text)

    @property
    def byte_length(self) -> int:
        return self._utf8[-1]

    @property
    def utf16_length(self) -> int:
        return self._utf16[-1]

    def codepoint_from_byte(self, byte_offset: int) -> int:
        """
        Convert a UTF-8 byte offset into a codepoint offset.

        An offset inside a multi-byte sequence maps to the codepoint that
        contains it.
        """
        return self._from_prefix(self._utf8, byte_offset, "byte")

    def codepoint_from_utf16(self, unit_offset: int) -> int:
        """Convert a UTF-16 code-unit offset into a codepoint offset."""
        return self._from_prefix(self._utf16, unit_offset, "UTF-16")

    def byte_from_codepoint(self, offset: int) -> int:
        self._check_codepoint(offset)
        return self._utf8[offset]

    def utf16_from_codepoint(self, offset: int) -> int:
        self._check_codepoint(offset)
        return self._utf16[offset]

    def convert_span(self, span: Span, unit: str) -> Span:
        """Express a codepoint span in ``unit`` (codepoint, utf16 or utf8)."""
        if unit == "codepoint":
            return span
        if unit == "utf16":
            return Span(self.utf16_from_codepoint(span.start), self.utf16_from_codepoint(span.end))
        if unit == "utf8":
            return Span(self.byte_from_codepoint(span.start), self.byte_from_codepoint(span.end))
        raise ValueError(f"Unknown index unit: {unit!r}")

    def span_from_bytes(self, byte_start: int, byte_end: int) -> Span:
        """Build a codepoint span from a pair of UTF-8 byte offsets."""
        return Span(self.codepoint_from_byte(byte_start), self.codepoint_from_byte(byte_end))

    def _check_codepoint(self, offset: int) -> None:
        if not 0 <= offset <= len(self.text):
            raise IndexError(f"Codepoint offset {offset} out of range 0..{len(self.text)}")

    @staticmethod
    def _from_prefix(prefix: list[int], offset: int, unit_name: str) -> int:
        if not 0 <= offset <= prefix[-1]:
            raise IndexError(f"{unit_name} offset {offset} out of range 0..{prefix[-1]}")
        return bisect_right(prefix, offset) - 1


def _utf8_width(ch: str) -> int:
    cp = ord(ch)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4
