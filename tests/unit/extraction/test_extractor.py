#!/usr/bin/env python3
"""
Tests for the Extractor facade.

This module tests:
- Combined extraction across kinds with overlap resolution
- The extract() wire dictionary
- Index units (codepoint, utf16, utf8)
- Session configuration and deprecated method names
- Setup failures in the pattern catalog
"""

import re
from concurrent.futures import ThreadPoolExecutor

import pytest
import regex

from twextract import ConfigurationError, EntityType, Extractor, ExtractorConfig
from twextract.extraction import regex_patterns


_MARKERS = {
    EntityType.HASHTAG: "#＃",
    EntityType.CASHTAG: "$",
    EntityType.MENTION: "@＠",
}


def _assert_exact_span(text, entity):
    """A span covers the marker and the reported value (plus ``/slug`` for lists), nothing more."""
    covered = text[entity.start:entity.end]
    if entity.type is EntityType.URL:
        assert covered == entity.text
        return

    body = entity.text + ("/" + entity.list_slug if entity.list_slug else "")
    assert covered[0] in _MARKERS[entity.type], f"{entity!r} does not start at its marker"
    assert covered[1:] == body, f"{entity!r} covers {covered!r}"


class TestCombinedExtraction:
    """Test extract_entities_with_indices()."""

    def test_all_kinds_in_order(self, extract):
        entities = extract("$TWTR @alice #tag example.com").extract_entities_with_indices()

        assert [(e.type, e.text, e.indices) for e in entities] == [
            (EntityType.CASHTAG, "TWTR", (0, 5)),
            (EntityType.MENTION, "alice", (6, 12)),
            (EntityType.HASHTAG, "tag", (13, 17)),
            (EntityType.URL, "example.com", (18, 29)),
        ]

    def test_hashtag_inside_url_resolved(self, extract):
        entities = extract("http://example.com/#anchor @bob").extract_entities_with_indices()

        assert [(e.type, e.text) for e in entities] == [
            (EntityType.URL, "http://example.com/#anchor"),
            (EntityType.MENTION, "bob"),
        ]

    def test_combined_result_is_sorted_and_disjoint(self, extract):
        text = "RT @alice: #news at http://example.com/#top and $TWTR, see @bob/team #done"
        entities = extract(text).extract_entities_with_indices()

        assert [e.type for e in entities] == [
            EntityType.MENTION,
            EntityType.HASHTAG,
            EntityType.URL,
            EntityType.CASHTAG,
            EntityType.MENTION,
            EntityType.HASHTAG,
        ]
        for left, right in zip(entities, entities[1:]):
            assert left.end <= right.start
        for entity in entities:
            _assert_exact_span(text, entity)

    @pytest.mark.parametrize(
        "text",
        [
            "RT @alice: #news at http://example.com/#top and $TWTR, see @bob/team #done",
            "＠alice/list ＃tag $BRK.A visit t.co/abc and https://t.co/xyz/more",
            "日本語example.com/path #日本 @user_1",
            "(#wrapped) [@bracketed] {$AAPL} <http://a.co/b?q=1>",
        ],
    )
    def test_span_covers_exactly_the_entity(self, extract, text):
        """Each span covers the marker plus the reported value and nothing else."""
        extractor = extract(text)
        entities = [
            *extractor.extract_hashtags_with_indices(),
            *extractor.extract_cashtags_with_indices(),
            *extractor.extract_urls_with_indices(),
            *extractor.extract_mentions_or_lists_with_indices(),
        ]

        assert entities
        for entity in entities:
            _assert_exact_span(text, entity)

    def test_no_entities(self, extract):
        assert extract("just words here").extract_entities_with_indices() == []
        assert extract("").extract_entities_with_indices() == []

    def test_calls_are_idempotent(self, extract):
        extractor = extract("#a @b $CC http://d.com")

        assert extractor.extract_entities_with_indices() == extractor.extract_entities_with_indices()
        assert extractor.extract() == extractor.extract()


class TestExtractDictionary:
    """Test the combined wire dictionary."""

    def test_extract(self, extract):
        result = extract("Hello #world, check http://example.com").extract()

        assert result == {
            "hashtags": ["world"],
            "cashtags": [],
            "urls": ["http://example.com"],
            "mentions": [],
            "replyto": None,
            "hashtags_with_indices": [{"hashtag": "world", "indices": [6, 12]}],
            "cashtags_with_indices": [],
            "urls_with_indices": [{"url": "http://example.com", "indices": [20, 38]}],
            "mentions_with_indices": [],
        }

    def test_extract_reply(self, extract):
        result = extract("@alice thanks").extract()

        assert result["replyto"] == "alice"
        assert result["mentions"] == ["alice"]
        assert result["mentions_with_indices"] == [{"screen_name": "alice", "indices": [0, 6]}]


class TestIndexUnits:
    """Test span conversion to other index units."""

    TEXT = "\U0001F600 #tag"

    def test_codepoint_default(self, extract):
        assert extract(self.TEXT).extract_hashtags_with_indices()[0].indices == (2, 6)

    def test_utf16(self, extract):
        assert extract(self.TEXT, index_unit="utf16").extract_hashtags_with_indices()[0].indices == (3, 7)

    def test_utf8(self, extract):
        assert extract(self.TEXT, index_unit="utf8").extract_hashtags_with_indices()[0].indices == (5, 9)

    def test_combined_utf16(self, extract):
        entities = extract(self.TEXT + " @bob", index_unit="utf16").extract_entities_with_indices()
        assert [e.indices for e in entities] == [(3, 7), (8, 12)]

    def test_values_unaffected(self, extract):
        assert extract(self.TEXT, index_unit="utf8").extract_hashtags() == ["tag"]


class TestSession:
    """Test construction and session configuration."""

    def test_bytes_are_decoded(self):
        extractor = Extractor("#café".encode("utf-8"))

        assert extractor.text == "#café"
        assert extractor.extract_hashtags() == ["café"]

    def test_create(self):
        extractor = Extractor.create("example.com", ExtractorConfig(allow_url_without_protocol=False))

        assert isinstance(extractor, Extractor)
        assert extractor.allow_url_without_protocol is False
        assert extractor.extract_urls() == []

    def test_with_config_returns_new_session(self):
        extractor = Extractor("visit example.com")
        strict = extractor.with_config(allow_url_without_protocol=False)

        assert strict is not extractor
        assert strict.extract_urls() == []
        assert extractor.extract_urls() == ["example.com"]
        assert extractor.config == ExtractorConfig()

    def test_invalid_config_rejected(self):
        with pytest.raises(ConfigurationError):
            Extractor("text", ExtractorConfig(index_unit="bytes"))

    def test_sessions_share_compiled_patterns(self):
        first = Extractor("#a")
        second = Extractor("#b")

        assert first._hashtag_detector.hashtag_pattern is second._hashtag_detector.hashtag_pattern

    def test_concurrent_sessions(self):
        texts = [f"#tag{i} @user{i} http://example{i}.com" for i in range(20)]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda t: Extractor(t).extract_entities_with_indices(), texts))

        for i, entities in enumerate(results):
            assert [e.text for e in entities] == [f"tag{i}", f"user{i}", f"http://example{i}.com"]


class TestDeprecatedAliases:
    """Old method names still work but warn."""

    def test_aliases_warn_and_delegate(self):
        extractor = Extractor("@alice/friends hi @bob")

        with pytest.warns(DeprecationWarning):
            assert extractor.extract_mentioned_usernames() == ["alice", "bob"]
        with pytest.warns(DeprecationWarning):
            entities = extractor.extract_mentioned_usernames_with_indices()
        assert [e.list_slug for e in entities] == [None, None]
        with pytest.warns(DeprecationWarning):
            entities = extractor.extract_mentioned_usernames_or_lists_with_indices()
        assert [e.list_slug for e in entities] == ["friends", None]
        with pytest.warns(DeprecationWarning):
            assert extractor.extract_replied_usernames() == "alice"

    def test_alias_names(self):
        assert Extractor.extract_replied_usernames.__name__ == "extract_replied_usernames"


class TestCatalogFailures:
    """A broken pattern catalog fails at construction."""

    def test_missing_pattern(self, monkeypatch):
        monkeypatch.delitem(regex_patterns._PATTERN_BUILDERS, "valid_reply")

        with pytest.raises(ConfigurationError, match="valid_reply"):
            Extractor("@alice")

    @pytest.mark.parametrize("compile_pattern", [re.compile, regex.compile])
    def test_pattern_that_does_not_compile(self, monkeypatch, compile_pattern):
        monkeypatch.setitem(regex_patterns._PATTERN_BUILDERS, "valid_reply", lambda: compile_pattern("("))

        with pytest.raises(ConfigurationError, match="failed to compile"):
            Extractor("@alice")
