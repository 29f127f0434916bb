"""
twextract - hashtag, cashtag, URL and @mention extraction for tweets.

This package provides:
- Extractor: per-kind and combined extraction with codepoint spans
- ExtractorConfig: immutable settings (bare URLs, index unit)
- A ``twextract`` command line tool
"""

__version__ = "1.1.0"

from .core.config import ConfigurationError, ExtractorConfig, ExtractorConfigBuilder, load_config
from .extraction import CodepointIndexer, Entity, EntityType, Extractor, Span, remove_overlapping_entities

__all__ = [
    "CodepointIndexer",
    "ConfigurationError",
    "Entity",
    "EntityType",
    "Extractor",
    "ExtractorConfig",
    "ExtractorConfigBuilder",
    "Span",
    "load_config",
    "remove_overlapping_entities",
]
