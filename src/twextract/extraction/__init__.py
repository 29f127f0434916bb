"""Tweet entity extraction: hashtags, cashtags, URLs, mentions and lists."""

from .common import Entity, EntityType, Span
from .extractor import Extractor
from .indexer import CodepointIndexer
from .utils import remove_overlapping_entities

__all__ = ["CodepointIndexer", "Entity", "EntityType", "Extractor", "Span", "remove_overlapping_entities"]
