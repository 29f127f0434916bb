"""Detectors sub-package: one detector per entity kind."""

from .hashtag_detector import CashtagEntityDetector, HashtagEntityDetector
from .mention_detector import MentionEntityDetector
from .web_detector import UrlEntityDetector

__all__ = ["CashtagEntityDetector", "HashtagEntityDetector", "MentionEntityDetector", "UrlEntityDetector"]
