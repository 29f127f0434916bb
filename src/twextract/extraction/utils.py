#!/usr/bin/env python3
"""Shared utility functions for the extraction modules."""
from __future__ import annotations

from typing import Iterable

from .common import Entity


def remove_overlapping_entities(entities: Iterable[Entity]) -> list[Entity]:
    """
    Greedy left-to-right resolution of overlapping entities.

    Entities are stable-sorted by start offset; an entity is kept only if it
    starts at or after the end of the last kept one. Among entities sharing a
    start offset the one that came first in the input wins, which callers
    should treat as an implementation detail.

    Returns:
        New list of non-overlapping entities ordered by start offset
    """
    result: list[Entity] = []
    for entity in sorted(entities, key=lambda e: e.start):
        if result and entity.start < result[-1].end:
            continue
        result.append(entity)
    return result
