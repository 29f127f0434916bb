#!/usr/bin/env python3
"""
Compile-once cache for the pattern catalog.

Pattern builders decorated with ``cached_pattern`` run at most once per
argument set; every later call returns the same compiled object. The cache
is guarded by a lock so extraction sessions on different threads share one
read-only catalog.

Usage:
    @cached_pattern
    def build_hashtag_pattern() -> re.Pattern[str]:
        return re.compile(...)
"""
from __future__ import annotations

import functools
import threading
from typing import Callable, Pattern, TypeVar

F = TypeVar("F", bound=Callable[..., Pattern[str]])

_pattern_cache: dict[str, Pattern[str]] = {}
_cache_lock = threading.Lock()
_cache_stats = {
    "hits": 0,
    "misses": 0,
    "size": 0,
}


def _generate_cache_key(func_name: str, args: tuple, kwargs: dict) -> str:
    key_parts = [func_name, *(str(arg) for arg in args)]
    key_parts.extend(f"{k}={v}" for k, v in sorted(kwargs.items()))
    return "|".join(key_parts)


def cached_pattern(func: F) -> F:
    """
    Decorator caching the compiled pattern returned by a builder function.

    The builder runs outside the lock; if two threads race, the first
    pattern stored wins and both callers receive it.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Pattern[str]:
        cache_key = _generate_cache_key(func.__name__, args, kwargs)

        with _cache_lock:
            if cache_key in _pattern_cache:
                _cache_stats["hits"] += 1
                return _pattern_cache[cache_key]

        pattern = func(*args, **kwargs)

        with _cache_lock:
            if cache_key in _pattern_cache:
                _cache_stats["hits"] += 1
                return _pattern_cache[cache_key]
            _pattern_cache[cache_key] = pattern
            _cache_stats["misses"] += 1
            _cache_stats["size"] = len(_pattern_cache)
        return pattern

    return wrapper  # type: ignore


def get_cache_stats() -> dict[str, float]:
    """
    Get current cache statistics.

    Returns:
        Dictionary with hits, misses, size and hit_ratio
    """
    with _cache_lock:
        stats: dict[str, float] = dict(_cache_stats)
    total_requests = stats["hits"] + stats["misses"]
    stats["hit_ratio"] = stats["hits"] / total_requests if total_requests else 0.0
    return stats


def clear_cache() -> None:
    """Drop all compiled patterns. Only meant for tests."""
    with _cache_lock:
        _pattern_cache.clear()
        _cache_stats.update({"hits": 0, "misses": 0, "size": 0})
