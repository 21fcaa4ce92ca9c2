"""One-shot wildcard matching helpers."""

from __future__ import annotations

from typing import Iterable, TypeVar, Union

from .engine import WildMatch

T = TypeVar("T")

PatternLike = Union[str, WildMatch]


def _as_pattern(pattern: PatternLike, case_insensitive: bool = False) -> WildMatch:
    if isinstance(pattern, WildMatch):
        return pattern
    if case_insensitive:
        return WildMatch.case_insensitive(pattern)
    return WildMatch(pattern)


def wildmatch(pattern: PatternLike, value: str, *, case_insensitive: bool = False) -> bool:
    """Match *value* against *pattern* in a single call.

    Supports:
    - ``*`` matches any run of characters, including an empty one
    - ``?`` matches exactly one character
    - Exact match when no wildcards are present

    The whole of *value* has to match; ``"cat"`` does not match ``"cats"``.
    Compile a :class:`WildMatch` once instead when the same pattern is
    matched many times.
    """
    return _as_pattern(pattern, case_insensitive).is_match(value)


def list_matches(patterns: Iterable[PatternLike] | None, value: str) -> bool:
    """Return True if *patterns* is None (don't care) or any pattern matches *value*."""
    if patterns is None:
        return True
    return any(_as_pattern(p).is_match(value) for p in patterns)


def filter_matches(pattern: PatternLike, values: Iterable[T]) -> list[T]:
    """Return the items of *values* matched by *pattern*, in order."""
    compiled = _as_pattern(pattern)
    return [v for v in values if compiled.is_match(v)]
