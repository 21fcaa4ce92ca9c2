"""Data models for wildmatch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

Comparator = Callable[[Any, Any], bool]


class TokenKind(str, Enum):
    """The role a single pattern element plays during matching."""

    any_char = "any_char"
    any_sequence = "any_sequence"
    char = "char"


# ── Tokens ───────────────────────────────────────────────────────────────


@dataclass(frozen=True, order=True)
class Token:
    """One compiled pattern element.

    ``unit`` is only set for :attr:`TokenKind.char` tokens.  Ordering is
    lexicographic on ``(kind, unit)``.
    """

    kind: TokenKind
    unit: Any = None


ANY_CHAR = Token(TokenKind.any_char)
ANY_SEQUENCE = Token(TokenKind.any_sequence)


# ── Configuration ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Markers:
    """Units that act as wildcards when a pattern is compiled.

    A marker found in a pattern is always a wildcard; there is no escape
    syntax for matching a literal ``?`` or ``*``.  When both markers are
    the same unit it compiles as the single wildcard.
    """

    single: Any = "?"
    multi: Any = "*"


DEFAULT_MARKERS = Markers()


# ── Comparators ──────────────────────────────────────────────────────────


def exact_eq(pattern_unit: Any, value_unit: Any) -> bool:
    return pattern_unit == value_unit


def casefold_eq(pattern_unit: Any, value_unit: Any) -> bool:
    """Compare two characters ignoring case (Unicode case folding).

    Units that are not both strings fall back to plain equality.
    """
    if pattern_unit == value_unit:
        return True
    if isinstance(pattern_unit, str) and isinstance(value_unit, str):
        return pattern_unit.casefold() == value_unit.casefold()
    return False
