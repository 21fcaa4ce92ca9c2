"""Matcher engine and the compiled :class:`WildMatch` pattern."""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Iterable, Sequence

from .compiler import collapse, compile_pattern, render
from .models import DEFAULT_MARKERS, Comparator, Markers, Token, TokenKind, casefold_eq, exact_eq


def scan(tokens: Sequence[Token], value: Sequence[Any], eq: Comparator = exact_eq) -> bool:
    """Return True when *tokens* consume the whole of *value*.

    Iterative two-pointer scan.  The most recent ``any_sequence`` token is
    remembered as a backtrack point; on any failure it is extended by one
    more input unit and the scan resumes right after it.  Earlier
    ``any_sequence`` tokens never need to be revisited, so the worst case
    is ``len(value) * len(tokens)`` steps.
    """
    n_tokens = len(tokens)
    n_value = len(value)
    if n_tokens == 1 and tokens[0].kind is TokenKind.any_sequence:
        return True

    t = i = 0
    restart_t = -1
    restart_i = 0
    while i < n_value or t < n_tokens:
        if t < n_tokens:
            token = tokens[t]
            if token.kind is TokenKind.any_sequence:
                restart_t = t + 1
                restart_i = i
                t += 1
                continue
            if i < n_value and (token.kind is TokenKind.any_char or eq(token.unit, value[i])):
                t += 1
                i += 1
                continue
        if restart_t < 0 or restart_i >= n_value:
            return False
        restart_i += 1
        t = restart_t
        i = restart_i
    return True


@total_ordering
class WildMatch:
    """A compiled wildcard pattern.

    ``?`` matches exactly one unit and ``*`` matches any run of units,
    including none.  Matching is anchored at both ends::

        >>> WildMatch("ca?").is_match("cat")
        True
        >>> WildMatch("cat").is_match("cats")
        False

    Instances are immutable and may be shared between threads.  Equality,
    ordering and hashing only look at the compiled tokens, so patterns can
    be used as dict keys or kept in sorted collections.
    """

    __slots__ = ("_tokens", "_markers", "_eq")

    def __init__(
        self,
        pattern: Sequence[Any] = "",
        markers: Markers = DEFAULT_MARKERS,
        eq: Comparator | None = None,
    ) -> None:
        self._tokens = compile_pattern(pattern, markers)
        self._markers = markers
        self._eq = eq or exact_eq

    @classmethod
    def case_insensitive(cls, pattern: str, markers: Markers = DEFAULT_MARKERS) -> WildMatch:
        """Compile *pattern* so literal characters compare without case."""
        return cls(pattern, markers, eq=casefold_eq)

    @classmethod
    def from_tokens(
        cls,
        tokens: Iterable[Token],
        markers: Markers = DEFAULT_MARKERS,
        eq: Comparator | None = None,
    ) -> WildMatch:
        """Build a pattern from already compiled *tokens*."""
        obj = cls.__new__(cls)
        obj._tokens = collapse(tokens)
        obj._markers = markers
        obj._eq = eq or exact_eq
        return obj

    # ── Accessors ────────────────────────────────────────────────────

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def markers(self) -> Markers:
        return self._markers

    @property
    def eq(self) -> Comparator:
        return self._eq

    @property
    def is_case_insensitive(self) -> bool:
        return self._eq is casefold_eq

    @property
    def pattern(self) -> Sequence[Any]:
        """The pattern in its source form (``str``, ``bytes`` or ``tuple``)."""
        return render(self._tokens, self._markers)

    # ── Matching ─────────────────────────────────────────────────────

    def is_match(self, value: Sequence[Any]) -> bool:
        """Return True if the pattern matches all of *value*."""
        return scan(self._tokens, value, self._eq)

    # ── Structural comparison ────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WildMatch):
            return NotImplemented
        return self._tokens == other._tokens

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, WildMatch):
            return NotImplemented
        return self._tokens < other._tokens

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __str__(self) -> str:
        pattern = self.pattern
        return pattern if isinstance(pattern, str) else repr(pattern)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern!r})"
