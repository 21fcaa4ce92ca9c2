"""Pattern compiler: turns a wildcard pattern into a token sequence."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from .models import ANY_CHAR, ANY_SEQUENCE, DEFAULT_MARKERS, Markers, Token, TokenKind

logger = logging.getLogger(__name__)


def collapse(tokens: Iterable[Token]) -> tuple[Token, ...]:
    """Drop every ``any_sequence`` token that directly follows another one."""
    result: list[Token] = []
    for token in tokens:
        if token.kind is TokenKind.any_sequence and result and result[-1] is ANY_SEQUENCE:
            continue
        result.append(ANY_SEQUENCE if token.kind is TokenKind.any_sequence else token)
    return tuple(result)


def compile_pattern(pattern: Sequence[Any], markers: Markers = DEFAULT_MARKERS) -> tuple[Token, ...]:
    """Compile *pattern* into an immutable tuple of tokens.

    Every unit equal to ``markers.single`` becomes an ``any_char`` token and
    every run of ``markers.multi`` becomes a single ``any_sequence`` token.
    All other units become ``char`` tokens.  Compilation never fails.
    """
    tokens: list[Token] = []
    for unit in pattern:
        if unit == markers.single:
            tokens.append(ANY_CHAR)
        elif unit == markers.multi:
            # Runs collapse to one token; the engine's backtrack bound relies on it.
            if tokens and tokens[-1] is ANY_SEQUENCE:
                continue
            tokens.append(ANY_SEQUENCE)
        else:
            tokens.append(Token(TokenKind.char, unit))

    logger.debug(
        "[wildmatch.compile] pattern=%r tokens=%d single=%r multi=%r",
        pattern,
        len(tokens),
        markers.single,
        markers.multi,
    )
    return tuple(tokens)


def render(tokens: Iterable[Token], markers: Markers = DEFAULT_MARKERS) -> Sequence[Any]:
    """Rebuild the pattern *tokens* were compiled from, using *markers*.

    The result has the same kind of sequence the pattern was written in:
    ``str`` for text, ``bytes`` for byte values and a ``tuple`` for any
    other units.
    """
    units: list[Any] = []
    for token in tokens:
        if token.kind is TokenKind.any_char:
            units.append(markers.single)
        elif token.kind is TokenKind.any_sequence:
            units.append(markers.multi)
        else:
            units.append(token.unit)

    if all(isinstance(u, str) for u in units):
        return "".join(units)
    if all(type(u) is int and 0 <= u < 256 for u in units):
        return bytes(units)
    return tuple(units)
