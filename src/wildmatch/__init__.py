"""wildmatch: whole-string matching with ``?`` and ``*`` wildcards."""

from __future__ import annotations

__version__ = "2.4.0"

from .compiler import compile_pattern, render
from .engine import WildMatch, scan
from .loader import (
    PatternDecodeError,
    dump_pattern,
    dump_pattern_to_str,
    load_pattern,
    load_pattern_from_dict,
    load_pattern_from_str,
    load_pattern_set,
    load_pattern_set_from_str,
)
from .match import filter_matches, list_matches, wildmatch
from .models import Markers, Token, TokenKind, casefold_eq

__all__ = [
    "Markers",
    "PatternDecodeError",
    "Token",
    "TokenKind",
    "WildMatch",
    "casefold_eq",
    "compile_pattern",
    "dump_pattern",
    "dump_pattern_to_str",
    "filter_matches",
    "list_matches",
    "load_pattern",
    "load_pattern_from_dict",
    "load_pattern_from_str",
    "load_pattern_set",
    "load_pattern_set_from_str",
    "render",
    "scan",
    "wildmatch",
]
