"""YAML/dict serialization for compiled patterns."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .engine import WildMatch
from .models import DEFAULT_MARKERS, Comparator, Markers, Token, TokenKind, casefold_eq

logger = logging.getLogger(__name__)

API_VERSION = "wildmatch/v1"


class PatternDecodeError(ValueError):
    """Raised when a serialized pattern document is malformed."""


# ── Dumping ──────────────────────────────────────────────────────────────


def _dump_token(token: Token) -> dict[str, Any]:
    if token.kind is TokenKind.char:
        return {"kind": token.kind.value, "unit": token.unit}
    return {"kind": token.kind.value}


def dump_pattern(pattern: WildMatch) -> dict[str, Any]:
    """Convert *pattern* into a plain dictionary (YAML/JSON friendly).

    Custom comparators are not serialized; only the built-in
    case-insensitive comparator is recorded.
    """
    return {
        "apiVersion": API_VERSION,
        "kind": "WildMatch",
        "markers": {
            "single": pattern.markers.single,
            "multi": pattern.markers.multi,
        },
        "caseInsensitive": pattern.is_case_insensitive,
        "tokens": [_dump_token(t) for t in pattern.tokens],
    }


def dump_pattern_to_str(pattern: WildMatch) -> str:
    """Serialize *pattern* as a YAML document."""
    return yaml.safe_dump(dump_pattern(pattern), sort_keys=False, allow_unicode=True)


# ── Loading ──────────────────────────────────────────────────────────────


def _parse_markers(raw: Any) -> Markers:
    if raw is None:
        return DEFAULT_MARKERS
    if not isinstance(raw, dict):
        raise PatternDecodeError("'markers' must be a mapping")
    return Markers(
        single=raw.get("single", DEFAULT_MARKERS.single),
        multi=raw.get("multi", DEFAULT_MARKERS.multi),
    )


def _parse_token(raw: Any, index: int, markers: Markers) -> Token:
    if not isinstance(raw, dict):
        raise PatternDecodeError(f"tokens[{index}] must be a mapping")
    if "kind" not in raw:
        raise PatternDecodeError(f"tokens[{index}] is missing 'kind'")
    try:
        kind = TokenKind(raw["kind"])
    except ValueError as exc:
        raise PatternDecodeError(
            f"tokens[{index}] has unknown kind: {raw['kind']!r}"
        ) from exc
    if kind is not TokenKind.char:
        return Token(kind)

    if "unit" not in raw:
        raise PatternDecodeError(f"tokens[{index}] of kind 'char' is missing 'unit'")
    unit = raw["unit"]
    # Only units the compiler itself could emit as literals are accepted.
    if unit is None:
        raise PatternDecodeError(f"tokens[{index}] has a null 'unit'")
    if isinstance(unit, str) and len(unit) != 1:
        raise PatternDecodeError(
            f"tokens[{index}] 'unit' must be a single character, got {unit!r}"
        )
    if unit == markers.single or unit == markers.multi:
        raise PatternDecodeError(
            f"tokens[{index}] 'unit' {unit!r} is a wildcard marker"
        )
    return Token(kind, unit)


def _comparator(raw: dict[str, Any], eq: Comparator | None) -> Comparator | None:
    if eq is not None:
        return eq
    flag = raw.get("caseInsensitive", False)
    if not isinstance(flag, bool):
        raise PatternDecodeError("'caseInsensitive' must be a boolean")
    return casefold_eq if flag else None


def load_pattern_from_dict(
    data: Any,
    eq: Comparator | None = None,
    markers: Markers | None = None,
) -> WildMatch:
    """Rebuild a :class:`WildMatch` from a raw dictionary (e.g. parsed YAML/JSON).

    The document carries either a ``tokens`` list or a ``pattern`` string.
    *markers* is used when the document has no ``markers`` entry of its own.
    """
    if not isinstance(data, dict):
        raise PatternDecodeError("Expected a mapping for a pattern document")
    kind = data.get("kind", "WildMatch")
    if kind != "WildMatch":
        raise PatternDecodeError(f"Unsupported kind: {kind} (expected WildMatch)")

    if "markers" in data or markers is None:
        markers = _parse_markers(data.get("markers"))
    eq = _comparator(data, eq)

    if "tokens" in data:
        raw_tokens = data["tokens"]
        if not isinstance(raw_tokens, list):
            raise PatternDecodeError("'tokens' must be a list")
        tokens = [_parse_token(t, i, markers) for i, t in enumerate(raw_tokens)]
        return WildMatch.from_tokens(tokens, markers, eq)
    if "pattern" in data:
        text = data["pattern"]
        if not isinstance(text, str):
            raise PatternDecodeError("'pattern' must be a string")
        return WildMatch(text, markers, eq)
    raise PatternDecodeError("Pattern document needs either 'tokens' or 'pattern'")


def _safe_load(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PatternDecodeError(f"Invalid YAML: {exc}") from exc


def load_pattern_from_str(text: str, eq: Comparator | None = None) -> WildMatch:
    """Parse a :class:`WildMatch` from a YAML string."""
    pattern = load_pattern_from_dict(_safe_load(text), eq)
    logger.debug("[wildmatch.load] kind=WildMatch pattern=%r", str(pattern))
    return pattern


def load_pattern(path: str | Path, eq: Comparator | None = None) -> WildMatch:
    """Load a :class:`WildMatch` from a YAML file on disk."""
    p = Path(path)
    return load_pattern_from_str(p.read_text(encoding="utf-8"), eq)


# ── Pattern sets ─────────────────────────────────────────────────────────


def load_pattern_set_from_dict(data: Any) -> list[WildMatch]:
    """Parse a ``PatternSet`` document into a list of patterns.

    Entries may be plain strings or full pattern documents.  A top-level
    ``markers`` / ``caseInsensitive`` applies to every entry that does not
    set its own.
    """
    if not isinstance(data, dict):
        raise PatternDecodeError("Expected a mapping for a pattern set document")
    kind = data.get("kind", "PatternSet")
    if kind != "PatternSet":
        raise PatternDecodeError(f"Unsupported kind: {kind} (expected PatternSet)")
    raw_patterns = data.get("patterns", [])
    if not isinstance(raw_patterns, list):
        raise PatternDecodeError("'patterns' must be a list")

    markers = _parse_markers(data.get("markers"))
    eq = _comparator(data, None)
    patterns: list[WildMatch] = []
    for index, raw in enumerate(raw_patterns):
        if isinstance(raw, str):
            patterns.append(WildMatch(raw, markers, eq))
        elif isinstance(raw, dict):
            entry_eq = None if "caseInsensitive" in raw else eq
            patterns.append(load_pattern_from_dict(raw, entry_eq, markers))
        else:
            raise PatternDecodeError(f"patterns[{index}] must be a string or a mapping")
    return patterns


def load_pattern_set_from_str(text: str) -> list[WildMatch]:
    """Parse a ``PatternSet`` from a YAML string."""
    patterns = load_pattern_set_from_dict(_safe_load(text))
    logger.debug("[wildmatch.load] kind=PatternSet patterns=%d", len(patterns))
    return patterns


def load_pattern_set(path: str | Path) -> list[WildMatch]:
    """Load a ``PatternSet`` from a YAML file on disk."""
    p = Path(path)
    return load_pattern_set_from_str(p.read_text(encoding="utf-8"))
