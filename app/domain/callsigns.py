"""Callsign normalization and matching against live position records.

Matching is deliberately loose: a record matches a pattern when its
whitespace-stripped callsign equals the pattern, contains it, or is contained
in it. Short patterns therefore match unrelated callsigns (``"A1"`` hits
``"KLA123"``), and callers must tolerate false positives as well as misses.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from app.domain.carriers import IATA_TO_ICAO

if TYPE_CHECKING:  # pragma: no cover - typing only
    from app.models.flight import RawPositionRecord

_DESIGNATOR_RE = re.compile(r"^([A-Z0-9]*?[A-Z][A-Z0-9]*?)(\d+)$")
_OPERATOR_RE = re.compile(r"^([A-Z]{2,3}|[A-Z]\d|\d[A-Z])(?=\d|$)")

MAX_BROADENED_PATTERNS = 3


def _split_designator(value: str) -> tuple[str, str] | None:
    """Split ``JAL0123`` into ``("JAL", "0123")``."""

    match = _DESIGNATOR_RE.match(value)
    if not match:
        return None
    return match.group(1), match.group(2)


def _dedupe(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


def build_patterns(identifier: str) -> list[str]:
    """Build the ordered candidate patterns for a user-supplied identifier."""

    raw = identifier or ""
    stripped = re.sub(r"\s+", "", raw).upper()
    candidates = [raw.strip().upper(), raw.strip().lower(), stripped]

    parts = _split_designator(stripped)
    if parts:
        prefix, digits = parts
        candidates.append(f"{prefix}{digits.zfill(4)}")
        candidates.append(f"{prefix}{digits.lstrip('0') or '0'}")
        icao = IATA_TO_ICAO.get(prefix)
        if icao:
            candidates.append(f"{icao}{digits.lstrip('0') or '0'}")
    return _dedupe(candidates)


def callsign_matches(callsign: str, pattern: str) -> bool:
    if not callsign or not pattern:
        return False
    return callsign == pattern or pattern in callsign or callsign in pattern


def match(
    patterns: Sequence[str], records: Sequence["RawPositionRecord"]
) -> Optional["RawPositionRecord"]:
    """Return the first record hit by the first matching pattern."""

    for pattern in patterns:
        if not pattern:
            continue
        for record in records:
            if callsign_matches(record.clean_callsign, pattern):
                return record
    return None


def operator_code(identifier: str) -> str | None:
    stripped = re.sub(r"\s+", "", identifier or "").upper()
    found = _OPERATOR_RE.match(stripped)
    return found.group(1) if found else None


def broadened_patterns(identifier: str) -> list[str]:
    """Operator-code-only prefixes, longest first, for a second position lookup."""

    code = operator_code(identifier)
    if not code:
        return []

    candidates = [IATA_TO_ICAO.get(code, ""), code[:3], code[:2]]
    ordered = sorted(
        (value for value in _dedupe(candidates) if len(value) >= 2),
        key=len,
        reverse=True,
    )
    return ordered[:MAX_BROADENED_PATTERNS]


__all__ = [
    "MAX_BROADENED_PATTERNS",
    "broadened_patterns",
    "build_patterns",
    "callsign_matches",
    "match",
    "operator_code",
]
