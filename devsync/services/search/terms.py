from __future__ import annotations

from typing import Mapping

PAIR_SEPARATOR = "#"
KEY_VALUE_SEPARATOR = "="


def parse_terms(expression: str | None) -> dict[str, str]:
    # No escaping: a value can never contain the pair separator.
    terms: dict[str, str] = {}
    if not expression or not expression.strip():
        return terms
    for segment in expression.split(PAIR_SEPARATOR):
        segment = segment.strip()
        if not segment or KEY_VALUE_SEPARATOR not in segment:
            continue
        key, value = segment.split(KEY_VALUE_SEPARATOR, 1)
        key = key.strip()
        value = value.strip()
        if key and value:
            terms[key] = value
    return terms


def normalize_terms(filters: Mapping[str, str] | None) -> dict[str, str]:
    terms: dict[str, str] = {}
    for key, value in (filters or {}).items():
        key = str(key or "").strip()
        value = str(value or "").strip()
        if key and value:
            terms[key] = value
    return terms
