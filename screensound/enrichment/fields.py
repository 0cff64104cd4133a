"""
Minimal field scanner for TheAudioDB search payloads.

This is deliberately not a JSON parser. It finds the first `"<field>":"`
marker and reads up to the next double quote, which is all the flat string
fields we display need. Escaped quotes inside a value cut it short; that is
acceptable for an advisory display. Nothing here raises.
"""

from __future__ import annotations

import re
from typing import Final

PLACEHOLDER: Final[str] = "N/A"
ELLIPSIS: Final[str] = "..."


def extract_field(payload: str | None, field_name: str) -> str:
    """
    Return the raw string value of `field_name`, or PLACEHOLDER.

    PLACEHOLDER is returned when the key is missing, when its value is not a
    quoted string (e.g. `null`), or when the closing quote is missing.
    """
    if not payload:
        return PLACEHOLDER
    marker = re.search(rf'"{re.escape(field_name)}"\s*:\s*"', payload)
    if marker is None:
        return PLACEHOLDER
    end = payload.find('"', marker.end())
    if end == -1:
        return PLACEHOLDER
    return payload[marker.end() : end]


def truncate(text: str, limit: int) -> str:
    """Cut `text` to `limit` characters plus an ellipsis; shorter text is unchanged."""
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS
