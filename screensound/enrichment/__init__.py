"""
Best-effort artist metadata lookup against TheAudioDB.

Nothing in this package touches the catalog DB. Every failure is turned into
an advisory `EnrichmentResult`, so callers never need a try/except around it.
"""

from __future__ import annotations

from .client import (
    AudioDbClient,
    ArtistProfile,
    EnrichmentResult,
    EnrichmentStatus,
    EnrichmentUnavailableError,
)
from .fields import PLACEHOLDER, extract_field, truncate

__all__ = [
    "AudioDbClient",
    "ArtistProfile",
    "EnrichmentResult",
    "EnrichmentStatus",
    "EnrichmentUnavailableError",
    "PLACEHOLDER",
    "extract_field",
    "truncate",
]
