"""
Internal DB subpackage for ScreenSound.

Splits the SQLite access code into focused units (row models, schema/migrations
and query groups) while `CatalogDb` stays the single connection owner that the
repositories import.

Re-exports here are primarily for convenience inside the `core` package.
"""

from __future__ import annotations

# Models / DTOs
from .models import ArtistRow, SongRow

# Schema / migrations
from .schema import SCHEMA_VERSION, ensure_schema, migrate

__all__ = [
    # models
    "ArtistRow",
    "SongRow",
    # schema
    "SCHEMA_VERSION",
    "ensure_schema",
    "migrate",
]
