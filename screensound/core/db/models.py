"""
DB row models (DTOs) and small normalization helpers.

This module is intentionally lightweight:
- No DB connection knowledge
- No SQL
- Pure dataclasses + helper functions
"""

from __future__ import annotations

from dataclasses import dataclass

import aiosqlite


@dataclass(frozen=True, slots=True)
class ArtistRow:
    """Artist record as stored in SQLite. `kind` holds the ArtistKind value."""

    id: int
    name: str
    kind: str

    @classmethod
    def from_row(cls, row: aiosqlite.Row) -> ArtistRow:
        return cls(id=int(row["id"]), name=row["name"], kind=row["kind"])


@dataclass(frozen=True, slots=True)
class SongRow:
    """
    Song record as stored in SQLite.

    Notes:
    - `artist_id` is a NOT NULL FK to the artists table.
    - Song queries always join the owning artist, so its columns travel along.
    """

    id: int
    title: str
    artist_id: int
    artist_name: str
    artist_kind: str

    @classmethod
    def from_row(cls, row: aiosqlite.Row) -> SongRow:
        return cls(
            id=int(row["id"]),
            title=row["title"],
            artist_id=int(row["artist_id"]),
            artist_name=row["artist_name"],
            artist_kind=row["artist_kind"],
        )
