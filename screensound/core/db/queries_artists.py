"""
Artist-related DB queries.

Design:
- Functions are *pure DB helpers*: they take an open `aiosqlite.Connection`
  and return row DTOs.
- Name-fragment matching uses the `casefold()` SQL function registered by
  `CatalogDb.open()`, so it folds non-ASCII names too.
- "First match" means lowest id, i.e. the earliest registered artist.

Important:
- Do NOT interpolate user input into SQL; every value is a bound parameter.
- None of these helpers commit. Transactions belong to `CatalogDb`.
"""

from __future__ import annotations

import aiosqlite

from screensound.core.db.models import ArtistRow, SongRow

# Shared predicate for both lookup strategies; keeps them equivalent.
_NAME_CONTAINS = "instr(casefold(ar.name), casefold(:fragment)) > 0"
_NAME_CONTAINS_EXACT_CASE = "instr(ar.name, :fragment) > 0"


async def insert_artist(conn: aiosqlite.Connection, *, name: str, kind: str) -> int:
    """Insert an artist and return its new id. Raises IntegrityError on duplicate name."""
    cursor = await conn.execute(
        "INSERT INTO artists (name, kind) VALUES (?, ?);",
        (name, kind),
    )
    return int(cursor.lastrowid)


async def get_artist_by_id(conn: aiosqlite.Connection, artist_id: int) -> ArtistRow | None:
    cursor = await conn.execute(
        """
        SELECT id, name, kind
        FROM artists
        WHERE id = ?
        """,
        (int(artist_id),),
    )
    row = await cursor.fetchone()
    return ArtistRow.from_row(row) if row is not None else None


async def get_artist_by_name(conn: aiosqlite.Connection, name: str) -> ArtistRow | None:
    """Exact, case-sensitive lookup (mirrors the UNIQUE constraint)."""
    cursor = await conn.execute(
        """
        SELECT id, name, kind
        FROM artists
        WHERE name = ?
        """,
        (name,),
    )
    row = await cursor.fetchone()
    return ArtistRow.from_row(row) if row is not None else None


async def find_first_artist_name_contains(
    conn: aiosqlite.Connection, fragment: str, *, case_insensitive: bool = True
) -> ArtistRow | None:
    """Return the first artist whose name contains `fragment`, ignoring case by default."""
    predicate = _NAME_CONTAINS if case_insensitive else _NAME_CONTAINS_EXACT_CASE
    cursor = await conn.execute(
        f"""
        SELECT ar.id, ar.name, ar.kind
        FROM artists ar
        WHERE {predicate}
        ORDER BY ar.id ASC
        LIMIT 1
        """,
        {"fragment": fragment},
    )
    row = await cursor.fetchone()
    return ArtistRow.from_row(row) if row is not None else None


async def list_all_artists(conn: aiosqlite.Connection) -> list[ArtistRow]:
    cursor = await conn.execute(
        """
        SELECT id, name, kind
        FROM artists
        ORDER BY id ASC
        """
    )
    rows = await cursor.fetchall()
    return [ArtistRow.from_row(r) for r in rows]


async def count_artists(conn: aiosqlite.Connection) -> int:
    cursor = await conn.execute("SELECT COUNT(*) AS c FROM artists;")
    row = await cursor.fetchone()
    return int(row["c"]) if row is not None else 0


async def list_songs_by_artist_name_contains(
    conn: aiosqlite.Connection, fragment: str
) -> list[SongRow]:
    """
    Single round trip variant of "find artist, then list its songs".

    The subquery picks the same artist `find_first_artist_name_contains` would,
    so both strategies return the same songs for the same data.
    """
    cursor = await conn.execute(
        f"""
        SELECT
            s.id,
            s.title,
            s.artist_id,
            a.name AS artist_name,
            a.kind AS artist_kind
        FROM artists a
        JOIN songs s ON s.artist_id = a.id
        WHERE a.id = (
            SELECT ar.id
            FROM artists ar
            WHERE {_NAME_CONTAINS}
            ORDER BY ar.id ASC
            LIMIT 1
        )
        ORDER BY s.id ASC
        """,
        {"fragment": fragment},
    )
    rows = await cursor.fetchall()
    return [SongRow.from_row(r) for r in rows]
