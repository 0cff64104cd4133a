"""
Song-related DB queries.

Every read joins the owning artist so callers can rebuild `Song.artist`
without a second query. Rows come back in insertion order (id ASC).
"""

from __future__ import annotations

import aiosqlite

from screensound.core.db.models import SongRow

_SONG_COLUMNS = """
    s.id,
    s.title,
    s.artist_id,
    a.name AS artist_name,
    a.kind AS artist_kind
"""


async def insert_song(conn: aiosqlite.Connection, *, title: str, artist_id: int) -> int:
    cursor = await conn.execute(
        "INSERT INTO songs (title, artist_id) VALUES (?, ?);",
        (title, int(artist_id)),
    )
    return int(cursor.lastrowid)


async def get_song_by_id(conn: aiosqlite.Connection, song_id: int) -> SongRow | None:
    cursor = await conn.execute(
        f"""
        SELECT {_SONG_COLUMNS}
        FROM songs s
        JOIN artists a ON a.id = s.artist_id
        WHERE s.id = ?
        """,
        (int(song_id),),
    )
    row = await cursor.fetchone()
    return SongRow.from_row(row) if row is not None else None


async def list_all_songs(conn: aiosqlite.Connection) -> list[SongRow]:
    cursor = await conn.execute(
        f"""
        SELECT {_SONG_COLUMNS}
        FROM songs s
        JOIN artists a ON a.id = s.artist_id
        ORDER BY s.id ASC
        """
    )
    rows = await cursor.fetchall()
    return [SongRow.from_row(r) for r in rows]


async def list_songs_by_artist(conn: aiosqlite.Connection, artist_id: int) -> list[SongRow]:
    cursor = await conn.execute(
        f"""
        SELECT {_SONG_COLUMNS}
        FROM songs s
        JOIN artists a ON a.id = s.artist_id
        WHERE s.artist_id = ?
        ORDER BY s.id ASC
        """,
        (int(artist_id),),
    )
    rows = await cursor.fetchall()
    return [SongRow.from_row(r) for r in rows]


async def count_songs(conn: aiosqlite.Connection) -> int:
    cursor = await conn.execute("SELECT COUNT(*) AS c FROM songs;")
    row = await cursor.fetchone()
    return int(row["c"]) if row is not None else 0
