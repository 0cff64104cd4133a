"""
Repositories for the two catalog entities.

`ArtistRepository` is the aggregate entry point: saving an artist also inserts
every song appended to its `songs` list that has no id yet, inside a single
transaction. Either the artist and all of its new songs are committed, or
nothing is, and the in-memory ids stay unassigned.

Two strategies exist for "songs of the artist matching a fragment":
- staged: `ArtistRepository.find_by_name_contains` then `SongRepository.find_by_artist`
- joined: `ArtistRepository.find_songs_by_artist_name_contains` (one query)
Both resolve the fragment with the same SQL predicate and tie-break, so they
return the same songs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import aiosqlite

from screensound.core import DuplicateArtistNameError, UnsavedArtistError
from screensound.core.catalog_db import CatalogDb
from screensound.core.db import queries_artists, queries_songs
from screensound.core.db.models import ArtistRow, SongRow
from screensound.core.models import Artist, ArtistId, ArtistKind, Song, SongId

logger = logging.getLogger(__name__)


def _is_duplicate_name(exc: aiosqlite.IntegrityError) -> bool:
    return "UNIQUE constraint failed: artists.name" in str(exc)


def _artist_from_row(row: ArtistRow) -> Artist:
    return Artist(name=row.name, kind=ArtistKind(row.kind), id=ArtistId(row.id))


def _songs_from_rows(rows: Iterable[SongRow]) -> list[Song]:
    """
    Materialize song rows, sharing one Artist instance per artist id.

    Each Artist's `songs` list is filled from the same rows, so it is complete
    whenever the query returned all songs of that artist.
    """
    artists: dict[int, Artist] = {}
    songs: list[Song] = []
    for r in rows:
        artist = artists.get(r.artist_id)
        if artist is None:
            artist = Artist(
                name=r.artist_name, kind=ArtistKind(r.artist_kind), id=ArtistId(r.artist_id)
            )
            artists[r.artist_id] = artist
        song = Song(title=r.title, artist=artist, id=SongId(r.id))
        artist.songs.append(song)
        songs.append(song)
    return songs


class ArtistRepository:
    def __init__(self, db: CatalogDb) -> None:
        self._db = db

    async def save(self, artist: Artist) -> Artist:
        """
        Insert the artist if new, plus every song in `artist.songs` without an id.

        Saving an already persisted artist with no new songs is a no-op. Existing
        rows are never updated.

        Raises:
            DuplicateArtistNameError: another artist already has exactly this name.
        """
        pending = [s for s in artist.songs if s.id is None]

        async with self._db.transaction() as conn:
            artist_id = artist.id
            if artist_id is None:
                try:
                    artist_id = await queries_artists.insert_artist(
                        conn, name=artist.name, kind=artist.kind.value
                    )
                except aiosqlite.IntegrityError as exc:
                    if _is_duplicate_name(exc):
                        logger.info("Rejected duplicate artist name %r", artist.name)
                        raise DuplicateArtistNameError(artist.name) from exc
                    raise

            song_ids = [
                await queries_songs.insert_song(conn, title=s.title, artist_id=artist_id)
                for s in pending
            ]

        # Only after commit: a rolled-back save leaves the entities untouched.
        artist.id = ArtistId(artist_id)
        for song, song_id in zip(pending, song_ids):
            song.id = SongId(song_id)

        logger.debug(
            "Saved artist %r (id=%s) with %d new song(s)", artist.name, artist.id, len(pending)
        )
        return artist

    async def find_by_id(self, artist_id: int) -> Artist | None:
        row = await queries_artists.get_artist_by_id(self._db.connection(), artist_id)
        return await self._with_songs(row) if row is not None else None

    async def find_by_name(self, name: str) -> Artist | None:
        """Exact, case-sensitive lookup."""
        row = await queries_artists.get_artist_by_name(self._db.connection(), name)
        return await self._with_songs(row) if row is not None else None

    async def find_by_name_contains(
        self, fragment: str, *, case_insensitive: bool = True
    ) -> Artist | None:
        """
        Return the first artist whose name contains `fragment`.

        Case is ignored unless `case_insensitive` is False.
        When several artists match, the earliest registered one wins. This is
        a deliberate simplification, not a ranked search. The artist comes back
        with its songs loaded.
        """
        row = await queries_artists.find_first_artist_name_contains(
            self._db.connection(), fragment, case_insensitive=case_insensitive
        )
        return await self._with_songs(row) if row is not None else None

    async def find_all(self) -> list[Artist]:
        conn = self._db.connection()
        artists = [_artist_from_row(r) for r in await queries_artists.list_all_artists(conn)]
        by_id = {a.id: a for a in artists}
        for r in await queries_songs.list_all_songs(conn):
            owner = by_id[r.artist_id]
            owner.songs.append(Song(title=r.title, artist=owner, id=SongId(r.id)))
        return artists

    async def find_songs_by_artist_name_contains(self, fragment: str) -> list[Song]:
        """Joined single-query variant of find_by_name_contains + find_by_artist."""
        rows = await queries_artists.list_songs_by_artist_name_contains(
            self._db.connection(), fragment
        )
        return _songs_from_rows(rows)

    async def count(self) -> int:
        return await queries_artists.count_artists(self._db.connection())

    async def _with_songs(self, row: ArtistRow) -> Artist:
        artist = _artist_from_row(row)
        for r in await queries_songs.list_songs_by_artist(self._db.connection(), row.id):
            artist.songs.append(Song(title=r.title, artist=artist, id=SongId(r.id)))
        return artist


class SongRepository:
    def __init__(self, db: CatalogDb) -> None:
        self._db = db

    async def save(self, song: Song) -> Song:
        """
        Insert a single song for an already persisted artist.

        Songs that already have an id are returned unchanged.

        Raises:
            UnsavedArtistError: the owning artist has no id yet.
        """
        if song.id is not None:
            return song
        artist = song.artist
        if artist.id is None:
            raise UnsavedArtistError(artist.name)

        async with self._db.transaction() as conn:
            song_id = await queries_songs.insert_song(conn, title=song.title, artist_id=artist.id)

        song.id = SongId(song_id)
        if not any(s is song for s in artist.songs):
            artist.songs.append(song)
        logger.debug("Saved song %r (id=%s) for artist id=%s", song.title, song.id, artist.id)
        return song

    async def find_by_id(self, song_id: int) -> Song | None:
        row = await queries_songs.get_song_by_id(self._db.connection(), song_id)
        if row is None:
            return None
        siblings = await queries_songs.list_songs_by_artist(self._db.connection(), row.artist_id)
        return next(s for s in _songs_from_rows(siblings) if s.id == row.id)

    async def find_all(self) -> list[Song]:
        return _songs_from_rows(await queries_songs.list_all_songs(self._db.connection()))

    async def find_by_artist(self, artist: Artist) -> list[Song]:
        """List the stored songs of `artist`. An unsaved artist has none."""
        if artist.id is None:
            return []
        rows = await queries_songs.list_songs_by_artist(self._db.connection(), artist.id)
        return _songs_from_rows(rows)

    async def count(self) -> int:
        return await queries_songs.count_songs(self._db.connection())
