from __future__ import annotations

import logging

from screensound.core import ArtistNotFoundError, EmptyTitleError
from screensound.core.catalog_db import CatalogDb
from screensound.core.models import Artist, ArtistKind, Song
from screensound.core.repositories import ArtistRepository, SongRepository
from screensound.enrichment import AudioDbClient, EnrichmentResult, EnrichmentStatus

logger = logging.getLogger(__name__)

ENRICHMENT_DISABLED_MESSAGE = "External artist lookup is disabled."


class CatalogService:
    """
    Use cases behind the console menu.

    Failures are typed `CoreError`s (`InvalidKindError`,
    `DuplicateArtistNameError`, `ArtistNotFoundError`, ...). They are all
    recoverable: nothing is written when one is raised, so the caller can
    show the message and prompt again.

    Dependencies:
    - `CatalogDb` for persistence (must be open with schema ensured)
    - `AudioDbClient` for optional metadata; `None` disables it
    """

    def __init__(self, *, db: CatalogDb, enrichment: AudioDbClient | None = None) -> None:
        self._db = db
        self._artists = ArtistRepository(db)
        self._songs = SongRepository(db)
        self._enrichment = enrichment

    @property
    def artists(self) -> ArtistRepository:
        return self._artists

    @property
    def songs(self) -> SongRepository:
        return self._songs

    @property
    def enrichment_enabled(self) -> bool:
        return self._enrichment is not None

    async def register_artist(self, name: str, kind_text: str) -> Artist:
        """
        Register a new artist.

        The kind is parsed before anything else so bad input never reaches
        the DB.

        Raises:
            InvalidKindError, EmptyNameError, DuplicateArtistNameError
        """
        kind = ArtistKind.parse(kind_text)
        artist = Artist(name=name.strip(), kind=kind)
        await self._artists.save(artist)
        logger.info("Registered artist %r (%s)", artist.name, kind.name)
        return artist

    async def register_song(self, artist_fragment: str, title: str) -> Song:
        """
        Add a song to the first artist whose name contains `artist_fragment`.

        The song is appended to the artist and persisted through the artist's
        cascading save.

        Raises:
            EmptyTitleError, ArtistNotFoundError
        """
        title = title.strip()
        if not title:
            raise EmptyTitleError()

        artist = await self._artists.find_by_name_contains(artist_fragment)
        if artist is None:
            raise ArtistNotFoundError(artist_fragment)

        song = artist.add_song(title)
        try:
            await self._artists.save(artist)
        except BaseException:
            artist.songs.remove(song)
            raise
        logger.info("Registered song %r for %r", song.title, artist.name)
        return song

    async def list_all_songs(self) -> list[Song]:
        return await self._songs.find_all()

    async def list_all_artists(self) -> list[Artist]:
        return await self._artists.find_all()

    async def find_songs_by_artist(self, fragment: str) -> list[Song]:
        """
        Two-step search: resolve the artist, then list its songs.

        Raises:
            ArtistNotFoundError: no artist name contains `fragment`.
        """
        artist = await self._artists.find_by_name_contains(fragment)
        if artist is None:
            raise ArtistNotFoundError(fragment)
        return await self._songs.find_by_artist(artist)

    async def find_songs_by_artist_joined(self, fragment: str) -> list[Song]:
        """
        Single-query search. Same songs as `find_songs_by_artist`, but an
        unmatched fragment simply yields an empty list.
        """
        return await self._artists.find_songs_by_artist_name_contains(fragment)

    async def describe_artist(self, name: str) -> EnrichmentResult:
        """
        Look up external metadata for an artist. Never raises.

        A fragment matching a catalog artist is expanded to that artist's full
        name first; otherwise the text is searched as typed.
        """
        if self._enrichment is None:
            return EnrichmentResult(EnrichmentStatus.UNAVAILABLE, ENRICHMENT_DISABLED_MESSAGE)

        artist = await self._artists.find_by_name_contains(name)
        query = artist.name if artist is not None else name
        return await self._enrichment.lookup(query)
