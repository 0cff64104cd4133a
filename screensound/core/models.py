"""
Catalog entities.

`Artist` owns an ordered list of `Song`s. Both records are plain mutable
dataclasses: ids are assigned by the store on first persistence and the song
list grows when new songs are registered. Neither record knows anything about
SQL; persistence lives in `screensound.core.repositories`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NewType

from screensound.core import EmptyNameError, EmptyTitleError, InvalidKindError

ArtistId = NewType("ArtistId", int)
SongId = NewType("SongId", int)


class ArtistKind(Enum):
    """How an act is formed. Values are the labels users type at the prompt."""

    SOLO = "solo"
    DUO = "dupla"
    BAND = "banda"

    @classmethod
    def parse(cls, text: str) -> ArtistKind:
        """
        Parse a user-supplied label, ignoring case.

        Only whole labels match: "sol" and " solo " are rejected.

        Raises:
            InvalidKindError: if `text` is not one of the known labels.
        """
        wanted = text.casefold()
        for kind in cls:
            if kind.value == wanted:
                return kind
        raise InvalidKindError(text)


@dataclass(slots=True)
class Artist:
    name: str
    kind: ArtistKind
    id: ArtistId | None = None
    songs: list[Song] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise EmptyNameError()

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def add_song(self, title: str) -> Song:
        """Append a new, not yet persisted song to this artist."""
        song = Song(title=title, artist=self)
        self.songs.append(song)
        return song


@dataclass(slots=True)
class Song:
    title: str
    # Back-reference: excluded from repr/eq to avoid recursing through Artist.songs.
    artist: Artist = field(repr=False, compare=False)
    id: SongId | None = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise EmptyTitleError()

    @property
    def artist_name(self) -> str:
        return self.artist.name
