"""
Interactive console menu.

Pure I/O plumbing around `CatalogService`: prompts, renders results and turns
recoverable `CoreError`s into messages. `input_func` and `output` are
injectable so the loop can be driven from tests.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from screensound.core import (
    ArtistNotFoundError,
    CoreError,
    DuplicateArtistNameError,
    EmptyNameError,
    InvalidKindError,
)
from screensound.core.catalog import CatalogService
from screensound.core.models import Song

EXIT_OPTION = 9

MENU = """
1- Register artists
2- Register song
3- List songs
4- Find songs by artist
5- Find songs by artist (joined query)
6- Artist information
9- Exit
"""


def format_song(song: Song) -> str:
    return f"Song: {song.title} - Artist: {song.artist_name}"


class CatalogMenu:
    def __init__(
        self,
        service: CatalogService,
        *,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self._service = service
        self._input = input_func
        self._out = output
        self._actions = {
            1: self.register_artists,
            2: self.register_song,
            3: self.list_songs,
            4: self.find_songs_by_artist,
            5: self.find_songs_by_artist_joined,
            6: self.show_artist_information,
        }

    async def run(self) -> None:
        """Show the menu until the user picks exit (or stdin closes)."""
        while True:
            self._out(MENU)
            try:
                raw = self._input("> ")
            except EOFError:
                break

            try:
                choice = int(raw.strip())
            except ValueError:
                choice = -1

            if choice == EXIT_OPTION:
                break

            action = self._actions.get(choice)
            if action is None:
                self._out("Invalid option!")
                continue

            try:
                await action()
            except EOFError:
                break
            except CoreError as exc:
                self._out(f"\nERROR: {exc}\n")

        self._out("Closing the application!")

    async def register_artists(self) -> None:
        again = "y"
        while again.strip().lower() in ("y", "s"):
            name = self._input("Artist name: ")
            kind = self._input("Artist kind (solo, dupla or banda): ")
            try:
                await self._service.register_artist(name, kind)
            except InvalidKindError:
                self._out("\nERROR: Invalid artist kind!\nUse: solo, dupla or banda\n")
            except DuplicateArtistNameError:
                self._out(
                    f"\nERROR: An artist named '{name.strip()}' is already registered!\n"
                    "Please choose another name.\n"
                )
            except EmptyNameError:
                self._out("\nERROR: Artist name must not be empty!\n")
            else:
                self._out("Artist registered successfully!")
            again = self._input("Register another artist? (Y/N) ")

    async def register_song(self) -> None:
        fragment = self._input("Register a song for which artist? ")
        artist = await self._service.artists.find_by_name_contains(fragment)
        if artist is None:
            self._out("Artist not found!")
            return
        title = self._input(f"Song title for {artist.name}: ")
        try:
            await self._service.register_song(fragment, title)
        except ArtistNotFoundError:
            self._out("Artist not found!")
        else:
            self._out("Song registered successfully!")

    async def list_songs(self) -> None:
        self._print_songs(await self._service.list_all_songs())

    async def find_songs_by_artist(self) -> None:
        fragment = self._input("Find songs of which artist? ")
        try:
            songs = await self._service.find_songs_by_artist(fragment)
        except ArtistNotFoundError:
            self._out("Artist not found!")
            return
        self._print_songs(songs)

    async def find_songs_by_artist_joined(self) -> None:
        fragment = self._input("Find songs of which artist? (joined query) ")
        songs = await self._service.find_songs_by_artist_joined(fragment)
        if not songs:
            self._out("No songs found for this artist!")
            return
        self._print_songs(songs)

    async def show_artist_information(self) -> None:
        if not self._service.enrichment_enabled:
            self._out("External artist lookup is disabled.")
            return
        name = self._input("Look up which artist? ")
        result = await self._service.describe_artist(name)
        self._out(result.render())

    def _print_songs(self, songs: Iterable[Song]) -> None:
        for song in songs:
            self._out(format_song(song))
