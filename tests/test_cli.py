"""
Tests for the console menu (screensound.cli) driven with scripted input.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from screensound.cli import CatalogMenu, format_song
from screensound.core.catalog import CatalogService
from screensound.core.catalog_db import CatalogDb
from screensound.core.models import Artist, ArtistKind
from screensound.enrichment import AudioDbClient


@pytest.fixture
async def db() -> CatalogDb:
    """Create an in-memory database for testing."""
    db = CatalogDb(":memory:")
    await db.open()
    await db.ensure_schema()
    yield db
    await db.close()


@pytest.fixture
def service(db: CatalogDb) -> CatalogService:
    return CatalogService(db=db)


def scripted(*answers: str) -> Callable[[str], str]:
    """input() replacement returning `answers` in order, then EOF."""
    pending = list(answers)

    def fake_input(prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return fake_input


async def run_menu(service: CatalogService, *answers: str) -> str:
    lines: list[str] = []
    menu = CatalogMenu(service, input_func=scripted(*answers), output=lines.append)
    await menu.run()
    return "\n".join(lines)


class TestFormatting:
    def test_format_song(self) -> None:
        artist = Artist(name="Madonna", kind=ArtistKind.SOLO)
        song = artist.add_song("Hung Up")
        assert format_song(song) == "Song: Hung Up - Artist: Madonna"


class TestMenu:
    async def test_exit(self, service: CatalogService) -> None:
        output = await run_menu(service, "9")
        assert "1- Register artists" in output
        assert "Closing the application!" in output

    async def test_eof_exits(self, service: CatalogService) -> None:
        output = await run_menu(service)
        assert "Closing the application!" in output

    async def test_invalid_option(self, service: CatalogService) -> None:
        output = await run_menu(service, "abc", "7", "9")
        assert output.count("Invalid option!") == 2

    async def test_full_workflow(self, service: CatalogService) -> None:
        output = await run_menu(
            service,
            "1", "Madonna", "solo", "s", "Queen", "BANDA", "n",
            "2", "mad", "Hung Up",
            "2", "queen", "Under Pressure",
            "3",
            "9",
        )  # fmt: skip

        assert output.count("Artist registered successfully!") == 2
        assert output.count("Song registered successfully!") == 2
        assert "Song: Hung Up - Artist: Madonna" in output
        assert "Song: Under Pressure - Artist: Queen" in output

    async def test_register_artist_errors(self, service: CatalogService) -> None:
        await service.register_artist("Madonna", "solo")

        output = await run_menu(
            service,
            "1", "Prince", "soloist", "y", "Madonna", "dupla", "n",
            "9",
        )  # fmt: skip

        assert "Invalid artist kind!" in output
        assert "An artist named 'Madonna' is already registered!" in output
        assert await service.artists.count() == 1

    async def test_register_artist_empty_name_prompts_again(self, service: CatalogService) -> None:
        output = await run_menu(
            service,
            "1", "   ", "solo", "s", "Madonna", "solo", "n",
            "9",
        )  # fmt: skip

        assert "Artist name must not be empty!" in output
        assert "Artist registered successfully!" in output
        assert [a.name for a in await service.list_all_artists()] == ["Madonna"]

    async def test_register_song_unknown_artist(self, service: CatalogService) -> None:
        output = await run_menu(service, "2", "nobody", "9")
        assert "Artist not found!" in output
        assert await service.songs.count() == 0

    async def test_register_song_empty_title(self, service: CatalogService) -> None:
        await service.register_artist("Madonna", "solo")
        output = await run_menu(service, "2", "mad", "   ", "9")
        assert "ERROR: Song title must not be empty." in output
        assert await service.songs.count() == 0

    async def test_find_songs_both_ways(self, service: CatalogService) -> None:
        await service.register_artist("Madonna", "solo")
        await service.register_song("madonna", "Frozen")

        output = await run_menu(service, "4", "MAD", "5", "mad", "9")
        assert output.count("Song: Frozen - Artist: Madonna") == 2

    async def test_find_songs_no_match(self, service: CatalogService) -> None:
        output = await run_menu(service, "4", "nobody", "5", "nobody", "9")
        assert "Artist not found!" in output
        assert "No songs found for this artist!" in output

    async def test_artist_information_disabled(self, service: CatalogService) -> None:
        output = await run_menu(service, "6", "9")
        assert "External artist lookup is disabled." in output

    async def test_artist_information(self, db: CatalogDb) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, text='{"artists":[{"strArtist":"Madonna","strGenre":"Pop"}]}'
            )

        service = CatalogService(
            db=db, enrichment=AudioDbClient(transport=httpx.MockTransport(handler))
        )
        output = await run_menu(service, "6", "Madonna", "9")
        assert "Genre: Pop" in output
        assert "Country: N/A" in output
