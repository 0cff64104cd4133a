"""
Tests for screensound.core.models.

Tests cover:
- ArtistKind label parsing
- Artist/Song construction rules
- The in-memory artist -> songs relationship
"""

import pytest

from screensound.core import EmptyNameError, EmptyTitleError, InvalidKindError
from screensound.core.models import Artist, ArtistKind, Song


class TestArtistKind:
    @pytest.mark.parametrize("text", ["SOLO", "solo", "Solo", "sOlO"])
    def test_parse_ignores_case(self, text: str) -> None:
        assert ArtistKind.parse(text) is ArtistKind.SOLO

    def test_parse_all_labels(self) -> None:
        assert ArtistKind.parse("dupla") is ArtistKind.DUO
        assert ArtistKind.parse("BANDA") is ArtistKind.BAND

    @pytest.mark.parametrize("text", ["", "sol", "solos", "duo", "band", "SOLO DUPLA", " solo ", "banda\n"])
    def test_parse_rejects_everything_else(self, text: str) -> None:
        with pytest.raises(InvalidKindError) as exc_info:
            ArtistKind.parse(text)
        assert exc_info.value.text == text

    def test_invalid_kind_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            ArtistKind.parse("orchestra")


class TestArtist:
    def test_new_artist_is_not_persisted(self) -> None:
        artist = Artist(name="Madonna", kind=ArtistKind.SOLO)
        assert artist.id is None
        assert not artist.is_persisted
        assert artist.songs == []

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name: str) -> None:
        with pytest.raises(EmptyNameError):
            Artist(name=name, kind=ArtistKind.SOLO)

    def test_add_song_links_both_ways(self) -> None:
        artist = Artist(name="Madonna", kind=ArtistKind.SOLO)
        song = artist.add_song("Hung Up")

        assert artist.songs == [song]
        assert song.artist is artist
        assert song.artist_name == "Madonna"
        assert song.id is None

    def test_repr_does_not_recurse(self) -> None:
        artist = Artist(name="Madonna", kind=ArtistKind.SOLO)
        artist.add_song("Hung Up")
        text = repr(artist)
        assert "Hung Up" in text
        assert "Madonna" in text


class TestSong:
    @pytest.mark.parametrize("title", ["", "  "])
    def test_empty_title_rejected(self, title: str) -> None:
        artist = Artist(name="Madonna", kind=ArtistKind.SOLO)
        with pytest.raises(EmptyTitleError):
            Song(title=title, artist=artist)

    def test_equality_ignores_artist(self) -> None:
        a = Artist(name="A", kind=ArtistKind.SOLO)
        b = Artist(name="B", kind=ArtistKind.BAND)
        assert Song(title="Same", artist=a) == Song(title="Same", artist=b)
