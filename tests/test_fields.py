"""Tests for the minimal payload field scanner."""

import pytest

from screensound.enrichment.fields import PLACEHOLDER, extract_field, truncate

PAYLOAD = (
    '{"artists":[{"idArtist":"111247","strArtist":"Madonna","strGenre":"Pop",'
    '"strCountry":"Bay City, Michigan, USA","intFormedYear":"1979",'
    '"strBiographyEN":null}]}'
)


class TestExtractField:
    def test_present_field(self) -> None:
        assert extract_field(PAYLOAD, "strGenre") == "Pop"
        assert extract_field(PAYLOAD, "strArtist") == "Madonna"
        assert extract_field(PAYLOAD, "intFormedYear") == "1979"

    def test_minimal_payload(self) -> None:
        assert extract_field('"strGenre":"Pop"', "strGenre") == "Pop"

    def test_missing_key(self) -> None:
        assert extract_field(PAYLOAD, "strMood") == PLACEHOLDER

    def test_null_value(self) -> None:
        assert extract_field(PAYLOAD, "strBiographyEN") == PLACEHOLDER

    def test_unterminated_value(self) -> None:
        assert extract_field('{"strGenre":"Po', "strGenre") == PLACEHOLDER

    @pytest.mark.parametrize("payload", [None, ""])
    def test_empty_payload(self, payload: str | None) -> None:
        assert extract_field(payload, "strGenre") == PLACEHOLDER

    def test_whitespace_around_colon(self) -> None:
        assert extract_field('{"strGenre" : "Rock"}', "strGenre") == "Rock"

    def test_first_occurrence_wins(self) -> None:
        payload = '[{"strArtist":"First"},{"strArtist":"Second"}]'
        assert extract_field(payload, "strArtist") == "First"

    def test_key_must_match_exactly(self) -> None:
        # "strArtistStripped" must not satisfy a lookup for "strArtist".
        payload = '{"strArtistStripped":"x","strArtist":"Real"}'
        assert extract_field(payload, "strArtist") == "Real"

    def test_field_name_is_not_a_regex(self) -> None:
        assert extract_field('{"str.*":"x"}', "str.*") == "x"
        assert extract_field('{"strGenre":"Pop"}', "str.*") == PLACEHOLDER


class TestTruncate:
    def test_long_text_is_cut_with_ellipsis(self) -> None:
        text = "x" * 301
        result = truncate(text, 300)
        assert result == "x" * 300 + "..."

    def test_exact_limit_is_unchanged(self) -> None:
        text = "y" * 300
        assert truncate(text, 300) == text

    def test_short_text_is_unchanged(self) -> None:
        assert truncate("short bio", 300) == "short bio"
