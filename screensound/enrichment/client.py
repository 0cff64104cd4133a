"""
TheAudioDB lookup client.

`AudioDbClient.lookup()` is the only entry point. It always returns an
`EnrichmentResult`:

- FOUND: the payload had artist fields; missing ones render as "N/A"
- NOT_FOUND: the service answered but reported no match (`"artists":null`)
  or served an HTML page instead of data
- UNAVAILABLE: connection error, timeout, HTTP error status, or a body
  that does not look like a search result

The request runs under an httpx connect timeout plus an overall
`asyncio.wait_for` budget, so a hung remote cannot stall the console loop
beyond `total_timeout` seconds.
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final
from urllib.parse import quote_plus

import httpx

from screensound.enrichment.fields import PLACEHOLDER, extract_field, truncate

if TYPE_CHECKING:
    from screensound.config import EnrichmentSettings

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT: Final[str] = "https://www.theaudiodb.com/api/v1/json/2/search.php"
DEFAULT_TIMEOUT: Final[float] = 10.0
DEFAULT_USER_AGENT: Final[str] = "Mozilla/5.0"
BIOGRAPHY_LIMIT: Final[int] = 300

UNAVAILABLE_MESSAGE: Final[str] = (
    "Could not fetch artist information. The external lookup is optional "
    "and currently unavailable."
)
NOT_FOUND_MESSAGE: Final[str] = "Artist not found in the external catalog."

_NO_MATCH = re.compile(r'"artists"\s*:\s*null')


class EnrichmentUnavailableError(RuntimeError):
    """Raised inside the client when the lookup cannot produce a payload."""


class EnrichmentStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True, slots=True)
class ArtistProfile:
    name: str = PLACEHOLDER
    genre: str = PLACEHOLDER
    country: str = PLACEHOLDER
    formed_year: str = PLACEHOLDER
    biography: str = PLACEHOLDER

    @classmethod
    def from_payload(
        cls, payload: str, *, biography_limit: int = BIOGRAPHY_LIMIT
    ) -> ArtistProfile:
        def value(name: str) -> str:
            return extract_field(payload, name) or PLACEHOLDER

        biography = value("strBiographyEN")
        if biography != PLACEHOLDER:
            biography = truncate(biography, biography_limit)

        return cls(
            name=value("strArtist"),
            genre=value("strGenre"),
            country=value("strCountry"),
            formed_year=value("intFormedYear"),
            biography=biography,
        )

    def render(self) -> str:
        return (
            "\n=== ARTIST INFORMATION ===\n"
            f"Name: {self.name}\n"
            f"Genre: {self.genre}\n"
            f"Country: {self.country}\n"
            f"Formed: {self.formed_year}\n"
            f"\nBiography: {self.biography}\n"
        )


@dataclass(frozen=True, slots=True)
class EnrichmentResult:
    status: EnrichmentStatus
    message: str
    profile: ArtistProfile | None = None

    @property
    def found(self) -> bool:
        return self.status is EnrichmentStatus.FOUND

    def render(self) -> str:
        return self.profile.render() if self.profile is not None else self.message

    def __str__(self) -> str:
        return self.render()


def _looks_like_no_match(payload: str) -> bool:
    return "<html" in payload.lower() or _NO_MATCH.search(payload) is not None


class AudioDbClient:
    """
    Stateless client; every lookup opens and closes its own httpx.AsyncClient.

    `transport` exists for tests (httpx.MockTransport).
    """

    def __init__(
        self,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        connect_timeout: float = DEFAULT_TIMEOUT,
        total_timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        biography_limit: int = BIOGRAPHY_LIMIT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._connect_timeout = connect_timeout
        self._total_timeout = total_timeout
        self._user_agent = user_agent
        self._biography_limit = biography_limit
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: EnrichmentSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> AudioDbClient:
        return cls(
            endpoint=settings.endpoint,
            connect_timeout=settings.connect_timeout,
            total_timeout=settings.total_timeout,
            user_agent=settings.user_agent,
            biography_limit=settings.biography_limit,
            transport=transport,
        )

    def build_url(self, artist_name: str) -> str:
        """Search URL with the name as `s`; spaces become `+`."""
        return f"{self._endpoint}?s={quote_plus(artist_name.strip())}"

    async def lookup(self, artist_name: str) -> EnrichmentResult:
        """Fetch and summarize metadata for `artist_name`. Never raises."""
        try:
            payload = await self._fetch(artist_name)
        except EnrichmentUnavailableError as exc:
            logger.warning("Artist lookup for %r failed: %s", artist_name, exc)
            return EnrichmentResult(EnrichmentStatus.UNAVAILABLE, UNAVAILABLE_MESSAGE)

        if _looks_like_no_match(payload):
            logger.debug("No external match for %r", artist_name)
            return EnrichmentResult(EnrichmentStatus.NOT_FOUND, NOT_FOUND_MESSAGE)

        if '"strArtist"' not in payload:
            logger.warning("Unexpected lookup payload for %r: %.80r", artist_name, payload)
            return EnrichmentResult(EnrichmentStatus.UNAVAILABLE, UNAVAILABLE_MESSAGE)

        profile = ArtistProfile.from_payload(payload, biography_limit=self._biography_limit)
        return EnrichmentResult(EnrichmentStatus.FOUND, profile.render(), profile)

    async def _fetch(self, artist_name: str) -> str:
        url = self.build_url(artist_name)
        logger.debug("GET %s", url)
        timeout = httpx.Timeout(self._total_timeout, connect=self._connect_timeout)
        try:
            async with httpx.AsyncClient(
                timeout=timeout,
                follow_redirects=True,
                headers={"User-Agent": self._user_agent},
                transport=self._transport,
            ) as client:
                response = await asyncio.wait_for(client.get(url), timeout=self._total_timeout)
                payload = response.text
                # An HTML error page means "no match", whatever the status code.
                if not _looks_like_no_match(payload):
                    response.raise_for_status()
        except TimeoutError as exc:
            raise EnrichmentUnavailableError(
                f"no response within {self._total_timeout:g}s"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeDecodeError) as exc:
            raise EnrichmentUnavailableError(str(exc) or type(exc).__name__) from exc

        if not payload.strip():
            raise EnrichmentUnavailableError("empty response body")
        return payload
