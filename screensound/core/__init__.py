"""
Core domain package.

This package contains the catalog business logic, independent of the console
front end. It owns the entity model, the SQLite access layer and the
repositories built on top of it.

Consumers should usually import from the specific module they need
(e.g. `screensound.core.catalog`). Only the error hierarchy lives here so
every layer can raise and catch it without import cycles.
"""

from __future__ import annotations

__all__: list[str] = [
    "CoreError",
    "NotFoundError",
    "InvalidKindError",
    "EmptyNameError",
    "EmptyTitleError",
    "DuplicateArtistNameError",
    "ArtistNotFoundError",
    "UnsavedArtistError",
]


class CoreError(Exception):
    """Base class for core-layer exceptions."""


class NotFoundError(CoreError):
    """Raised when an entity (artist/song) cannot be found."""


class InvalidKindError(CoreError, ValueError):
    """Raised when free-form text does not name a known artist kind."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"No artist kind found for the given text: {text!r}")


class EmptyNameError(CoreError, ValueError):
    """Raised when an artist name is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Artist name must not be empty.")


class EmptyTitleError(CoreError, ValueError):
    """Raised when a song title is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Song title must not be empty.")


class DuplicateArtistNameError(CoreError):
    """Raised when an artist with exactly the same name is already stored."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"An artist named {name!r} is already registered.")


class ArtistNotFoundError(NotFoundError):
    """Raised when a name fragment matches no stored artist."""

    def __init__(self, fragment: str) -> None:
        self.fragment = fragment
        super().__init__(f"No artist matches {fragment!r}.")


class UnsavedArtistError(CoreError):
    """Raised when a song is saved for an artist that has not been persisted yet."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Artist {name!r} must be saved before its songs.")
