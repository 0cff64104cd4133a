"""
ScreenSound - a small console catalog for artists and their songs.

The catalog is stored in SQLite and can optionally be enriched with public
artist metadata fetched from TheAudioDB.
"""

__version__ = "0.1.0"
__author__ = "ScreenSound Contributors"
__license__ = "MIT"

from screensound.core.catalog import CatalogService

__all__ = ["CatalogService", "__version__"]
