"""Feature categories a search query can originate from."""

from __future__ import annotations

from enum import Enum


class Feature(str, Enum):
    """Closed set of token stream origins tracked by the detector."""

    FILE_NAME = "file_name"
    FILE_EXTENSION = "file_extension"
    SEARCH_SOURCE = "search_source"
