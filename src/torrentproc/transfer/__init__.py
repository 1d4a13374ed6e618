"""Copying completed torrents into the library.

This package provides two levels of functionality:
- core: Destination resolution and the exclusive, never-overwriting copy.
- batch: Category handlers (single movie, single episode, season pack).
"""

from .core import (
    copy_exactly_once,
    ensure_category_root,
    resolve_movie_destination,
    resolve_subtitle_destination,
    resolve_tv_destination_directory,
)
from .batch import (
    copy_movie_single,
    copy_tv_season,
    copy_tv_single,
)

__all__ = [
    # Resolution and copy
    "ensure_category_root",
    "resolve_tv_destination_directory",
    "resolve_movie_destination",
    "resolve_subtitle_destination",
    "copy_exactly_once",
    # Handlers
    "copy_movie_single",
    "copy_tv_single",
    "copy_tv_season",
]
