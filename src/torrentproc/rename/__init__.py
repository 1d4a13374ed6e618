"""
Release name parsing and library naming.

Package organization:
- parser: Extract show/movie titles, seasons, episodes and years from release
  names and normalize titles.
- formatter: Build the episode, movie and subtitle file names used in the library.

Behavior notes:
- TV parsing raises `ParseError` when the name does not match; movie parsing
  falls back to the cleaned-up file name and logs a warning instead.
- Seasons and episodes are zero-padded two-digit strings.

Example:
    from torrentproc import rename
    identity = rename.parse_tv_name("Show.Name.S01E02.mkv")
    rename.build_episode_filename(identity, ".mkv")  # "Show Name S01E02.mkv"
"""
# Public parsing functions
from .parser import (
    normalize_title,
    parse_episode_number,
    parse_movie_name,
    parse_season_name,
    parse_tv_name,
)

# Naming
from .formatter import (
    build_episode_filename,
    build_movie_filename,
    build_subtitle_filename,
)

__all__ = [
    # Parsing
    "normalize_title",
    "parse_tv_name",
    "parse_season_name",
    "parse_episode_number",
    "parse_movie_name",
    # Naming
    "build_episode_filename",
    "build_movie_filename",
    "build_subtitle_filename",
]
