"""
Module for parsing release names, extracting the show or movie title along with
season, episode and year components, and normalizing titles for use as
folder and file names.

The `match_*` functions are pure: they return the raw components, or Nones
when the name does not match. The `parse_*` functions build on them and either
raise `ParseError` (TV, where there is no sensible fallback) or fall back to a
cleaned-up file name (movies).
"""

import os
import re
from pathlib import Path

from torrentproc.errors import ParseError
from torrentproc.models import TvIdentity
from torrentproc.utils import MOVIE_YEAR_REGEX, TV_EPISODE_REGEX, TV_SEASON_REGEX, Logger, file_util


def proper_case(text: str) -> str:
    """Upper-case the first letter of every whitespace-delimited word."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


def normalize_title(text: str) -> str:
    """
    Turn the raw title part of a release name into a display title.
    Examples:
      "Show.Name." -> "Show Name"
      "the_office - " -> "The Office"
      "The.Thing.(" -> "The Thing"
    """
    s = file_util.normalize_text(text)
    # Drop separators left dangling in front of the season/year token
    s = re.sub(r"[\s\-_(\[]+$", "", s).lstrip(" -_")
    return proper_case(s)


def _pad(number: str) -> str:
    return f"{int(number):02d}"


def match_tv_episode(name: str) -> tuple[str | None, str | None, str | None]:
    """Extract (title, season, episode) from a name, or (None, None, None)."""
    match = TV_EPISODE_REGEX.search(name)
    if match:
        title = normalize_title(match.group(1))
        if title:
            return title, _pad(match.group(2)), _pad(match.group(3))
    return None, None, None


def match_episode_number(name: str) -> str | None:
    """Extract just the episode number, also from names with no title before `SxxEyy`."""
    match = TV_EPISODE_REGEX.search(name)
    if match:
        return _pad(match.group(3))
    return None


def match_tv_season(name: str) -> tuple[str | None, str | None]:
    """Extract (title, season) from a name, or (None, None)."""
    match = TV_SEASON_REGEX.search(name)
    if match:
        title = normalize_title(match.group(1))
        if title:
            return title, _pad(match.group(2))
    return None, None


def match_movie_name(name: str) -> tuple[str | None, str | None]:
    """Extract (title, year) from a name, or (None, None)."""
    match = MOVIE_YEAR_REGEX.search(name)
    if match:
        title = normalize_title(match.group(1))
        if title:
            return title, match.group(2)
    return None, None


def parse_tv_name(name: str) -> TvIdentity:
    """
    Parse a single episode release name.

    "Show.Name.S01E02.mkv" -> TvIdentity("Show Name", "01", "02")
    """
    title, season, episode = match_tv_episode(name)
    if title is None:
        raise ParseError(f"failed to extract TV name/season/episode from name {name}")
    return TvIdentity(name=title, season=season, episode=episode)


def parse_episode_number(name: str) -> str:
    """
    Parse the episode number of a file inside a season pack.

    The show and season come from the pack, so files named only "S02E05.mkv"
    are accepted here.
    """
    episode = match_episode_number(name)
    if episode is None:
        raise ParseError(f"failed to extract episode number from name {name}")
    return episode


def parse_season_name(name: str) -> TvIdentity:
    """
    Parse a season pack release name; the episode is left as None.

    "Show.Name.S02.1080p" -> TvIdentity("Show Name", "02")
    """
    title, season = match_tv_season(name)
    if title is None:
        raise ParseError(f"failed to extract TV name/season from name {name}")
    return TvIdentity(name=title, season=season)


def parse_movie_name(name: str, logger: Logger) -> str:
    """
    Build the library name of a movie: "The.Thing.1982.mkv" -> "The Thing (1982)".

    When no year can be found the base name is used instead, with the extension
    stripped and separators collapsed to single spaces. That fallback is logged
    as a warning and never raises.
    """
    title, year = match_movie_name(name)
    if title is not None:
        return f"{title} ({year})"

    fallback = file_util.normalize_text(os.path.splitext(Path(name).name)[0])
    logger.warn("rename.movie.fallback", name=name, fallback=fallback)
    return fallback
