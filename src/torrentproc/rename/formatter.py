"""
Utilities to build library file names for TV episodes, movies and subtitles.

- "Show Name S01E02.mkv"
- "The Thing (1982).mkv"
- "The Thing (1982).en.srt"

Titles are used verbatim; callers are expected to pass names that already went
through the parser's normalization.
"""
from torrentproc.models import TvIdentity
from torrentproc.utils import SUBTITLE_LANGUAGE


def build_episode_filename(identity: TvIdentity, ext: str) -> str:
    """
    Build the file name of an episode.

    Parameters:
    - identity (TvIdentity): Show name, season and episode. The episode must be set.
    - ext (str): File extension including the dot (e.g. ".mkv").

    Returns:
    - str: e.g. "Show Name S01E02.mkv"
    """
    if identity.episode is None:
        raise ValueError(f"identity for {identity.name} S{identity.season} has no episode")
    return f"{identity.name} S{identity.season}E{identity.episode}{ext}"


def build_movie_filename(movie_name: str, ext: str) -> str:
    return f"{movie_name}{ext}"


def build_subtitle_filename(movie_name: str, ext: str, language: str = SUBTITLE_LANGUAGE) -> str:
    """Subtitles sit next to the video, tagged with their language: "Movie (2000).en.srt"."""
    return f"{movie_name}.{language}{ext}"
