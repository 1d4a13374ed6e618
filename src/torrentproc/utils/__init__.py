"""
A module providing constants, utility functions, and logging mechanisms
for torrent processing tasks.

This module includes the constants used to classify and place files, helpers
for normalizing names and inspecting the filesystem, and the structured
logger shared by every component.
"""

from .constants import (
    CONTENT_TYPE_MOVIES,
    CONTENT_TYPE_TV,
    LOG_DIR,
    LOG_LEVEL,
    MOVIE_YEAR_REGEX,
    SEASON_VIDEO_EXTENSION,
    SUBTITLE_EXTENSIONS,
    SUBTITLE_LANGUAGE,
    TV_EPISODE_REGEX,
    TV_SEASON_REGEX,
)
from .logger import LogLevel, Logger, setup_logging

__all__ = [
    "CONTENT_TYPE_MOVIES",
    "CONTENT_TYPE_TV",
    "SUBTITLE_EXTENSIONS",
    "SUBTITLE_LANGUAGE",
    "SEASON_VIDEO_EXTENSION",
    "TV_EPISODE_REGEX",
    "TV_SEASON_REGEX",
    "MOVIE_YEAR_REGEX",
    "LOG_DIR",
    "LOG_LEVEL",
    "LogLevel",
    "Logger",
    "setup_logging",
]
