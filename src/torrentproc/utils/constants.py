"""
Constants and configuration settings for torrent processing.

This module contains the constants used to organize completed downloads: the
library subdirectories, the extensions used to classify subtitle and video
files, the regular expressions used to parse release names, and the logging
settings. Values that differ between installs are read from the environment
(and from a `.env` file, when present).
"""

import os
import re
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Library subdirectories under the output path
CONTENT_TYPE_MOVIES = "Movies"
CONTENT_TYPE_TV = "TV"

# Extension lists
SUBTITLE_EXTENSIONS = {".srt", ".smi", ".ssa", ".ass", ".vtt"}
SEASON_VIDEO_EXTENSION = ".mkv"
SUBTITLE_LANGUAGE = "en"

# Regex patterns for release name parsing
TV_EPISODE_REGEX = re.compile(r"^(.*?)S(\d+)\.?E(\d+)", re.IGNORECASE)
TV_SEASON_REGEX = re.compile(r"^(.*?)S(\d+)", re.IGNORECASE)
MOVIE_YEAR_REGEX = re.compile(r"^(.+?)\b(\d{4})\b")

# Copy settings
COPY_CHUNK_SIZE = 1024 * 1024

# Logging settings
LOG_DIR = Path(os.getenv("TORRENTPROC_LOG_DIR", Path(__file__).resolve().parent.parent / "logs"))
LOG_FILE_NAME = "torrentproc-{command}.log"
DEFAULT_LOG_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 10
# Raw environment values, checked by the CLI
LOG_LEVEL = os.getenv("TORRENTPROC_LOG_LEVEL", "INFO").upper()
LOG_MAX_BYTES = os.getenv("TORRENTPROC_LOG_MAX_BYTES", str(DEFAULT_LOG_MAX_BYTES))
LOG_BACKUP_COUNT = os.getenv("TORRENTPROC_LOG_BACKUPS", str(DEFAULT_LOG_BACKUP_COUNT))
