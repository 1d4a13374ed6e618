"""
Data types describing a completed torrent and the identities parsed from it.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from torrentproc.errors import UnhandledCategoryError


class Category(Enum):
    """Category assigned to a torrent by the client; selects the handler."""
    MOVIE_SINGLE = "MovieSingle"
    TV_SINGLE = "TvSingle"
    TV_SEASON = "TvSeason"
    IGNORE = "Ignore"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "str | Category") -> "Category":
        """Match a category name case-insensitively."""
        if isinstance(value, cls):
            return value
        for category in cls:
            if category.value.lower() == str(value).strip().lower():
                return category
        raise UnhandledCategoryError(f"unhandled category {value!r}")


@dataclass(frozen=True)
class TransferRequest:
    """Everything known about a completed torrent, as handed over by the client."""
    name: str
    category: Category | str
    content_path: Path
    root_path: Path
    save_path: Path
    file_count: int
    size_bytes: int
    tracker: str
    info_hash: str
    output_path: Path
    dry_run: bool = False


@dataclass(frozen=True)
class TvIdentity:
    name: str
    season: str
    episode: str | None = None

