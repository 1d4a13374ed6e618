"""
Filesystem and text helpers shared by the parser, the resolver and the CLI.
"""
import os
import re
from pathlib import Path
from typing import Iterator, Sequence

from tqdm import tqdm

from .constants import SUBTITLE_EXTENSIONS


def normalize_text(text: str) -> str:
    """Normalize text by replacing separators with spaces and collapsing whitespace."""
    text = text.replace("_", " ").replace(".", " ")
    return re.sub(r"\s+", " ", text).strip()


def format_size(num_bytes: int) -> str:
    """Human readable byte count, e.g. 4973007 -> '4.74MB'."""
    return tqdm.format_sizeof(num_bytes, "B", 1024)


def is_subtitle_file(path: str | Path) -> bool:
    """Check the file's own extension against the known subtitle extensions."""
    return Path(path).suffix.lower() in SUBTITLE_EXTENSIONS


def find_directory_ignore_case(parent: Path, name: str) -> Path | None:
    """
    Find a directory under `parent` whose name matches `name` ignoring case.

    The listing is done explicitly instead of relying on the filesystem's own
    case handling, so the on-disk spelling is returned on case-sensitive and
    case-insensitive filesystems alike. An exact match wins over a case-folded one.
    """
    if not parent.is_dir():
        return None
    wanted = name.casefold()
    match = None
    for entry in sorted(parent.iterdir()):
        if not entry.is_dir():
            continue
        if entry.name == name:
            return entry
        if match is None and entry.name.casefold() == wanted:
            match = entry
    return match


def walk_files(root: Path) -> Iterator[Path]:
    """Yield every file below `root` (or `root` itself when it is a file), sorted."""
    if root.is_file():
        yield root
        return
    for dirpath, dir_names, file_names in os.walk(root):
        dir_names.sort()
        for file_name in sorted(file_names):
            yield Path(dirpath) / file_name


def quote_command(argv: Sequence[str]) -> str:
    """Quote every argument so the command line can be pasted back into a shell."""
    parts = []
    for arg in argv:
        escaped = str(arg).replace('"', '\\"')
        parts.append(f'"{escaped}"')
    return " ".join(parts)
