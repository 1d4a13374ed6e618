"""
Destination resolution and the exclusive copy primitive.

This module decides where a file goes in the library and performs the copy
itself. Every copy goes through `copy_exactly_once`, which never overwrites:
the destination is checked just before the write and then created with
exclusive-create semantics, so a file appearing in between still fails the copy
instead of being clobbered.

Functions:
- ensure_category_root: The Movies/TV directory under the output path.
- resolve_tv_destination_directory: The show directory, reconciled with the casing on disk.
- resolve_movie_destination: The full path of a movie file.
- resolve_subtitle_destination: The full path of a subtitle next to its movie.
- copy_exactly_once: Copy one file, refusing to overwrite.
"""
import dataclasses
import os
from pathlib import Path

from tqdm import tqdm

from torrentproc.errors import DestinationCollisionError, MissingSourceError
from torrentproc.models import TvIdentity
from torrentproc.rename import formatter
from torrentproc.utils import CONTENT_TYPE_MOVIES, CONTENT_TYPE_TV, Logger, file_util
from torrentproc.utils.constants import COPY_CHUNK_SIZE


def _clean(path: Path) -> Path:
    return Path(os.path.normpath(path))


def ensure_category_root(output_path: Path, subdir: str, dry_run: bool, logger: Logger) -> Path:
    """Return `output_path/subdir`, creating it (with parents) when missing unless dry-running."""
    root = _clean(Path(output_path) / subdir)
    if not root.is_dir():
        logger.info("resolve.root.create", directory=root)
        if not dry_run:
            root.mkdir(parents=True, exist_ok=True)
    return root


def resolve_tv_destination_directory(
        identity: TvIdentity, output_path: Path, dry_run: bool, logger: Logger
) -> tuple[Path, TvIdentity]:
    """
    Find or create the directory of a show.

    The TV directory is listed explicitly and compared ignoring case, so a show
    that already has a folder spelled differently ("Show name" vs "Show Name")
    reuses it. In that case the returned identity carries the on-disk spelling,
    keeping episode file names consistent with their folder across runs.

    Parameters:
    - identity (TvIdentity): Parsed show identity.
    - output_path (Path): Library root.
    - dry_run (bool): Log the directory creation without performing it.
    - logger (Logger): Process logger.

    Returns:
    Tuple[Path, TvIdentity]:
    - directory (Path): The show directory.
    - identity (TvIdentity): `identity` with its name matching the directory.
    """
    tv_root = ensure_category_root(output_path, CONTENT_TYPE_TV, dry_run, logger)

    existing = file_util.find_directory_ignore_case(tv_root, identity.name)
    if existing is not None:
        if existing.name != identity.name:
            logger.info("resolve.tv.case", requested=identity.name, existing=existing.name)
        return _clean(existing), dataclasses.replace(identity, name=existing.name)

    directory = _clean(tv_root / identity.name)
    logger.info("resolve.tv.create", directory=directory)
    if not dry_run:
        directory.mkdir()
    return directory, identity


def resolve_movie_destination(movie_name: str, output_path: Path, ext: str) -> Path:
    """`output_path/Movies/<movie_name><ext>`."""
    return _clean(Path(output_path) / CONTENT_TYPE_MOVIES / formatter.build_movie_filename(movie_name, ext))


def resolve_subtitle_destination(movie_name: str, output_path: Path, ext: str) -> Path:
    """`output_path/Movies/<movie_name>.en<ext>`."""
    return _clean(Path(output_path) / CONTENT_TYPE_MOVIES / formatter.build_subtitle_filename(movie_name, ext))


def copy_exactly_once(source: Path, destination: Path, dry_run: bool, logger: Logger) -> Path:
    """
    Copy `source` to `destination` byte for byte, never overwriting.

    Raises:
        MissingSourceError: `source` does not exist.
        DestinationCollisionError: `destination` exists, or appears while copying.
    """
    source = Path(source)
    destination = Path(destination)

    if not source.exists():
        raise MissingSourceError(f"source doesn't exist: {source}")
    if destination.exists():
        raise DestinationCollisionError(f"destination already exists: {destination}")

    size = source.stat().st_size
    logger.info("transfer.copy", source=source, destination=destination, size=file_util.format_size(size))

    if dry_run:
        return destination

    with open(source, "rb") as src:
        try:
            dst = open(destination, "xb")
        except FileExistsError as e:
            raise DestinationCollisionError(f"destination already exists: {destination}") from e

        try:
            with dst, tqdm(
                    total=size, unit="B", unit_scale=True, unit_divisor=1024,
                    desc=destination.name, leave=False, disable=None,
            ) as progress:
                while True:
                    chunk = src.read(COPY_CHUNK_SIZE)
                    if not chunk:
                        break
                    dst.write(chunk)
                    progress.update(len(chunk))
        except BaseException:
            # Only the file created above is removed, never a pre-existing one
            destination.unlink(missing_ok=True)
            raise

    return destination
