"""
Category handlers: copy a completed torrent into the Movies or TV library.

Each handler takes the request and the process logger and returns the list of
destinations it copied (or, in dry-run mode, would have copied). Handlers raise
on anything that stops the whole torrent; the season handler is the exception,
isolating failures per episode so one bad file does not hold back the rest.
"""
import dataclasses
from pathlib import Path

from tqdm import tqdm

from torrentproc.errors import TransferError, UnsupportedFileCountError, ValidationError
from torrentproc.models import TransferRequest
from torrentproc.rename import formatter, parser
from torrentproc.utils import CONTENT_TYPE_MOVIES, SEASON_VIDEO_EXTENSION, Logger, file_util
from . import core


def copy_movie_single(request: TransferRequest, logger: Logger) -> list[Path]:
    """
    Copy a movie release into `Movies/`.

    - 1 file: the content path is the video itself, or a folder holding just it.
    - 2 files: the content path is a directory holding the video and, optionally,
      a subtitle.
    - more: not supported yet.
    """
    if request.file_count < 1:
        raise ValidationError(f"no files to copy for movie {request.name}")
    if request.file_count == 1:
        return _copy_movie_file(request, logger)
    if request.file_count == 2:
        return _copy_movie_with_subtitles(request, logger)
    raise UnsupportedFileCountError(
        f"copying {request.file_count} files for a single movie is not yet supported"
    )


def _copy_movie_file(request: TransferRequest, logger: Logger) -> list[Path]:
    """Copy a one-file release; the content path is the video or a folder holding only it."""
    content = Path(request.content_path)
    files = list(file_util.walk_files(content))
    if len(files) != 1:
        raise ValidationError(f"expected exactly one file in {content}, found {len(files)}")

    source = files[0]
    movie_name = parser.parse_movie_name(request.name, logger)
    core.ensure_category_root(request.output_path, CONTENT_TYPE_MOVIES, request.dry_run, logger)
    destination = core.resolve_movie_destination(movie_name, request.output_path, source.suffix)
    return [core.copy_exactly_once(source, destination, request.dry_run, logger)]


def _copy_movie_with_subtitles(request: TransferRequest, logger: Logger) -> list[Path]:
    """
    Copy the single video of a release plus its subtitles.

    Only the first subtitle of each extension is kept; the release is assumed to
    ship English subtitles, so they are tagged `.en`.
    """
    content = Path(request.content_path)
    files = list(file_util.walk_files(content))
    subtitles = [f for f in files if file_util.is_subtitle_file(f)]
    videos = [f for f in files if not file_util.is_subtitle_file(f)]

    if not videos:
        raise ValidationError(f"no video files found in {content}")
    if len(videos) > 1:
        names = ", ".join(v.name for v in videos)
        raise UnsupportedFileCountError(f"found {len(videos)} video files but can only handle one: {names}")

    movie_name = parser.parse_movie_name(request.name, logger)
    core.ensure_category_root(request.output_path, CONTENT_TYPE_MOVIES, request.dry_run, logger)

    video = videos[0]
    destination = core.resolve_movie_destination(movie_name, request.output_path, video.suffix)
    copied = [core.copy_exactly_once(video, destination, request.dry_run, logger)]

    processed = set()
    for subtitle in subtitles:
        ext = subtitle.suffix.lower()
        if ext in processed:
            logger.warn("transfer.subtitle.skip", subtitle=subtitle, reason=f"already copied a {ext} subtitle")
            continue
        processed.add(ext)
        destination = core.resolve_subtitle_destination(movie_name, request.output_path, subtitle.suffix)
        copied.append(core.copy_exactly_once(subtitle, destination, request.dry_run, logger))

    return copied


def copy_tv_single(request: TransferRequest, logger: Logger) -> list[Path]:
    """Copy a single episode to `TV/<Show>/<Show> SxxEyy<ext>`."""
    if request.file_count > 1:
        logger.error(
            "transfer.tv_single.skip",
            name=request.name,
            file_count=request.file_count,
            reason="a single episode must be exactly one file",
        )
        return []

    source = Path(request.content_path)
    identity = parser.parse_tv_name(request.name)
    directory, identity = core.resolve_tv_destination_directory(
        identity, request.output_path, request.dry_run, logger
    )
    destination = directory / formatter.build_episode_filename(identity, source.suffix)
    return [core.copy_exactly_once(source, destination, request.dry_run, logger)]


def copy_tv_season(request: TransferRequest, logger: Logger) -> list[Path]:
    """
    Copy every episode of a season pack into `TV/<Show>/`.

    The show and season come from the torrent name; each `.mkv` directly inside
    the content directory is parsed for its episode number only, so files named
    just "S02E05.mkv" are fine. A file that fails to parse or copy is logged
    and skipped, the remaining episodes are still copied.
    """
    if request.file_count < 2:
        logger.error(
            "transfer.tv_season.skip",
            name=request.name,
            file_count=request.file_count,
            reason="a season pack needs at least 2 files",
        )
        return []

    season = parser.parse_season_name(request.name)
    directory, season = core.resolve_tv_destination_directory(
        season, request.output_path, request.dry_run, logger
    )

    content = Path(request.content_path)
    episodes = sorted(
        p for p in content.iterdir() if p.is_file() and p.suffix.lower() == SEASON_VIDEO_EXTENSION
    )

    copied = []
    failed = 0
    for episode_file in tqdm(episodes, desc="Copying episodes", disable=None):
        try:
            episode = dataclasses.replace(season, episode=parser.parse_episode_number(episode_file.name))
            destination = directory / formatter.build_episode_filename(episode, episode_file.suffix)
            copied.append(core.copy_exactly_once(episode_file, destination, request.dry_run, logger))
        except (TransferError, OSError) as e:
            failed += 1
            logger.error("transfer.episode.fail", file=episode_file.name, error=str(e))

    logger.info("transfer.season.summary", show=season.name, season=season.season,
                copied=len(copied), failed=failed)
    return copied
