from pathlib import Path

import pytest

from torrentproc.errors import DestinationCollisionError, MissingSourceError
from torrentproc.models import TvIdentity
from torrentproc.transfer import core


def test_copy_exactly_once_copies_bytes(tmp_path, logger, write_file):
    source = write_file(tmp_path / "src.mkv", b"\x00\x01" * 4096)
    destination = tmp_path / "dst.mkv"

    assert core.copy_exactly_once(source, destination, False, logger) == destination
    assert destination.read_bytes() == source.read_bytes()


def test_copy_refuses_existing_destination(tmp_path, logger, write_file):
    source = write_file(tmp_path / "src.mkv", b"new")
    destination = write_file(tmp_path / "dst.mkv", b"old")

    with pytest.raises(DestinationCollisionError):
        core.copy_exactly_once(source, destination, False, logger)
    assert destination.read_bytes() == b"old"


def test_copy_refuses_destination_created_after_the_check(tmp_path, logger, write_file, monkeypatch):
    source = write_file(tmp_path / "src.mkv", b"new")
    destination = write_file(tmp_path / "dst.mkv", b"old")

    # Pretend the destination only appears once the existence check has passed
    real_exists = Path.exists
    monkeypatch.setattr(
        Path, "exists", lambda self, *a, **kw: False if self == destination else real_exists(self, *a, **kw)
    )

    with pytest.raises(DestinationCollisionError):
        core.copy_exactly_once(source, destination, False, logger)
    assert destination.read_bytes() == b"old"


def test_copy_missing_source(tmp_path, logger):
    with pytest.raises(MissingSourceError):
        core.copy_exactly_once(tmp_path / "nope.mkv", tmp_path / "dst.mkv", False, logger)


def test_copy_dry_run_touches_nothing(tmp_path, logger, write_file, events):
    source = write_file(tmp_path / "src.mkv")
    destination = tmp_path / "dst.mkv"

    assert core.copy_exactly_once(source, destination, True, logger) == destination
    assert not destination.exists()
    assert [e[1] for e in events()] == ["transfer.copy"]


def test_copy_dry_run_still_detects_collisions(tmp_path, logger, write_file):
    source = write_file(tmp_path / "src.mkv")
    destination = write_file(tmp_path / "dst.mkv")

    with pytest.raises(DestinationCollisionError):
        core.copy_exactly_once(source, destination, True, logger)


def test_resolve_tv_directory_creates_show_folder(library, logger, events):
    directory, identity = core.resolve_tv_destination_directory(
        TvIdentity("Show Name", "01", "02"), library, False, logger
    )

    assert directory == library / "TV" / "Show Name"
    assert directory.is_dir()
    assert identity.name == "Show Name"
    assert "resolve.tv.create" in [e[1] for e in events()]


def test_resolve_tv_directory_reuses_differently_cased_folder(library, logger):
    (library / "TV" / "show NAME").mkdir(parents=True)

    directory, identity = core.resolve_tv_destination_directory(
        TvIdentity("Show Name", "01", "02"), library, False, logger
    )

    assert directory == library / "TV" / "show NAME"
    assert identity == TvIdentity("show NAME", "01", "02")
    assert sorted(p.name for p in (library / "TV").iterdir()) == ["show NAME"]


def test_resolve_tv_directory_dry_run(library, logger):
    directory, _ = core.resolve_tv_destination_directory(TvIdentity("Show Name", "01"), library, True, logger)

    assert directory == library / "TV" / "Show Name"
    assert not (library / "TV").exists()


def test_resolve_movie_and_subtitle_destinations(library):
    assert core.resolve_movie_destination("The Thing (1982)", library, ".mkv") == (
        library / "Movies" / "The Thing (1982).mkv"
    )
    assert core.resolve_subtitle_destination("The Thing (1982)", library, ".srt") == (
        library / "Movies" / "The Thing (1982).en.srt"
    )
