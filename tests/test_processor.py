import pytest

from torrentproc.errors import MissingSourceError, UnhandledCategoryError, ValidationError
from torrentproc.models import Category
from torrentproc.processor import Processor

ARGV = ["torrentproc", "copy", "-N=The Thing 1982.mkv", "-C=0"]


@pytest.fixture
def processor(logger):
    return Processor(logger)


def test_routes_movie(downloads, library, processor, make_request, write_file):
    source = write_file(downloads / "The.Thing.1982.mkv")

    copied = processor.process(make_request("The.Thing.1982.mkv", Category.MOVIE_SINGLE, source))

    assert copied == [library / "Movies" / "The Thing (1982).mkv"]


def test_category_names_are_case_insensitive(downloads, library, processor, make_request, write_file):
    source = write_file(downloads / "Show.Name.S01E02.mkv")

    copied = processor.process(make_request("Show.Name.S01E02.mkv", "tvsingle", source))

    assert copied == [library / "TV" / "Show Name" / "Show Name S01E02.mkv"]


def test_zero_files_is_a_validation_error(downloads, processor, make_request, write_file):
    source = write_file(downloads / "The.Thing.1982.mkv")

    with pytest.raises(ValidationError, match="no files"):
        processor.process(make_request("The.Thing.1982.mkv", Category.MOVIE_SINGLE, source, file_count=0))


def test_missing_content_path(downloads, processor, make_request):
    request = make_request("The.Thing.1982.mkv", Category.MOVIE_SINGLE, downloads / "gone.mkv")

    with pytest.raises(MissingSourceError):
        processor.process(request)


def test_unknown_category(downloads, processor, make_request, write_file):
    source = write_file(downloads / "book.epub")

    with pytest.raises(UnhandledCategoryError, match="unhandled category"):
        processor.process(make_request("book.epub", "Manual", source))


def test_ignore_category_copies_nothing(downloads, library, processor, make_request, write_file, events):
    source = write_file(downloads / "The.Thing.1982.mkv")

    assert processor.process(make_request("The.Thing.1982.mkv", Category.IGNORE, source)) == []
    assert list(library.iterdir()) == []
    assert "transfer.ignore" in [e[1] for e in events()]


def test_run_success(downloads, processor, make_request, write_file, events):
    source = write_file(downloads / "The.Thing.1982.mkv")

    assert processor.run(make_request("The.Thing.1982.mkv", Category.MOVIE_SINGLE, source), ARGV) == 0
    assert events()[-1][1] == "transfer.done"


def test_run_logs_failure_with_retry_command(downloads, processor, make_request, write_file, events):
    source = write_file(downloads / "The.Thing.1982.mkv")

    status = processor.run(make_request("The.Thing.1982.mkv", Category.MOVIE_SINGLE, source, file_count=0), ARGV)

    assert status == 1
    level, event, fields = events()[-1]
    assert (level, event) == ("ERROR", "transfer.fail")
    assert fields["error_type"] == "ValidationError"
    assert fields["retry"] == '"torrentproc" "copy" "-N=The Thing 1982.mkv" "-C=0"'


def test_run_collision_keeps_existing_file(downloads, library, processor, make_request, write_file):
    source = write_file(downloads / "The.Thing.1982.mkv", b"new")
    existing = write_file(library / "Movies" / "The Thing (1982).mkv", b"old")

    assert processor.run(make_request("The.Thing.1982.mkv", Category.MOVIE_SINGLE, source), ARGV) == 1
    assert existing.read_bytes() == b"old"


def test_dry_run_changes_nothing(downloads, library, processor, make_request, write_file):
    source = write_file(downloads / "Show.Name.S01E02.mkv")
    request = make_request("Show.Name.S01E02.mkv", Category.TV_SINGLE, source, dry_run=True)

    assert processor.run(request, ARGV) == 0
    assert list(library.iterdir()) == []
