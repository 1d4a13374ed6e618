import logging
from pathlib import Path

import pytest

from torrentproc.models import TransferRequest
from torrentproc.utils import Logger


@pytest.fixture(autouse=True)
def _reset_handlers():
    yield
    std_logger = logging.getLogger("torrentproc")
    for handler in list(std_logger.handlers):
        std_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def logger():
    return Logger()


@pytest.fixture
def events(caplog):
    """Return the (level, event, fields) triples logged so far."""
    def _events():
        return [
            (record.levelname, record.getMessage(), getattr(record, "fields", {}))
            for record in caplog.records
            if record.name.startswith("torrentproc")
        ]

    return _events


@pytest.fixture
def library(tmp_path):
    output = tmp_path / "library"
    output.mkdir()
    return output


@pytest.fixture
def downloads(tmp_path):
    data = tmp_path / "downloads"
    data.mkdir()
    return data


@pytest.fixture
def make_request(downloads, library):
    def _make(name, category, content_path, file_count=1, dry_run=False, size_bytes=1024):
        return TransferRequest(
            name=name,
            category=category,
            content_path=Path(content_path),
            root_path=downloads,
            save_path=downloads,
            file_count=file_count,
            size_bytes=size_bytes,
            tracker="https://tracker.example/announce",
            info_hash="6c9b2e9ea8b2857cd58870db45b26c9205d68a82",
            output_path=library,
            dry_run=dry_run,
        )

    return _make


@pytest.fixture
def write_file():
    def _write(path: Path, content: bytes = b"data") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _write
