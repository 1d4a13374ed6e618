"""
Routes a completed torrent to the handler for its category.

`Processor.process` validates the request and dispatches it; `Processor.run`
wraps that in the error boundary used by the CLI, logging any failure together
with the original command line so the copy can be retried by hand.
"""
from pathlib import Path
from typing import Sequence

from torrentproc.errors import MissingSourceError, TransferError, ValidationError
from torrentproc.models import Category, TransferRequest
from torrentproc.transfer import copy_movie_single, copy_tv_season, copy_tv_single
from torrentproc.utils import Logger, file_util

_HANDLERS = {
    Category.MOVIE_SINGLE: copy_movie_single,
    Category.TV_SINGLE: copy_tv_single,
    Category.TV_SEASON: copy_tv_season,
}


class Processor:
    """Dispatches transfer requests to the category handlers."""

    def __init__(self, logger: Logger):
        self.logger = logger

    def process(self, request: TransferRequest) -> list[Path]:
        """
        Validate a request and run the handler for its category.

        Returns:
            The destinations copied (or, in dry-run mode, that would have been).

        Raises:
            ValidationError: The request has no files.
            MissingSourceError: The content path does not exist.
            UnhandledCategoryError: The category is unknown.
            TransferError: Whatever the handler raises.
        """
        self.logger.info(
            "transfer.start",
            name=request.name,
            category=str(request.category),
            content_path=str(request.content_path),
            root_path=str(request.root_path),
            save_path=str(request.save_path),
            file_count=request.file_count,
            size=file_util.format_size(request.size_bytes),
            tracker=request.tracker,
            info_hash=request.info_hash,
            output_path=str(request.output_path),
            dry_run=request.dry_run,
        )

        if request.file_count <= 0:
            raise ValidationError(f"no files: file count is {request.file_count}")
        if not Path(request.content_path).exists():
            raise MissingSourceError(f"content path doesn't exist: {request.content_path}")

        category = Category.parse(request.category)
        if category is Category.IGNORE:
            self.logger.info("transfer.ignore", name=request.name)
            return []

        return _HANDLERS[category](request, self.logger)

    def run(self, request: TransferRequest, argv: Sequence[str]) -> int:
        """
        Process a request without letting handler errors escape.

        Args:
            request: The transfer to perform.
            argv: The original command line, logged verbatim on failure.

        Returns:
            Exit status: 0 on success, 1 when the transfer failed.
        """
        try:
            copied = self.process(request)
        except (TransferError, OSError) as e:
            self.logger.error(
                "transfer.fail",
                name=request.name,
                error=str(e),
                error_type=type(e).__name__,
                retry=file_util.quote_command(argv),
            )
            return 1

        self.logger.info("transfer.done", name=request.name, copied=len(copied), dry_run=request.dry_run)
        return 0
