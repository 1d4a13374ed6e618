"""Exceptions raised while organizing a completed torrent."""


class TransferError(Exception):
    """Base exception for everything that stops a transfer."""

    pass


class ValidationError(TransferError):
    """The request itself is unusable (e.g. it claims to have no files)."""

    pass


class MissingSourceError(TransferError):
    """The content path, or a file inside it, does not exist."""

    pass


class DestinationCollisionError(TransferError):
    """The destination already exists; nothing is ever overwritten."""

    pass


class ParseError(TransferError):
    """A release name does not match the expected pattern."""

    pass


class UnsupportedFileCountError(TransferError):
    """The category/file-count combination has no handler yet."""

    pass


class UnhandledCategoryError(TransferError):
    """The category is not one the processor knows how to route."""

    pass
