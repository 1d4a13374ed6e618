"""
Organize completed torrent downloads into a structured media library.

Given the metadata a torrent client hands over when a download finishes (name,
category, content path, file count, ...), the package works out whether the
content is a movie, a single TV episode or a TV season, derives the library
name of each file and copies it into place without ever overwriting.

The package is organized into:
- rename: Release name parsing and library file naming.
- transfer: Destination resolution, the exclusive copy and the category handlers.
- processor: Validation and routing of a request to its handler.
- cli: The `torrentproc copy` command.
- utils: Constants, filesystem helpers and the structured logger.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
