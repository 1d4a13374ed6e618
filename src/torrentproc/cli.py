#!/usr/bin/env python3
"""
torrentproc: organize completed torrent downloads into a media library.

Meant to be called by the torrent client when a download finishes, e.g. with
qBittorrent's "Run external program on torrent finished":

    torrentproc copy --OutputPath=M:/ -N="%N" -L="%L" -F="%F" -R="%R" -D="%D"
        -C=%C -Z=%Z -T="%T" -I="%I"
"""

import argparse
import sys
from pathlib import Path

import torrentproc
from torrentproc.models import TransferRequest
from torrentproc.processor import Processor
from torrentproc.utils import LOG_DIR, LOG_LEVEL, LogLevel, setup_logging
from torrentproc.utils.constants import LOG_BACKUP_COUNT, LOG_MAX_BYTES


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _env_int(parser: argparse.ArgumentParser, variable: str, value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        parser.error(f"${variable} must be an integer, got {value!r}")
    if number < 0:
        parser.error(f"${variable} must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="torrentproc",
        description="Organize completed torrent downloads into a Movies/TV library",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
 Examples:
  %(prog)s copy -N "The.Thing.1982.mkv" -L MovieSingle -F /dl/The.Thing.1982.mkv -R /dl -D /dl \\
      -C 1 -Z 1234 -T https://tracker/announce -I abc123 -O /library
  %(prog)s copy ... --practice               # Log what would be copied, touch nothing
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {torrentproc.__version__}")
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=LOG_DIR,
        help=f"Directory for log files (default: {LOG_DIR} or $TORRENTPROC_LOG_DIR)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARN", "ERROR"],
        default=LOG_LEVEL,
        help="Logging level (default: INFO or $TORRENTPROC_LOG_LEVEL)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    copy = subparsers.add_parser("copy", help="Copy completed files into the library")
    copy.add_argument("-N", "--name", required=True, help="Torrent name")
    copy.add_argument("-L", "--category", required=True, help="Category: MovieSingle, TvSingle, TvSeason or Ignore")
    copy.add_argument("-F", "--content-path", required=True, type=Path,
                      help="Content path (same as root path for multi-file torrents)")
    copy.add_argument("-R", "--root-path", required=True, type=Path,
                      help="Root path (first torrent subdirectory path)")
    copy.add_argument("-D", "--save-path", required=True, type=Path, help="Save path")
    copy.add_argument("-C", "--file-count", required=True, type=_non_negative_int, help="Number of files")
    copy.add_argument("-Z", "--size", required=True, type=_non_negative_int, help="Torrent size (bytes)")
    copy.add_argument("-T", "--tracker", required=True, help="Current tracker")
    copy.add_argument("-I", "--info-hash", required=True, help="Info hash")
    copy.add_argument("-O", "--output-path", "--OutputPath", required=True, type=Path,
                      help="Library root; files go under Movies/ and TV/")
    copy.add_argument("-P", "--practice", "--dry-run", dest="practice", action="store_true",
                      help="Log what would be copied without touching the disk")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args_list = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()
    args = parser.parse_args(args_list)

    # argparse does not check defaults against choices
    try:
        log_level = LogLevel.from_name(args.log_level)
    except KeyError:
        parser.error(f"invalid log level {args.log_level!r} (check $TORRENTPROC_LOG_LEVEL)")
    max_bytes = _env_int(parser, "TORRENTPROC_LOG_MAX_BYTES", LOG_MAX_BYTES)
    backup_count = _env_int(parser, "TORRENTPROC_LOG_BACKUPS", LOG_BACKUP_COUNT)

    logger = setup_logging(
        command=args.command,
        log_level=log_level,
        log_dir=args.log_dir,
        enable_console=True,
        max_bytes=max_bytes,
        backup_count=backup_count,
    )

    request = TransferRequest(
        name=args.name,
        category=args.category,
        content_path=args.content_path,
        root_path=args.root_path,
        save_path=args.save_path,
        file_count=args.file_count,
        size_bytes=args.size,
        tracker=args.tracker,
        info_hash=args.info_hash,
        output_path=args.output_path,
        dry_run=args.practice,
    )
    return Processor(logger).run(request, [sys.argv[0], *args_list])


if __name__ == "__main__":
    sys.exit(main())
