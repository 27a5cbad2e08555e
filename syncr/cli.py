"""Command-line entry point: one-way synchronisation of two directories."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .helper import collect_file_data, is_directory, is_directory_writable
from .synchronize import (
    compare_file_data,
    explain_sync_actions,
    is_sync_required,
    sync_files,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        usage="%(prog)s [options] <src> <target>",
    )
    parser.add_argument(
        "-delete-missing",
        "--delete-missing",
        dest="delete_missing",
        action="store_true",
        help="Delete Missing files in target directory",
    )
    parser.add_argument("paths", nargs="*", help=argparse.SUPPRESS)
    return parser


def _ask_to_proceed() -> bool:
    try:
        line = input("Do you want to proceed? (Y/n): ")
    except EOFError:
        line = ""
    words = line.split()
    answer = words[0] if words else ""
    return answer in ("Y", "y", "")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the synchroniser and return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if len(args.paths) < 2:
        parser.print_help(sys.stderr)
        return 1

    src, target = args.paths[0], args.paths[1]

    if not is_directory(src):
        print("Source not a directory", file=sys.stderr)
        return 1

    if not is_directory_writable(target):
        print("Target not writeable", file=sys.stderr)
        return 1

    try:
        files_source = collect_file_data(src)
        files_target = collect_file_data(target)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1

    diff = compare_file_data(files_source, files_target)
    if not is_sync_required(args.delete_missing, diff):
        print("No sync required", file=sys.stderr)
        return 0

    explain_sync_actions(diff)

    if not _ask_to_proceed():
        print("Operation canceled.")
        return 0

    sync_files(diff, src, target, args.delete_missing)
    print("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())