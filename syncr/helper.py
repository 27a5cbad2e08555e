"""Filesystem helpers: directory checks and file metadata collection."""

from __future__ import annotations

import hashlib
import os
import stat
from pathlib import Path
from typing import Iterator, List, Union

from .models import FileData

PathLike = Union[str, "os.PathLike[str]"]

_PERM_CHECK_NAME = ".perm_check.tmp"
_CHUNK_SIZE = 1 << 16


def is_directory(path: PathLike) -> bool:
    """Return True if ``path`` exists and is a directory."""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False


def is_directory_writable(directory: PathLike) -> bool:
    """Return True if a file can be created inside ``directory``."""
    probe = Path(directory) / _PERM_CHECK_NAME
    try:
        with open(probe, "wb"):
            pass
    except OSError:
        return False
    try:
        probe.unlink()
    except OSError:
        pass
    return True


def _regular_files(root: str) -> Iterator[str]:
    """Yield paths of regular files below ``root`` in lexical order.

    Symbolic links are neither followed nor reported.
    """
    root_mode = os.lstat(root).st_mode
    if stat.S_ISREG(root_mode):
        yield root
        return
    if not stat.S_ISDIR(root_mode):
        return
    with os.scandir(root) as scanner:
        entries = sorted(scanner, key=lambda entry: entry.name)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from _regular_files(entry.path)
        elif entry.is_file(follow_symlinks=False):
            yield entry.path


def _sha256_of(path: str) -> str:
    digest = hashlib.sha256()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def collect_file_data(directory: PathLike) -> List[FileData]:
    """Scan ``directory`` recursively and describe every regular file in it.

    Files are identified by their base name. Raises ``OSError`` if the
    directory or one of its files cannot be read.
    """
    files: List[FileData] = []
    for path in _regular_files(os.fspath(directory)):
        try:
            info = os.stat(path)
        except OSError as exc:
            raise OSError(f"cannot stat file {path}: {exc}") from exc
        try:
            checksum = _sha256_of(path)
        except OSError as exc:
            raise OSError(f"cannot read file {path}: {exc}") from exc
        files.append(
            FileData(
                name=os.path.basename(path),
                checksum=checksum,
                size=info.st_size,
                mod_time=info.st_mtime_ns,
                permissions=stat.S_IMODE(info.st_mode) & 0o777,
            )
        )
    return files