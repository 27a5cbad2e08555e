"""Data types describing files and the actions needed to synchronise them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class FileData:
    """Metadata of one regular file found while scanning a directory.

    ``mod_time`` is the modification time in nanoseconds since the epoch and
    ``permissions`` holds only the permission bits (``0o777`` mask).
    """

    name: str
    checksum: str
    size: int
    mod_time: int
    permissions: int


class SyncActionType(str, Enum):
    """What has to happen to a file for the target to match the source."""

    ADD = "Add"
    MODIFY = "Modify"
    MISSING = "Missing"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SyncAction:
    """A single synchronisation step.

    For ``MODIFY`` actions ``target`` holds the file as it is in the target
    directory; for other actions it is ``None``.
    """

    type: SyncActionType
    source: FileData
    target: Optional[FileData] = None