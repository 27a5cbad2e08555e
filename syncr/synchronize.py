"""Comparison of directory listings and execution of sync actions."""

from __future__ import annotations

import logging
import os
import shutil
import stat
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Dict, Iterable, List, Sequence

from .models import FileData, SyncAction, SyncActionType

logger = logging.getLogger(__name__)

_PROGRESS_INTERVAL = 0.2


def _differs(a: FileData, b: FileData) -> bool:
    return (
        a.checksum != b.checksum
        or a.size != b.size
        or a.mod_time != b.mod_time
        or a.permissions != b.permissions
    )


def compare_file_data(
    source: Iterable[FileData], target: Iterable[FileData]
) -> List[SyncAction]:
    """Work out the actions that make ``target`` match ``source``."""
    by_name_source: Dict[str, FileData] = {f.name: f for f in source}
    by_name_target: Dict[str, FileData] = {f.name: f for f in target}

    actions: List[SyncAction] = []
    for name, file_source in by_name_source.items():
        file_target = by_name_target.get(name)
        if file_target is None:
            actions.append(SyncAction(SyncActionType.ADD, file_source))
        elif _differs(file_source, file_target):
            actions.append(SyncAction(SyncActionType.MODIFY, file_source, file_target))

    actions.extend(
        SyncAction(SyncActionType.MISSING, file_target)
        for name, file_target in by_name_target.items()
        if name not in by_name_source
    )
    return actions


def is_sync_required(delete_missing: bool, actions: Iterable[SyncAction]) -> bool:
    """Return True if any action would change the target directory."""
    return any(
        action.type in (SyncActionType.ADD, SyncActionType.MODIFY)
        or (action.type is SyncActionType.MISSING and delete_missing)
        for action in actions
    )


def _format_time(ns: int) -> str:
    return datetime.fromtimestamp(ns / 1_000_000_000).astimezone().isoformat()


def _format_mode(perm: int) -> str:
    return "-" + stat.filemode(perm)[1:]


def explain_sync_actions(actions: Iterable[SyncAction]) -> None:
    """Print a human-readable description of ``actions`` to stdout."""
    print("=== Differences ===")
    for action in actions:
        src = action.source
        if action.type is SyncActionType.ADD:
            print(f"Add: {src.name}")
        elif action.type is SyncActionType.MODIFY:
            print(f"Modify: {src.name}")
            dst = action.target
            if dst is None:
                continue
            if src.checksum != dst.checksum:
                print(f"  - Old checksum: {src.checksum}\n  - New checksum: {dst.checksum}")
            if src.size != dst.size:
                print(f"  - Size changed: {src.size} → {dst.size}")
            if src.mod_time != dst.mod_time:
                print(
                    "  - Modified time changed: "
                    f"{_format_time(src.mod_time)} → {_format_time(dst.mod_time)}"
                )
            if src.permissions != dst.permissions:
                print(
                    "  - Permissions changed: "
                    f"{_format_mode(src.permissions)} → {_format_mode(dst.permissions)}"
                )
        elif action.type is SyncActionType.MISSING:
            print(f"Missing: {src.name}")


def _copy_with_metadata(src: str, dst: str) -> None:
    info = os.stat(src)
    shutil.copyfile(src, dst)
    os.chmod(dst, stat.S_IMODE(info.st_mode))
    os.utime(dst, ns=(info.st_mtime_ns, info.st_mtime_ns))


def optimal_worker_count() -> int:
    """Number of worker threads: the CPU count clamped to the range 2..8."""
    return max(2, min(8, os.cpu_count() or 1))


def sync_files(
    actions: Sequence[SyncAction],
    source_root: str,
    target_root: str,
    delete_missing: bool,
) -> None:
    """Carry out ``actions`` in parallel, printing progress as it goes.

    Failures of individual files are logged and do not stop the others.
    """
    total = len(actions)
    completed = 0
    lock = threading.Lock()
    done = threading.Event()

    def report() -> None:
        while not done.wait(_PROGRESS_INTERVAL):
            with lock:
                count = completed
            percent = count / total * 100 if total else 100.0
            sys.stdout.write(f"\rProgress: {percent:.2f}% ({count}/{total})")
            sys.stdout.flush()
        sys.stdout.write(f"\rProgress: 100.00% ({total}/{total})\n")
        sys.stdout.flush()

    def apply(action: SyncAction) -> None:
        nonlocal completed
        name = action.source.name
        if action.type in (SyncActionType.ADD, SyncActionType.MODIFY):
            src_path = os.path.join(source_root, name)
            dst_path = os.path.join(target_root, name)
            try:
                _copy_with_metadata(src_path, dst_path)
            except OSError as exc:
                logger.error("\nERROR copying %s: %s", src_path, exc)
        elif action.type is SyncActionType.MISSING and delete_missing:
            target_path = os.path.join(target_root, name)
            try:
                os.remove(target_path)
            except OSError as exc:
                logger.error("\nERROR deleting %s: %s", target_path, exc)
        with lock:
            completed += 1

    progress = threading.Thread(target=report, daemon=True)
    progress.start()
    try:
        with ThreadPoolExecutor(max_workers=optimal_worker_count()) as pool:
            for _ in pool.map(apply, actions):
                pass
    finally:
        done.set()
        progress.join()