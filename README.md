# syncr

`syncr` brings a target directory in line with a source directory. It walks
both directories recursively, records each regular file's SHA-256 checksum,
size, modification time and permission bits, and reports what differs.
Symbolic links are skipped. Files are matched by their base name only.

## Installation

```
pip install .
```

## Usage

```
syncr [--delete-missing] <src> <target>
```

- `src` must be an existing directory.
- `target` must be a directory in which a file can be created (this is
  checked by creating and removing `.perm_check.tmp` there).
- `--delete-missing` (also accepted as `-delete-missing`) removes files that
  exist in the target but not in the source.

`syncr` first prints the differences it found:

- `Add: name` – the file exists only in the source.
- `Modify: name` – the file exists in both, but its checksum, size,
  modification time or permissions differ. Each changed detail is listed
  below the name.
- `Missing: name` – the file exists only in the target.

If nothing needs to change (no additions or modifications, and no missing
files when `--delete-missing` is off), it prints `No sync required` and exits
with status 0 without asking.

Otherwise it asks `Do you want to proceed? (Y/n):`. The first word of the
answer is checked: `Y`, `y` or an empty answer (including end of input)
starts the copy; anything else prints `Operation canceled.` and exits.

While the copy runs, between 2 and 8 worker threads (the CPU count, clamped)
process files in parallel and a progress line is refreshed every 0.2 seconds.
Copied files receive the source file's permissions and modification time.
A file that fails to copy or delete is logged as an error and the others
carry on. `Done` is printed at the end.

Invalid arguments, an unusable source or target, or a file that cannot be
read during the scan make `syncr` print a message to standard error and exit
with status 1.

## What it does not do

- It does not recreate the directory structure. Each file is copied to
  `<target>/<base name>`, so files from subdirectories of the source land at
  the top of the target, and files with the same base name in different
  subdirectories are treated as one.
- It only copies in one direction, from source to target, and never deletes
  anything unless `--delete-missing` is given.
- It has no dry-run or non-interactive confirmation option; the prompt is
  always shown when a sync is needed.

## Library use

```python
from syncr.helper import collect_file_data
from syncr.synchronize import (
    compare_file_data,
    explain_sync_actions,
    is_sync_required,
    sync_files,
)

source = collect_file_data("photos")
target = collect_file_data("/mnt/backup/photos")
actions = compare_file_data(source, target)
if is_sync_required(False, actions):
    explain_sync_actions(actions)
    sync_files(actions, "photos", "/mnt/backup/photos", False)
```

Modules:

- `syncr.models` – `FileData` (name, checksum, size, `mod_time` in
  nanoseconds, permission bits), `SyncActionType` (`ADD`, `MODIFY`,
  `MISSING`) and `SyncAction` (type, source file, and for `MODIFY` the target
  file).
- `syncr.helper` – `is_directory`, `is_directory_writable`,
  `collect_file_data` (raises `OSError` when a file cannot be read).
- `syncr.synchronize` – `compare_file_data`, `is_sync_required`,
  `explain_sync_actions`, `sync_files`, `optimal_worker_count`.
- `syncr.cli` – `main(argv=None)`, which returns the exit status.

## Running the tests

```
pip install ".[test]"
pytest
```