"""Enumerate a built site: every file for existence checks, .html files for scanning."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileRecord:
    path: Path
    # POSIX path below the scan root with a leading slash, e.g. "/blog/index.html".
    relative: str


@dataclass(frozen=True)
class FileSet:
    files_to_check: tuple[FileRecord, ...]
    known_paths: frozenset[str]


def _raise(exc: OSError) -> None:
    raise exc


def _relative_to_root(path: Path, root: Path) -> str:
    return "/" + path.relative_to(root).as_posix()


def iter_files(root: Path) -> list[FileRecord]:
    """List every file under ``root`` in a stable, sorted order."""
    if not root.exists():
        raise FileNotFoundError(f"Site directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Site root is not a directory: {root}")

    records: list[FileRecord] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            records.append(FileRecord(path=path, relative=_relative_to_root(path, root)))
    return records


def scan_site(root_dir: Path, *, excluded_path_substring: str = "") -> FileSet:
    root = root_dir.resolve()
    records = iter_files(root)
    known_paths = frozenset(r.relative for r in records)
    files_to_check = tuple(
        r
        for r in records
        if r.path.suffix == ".html"
        and not (excluded_path_substring and excluded_path_substring in r.relative)
    )
    return FileSet(files_to_check=files_to_check, known_paths=known_paths)
