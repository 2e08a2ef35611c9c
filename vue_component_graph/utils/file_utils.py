#!/usr/bin/env python3
"""
File utility functions for component discovery.

Handles directory enumeration and file reading.
"""

import os
from pathlib import Path
from typing import List, Set, Tuple, Union

from ..models import FileSet

COMPONENT_EXTENSION = ".vue"
EXCLUDED_DIRECTORY = "node_modules"


def find_component_files(
    root: Union[str, Path],
    extension: str = COMPONENT_EXTENSION,
    excluded_dir: str = EXCLUDED_DIRECTORY,
) -> FileSet:
    """
    Find all component files under root, skipping dependency directories.

    Files come back in directory-listing order, descending into each
    subdirectory where it is listed. That order is what name resolution
    uses to pick between files sharing a base name, so it is platform and
    filesystem dependent. Listing errors propagate as OSError.
    """
    root_path = Path(os.path.abspath(root))
    files: List[Path] = []
    seen: Set[Tuple[int, int]] = set()
    _collect(root_path, extension, excluded_dir, files, seen)
    return tuple(files)


def _collect(
    directory: Path,
    extension: str,
    excluded_dir: str,
    files: List[Path],
    seen: Set[Tuple[int, int]],
) -> None:
    """Recursively append matching files, deduplicated by inode."""
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                if entry.name == excluded_dir:
                    continue
                _collect(Path(entry.path), extension, excluded_dir, files, seen)
            elif entry.is_file(follow_symlinks=False) and entry.name.endswith(extension):
                # DirEntry.stat() leaves st_ino as 0 on Windows
                stat = os.stat(entry.path, follow_symlinks=False)
                identity = (stat.st_dev, stat.st_ino)
                if identity in seen:
                    continue
                seen.add(identity)
                files.append(Path(entry.path))


def read_file_content(file_path: Path) -> str:
    """Read a file as UTF-8. Raises OSError or UnicodeDecodeError."""
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()
