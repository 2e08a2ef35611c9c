"""Helpers for building throwaway component projects in tests."""

import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator


@contextmanager
def create_test_project(files: Dict[str, str]) -> Iterator[Path]:
    """Write ``files`` (relative path -> content) under a temporary directory."""
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp).resolve()
        for relative_path, content in files.items():
            file_path = root / relative_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        yield root
