"""Utility modules for component dependency analysis."""

from .file_utils import find_component_files, read_file_content
from .path_utils import canonical_path, component_base_name, resolve_component_path, to_kebab_case

__all__ = [
    "find_component_files",
    "read_file_content",
    "canonical_path",
    "component_base_name",
    "resolve_component_path",
    "to_kebab_case",
]
