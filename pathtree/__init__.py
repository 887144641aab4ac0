"""
pathtree: dot-path access to nested string-keyed maps.

Read, write or extract part of a nested dict (a database record, a parsed
JSON or YAML document) with a single path such as ``"a.b.c"``.
"""
from importlib.metadata import version, PackageNotFoundError

from pathtree.core import (
    ConflictPolicy,
    PathConflictError,
    PathTree,
    filter_map,
    get_path,
    set_path,
)

try:
    __version__ = version("pathtree")
except PackageNotFoundError:
    __version__ = "unknown"
__app_name__ = "pathtree"

__all__ = [
    "ConflictPolicy",
    "PathConflictError",
    "PathTree",
    "filter_map",
    "get_path",
    "set_path",
]
