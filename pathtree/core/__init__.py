"""
Core path resolution and the PathTree wrapper.
"""
from pathtree.core.dict_path import (
    ConflictPolicy,
    PathConflictError,
    copy_tree,
    delete_path,
    filter_map,
    get_path,
    iter_paths,
    join_path,
    set_path,
    split_path,
)
from pathtree.core.tree import PathTree

__all__ = [
    "ConflictPolicy",
    "PathConflictError",
    "PathTree",
    "copy_tree",
    "delete_path",
    "filter_map",
    "get_path",
    "iter_paths",
    "join_path",
    "set_path",
    "split_path",
]
