"""
PathTree: a thin wrapper over a composite map, addressed by dot paths.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from pathtree.core.dict_path import (
    ConflictPolicy,
    PathLike,
    copy_tree,
    delete_path,
    filter_map,
    get_path,
    iter_paths,
    set_path,
)


class PathTree:
    """
    Wraps a nested dict so values can be read and written with paths like
    ``"key1.key2"`` instead of ``d["key1"]["key2"]``.

    The tree adopts the dict it is given by reference and ``as_map()`` hands
    the same dict back, so changes made through either side are shared. Use
    ``to_dict()`` for an independent copy.

    Not thread-safe: callers sharing a tree (or its dict) across threads must
    synchronize access themselves.
    """

    def __init__(self, data: dict[str, Any] | None = None, *,
                 policy: ConflictPolicy = ConflictPolicy.OVERWRITE):
        self._data: dict[str, Any] = {} if data is None else data
        self.policy = ConflictPolicy(policy)

    @classmethod
    def from_map(cls, data: dict[str, Any], **kwargs) -> PathTree:
        """Create a PathTree whose underlying data is ``data`` (not a copy)."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a dict, got {type(data).__name__}")
        return cls(data, **kwargs)

    def as_map(self) -> dict[str, Any]:
        """The underlying composite map, shared with the tree."""
        return self._data

    def to_dict(self) -> dict[str, Any]:
        """A copy of the underlying composite map (leaf values are shared)."""
        return copy_tree(self._data)

    # --- Path access ---

    def get(self, path: PathLike) -> tuple[Any, bool]:
        """Get the value at ``path`` and whether the path exists."""
        return get_path(self._data, path)

    def get_value(self, path: PathLike, default: Any = None) -> Any:
        """Get the value at ``path``, or ``default`` if it doesn't exist."""
        value, found = get_path(self._data, path)
        return value if found else default

    def set(self, path: PathLike, value: Any) -> None:
        """Insert ``value`` at ``path``, creating nested maps as needed."""
        set_path(self._data, path, value, policy=self.policy)

    def delete(self, path: PathLike) -> bool:
        """Remove the entry at ``path``. Returns False if there was none."""
        return delete_path(self._data, path)

    def filter(self, paths: Iterable[PathLike]) -> PathTree:
        """A new PathTree that only includes the given paths."""
        return PathTree(filter_map(self._data, paths), policy=self.policy)

    def paths(self) -> Iterator[str]:
        """Iterate the dot paths of every leaf."""
        return iter_paths(self._data)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, list, tuple)):
            return False
        return get_path(self._data, path)[1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathTree):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
