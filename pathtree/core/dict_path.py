"""
Navigate and manipulate nested dicts ("composite maps") via "dot paths".

A composite map is a ``dict`` with string keys whose values are either leaves
(anything that is not a ``dict``) or further composite maps. A path such as
``"a.b.c"`` names the value ``m["a"]["b"]["c"]``.

Reads never raise: a missing key, or a leaf sitting where a nested dict is
expected, simply means "not found". Writes create missing intermediate dicts.
What a write does when a leaf sits where a nested dict is expected is decided
by a ``ConflictPolicy``.

Nothing here is thread-safe; callers sharing a dict across threads must lock.
"""
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
import logging
from typing import Any

logger = logging.getLogger(__name__)

SEPARATOR = "."

PathLike = str | Sequence[str]


class ConflictPolicy(str, Enum):
    """What a write does when an intermediate path segment holds a leaf."""
    OVERWRITE = "overwrite"  # replace the leaf with an empty dict and carry on
    ERROR = "error"          # raise PathConflictError, leave the dict untouched


class PathConflictError(TypeError):
    """A write needed a nested dict where a leaf value is stored."""

    def __init__(self, prefix: str, value: Any):
        self.prefix = prefix
        self.value = value
        super().__init__(
            f"Cannot descend into '{prefix}': holds {type(value).__name__}, not a nested map"
        )


def split_path(path: PathLike) -> list[str]:
    """
    Split a dot path into its segments.

    The empty string has no segments. Already-split sequences are copied as-is.
    Keys containing the separator cannot be addressed.
    """
    if isinstance(path, str):
        return path.split(SEPARATOR) if path else []
    return list(path)


def join_path(keys: Iterable[str]) -> str:
    """Join segments back into a dot path."""
    return SEPARATOR.join(keys)


def get_path(d: dict, path: PathLike) -> tuple[Any, bool]:
    """
    Get a value from a nested dict via a dot-separated path.

    :return: ``(value, True)`` if the path exists, else ``(None, False)``.
        A stored ``None`` is reported as found.
    """
    keys = split_path(path)
    if not keys:
        return None, False
    current = d
    for key in keys[:-1]:
        current = current.get(key)
        if not isinstance(current, dict):
            return None, False
    if keys[-1] in current:
        return current[keys[-1]], True
    return None, False


def _check_conflicts(d: dict, keys: list[str]) -> None:
    """Raise PathConflictError if writing along keys would hit a leaf."""
    current = d
    for depth, key in enumerate(keys[:-1], start=1):
        if key not in current:
            return  # the rest of the path gets created
        current = current[key]
        if not isinstance(current, dict):
            raise PathConflictError(join_path(keys[:depth]), current)


def set_path(d: dict, path: PathLike, value: Any, *,
             policy: ConflictPolicy = ConflictPolicy.OVERWRITE) -> None:
    """
    Set a value in a nested dict via a dot-separated path, in place.

    Missing intermediate dicts are created. An empty path is a no-op.
    A leaf found at an intermediate segment is replaced by an empty dict under
    ``ConflictPolicy.OVERWRITE``; under ``ConflictPolicy.ERROR`` a
    PathConflictError is raised before ``d`` is modified.
    """
    keys = split_path(path)
    if not keys:
        return
    policy = ConflictPolicy(policy)
    if policy is ConflictPolicy.ERROR:
        _check_conflicts(d, keys)

    current = d
    for depth, key in enumerate(keys[:-1], start=1):
        if key not in current:
            current[key] = {}
        elif not isinstance(current[key], dict):
            logger.debug("Replacing %s at '%s' with a nested map",
                         type(current[key]).__name__, join_path(keys[:depth]))
            current[key] = {}
        current = current[key]
    current[keys[-1]] = value


def delete_path(d: dict, path: PathLike) -> bool:
    """
    Delete a key in a nested dict via a dot-separated path.

    :return: True if something was removed. Emptied parent dicts are kept.
    """
    keys = split_path(path)
    if not keys:
        return False
    current = d
    for key in keys[:-1]:
        current = current.get(key)
        if not isinstance(current, dict):
            return False  # Key path does not exist; nothing to delete
    if keys[-1] not in current:
        return False
    del current[keys[-1]]
    return True


def copy_tree(value: Any) -> Any:
    """Copy every nested dict of a composite map. Leaves are shared, not copied."""
    if isinstance(value, dict):
        return {k: copy_tree(v) for k, v in value.items()}
    return value


def filter_map(d: dict, paths: Iterable[PathLike]) -> dict:
    """
    Build a new composite map holding only the values found at ``paths``.

    A path to a nested dict brings its whole subtree. Paths missing from ``d``
    are skipped. Paths sharing a prefix are merged under one nested dict.
    The result shares leaves with ``d`` but none of its dicts.
    """
    out: dict = {}
    for path in paths:
        keys = split_path(path)
        value, found = get_path(d, keys)
        if not found:
            logger.debug("Filter skipped missing path '%s'", join_path(keys))
            continue
        set_path(out, keys, copy_tree(value))
    return out


def iter_paths(d: dict, prefix: Sequence[str] = ()) -> Iterator[str]:
    """
    Yield the dot path of every leaf in a nested dict.

    Empty nested dicts are yielded as paths of their own, so
    ``filter_map(d, iter_paths(d)) == d``.
    """
    for key, value in d.items():
        keys = [*prefix, key]
        if isinstance(value, dict) and value:
            yield from iter_paths(value, keys)
        else:
            yield join_path(keys)
