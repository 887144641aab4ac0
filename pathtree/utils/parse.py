"""
Utility functions to parse and coerce values from the command line and config files.
"""
from typing import Any
import yaml

def clean(v: Any) -> str | None:
    """Helper cleans strings. Blank strings become None."""
    if v is None:
        return None
    if not isinstance(v, str):
        v = str(v)
    s = v.strip()
    return s or None

def as_list_str(v: Any) -> list[str] | None:
    """Helper converts comma-separated strings or lists to cleaned list[str]."""
    if v is None:
        return None
    if isinstance(v, (list, tuple)):
        out = []
        for x in v:
            s = clean(x)
            if s is not None:
                out.append(s)
        return out or None
    # allow comma-separated strings from manual edits
    if isinstance(v, str):
        out = [clean(s) for s in v.split(",")]
        out = [s for s in out if s is not None]
        return out or None
    raise ValueError(f"Expected list[str] or comma-string, got {type(v).__name__}")

def as_value(v: str) -> Any:
    """
    Helper reads a command-line value as YAML, so '13' is an int, 'true' a bool
    and '{a: 1}' a nested map. Anything YAML can't read stays a string.
    """
    try:
        return yaml.safe_load(v)
    except yaml.YAMLError:
        return v
