"""
This module handles reading/writing documents as composite maps.
"""
import json
import logging
from pathlib import Path
from typing import Any
import yaml

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def load_document(path: Path) -> dict[str, Any]:
    """
    Loads a JSON or YAML file (chosen by extension) whose top level is a mapping.

    :param path (Path): Path to a .json, .yaml or .yml file.
    :return dict: The parsed document.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise ValueError(f"Unsupported document type '{suffix}' for {path}. Use .json, .yaml or .yml")
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")

    logging.info("Loading document from %s...", path)
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if suffix in JSON_SUFFIXES else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Could not parse {path}: {e}") from e

    if data is None and suffix in YAML_SUFFIXES:
        data = {}  # empty YAML file
    if not isinstance(data, dict):
        raise ValueError(f"Top level of {path} must be a mapping, got {type(data).__name__}")
    return str_keys(data)


def str_keys(value: Any) -> Any:
    """
    Turn every mapping key into a string, so YAML's ``1:`` is addressed as "1"
    just like in JSON. Raises ValueError if two keys collide once stringified.
    """
    if isinstance(value, list):
        return [str_keys(v) for v in value]
    if not isinstance(value, dict):
        return value
    out = {}
    for k, v in value.items():
        key = k if isinstance(k, str) else str(k)
        if key in out:
            raise ValueError(f"Duplicate key '{key}' after converting {k!r} to a string")
        out[key] = str_keys(v)
    return out


def dump_document(data: Any, output_format: str = "json", indent: int = 2) -> str:
    """Serialize a document (or any value found in one) to JSON or YAML text."""
    if output_format == "yaml":
        text = yaml.safe_dump(data, indent=indent or None, sort_keys=False,
                              default_flow_style=False, allow_unicode=True)
        # a top-level scalar comes back with an explicit document end marker
        if not isinstance(data, (dict, list)) and text.endswith("\n...\n"):
            text = text[:-len("...\n")]
        return text.rstrip("\n")
    if output_format == "json":
        return json.dumps(data, indent=indent or None, ensure_ascii=False, default=str)
    raise ValueError(f"Unsupported output format: {output_format}")


def save_document(path: Path, data: dict[str, Any], indent: int = 2) -> Path:
    """Write a document back to disk in the format implied by its extension."""
    path = Path(path)
    output_format = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"
    path.write_text(dump_document(data, output_format, indent) + "\n", encoding="utf-8")
    logging.info("Document saved to %s.", path)
    return path
