"""
Configuration for projecting documents with the pathtree CLI.
"""

from pathlib import Path
import logging
from typing import Literal
import yaml
from pydantic import BaseModel, Field, field_validator

from pathtree.core.dict_path import ConflictPolicy
from pathtree.utils.parse import as_list_str

DEFAULT_CONFIG_PATH = Path("pathtree.yaml")


class ProjectionConfig(BaseModel):
    """
    Options shared by the CLI commands. ``paths`` are the dot paths kept by
    ``pathtree filter`` in addition to any given on the command line.
    """
    paths: list[str] = Field(default_factory=list, description="Dot paths to keep when filtering")
    conflict_policy: ConflictPolicy = Field(
        ConflictPolicy.OVERWRITE,
        description="What 'set' does when a leaf sits where a nested map is needed: "
                    "'overwrite' replaces the leaf, 'error' refuses the write."
    )
    output_format: Literal["json", "yaml"] = Field("json", description="Format of printed documents")
    indent: int = Field(2, ge=0, description="Indentation of printed documents")

    @field_validator('paths', mode='before')
    @classmethod
    def ensure_list(cls, value) -> list[str]:
        """Convert comma-separated strings to lists in the config."""
        if value is None:
            return []
        return as_list_str(value) or []

    @field_validator('conflict_policy', 'output_format', mode='before')
    @classmethod
    def lower_case(cls, value):
        """Accept 'ERROR', 'Yaml' etc. from hand-edited files."""
        if isinstance(value, str):
            return value.strip().lower()
        return value


def load_config(config_path: Path | str | None = None) -> dict:
    """
    Load configuration from a YAML file.

    With no path, ``pathtree.yaml`` in the working directory is used if present;
    otherwise an empty config (all defaults) is returned.
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logging.debug("No %s found; using default config.", DEFAULT_CONFIG_PATH)
            return {}
        config_path = DEFAULT_CONFIG_PATH
    logging.info("Loading config object from %s...", config_path)
    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Could not parse config file {config_path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")
    return data


def get_config(config_path: Path | str | None = None) -> ProjectionConfig:
    """Uses a common configuration file."""
    return ProjectionConfig(**load_config(config_path))
