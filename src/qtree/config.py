"""
Module: qtree.config

Purpose:
    Configuration dataclass for the question-tree editor. Immutable
    configuration with validation on construction, loadable from YAML.

Key Classes:
    - EditorConfig: knobs for identity generation and rendering

Dependencies:
    - dataclasses (std)
    - yaml (PyYAML)

Used By:
    - qtree.identity: copy marker for copied link ids
    - qtree.backends: outline indent and DOT layout direction
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml


_MARKER_RE = re.compile(r"^[A-Za-z0-9_]+$")
_RANKDIRS = ("LR", "RL", "TB", "BT")


@dataclass(frozen=True)
class EditorConfig:
    """
    Configuration for the question-tree editor (immutable).

    Attributes:
        copy_marker: Word inserted into the link id of a copied question
            ("Q1" becomes "Q1-copy-<token>")
        outline_indent: Indent unit used per nesting level by render_outline
        dot_rankdir: Graphviz rankdir used by generate_dot

    Example:
        >>> config = EditorConfig(copy_marker="dup")
        >>> config.copy_marker
        'dup'
    """

    copy_marker: str = "copy"
    outline_indent: str = "  "
    dot_rankdir: str = "LR"

    def __post_init__(self) -> None:
        if not _MARKER_RE.match(self.copy_marker):
            raise ValueError(
                f"copy_marker must be alphanumeric/underscore, got {self.copy_marker!r}"
            )
        if not self.outline_indent:
            raise ValueError("outline_indent must not be empty")
        if self.dot_rankdir not in _RANKDIRS:
            raise ValueError(f"dot_rankdir must be one of {_RANKDIRS}, got {self.dot_rankdir!r}")


DEFAULT_CONFIG = EditorConfig()


def config_from_dict(d: Dict[str, Any] | None) -> EditorConfig:
    """Build a config from a mapping, rejecting unknown keys."""
    if not d:
        return EditorConfig()
    known = {f.name for f in fields(EditorConfig)}
    unknown = set(d) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    return EditorConfig(**d)


def load_config(path: Union[str, Path]) -> EditorConfig:
    """
    Load an EditorConfig from a YAML file.

    The file holds a flat mapping of EditorConfig fields; missing fields
    keep their defaults and an empty file yields the default config.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the mapping has unknown keys or invalid values
    """
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return config_from_dict(data)
