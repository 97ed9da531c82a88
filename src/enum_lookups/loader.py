"""Loading member annotations from YAML files.

Annotation files hold one section per enum class under a top-level
``annotations`` key. load_annotations() turns a section into an
AnnotationTable and, by default, registers it.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Type
import yaml

from enum_lookups.core.errors import MetadataAccessError
from enum_lookups.core.models import AnnotationTable
from enum_lookups.core.registry import register_annotations
from enum_lookups.core.utils import qualified_type_name


def read_annotations_file(path: Path) -> Dict[str, Dict[str, Any]]:
    """Load the ``annotations`` section of a YAML file, keyed by enum class name."""
    if not path.exists():
        raise FileNotFoundError(f"Annotations file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse annotations file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Annotations file {path} must contain a mapping at top level")
    sections = data.get("annotations", {}) or {}
    if not isinstance(sections, dict):
        raise ValueError(f"'annotations' in {path} must map enum names to members")
    return sections


def load_annotations(
    path: Path,
    enum_cls: Type[Enum],
    *,
    strict: bool = False,
    register: bool = True,
) -> AnnotationTable:
    """Build an AnnotationTable for enum_cls from a YAML file.

    The file holds one section per enum class, keyed by ``__name__``:

        annotations:
          Status:
            Active: {wire_constant: A, description: Currently Active}
            Inactive: {description: Not in use}

    Args:
        path: YAML file to read.
        enum_cls: Enum class whose section is loaded.
        strict: Reject duplicate wire constants or descriptions.
        register: Register the table, replacing any existing registration.

    Raises:
        FileNotFoundError: If path does not exist.
        ValueError: If the file is not valid YAML or has the wrong shape.
        MetadataAccessError: If the section is missing or names an unknown member.
    """
    sections = read_annotations_file(path)
    if enum_cls.__name__ not in sections:
        raise MetadataAccessError(
            qualified_type_name(enum_cls), "*", f"no '{enum_cls.__name__}' section in {path}"
        )
    members = sections[enum_cls.__name__] or {}
    if not isinstance(members, dict):
        raise ValueError(
            f"Section '{enum_cls.__name__}' in {path} must map member names to annotations"
        )
    entries = {str(name): value for name, value in members.items()}
    if register:
        return register_annotations(enum_cls, entries, strict=strict, replace=True)
    return AnnotationTable(enum_cls, entries, strict=strict)


__all__ = ["read_annotations_file", "load_annotations"]
