"""Enum Lookups — string annotations and parsing for Python enums.

Members of an ``enum.Enum`` can carry a wire constant (the value stored in a
database or sent over the wire) and a human-readable description, so lookup
tables are not needed to translate them.

Usage:
    >>> from enum import Enum
    >>> from enum_lookups import annotated, parse_enum, to_wire_constant
    >>> @annotated(Active=("A", "Currently Active"))
    ... class Status(Enum):
    ...     Active = 1
    ...     Inactive = 2
    >>> to_wire_constant(Status.Active)
    'A'
    >>> parse_enum(Status, "a")
    <Status.Active: 1>
"""

from __future__ import annotations

__version__ = "0.1.0"

from .core.enums import AnnotationKind
from .core.errors import (
    DuplicateAnnotationError,
    EnumLookupError,
    MetadataAccessError,
    NoMatchError,
)
from .core.models import AnnotationTable, MemberAnnotation, ResolutionRow
from .core.registry import (
    annotated,
    clear_annotations,
    get_annotation,
    get_table,
    register_annotations,
)
from .core.conversion import (
    parse_enum,
    parse_enum_or_default,
    to_description,
    to_wire_constant,
    try_parse_enum,
)
from .core.utils import equals_ignoring_case
from .loader import load_annotations

__all__ = [
    "__version__",
    # Annotation model
    "AnnotationKind",
    "MemberAnnotation",
    "AnnotationTable",
    "ResolutionRow",
    "annotated",
    "register_annotations",
    "get_table",
    "get_annotation",
    "clear_annotations",
    "load_annotations",
    # Conversions
    "to_wire_constant",
    "to_description",
    "parse_enum",
    "try_parse_enum",
    "parse_enum_or_default",
    "equals_ignoring_case",
    # Errors
    "EnumLookupError",
    "NoMatchError",
    "MetadataAccessError",
    "DuplicateAnnotationError",
]
