"""Annotation registry.

This module keeps one AnnotationTable per enum type:
- register_annotations(): build and store the table for a type
- annotated(): class decorator attaching annotations at declaration time
- get_table() / get_annotation(): read access used by the converters
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar

from enum_lookups.core.enums import AnnotationKind
from enum_lookups.core.errors import MetadataAccessError
from enum_lookups.core.models import AnnotationTable
from enum_lookups.core.utils import qualified_type_name

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Type[Enum])

# Registered tables, keyed by enum class
_REGISTRY: Dict[type, AnnotationTable] = {}


def register_annotations(
    enum_cls: Type[Enum],
    annotations: Optional[Mapping[Any, Any]] = None,
    *,
    strict: bool = False,
    replace: bool = False,
) -> AnnotationTable:
    """Build the annotation table for an enum type and register it.

    Args:
        enum_cls: The enum class being annotated.
        annotations: Mapping of member (or member name) to annotation. Values may
            be MemberAnnotation, a (wire_constant, description) tuple, a mapping
            or a bare wire constant string.
        strict: Raise DuplicateAnnotationError on shared wire constants or
            descriptions instead of logging a warning.
        replace: Allow replacing a table that is already registered.

    Returns:
        The registered AnnotationTable.

    Raises:
        MetadataAccessError: If a key is not a member of enum_cls, a value is
            malformed, or the type is already annotated and replace is False.
        DuplicateAnnotationError: If strict and two members share a string.

    Examples:
        >>> class Status(Enum):
        ...     Active = 1
        ...     Inactive = 2
        >>> table = register_annotations(Status, {Status.Active: ("A", "Currently Active")})
        >>> table.annotation_for(Status.Active).wire_constant
        'A'
    """
    if enum_cls in _REGISTRY and not replace:
        raise MetadataAccessError(
            qualified_type_name(enum_cls), "*", "annotations are already registered"
        )
    table = AnnotationTable(enum_cls, annotations, strict=strict)
    _REGISTRY[enum_cls] = table
    logger.debug(
        "Registered %d annotation(s) for %s", table.annotated_count(), table.type_name
    )
    return table


def annotated(
    annotations: Optional[Mapping[str, Any]] = None, strict: bool = False, /, **by_name: Any
) -> Callable[[E], E]:
    """Class decorator attaching annotations to members by name.

    The options are positional-only so that every keyword names a member,
    including members called ``annotations`` or ``strict``.

    Examples:
        >>> @annotated(Active=("A", "Currently Active"))
        ... class Status(Enum):
        ...     Active = 1
        ...     Inactive = 2
    """
    merged: Dict[str, Any] = dict(annotations or {})
    merged.update(by_name)

    def decorator(enum_cls: E) -> E:
        register_annotations(enum_cls, merged, strict=strict)
        return enum_cls

    return decorator


def get_table(enum_cls: Type[Enum]) -> AnnotationTable:
    """Return the registered table, or an empty one for unannotated types."""
    table = _REGISTRY.get(enum_cls)
    if table is not None:
        return table
    try:
        return AnnotationTable(enum_cls)
    except TypeError as e:
        type_name = (
            qualified_type_name(enum_cls) if isinstance(enum_cls, type) else repr(enum_cls)
        )
        raise MetadataAccessError(type_name, "*", str(e)) from e


def get_annotation(member: Enum, kind: AnnotationKind) -> Optional[str]:
    """Return the annotation string of a kind attached to member, or None."""
    if not isinstance(member, Enum):
        raise MetadataAccessError(
            qualified_type_name(type(member)), str(member), "not an Enum member"
        )
    try:
        kind = AnnotationKind(kind)
    except ValueError as e:
        raise MetadataAccessError(
            qualified_type_name(type(member)), member.name, str(e)
        ) from e
    return get_table(type(member)).annotation_for(member).get(kind)


def is_annotated(enum_cls: Type[Enum]) -> bool:
    return enum_cls in _REGISTRY


def clear_annotations(enum_cls: Optional[Type[Enum]] = None) -> None:
    """Forget registered annotations for one type, or for every type."""
    if enum_cls is None:
        _REGISTRY.clear()
    else:
        _REGISTRY.pop(enum_cls, None)


__all__ = [
    "register_annotations",
    "annotated",
    "get_table",
    "get_annotation",
    "is_annotated",
    "clear_annotations",
]
