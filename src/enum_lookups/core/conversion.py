"""Conversions between enum members and their string forms.

Forward (member -> str):
    to_wire_constant(), to_description() fall back to the member name when the
    member carries no annotation of that kind, so every member converts.

Reverse (str -> member):
    parse_enum() tries, in order, the member name (exact), the wire constant
    (ignoring case) and the description (exact). First match in declaration
    order wins. try_parse_enum() and parse_enum_or_default() run the same
    search without raising.

Flag enums convert and parse declared members only. Composite values such as
``Perm.R | Perm.W`` are not declared members and raise MetadataAccessError.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Type, TypeVar

from enum_lookups import config
from enum_lookups.core.enums import AnnotationKind
from enum_lookups.core.errors import NoMatchError
from enum_lookups.core.models import AnnotationTable
from enum_lookups.core.registry import get_annotation, get_table
from enum_lookups.core.utils import annotation_matches, equals_ignoring_case

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Annotation kinds tried after the member name, in order
_SEARCH_ORDER = (AnnotationKind.WIRE_CONSTANT, AnnotationKind.DESCRIPTION)


def get_attribute_string(value: Enum, kind: AnnotationKind) -> str:
    """Return the annotation of a kind for value, or value's name if absent."""
    annotation = get_annotation(value, kind)
    if annotation is None:
        return value.name
    return annotation


def to_wire_constant(value: Enum) -> str:
    """Return the wire constant for a member, or its name if none is declared.

    Examples:
        >>> to_wire_constant(Status.Active)
        'A'
        >>> to_wire_constant(Status.Inactive)
        'Inactive'
    """
    return get_attribute_string(value, AnnotationKind.WIRE_CONSTANT)


def to_description(value: Enum) -> str:
    """Return the description for a member, or its name if none is declared."""
    return get_attribute_string(value, AnnotationKind.DESCRIPTION)


def _match_name(enum_cls: Type[E], text: Optional[str]) -> Optional[E]:
    if not isinstance(text, str):
        return None
    if config.NAME_IGNORE_CASE:
        for name, member in enum_cls.__members__.items():
            if equals_ignoring_case(name, text):
                return member
        return None
    return enum_cls.__members__.get(text)


def _match_annotation(
    table: AnnotationTable, kind: AnnotationKind, text: Optional[str]
) -> Optional[Enum]:
    for member in table:
        candidate = table.annotation_for(member).get(kind)
        if candidate is not None and annotation_matches(kind, candidate, text):
            return member
    return None


def try_parse_enum(enum_cls: Type[E], text: Optional[str]) -> Optional[E]:
    """Find the member of enum_cls matching text, or None.

    Args:
        enum_cls: Enum class to search.
        text: Member name, wire constant or description. None and "" are
            searched like any other text.

    Returns:
        The first matching member, or None when nothing matches.

    Raises:
        MetadataAccessError: If enum_cls is not an Enum subclass.
    """
    table = get_table(enum_cls)
    member = _match_name(enum_cls, text)
    if member is not None:
        return member
    for kind in _SEARCH_ORDER:
        member = _match_annotation(table, kind, text)
        if member is not None:
            logger.debug("Matched %r to %s by %s", text, member, kind.value)
            return member  # type: ignore[return-value]
    return None


def parse_enum(enum_cls: Type[E], text: Optional[str]) -> E:
    """Convert text to a member of enum_cls.

    Raises:
        NoMatchError: If no member name, wire constant or description matches.

    Examples:
        >>> parse_enum(Status, "a")
        <Status.Active: 1>
        >>> parse_enum(Status, "Currently Active")
        <Status.Active: 1>
    """
    member = try_parse_enum(enum_cls, text)
    if member is None:
        raise NoMatchError(text, enum_cls)
    return member


def parse_enum_or_default(enum_cls: Type[E], text: Optional[str], default: E) -> E:
    """Convert text to a member of enum_cls, returning default on no match."""
    member = try_parse_enum(enum_cls, text)
    if member is None:
        return default
    return member


__all__ = [
    "get_attribute_string",
    "to_wire_constant",
    "to_description",
    "try_parse_enum",
    "parse_enum",
    "parse_enum_or_default",
]
