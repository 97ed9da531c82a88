"""Annotation data models.

This module defines the data structures behind member annotations:
- MemberAnnotation: wire constant and description attached to one member
- ResolutionRow: one (name, wire constant, description) row of a resolved type
- AnnotationTable: immutable member -> annotation mapping for one enum type
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Type

from enum_lookups.core.enums import AnnotationKind
from enum_lookups.core.errors import DuplicateAnnotationError, MetadataAccessError
from enum_lookups.core.utils import annotation_key, qualified_type_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberAnnotation:
    """Strings attached to a single enum member.

    Attributes:
        wire_constant: Value used when the member is stored or sent externally.
        description: Human-facing label, independent of name and wire constant.

    Examples:
        >>> MemberAnnotation(wire_constant="A", description="Currently Active")
        >>> MemberAnnotation.coerce(("A", None))
        MemberAnnotation(wire_constant='A', description=None)
    """

    wire_constant: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate field types."""
        for kind in AnnotationKind:
            value = getattr(self, kind.value)
            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"Invalid {kind.value}: {value!r}. Must be a string or None."
                )

    def get(self, kind: AnnotationKind) -> Optional[str]:
        """Return the string for an annotation kind, or None when absent."""
        return getattr(self, AnnotationKind(kind).value)

    def is_empty(self) -> bool:
        return self.wire_constant is None and self.description is None

    @classmethod
    def coerce(cls, value: Any) -> "MemberAnnotation":
        """Build an annotation from the shorthand forms accepted at declaration.

        Accepted forms:
            - MemberAnnotation: returned unchanged
            - None: empty annotation
            - str: wire constant only
            - (wire_constant, description) tuple
            - mapping with "wire_constant" and/or "description" keys

        Raises:
            ValueError: If the value has an unsupported shape or unknown keys.
        """
        if isinstance(value, MemberAnnotation):
            return value
        if value is None:
            return cls()
        if isinstance(value, str):
            return cls(wire_constant=value)
        if isinstance(value, tuple):
            if len(value) != 2:
                raise ValueError(
                    f"Expected (wire_constant, description), got {len(value)} items"
                )
            return cls(wire_constant=value[0], description=value[1])
        if isinstance(value, Mapping):
            allowed = {k.value for k in AnnotationKind}
            unknown = set(value) - allowed
            if unknown:
                raise ValueError(
                    f"Unknown annotation keys: {sorted(map(str, unknown))}. "
                    f"Valid keys: {sorted(allowed)}"
                )
            return cls(
                wire_constant=value.get(AnnotationKind.WIRE_CONSTANT.value),
                description=value.get(AnnotationKind.DESCRIPTION.value),
            )
        raise ValueError(f"Unsupported annotation value: {value!r}")


_EMPTY = MemberAnnotation()


@dataclass(frozen=True)
class ResolutionRow:
    """One resolved member: its name plus any annotations."""

    name: str
    wire_constant: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "name": self.name,
            "wire_constant": self.wire_constant,
            "description": self.description,
        }


class AnnotationTable:
    """Annotations for every member of one enum type.

    Built once from a mapping keyed by member (or member name) and read-only
    afterwards. Members that were not annotated resolve to an empty
    MemberAnnotation.

    Shared wire constants or descriptions make reverse lookup ambiguous. By
    default they are logged and the first member in declaration order wins;
    with ``strict=True`` they raise DuplicateAnnotationError.
    """

    def __init__(
        self,
        enum_type: Type[Enum],
        annotations: Optional[Mapping[Any, Any]] = None,
        *,
        strict: bool = False,
    ) -> None:
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise TypeError(f"Expected an Enum subclass, got {enum_type!r}")
        self.enum_type = enum_type
        entries: Dict[str, MemberAnnotation] = {}
        for key, value in (annotations or {}).items():
            member = self._resolve_member(key)
            try:
                entries[member.name] = MemberAnnotation.coerce(value)
            except ValueError as e:
                raise MetadataAccessError(self.type_name, member.name, str(e)) from e
        self._entries: Mapping[str, MemberAnnotation] = MappingProxyType(entries)
        self._check_duplicates(strict)

    @property
    def type_name(self) -> str:
        return qualified_type_name(self.enum_type)

    def _resolve_member(self, key: Any) -> Enum:
        if isinstance(key, self.enum_type):
            return key
        if isinstance(key, str):
            try:
                return self.enum_type.__members__[key]
            except KeyError as e:
                raise MetadataAccessError(self.type_name, key, "no such member") from e
        raise MetadataAccessError(
            self.type_name, repr(key), f"not a member of {self.enum_type.__name__}"
        )

    def _check_duplicates(self, strict: bool) -> None:
        for kind in AnnotationKind:
            seen: Dict[str, List[str]] = {}
            for member in self.enum_type:
                value = self.annotation_for(member).get(kind)
                if value is None:
                    continue
                seen.setdefault(annotation_key(kind, value), []).append(member.name)
            for names in seen.values():
                if len(names) < 2:
                    continue
                value = self._entries[names[0]].get(kind)
                if strict:
                    raise DuplicateAnnotationError(self.enum_type, kind.value, value, names)
                logger.warning(
                    "Duplicate %s '%s' in %s (%s); reverse lookup returns %s",
                    kind.value,
                    value,
                    self.type_name,
                    ", ".join(names),
                    names[0],
                )

    def annotation_for(self, member: Enum) -> MemberAnnotation:
        """Return the annotation for a member (empty when not annotated).

        Raises:
            MetadataAccessError: If member does not belong to this table's type, or
                is a composite Flag value rather than a declared member.
        """
        if not isinstance(member, self.enum_type):
            raise MetadataAccessError(
                self.type_name,
                str(getattr(member, "name", member)),
                f"not a member of {self.enum_type.__name__}",
            )
        if member.name not in self.enum_type.__members__:
            raise MetadataAccessError(
                self.type_name, repr(member), "composite Flag values are not declared members"
            )
        return self._entries.get(member.name, _EMPTY)

    def rows(self) -> List[ResolutionRow]:
        """Return the resolution table in declaration order (aliases excluded)."""
        rows: List[ResolutionRow] = []
        for member in self.enum_type:
            annotation = self.annotation_for(member)
            rows.append(
                ResolutionRow(
                    name=member.name,
                    wire_constant=annotation.wire_constant,
                    description=annotation.description,
                )
            )
        return rows

    def __iter__(self) -> Iterator[Enum]:
        return iter(self.enum_type)

    def annotated_count(self) -> int:
        """Number of members carrying an annotation."""
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AnnotationTable({self.enum_type.__name__}, {dict(self._entries)!r})"


__all__ = ["MemberAnnotation", "ResolutionRow", "AnnotationTable"]
