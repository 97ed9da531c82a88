"""Error types raised by annotation lookups and conversions.

- EnumLookupError: base class for everything raised by this package
- NoMatchError: reverse conversion found no matching member
- MetadataAccessError: a type's annotations could not be read or attached
- DuplicateAnnotationError: strict table construction found a shared string
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Type

from .utils import qualified_type_name


class EnumLookupError(Exception):
    """Base exception for enum lookup errors."""


class NoMatchError(EnumLookupError, ValueError):
    """No member name, wire constant or description matched the text.

    Attributes:
        text: The text that was being converted (may be None or empty).
        enum_type: The enum class the text was converted against.
    """

    def __init__(self, text: Optional[str], enum_type: Type[Enum]) -> None:
        self.text = text
        self.enum_type = enum_type
        super().__init__(
            f"Could not convert '{text}' to a {qualified_type_name(enum_type)} value."
        )


class MetadataAccessError(EnumLookupError, RuntimeError):
    """Reading or attaching a member's annotations failed.

    This points at a broken type definition or annotation source, so it is
    never retried. The original exception is chained as ``__cause__``.

    Attributes:
        type_name: Qualified name of the enum type involved.
        member_name: Name of the member being inspected.
    """

    def __init__(self, type_name: str, member_name: str, reason: str) -> None:
        self.type_name = type_name
        self.member_name = member_name
        self.reason = reason
        super().__init__(
            f"Error getting annotations for enum '{type_name}', value '{member_name}': {reason}"
        )


class DuplicateAnnotationError(EnumLookupError, ValueError):
    """Two or more members of one type share a wire constant or description."""

    def __init__(
        self, enum_type: Type[Enum], kind: str, value: str, members: Sequence[str]
    ) -> None:
        self.enum_type = enum_type
        self.kind = kind
        self.value = value
        self.members = list(members)
        super().__init__(
            f"Duplicate {kind} '{value}' in {qualified_type_name(enum_type)}: "
            f"shared by {', '.join(self.members)}"
        )


__all__ = [
    "EnumLookupError",
    "NoMatchError",
    "MetadataAccessError",
    "DuplicateAnnotationError",
]
