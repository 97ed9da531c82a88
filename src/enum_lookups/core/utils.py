"""Core utility functions for enum lookups.

This module provides shared string helpers used across the project.
"""

from __future__ import annotations

from typing import Optional

from enum_lookups.config import get_match_policy
from enum_lookups.core.enums import AnnotationKind


def qualified_type_name(obj_type: type) -> str:
    """Return ``module.QualName`` for a type, used in error messages."""
    return f"{obj_type.__module__}.{obj_type.__qualname__}"


def equals_ignoring_case(a: Optional[str], b: Optional[str]) -> bool:
    """Compare two strings case-insensitively, treating None like "".

    Two absent/empty values are equal; one absent/empty value never equals a
    non-empty one. Casing uses ``str.casefold`` so results do not depend on
    the process locale.

    Args:
        a: First string, may be None.
        b: Second string, may be None.

    Returns:
        True when the strings are equal ignoring case.

    Examples:
        >>> equals_ignoring_case("ABC", "abc")
        True
        >>> equals_ignoring_case(None, "")
        True
        >>> equals_ignoring_case(None, "a")
        False
        >>> equals_ignoring_case("STRASSE", "straße")
        True
    """
    a_empty = not a
    b_empty = not b
    if a_empty and b_empty:
        return True
    if a_empty != b_empty:
        return False
    return a.casefold() == b.casefold()  # type: ignore[union-attr]


def annotation_matches(kind: AnnotationKind, candidate: Optional[str], text: Optional[str]) -> bool:
    """Compare an annotation value with input text under the policy for its kind."""
    if get_match_policy(kind):
        return equals_ignoring_case(candidate, text)
    return candidate == text


def annotation_key(kind: AnnotationKind, value: str) -> str:
    """Normalise an annotation value so equal-matching values share a key."""
    if get_match_policy(kind):
        return value.casefold()
    return value


__all__ = [
    "annotation_key",
    "annotation_matches",
    "equals_ignoring_case",
    "qualified_type_name",
]
