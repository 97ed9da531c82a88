"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class AnnotationKind(str, Enum):
    """Kinds of string annotation a member can carry.

    Values are strings to ease YAML and CLI interchange.
    """

    WIRE_CONSTANT = "wire_constant"
    DESCRIPTION = "description"


__all__ = ["AnnotationKind"]
