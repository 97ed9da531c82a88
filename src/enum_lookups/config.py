"""Matching policy configuration.

This module centralizes the string comparison rules used by reverse conversion
(text -> member) and by duplicate detection when annotation tables are built.

Policy values:
    - True: compare case-insensitively (``equals_ignoring_case``)
    - False: compare exactly

The wire constant / description asymmetry below is long-standing behaviour that
persisted data relies on. Change it only together with the data.
"""

from __future__ import annotations

from enum_lookups.core.enums import AnnotationKind

# ============================================================================
# MATCH POLICY CONSTANTS
# ============================================================================

# Member names follow Enum.__getitem__, which is case sensitive
NAME_IGNORE_CASE = False

# Wire constants come from storage and external systems with mixed casing
WIRE_CONSTANT_IGNORE_CASE = True

# Descriptions are matched exactly as declared
DESCRIPTION_IGNORE_CASE = False


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_match_policy(kind: AnnotationKind | str) -> bool:
    """Return whether annotations of a kind are compared ignoring case.

    Args:
        kind: Annotation kind, either the enum member or its string value
            (e.g., "wire_constant").

    Returns:
        True for case-insensitive matching, False for exact matching.

    Raises:
        ValueError: If kind is not a known annotation kind.

    Examples:
        >>> get_match_policy(AnnotationKind.WIRE_CONSTANT)
        True
        >>> get_match_policy("description")
        False
    """
    try:
        kind = AnnotationKind(kind)
    except ValueError:
        raise ValueError(
            f"Unknown annotation kind: {kind}. "
            f"Valid kinds: {[k.value for k in AnnotationKind]}"
        ) from None
    if kind == AnnotationKind.WIRE_CONSTANT:
        return WIRE_CONSTANT_IGNORE_CASE
    return DESCRIPTION_IGNORE_CASE
