"""Tests for forward (member -> str) and reverse (str -> member) conversion."""

from enum import Flag

import pytest

from enum_lookups import config
from enum_lookups.core.conversion import (
    get_attribute_string,
    parse_enum,
    parse_enum_or_default,
    to_description,
    to_wire_constant,
    try_parse_enum,
)
from enum_lookups.core.enums import AnnotationKind
from enum_lookups.core.errors import MetadataAccessError, NoMatchError
from enum_lookups.core.registry import register_annotations
from sample_enums import STATUS_ANNOTATIONS, Unannotated


class TestForwardConversion:
    """to_wire_constant() / to_description() with name fallback."""

    def test_status_scenario(self, status):
        assert to_wire_constant(status.Active) == "A"
        assert to_wire_constant(status.Inactive) == "Inactive"
        assert to_description(status.Active) == "Currently Active"
        assert to_description(status.Inactive) == "Inactive"

    def test_every_member_converts(self, status):
        """Annotated members return their strings, others their name."""
        for member in status:
            declared = STATUS_ANNOTATIONS.get(member.name)
            if declared is None:
                assert to_wire_constant(member) == member.name
                assert to_description(member) == member.name
            else:
                assert (to_wire_constant(member), to_description(member)) == declared

    def test_mapping_and_annotation_forms(self, carrier):
        assert to_wire_constant(carrier.Ground) == "Air"
        assert to_description(carrier.Rail) == "s"

    def test_alias_converts_as_canonical_member(self, carrier):
        assert to_wire_constant(carrier.Truck) == "Air"

    def test_unannotated_type_uses_names(self):
        assert to_wire_constant(Unannotated.First) == "First"
        assert to_description(Unannotated.Second) == "Second"

    def test_empty_annotation_is_returned_as_is(self, priority):
        assert to_wire_constant(priority.Blank) == ""
        assert to_description(priority.Blank) == ""

    def test_get_attribute_string(self, status):
        assert get_attribute_string(status.Active, AnnotationKind.DESCRIPTION) == "Currently Active"

    def test_not_an_enum_member(self):
        with pytest.raises(MetadataAccessError):
            to_wire_constant("Active")


class TestParseEnum:
    """parse_enum(): name, then wire constant (any case), then description (exact)."""

    def test_status_scenario(self, status):
        assert parse_enum(status, "Active") is status.Active
        assert parse_enum(status, "A") is status.Active
        assert parse_enum(status, "a") is status.Active
        assert parse_enum(status, "Currently Active") is status.Active
        assert parse_enum(status, "Inactive") is status.Inactive

    def test_member_names_are_case_sensitive(self, status):
        with pytest.raises(NoMatchError):
            parse_enum(status, "INACTIVE")

    def test_descriptions_are_case_sensitive(self, status):
        with pytest.raises(NoMatchError):
            parse_enum(status, "currently active")

    def test_name_takes_precedence_over_wire_constant(self, carrier):
        """Ground's wire constant is "Air", but "Air" is also a member name."""
        assert parse_enum(carrier, "Air") is carrier.Air
        assert parse_enum(carrier, "air") is carrier.Ground
        assert parse_enum(carrier, "AIR-1") is carrier.Air

    def test_wire_constant_takes_precedence_over_description(self, carrier):
        """Rail's description is "s"; Sea's wire constant "S" matches first."""
        assert parse_enum(carrier, "s") is carrier.Sea
        assert parse_enum(carrier, "Boat") is carrier.Sea
        assert parse_enum(carrier, "Road") is carrier.Ground

    def test_alias_name_resolves_to_canonical_member(self, carrier):
        assert parse_enum(carrier, "Truck") is carrier.Ground

    @pytest.mark.parametrize("text", ["Boat", "Plane", "Road"])
    def test_description_round_trip(self, carrier, text):
        assert to_description(parse_enum(carrier, text)) == text

    @pytest.mark.parametrize("text", ["AIR-1", "air-1", "Air-1"])
    def test_wire_constant_any_casing(self, carrier, text):
        assert parse_enum(carrier, text) is carrier.Air

    def test_duplicate_wire_constant_first_declared_wins(self, priority):
        assert parse_enum(priority, "N") is priority.Low
        assert parse_enum(priority, "n") is priority.Low

    def test_falsy_member_is_found(self, priority):
        """IntEnum member with value 0 is still a match."""
        assert parse_enum(priority, "Low") is priority.Low
        assert parse_enum_or_default(priority, "Low", priority.High) is priority.Low

    def test_empty_and_none_match_empty_wire_constant(self, priority):
        assert parse_enum(priority, "") is priority.Blank
        assert parse_enum(priority, None) is priority.Blank

    def test_empty_and_none_without_empty_annotation(self, status):
        with pytest.raises(NoMatchError):
            parse_enum(status, "")
        with pytest.raises(NoMatchError):
            parse_enum(status, None)

    def test_no_match_error_details(self, status):
        with pytest.raises(NoMatchError) as exc_info:
            parse_enum(status, "does-not-exist")
        assert exc_info.value.text == "does-not-exist"
        assert exc_info.value.enum_type is status
        assert str(exc_info.value) == (
            "Could not convert 'does-not-exist' to a sample_enums.Status value."
        )
        assert isinstance(exc_info.value, ValueError)

    def test_unannotated_type_matches_names_only(self):
        assert parse_enum(Unannotated, "First") is Unannotated.First
        with pytest.raises(NoMatchError):
            parse_enum(Unannotated, "first")

    def test_not_an_enum_class(self):
        with pytest.raises(MetadataAccessError):
            parse_enum(dict, "Active")

    def test_name_policy_ignore_case(self, status, monkeypatch):
        monkeypatch.setattr(config, "NAME_IGNORE_CASE", True)
        assert parse_enum(status, "INACTIVE") is status.Inactive

    def test_description_policy_ignore_case(self, status, monkeypatch):
        monkeypatch.setattr(config, "DESCRIPTION_IGNORE_CASE", True)
        assert parse_enum(status, "currently active") is status.Active


class TestParseVariants:
    """try_parse_enum() and parse_enum_or_default() never raise NoMatchError."""

    def test_or_default(self, status):
        assert parse_enum_or_default(status, "does-not-exist", status.Inactive) is status.Inactive
        assert parse_enum_or_default(status, "a", status.Inactive) is status.Active
        assert parse_enum_or_default(status, None, status.Inactive) is status.Inactive

    def test_try_parse(self, status):
        assert try_parse_enum(status, "does-not-exist") is None
        assert try_parse_enum(status, "Currently Active") is status.Active


class Permission(Flag):
    R = 4
    W = 2
    X = 1
    RW = 6


class TestFlagValues:
    """Declared Flag members convert; composite values are rejected."""

    def test_declared_members(self):
        register_annotations(Permission, {"R": "read", "RW": ("rw", "Read/write")})
        assert to_wire_constant(Permission.R) == "read"
        assert to_wire_constant(Permission.W) == "W"
        assert to_description(Permission.RW) == "Read/write"
        assert parse_enum(Permission, "READ") is Permission.R
        assert parse_enum(Permission, "RW") is Permission.RW

    def test_composite_value_rejected(self):
        with pytest.raises(MetadataAccessError, match="composite Flag values"):
            to_wire_constant(Permission.W | Permission.X)

    def test_composite_text_does_not_parse(self):
        with pytest.raises(NoMatchError):
            parse_enum(Permission, "W|X")
