"""Shared pytest fixtures for annotation and conversion tests."""

import pytest

from enum_lookups.core.registry import clear_annotations, register_annotations
from sample_enums import (
    CARRIER_ANNOTATIONS,
    PRIORITY_ANNOTATIONS,
    STATUS_ANNOTATIONS,
    Carrier,
    Priority,
    Status,
)


@pytest.fixture(autouse=True)
def clean_registry():
    """Start and finish every test with an empty annotation registry."""
    clear_annotations()
    yield
    clear_annotations()


@pytest.fixture
def status():
    """Status with Active annotated ("A", "Currently Active") and Inactive bare."""
    register_annotations(Status, STATUS_ANNOTATIONS)
    return Status


@pytest.fixture
def carrier():
    """Carrier whose wire constants and descriptions overlap other members' names."""
    register_annotations(Carrier, CARRIER_ANNOTATIONS)
    return Carrier


@pytest.fixture
def priority():
    """Priority with a falsy member and a case-insensitive duplicate wire constant."""
    register_annotations(Priority, PRIORITY_ANNOTATIONS)
    return Priority


@pytest.fixture
def annotations_yaml(tmp_path):
    """YAML annotations file covering Status and Carrier."""
    path = tmp_path / "annotations.yaml"
    path.write_text(
        "annotations:\n"
        "  Status:\n"
        "    Active: {wire_constant: ACT, description: Active now}\n"
        "    Inactive: {description: Not in use}\n"
        "  Carrier:\n"
        "    Sea: S\n",
        encoding="utf-8",
    )
    return path
