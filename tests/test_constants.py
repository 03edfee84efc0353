"""
Unit tests for sspmapper.constants.
"""

import pytest

from sspmapper.constants import (
    CONTROL_ORIGINATION,
    IMPLEMENTATION_STATUS,
    STATUS_VOCABULARY,
    status_ordinal,
)


def test_implementation_status_ordinals():
    assert dict(IMPLEMENTATION_STATUS) == {
        "implemented": 0,
        "partially-implemented": 1,
        "planned": 2,
        "alternative-implementation": 3,
        "not-applicable": 4,
    }


def test_control_origination_ordinals():
    assert list(CONTROL_ORIGINATION.values()) == list(range(5, 12))
    assert CONTROL_ORIGINATION["shared"] == 10
    assert CONTROL_ORIGINATION["inherited"] == 11


def test_vocabulary_is_read_only():
    with pytest.raises(TypeError):
        IMPLEMENTATION_STATUS["new-status"] = 99
    with pytest.raises(TypeError):
        STATUS_VOCABULARY["other"] = {}


def test_status_ordinal_lookup():
    assert status_ordinal("implementation-status", "planned") == 2
    assert status_ordinal("control-origination", "configured-by-customer") == 8
    assert status_ordinal("implementation-status", "unknown") is None
    assert status_ordinal("not-a-prop", "planned") is None
