import logging

import pytest

from ffbot.errors import UnknownCodeWarning
from ffbot.normalize import POSITION_CODES, STATUS_CODES, normalize_status, position_id


@pytest.mark.parametrize("code, label", sorted(STATUS_CODES.items()))
def test_known_status_codes_decode(code, label):
    assert normalize_status(code) == label


def test_status_lookup_is_case_insensitive():
    assert normalize_status("Q") == "questionable"
    assert normalize_status("SSPD") == "suspended"


def test_unknown_status_passes_through_lowercased(caplog):
    warnings = []
    with caplog.at_level(logging.WARNING, logger="ffbot.normalize"):
        assert normalize_status("DTD", warnings) == "dtd"

    assert len(caplog.records) == 1
    assert "dtd" in caplog.records[0].getMessage()
    assert len(warnings) == 1
    assert isinstance(warnings[0], UnknownCodeWarning)
    assert warnings[0].code == "dtd"


def test_unknown_status_warns_once_per_occurrence(caplog):
    with caplog.at_level(logging.WARNING, logger="ffbot.normalize"):
        normalize_status("x")
        normalize_status("x")

    assert len(caplog.records) == 2


def test_known_status_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING):
        normalize_status("ir")
    assert caplog.records == []


def test_position_ids():
    assert position_id("qb") == 0
    assert position_id("FLEX") == 23
    assert position_id("d") == 16
    assert position_id("ol") is None
    assert position_id(None) is None


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        STATUS_CODES["dtd"] = "day to day"
    with pytest.raises(TypeError):
        POSITION_CODES["ol"] = 99
