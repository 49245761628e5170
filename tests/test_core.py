"""Tests for the shared helpers of nationscripts.core"""

import pytest

from nationscripts.core import as_xml, clean_format, joined_parameter, wire_value
from nationscripts.enums import CensusMode, CensusScale, NationShard
from nationscripts.exceptions import RemoteError


@pytest.mark.parametrize(
    "name,expected",
    [
        ("New Leftopia", "new_leftopia"),
        ("Testlandia", "testlandia"),
        ("the_south_pacific", "the_south_pacific"),
        ("The  Two Spaces", "the__two_spaces"),
    ],
)
def test_clean_format(name: str, expected: str) -> None:
    assert clean_format(name) == expected


def test_wire_value_reduces_enums() -> None:
    assert wire_value(NationShard.POPULATION) == "population"
    assert wire_value(CensusScale.ECONOMY) == "1"
    assert wire_value(12) == "12"
    assert wire_value("text") == "text"


def test_joined_parameter() -> None:
    assert joined_parameter(CensusMode.SCORE, CensusMode.RANK_WORLD) == "score+rank"
    assert joined_parameter(1, "all") == "1+all"


def test_as_xml_returns_root() -> None:
    root = as_xml("<NATION id='testlandia'><NAME>Testlandia</NAME></NATION>")
    assert root.tag == "NATION"
    assert root.get("id") == "testlandia"


@pytest.mark.parametrize("body", ["", "   \n", "<NATION><NAME></NATION>", "not xml"])
def test_as_xml_rejects_bad_bodies(body: str) -> None:
    with pytest.raises(RemoteError):
        as_xml(body)
