"""Tests for the records nested in responses"""

import xml.etree.ElementTree as etree

from nationscripts import models
from nationscripts.responses import Nation


def test_issue() -> None:
    issue = models.Issue.from_xml(
        etree.fromstring(
            """<ISSUE id="12">
                <TITLE>Sample Issue</TITLE>
                <TEXT>Something happened.</TEXT>
                <AUTHOR>testlandia</AUTHOR>
                <EDITOR>a, b</EDITOR>
                <PIC1>p1</PIC1>
                <OPTION id="0">Do this.</OPTION>
                <OPTION id="1">Do that.</OPTION>
            </ISSUE>"""
        )
    )
    assert issue.id == 12
    assert issue.editors == ["a", "b"]
    assert issue.pictures == ["p1"]
    assert issue.options == {0: "Do this.", 1: "Do that."}


def test_notice() -> None:
    notice = models.Notice.from_xml(
        etree.fromstring(
            "<NOTICE><NEW>1</NEW><TITLE>Endorsed</TITLE><TYPE>END</TYPE>"
            "<TIMESTAMP>1600000000</TIMESTAMP></NOTICE>"
        )
    )
    assert notice.unread is True
    assert notice.ok is False
    assert notice.type == "END"
    assert notice.timestamp == 1600000000


def test_poll_options_by_id() -> None:
    poll = models.Poll.from_xml(
        etree.fromstring(
            """<POLL id="5">
                <TITLE>Best colour?</TITLE>
                <START>1</START><STOP>2</STOP>
                <OPTIONS>
                    <OPTION id="0"><OPTIONTEXT>Red</OPTIONTEXT><VOTERS>a:b</VOTERS></OPTION>
                    <OPTION id="1"><OPTIONTEXT>Blue</OPTIONTEXT><VOTERS></VOTERS></OPTION>
                </OPTIONS>
            </POLL>"""
        )
    )
    assert poll.id == 5
    assert poll.end == 2
    assert poll.options[0].voters == ["a", "b"]
    assert poll.options[1].voters == []
    assert poll.options[1].description == "Blue"


def test_census_ranks() -> None:
    ranks = models.CensusRanks.from_xml(
        etree.fromstring(
            """<CENSUSRANKS id="3"><NATIONS>
                <NATION><NAME>a</NAME><RANK>1</RANK><SCORE>9.5</SCORE></NATION>
                <NATION><NAME>b</NAME><RANK>2</RANK><SCORE>8</SCORE></NATION>
            </NATIONS></CENSUSRANKS>"""
        )
    )
    assert ranks.id == 3
    assert [(rank.nation, rank.rank) for rank in ranks.nations] == [("a", 1), ("b", 2)]


def test_hdi_reads_nation_tags() -> None:
    nation = Nation.from_xml(
        ["hdi"],
        etree.fromstring(
            "<NATION><HDI>80.5</HDI><HDI-ECONOMY>70</HDI-ECONOMY>"
            "<HDI-SMART>90</HDI-SMART><HDI-LIFESPAN>81.5</HDI-LIFESPAN></NATION>"
        ),
    )
    assert nation.hdi == models.HDI(score=80.5, economy=70, smartness=90, lifespan=81.5)


def test_badges() -> None:
    badge = models.WABadgeAward.from_xml(etree.fromstring('<WABADGE type="commend">123</WABADGE>'))
    assert badge == models.WABadgeAward(type="commend", resolution=123)
