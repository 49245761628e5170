"""Tests for decoding NS API responses"""

import dataclasses

import xml.etree.ElementTree as etree

from nationscripts.enums import DeathCause, NationShard, RegionShard, WAShard, WorldShard
from nationscripts.responses import Nation, Region, World, WorldAssembly


def xml(text: str) -> etree.Element:
    return etree.fromstring(text)


class TestNation:
    NODE = xml(
        """<NATION id="testlandia">
            <NAME>Testlandia</NAME>
            <VERIFY>1</VERIFY>
            <LEADER>Max Barry</LEADER>
            <LEADER>Custom Leader</LEADER>
            <MOTTO>Test all the things</MOTTO>
            <POPULATION>42543</POPULATION>
            <REGION>Testregionia</REGION>
            <TAX>12.5</TAX>
            <TGCANRECRUIT>1</TGCANRECRUIT>
            <ENDORSEMENTS>a,b,c</ENDORSEMENTS>
            <CENSUS>
                <SCALE id="0"><SCORE>67.73</SCORE><RANK>1042</RANK><PRANK>12</PRANK></SCALE>
                <SCALE id="46"><SCORE>0.00</SCORE><RANK>5</RANK></SCALE>
            </CENSUS>
            <DEATHS>
                <CAUSE type="Old Age">90.5</CAUSE>
                <CAUSE type="Animal Attack">9.5</CAUSE>
            </DEATHS>
            <FREEDOM>
                <CIVILRIGHTS>Excellent</CIVILRIGHTS>
                <ECONOMY>Strong</ECONOMY>
                <POLITICALFREEDOM>Superb</POLITICALFREEDOM>
            </FREEDOM>
        </NATION>"""
    )

    def test_only_requested_shards_are_populated(self) -> None:
        nation = Nation.from_xml([NationShard.NAME, NationShard.POPULATION], self.NODE)

        assert nation.name == "Testlandia"
        assert nation.population == 42543
        populated = {
            field.name
            for field in dataclasses.fields(nation)
            if getattr(nation, field.name) is not None
        }
        assert populated == {"name", "population"}
        assert nation.verified is None

    def test_verify_tag_is_read_for_verification(self) -> None:
        nation = Nation.from_xml([NationShard.NAME], self.NODE, verification=True)
        assert nation.verified is True
        assert nation.population is None

    def test_custom_leader_follows_leader(self) -> None:
        both = Nation.from_xml(["leader", "customleader"], self.NODE)
        assert both.leader == "Max Barry"
        assert both.customLeader == "Custom Leader"

        custom = Nation.from_xml(["customleader"], self.NODE)
        assert custom.customLeader == "Max Barry"
        assert custom.leader is None

    def test_absent_tag_is_none(self) -> None:
        nation = Nation.from_xml([NationShard.CAPITAL], self.NODE)
        assert nation.capital is None

    def test_values(self) -> None:
        nation = Nation.from_xml(
            ["tax", "tgcanrecruit", "endorsements", "freedom", "unknownshard"], self.NODE
        )
        assert nation.tax == 12.5
        assert nation.tgCanRecruit is True
        assert nation.endorsementList == ["a", "b", "c"]
        assert nation.freedom is not None
        assert nation.freedom.economy == "Strong"

    def test_census(self) -> None:
        census = Nation.from_xml([NationShard.CENSUS], self.NODE).census

        assert census is not None
        assert set(census) == {0, 46}
        assert census[0].score == 67.73
        assert census[0].rank == 1042
        assert census[0].percentage == 12
        assert census[0].regionalRank is None
        assert census[46].score == 0

    def test_deaths_default_to_zero(self) -> None:
        deaths = Nation.from_xml([NationShard.DEATHS], self.NODE).deaths

        assert deaths is not None
        assert deaths["Old Age"] == 90.5
        assert deaths["Animal Attack"] == 9.5
        assert deaths[DeathCause.WAR.value] == 0.0
        assert len(deaths) == len(DeathCause)


class TestRegion:
    NODE = xml(
        """<REGION id="testregionia">
            <NAME>Testregionia</NAME>
            <DELEGATEVOTES>17</DELEGATEVOTES>
            <DISPATCHES>100,200</DISPATCHES>
            <FOUNDEDTIME>1045000000</FOUNDEDTIME>
            <DELEGATEAUTH>XWA</DELEGATEAUTH>
            <EMBASSIES>
                <EMBASSY>The Pacific</EMBASSY>
                <EMBASSY type="pending">Lazarus</EMBASSY>
                <EMBASSY type="closing">Osiris</EMBASSY>
                <EMBASSY type="invited">Balder</EMBASSY>
            </EMBASSIES>
            <GAVOTE><FOR>10</FOR><AGAINST>3</AGAINST></GAVOTE>
            <SCVOTE><FOR>1</FOR><AGAINST>20</AGAINST></SCVOTE>
            <MOSTLIKES>
                <NATION><NAME>giver</NAME><LIKES>50</LIKES></NATION>
            </MOSTLIKES>
            <MOSTLIKED>
                <NATION><NAME>receiver</NAME><LIKED>80</LIKED></NATION>
                <NATION><NAME>second</NAME><LIKED>70</LIKED></NATION>
            </MOSTLIKED>
            <OFFICERS>
                <OFFICER><NATION>b</NATION><OFFICE>Minister</OFFICE><AUTHORITY>C</AUTHORITY><ORDER>2</ORDER></OFFICER>
                <OFFICER><NATION>a</NATION><OFFICE>Chancellor</OFFICE><AUTHORITY>BE</AUTHORITY><ORDER>1</ORDER></OFFICER>
            </OFFICERS>
            <MESSAGES>
                <POST id="9001">
                    <TIMESTAMP>1600000000</TIMESTAMP>
                    <NATION>testlandia</NATION>
                    <STATUS>0</STATUS>
                    <LIKERS>a,b</LIKERS>
                    <MESSAGE>Hello</MESSAGE>
                </POST>
            </MESSAGES>
        </REGION>"""
    )

    def test_delegate_votes_do_not_leak(self) -> None:
        region = Region.from_xml([RegionShard.DELEGATE_VOTE_WEIGHT], self.NODE)
        assert region.delegateWAWeight == 17
        assert region.pinnedDispatchIDs is None

        region = Region.from_xml([RegionShard.DISPATCHES], self.NODE)
        assert region.pinnedDispatchIDs == ["100", "200"]
        assert region.delegateWAWeight is None

    def test_messages_do_not_leak(self) -> None:
        region = Region.from_xml([RegionShard.RMB_MESSAGES], self.NODE)
        assert region.officers is None
        assert region.messages is not None

        post = region.messages[0]
        assert post.id == 9001
        assert post.author == "testlandia"
        assert post.likers == ["a", "b"]
        assert post.text == "Hello"
        assert post.edited is None

    def test_embassies(self) -> None:
        embassies = Region.from_xml([RegionShard.EMBASSIES], self.NODE).embassies

        assert embassies is not None
        assert embassies.extant == ["The Pacific"]
        assert embassies.opening == ["Lazarus"]
        assert embassies.closing == ["Osiris"]
        assert embassies.invited == ["Balder"]
        assert embassies.denied == []

    def test_tallies(self) -> None:
        region = Region.from_xml([RegionShard.VOTE_GA, RegionShard.VOTE_SC], self.NODE)

        assert region.tallyGA is not None
        assert (region.tallyGA.votesFor, region.tallyGA.votesAgainst) == (10, 3)
        assert region.tallySC is not None
        assert (region.tallySC.votesFor, region.tallySC.votesAgainst) == (1, 20)

    def test_rmb_toplists(self) -> None:
        region = Region.from_xml(
            [RegionShard.MOST_RMB_LIKES_GIVEN, RegionShard.MOST_RMB_LIKES_RECEIVED], self.NODE
        )

        assert region.rmbTopLikers is not None
        assert [(entry.nation, entry.count) for entry in region.rmbTopLikers] == [("giver", 50)]
        assert region.rmbTopLiked is not None
        assert [entry.nation for entry in region.rmbTopLiked] == ["receiver", "second"]
        assert region.rmbTopLiked[0].count == 80

    def test_founded_time_and_authority(self) -> None:
        region = Region.from_xml(
            [RegionShard.FOUNDED_TIME, RegionShard.DELEGATE_AUTHORITY], self.NODE
        )
        assert region.foundedTime == 1045000000
        assert region.delegateAuthority == ["X", "W", "A"]

    def test_officers_are_ordered(self) -> None:
        officers = Region.from_xml([RegionShard.OFFICERS], self.NODE).officers

        assert officers is not None
        assert [officer.nation for officer in officers] == ["a", "b"]
        assert officers[0].authority == ["B", "E"]


class TestWorld:
    def test_regions_and_tag_search(self) -> None:
        node = xml("<WORLD><REGIONS>a,b,c</REGIONS><REGIONS>b</REGIONS></WORLD>")

        world = World.from_xml([WorldShard.REGIONS, WorldShard.REGIONS_BY_TAG], node)
        assert world.regions == ["a", "b", "c"]
        assert world.tagSearchResults == ["b"]

        tagged = World.from_xml([WorldShard.REGIONS_BY_TAG], xml("<WORLD><REGIONS>b</REGIONS></WORLD>"))
        assert tagged.tagSearchResults == ["b"]
        assert tagged.regions is None

    def test_banners(self) -> None:
        node = xml(
            "<WORLD><BANNERS><BANNER id='b1'><NAME>Going Green</NAME>"
            "<VALIDITY>Found a nation</VALIDITY></BANNER></BANNERS></WORLD>"
        )
        banners = World.from_xml([WorldShard.BANNER], node).banners

        assert banners is not None
        assert banners[0].id == "b1"
        assert banners[0].name == "Going Green"

    def test_dispatch(self) -> None:
        node = xml(
            "<WORLD><DISPATCH id='1'><TITLE>Hello</TITLE><AUTHOR>testlandia</AUTHOR>"
            "<CATEGORY>Meta</CATEGORY><SUBCATEGORY>Reference</SUBCATEGORY>"
            "<VIEWS>10</VIEWS><TEXT>Body</TEXT></DISPATCH></WORLD>"
        )
        dispatch = World.from_xml([WorldShard.DISPATCH], node).dispatch

        assert dispatch is not None
        assert dispatch.id == 1
        assert dispatch.category == "Meta:Reference"
        assert dispatch.views == 10
        assert dispatch.text == "Body"


class TestWorldAssembly:
    def test_resolution_with_voters(self) -> None:
        node = xml(
            """<WA council="1">
                <RESOLUTION>
                    <CATEGORY>Health</CATEGORY>
                    <CREATED>1600000000</CREATED>
                    <DESC>Text of the resolution</DESC>
                    <ID>testlandia_1600000000</ID>
                    <NAME>Healthy Resolution</NAME>
                    <PROMOTED>1600100000</PROMOTED>
                    <PROPOSED_BY>testlandia</PROPOSED_BY>
                    <TOTAL_NATIONS_AGAINST>50</TOTAL_NATIONS_AGAINST>
                    <TOTAL_NATIONS_FOR>100</TOTAL_NATIONS_FOR>
                    <TOTAL_VOTES_AGAINST>500</TOTAL_VOTES_AGAINST>
                    <TOTAL_VOTES_FOR>1000</TOTAL_VOTES_FOR>
                    <VOTES_FOR><N>a</N><N>b</N></VOTES_FOR>
                    <VOTES_AGAINST><N>c</N></VOTES_AGAINST>
                </RESOLUTION>
            </WA>"""
        )
        wa = WorldAssembly.from_xml([WAShard.VOTERS, WAShard.RESOLUTION_AT_VOTE], node)

        assert wa.council == 1
        assert wa.voters is not None
        assert wa.voters.votesFor == ["a", "b"]
        assert wa.voters.votesAgainst == ["c"]

        resolution = wa.resolutionAtVote
        assert resolution is not None
        assert resolution.council == 1
        assert resolution.title == "Healthy Resolution"
        assert resolution.votingStarted == 1600100000
        assert resolution.votes is not None
        assert resolution.votes.tallyFor == 1000
        assert resolution.votes.nationsAgainst == 50

    def test_proposals(self) -> None:
        node = xml(
            """<WA council="1">
                <PROPOSALS>
                    <PROPOSAL id="testlandia_1">
                        <APPROVALS>a:b:c</APPROVALS>
                        <CATEGORY>Education</CATEGORY>
                        <COAUTHOR><N>new_leftopia</N></COAUTHOR>
                        <CREATED>1600000000</CREATED>
                        <DESC>Proposal text</DESC>
                        <ID>testlandia_1</ID>
                        <NAME>Learning Act</NAME>
                        <OPTION>0</OPTION>
                        <PROPOSED_BY>testlandia</PROPOSED_BY>
                        <GENSEC>
                            <LEGAL><N>sec1</N></LEGAL>
                            <ILLEGAL />
                            <DISCARD><N>sec2</N></DISCARD>
                            <LOG>
                                <ENTRY><T>1600000100</T><NATION>sec1</NATION><DECISION>Legal</DECISION><REASON>Fine</REASON></ENTRY>
                            </LOG>
                        </GENSEC>
                    </PROPOSAL>
                </PROPOSALS>
            </WA>"""
        )
        proposals = WorldAssembly.from_xml([WAShard.PROPOSALS], node).proposals

        assert proposals is not None
        proposal = proposals[0]
        assert proposal.id == "testlandia_1"
        assert proposal.council == 1
        assert proposal.approvals == ["a", "b", "c"]
        assert proposal.coauthors == ["new_leftopia"]
        assert proposal.author == "testlandia"
        assert proposal.votes is None
        assert proposal.votingStarted is None

        assert proposal.legality is not None
        assert proposal.legality.legal == ["sec1"]
        assert proposal.legality.illegal == []
        assert proposal.legality.discard == ["sec2"]
        assert proposal.legality.log[0].decision == "Legal"
        assert proposal.legality.log[0].timestamp == 1600000100

    def test_council_without_shards(self) -> None:
        wa = WorldAssembly.from_xml([], xml('<WA council="2"><NUMNATIONS>5</NUMNATIONS></WA>'))
        assert wa.council == 2
        assert wa.numMembers is None
