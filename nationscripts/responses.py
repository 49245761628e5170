"""Response objects decoded from NS API XML.

Each shard-gated response declares a SHARDS table mapping a shard's wire token
to the field it populates and the extractor that reads it.
A field is only populated if its shard was requested; otherwise it stays None.
"""

from __future__ import annotations

import dataclasses
import logging
import typing as t
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

import xml.etree.ElementTree as etree

from nationscripts import models
from nationscripts.core import wire_value
from nationscripts.enums import NationPrivateShard, NationShard, RegionShard, WAShard, WorldShard
from nationscripts.parser import NodeParse, content, split as split_text, to_number

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "ShardedResponse",
    "Nation",
    "Region",
    "World",
    "WorldAssembly",
    "AnsweredIssue",
]

Extractor = Callable[[NodeParse, Sequence[str]], Any]


# # Extractors
# """Small factories describing how a shard is read from the root node"""
def text(tag: str, convert: Optional[Callable[[str], Any]] = None) -> Extractor:
    """Reads the stripped text of a tag, optionally converting it."""

    def extract(data: NodeParse, shards: Sequence[str]) -> Any:
        value = data.text(tag)
        return value if value is None or convert is None else convert(value)

    return extract


def number(tag: str) -> Extractor:
    """Reads the numeric content of a tag."""
    return lambda data, shards: data.number(tag)


def boolean(tag: str) -> Extractor:
    """Reads a 1/0 tag as a bool."""

    def extract(data: NodeParse, shards: Sequence[str]) -> Optional[bool]:
        value = data.number(tag)
        return None if value is None else value == 1

    return extract


def split(tag: str, separator: str) -> Extractor:
    """Reads a delimited tag as a list of strings."""
    return lambda data, shards: split_text(data.text(tag), separator)


def children(tag: str, childTag: str) -> Extractor:
    """Reads the text of each childTag node inside a tag."""

    def extract(data: NodeParse, shards: Sequence[str]) -> Optional[List[str]]:
        node = data.find(tag)
        if node is None:
            return None
        return [content(child).strip() for child in node.findall(childTag)]

    return extract


def aliased(
    tag: str, baseShard: t.Any, convert: Optional[Callable[[str], Any]] = None
) -> Extractor:
    """Reads a shard that shares its tag with another shard.

    NS returns both under the same tag, the base shard first, so the second
    occurence is read if the base shard was also requested.
    """
    base = wire_value(baseShard)

    def extract(data: NodeParse, shards: Sequence[str]) -> Any:
        value = data.text(tag, 1 if base in shards else 0)
        return value if value is None or convert is None else convert(value)

    return extract


def nested(tag: str, parse: Callable[[etree.Element], Any]) -> Extractor:
    """Parses the first node with the tag into a record."""

    def extract(data: NodeParse, shards: Sequence[str]) -> Any:
        node = data.find(tag)
        return None if node is None else parse(node)

    return extract


def listing(tag: str, childTag: str, parse: Callable[[etree.Element], Any]) -> Extractor:
    """Parses each childTag node inside a tag into a record."""

    def extract(data: NodeParse, shards: Sequence[str]) -> Optional[List[Any]]:
        node = data.find(tag)
        if node is None:
            return None
        return [parse(child) for child in node.findall(childTag)]

    return extract


def _hdi(data: NodeParse, shards: Sequence[str]) -> Optional[models.HDI]:
    return models.HDI.from_parse(data) if data.has_name("HDI") else None


def _scores(node: etree.Element) -> models.Freedoms[t.Any]:
    return models.Freedoms.from_xml(node, to_number)


def _labels(node: etree.Element) -> models.Freedoms[t.Any]:
    return models.Freedoms.from_xml(node, lambda value: value)


class ShardedResponse:
    """Base for responses whose fields are gated by the requested shards."""

    SHARDS: t.ClassVar[Mapping[str, Tuple[str, Extractor]]] = {}

    @classmethod
    def decode_shards(cls, shards: t.Iterable[t.Any], data: NodeParse) -> t.Dict[str, Any]:
        """Runs the extractor of each requested shard once.

        Returns a mapping of field name to value.
        """
        requested = [wire_value(shard) for shard in shards]
        values: t.Dict[str, Any] = {}
        for shard in requested:
            entry = cls.SHARDS.get(shard)
            if entry is None:
                logger.debug("%s does not decode shard '%s'", cls.__name__, shard)
                continue
            field, extract = entry
            values[field] = extract(data, requested)
        return values


@dataclasses.dataclass(frozen=True)
class Nation(ShardedResponse):
    """A nation in the NationStates multiverse."""

    admirable: Optional[str] = None
    admirables: Optional[Sequence[str]] = None
    animal: Optional[str] = None
    animalTrait: Optional[str] = None
    issuesAnswered: Optional[int] = None
    banner: Optional[str] = None
    banners: Optional[Sequence[str]] = None
    capital: Optional[str] = None
    category: Optional[str] = None
    census: Optional[Mapping[int, models.CensusScore]] = None
    crime: Optional[str] = None
    currency: Optional[str] = None
    customLeader: Optional[str] = None
    customCapital: Optional[str] = None
    customReligion: Optional[str] = None
    dailyCensusRegion: Optional[models.RankedCensus] = None
    dailyCensusWorld: Optional[models.RankedCensus] = None
    databaseID: Optional[int] = None
    deaths: Optional[Mapping[str, float]] = None
    demonymAdjective: Optional[str] = None
    demonymNoun: Optional[str] = None
    demonymNounPlural: Optional[str] = None
    dispatchCount: Optional[int] = None
    dispatchList: Optional[Sequence[models.Dispatch]] = None
    endorsementList: Optional[Sequence[str]] = None
    factbookCount: Optional[int] = None
    factbookList: Optional[Sequence[models.Dispatch]] = None
    firstLogin: Optional[int] = None
    flag: Optional[str] = None
    founded: Optional[str] = None
    foundedTime: Optional[int] = None
    freedom: Optional[models.Freedoms[Optional[str]]] = None
    freedomScores: Optional[models.Freedoms[t.Any]] = None
    fullName: Optional[str] = None
    gdp: Optional[int] = None
    governmentSummary: Optional[str] = None
    happenings: Optional[Sequence[models.Happening]] = None
    hdi: Optional[models.HDI] = None
    incomeMedian: Optional[int] = None
    incomePoorest: Optional[int] = None
    incomeRichest: Optional[int] = None
    industrySummary: Optional[str] = None
    influenceLevel: Optional[str] = None
    lastActivity: Optional[str] = None
    lastLogin: Optional[int] = None
    leader: Optional[str] = None
    legislation: Optional[Sequence[str]] = None
    majorIndustry: Optional[str] = None
    motto: Optional[str] = None
    name: Optional[str] = None
    notable: Optional[str] = None
    notables: Optional[Sequence[str]] = None
    policies: Optional[Sequence[models.Policy]] = None
    population: Optional[int] = None
    publicSpending: Optional[models.GovernmentSpending] = None
    region: Optional[str] = None
    religion: Optional[str] = None
    sectorPublic: Optional[float] = None
    sectors: Optional[models.Sectors] = None
    sensibilities: Optional[str] = None
    spendingPriority: Optional[str] = None
    tax: Optional[float] = None
    tgCanRecruit: Optional[bool] = None
    tgCanCampaign: Optional[bool] = None
    type: Optional[str] = None
    waStatus: Optional[str] = None
    waBadges: Optional[Sequence[models.WABadgeAward]] = None
    voteGA: Optional[str] = None
    voteSC: Optional[str] = None

    # Private shards
    dossierNations: Optional[Sequence[str]] = None
    dossierRegions: Optional[Sequence[str]] = None
    issues: Optional[Sequence[models.Issue]] = None
    issueHeadlines: Optional[Sequence[models.IssueHeadline]] = None
    nextIssue: Optional[str] = None
    nextIssueTime: Optional[int] = None
    notices: Optional[Sequence[models.Notice]] = None
    packsAvailable: Optional[int] = None
    pingSuccess: Optional[bool] = None
    unreads: Optional[models.Unreads] = None

    # Only set by verification requests
    verified: Optional[bool] = None

    SHARDS: t.ClassVar[Mapping[str, Tuple[str, Extractor]]] = {
        wire_value(shard): entry
        for shard, entry in (
            (NationShard.ADMIRABLE, ("admirable", text("ADMIRABLE"))),
            (NationShard.ADMIRABLES, ("admirables", children("ADMIRABLES", "ADMIRABLE"))),
            (NationShard.ANIMAL, ("animal", text("ANIMAL"))),
            (NationShard.ANIMAL_TRAIT, ("animalTrait", text("ANIMALTRAIT"))),
            (NationShard.ISSUES_ANSWERED, ("issuesAnswered", number("ISSUES_ANSWERED"))),
            (NationShard.BANNER, ("banner", text("BANNER"))),
            (NationShard.BANNERS, ("banners", children("BANNERS", "BANNER"))),
            (NationShard.CAPITAL, ("capital", text("CAPITAL"))),
            (NationShard.CATEGORY, ("category", text("CATEGORY"))),
            (NationShard.CENSUS, ("census", nested("CENSUS", models.census_scores))),
            (NationShard.CRIME, ("crime", text("CRIME"))),
            (NationShard.CURRENCY, ("currency", text("CURRENCY"))),
            (NationShard.CUSTOM_LEADER, ("customLeader", aliased("LEADER", NationShard.LEADER))),
            (NationShard.CUSTOM_CAPITAL, ("customCapital", aliased("CAPITAL", NationShard.CAPITAL))),
            (
                NationShard.CUSTOM_RELIGION,
                ("customReligion", aliased("RELIGION", NationShard.RELIGION)),
            ),
            (
                NationShard.REGIONAL_CENSUS,
                ("dailyCensusRegion", nested("RCENSUS", models.RankedCensus.from_xml)),
            ),
            (
                NationShard.WORLD_CENSUS,
                ("dailyCensusWorld", nested("WCENSUS", models.RankedCensus.from_xml)),
            ),
            (NationShard.DATABASE_ID, ("databaseID", number("DBID"))),
            (NationShard.DEATHS, ("deaths", nested("DEATHS", models.deaths))),
            (NationShard.DEMONYM_ADJECTIVE, ("demonymAdjective", text("DEMONYM"))),
            (NationShard.DEMONYM_NOUN, ("demonymNoun", text("DEMONYM2"))),
            (NationShard.DEMONYM_NOUN_PLURAL, ("demonymNounPlural", text("DEMONYM2PLURAL"))),
            (NationShard.DISPATCHES, ("dispatchCount", number("DISPATCHES"))),
            (
                NationShard.DISPATCH_LIST,
                ("dispatchList", listing("DISPATCHLIST", "DISPATCH", models.Dispatch.from_xml)),
            ),
            (NationShard.ENDORSEMENTS, ("endorsementList", split("ENDORSEMENTS", ","))),
            (NationShard.FACTBOOKS, ("factbookCount", number("FACTBOOKS"))),
            (
                NationShard.FACTBOOK_LIST,
                ("factbookList", listing("FACTBOOKLIST", "FACTBOOK", models.Dispatch.from_xml)),
            ),
            (NationShard.FIRST_LOGIN, ("firstLogin", number("FIRSTLOGIN"))),
            (NationShard.FLAG, ("flag", text("FLAG"))),
            (NationShard.FOUNDED, ("founded", text("FOUNDED"))),
            (NationShard.FOUNDED_TIME, ("foundedTime", number("FOUNDEDTIME"))),
            (NationShard.FREEDOM, ("freedom", nested("FREEDOM", _labels))),
            (NationShard.FREEDOM_SCORES, ("freedomScores", nested("FREEDOMSCORES", _scores))),
            (NationShard.FULL_NAME, ("fullName", text("FULLNAME"))),
            (NationShard.GDP, ("gdp", number("GDP"))),
            (NationShard.GOVERNMENT_DESCRIPTION, ("governmentSummary", text("GOVTDESC"))),
            (
                NationShard.HAPPENINGS,
                ("happenings", listing("HAPPENINGS", "EVENT", models.Happening.from_xml)),
            ),
            (NationShard.HDI, ("hdi", _hdi)),
            (NationShard.INCOME, ("incomeMedian", number("INCOME"))),
            (NationShard.INCOME_POOREST, ("incomePoorest", number("POOREST"))),
            (NationShard.INCOME_RICHEST, ("incomeRichest", number("RICHEST"))),
            (NationShard.INDUSTRY_DESCRIPTION, ("industrySummary", text("INDUSTRYDESC"))),
            (NationShard.INFLUENCE, ("influenceLevel", text("INFLUENCE"))),
            (NationShard.LAST_ACTIVITY, ("lastActivity", text("LASTACTIVITY"))),
            (NationShard.LAST_LOGIN, ("lastLogin", number("LASTLOGIN"))),
            (NationShard.LEADER, ("leader", text("LEADER"))),
            (NationShard.LEGISLATION, ("legislation", children("LEGISLATION", "LAW"))),
            (NationShard.MAJOR_INDUSTRY, ("majorIndustry", text("MAJORINDUSTRY"))),
            (NationShard.MOTTO, ("motto", text("MOTTO"))),
            (NationShard.NAME, ("name", text("NAME"))),
            (NationShard.NOTABLE, ("notable", text("NOTABLE"))),
            (NationShard.NOTABLES, ("notables", children("NOTABLES", "NOTABLE"))),
            (
                NationShard.POLICIES,
                ("policies", listing("POLICIES", "POLICY", models.Policy.from_xml)),
            ),
            (NationShard.POPULATION, ("population", number("POPULATION"))),
            (
                NationShard.GOVERNMENT_SPENDING,
                ("publicSpending", nested("GOVT", models.GovernmentSpending.from_xml)),
            ),
            (NationShard.REGION, ("region", text("REGION"))),
            (NationShard.RELIGION, ("religion", text("RELIGION"))),
            (NationShard.PUBLIC_SECTOR, ("sectorPublic", number("PUBLICSECTOR"))),
            (NationShard.SECTORS, ("sectors", nested("SECTORS", models.Sectors.from_xml))),
            (NationShard.SENSIBILITIES, ("sensibilities", text("SENSIBILITIES"))),
            (NationShard.GOVERNMENT_PRIORITY, ("spendingPriority", text("GOVTPRIORITY"))),
            (NationShard.TAX, ("tax", number("TAX"))),
            (NationShard.TG_RECRUITABLE, ("tgCanRecruit", boolean("TGCANRECRUIT"))),
            (NationShard.TG_CAMPAIGNABLE, ("tgCanCampaign", boolean("TGCANCAMPAIGN"))),
            (NationShard.TYPE, ("type", text("TYPE"))),
            (NationShard.WA_STATUS, ("waStatus", text("UNSTATUS"))),
            (
                NationShard.WA_BADGES,
                ("waBadges", listing("WABADGES", "WABADGE", models.WABadgeAward.from_xml)),
            ),
            (NationShard.VOTE_GA, ("voteGA", text("GAVOTE"))),
            (NationShard.VOTE_SC, ("voteSC", text("SCVOTE"))),
            (NationPrivateShard.DOSSIER_NATIONS, ("dossierNations", children("DOSSIER", "NATION"))),
            (NationPrivateShard.DOSSIER_REGIONS, ("dossierRegions", children("RDOSSIER", "REGION"))),
            (NationPrivateShard.ISSUES, ("issues", listing("ISSUES", "ISSUE", models.Issue.from_xml))),
            (
                NationPrivateShard.ISSUES_SUMMARY,
                (
                    "issueHeadlines",
                    listing("ISSUESUMMARY", "ISSUE", models.IssueHeadline.from_xml),
                ),
            ),
            (NationPrivateShard.NEXT_ISSUE, ("nextIssue", text("NEXTISSUE"))),
            (NationPrivateShard.NEXT_ISSUE_TIME, ("nextIssueTime", number("NEXTISSUETIME"))),
            (
                NationPrivateShard.NOTICES,
                ("notices", listing("NOTICES", "NOTICE", models.Notice.from_xml)),
            ),
            (NationPrivateShard.PACKS, ("packsAvailable", number("PACKS"))),
            (NationPrivateShard.PING, ("pingSuccess", boolean("PING"))),
            (NationPrivateShard.UNREADS, ("unreads", nested("UNREAD", models.Unreads.from_xml))),
        )
    }

    @classmethod
    def from_xml(
        cls, shards: t.Iterable[t.Any], node: etree.Element, *, verification: bool = False
    ) -> Nation:
        """Decodes a NATION node, populating only the requested shards.

        The VERIFY tag is only read for verification requests.
        """
        data = NodeParse(node)
        values = cls.decode_shards(shards, data)
        if verification:
            values["verified"] = data.number("VERIFY") == 1
        return cls(**values)


@dataclasses.dataclass(frozen=True)
class Region(ShardedResponse):
    """A region in the NationStates multiverse."""

    banner: Optional[str] = None
    bannerCreator: Optional[str] = None
    census: Optional[Mapping[int, models.CensusScore]] = None
    censusRanks: Optional[models.CensusRanks] = None
    databaseID: Optional[int] = None
    delegate: Optional[str] = None
    delegateAuthority: Optional[Sequence[str]] = None
    delegateWAWeight: Optional[int] = None
    pinnedDispatchIDs: Optional[Sequence[str]] = None
    embassies: Optional[models.Embassies] = None
    embassyRMBPosting: Optional[str] = None
    factbook: Optional[str] = None
    flag: Optional[str] = None
    founded: Optional[str] = None
    foundedTime: Optional[int] = None
    founder: Optional[str] = None
    founderAuthority: Optional[Sequence[str]] = None
    happenings: Optional[Sequence[models.Happening]] = None
    history: Optional[Sequence[models.Happening]] = None
    lastUpdate: Optional[int] = None
    messages: Optional[Sequence[models.Post]] = None
    name: Optional[str] = None
    nations: Optional[Sequence[str]] = None
    numNations: Optional[int] = None
    officers: Optional[Sequence[models.Officer]] = None
    poll: Optional[models.Poll] = None
    power: Optional[str] = None
    rmbTopPosters: Optional[Sequence[models.RMBRanking]] = None
    rmbTopLikers: Optional[Sequence[models.RMBRanking]] = None
    rmbTopLiked: Optional[Sequence[models.RMBRanking]] = None
    tags: Optional[Sequence[str]] = None
    tallyGA: Optional[models.Votes[Optional[int]]] = None
    tallySC: Optional[models.Votes[Optional[int]]] = None
    waBadges: Optional[Sequence[models.WABadgeAward]] = None

    SHARDS: t.ClassVar[Mapping[str, Tuple[str, Extractor]]] = {
        wire_value(shard): entry
        for shard, entry in (
            (RegionShard.BANNER, ("banner", text("BANNER"))),
            (RegionShard.BANNER_CREATOR, ("bannerCreator", text("BANNERBY"))),
            (RegionShard.CENSUS, ("census", nested("CENSUS", models.census_scores))),
            (
                RegionShard.CENSUS_RANKS,
                ("censusRanks", nested("CENSUSRANKS", models.CensusRanks.from_xml)),
            ),
            (RegionShard.DATABASE_ID, ("databaseID", number("DBID"))),
            (RegionShard.DELEGATE, ("delegate", text("DELEGATE"))),
            (RegionShard.DELEGATE_AUTHORITY, ("delegateAuthority", text("DELEGATEAUTH", list))),
            (RegionShard.DELEGATE_VOTE_WEIGHT, ("delegateWAWeight", number("DELEGATEVOTES"))),
            (RegionShard.DISPATCHES, ("pinnedDispatchIDs", split("DISPATCHES", ","))),
            (RegionShard.EMBASSIES, ("embassies", nested("EMBASSIES", models.Embassies.from_xml))),
            (RegionShard.EMBASSY_RMB_POSTING, ("embassyRMBPosting", text("EMBASSYRMB"))),
            (RegionShard.WFE, ("factbook", text("FACTBOOK"))),
            (RegionShard.FLAG, ("flag", text("FLAG"))),
            (RegionShard.FOUNDED, ("founded", text("FOUNDED"))),
            (RegionShard.FOUNDED_TIME, ("foundedTime", number("FOUNDEDTIME"))),
            (RegionShard.FOUNDER, ("founder", text("FOUNDER"))),
            (RegionShard.FOUNDER_AUTHORITY, ("founderAuthority", text("FOUNDERAUTH", list))),
            (
                RegionShard.HAPPENINGS,
                ("happenings", listing("HAPPENINGS", "EVENT", models.Happening.from_xml)),
            ),
            (RegionShard.HISTORY, ("history", listing("HISTORY", "EVENT", models.Happening.from_xml))),
            (RegionShard.LAST_UPDATE, ("lastUpdate", number("LASTUPDATE"))),
            (RegionShard.RMB_MESSAGES, ("messages", listing("MESSAGES", "POST", models.Post.from_xml))),
            (RegionShard.NAME, ("name", text("NAME"))),
            (RegionShard.NATIONS, ("nations", split("NATIONS", ":"))),
            (RegionShard.NUM_NATIONS, ("numNations", number("NUMNATIONS"))),
            (RegionShard.OFFICERS, ("officers", nested("OFFICERS", models.officers))),
            (RegionShard.POLL, ("poll", nested("POLL", models.Poll.from_xml))),
            (RegionShard.POWER, ("power", text("POWER"))),
            (
                RegionShard.MOST_RMB_POSTS,
                ("rmbTopPosters", nested("MOSTPOSTS", models.rmb_ranking("POSTS"))),
            ),
            (
                RegionShard.MOST_RMB_LIKES_GIVEN,
                ("rmbTopLikers", nested("MOSTLIKES", models.rmb_ranking("LIKES"))),
            ),
            (
                RegionShard.MOST_RMB_LIKES_RECEIVED,
                ("rmbTopLiked", nested("MOSTLIKED", models.rmb_ranking("LIKED"))),
            ),
            (RegionShard.TAGS, ("tags", children("TAGS", "TAG"))),
            (RegionShard.VOTE_GA, ("tallyGA", nested("GAVOTE", models.vote_tally))),
            (RegionShard.VOTE_SC, ("tallySC", nested("SCVOTE", models.vote_tally))),
            (
                RegionShard.WA_BADGES,
                ("waBadges", listing("WABADGES", "WABADGE", models.WABadgeAward.from_xml)),
            ),
        )
    }

    @classmethod
    def from_xml(cls, shards: t.Iterable[t.Any], node: etree.Element) -> Region:
        """Decodes a REGION node, populating only the requested shards."""
        return cls(**cls.decode_shards(shards, NodeParse(node)))


@dataclasses.dataclass(frozen=True)
class World(ShardedResponse):
    """Data on the NationStates world as a whole."""

    banners: Optional[Sequence[models.Banner]] = None
    census: Optional[Mapping[int, models.CensusScore]] = None
    censusDescriptor: Optional[models.CensusDescription] = None
    censusName: Optional[str] = None
    censusRanks: Optional[models.CensusRanks] = None
    censusScaleName: Optional[str] = None
    censusTitle: Optional[str] = None
    dailyCensusID: Optional[int] = None
    dispatch: Optional[models.Dispatch] = None
    dispatchList: Optional[Sequence[models.Dispatch]] = None
    featuredRegion: Optional[str] = None
    happenings: Optional[Sequence[models.Happening]] = None
    lastEventID: Optional[int] = None
    nations: Optional[Sequence[str]] = None
    newNations: Optional[Sequence[str]] = None
    numNations: Optional[int] = None
    numRegions: Optional[int] = None
    poll: Optional[models.Poll] = None
    regions: Optional[Sequence[str]] = None
    tagSearchResults: Optional[Sequence[str]] = None
    telegramQueue: Optional[models.TelegramQueue] = None

    SHARDS: t.ClassVar[Mapping[str, Tuple[str, Extractor]]] = {
        wire_value(shard): entry
        for shard, entry in (
            (WorldShard.BANNER, ("banners", listing("BANNERS", "BANNER", models.Banner.from_xml))),
            (WorldShard.CENSUS, ("census", nested("CENSUS", models.census_scores))),
            (
                WorldShard.CENSUS_DESCRIPTION,
                ("censusDescriptor", nested("CENSUSDESC", models.CensusDescription.from_xml)),
            ),
            (WorldShard.CENSUS_NAME, ("censusName", aliased("CENSUS", WorldShard.CENSUS))),
            (
                WorldShard.CENSUS_RANKS,
                ("censusRanks", nested("CENSUSRANKS", models.CensusRanks.from_xml)),
            ),
            (WorldShard.CENSUS_SCALE, ("censusScaleName", text("CENSUSSCALE"))),
            (WorldShard.CENSUS_TITLE, ("censusTitle", text("CENSUSTITLE"))),
            (WorldShard.CENSUS_ID, ("dailyCensusID", number("CENSUSID"))),
            (WorldShard.DISPATCH, ("dispatch", nested("DISPATCH", models.Dispatch.from_xml))),
            (
                WorldShard.DISPATCH_LIST,
                ("dispatchList", listing("DISPATCHLIST", "DISPATCH", models.Dispatch.from_xml)),
            ),
            (WorldShard.FEATURED_REGION, ("featuredRegion", text("FEATUREDREGION"))),
            (
                WorldShard.HAPPENINGS,
                ("happenings", listing("HAPPENINGS", "EVENT", models.Happening.from_xml)),
            ),
            (WorldShard.LAST_EVENT_ID, ("lastEventID", number("LASTEVENTID"))),
            (WorldShard.NATIONS, ("nations", split("NATIONS", ","))),
            (WorldShard.NEW_NATIONS, ("newNations", split("NEWNATIONS", ","))),
            (WorldShard.NUM_NATIONS, ("numNations", number("NUMNATIONS"))),
            (WorldShard.NUM_REGIONS, ("numRegions", number("NUMREGIONS"))),
            (WorldShard.POLL, ("poll", nested("POLL", models.Poll.from_xml))),
            (WorldShard.REGIONS, ("regions", split("REGIONS", ","))),
            (
                WorldShard.REGIONS_BY_TAG,
                (
                    "tagSearchResults",
                    aliased("REGIONS", WorldShard.REGIONS, lambda value: value.split(",") if value else []),
                ),
            ),
            (WorldShard.TG_QUEUE, ("telegramQueue", nested("TGQUEUE", models.TelegramQueue.from_xml))),
        )
    }

    @classmethod
    def from_xml(cls, shards: t.Iterable[t.Any], node: etree.Element) -> World:
        """Decodes a WORLD node, populating only the requested shards."""
        return cls(**cls.decode_shards(shards, NodeParse(node)))


def _in_resolution(extract: Extractor) -> Extractor:
    """Runs an extractor inside the RESOLUTION node, where NS places the vote details
    of the resolution at vote. Falls back to the WA node if there is none.
    """

    def scoped(data: NodeParse, shards: Sequence[str]) -> Any:
        resolution = data.find("RESOLUTION")
        return extract(data if resolution is None else NodeParse(resolution), shards)

    return scoped


def _council(data: NodeParse) -> Optional[int]:
    value = to_number(data.node.get("council"))
    return int(value) if value is not None else None


def _proposals(data: NodeParse, shards: Sequence[str]) -> Optional[List[models.WAProposal]]:
    node = data.find("PROPOSALS")
    if node is None:
        return None
    council = _council(data)
    return [models.WAProposal.from_xml(proposal, council) for proposal in node.findall("PROPOSAL")]


def _resolution(data: NodeParse, shards: Sequence[str]) -> Optional[models.WAProposal]:
    node = data.find("RESOLUTION")
    return None if node is None else models.WAProposal.from_xml(node, _council(data))


def _vote_track(data: NodeParse, shards: Sequence[str]) -> Optional[List[models.Votes[Optional[int]]]]:
    votesFor = children("VOTE_TRACK_FOR", "N")(data, shards)
    votesAgainst = children("VOTE_TRACK_AGAINST", "N")(data, shards)
    if votesFor is None or votesAgainst is None:
        return None
    return [
        models.Votes(votesFor=to_number(tallyFor), votesAgainst=to_number(tallyAgainst))
        for tallyFor, tallyAgainst in zip(votesFor, votesAgainst)
    ]


def _voters(data: NodeParse, shards: Sequence[str]) -> Optional[models.Votes[List[str]]]:
    votesFor = children("VOTES_FOR", "N")(data, shards)
    votesAgainst = children("VOTES_AGAINST", "N")(data, shards)
    if votesFor is None or votesAgainst is None:
        return None
    return models.Votes(votesFor=votesFor, votesAgainst=votesAgainst)


def _delegate_votes(
    data: NodeParse, shards: Sequence[str]
) -> Optional[models.Votes[List[models.DelegateVote]]]:
    parse = models.DelegateVote.from_xml
    votesFor = listing("DELVOTES_FOR", "DELEGATE", parse)(data, shards)
    votesAgainst = listing("DELVOTES_AGAINST", "DELEGATE", parse)(data, shards)
    if votesFor is None or votesAgainst is None:
        return None
    return models.Votes(votesFor=votesFor, votesAgainst=votesAgainst)


@dataclasses.dataclass(frozen=True)
class WorldAssembly(ShardedResponse):
    """One council of the World Assembly."""

    council: Optional[int] = None
    delegates: Optional[Sequence[str]] = None
    happenings: Optional[Sequence[models.Happening]] = None
    lastResolution: Optional[str] = None
    members: Optional[Sequence[str]] = None
    numDelegates: Optional[int] = None
    numMembers: Optional[int] = None
    proposals: Optional[Sequence[models.WAProposal]] = None
    resolutionAtVote: Optional[models.WAProposal] = None
    trackDelegates: Optional[Sequence[models.DelegateLogEntry]] = None
    trackTally: Optional[Sequence[models.Votes[Optional[int]]]] = None
    voters: Optional[models.Votes[List[str]]] = None
    votersDelegates: Optional[models.Votes[List[models.DelegateVote]]] = None

    SHARDS: t.ClassVar[Mapping[str, Tuple[str, Extractor]]] = {
        wire_value(shard): entry
        for shard, entry in (
            (WAShard.DELEGATES, ("delegates", split("DELEGATES", ","))),
            (
                WAShard.HAPPENINGS,
                ("happenings", listing("HAPPENINGS", "EVENT", models.Happening.from_xml)),
            ),
            (WAShard.LAST_RESOLUTION, ("lastResolution", text("LASTRESOLUTION"))),
            (WAShard.MEMBERS, ("members", split("MEMBERS", ","))),
            (WAShard.NUM_DELEGATES, ("numDelegates", number("NUMDELEGATES"))),
            (WAShard.NUM_MEMBERS, ("numMembers", number("NUMNATIONS"))),
            (WAShard.PROPOSALS, ("proposals", _proposals)),
            (WAShard.RESOLUTION_AT_VOTE, ("resolutionAtVote", _resolution)),
            (
                WAShard.DELEGATE_VOTE_LOG,
                (
                    "trackDelegates",
                    _in_resolution(
                        listing("DELLOG", "ENTRY", models.DelegateLogEntry.from_xml)
                    ),
                ),
            ),
            (WAShard.VOTE_TRACK, ("trackTally", _in_resolution(_vote_track))),
            (WAShard.VOTERS, ("voters", _in_resolution(_voters))),
            (WAShard.DELEGATE_VOTES, ("votersDelegates", _in_resolution(_delegate_votes))),
        )
    }

    @classmethod
    def from_xml(cls, shards: t.Iterable[t.Any], node: etree.Element) -> WorldAssembly:
        """Decodes a WA node, populating only the requested shards.
        The council is always read from the node's council attribute.
        """
        data = NodeParse(node)
        return cls(council=_council(data), **cls.decode_shards(shards, data))


@dataclasses.dataclass(frozen=True)
class AnsweredIssue:
    """The outcome of answering an issue."""

    id: Optional[int]
    choice: Optional[int]
    ok: bool
    description: Optional[str]
    headlines: Sequence[str]
    policyChanges: models.PolicyChanges
    unlockedBanners: Sequence[str]
    reclassifications: Optional[models.Reclassifications]
    censusChanges: Mapping[int, models.CensusChange]

    @classmethod
    def from_xml(cls, node: etree.Element) -> AnsweredIssue:
        """Creates an AnsweredIssue from the ISSUE node returned by the issue command."""
        data = NodeParse(node)
        shards: Sequence[str] = ()

        def policies(tag: str) -> List[models.Policy]:
            return listing(tag, "POLICY", models.Policy.from_xml)(data, shards) or []

        rankings = data.find("RANKINGS")
        changes: t.Dict[int, models.CensusChange] = {}
        if rankings is not None:
            for rank in rankings.findall("RANK"):
                scale = to_number(rank.get("id"))
                if scale is not None:
                    changes[int(scale)] = models.CensusChange.from_xml(rank)

        identifier = to_number(node.get("id"))
        choice = to_number(node.get("choice"))
        return cls(
            id=int(identifier) if identifier is not None else None,
            choice=int(choice) if choice is not None else None,
            ok=data.number("OK") == 1,
            description=data.text("DESC"),
            headlines=children("HEADLINES", "HEADLINE")(data, shards) or [],
            policyChanges=models.PolicyChanges(
                added=policies("NEW_POLICIES"), removed=policies("REMOVED_POLICIES")
            ),
            unlockedBanners=children("UNLOCKS", "BANNER")(data, shards) or [],
            reclassifications=nested(
                "RECLASSIFICATIONS", models.Reclassifications.from_xml
            )(data, shards),
            censusChanges=changes,
        )
