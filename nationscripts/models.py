"""Models of object structures returned from the NationStates API.

These are the records nested inside nation, region, world and WA responses.
"""

from __future__ import annotations

import dataclasses
import typing as t
from typing import Callable, Generic, List, Mapping, Optional, Sequence

import xml.etree.ElementTree as etree

from nationscripts.enums import DeathCause
from nationscripts.parser import NodeParse, content, split, to_number

T = t.TypeVar("T")
Number = t.Union[int, float]


def _attribute_id(node: etree.Element) -> Optional[int]:
    """Returns the numeric id attribute of a node, if any."""
    value = to_number(node.get("id"))
    return int(value) if value is not None else None


def _authority(text: Optional[str]) -> List[str]:
    """Splits an authority string such as 'XWAB' into single letter permissions."""
    return list(text) if text else []


@dataclasses.dataclass(frozen=True)
class Happening:
    """Class that represents a NS happening, or a historical event of a region.

    Attributes:
    id - the event ID of the happening
    timestamp - the int timestamp the happening occured at
    text - the raw text of the happening
    """

    id: Optional[int]
    timestamp: Optional[int]
    text: Optional[str]

    @classmethod
    def from_xml(cls, node: etree.Element) -> Happening:
        """Parse a happening from an EVENT node, as returned by NS api for happenings.
        (See https://www.nationstates.net/cgi-bin/api.cgi?q=happenings)
        """
        data = NodeParse(node)
        return cls(
            id=_attribute_id(node),
            timestamp=data.number("TIMESTAMP"),
            text=data.text("TEXT"),
        )


@dataclasses.dataclass(frozen=True)
class CensusScore:
    """Class that represents a NS census category.

    score is the raw value of the census.

    rank is the world/regional position.

    percentage is the top percentage group the census value is part of,
    e.g. percentage=15 means "top 15%".

    Only the values matching the requested census modes are set.
    """

    id: Optional[int]

    score: Optional[Number]

    rank: Optional[Number]
    regionalRank: Optional[Number]

    percentage: Optional[Number]
    regionalPercentage: Optional[Number]

    @classmethod
    def from_xml(cls, node: etree.Element) -> CensusScore:
        """Creates a CensusScore from an XML SCALE node
        (See https://www.nationstates.net/cgi-bin/api.cgi?nation=testlandia&q=census&mode=score+rank+rrank+prank+prrank&scale=all)
        """  # noqa pylint: disable=line-too-long
        parse = NodeParse(node)
        return cls(
            id=_attribute_id(node),
            score=parse.number("SCORE"),
            rank=parse.number("RANK"),
            regionalRank=parse.number("RRANK"),
            percentage=parse.number("PRANK"),
            regionalPercentage=parse.number("PRRANK"),
        )


def census_scores(node: etree.Element) -> Mapping[int, CensusScore]:
    """Maps scale id to score for each SCALE node in a CENSUS node."""
    scores = (CensusScore.from_xml(scale) for scale in node.iter("SCALE"))
    return {score.id: score for score in scores if score.id is not None}


@dataclasses.dataclass(frozen=True)
class CensusRank:
    """Position of a nation in a census ranking."""

    nation: Optional[str]
    rank: Optional[int]
    score: Optional[Number]

    @classmethod
    def from_xml(cls, node: etree.Element) -> CensusRank:
        data = NodeParse(node)
        return cls(
            nation=data.text("NAME"), rank=data.number("RANK"), score=data.number("SCORE")
        )


@dataclasses.dataclass(frozen=True)
class CensusRanks:
    """A census ranking, as returned by the censusranks shard."""

    id: Optional[int]
    nations: Sequence[CensusRank]

    @classmethod
    def from_xml(cls, node: etree.Element) -> CensusRanks:
        """Creates CensusRanks from a CENSUSRANKS node,
        which wraps a NATIONS node of NATION entries.
        """
        return cls(
            id=_attribute_id(node),
            nations=[CensusRank.from_xml(nation) for nation in node.iter("NATION")],
        )


@dataclasses.dataclass(frozen=True)
class RankedCensus:
    """The daily census scale of a nation and its world/regional rank on it."""

    id: Optional[int]
    rank: Optional[Number]

    @classmethod
    def from_xml(cls, node: etree.Element) -> RankedCensus:
        return cls(id=_attribute_id(node), rank=to_number(content(node).strip()))


@dataclasses.dataclass(frozen=True)
class Freedoms(Generic[T]):
    """Dataclass that contains info on freedoms"""

    civilRights: T
    economy: T
    politicalFreedom: T

    @classmethod
    def from_xml(
        cls, node: etree.Element, converter: Callable[[Optional[str]], T]
    ) -> Freedoms[T]:
        """Constructs a Freedoms object using the given node.
        Casts the content of each subnode using the converter.
        """
        data = NodeParse(node)
        return cls(
            civilRights=converter(data.text("CIVILRIGHTS")),
            economy=converter(data.text("ECONOMY")),
            politicalFreedom=converter(data.text("POLITICALFREEDOM")),
        )


def deaths(node: etree.Element) -> Mapping[str, float]:
    """Maps each cause of death to its percentage share,
    from a DEATHS node of CAUSE entries.

    Causes known to NS that are missing from the node are reported as 0.
    """
    shares = {cause.value: 0.0 for cause in DeathCause}
    for cause in node.iter("CAUSE"):
        share = to_number(content(cause).strip())
        shares[cause.get("type", "")] = float(share) if share is not None else 0.0
    return shares


@dataclasses.dataclass(frozen=True)
class GovernmentSpending:
    """Share of government expenditure per area, from the GOVT node."""

    admin: Optional[Number]
    defense: Optional[Number]
    education: Optional[Number]
    environment: Optional[Number]
    health: Optional[Number]
    industry: Optional[Number]
    aid: Optional[Number]
    law: Optional[Number]
    transport: Optional[Number]
    social: Optional[Number]
    spirituality: Optional[Number]
    welfare: Optional[Number]

    @classmethod
    def from_xml(cls, node: etree.Element) -> GovernmentSpending:
        data = NodeParse(node)
        return cls(
            admin=data.number("ADMINISTRATION"),
            defense=data.number("DEFENCE"),
            education=data.number("EDUCATION"),
            environment=data.number("ENVIRONMENT"),
            health=data.number("HEALTHCARE"),
            industry=data.number("COMMERCE"),
            aid=data.number("INTERNATIONALAID"),
            law=data.number("LAWANDORDER"),
            transport=data.number("PUBLICTRANSPORT"),
            social=data.number("SOCIALEQUALITY"),
            spirituality=data.number("SPIRITUALITY"),
            welfare=data.number("WELFARE"),
        )


@dataclasses.dataclass(frozen=True)
class Sectors:
    """Makeup of a nation's economy by sector."""

    blackMarket: Optional[Number]
    government: Optional[Number]
    privateIndustry: Optional[Number]
    publicIndustry: Optional[Number]

    @classmethod
    def from_xml(cls, node: etree.Element) -> Sectors:
        data = NodeParse(node)
        return cls(
            blackMarket=data.number("BLACKMARKET"),
            government=data.number("GOVERNMENT"),
            privateIndustry=data.number("INDUSTRY"),
            publicIndustry=data.number("PUBLIC"),
        )


@dataclasses.dataclass(frozen=True)
class HDI:
    """A nation's HDI score and what it is made of."""

    score: Optional[Number]
    economy: Optional[Number]
    smartness: Optional[Number]
    lifespan: Optional[Number]

    @classmethod
    def from_parse(cls, data: NodeParse) -> HDI:
        """Unlike most records, the HDI tags sit directly on the NATION node."""
        return cls(
            score=data.number("HDI"),
            economy=data.number("HDI-ECONOMY"),
            smartness=data.number("HDI-SMART"),
            lifespan=data.number("HDI-LIFESPAN"),
        )


@dataclasses.dataclass(frozen=True)
class Policy:
    """A policy adopted by a nation."""

    name: Optional[str]
    picture: Optional[str]
    category: Optional[str]
    description: Optional[str]

    @classmethod
    def from_xml(cls, node: etree.Element) -> Policy:
        data = NodeParse(node)
        return cls(
            name=data.text("NAME"),
            picture=data.text("PIC"),
            category=data.text("CAT"),
            description=data.text("DESC"),
        )


@dataclasses.dataclass(frozen=True)
class Issue:
    """Class that represents a NS Issue"""

    id: Optional[int]
    title: Optional[str]
    text: Optional[str]
    author: Optional[str]
    editors: Sequence[str]
    pictures: Sequence[str]
    options: Mapping[int, str]

    @classmethod
    def from_xml(cls, node: etree.Element) -> Issue:
        """Creates an Issue from an XML ISSUE node
        (See https://www.nationstates.net/cgi-bin/api.cgi?nation=testlandia&q=issues)
        """
        parse = NodeParse(node)
        editor = parse.text("EDITOR")
        return cls(
            id=_attribute_id(node),
            title=parse.text("TITLE"),
            text=parse.text("TEXT"),
            author=parse.text("AUTHOR"),
            editors=editor.split(", ") if editor else [],
            pictures=[
                picture
                for picture in (parse.text("PIC1"), parse.text("PIC2"))
                if picture
            ],
            options={
                int(child.attrib["id"]): content(child).strip()
                for child in parse.child_tags.get("OPTION", ())
            },
        )


@dataclasses.dataclass(frozen=True)
class IssueHeadline:
    """ID and title of a pending issue, from the issuesummary shard."""

    id: Optional[int]
    title: str

    @classmethod
    def from_xml(cls, node: etree.Element) -> IssueHeadline:
        return cls(id=_attribute_id(node), title=content(node).strip())


@dataclasses.dataclass(frozen=True)
class Notice:
    """A notice received by a nation."""

    unread: bool
    ok: bool
    title: Optional[str]
    type: Optional[str]
    icon: Optional[str]
    who: Optional[str]
    whoURL: Optional[str]
    text: Optional[str]
    timestamp: Optional[int]
    url: Optional[str]

    @classmethod
    def from_xml(cls, node: etree.Element) -> Notice:
        data = NodeParse(node)
        return cls(
            unread=data.number("NEW") == 1,
            ok=data.number("OK") == 1,
            title=data.text("TITLE"),
            type=data.text("TYPE"),
            icon=data.text("TYPE_ICON"),
            who=data.text("WHO"),
            whoURL=data.text("WHO_URL"),
            text=data.text("TEXT"),
            timestamp=data.number("TIMESTAMP"),
            url=data.text("URL"),
        )


@dataclasses.dataclass(frozen=True)
class Unreads:
    """How much new stuff a nation has not looked at yet."""

    issues: Optional[int]
    telegrams: Optional[int]
    notices: Optional[int]
    rmb: Optional[int]
    wa: Optional[int]
    news: Optional[int]

    @classmethod
    def from_xml(cls, node: etree.Element) -> Unreads:
        data = NodeParse(node)
        return cls(
            issues=data.number("ISSUES"),
            telegrams=data.number("TELEGRAMS"),
            notices=data.number("NOTICES"),
            rmb=data.number("RMB"),
            wa=data.number("WA"),
            news=data.number("NEWS"),
        )


@dataclasses.dataclass(frozen=True)
class WABadgeAward:
    """A commendation, condemnation or liberation badge, and the resolution granting it."""

    type: Optional[str]
    resolution: Optional[int]

    @classmethod
    def from_xml(cls, node: etree.Element) -> WABadgeAward:
        value = to_number(content(node).strip())
        return cls(
            type=node.get("type"),
            resolution=int(value) if value is not None else None,
        )


@dataclasses.dataclass(frozen=True)
class Dispatch:
    """A dispatch or factbook. The text is only present when a single dispatch was requested."""

    id: Optional[int]
    title: Optional[str]
    author: Optional[str]
    category: str
    created: Optional[int]
    edited: Optional[int]
    views: Optional[int]
    score: Optional[int]
    text: Optional[str]

    @classmethod
    def from_xml(cls, node: etree.Element) -> Dispatch:
        """Creates a Dispatch from a DISPATCH or FACTBOOK node."""
        data = NodeParse(node)
        return cls(
            id=_attribute_id(node),
            title=data.text("TITLE"),
            author=data.text("AUTHOR"),
            category=f"{data.text('CATEGORY')}:{data.text('SUBCATEGORY')}",
            created=data.number("CREATED"),
            edited=data.number("EDITED"),
            views=data.number("VIEWS"),
            score=data.number("SCORE"),
            text=data.text("TEXT"),
        )


@dataclasses.dataclass(frozen=True)
class Officer:
    """Class that represents a Officer for a region,
    and the related available data.
    """

    nation: Optional[str]  # Name of officer
    office: Optional[str]  # Name of office
    authority: Sequence[str]  # Authority permissions (each letter is a perm)
    time: Optional[int]  # Timestamp they were appointed at
    by: Optional[str]  # Who appointed the officer
    order: Optional[int]  # Position in officer list on NS

    @classmethod
    def from_xml(cls, node: etree.Element) -> Officer:
        """Method that parses a Officer object from
        an OFFICER xml node, as contained by the OFFICERS shard.
        """
        data = NodeParse(node)
        return cls(
            nation=data.text("NATION"),
            office=data.text("OFFICE"),
            authority=_authority(data.text("AUTHORITY")),
            time=data.number("TIME"),
            by=data.text("BY"),
            order=data.number("ORDER"),
        )


def officers(node: etree.Element) -> Sequence[Officer]:
    """Parses an OFFICERS node, ordered by their position on NS."""
    parsed = [Officer.from_xml(officer) for officer in node.iter("OFFICER")]
    return sorted(parsed, key=lambda officer: officer.order or 0)


@dataclasses.dataclass(frozen=True)
class Embassies:
    """Embassies of a region, grouped by their status."""

    extant: Sequence[str]
    invited: Sequence[str]
    requested: Sequence[str]
    denied: Sequence[str]
    closing: Sequence[str]
    opening: Sequence[str]

    # Maps the EMBASSY type attribute to the field it is collected into
    TYPES: t.ClassVar[Mapping[str, str]] = {
        "invited": "invited",
        "requested": "requested",
        "pending": "opening",
        "closing": "closing",
        "denied": "denied",
    }

    @classmethod
    def from_xml(cls, node: etree.Element) -> Embassies:
        """Parses an EMBASSIES node; embassies without a type are open."""
        groups: t.Dict[str, List[str]] = {
            field.name: [] for field in dataclasses.fields(cls)
        }
        for embassy in node.iter("EMBASSY"):
            group = cls.TYPES.get(embassy.get("type", ""), "extant")
            groups[group].append(content(embassy).strip())
        return cls(**groups)


@dataclasses.dataclass(frozen=True)
class Post:
    """A message lodged on a regional message board."""

    id: Optional[int]
    timestamp: Optional[int]
    edited: Optional[int]
    author: Optional[str]
    embassy: Optional[str]
    status: Optional[int]
    suppressor: Optional[str]
    likers: Sequence[str]
    text: Optional[str]

    @classmethod
    def from_xml(cls, node: etree.Element) -> Post:
        """Parses a POST node of the messages shard."""
        data = NodeParse(node)
        return cls(
            id=_attribute_id(node),
            timestamp=data.number("TIMESTAMP"),
            edited=data.number("EDITED"),
            author=data.text("NATION"),
            embassy=data.text("EMBASSY"),
            status=data.number("STATUS"),
            suppressor=data.text("SUPPRESSOR"),
            likers=split(data.text("LIKERS"), ",") or [],
            text=data.text("MESSAGE"),
        )


@dataclasses.dataclass(frozen=True)
class RMBRanking:
    """A nation and its count on one of the RMB toplists."""

    nation: Optional[str]
    count: Optional[int]


def rmb_ranking(countTag: str) -> Callable[[etree.Element], Sequence[RMBRanking]]:
    """Returns a parser for a RMB toplist node, whose NATION entries
    contain the count in the given tag.
    """

    def parse(node: etree.Element) -> Sequence[RMBRanking]:
        rankings = []
        for nation in node.iter("NATION"):
            data = NodeParse(nation)
            rankings.append(
                RMBRanking(nation=data.text("NAME"), count=data.number(countTag))
            )
        return rankings

    return parse


@dataclasses.dataclass(frozen=True)
class PollOption:
    id: Optional[int]
    description: Optional[str]
    voters: Sequence[str]

    @classmethod
    def from_xml(cls, node: etree.Element) -> PollOption:
        data = NodeParse(node)
        return cls(
            id=_attribute_id(node),
            description=data.text("OPTIONTEXT"),
            voters=split(data.text("VOTERS"), ":") or [],
        )


@dataclasses.dataclass(frozen=True)
class Poll:
    """A regional poll."""

    id: Optional[int]
    title: Optional[str]
    text: Optional[str]
    region: Optional[str]
    start: Optional[int]
    end: Optional[int]
    author: Optional[str]
    options: Mapping[int, PollOption]

    @classmethod
    def from_xml(cls, node: etree.Element) -> Poll:
        """Parses a POLL node, mapping option id to option."""
        data = NodeParse(node)
        options = (PollOption.from_xml(option) for option in node.iter("OPTION"))
        return cls(
            id=_attribute_id(node),
            title=data.text("TITLE"),
            text=data.text("TEXT"),
            region=data.text("REGION"),
            start=data.number("START"),
            end=data.number("STOP"),
            author=data.text("AUTHOR"),
            options={option.id: option for option in options if option.id is not None},
        )


@dataclasses.dataclass(frozen=True)
class Votes(Generic[T]):
    """Something split by stance on a WA proposal, e.g. a tally or a list of voters."""

    votesFor: T
    votesAgainst: T


def vote_tally(node: etree.Element) -> Votes[Optional[int]]:
    """Parses a GAVOTE/SCVOTE node of FOR and AGAINST counts."""
    data = NodeParse(node)
    return Votes(votesFor=data.number("FOR"), votesAgainst=data.number("AGAINST"))


@dataclasses.dataclass(frozen=True)
class Banner:
    id: Optional[str]
    name: Optional[str]
    validity: Optional[str]

    @classmethod
    def from_xml(cls, node: etree.Element) -> Banner:
        """Banner ids are not numeric (e.g. 'b1'), so they are kept as text."""
        data = NodeParse(node)
        return cls(id=node.get("id"), name=data.text("NAME"), validity=data.text("VALIDITY"))


@dataclasses.dataclass(frozen=True)
class CensusDescription:
    """Introductory texts of a census scale's ranking for nations and regions."""

    id: Optional[int]
    national: Optional[str]
    regional: Optional[str]

    @classmethod
    def from_xml(cls, node: etree.Element) -> CensusDescription:
        data = NodeParse(node)
        return cls(
            id=_attribute_id(node),
            national=data.text("NDESC"),
            regional=data.text("RDESC"),
        )


@dataclasses.dataclass(frozen=True)
class TelegramQueue:
    """How many telegrams are currently in each of the three queues."""

    manual: Optional[int]
    mass: Optional[int]
    api: Optional[int]

    @classmethod
    def from_xml(cls, node: etree.Element) -> TelegramQueue:
        data = NodeParse(node)
        return cls(
            manual=data.number("MANUAL"), mass=data.number("MASS"), api=data.number("API")
        )


@dataclasses.dataclass(frozen=True)
class DelegateLogEntry:
    """A delegate casting or changing their vote on the at-vote resolution."""

    timestamp: Optional[int]
    delegate: Optional[str]
    action: Optional[str]
    votes: Optional[int]

    @classmethod
    def from_xml(cls, node: etree.Element) -> DelegateLogEntry:
        data = NodeParse(node)
        return cls(
            timestamp=data.number("TIMESTAMP"),
            delegate=data.text("NATION"),
            action=data.text("ACTION"),
            votes=data.number("VOTES"),
        )


@dataclasses.dataclass(frozen=True)
class DelegateVote:
    delegate: Optional[str]
    weight: Optional[int]
    cast: Optional[int]

    @classmethod
    def from_xml(cls, node: etree.Element) -> DelegateVote:
        data = NodeParse(node)
        return cls(
            delegate=data.text("NATION"),
            weight=data.number("VOTES"),
            cast=data.number("TIMESTAMP"),
        )


@dataclasses.dataclass(frozen=True)
class ProposalVotes:
    """Vote totals of a proposal that has reached the voting floor."""

    tallyFor: Optional[int]
    nationsFor: Optional[int]
    tallyAgainst: Optional[int]
    nationsAgainst: Optional[int]


@dataclasses.dataclass(frozen=True)
class LegalityDecision:
    """A Secretariat member's ruling on a proposal."""

    member: Optional[str]
    decision: Optional[str]
    reason: Optional[str]
    timestamp: Optional[int]

    @classmethod
    def from_xml(cls, node: etree.Element) -> LegalityDecision:
        data = NodeParse(node)
        return cls(
            member=data.text("NATION"),
            decision=data.text("DECISION"),
            reason=data.text("REASON"),
            timestamp=data.number("T"),
        )


@dataclasses.dataclass(frozen=True)
class Legality:
    """General Secretariat rulings on a GA proposal."""

    legal: Sequence[str]
    illegal: Sequence[str]
    discard: Sequence[str]
    log: Sequence[LegalityDecision]

    @classmethod
    def from_xml(cls, node: etree.Element) -> Legality:
        """Parses a GENSEC node."""
        data = NodeParse(node)

        def members(tag: str) -> List[str]:
            group = data.find(tag)
            return [] if group is None else [content(child).strip() for child in group]

        return cls(
            legal=members("LEGAL"),
            illegal=members("ILLEGAL"),
            discard=members("DISCARD"),
            log=[LegalityDecision.from_xml(entry) for entry in node.iter("ENTRY")],
        )


@dataclasses.dataclass(frozen=True)
class WAProposal:
    """A proposal submitted to a WA council, or the resolution at vote.

    The id, title, author, text and votes fields are relied upon by
    consumers that track proposals, and should be kept stable.
    """

    id: Optional[str]
    council: Optional[int]
    approvals: Sequence[str]
    author: Optional[str]
    coauthors: Sequence[str]
    category: Optional[str]
    option: Optional[str]
    submitted: Optional[int]
    text: Optional[str]
    title: Optional[str]
    votingStarted: Optional[int]
    votes: Optional[ProposalVotes]
    legality: Optional[Legality]

    @classmethod
    def from_xml(cls, node: etree.Element, council: Optional[int] = None) -> WAProposal:
        """Creates a WAProposal from a PROPOSAL or RESOLUTION node.

        Vote totals are only set once the proposal has been promoted to vote.
        """
        data = NodeParse(node)
        promoted = data.number("PROMOTED")
        coauthors = data.find("COAUTHOR")
        gensec = data.find("GENSEC")
        return cls(
            id=data.text("ID"),
            council=council,
            approvals=split(data.text("APPROVALS"), ":") or [],
            author=data.text("PROPOSED_BY"),
            coauthors=[]
            if coauthors is None
            else [content(child).strip() for child in coauthors],
            category=data.text("CATEGORY"),
            option=data.text("OPTION"),
            submitted=data.number("CREATED"),
            text=data.text("DESC"),
            title=data.text("NAME"),
            votingStarted=promoted,
            votes=None
            if promoted is None
            else ProposalVotes(
                tallyFor=data.number("TOTAL_VOTES_FOR"),
                nationsFor=data.number("TOTAL_NATIONS_FOR"),
                tallyAgainst=data.number("TOTAL_VOTES_AGAINST"),
                nationsAgainst=data.number("TOTAL_NATIONS_AGAINST"),
            ),
            legality=None if gensec is None else Legality.from_xml(gensec),
        )


@dataclasses.dataclass(frozen=True)
class Reclassification:
    """A change of a freedom classification caused by an issue."""

    before: Optional[str]
    after: Optional[str]


@dataclasses.dataclass(frozen=True)
class Reclassifications:
    civilRights: Optional[Reclassification]
    economy: Optional[Reclassification]
    politicalFreedom: Optional[Reclassification]

    # RECLASSIFY type attribute to field
    TYPES: t.ClassVar[Mapping[str, str]] = {
        "0": "civilRights",
        "1": "economy",
        "2": "politicalFreedom",
    }

    @classmethod
    def from_xml(cls, node: etree.Element) -> Reclassifications:
        found: t.Dict[str, Optional[Reclassification]] = {
            field: None for field in cls.TYPES.values()
        }
        for reclassify in node.iter("RECLASSIFY"):
            field = cls.TYPES.get(reclassify.get("type", ""))
            if field:
                data = NodeParse(reclassify)
                found[field] = Reclassification(
                    before=data.text("FROM"), after=data.text("TO")
                )
        return cls(**found)


@dataclasses.dataclass(frozen=True)
class CensusChange:
    """Effect of an answered issue on a census scale."""

    score: Optional[Number]
    change: Optional[Number]
    percentChange: Optional[Number]

    @classmethod
    def from_xml(cls, node: etree.Element) -> CensusChange:
        data = NodeParse(node)
        return cls(
            score=data.number("SCORE"),
            change=data.number("CHANGE"),
            percentChange=data.number("PCHANGE"),
        )


@dataclasses.dataclass(frozen=True)
class PolicyChanges:
    added: Sequence[Policy]
    removed: Sequence[Policy]
