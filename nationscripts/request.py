"""Request builders for the NS API.

A request accumulates query arguments through chainable setters,
and decodes its own response when sent.
"""

from __future__ import annotations

import functools
import logging
import typing as t
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

import xml.etree.ElementTree as etree

from nationscripts.auth import Credential
from nationscripts.core import as_xml, clean_format, joined_parameter, wire_value
from nationscripts.enums import (
    CensusMode,
    NationPrivateShard,
    NationShard,
    RegionShard,
    WACouncil,
    WAShard,
    WorldShard,
)
from nationscripts.exceptions import ConfigurationError, MissingArgumentsError, RemoteError
from nationscripts.responses import Nation, Region, World, WorldAssembly

if t.TYPE_CHECKING:
    from nationscripts.api import NSAPI

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

F = t.TypeVar("F", bound=Callable[..., Any])

# Wire tokens of the nation shards that need authentication
PRIVATE_SHARDS = frozenset(shard.value for shard in NationPrivateShard)


def guarantees(*shards: Any) -> Callable[[F], F]:
    """Decorates a setter so that the given shards are required whenever it runs.

    The shards are only added once the setter succeeds, and are recorded on
    the setter as `guaranteedShards`.
    """
    tokens = tuple(wire_value(shard) for shard in shards)

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self: ShardMixin, *args: Any, **kwargs: Any) -> Any:
            result = func(self, *args, **kwargs)
            for shard in tokens:
                self.require_shard(shard)
            return result

        wrapper.guaranteedShards = tokens  # type: ignore
        return t.cast(F, wrapper)

    return decorator


class APIRequest:
    """Base request to the NS API.

    Arguments are kept in insertion order, and setting an argument again overwrites it.
    A request can be sent multiple times; its arguments persist.
    """

    def __init__(self, api: NSAPI, *required: str) -> None:
        """Requires the NSAPI the request will be sent through,
        and the names of arguments that must be set before sending.
        """
        if api is None:
            raise ConfigurationError("A request requires an NSAPI instance to be sent with.")
        self._api = api
        self.arguments: Dict[str, str] = {}
        self.requiredArguments: List[str] = list(required)
        # Only nation scoped requests and commands are ever authenticated
        self.credential: Optional[Credential] = None

    @property
    def api(self) -> NSAPI:
        """The NSAPI this request is sent through"""
        return self._api

    def set_argument(self, name: str, *values: Any) -> APIRequest:
        """Sets the argument to the given values, joined with `+`.

        None values are ignored, and if all are None the argument is left untouched.
        """
        present = [value for value in values if value is not None]
        if present:
            self.arguments[name] = joined_parameter(*present)
        return self

    def get_argument(self, name: str) -> Optional[str]:
        return self.arguments.get(name)

    def append_argument(self, name: str, value: Any) -> APIRequest:
        """Appends raw text to the current value of an argument."""
        self.arguments[name] = self.arguments.get(name, "") + wire_value(value)
        return self

    def remove_argument(self, name: str) -> bool:
        """Removes an argument, returning whether it was set."""
        return self.arguments.pop(name, None) is not None

    def list_argument_names(self) -> List[str]:
        return list(self.arguments)

    def use_version(self, version: int) -> APIRequest:
        """Pins the request to a specific version of the NS API"""
        return self.set_argument("v", version)

    def missing_arguments(self) -> List[str]:
        """Returns the required arguments that are unset or empty"""
        return [name for name in self.requiredArguments if not self.arguments.get(name)]

    def requires_credential(self) -> bool:
        """Whether sending this request is impossible without a credential."""
        return False

    def validate(self) -> None:
        """Raises MissingArgumentsError if any required argument is missing."""
        missing = self.missing_arguments()
        if missing:
            raise MissingArgumentsError(missing)

    def send_raw(self) -> str:
        """Validates the arguments, then sends the request and returns the raw body."""
        self.validate()
        return self.api.send_request(self)

    @staticmethod
    def parse(body: str) -> etree.Element:
        """Parses a response body as XML and returns the root node.

        Raises RemoteError if the NS API returned an ERROR tag.
        """
        root = as_xml(body)
        error = root if root.tag == "ERROR" else root.find("ERROR")
        if error is not None:
            message = (error.text or "").strip()
            raise RemoteError(message) if message else RemoteError()
        return root

    def send(self) -> Any:
        """Sends the request and returns the root node of the response."""
        return self.parse(self.send_raw())


class ShardMixin:
    """Adds shard selection, stored in the `q` argument.

    impliedShards maps a shard to other shards that must be requested alongside it.
    """

    impliedShards: t.ClassVar[Mapping[str, Sequence[str]]] = {}

    # Provided by APIRequest
    set_argument: Callable[..., APIRequest]
    get_argument: Callable[[str], Optional[str]]
    remove_argument: Callable[[str], bool]

    def _store_shards(self, shards: t.Iterable[Any]) -> None:
        """Stores the shards de-duplicated and in insertion order, with their implied shards"""
        tokens = list(dict.fromkeys(wire_value(shard) for shard in shards))
        for token in list(tokens):
            for implied in self.impliedShards.get(token, ()):
                if implied not in tokens:
                    tokens.append(implied)
        if tokens:
            self.set_argument("q", *tokens)
        else:
            self.remove_argument("q")

    def shard(self, *shards: Any) -> Any:
        """Replaces the requested shards"""
        self._store_shards(shards)
        return self

    def add_shards(self, *shards: Any) -> Any:
        """Adds the shards to those already requested"""
        self._store_shards([*self.get_shards(), *shards])
        return self

    def require_shard(self, shard: Any) -> Any:
        """Adds the shard if it is not already requested"""
        if wire_value(shard) not in self.get_shards():
            self.add_shards(shard)
        return self

    def get_shards(self) -> List[str]:
        """Returns the currently requested shards"""
        shards = self.get_argument("q")
        return shards.split("+") if shards else []


class CensusMixin:
    """Adds census scale and mode selection.

    Census history (mode=history with from/to bounds) can not be combined with any
    other census mode; the NS API rejects such requests.
    """

    set_argument: Callable[..., APIRequest]
    get_argument: Callable[[str], Optional[str]]
    remove_argument: Callable[[str], bool]
    require_shard: Callable[[Any], Any]

    @guarantees("census")
    def set_census_scale(self, *scales: Union[int, Any], allScales: bool = False) -> Any:
        """Selects the census scales to return, or every scale if allScales is True."""
        if allScales:
            return self.set_argument("scale", "all")
        return self.set_argument("scale", *scales)

    @guarantees("census")
    def set_census_mode(self, *modes: Any) -> Any:
        """Selects which census values to return.

        Raises ValueError if history is combined with any other mode.
        """
        tokens = [wire_value(mode) for mode in modes]
        history = CensusMode.HISTORY.value
        if history in tokens and len(set(tokens)) > 1:
            raise ValueError("Census history can not be combined with other census modes")
        if tokens and history not in tokens and self.get_argument("mode") == history:
            # Drop the bounds of the history window being replaced
            self.remove_argument("from")
            self.remove_argument("to")
        return self.set_argument("mode", *tokens)

    @guarantees("census")
    def set_census_history_window(self, start: Optional[int], end: Optional[int]) -> Any:
        """Requests census history between the two timestamps, replacing any other mode."""
        self.set_argument("mode", CensusMode.HISTORY)
        self.remove_argument("from")
        self.remove_argument("to")
        return self.set_argument("from", start).set_argument("to", end)


class NationRequest(ShardMixin, CensusMixin, APIRequest):
    """Request for the nation API"""

    def __init__(self, api: NSAPI, name: Optional[str], *required: str) -> None:
        super().__init__(api, "nation", *required)
        if name:
            self.set_argument("nation", clean_format(name))

    def authenticate(self, credential: Optional[Credential]) -> NationRequest:
        """Attaches a credential to the request, needed for private shards."""
        if credential:
            self.credential = credential
        return self

    def set_tg_from(self, region: str) -> NationRequest:
        """Sets the region to check telegram recruitability from.

        Requests tgcanrecruit unless tgcancampaign is already requested.
        """
        shards = self.get_shards()
        if (
            NationShard.TG_CAMPAIGNABLE.value not in shards
            and NationShard.TG_RECRUITABLE.value not in shards
        ):
            self.require_shard(NationShard.TG_RECRUITABLE)
        self.set_argument("from", clean_format(region))
        return self

    def private_shards(self) -> List[str]:
        """Returns the requested shards that need authentication"""
        return [shard for shard in self.get_shards() if shard in PRIVATE_SHARDS]

    def requires_credential(self) -> bool:
        return bool(self.private_shards())

    def send(self) -> Nation:
        return Nation.from_xml(self.get_shards(), super().send())


class RegionRequest(ShardMixin, CensusMixin, APIRequest):
    """Request for the region API"""

    def __init__(self, api: NSAPI, name: Optional[str]) -> None:
        super().__init__(api, "region")
        if name:
            self.set_argument("region", clean_format(name))

    @guarantees(RegionShard.RMB_MESSAGES)
    def set_message_options(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        fromID: Optional[int] = None,
    ) -> RegionRequest:
        """Sets the window of RMB messages to return"""
        return (
            self.set_message_limit(limit).set_message_offset(offset).set_message_start(fromID)
        )

    @guarantees(RegionShard.RMB_MESSAGES)
    def set_message_limit(self, limit: Optional[int]) -> RegionRequest:
        """At most 100 messages are returned at once"""
        self.set_argument("limit", limit)
        return self

    @guarantees(RegionShard.RMB_MESSAGES)
    def set_message_offset(self, offset: Optional[int]) -> RegionRequest:
        self.set_argument("offset", offset)
        return self

    @guarantees(RegionShard.RMB_MESSAGES)
    def set_message_start(self, fromID: Optional[int]) -> RegionRequest:
        self.set_argument("fromid", fromID)
        return self

    def set_rmb_toplist_options(
        self, limit: Optional[int] = None, start: Optional[int] = None, end: Optional[int] = None
    ) -> RegionRequest:
        """Sets the size and time window of the mostposts/mostlikes/mostliked toplists"""
        return self.set_rmb_toplist_limit(limit).set_rmb_toplist_from(start).set_rmb_toplist_to(end)

    def set_rmb_toplist_limit(self, limit: Optional[int]) -> RegionRequest:
        self.set_argument("limit", limit)
        return self

    def set_rmb_toplist_from(self, start: Optional[int]) -> RegionRequest:
        self.set_argument("from", start)
        return self

    def set_rmb_toplist_to(self, end: Optional[int]) -> RegionRequest:
        self.set_argument("to", end)
        return self

    def send(self) -> Region:
        return Region.from_xml(self.get_shards(), super().send())


class WorldRequest(ShardMixin, CensusMixin, APIRequest):
    """Request for the world API"""

    def __init__(self, api: NSAPI) -> None:
        super().__init__(api)

    @guarantees(WorldShard.BANNER)
    def set_banner_ids(self, *ids: str) -> WorldRequest:
        self.set_argument("banner", ",".join(ids) if ids else None)
        return self

    @guarantees(WorldShard.DISPATCH)
    def set_dispatch_id(self, dispatchID: int) -> WorldRequest:
        self.set_argument("dispatchid", dispatchID)
        return self

    @guarantees(WorldShard.DISPATCH_LIST)
    def set_dispatch_options(
        self, author: Optional[str] = None, category: Any = None, sortMode: Any = None
    ) -> WorldRequest:
        """Sets the search options of the dispatch list"""
        return (
            self.set_dispatch_author(author)
            .set_dispatch_category(category)
            .set_dispatch_sort_mode(sortMode)
        )

    @guarantees(WorldShard.DISPATCH_LIST)
    def set_dispatch_author(self, author: Optional[str]) -> WorldRequest:
        self.set_argument("dispatchauthor", clean_format(author) if author else None)
        return self

    @guarantees(WorldShard.DISPATCH_LIST)
    def set_dispatch_category(self, category: Any) -> WorldRequest:
        """Accepts either a DispatchCategory or a DispatchSubcategory"""
        self.set_argument("dispatchcategory", category)
        return self

    @guarantees(WorldShard.DISPATCH_LIST)
    def set_dispatch_sort_mode(self, sortMode: Any) -> WorldRequest:
        self.set_argument("dispatchsort", sortMode)
        return self

    @guarantees(WorldShard.REGIONS_BY_TAG)
    def set_region_search_tags(self, *tags: str) -> WorldRequest:
        """Tags can be excluded by prefixing them with '-'"""
        self.set_argument("tags", ",".join(tags) if tags else None)
        return self

    @guarantees(WorldShard.HAPPENINGS)
    def set_happenings_nations(self, *names: str) -> WorldRequest:
        """Limits happenings to the given nations"""
        if names:
            self.set_argument("view", "nation." + ",".join(clean_format(name) for name in names))
        return self

    @guarantees(WorldShard.HAPPENINGS)
    def set_happenings_regions(self, *names: str) -> WorldRequest:
        """Limits happenings to the given regions"""
        if names:
            self.set_argument("view", "region." + ",".join(clean_format(name) for name in names))
        return self

    @guarantees(WorldShard.HAPPENINGS)
    def set_happenings_filters(self, *filters: Any) -> WorldRequest:
        self.set_argument("filter", *filters)
        return self

    @guarantees(WorldShard.HAPPENINGS)
    def set_happenings_limit(self, limit: Optional[int]) -> WorldRequest:
        self.set_argument("limit", limit)
        return self

    @guarantees(WorldShard.HAPPENINGS)
    def set_happenings_id_window(
        self, start: Optional[int], end: Optional[int] = None
    ) -> WorldRequest:
        self.set_argument("sinceid", start)
        self.set_argument("beforeid", end)
        return self

    @guarantees(WorldShard.HAPPENINGS)
    def set_happenings_time_window(
        self, start: Optional[int], end: Optional[int] = None
    ) -> WorldRequest:
        self.set_argument("sincetime", start)
        self.set_argument("beforetime", end)
        return self

    @guarantees(WorldShard.POLL)
    def set_poll_id(self, pollID: int) -> WorldRequest:
        self.set_argument("pollid", pollID)
        return self

    def send(self) -> World:
        return World.from_xml(self.get_shards(), super().send())


class WARequest(ShardMixin, APIRequest):
    """Request for the World Assembly API of one council"""

    # Vote details can only be returned alongside the resolution at vote
    impliedShards = {
        wire_value(shard): (WAShard.RESOLUTION_AT_VOTE.value,)
        for shard in (
            WAShard.VOTERS,
            WAShard.VOTE_TRACK,
            WAShard.DELEGATE_VOTE_LOG,
            WAShard.DELEGATE_VOTES,
        )
    }

    def __init__(self, api: NSAPI, council: Any = WACouncil.GA) -> None:
        super().__init__(api, "wa")
        self.set_argument("wa", council)

    def set_resolution_id(self, resolutionID: int) -> WARequest:
        """Targets a past resolution instead of the one at vote"""
        self.set_argument("id", resolutionID)
        return self

    def send(self) -> WorldAssembly:
        return WorldAssembly.from_xml(self.get_shards(), super().send())


class VerificationRequest(NationRequest):
    """Verifies that a nation's owner generated the given checksum.

    Sending returns True or False, unless shards were requested,
    in which case NS returns the nation itself, which is decoded as a Nation.
    """

    def __init__(self, api: NSAPI, name: Optional[str], checksum: Optional[str]) -> None:
        super().__init__(api, name, "a", "checksum")
        self.set_argument("a", "verify")
        self.set_argument("checksum", checksum)

    def set_token(self, token: str) -> VerificationRequest:
        """Site specific token the checksum was generated with"""
        self.set_argument("token", token)
        return self

    def send(self) -> Union[bool, Nation]:  # type: ignore[override]
        body = self.send_raw().strip()
        if body == "1":
            return True
        if body == "0":
            return False
        return Nation.from_xml(self.get_shards(), self.parse(body), verification=True)


class UserAgentRequest(APIRequest):
    """Returns the user agent the NS API sees"""

    def __init__(self, api: NSAPI) -> None:
        super().__init__(api, "a")
        self.set_argument("a", "useragent")

    def send(self) -> str:
        return self.send_raw()
