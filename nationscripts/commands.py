"""Private commands that act on behalf of an authenticated nation.

Most commands use a two step protocol: the command is first sent with
mode=prepare, which returns a one time token, and then resent with
mode=execute and that token.
"""

from __future__ import annotations

import enum
import logging
import re
import typing as t
from typing import Any, Mapping, Optional, Tuple

import xml.etree.ElementTree as etree

from nationscripts.auth import Credential
from nationscripts.core import clean_format, wire_value
from nationscripts.enums import DispatchAction, DispatchSubcategory
from nationscripts.exceptions import APIError, AuthError, RemoteError
from nationscripts.parser import NodeParse
from nationscripts.request import APIRequest
from nationscripts.responses import AnsweredIssue

if t.TYPE_CHECKING:
    from nationscripts.api import NSAPI

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def dispatch_id(message: Optional[str]) -> Optional[int]:
    """Recovers the dispatch ID from the success message of a dispatch command,
    which contains no other digits.
    """
    digits = re.sub(r"\D", "", message or "")
    return int(digits) if digits else None


def rmb_post_id(message: Optional[str]) -> Optional[int]:
    """Recovers the post ID from the success message of a RMB post command.

    The message links to the post as `...?postid=<id>#p<id>`, so the ID
    appears twice and the digits can not simply be concatenated.
    """
    match = re.search(r"postid=(\d+)", message or "") or re.search(r"#p(\d+)", message or "")
    return int(match.group(1)) if match else None


class CommandRequest(APIRequest):
    """Base for commands, which always require a credential."""

    def __init__(
        self, api: NSAPI, nation: Optional[str], credential: Optional[Credential], *required: str
    ) -> None:
        super().__init__(api, "c", "nation", *required)
        if credential is None:
            raise AuthError("Commands must be authenticated with a credential.")
        self.credential = credential
        if nation:
            self.set_argument("nation", clean_format(nation))

    def requires_credential(self) -> bool:
        return True

    def send(self) -> etree.Element:
        """Returns the NATION node returned by the command"""
        return super().send()


class CommandState(enum.Enum):
    UNSENT = "unsent"
    PREPARED = "prepared"
    EXECUTED = "executed"
    FAILED = "failed"


class TwoStepCommand(CommandRequest):
    """Command sent with a prepare request followed by an execute request.

    Nothing is retried: if the prepare step returns no token, sending fails
    without executing.
    """

    def __init__(
        self, api: NSAPI, nation: Optional[str], credential: Optional[Credential], *required: str
    ) -> None:
        super().__init__(api, nation, credential, "mode", *required)
        self.set_argument("mode", "prepare")
        self.state = CommandState.UNSENT

    def send(self) -> etree.Element:
        """Prepares and executes the command, returning the NATION node of the execution"""
        # Always start over from the prepare step, so the command can be resent
        self.set_argument("mode", "prepare")
        self.remove_argument("token")
        try:
            prepared = super().send()
        except APIError:
            self.state = CommandState.FAILED
            raise

        token = NodeParse(prepared).text("SUCCESS")
        if not token:
            self.state = CommandState.FAILED
            raise RemoteError("No execution token was returned when preparing the command.")
        self.state = CommandState.PREPARED
        logger.debug("Prepared command '%s'", self.get_argument("c"))

        self.set_argument("mode", "execute").set_argument("token", token)
        try:
            executed = super().send()
        except APIError:
            self.state = CommandState.FAILED
            raise
        self.state = CommandState.EXECUTED
        logger.info("Executed command '%s'", self.get_argument("c"))
        return executed


class IssueCommand(CommandRequest):
    """Answers an issue.

    Issues are answered with a single request.
    """

    def __init__(self, api: NSAPI, nation: Optional[str], credential: Optional[Credential]) -> None:
        super().__init__(api, nation, credential, "issue", "option")
        self.set_argument("c", "issue")

    def select(self, issue: int, option: int) -> IssueCommand:
        """Selects the issue to answer and the option to answer it with.
        Option -1 dismisses the issue.
        """
        self.set_argument("issue", issue).set_argument("option", option)
        return self

    def send(self) -> AnsweredIssue:  # type: ignore[override]
        node = NodeParse(super().send()).find("ISSUE")
        if node is None:
            raise RemoteError("No issue outcome was returned.")
        error = node.find("ERROR")
        if error is not None:
            raise RemoteError((error.text or "").strip() or "The issue could not be answered.")
        return AnsweredIssue.from_xml(node)


class GiftcardCommand(TwoStepCommand):
    """Gifts a trading card to another nation"""

    def __init__(self, api: NSAPI, nation: Optional[str], credential: Optional[Credential]) -> None:
        super().__init__(api, nation, credential, "cardid", "season", "to")
        self.set_argument("c", "giftcard")

    def set_card(self, cardID: int, season: int) -> GiftcardCommand:
        self.set_argument("cardid", cardID).set_argument("season", season)
        return self

    def set_recipient(self, nation: str) -> GiftcardCommand:
        self.set_argument("to", clean_format(nation))
        return self

    def send(self) -> Optional[str]:  # type: ignore[override]
        """Returns the success message"""
        return NodeParse(super().send()).text("SUCCESS")


class DispatchCommand(TwoStepCommand):
    """Creates, edits or removes a dispatch.

    Editing and removing require the dispatch ID,
    creating and editing require the title, text and category.
    """

    # Category and subcategory numbers NS uses for each subcategory
    CATEGORIES: t.ClassVar[Mapping[str, Tuple[int, int]]] = {
        wire_value(subcategory): codes
        for subcategory, codes in (
            (DispatchSubcategory.FACTBOOK_OVERVIEW, (1, 100)),
            (DispatchSubcategory.FACTBOOK_HISTORY, (1, 101)),
            (DispatchSubcategory.FACTBOOK_GEOGRAPHY, (1, 102)),
            (DispatchSubcategory.FACTBOOK_CULTURE, (1, 103)),
            (DispatchSubcategory.FACTBOOK_POLITICS, (1, 104)),
            (DispatchSubcategory.FACTBOOK_LEGISLATION, (1, 105)),
            (DispatchSubcategory.FACTBOOK_RELIGION, (1, 106)),
            (DispatchSubcategory.FACTBOOK_MILITARY, (1, 107)),
            (DispatchSubcategory.FACTBOOK_ECONOMY, (1, 108)),
            (DispatchSubcategory.FACTBOOK_INTERNATIONAL, (1, 109)),
            (DispatchSubcategory.FACTBOOK_TRIVIA, (1, 110)),
            (DispatchSubcategory.FACTBOOK_MISCELLANEOUS, (1, 111)),
            (DispatchSubcategory.BULLETIN_POLICY, (3, 305)),
            (DispatchSubcategory.BULLETIN_NEWS, (3, 315)),
            (DispatchSubcategory.BULLETIN_OPINION, (3, 325)),
            (DispatchSubcategory.BULLETIN_CAMPAIGN, (3, 385)),
            (DispatchSubcategory.ACCOUNT_MILITARY, (5, 505)),
            (DispatchSubcategory.ACCOUNT_TRADE, (5, 515)),
            (DispatchSubcategory.ACCOUNT_SPORT, (5, 525)),
            (DispatchSubcategory.ACCOUNT_DRAMA, (5, 535)),
            (DispatchSubcategory.ACCOUNT_DIPLOMACY, (5, 545)),
            (DispatchSubcategory.ACCOUNT_SCIENCE, (5, 555)),
            (DispatchSubcategory.ACCOUNT_CULTURE, (5, 565)),
            (DispatchSubcategory.ACCOUNT_OTHER, (5, 595)),
            (DispatchSubcategory.META_GAMEPLAY, (8, 835)),
            (DispatchSubcategory.META_REFERENCE, (8, 845)),
        )
    }

    def __init__(
        self,
        api: NSAPI,
        nation: Optional[str],
        credential: Optional[Credential],
        action: Any = DispatchAction.ADD,
    ) -> None:
        token = wire_value(action)
        required = ["dispatch"]
        if token in (DispatchAction.EDIT.value, DispatchAction.REMOVE.value):
            required.append("dispatchid")
        if token in (DispatchAction.ADD.value, DispatchAction.EDIT.value):
            required.extend(("title", "text", "category", "subcategory"))
        super().__init__(api, nation, credential, *required)
        self.set_argument("c", "dispatch").set_argument("dispatch", token)

    def target_dispatch(self, dispatchID: int) -> DispatchCommand:
        """Sets the dispatch to edit or remove"""
        self.set_argument("dispatchid", dispatchID)
        return self

    def set_dispatch_options(
        self, title: Optional[str] = None, text: Optional[str] = None, category: Any = None
    ) -> DispatchCommand:
        return (
            self.set_dispatch_title(title)
            .set_dispatch_content(text)
            .set_dispatch_category(category)
        )

    def set_dispatch_title(self, title: Optional[str]) -> DispatchCommand:
        self.set_argument("title", title)
        return self

    def set_dispatch_content(self, text: Optional[str]) -> DispatchCommand:
        self.set_argument("text", text)
        return self

    def set_dispatch_category(self, subcategory: Any) -> DispatchCommand:
        """Sets the category and subcategory from a DispatchSubcategory.
        Raises ValueError for unknown subcategories.
        """
        if subcategory is None:
            return self
        codes = self.CATEGORIES.get(wire_value(subcategory))
        if codes is None:
            raise ValueError(f"Unknown dispatch subcategory '{wire_value(subcategory)}'")
        category, sub = codes
        self.set_argument("category", category).set_argument("subcategory", sub)
        return self

    def send(self) -> Optional[int]:  # type: ignore[override]
        """Returns the ID of the dispatch, if the success message contains it"""
        return dispatch_id(NodeParse(super().send()).text("SUCCESS"))


class RMBPostCommand(TwoStepCommand):
    """Lodges a message on a regional message board"""

    def __init__(self, api: NSAPI, nation: Optional[str], credential: Optional[Credential]) -> None:
        super().__init__(api, nation, credential, "region", "text")
        self.set_argument("c", "rmbpost")

    def set_post(self, region: str, text: str) -> RMBPostCommand:
        self.set_argument("region", clean_format(region)).set_argument("text", text)
        return self

    def send(self) -> Optional[int]:  # type: ignore[override]
        """Returns the ID of the created post"""
        return rmb_post_id(NodeParse(super().send()).text("SUCCESS"))
