"""Client that sends requests to the NS API.
See https://www.nationstates.net/pages/api.html for NS API details
"""

from __future__ import annotations

# Standard library modules
import logging
import urllib.parse
from typing import Any, Dict, Optional

# Tech libraries
import requests

from nationscripts.auth import Credential
from nationscripts.commands import (
    DispatchCommand,
    GiftcardCommand,
    IssueCommand,
    RMBPostCommand,
)
from nationscripts.enums import DispatchAction, WACouncil
from nationscripts.exceptions import (
    AuthError,
    ConfigurationError,
    InvalidCredentialsError,
    RecentLoginError,
    RemoteError,
    ResourceError,
)
from nationscripts.ratelimit import RateLimiter
from nationscripts.request import (
    APIRequest,
    NationRequest,
    RegionRequest,
    UserAgentRequest,
    VerificationRequest,
    WARequest,
    WorldRequest,
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

API_URL = "https://www.nationstates.net/cgi-bin/api.cgi"


class NSAPI:
    """Class to manage making requests to the NS API.

    All requests created by a NSAPI share its rate limiter, so a single
    instance should be used per script.
    """

    def __init__(
        self,
        userAgent: str,
        *,
        credential: Optional[Credential] = None,
        rateLimiter: Optional[RateLimiter] = None,
        timeout: Optional[float] = None,
        endpoint: str = API_URL,
        session: Optional[requests.Session] = None,
    ) -> None:
        """A user agent identifying the script and its author is required by NS.

        The credential, if given, is applied to every nation request and command
        created by this NSAPI that is not given its own.
        The timeout (in seconds) applies to each HTTP request; None waits indefinitely.
        """
        if not userAgent:
            raise ConfigurationError("A user agent is required by the NS API terms of use.")
        self._userAgent = userAgent
        self.credential = credential
        self.rateLimiter = rateLimiter if rateLimiter is not None else RateLimiter()
        self.timeout = timeout
        self.endpoint = endpoint
        self.session = session if session is not None else requests.Session()

    @property
    def userAgent(self) -> str:
        return self._userAgent

    @userAgent.setter
    def userAgent(self, userAgent: str) -> None:
        """Empty user agents are ignored"""
        if userAgent:
            self._userAgent = userAgent

    # # Request factories
    def nation(self, name: str) -> NationRequest:
        """Returns a NationRequest authenticated with the default credential, if any"""
        return NationRequest(self, name).authenticate(self.credential)

    def region(self, name: str) -> RegionRequest:
        return RegionRequest(self, name)

    def world(self) -> WorldRequest:
        return WorldRequest(self)

    def wa(self, council: Any = WACouncil.GA) -> WARequest:
        return WARequest(self, council)

    def verify(self, name: str, checksum: str) -> VerificationRequest:
        return VerificationRequest(self, name, checksum)

    def useragent(self) -> UserAgentRequest:
        return UserAgentRequest(self)

    def issue(self, name: str, credential: Optional[Credential] = None) -> IssueCommand:
        return IssueCommand(self, name, credential or self.credential)

    def giftcard(self, name: str, credential: Optional[Credential] = None) -> GiftcardCommand:
        return GiftcardCommand(self, name, credential or self.credential)

    def create_dispatch(
        self, name: str, credential: Optional[Credential] = None
    ) -> DispatchCommand:
        return DispatchCommand(self, name, credential or self.credential, DispatchAction.ADD)

    def edit_dispatch(self, name: str, credential: Optional[Credential] = None) -> DispatchCommand:
        return DispatchCommand(self, name, credential or self.credential, DispatchAction.EDIT)

    def delete_dispatch(
        self, name: str, credential: Optional[Credential] = None
    ) -> DispatchCommand:
        return DispatchCommand(self, name, credential or self.credential, DispatchAction.REMOVE)

    def rmb_post(self, name: str, credential: Optional[Credential] = None) -> RMBPostCommand:
        return RMBPostCommand(self, name, credential or self.credential)

    @staticmethod
    def create_credentials(
        password: Optional[str] = None,
        autologin: Optional[str] = None,
        pin: Optional[str] = None,
    ) -> Credential:
        return Credential(password=password, autologin=autologin, pin=pin)

    # # Transport
    def _headers(self, request: APIRequest, body: bytes) -> Dict[str, str]:
        """Returns the headers to send the request with, including authentication.

        Raises AuthError if the request needs a credential and has none.
        """
        headers = {
            "User-Agent": self.userAgent,
            "Content-Type": "application/x-www-form-urlencoded; charset=utf-8",
            "Content-Length": str(len(body)),
        }
        if request.credential:
            headers.update(request.credential.headers())
        elif request.requires_credential():
            if isinstance(request, NationRequest):
                raise AuthError(
                    "A credential is required to request the private shards "
                    + ", ".join(request.private_shards())
                )
            raise AuthError("A credential is required to send this request.")
        return headers

    def send_request(self, request: APIRequest) -> str:
        """Sends the request to the NS API, returning the raw response body.

        Waits on the rate limiter before sending.
        Raises InvalidCredentialsError on 403, RecentLoginError on 409,
        ResourceError on 404, and RemoteError on any other failure.
        """
        if not self.userAgent:
            raise ConfigurationError("A user agent is required by the NS API terms of use.")

        body = urllib.parse.urlencode(request.arguments, quote_via=urllib.parse.quote).encode(
            "utf-8"
        )
        headers = self._headers(request, body)

        self.rateLimiter.wait()
        logger.info("Requesting %s, shards: %s", self._target(request), request.get_argument("q"))
        try:
            response = self.session.post(
                self.endpoint, data=body, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as error:
            raise RemoteError(f"Could not contact the NS API: {error}") from error

        status = response.status_code
        if not 200 <= status < 300:
            logger.info("NS API responded with status %s", status)
            if status == 403:
                raise InvalidCredentialsError(
                    "The NS API rejected the credentials provided for this request."
                )
            if status == 409:
                raise RecentLoginError(
                    "The previous login with password was too recent and no valid pin was found."
                )
            if status == 404:
                raise ResourceError(f"The NS API could not find {self._target(request)}.")
            raise RemoteError(f"The NS API returned an unknown error (status {status}).")

        if request.credential:
            request.credential.update(response.headers)
        return response.text

    @staticmethod
    def _target(request: APIRequest) -> str:
        """Describes the resource targeted by a request, for error messages"""
        for name in ("nation", "region", "wa"):
            value = request.get_argument(name)
            if value:
                return f"{name} '{value}'"
        return "the world API"
