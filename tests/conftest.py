"""
Pytest configuration and fixtures for nationscripts tests.

The HTTP session is replaced by a mock and the rate limiter runs on a fake clock,
so no test touches the network or actually sleeps.
"""

import typing as t
import urllib.parse
from unittest import mock

import pytest
import requests

from nationscripts.api import NSAPI
from nationscripts.auth import Credential
from nationscripts.ratelimit import RateLimiter

USER_AGENT = "nationscripts test suite"


class FakeClock:
    """Monotonic clock that only moves when slept on or advanced."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: t.List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_response(
    text: str, status: int = 200, headers: t.Optional[t.Mapping[str, str]] = None
) -> mock.Mock:
    """Mock of a requests.Response"""
    return mock.Mock(status_code=status, text=text, headers=dict(headers or {}))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def limiter(clock: FakeClock) -> RateLimiter:
    return RateLimiter(clock=clock, sleep=clock.sleep)


@pytest.fixture
def session() -> mock.Mock:
    """Session whose post returns an empty nation unless configured otherwise"""
    session = mock.Mock(spec=requests.Session)
    session.post.return_value = make_response("<NATION></NATION>")
    return session


@pytest.fixture
def credential() -> Credential:
    return Credential(password="hunter2")


@pytest.fixture
def api(session: mock.Mock, limiter: RateLimiter) -> NSAPI:
    return NSAPI(USER_AGENT, rateLimiter=limiter, session=session)


@pytest.fixture
def authed_api(session: mock.Mock, limiter: RateLimiter, credential: Credential) -> NSAPI:
    return NSAPI(USER_AGENT, credential=credential, rateLimiter=limiter, session=session)


@pytest.fixture
def reply(session: mock.Mock) -> t.Callable[..., None]:
    """Queues response bodies (or ready made responses) for the mocked session"""

    def queue(*responses: t.Union[str, mock.Mock]) -> None:
        session.post.side_effect = [
            make_response(item) if isinstance(item, str) else item for item in responses
        ]

    return queue


@pytest.fixture
def sent(session: mock.Mock) -> t.Callable[[int], t.Dict[str, str]]:
    """Returns the form arguments of a call made to the mocked session"""

    def arguments(index: int = -1) -> t.Dict[str, str]:
        body = session.post.call_args_list[index].kwargs["data"]
        return dict(urllib.parse.parse_qsl(body.decode("utf-8")))

    return arguments


@pytest.fixture
def response() -> t.Callable[..., mock.Mock]:
    """Factory for mocked responses with a status and headers"""
    return make_response
