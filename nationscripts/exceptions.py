"""Exceptions defined and used by this package."""

import typing as t


class APIError(Exception):
    """Error interacting with NationStates API."""


class ConfigurationError(APIError, ValueError):
    """The client was not configured properly, e.g. no user agent was provided."""


class AuthError(APIError):
    """Error with authentication for NS API.

    Raised directly when an authenticated request is made without a credential.
    """


class InvalidCredentialsError(AuthError):
    """The NS API rejected the credentials provided (HTTP 403)."""


class RecentLoginError(AuthError):
    """The previous password login was too recent and no valid PIN was provided (HTTP 409)."""


class MissingArgumentsError(APIError, ValueError):
    """A request was sent without some of its required arguments."""

    def __init__(self, missing: t.Sequence[str]) -> None:
        self.missing: t.List[str] = list(missing)
        super().__init__(
            "This request misses the following required arguments: "
            + ", ".join(self.missing)
        )


class RemoteError(APIError):
    """The NS API reported an error, or could not be reached or understood."""

    def __init__(self, message: str = "The NS API returned an unknown error.") -> None:
        self.message = message
        super().__init__(message)


class ResourceError(RemoteError, ValueError):
    """Error with retrieving a resource from NS API."""
