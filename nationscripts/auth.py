"""Credentials used to authenticate nation requests and commands."""

import logging
import threading
import typing as t

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class Credential:
    """Handles producing headers to authenticate for NS API.

    Holds the password / autologin / pin triple of a nation.
    The autologin and pin are refreshed in place whenever the NS API
    returns new ones, so the same Credential can be reused across requests.
    """

    def __init__(
        self,
        password: t.Optional[str] = None,
        autologin: t.Optional[str] = None,
        pin: t.Optional[str] = None,
    ) -> None:
        """Can be constructed using at least one of a password or autologin.
        For security, autologin is recommended.
        """
        if not password and not autologin:
            raise ValueError(
                "Credential must be provided with one of password or autologin"
            )

        self.password = password
        self.autologin = autologin
        self.pin = pin

        # Concurrent requests sharing this credential refresh it one at a time
        self._lock = threading.Lock()

    def headers(self) -> t.Dict[str, str]:
        """Returns authentication headers, omitting any that are not known."""
        with self._lock:
            headers = {}
            if self.password:
                headers["X-Password"] = self.password
            if self.autologin:
                headers["X-Autologin"] = self.autologin
            if self.pin:
                headers["X-Pin"] = self.pin
            return headers

    def update(self, headers: t.Mapping[str, str]) -> None:
        """Updates the credential from response headers,
        notably storing the X-Pin and X-Autologin values.

        Missing or empty headers leave the current values in place.
        """
        # Autologin is provided when authenticating with password
        # Pin should be provided when authenticating with password/autologin
        with self._lock:
            autologin = headers.get("X-Autologin")
            if autologin:
                self.autologin = autologin
                logger.debug("Refreshed autologin token")
            pin = headers.get("X-Pin")
            if pin:
                self.pin = pin
                logger.debug("Refreshed pin")

    def __repr__(self) -> str:
        # Never expose secrets in logs
        return (
            f"Credential(password={'***' if self.password else None}, "
            f"autologin={'***' if self.autologin else None}, "
            f"pin={'***' if self.pin else None})"
        )
