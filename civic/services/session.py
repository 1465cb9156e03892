"""Admin session flag and pluggable authenticator.

The session is a single boolean in the civic_session slot. Failed logins
raise AuthenticationError with one message; there is no lockout or rate
limiting.
"""

import hmac
import logging
from abc import ABC, abstractmethod

from pydantic import ValidationError

from civic.models.session import Session
from civic.storage.adapter import STORAGE_KEYS, StoreAdapter

LOG = logging.getLogger("civic.services.session")

INVALID_CREDENTIALS = "Invalid credentials"


class AuthenticationError(Exception):
    """Raised when login credentials are rejected."""

    def __init__(self, message: str = INVALID_CREDENTIALS) -> None:
        super().__init__(message)


class Authenticator(ABC):
    """Decides whether a username/password pair may open the admin panel."""

    @abstractmethod
    def authenticate(self, username: str, password: str) -> bool:
        ...


class StaticCredentialsAuthenticator(Authenticator):
    """Compares against one configured username/password pair."""

    def __init__(self, username: str, password: str) -> None:
        self._username = username
        self._password = password

    def authenticate(self, username: str, password: str) -> bool:
        user_ok = hmac.compare_digest((username or "").encode(), self._username.encode())
        pass_ok = hmac.compare_digest((password or "").encode(), self._password.encode())
        return user_ok and pass_ok


class SessionManager:
    """Reads and writes the authenticated flag."""

    def __init__(self, adapter: StoreAdapter, authenticator: Authenticator) -> None:
        self.adapter = adapter
        self.authenticator = authenticator

    def _session(self) -> Session:
        data = self.adapter.get(STORAGE_KEYS["session"], {"authed": False})
        try:
            return Session.model_validate(data)
        except ValidationError as e:
            LOG.warning("Invalid session slot, treating as logged out: %s", e)
            return Session()

    def is_authenticated(self) -> bool:
        return self._session().authed

    def login(self, username: str, password: str) -> None:
        """Set authed flag. Raises AuthenticationError on bad credentials."""
        if not self.authenticator.authenticate(username, password):
            LOG.info("Rejected admin login for %r", username)
            raise AuthenticationError()
        self.adapter.set(STORAGE_KEYS["session"], Session(authed=True).model_dump(mode="json"))
        LOG.info("Admin logged in as %r", username)

    def logout(self) -> None:
        self.adapter.set(STORAGE_KEYS["session"], Session(authed=False).model_dump(mode="json"))
        LOG.info("Admin logged out")
