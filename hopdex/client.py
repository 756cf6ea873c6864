"""Entry point for the Untappd APIv4: a client that groups the API services."""

from __future__ import annotations

import requests

from .auth_service import AuthService
from .beer_service import BeerService
from .brewery_service import BreweryService
from .transport import Transport


class NoClientIDError(ValueError):
    """Raised when a client is created with an empty client ID."""

    def __init__(self) -> None:
        super().__init__("no client ID")


class NoClientSecretError(ValueError):
    """Raised when a client is created with an empty client secret."""

    def __init__(self) -> None:
        super().__init__("no client secret")


class NoAccessTokenError(ValueError):
    """Raised when an authenticated client is created with an empty access token."""

    def __init__(self) -> None:
        super().__init__("no access token")


class Client:
    """A client for the Untappd APIv4.

    Create one with a client ID and secret, or use ``Client.authenticated``
    with an OAuth access token to reach methods that act for a user. The
    API methods are grouped under ``auth``, ``beer`` and ``brewery``.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        session: requests.Session | None = None,
    ) -> None:
        if not client_id:
            raise NoClientIDError()
        if not client_secret:
            raise NoClientSecretError()
        self._wire(
            Transport(
                client_id=client_id,
                client_secret=client_secret,
                session=session,
            )
        )

    @classmethod
    def authenticated(
        cls, access_token: str, session: requests.Session | None = None
    ) -> Client:
        """Create a client that authenticates every request with an access token."""
        if not access_token:
            raise NoAccessTokenError()
        client = cls.__new__(cls)
        client._wire(Transport(access_token=access_token, session=session))
        return client

    def _wire(self, transport: Transport) -> None:
        self.transport = transport
        self.auth = AuthService(transport)
        self.beer = BeerService(transport)
        self.brewery = BreweryService(transport)