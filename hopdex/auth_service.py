"""API methods that act on behalf of an authenticated user."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .models import Checkin
from .transport import Transport, format_float

_MAX_ID = 2**31 - 1
_DEFAULT_LIMIT = 25


def _mapping(value: Any) -> Mapping[str, Any]:
    """Return ``value`` if it is a JSON object, else an empty one."""
    return value if isinstance(value, Mapping) else {}


def _response(data: Any) -> Mapping[str, Any]:
    """Return the ``response`` object of a decoded API reply, or an empty one."""
    return _mapping(_mapping(data).get("response"))


class _Service:
    """Common base of the API services: pages checkin feeds."""

    transport: Transport

    def _checkin_feed(
        self, endpoint: str, min_id: int, max_id: int, limit: int
    ) -> list[Checkin]:
        return self.transport.get_checkins(
            endpoint,
            {"min_id": str(min_id), "max_id": str(max_id), "limit": str(limit)},
        )


@dataclass
class CheckinRequest:
    """The parameters of a beer checkin.

    ``beer_id``, ``gmt_offset`` (in hours) and ``time_zone`` are required by
    the API; the rest are sent only when set. ``foursquare_id`` must be given
    when ``foursquare`` is enabled.
    """

    beer_id: int
    gmt_offset: int = 0
    time_zone: str = ""
    foursquare_id: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    comment: str = ""
    rating: float = 0.0
    facebook: bool = False
    twitter: bool = False
    foursquare: bool = False

    def to_params(self) -> dict[str, str]:
        """Build the form parameters sent to the checkin endpoint."""
        params = {
            "bid": str(self.beer_id),
            "gmt_offset": str(self.gmt_offset),
            "timezone": self.time_zone,
        }
        if self.foursquare_id:
            params["foursquare_id"] = self.foursquare_id
        for key, value in (
            ("geolat", self.latitude),
            ("geolng", self.longitude),
            ("rating", self.rating),
        ):
            if value != 0:
                params[key] = format_float(value)
        if self.comment:
            params["shout"] = self.comment
        for key, enabled in (
            ("facebook", self.facebook),
            ("twitter", self.twitter),
            ("foursquare", self.foursquare),
        ):
            if enabled:
                params[key] = "on"
        return params


class AuthService(_Service):
    """Methods which require an authenticated client."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def checkin(self, request: CheckinRequest) -> Checkin:
        """Check in a beer and return the resulting checkin."""
        data = self.transport.request("POST", "checkin/add", request.to_params(), None)
        return Checkin.from_json(_response(data))

    def checkins(self) -> list[Checkin]:
        """Return up to 25 recent checkins from the user's friends."""
        return self.checkins_min_max_id_limit(0, _MAX_ID, _DEFAULT_LIMIT)

    def checkins_min_max_id_limit(
        self, min_id: int, max_id: int, limit: int
    ) -> list[Checkin]:
        """Return friends' checkins between two checkin IDs, at most 50 per call."""
        return self._checkin_feed("checkin/recent", min_id, max_id, limit)