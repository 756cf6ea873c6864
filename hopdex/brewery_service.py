"""API methods involving breweries."""

from __future__ import annotations

from .auth_service import _DEFAULT_LIMIT, _MAX_ID, _Service, _mapping, _response
from .models import Brewery, Checkin
from .transport import Transport


class BreweryService(_Service):
    """Access to brewery information, search and checkin feeds."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def checkins(self, brewery_id: int) -> list[Checkin]:
        """Return up to 25 recent checkins of a brewery's beers."""
        return self.checkins_min_max_id_limit(brewery_id, 0, _MAX_ID, _DEFAULT_LIMIT)

    def checkins_min_max_id_limit(
        self, brewery_id: int, min_id: int, max_id: int, limit: int
    ) -> list[Checkin]:
        """Return a brewery's checkins between two checkin IDs, at most 25 per call."""
        return self._checkin_feed(f"brewery/checkins/{brewery_id}", min_id, max_id, limit)

    def info(self, brewery_id: int, compact: bool = False) -> Brewery:
        """Return information about a brewery; ``compact`` asks for basic data only."""
        query = {"compact": "true"} if compact else {}
        data = self.transport.request("GET", f"brewery/info/{brewery_id}", None, query)
        return Brewery.from_json(_mapping(_response(data).get("brewery")))

    def search(self, query: str) -> list[Brewery]:
        """Search for breweries, returning up to 25 results."""
        return self.search_offset_limit(query, 0, _DEFAULT_LIMIT)

    def search_offset_limit(self, query: str, offset: int, limit: int) -> list[Brewery]:
        """Search for breweries with paging, at most 50 per call."""
        params = {"q": query, "offset": str(offset), "limit": str(limit)}
        data = self.transport.request("GET", "search/brewery", None, params)
        items = _mapping(_response(data).get("brewery")).get("items") or []
        return [Brewery.from_json(_mapping(_mapping(item).get("brewery"))) for item in items]