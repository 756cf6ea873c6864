"""API methods involving beers."""

from __future__ import annotations

from .auth_service import _DEFAULT_LIMIT, _MAX_ID, _Service, _mapping, _response
from .models import Beer, Brewery, Checkin
from .transport import Transport

_DEFAULT_SORT = "date"


class BeerService(_Service):
    """Access to beer information, search and checkin feeds."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def checkins(self, beer_id: int) -> list[Checkin]:
        """Return up to 25 of a beer's most recent checkins."""
        return self.checkins_min_max_id_limit(beer_id, 0, _MAX_ID, _DEFAULT_LIMIT)

    def checkins_min_max_id_limit(
        self, beer_id: int, min_id: int, max_id: int, limit: int
    ) -> list[Checkin]:
        """Return a beer's checkins between two checkin IDs, at most 25 per call."""
        return self._checkin_feed(f"beer/checkins/{beer_id}", min_id, max_id, limit)

    def info(self, beer_id: int, compact: bool = False) -> Beer:
        """Return information about a beer; ``compact`` asks for basic data only."""
        query = {"compact": "true"} if compact else {}
        data = self.transport.request("GET", f"beer/info/{beer_id}", None, query)
        return Beer.from_json(_mapping(_response(data).get("beer")))

    def search(self, query: str) -> list[Beer]:
        """Search for beers, returning up to 25 results sorted by date."""
        return self.search_offset_limit_sort(query, 0, _DEFAULT_LIMIT, _DEFAULT_SORT)

    def search_offset_limit_sort(
        self, query: str, offset: int, limit: int, sort: str
    ) -> list[Beer]:
        """Search for beers with paging and sorting, at most 50 per call.

        Each beer's ``overall_count`` holds its global checkin count.
        """
        params = {
            "q": query,
            "offset": str(offset),
            "limit": str(limit),
            "sort": str(sort),
        }
        data = self.transport.request("GET", "search/beer", None, params)
        items = _mapping(_response(data).get("beers")).get("items") or []

        beers = []
        for item in map(_mapping, items):
            beer = Beer.from_json(_mapping(item.get("beer")))
            beer.overall_count = int(item.get("checkin_count") or 0)
            beer.brewery = Brewery.from_json(_mapping(item.get("brewery")))
            beers.append(beer)
        return beers