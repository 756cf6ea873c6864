# hopdex

A Python client for the Untappd APIv4. It looks up beers and breweries,
searches for them, reads checkin feeds, and checks in beers on behalf of an
authenticated user. Responses come back as dataclasses from `hopdex.models`
(`Beer`, `Brewery`, `Checkin`, `Badge`, `User`, `Venue`, `Toast`, `Comment`
and others).

## Installation

```
pip install hopdex
```

## Getting a client

Untappd requires an API key. For read-only access, create a client from your
client ID and client secret:

```python
from hopdex.client import Client

client = Client("my-client-id", "secret")
```

Actions that act for a user, such as checking in a beer, need an OAuth access
token:

```python
client = Client.authenticated("token")
```

Either constructor takes an optional `requests.Session` as its last
argument. An empty client ID, client secret or access token raises
`NoClientIDError`, `NoClientSecretError` or `NoAccessTokenError` (all
subclasses of `ValueError`).

When a client has an access token, every request carries it; otherwise the
client ID and secret are sent as query parameters. The API methods are
grouped under `client.auth`, `client.beer` and `client.brewery`.

## Beers

```python
beer = client.beer.info(1)
print(beer.name, beer.overall_count)
if beer.brewery is not None:
    print(beer.brewery.name)

for beer in client.beer.search("Dogfish 60 Minute"):
    print(beer.id, beer.name, beer.style, beer.brewery.name)

recent = client.beer.checkins(1)
```

`info(beer_id, compact=True)` asks for basic data only. `search` returns up
to 25 results sorted by date; in search results `overall_count` is the
beer's checkin count, while `info` fills it with the rating count.
`search_offset_limit_sort(query, offset, limit, sort)` and
`checkins_min_max_id_limit(beer_id, min_id, max_id, limit)` page through
longer result lists.

## Breweries

```python
brewery = client.brewery.info(1)
print(brewery.name, brewery.slug, brewery.type, brewery.contact.twitter)

for brewery in client.brewery.search_offset_limit("russian river", 0, 25):
    print(brewery.id, brewery.name, brewery.country)

recent = client.brewery.checkins(1)
```

## Checking in

```python
import time

from hopdex.auth_service import CheckinRequest

now = time.localtime()
request = CheckinRequest(
    beer_id=1,
    gmt_offset=now.tm_gmtoff // 3600,
    time_zone=now.tm_zone,
    comment="hello world",
    rating=3.5,
)
checkin = client.auth.checkin(request)

for item in client.auth.checkins():
    print(item.user.user_name, item.beer.name)
```

Optional fields of `CheckinRequest` (location, comment, rating, sharing to
Facebook, Twitter or Foursquare) are sent only when set; `to_params()` shows
the form that will be posted. `client.auth.checkins()` returns up to 25
recent checkins from the user's friends, and
`checkins_min_max_id_limit(min_id, max_id, limit)` pages through them.

A checkin's `venue` is `None` when it has none. Image and photo links are
plain strings, and timestamps are timezone-aware `datetime` values or `None`.

## Errors

When the API answers with an error status, the call raises
`hopdex.transport.UntappdError`. It carries the error's `code`, `detail`,
`type`, `developer_friendly` and `duration` (a `timedelta`), and prints as
`500 [invalid_param]: This Beer ID is invalid.`, preferring the developer
friendly text when there is one. If a response is not JSON, the call raises
a `ValueError` that names the content type it received.

## What is not included

The client covers beers, breweries and the authenticated user's checkins and
friend feed. It has no methods for user profiles, badges or wish lists by
username, venues, or checkins around a location.

## Running the tests

```
pip install -e ".[test]"
pytest
```