"""Data models for Untappd API resources, built from decoded JSON responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, Mapping

JSONObject = Mapping[str, Any]


def _obj(data: Any) -> JSONObject:
    """Return data when it is a JSON object, otherwise an empty mapping."""
    return data if isinstance(data, Mapping) else {}


def _items(data: Any) -> list[JSONObject]:
    """Return the object entries of a ``{"count": n, "items": [...]}`` block."""
    items = _obj(data).get("items") or []
    return [_obj(item) for item in items]


def _bool(value: Any) -> bool:
    """Interpret a boolean that the API may send as 0/1, a string or a bool."""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true"}
    return bool(value)


def _time(value: Any) -> datetime | None:
    """Parse an RFC 1123 timestamp with a numeric zone, as the API sends them."""
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid timestamp: {value!r}") from exc
    if parsed is None:
        raise ValueError(f"invalid timestamp: {value!r}")
    return parsed


def _int(value: Any) -> int:
    return int(value) if value not in (None, "") else 0


def _float(value: Any) -> float:
    return float(value) if value not in (None, "") else 0.0


def _str(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class BadgeMedia:
    """Links to the small, medium and large images of a badge."""

    small_image: str = ""
    medium_image: str = ""
    large_image: str = ""

    @classmethod
    def from_json(cls, data: JSONObject) -> BadgeMedia:
        data = _obj(data)
        return cls(
            small_image=_str(data.get("badge_image_sm")),
            medium_image=_str(data.get("badge_image_md")),
            large_image=_str(data.get("badge_image_lg")),
        )


@dataclass
class Badge:
    """An Untappd badge, with its media, earn time and any levels."""

    id: int = 0
    checkin_id: int = 0
    name: str = ""
    description: str = ""
    hint: str = ""
    active: bool = False
    media: BadgeMedia = field(default_factory=BadgeMedia)
    earned: datetime | None = None
    levels: list[Badge] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: JSONObject) -> Badge:
        data = _obj(data)
        return cls(
            id=_int(data.get("badge_id")),
            checkin_id=_int(data.get("checkin_id")),
            name=_str(data.get("badge_name")),
            description=_str(data.get("badge_description")),
            hint=_str(data.get("badge_hint")),
            active=_bool(data.get("badge_active_status")),
            media=BadgeMedia.from_json(data.get("media")),
            earned=_time(data.get("created_at")),
            levels=[cls.from_json(item) for item in _items(data.get("levels"))],
        )


@dataclass
class BreweryLocation:
    """Where a brewery is: address, city, state and coordinates."""

    address: str = ""
    city: str = ""
    state: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    brewery_latitude: float = 0.0
    brewery_longitude: float = 0.0

    @classmethod
    def from_json(cls, data: JSONObject) -> BreweryLocation:
        data = _obj(data)
        return cls(
            address=_str(data.get("brewery_address")),
            city=_str(data.get("brewery_city")),
            state=_str(data.get("brewery_state")),
            latitude=_float(data.get("lat")),
            longitude=_float(data.get("lng")),
            brewery_latitude=_float(data.get("brewery_lat")),
            brewery_longitude=_float(data.get("brewery_lng")),
        )


@dataclass
class BreweryContact:
    """A brewery's social media handles and website."""

    twitter: str = ""
    facebook: str = ""
    instagram: str = ""
    url: str = ""

    @classmethod
    def from_json(cls, data: JSONObject) -> BreweryContact:
        data = _obj(data)
        return cls(
            twitter=_str(data.get("twitter")),
            facebook=_str(data.get("facebook")),
            instagram=_str(data.get("instagram")),
            url=_str(data.get("url")),
        )


@dataclass
class BreweryRating:
    """The number of ratings and the average score of a brewery."""

    count: int = 0
    score: float = 0.0

    @classmethod
    def from_json(cls, data: JSONObject) -> BreweryRating:
        data = _obj(data)
        return cls(
            count=_int(data.get("count")),
            score=_float(data.get("rating_score")),
        )


@dataclass
class BreweryStats:
    """Checkin statistics of a brewery."""

    total_count: int = 0
    unique_count: int = 0
    monthly_count: int = 0
    weekly_count: int = 0
    age_on_service: float = 0.0

    @classmethod
    def from_json(cls, data: JSONObject) -> BreweryStats:
        data = _obj(data)
        return cls(
            total_count=_int(data.get("total_count")),
            unique_count=_int(data.get("unique_count")),
            monthly_count=_int(data.get("monthly_count")),
            weekly_count=_int(data.get("weekly_count")),
            age_on_service=_float(data.get("age_on_service")),
        )


@dataclass
class Brewery:
    """An Untappd brewery."""

    id: int = 0
    name: str = ""
    slug: str = ""
    logo: str = ""
    country: str = ""
    active: bool = False
    location: BreweryLocation = field(default_factory=BreweryLocation)
    contact: BreweryContact = field(default_factory=BreweryContact)
    type: str = ""
    type_id: int = 0
    independent: bool = False
    in_production: int = 0
    rating: BreweryRating = field(default_factory=BreweryRating)
    description: str = ""
    stats: BreweryStats = field(default_factory=BreweryStats)

    @classmethod
    def from_json(cls, data: JSONObject) -> Brewery:
        data = _obj(data)
        return cls(
            id=_int(data.get("brewery_id")),
            name=_str(data.get("brewery_name")),
            slug=_str(data.get("brewery_slug")),
            logo=_str(data.get("brewery_label")),
            country=_str(data.get("country_name")),
            active=_bool(data.get("brewery_active")),
            location=BreweryLocation.from_json(data.get("location")),
            contact=BreweryContact.from_json(data.get("contact")),
            type=_str(data.get("brewery_type")),
            type_id=_int(data.get("brewery_type_id")),
            independent=_bool(data.get("is_independent")),
            in_production=_int(data.get("brewery_in_production")),
            rating=BreweryRating.from_json(data.get("rating")),
            description=_str(data.get("brewery_description")),
            stats=BreweryStats.from_json(data.get("stats")),
        )


@dataclass
class Beer:
    """An Untappd beer, with its brewery when the response includes one.

    ``overall_count`` holds the rating count for beer info requests and is
    replaced with the checkin count for beer search results.
    """

    id: int = 0
    name: str = ""
    label: str = ""
    abv: float = 0.0
    ibu: int = 0
    slug: str = ""
    style: str = ""
    description: str = ""
    created: datetime | None = None
    wish_list: bool = False
    overall_rating: float = 0.0
    overall_count: int = 0
    user_rating: float = 0.0
    first_had: datetime | None = None
    recent_had: datetime | None = None
    wish_listed: datetime | None = None
    count: int = 0
    brewery: Brewery | None = None

    @classmethod
    def from_json(cls, data: JSONObject) -> Beer:
        data = _obj(data)
        brewery = data.get("brewery")
        return cls(
            id=_int(data.get("bid")),
            name=_str(data.get("beer_name")),
            label=_str(data.get("beer_label")),
            abv=_float(data.get("beer_abv")),
            ibu=_int(data.get("beer_ibu")),
            slug=_str(data.get("beer_slug")),
            style=_str(data.get("beer_style")),
            description=_str(data.get("beer_description")),
            created=_time(data.get("created_at")),
            wish_list=_bool(data.get("wish_list")),
            overall_rating=_float(data.get("rating_score")),
            overall_count=_int(data.get("rating_count")),
            brewery=Brewery.from_json(brewery) if isinstance(brewery, Mapping) else None,
        )


@dataclass
class User:
    """An Untappd user, as embedded in checkins, toasts and comments."""

    id: int = 0
    user_name: str = ""
    first_name: str = ""
    last_name: str = ""
    location: str = ""
    bio: str = ""
    url: str = ""
    avatar: str = ""
    supporter: bool = False
    private: bool = False

    @classmethod
    def from_json(cls, data: JSONObject) -> User:
        data = _obj(data)
        return cls(
            id=_int(data.get("uid")),
            user_name=_str(data.get("user_name")),
            first_name=_str(data.get("first_name")),
            last_name=_str(data.get("last_name")),
            location=_str(data.get("location")),
            bio=_str(data.get("bio")),
            url=_str(data.get("url")),
            avatar=_str(data.get("user_avatar")),
            supporter=_bool(data.get("is_supporter")),
            private=_bool(data.get("is_private")),
        )


@dataclass
class Venue:
    """A venue where a checkin took place."""

    id: int = 0
    name: str = ""
    category: str = ""
    public: bool = False
    address: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_json(cls, data: JSONObject) -> Venue:
        data = _obj(data)
        location = _obj(data.get("location"))
        return cls(
            id=_int(data.get("venue_id")),
            name=_str(data.get("venue_name")),
            category=_str(data.get("primary_category")),
            public=_bool(data.get("public_venue")),
            address=_str(location.get("venue_address")),
            city=_str(location.get("venue_city")),
            state=_str(location.get("venue_state")),
            country=_str(location.get("venue_country")),
            latitude=_float(location.get("lat")),
            longitude=_float(location.get("lng")),
        )


@dataclass
class Toast:
    """A toast given to a checkin by a user."""

    id: int = 0
    user: User = field(default_factory=User)
    created: datetime | None = None

    @classmethod
    def from_json(cls, data: JSONObject) -> Toast:
        data = _obj(data)
        return cls(
            id=_int(data.get("like_id")),
            user=User.from_json(data.get("user")),
            created=_time(data.get("created_at")),
        )


@dataclass
class Comment:
    """A comment left on a checkin by a user."""

    id: int = 0
    comment: str = ""
    user: User = field(default_factory=User)
    created: datetime | None = None

    @classmethod
    def from_json(cls, data: JSONObject) -> Comment:
        data = _obj(data)
        return cls(
            id=_int(data.get("comment_id")),
            comment=_str(data.get("comment")),
            user=User.from_json(data.get("user")),
            created=_time(data.get("created_at")),
        )


@dataclass
class CheckinMedia:
    """Links to the photos attached to a checkin."""

    photo_id: int = 0
    small_photo: str = ""
    medium_photo: str = ""
    large_photo: str = ""
    original_photo: str = ""

    @classmethod
    def from_json(cls, data: JSONObject) -> CheckinMedia:
        data = _obj(data)
        photo = _obj(data.get("photo"))
        return cls(
            photo_id=_int(data.get("photo_id")),
            small_photo=_str(photo.get("photo_img_sm")),
            medium_photo=_str(photo.get("photo_img_med")),
            large_photo=_str(photo.get("photo_img_lg")),
            original_photo=_str(photo.get("photo_img_og")),
        )


@dataclass
class Checkin:
    """An Untappd checkin with its user, beer, brewery, venue and extras.

    ``venue`` is None when the checkin has no venue.
    """

    id: int = 0
    created: datetime | None = None
    comment: str = ""
    user_rating: float = 0.0
    user: User = field(default_factory=User)
    beer: Beer = field(default_factory=Beer)
    brewery: Brewery = field(default_factory=Brewery)
    venue: Venue | None = None
    badges: list[Badge] = field(default_factory=list)
    toasts: list[Toast] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    media: list[CheckinMedia] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: JSONObject) -> Checkin:
        data = _obj(data)
        venue = Venue.from_json(data.get("venue"))
        return cls(
            id=_int(data.get("checkin_id")),
            created=_time(data.get("created_at")),
            comment=_str(data.get("checkin_comment")),
            user_rating=_float(data.get("rating_score")),
            user=User.from_json(data.get("user")),
            beer=Beer.from_json(data.get("beer")),
            brewery=Brewery.from_json(data.get("brewery")),
            venue=venue if venue.id != 0 and venue.name != "" else None,
            badges=[Badge.from_json(item) for item in _items(data.get("badges"))],
            toasts=[Toast.from_json(item) for item in _items(data.get("toasts"))],
            comments=[Comment.from_json(item) for item in _items(data.get("comments"))],
            media=[CheckinMedia.from_json(item) for item in _items(data.get("media"))],
        )