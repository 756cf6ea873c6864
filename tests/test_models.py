import json
from datetime import datetime, timedelta, timezone

import pytest

from hopdex.models import (
    Badge,
    BadgeMedia,
    Beer,
    Brewery,
    BreweryContact,
    BreweryLocation,
    BreweryRating,
    BreweryStats,
    Checkin,
    CheckinMedia,
    Comment,
    Toast,
    User,
    Venue,
)

USER_CHECKINS_JSON = """{
  "meta": {"code": 200, "response_time": {"time": 0.841, "measure": "seconds"}},
  "notifications": [],
  "response": {
    "checkins": {
      "count": 1,
      "items": [
        {
          "checkin_id": 137117722,
          "created_at": "Sat, 13 Dec 2014 19:15:38 +0000",
          "checkin_comment": "When in Rome..",
          "rating_score": 3,
          "user": {
            "uid": 1,
            "user_name": "beerfan",
            "first_name": "Sample",
            "last_name": "Drinker",
            "location": "New York, NY",
            "is_supporter": 1,
            "url": "https://example.com",
            "is_private": 0
          },
          "beer": {
            "bid": 7481,
            "beer_name": "Brooklyn Bowl Pale Ale",
            "beer_label": "https://example.com/badge-beer-default.png",
            "beer_style": "American Pale Ale",
            "beer_abv": 0,
            "wish_list": false
          },
          "brewery": {
            "brewery_id": 1954,
            "brewery_name": "Kelso of Brooklyn",
            "brewery_slug": "kelso-of-brooklyn",
            "brewery_label": "https://example.com/brewery-logo.jpeg",
            "country_name": "United States",
            "contact": {"twitter": "KelsoBeer", "facebook": "", "instagram": "",
                        "url": "https://example.com/"},
            "location": {"brewery_city": "Brooklyn", "brewery_state": "NY",
                         "lat": 40.6823, "lng": -73.9656},
            "brewery_active": 1
          },
          "venue": {
            "venue_id": 2141,
            "venue_name": "Brooklyn Bowl",
            "primary_category": "Arts & Entertainment",
            "location": {"venue_address": "61 Wythe Ave", "venue_city": "Brooklyn",
                         "venue_state": "NY", "venue_country": "United States",
                         "lat": 40.7219, "lng": -73.9575},
            "public_venue": true
          },
          "comments": {
            "total_count": 0,
            "count": 1,
            "items": [{"comment_id": 1, "comment": "hello, world",
                       "user": {"user_name": "beerfan"}}]
          },
          "toasts": {
            "total_count": 0,
            "count": 1,
            "auth_toast": false,
            "items": [{"like_id": 1, "user": {"user_name": "beerfan"}}]
          },
          "media": {"count": 0, "items": []},
          "badges": {
            "count": 1,
            "items": [
              {
                "badge_id": 189,
                "badge_name": "Taste the Music",
                "badge_description": "Badge Description Here",
                "created_at": "Sat, 13 Dec 2014 19:15:41 +0000"
              }
            ]
          }
        }
      ]
    }
  }
}"""


@pytest.fixture
def checkins():
    data = json.loads(USER_CHECKINS_JSON)
    return [Checkin.from_json(item) for item in data["response"]["checkins"]["items"]]


def test_expected_checkins(checkins):
    assert len(checkins) == 1
    c = checkins[0]
    assert c.id == 137117722
    assert c.comment == "When in Rome.."
    assert c.beer.name == "Brooklyn Bowl Pale Ale"
    assert c.beer.style == "American Pale Ale"
    assert c.brewery.name == "Kelso of Brooklyn"
    assert c.user.user_name == "beerfan"
    assert c.badges[0].name == "Taste the Music"
    assert c.toasts[0].id == 1
    assert c.toasts[0].user.user_name == "beerfan"
    assert c.comments[0].id == 1
    assert c.comments[0].comment == "hello, world"
    assert c.comments[0].user.user_name == "beerfan"


def test_checkin_details(checkins):
    c = checkins[0]
    assert c.user_rating == 3.0
    assert c.created == datetime(2014, 12, 13, 19, 15, 38, tzinfo=timezone.utc)
    assert c.media == []
    assert c.user.supporter is True
    assert c.user.private is False
    assert c.brewery.active is True
    assert c.brewery.location.city == "Brooklyn"
    assert c.brewery.location.longitude == -73.9656
    assert c.brewery.contact.twitter == "KelsoBeer"
    assert c.badges[0].earned == datetime(2014, 12, 13, 19, 15, 41, tzinfo=timezone.utc)
    assert c.badges[0].levels == []


def test_checkin_venue_present(checkins):
    venue = checkins[0].venue
    assert venue == Venue(
        id=2141,
        name="Brooklyn Bowl",
        category="Arts & Entertainment",
        public=True,
        address="61 Wythe Ave",
        city="Brooklyn",
        state="NY",
        country="United States",
        latitude=40.7219,
        longitude=-73.9575,
    )


@pytest.mark.parametrize(
    "venue",
    [[], {}, {"venue_id": 5, "venue_name": ""}, {"venue_id": 0, "venue_name": "Bar"}, None],
)
def test_checkin_venue_absent(venue):
    assert Checkin.from_json({"checkin_id": 1, "venue": venue}).venue is None


def test_empty_checkin_has_defaults():
    c = Checkin.from_json({})
    assert c.id == 0
    assert c.created is None
    assert c.badges == [] and c.toasts == [] and c.comments == [] and c.media == []
    assert c.beer.brewery is None


def test_checkin_media():
    c = Checkin.from_json(
        {
            "media": {
                "count": 1,
                "items": [
                    {
                        "photo_id": 42,
                        "photo": {
                            "photo_img_sm": "https://example.com/sm.jpg",
                            "photo_img_med": "https://example.com/md.jpg",
                            "photo_img_lg": "https://example.com/lg.jpg",
                            "photo_img_og": "https://example.com/og.jpg",
                        },
                    }
                ],
            }
        }
    )
    assert c.media == [
        CheckinMedia(
            photo_id=42,
            small_photo="https://example.com/sm.jpg",
            medium_photo="https://example.com/md.jpg",
            large_photo="https://example.com/lg.jpg",
            original_photo="https://example.com/og.jpg",
        )
    ]


def test_beer_info_with_brewery():
    beer = Beer.from_json(
        {
            "bid": 1,
            "beer_name": "Black Note Stout",
            "rating_count": 123,
            "brewery": {"brewery_name": "Bell's Brewery, Inc."},
        }
    )
    assert beer.id == 1
    assert beer.name == "Black Note Stout"
    assert beer.overall_count == 123
    assert beer.brewery.name == "Bell's Brewery, Inc."


def test_beer_without_brewery():
    beer = Beer.from_json({"bid": 2, "beer_name": "Pliny the Younger", "beer_style": "Triple IPA"})
    assert beer.brewery is None
    assert beer.style == "Triple IPA"


def test_brewery_info():
    brewery = Brewery.from_json(
        {
            "brewery_id": 1,
            "brewery_name": "Bell's Brewery, Inc.",
            "brewery_slug": "bells-brewery-inc",
            "brewery_type": "Micro Brewery",
            "brewery_type_id": 2,
            "contact": {"twitter": "BellsBrewery", "facebook": "", "url": ""},
            "is_independent": 1,
            "rating": {"count": 10, "rating_score": 3.9},
            "stats": {"total_count": 100, "unique_count": 50, "monthly_count": 5,
                      "weekly_count": 1, "age_on_service": 12.5},
        }
    )
    assert brewery.id == 1
    assert brewery.slug == "bells-brewery-inc"
    assert brewery.type == "Micro Brewery"
    assert brewery.type_id == 2
    assert brewery.contact == BreweryContact(twitter="BellsBrewery")
    assert brewery.independent is True
    assert brewery.rating == BreweryRating(count=10, score=3.9)
    assert brewery.stats == BreweryStats(100, 50, 5, 1, 12.5)


def test_brewery_location_fields():
    loc = BreweryLocation.from_json(
        {"brewery_address": "1 Main St", "brewery_city": "Town", "brewery_state": "MI",
         "lat": 1.5, "lng": 2.5, "brewery_lat": 3.5, "brewery_lng": 4.5}
    )
    assert loc == BreweryLocation("1 Main St", "Town", "MI", 1.5, 2.5, 3.5, 4.5)


def test_badge_with_levels_and_media():
    badge = Badge.from_json(
        {
            "badge_id": 7,
            "badge_name": "Level Up",
            "badge_hint": "Drink more",
            "badge_active_status": 1,
            "media": {"badge_image_sm": "s", "badge_image_md": "m", "badge_image_lg": "l"},
            "created_at": "Mon, 01 Jun 2015 08:00:00 -0400",
            "levels": {"count": 2, "items": [{"badge_id": 8}, {"badge_id": 9}]},
        }
    )
    assert badge.active is True
    assert badge.hint == "Drink more"
    assert badge.media == BadgeMedia("s", "m", "l")
    assert badge.earned == datetime(2015, 6, 1, 8, 0, tzinfo=timezone(timedelta(hours=-4)))
    assert [level.id for level in badge.levels] == [8, 9]


def test_invalid_timestamp_raises():
    with pytest.raises(ValueError):
        Badge.from_json({"created_at": "not a date"})


def test_toast_and_comment():
    toast = Toast.from_json({"like_id": 3, "user": {"user_name": "someone"}})
    comment = Comment.from_json({"comment_id": 4, "comment": "cheers", "user": {"uid": 9}})
    assert toast.id == 3 and toast.user.user_name == "someone"
    assert comment.id == 4 and comment.comment == "cheers" and comment.user.id == 9


def test_user_bool_strings():
    user = User.from_json({"is_supporter": "true", "is_private": "0"})
    assert user.supporter is True
    assert user.private is False