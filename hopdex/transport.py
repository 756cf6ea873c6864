"""HTTP transport for the Untappd APIv4: request building, errors and decoding."""

from __future__ import annotations

import json
import math
from datetime import timedelta
from decimal import Decimal
from typing import Any, Iterable, Mapping, Sequence, Union
from urllib.parse import urlencode

import requests

from .models import Checkin

DEFAULT_BASE_URL = "https://api.untappd.com/v4"
DEFAULT_USER_AGENT = "hopdex"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

ParamValue = Union[str, Sequence[str]]
Params = Mapping[str, ParamValue]


class UntappdError(Exception):
    """An error reported by the Untappd API in a response's ``meta`` block."""

    def __init__(
        self,
        code: int = 0,
        detail: str = "",
        type: str = "",
        developer_friendly: str = "",
        duration: timedelta = timedelta(0),
    ) -> None:
        super().__init__(code, detail, type, developer_friendly, duration)
        self.code = code
        self.detail = detail
        self.type = type
        self.developer_friendly = developer_friendly
        self.duration = duration

    def __str__(self) -> str:
        # The API asks clients to prefer the developer friendly text.
        details = self.developer_friendly or self.detail
        return f"{self.code} [{self.type}]: {details}"


def _pairs(params: Params | None) -> list[tuple[str, str]]:
    """Flatten parameters into (key, value) pairs sorted by key."""
    if not params:
        return []
    pairs: list[tuple[str, str]] = []
    for key in sorted(params):
        value = params[key]
        values: Iterable[str] = [value] if isinstance(value, str) else value
        pairs.extend((key, str(item)) for item in values)
    return pairs


def _duration(data: Any) -> timedelta:
    """Convert a ``{"time": n, "measure": unit}`` block into a timedelta."""
    if not isinstance(data, Mapping):
        return timedelta(0)
    amount = float(data.get("time") or 0)
    if data.get("measure") == "milliseconds":
        return timedelta(milliseconds=amount)
    return timedelta(seconds=amount)


def check_response(response: requests.Response) -> None:
    """Raise if the response is not JSON or carries a non-2xx status.

    A wrong content type raises ValueError, an undecodable error body raises
    json.JSONDecodeError, and an API error raises UntappdError.
    """
    content_type = response.headers.get("Content-Type", "")
    if not content_type.startswith(JSON_CONTENT_TYPE):
        raise ValueError(
            f"expected {JSON_CONTENT_TYPE} content type, but received {content_type}"
        )

    if 200 <= response.status_code <= 299:
        return

    payload = json.loads(response.content.decode("utf-8"))
    meta = payload.get("meta") if isinstance(payload, Mapping) else None
    if not isinstance(meta, Mapping):
        meta = {}
    raise UntappdError(
        code=int(meta.get("code") or 0),
        detail=str(meta.get("error_detail") or ""),
        type=str(meta.get("error_type") or ""),
        developer_friendly=str(meta.get("developer_friendly") or ""),
        duration=_duration(meta.get("response_time")),
    )


def format_float(value: float) -> str:
    """Format a float in the shortest plain decimal form, without an exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class Transport:
    """Performs authenticated requests against the Untappd API."""

    def __init__(
        self,
        client_id: str = "",
        client_secret: str = "",
        access_token: str = "",
        session: requests.Session | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.access_token = access_token
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url
        self.user_agent = DEFAULT_USER_AGENT

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url.rstrip('/')}/{endpoint}/"

    def request(
        self,
        method: str,
        endpoint: str,
        body: Params | None = None,
        query: Params | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body, or None if empty.

        The access token is preferred; without one the client ID and secret
        are sent. A body is only sent with POST requests.
        """
        params = [
            (key, value)
            for key, value in _pairs(query)
            if key not in ("access_token", "client_id", "client_secret")
        ]
        if self.access_token:
            params.append(("access_token", self.access_token))
        else:
            params.append(("client_id", self.client_id))
            params.append(("client_secret", self.client_secret))
        params.sort(key=lambda pair: pair[0])

        headers = {"Accept": JSON_CONTENT_TYPE, "User-Agent": self.user_agent}
        data = None
        if method == "POST" and body:
            data = urlencode(_pairs(body))
            headers["Content-Type"] = FORM_CONTENT_TYPE

        response = self.session.request(
            method, self._url(endpoint), params=params, data=data, headers=headers
        )
        try:
            check_response(response)
            if not response.content:
                return None
            return json.loads(response.content.decode("utf-8"))
        finally:
            response.close()

    def get_checkins(self, endpoint: str, query: Params | None = None) -> list[Checkin]:
        """Fetch a checkin feed from an endpoint and build its checkins."""
        data = self.request("GET", endpoint, None, query)
        if not isinstance(data, Mapping):
            return []
        response = data.get("response")
        checkins = response.get("checkins") if isinstance(response, Mapping) else None
        items = checkins.get("items") if isinstance(checkins, Mapping) else None
        return [Checkin.from_json(item) for item in items or []]