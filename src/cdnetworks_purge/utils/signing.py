"""Request signing for the CDNetworks API."""
from __future__ import annotations

import base64
import hashlib
import hmac
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import NamedTuple


class Credentials(NamedTuple):
    date: str
    authorization: str


def http_date(now: datetime | None = None) -> str:
    """Format a time as an RFC 7231 HTTP-date, e.g. 'Sun, 06 Nov 1994 08:49:37 GMT'."""
    now = now or datetime.now(timezone.utc)
    return format_datetime(now.astimezone(timezone.utc), usegmt=True)


def generate_password(api_key: str, date: str) -> str:
    """Base64 HMAC-SHA1 of the date, keyed with the api key."""
    digest = hmac.new(api_key.encode("utf-8"), date.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("utf-8")


def basic_authorization(api_user: str, password: str) -> str:
    token = base64.b64encode(f"{api_user}:{password}".encode("utf-8")).decode("utf-8")
    return f"Basic {token}"


def sign(api_user: str, api_key: str, now: datetime | None = None) -> Credentials:
    """
    Signs the current date for the given user.
    The returned date must be sent unchanged as the Date header.
    """
    date = http_date(now)
    return Credentials(
        date=date,
        authorization=basic_authorization(api_user, generate_password(api_key, date)),
    )
