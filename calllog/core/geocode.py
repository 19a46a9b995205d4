# file: calllog/core/geocode.py
"""
Offline geocoding.

Uses the geocoding metadata bundled with `phonenumbers`; no network I/O.
"""

from __future__ import annotations

from phonenumbers import geocoder
from phonenumbers.phonenumber import PhoneNumber

from calllog.core.parser import parse_locale


def geocode_for_number(parsed: PhoneNumber | None, *, locale: str = "en") -> str:
    """
    Return the geographic description for `parsed` in `locale`.

    The description may be a country or a more granular area depending on the
    available metadata. Returns an empty string for None or when nothing is
    known about the number.
    """

    if parsed is None:
        return ""
    lang, script, region = parse_locale(locale)
    return geocoder.description_for_number(parsed, lang, script=script, region=region) or ""
