# file: calllog/core/parser.py
"""
Structured phone number parsing.

Thin wrappers around `phonenumbers` that turn parse failures into `None`
instead of raising, which is what display code wants: a number that cannot be
parsed simply has no geocode or regional formatting.
"""

from __future__ import annotations

import logging
import re

import phonenumbers
from phonenumbers import NumberParseException
from phonenumbers.phonenumber import PhoneNumber

logger = logging.getLogger(__name__)

_LOCALE_SPLIT = re.compile(r"[-_]")


def _normalize_region(country_iso: str | None) -> str | None:
    if not country_iso:
        return None
    return country_iso.strip().upper() or None


def parse_phone_number(number: str | None, country_iso: str | None) -> PhoneNumber | None:
    """
    Parse `number` into a structured `PhoneNumber`.

    Args:
        number: Number as logged (may include separators).
        country_iso: ISO 3166-1 alpha-2 region used when `number` has no
            leading `+` country code. Case-insensitive.

    Returns:
        The parsed number, or None if `phonenumbers` rejects the input.
    """

    if not number:
        return None
    try:
        return phonenumbers.parse(number, _normalize_region(country_iso))
    except NumberParseException as exc:
        logger.debug("Unable to parse number %r (region=%s): %s", number, country_iso, exc)
        return None


def format_for_region(parsed: PhoneNumber, country_iso: str | None) -> str:
    """
    Format `parsed` as it would be dialled from `country_iso`.

    Numbers inside the region come out in national format; numbers outside it
    include the international prefix. Without a region the international
    format is used.
    """

    region = _normalize_region(country_iso)
    if region is None:
        return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.INTERNATIONAL)
    return phonenumbers.format_out_of_country_calling_number(parsed, region)


def parse_locale(locale: str) -> tuple[str, str | None, str | None]:
    """
    Split a locale tag into (language, script, region).

    Accepts `en`, `en_US`, `en-US` and `zh-Hant-TW` styles. An encoding suffix
    (`en_US.UTF-8`) is ignored.
    """

    tag = locale.split(".", 1)[0].strip()
    parts = [p for p in _LOCALE_SPLIT.split(tag) if p]
    if not parts:
        return "en", None, None

    lang = parts[0].lower()
    script: str | None = None
    region: str | None = None
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            script = part.title()
        elif region is None:
            region = part.upper()
    return lang, script, region
