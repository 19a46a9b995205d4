# file: calllog/helper.py
"""
Phone number helper for call log display.

`PhoneNumberHelper` combines the sentinel checks, the telephony string
utilities and the `phonenumbers` wrappers behind the handful of questions UI
code asks about a logged number.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from phonenumbers.phonenumber import PhoneNumber

from calllog.config import CalllogSettings, DisplayLabels
from calllog.core.callerinfo import (
    PAYPHONE_NUMBER,
    PRIVATE_NUMBER,
    UNKNOWN_NUMBER,
    is_sentinel,
)
from calllog.core.geocode import geocode_for_number
from calllog.core.parser import parse_phone_number
from calllog.core.telephony import extract_network_portion, is_starts_post_dial, is_uri_number

logger = logging.getLogger(__name__)

VOICEMAIL_SCHEME = "voicemail"
SIP_SCHEME = "sip"
TEL_SCHEME = "tel"

# Characters left literal in the scheme-specific part, in addition to the
# unreserved set that `quote` always keeps. Android percent-encodes `+` and `@`
# here (`tel:%2B1...`); they stay literal so URIs read as RFC 3966/3261 forms.
_URI_SAFE = "+@*!'()"


@dataclass(frozen=True, slots=True)
class CallUri:
    """URI used to place a call. `number` is the decoded scheme-specific part."""

    scheme: str
    number: str

    def __str__(self) -> str:
        return f"{self.scheme}:{quote(self.number, safe=_URI_SAFE)}"


@dataclass(frozen=True, slots=True)
class NumberInfo:
    """Everything the helper can say about one number."""

    number: str
    display: str
    can_place_calls: bool
    can_send_sms: bool
    is_voicemail: bool
    is_sip: bool
    call_uri: CallUri
    geocode: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "display": self.display,
            "can_place_calls": self.can_place_calls,
            "can_send_sms": self.can_send_sms,
            "is_voicemail": self.is_voicemail,
            "is_sip": self.is_sip,
            "call_uri": str(self.call_uri),
            "geocode": self.geocode,
        }


def _normalize_voicemail(value: str | None) -> str | None:
    """
    Reduce a configured voicemail number to its network portion.

    A value carrying a post-dial part is kept verbatim: the network portion of a
    logged number never contains one, so such a setting matches nothing rather
    than matching its truncated prefix.
    """

    if not value or not value.strip():
        return None
    value = value.strip()
    if any(is_starts_post_dial(c) for c in value):
        logger.warning("Voicemail number %r has a post-dial part and will never match", value)
        return value
    return extract_network_portion(value) or None


class PhoneNumberHelper:
    """
    Helper for formatting and classifying phone numbers.

    Args:
        labels: Labels shown for sentinel and voicemail numbers.
        voicemail_number: The configured voicemail number. Compared against the
            network portion of each number; None disables voicemail detection.
        locale: Locale used for geocoded descriptions (e.g. "en", "de_CH").
    """

    def __init__(
        self,
        *,
        labels: DisplayLabels | None = None,
        voicemail_number: str | None = None,
        locale: str = "en",
    ) -> None:
        self.labels = labels or DisplayLabels()
        self.voicemail_number = _normalize_voicemail(voicemail_number)
        self.locale = locale

    @classmethod
    def from_settings(cls, settings: CalllogSettings) -> PhoneNumberHelper:
        return cls(
            labels=settings.labels,
            voicemail_number=settings.voicemail_number,
            locale=settings.locale,
        )

    def can_place_calls_to(self, number: str | None) -> bool:
        """Returns true if it is possible to place a call to the given number."""

        return bool(number) and not is_sentinel(number)

    def can_send_sms_to(self, number: str | None) -> bool:
        """Returns true if it is possible to send an SMS to the given number."""

        return (
            self.can_place_calls_to(number)
            and not self.is_voicemail_number(number)
            and not self.is_sip_number(number)
        )

    def get_display_number(self, number: str | None, formatted_number: str | None = None) -> str:
        """
        Returns the string to display for the given phone number.

        Args:
            number: The number to display.
            formatted_number: The formatted number if available, may be None.
        """

        if not number:
            return ""
        if number == UNKNOWN_NUMBER:
            return self.labels.unknown
        if number == PRIVATE_NUMBER:
            return self.labels.private
        if number == PAYPHONE_NUMBER:
            return self.labels.payphone
        if self.is_voicemail_number(number):
            return self.labels.voicemail
        return formatted_number or number

    def get_call_uri(self, number: str | None) -> CallUri:
        """Returns a URI that can be used to place a call to this number."""

        number = number or ""
        if self.is_voicemail_number(number):
            return CallUri(VOICEMAIL_SCHEME, "x")
        if self.is_sip_number(number):
            return CallUri(SIP_SCHEME, number)
        return CallUri(TEL_SCHEME, number)

    def is_voicemail_number(self, number: str | None) -> bool:
        """Returns true if the given number is the number of the configured voicemail."""

        if self.voicemail_number is None:
            return False
        return extract_network_portion(number) == self.voicemail_number

    def is_sip_number(self, number: str | None) -> bool:
        """Returns true if the given number is a SIP address."""

        return is_uri_number(number)

    def parse_phone_number(self, number: str | None, country_iso: str | None) -> PhoneNumber | None:
        """
        Returns a structured phone number from the given text representation,
        or None if the number cannot be parsed.
        """

        return parse_phone_number(number, country_iso)

    def get_geocode_for_number(self, structured_phone_number: PhoneNumber | None) -> str:
        """Returns the geocode associated with a phone number or "" if not available."""

        return geocode_for_number(structured_phone_number, locale=self.locale)

    def describe(
        self,
        number: str | None,
        *,
        formatted_number: str | None = None,
        country_iso: str | None = None,
    ) -> NumberInfo:
        number = number or ""
        parsed = None
        if self.can_place_calls_to(number) and not self.is_sip_number(number):
            parsed = self.parse_phone_number(number, country_iso)
        info = NumberInfo(
            number=number,
            display=self.get_display_number(number, formatted_number),
            can_place_calls=self.can_place_calls_to(number),
            can_send_sms=self.can_send_sms_to(number),
            is_voicemail=self.is_voicemail_number(number),
            is_sip=self.is_sip_number(number),
            call_uri=self.get_call_uri(number),
            geocode=self.get_geocode_for_number(parsed),
        )
        logger.debug("Described number", extra={"number": number, "display": info.display})
        return info
