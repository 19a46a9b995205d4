from __future__ import annotations

import pytest

from calllog.config import DisplayLabels
from calllog.core.callerinfo import PAYPHONE_NUMBER, PRIVATE_NUMBER, UNKNOWN_NUMBER
from calllog.helper import CallUri, PhoneNumberHelper

VOICEMAIL = "+16505550199"


@pytest.fixture()
def helper() -> PhoneNumberHelper:
    return PhoneNumberHelper(voicemail_number=VOICEMAIL)


@pytest.mark.parametrize("number", ["", None, UNKNOWN_NUMBER, PRIVATE_NUMBER, PAYPHONE_NUMBER])
def test_cannot_place_calls_to_empty_or_sentinel(helper: PhoneNumberHelper, number) -> None:
    assert not helper.can_place_calls_to(number)
    assert not helper.can_send_sms_to(number)


def test_can_place_calls_and_sms(helper: PhoneNumberHelper) -> None:
    assert helper.can_place_calls_to("+16502530000")
    assert helper.can_send_sms_to("+16502530000")


def test_no_sms_to_voicemail_or_sip(helper: PhoneNumberHelper) -> None:
    assert helper.can_place_calls_to("+1 650-555-0199")
    assert not helper.can_send_sms_to("+1 650-555-0199")
    assert helper.can_place_calls_to("alice@example.com")
    assert not helper.can_send_sms_to("alice@example.com")


def test_get_display_number_labels(helper: PhoneNumberHelper) -> None:
    assert helper.get_display_number("") == ""
    assert helper.get_display_number(None) == ""
    assert helper.get_display_number(UNKNOWN_NUMBER) == "Unknown"
    assert helper.get_display_number(PRIVATE_NUMBER) == "Private number"
    assert helper.get_display_number(PAYPHONE_NUMBER) == "Payphone"
    assert helper.get_display_number("+1 (650) 555-0199", "(650) 555-0199") == "Voicemail"


def test_get_display_number_prefers_formatted(helper: PhoneNumberHelper) -> None:
    assert helper.get_display_number("6502530000", "(650) 253-0000") == "(650) 253-0000"
    assert helper.get_display_number("6502530000", "") == "6502530000"
    assert helper.get_display_number("6502530000") == "6502530000"


def test_custom_labels() -> None:
    helper = PhoneNumberHelper(
        labels=DisplayLabels(unknown="Unbekannt", voicemail="Combox"), voicemail_number="086"
    )
    assert helper.get_display_number(UNKNOWN_NUMBER) == "Unbekannt"
    assert helper.get_display_number("086") == "Combox"
    assert helper.get_display_number(PAYPHONE_NUMBER) == "Payphone"


def test_get_call_uri(helper: PhoneNumberHelper) -> None:
    assert str(helper.get_call_uri(VOICEMAIL)) == "voicemail:x"
    assert helper.get_call_uri("alice@example.com") == CallUri("sip", "alice@example.com")
    assert str(helper.get_call_uri("alice@example.com")) == "sip:alice@example.com"
    assert str(helper.get_call_uri("+16502530000")) == "tel:+16502530000"
    assert str(helper.get_call_uri("*86#")) == "tel:*86%23"
    assert str(helper.get_call_uri("650 253 0000")) == "tel:650%20253%200000"


def test_voicemail_detection_uses_network_portion(helper: PhoneNumberHelper) -> None:
    assert helper.is_voicemail_number("+1 (650) 555-0199")
    assert helper.is_voicemail_number("+16505550199,1234")
    assert not helper.is_voicemail_number("16505550199")


def test_voicemail_detection_disabled_without_configured_number() -> None:
    helper = PhoneNumberHelper()
    assert helper.voicemail_number is None
    assert not helper.is_voicemail_number("")
    assert str(helper.get_call_uri("")) == "tel:"


def test_configured_voicemail_is_normalized() -> None:
    helper = PhoneNumberHelper(voicemail_number="+1 (650) 555-0199")
    assert helper.voicemail_number == VOICEMAIL
    assert helper.is_voicemail_number(VOICEMAIL)


def test_parse_and_geocode(helper: PhoneNumberHelper) -> None:
    parsed = helper.parse_phone_number("020 8366 1177", "GB")
    assert parsed is not None
    assert helper.get_geocode_for_number(parsed) == "London"
    assert helper.parse_phone_number("garbage", "GB") is None
    assert helper.get_geocode_for_number(None) == ""


def test_describe(helper: PhoneNumberHelper) -> None:
    info = helper.describe("020 8366 1177", country_iso="GB")
    assert info.display == "020 8366 1177"
    assert info.can_place_calls and info.can_send_sms
    assert not info.is_voicemail and not info.is_sip
    assert info.geocode == "London"
    assert info.to_dict()["call_uri"] == "tel:020%208366%201177"

    private = helper.describe(PRIVATE_NUMBER)
    assert private.display == "Private number"
    assert private.geocode == ""
    assert not private.can_place_calls


def test_none_number_is_treated_as_empty() -> None:
    helper = PhoneNumberHelper()
    assert helper.get_call_uri(None) == CallUri("tel", "")
    assert str(helper.get_call_uri(None)) == "tel:"

    info = helper.describe(None)
    assert info.number == ""
    assert info.to_dict()["call_uri"] == "tel:"
    assert info.display == ""


def test_voicemail_setting_with_post_dial_part_is_not_truncated() -> None:
    helper = PhoneNumberHelper(voicemail_number="12345,678")
    assert helper.voicemail_number == "12345,678"
    assert not helper.is_voicemail_number("12345")
    assert not helper.is_voicemail_number("12345,678")
    assert helper.can_send_sms_to("12345")
