# file: calllog/core/telephony.py
"""
Telephony string utilities.

These mirror the dialer conventions used when comparing a logged number with
the configured voicemail number:

- the *network portion* of a number is what is sent to the network when
  dialing (digits, `*`, `#`, `+`, the wild `N`), up to the first post-dial
  pause/wait character;
- a number containing `@` (raw or percent-encoded) is a SIP address.
"""

from __future__ import annotations

import unicodedata

PAUSE = ","
WAIT = ";"
WILD = "N"

# Calling line identification restriction prefixes. A `+` directly after one
# of these still starts an international number.
CLIR_ON = "*31#"
CLIR_OFF = "#31#"

_DIALABLE_NON_DIGITS = frozenset("*#+" + WILD)


def is_dialable(c: str) -> bool:
    """True if `c` is an ASCII digit or one of `*`, `#`, `+`, `N`."""

    return ("0" <= c <= "9") or c in _DIALABLE_NON_DIGITS


def is_starts_post_dial(c: str) -> bool:
    """True if `c` starts the post-dial string (pause or wait)."""

    return c in (PAUSE, WAIT)


def _decimal_digit(c: str) -> int | None:
    # Accepts any Unicode decimal digit (e.g. Arabic-Indic or full-width digits).
    return unicodedata.decimal(c, None)


def extract_network_portion(number: str | None) -> str:
    """
    Return the dialable network portion of `number`.

    Separators and letters are dropped, non-ASCII decimal digits are converted
    to ASCII, and extraction stops at the first pause or wait character.
    """

    if not number:
        return ""

    out: list[str] = []
    for c in number:
        digit = _decimal_digit(c)
        if digit is not None:
            out.append(str(digit))
        elif c == "+":
            prefix = "".join(out)
            if not prefix or prefix in (CLIR_ON, CLIR_OFF):
                out.append(c)
        elif is_dialable(c):
            out.append(c)
        elif is_starts_post_dial(c):
            break
    return "".join(out)


def is_uri_number(number: str | None) -> bool:
    """True if `number` looks like a SIP/URI address rather than a phone number."""

    if not number:
        return False
    return "@" in number or "%40" in number
