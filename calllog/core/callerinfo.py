# file: calllog/core/callerinfo.py
"""
Sentinel numbers.

Networks report withheld or unavailable caller IDs as placeholder strings
instead of a number. These never identify a reachable party.
"""

from __future__ import annotations

UNKNOWN_NUMBER = "-1"
PRIVATE_NUMBER = "-2"
PAYPHONE_NUMBER = "-3"

SENTINEL_NUMBERS: frozenset[str] = frozenset({UNKNOWN_NUMBER, PRIVATE_NUMBER, PAYPHONE_NUMBER})


def is_sentinel(number: str | None) -> bool:
    """Return True if `number` is one of the unknown/private/payphone placeholders."""

    return number in SENTINEL_NUMBERS
