# file: calllog/__init__.py
"""
calllog - phone number helpers for call log display.

This package answers simple questions about a phone number string: can a call
or SMS be placed to it, which label should be shown for it, which URI addresses
it, and which geocoded description corresponds to it.
"""

from __future__ import annotations

from calllog.helper import CallUri, NumberInfo, PhoneNumberHelper

__all__ = ["CallUri", "NumberInfo", "PhoneNumberHelper", "__version__"]

__version__ = "0.1.0"
