"""
Field-level validation rules.

Pure functions only. Two email rules and two URL rules exist on purpose:
- the RFD contact form (after triage) uses the loose email pattern and a
  generic "does it parse as a URL" check for the screener link
- the direct request form on the chooser page uses a strict TLD pattern
  and only accepts http(s) links
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlsplit

from .constants import SYNOPSIS_MAX, SYNOPSIS_MIN

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
EMAIL_STRICT_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[a-zA-Z]{2,}$")
HTTP_PREFIX_RE = re.compile(r"^(https?://)", re.IGNORECASE)
SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*$")

# Schemes that cannot be used without a host
HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


def _s(val: Optional[str]) -> str:
    return (val or "").strip()


def is_blank(val: Optional[str]) -> bool:
    return _s(val) == ""


def is_valid_email(email: Optional[str]) -> bool:
    return bool(EMAIL_RE.fullmatch(email or ""))


def is_valid_email_strict(email: Optional[str]) -> bool:
    return bool(EMAIL_STRICT_RE.fullmatch(email or ""))


def is_parseable_url(url: Optional[str]) -> bool:
    """
    Absolute-URL check in the spirit of a browser URL parser:
    - needs a scheme ("ftp://x" and "mailto:a@b.com" pass)
    - http(s)/ftp/ws(s) additionally need a host
    - no whitespace inside
    """
    u = _s(url)
    if not u or any(ch.isspace() for ch in u):
        return False
    try:
        parts = urlsplit(u)
    except ValueError:
        return False
    if not parts.scheme or not SCHEME_RE.match(parts.scheme):
        return False
    # urlsplit("localhost:8080") reads "localhost" as the scheme; require ":" right after it
    if not u.lower().startswith(parts.scheme.lower() + ":"):
        return False
    if parts.scheme.lower() in HOST_SCHEMES:
        return bool(parts.netloc) and bool(parts.hostname)
    return bool(parts.netloc or parts.path)


def has_http_prefix(url: Optional[str]) -> bool:
    return bool(HTTP_PREFIX_RE.match(url or ""))


def char_len(val: Optional[str]) -> int:
    return len(_s(val))


def within_length(val: Optional[str], lo: int = SYNOPSIS_MIN, hi: int = SYNOPSIS_MAX) -> bool:
    """Inclusive [lo, hi] on the trimmed value."""
    return lo <= char_len(val) <= hi
