"""URL validation and canonicalisation for user-supplied input.

``normalize_url`` tries an ordered list of candidate transformations (the raw
string, then the string with ``https://`` prepended) and returns the canonical
href of the first one that parses.  Normalisation alone does not guarantee an
HTTP(S) URL: callers must run :func:`is_valid_url` on the result.
"""

from __future__ import annotations

import re
from typing import Callable, Optional
from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*$")

# Schemes that always carry an authority component.
_HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}

_DEFAULT_PORTS = {"http": 80, "https": 443, "ftp": 21, "ws": 80, "wss": 443}

_FORBIDDEN_HOST_CHARS = set(" \t\r\n<>\\^|\"`{}")

_PATH_SAFE = "/%:@!$&'()*+,;=~-._"

_CANDIDATES: list[Callable[[str], str]] = [
    lambda s: s,
    lambda s: "https://" + s,
]


def _canonical_netloc(parts: SplitResult, scheme: str) -> Optional[str]:
    """Return the lower-cased ``host[:port]`` (with userinfo) or ``None``."""
    hostname = parts.hostname
    if not hostname or _FORBIDDEN_HOST_CHARS.intersection(hostname):
        return None
    try:
        port = parts.port
    except ValueError:
        return None

    host = f"[{hostname}]" if ":" in hostname else hostname
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"

    userinfo = parts.netloc.rpartition("@")[0] if "@" in parts.netloc else ""
    return f"{userinfo}@{host}" if userinfo else host


def _parse(candidate: str) -> Optional[str]:
    """Parse *candidate* as an absolute URL and return its canonical href."""
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    if not scheme or not _SCHEME_RE.match(scheme):
        return None

    if scheme in _HOST_SCHEMES:
        netloc = _canonical_netloc(parts, scheme)
        if netloc is None:
            return None
        path = quote(parts.path, safe=_PATH_SAFE) or "/"
    else:
        netloc = parts.netloc
        path = quote(parts.path, safe=_PATH_SAFE)
        if not netloc and not path:
            return None

    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment))


def is_valid_url(value: str) -> bool:
    """Return ``True`` only for strings that parse as ``http``/``https`` URLs."""
    href = _parse(value.strip()) if isinstance(value, str) else None
    if href is None:
        return False
    return urlsplit(href).scheme in ("http", "https")


def normalize_url(value: str) -> Optional[str]:
    """Return the canonical href for *value*, or ``None`` if it cannot be parsed.

    ``"example.com"`` becomes ``"https://example.com/"``; ``"ftp://x"``
    becomes ``"ftp://x/"`` and is left for :func:`is_valid_url` to reject.
    """
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    if not stripped:
        return None
    for transform in _CANDIDATES:
        href = _parse(transform(stripped))
        if href is not None:
            return href
    return None
