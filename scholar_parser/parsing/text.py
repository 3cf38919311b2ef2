"""
Text and URL normalization helpers for Scholar result markup.

All functions are pure. Numeric helpers return None instead of raising,
so a malformed count simply leaves the corresponding field unset.
"""

import re
from urllib.parse import parse_qs

from scholar_parser.constants import GROUP_SEPARATORS

_INTEGER_RE = re.compile(r"[+-]?\d+")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def as_integer(text: str | None) -> int | None:
    """
    Parse an integer literal.

    Args:
        text: Candidate text (surrounding whitespace is ignored)

    Returns:
        The integer, or None if text is not a valid integer literal
    """
    if text is None:
        return None
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def parse_group_integer(text: str | None) -> int | None:
    """Parse an integer written with thousands separators (e.g. "1,230")."""
    if text is None:
        return None
    for separator in GROUP_SEPARATORS:
        text = text.replace(separator, "")
    return as_integer(text)


def find_year(text: str | None, pattern: re.Pattern) -> str | None:
    """Return the first year-like token in text, or None."""
    if not text:
        return None
    match = pattern.search(text)
    return match.group(0) if match else None


def path_to_url(site: str, path: str) -> str:
    """
    Return a full URL for path.

    Paths that already carry a scheme are returned unchanged; otherwise
    exactly one leading slash is ensured and the site is prepended.

    Examples:
        path_to_url("https://example.com", "/path?a=1") -> "https://example.com/path?a=1"
        path_to_url("https://example.com", "path") -> "https://example.com/path"
    """
    if _SCHEME_RE.match(path):
        return path
    if not path.startswith("/"):
        path = "/" + path
    return site + path


def strip_url_arg(url: str, arg: str) -> str:
    """
    Remove every occurrence of a query argument from url.

    Remaining arguments keep their relative order. A URL without a query
    string is returned unchanged; when nothing remains the "?" is kept
    ("https://x/y?num=20" -> "https://x/y?").
    """
    base, sep, query = url.partition("?")
    if not sep:
        return url

    prefix = arg + "="
    kept = [part for part in query.split("&") if not part.startswith(prefix)]
    return base + "?" + "&".join(kept)


def get_url_arg(url: str, arg: str) -> str | None:
    """Return the first value of a query argument, or None if absent."""
    _, sep, query = url.partition("?")
    if not sep:
        return None
    values = parse_qs(query, keep_blank_values=True).get(arg)
    return values[0] if values else None
