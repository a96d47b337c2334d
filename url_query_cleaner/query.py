from __future__ import annotations

from typing import Iterable, List, Tuple
from urllib.parse import parse_qsl

from ada_url import URL

from .log import get_logger

log = get_logger(__name__)


def query_filter(url: str, filters: Iterable[str]) -> str:
    """Remove every query parameter whose name starts with one of `filters`.

    The URL is parsed per the WHATWG URL Standard; an unparseable URL raises
    the parser's ValueError unchanged. Names are matched after
    form-urlencoded decoding, and retained pairs are re-joined as
    `name=value` in their original order. When nothing is retained the
    query component (including the `?`) is dropped.
    """
    uri = URL(url)
    prefixes = tuple(filters)

    kept = [(k, v) for k, v in query_pairs(uri) if not k.startswith(prefixes)]
    joined = "&".join(f"{k}={v}" for k, v in kept)
    # The search setter drops one leading "?", and an empty search removes the
    # query altogether.
    uri.search = f"?{joined}" if joined else ""

    out = uri.href
    log.debug("query_filter: %s -> %s (%d filters)", url, out, len(prefixes))
    return out


def query_pairs(uri: URL) -> List[Tuple[str, str]]:
    """Decoded (name, value) pairs of the query, in order."""
    search = uri.search
    if not search:
        return []
    return parse_qsl(search[1:], keep_blank_values=True)
