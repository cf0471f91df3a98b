"""URL passes: root-relative rewriting and query-string stripping.

Root-relative URLs (starting with ``/``) in a captured page only resolve on
the site they were copied from.  ``rewrite_urls`` prefixes them with an
absolute base so a mockup served from anywhere still loads the assets.
Absolute URLs and relative non-rooted paths are never touched.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, NavigableString

# url(<quote?>/path<quote?>) -- quote may be ', " or a backtick and must be
# the same on both sides.
_CSS_URL_RE = re.compile(r"""url\((['"`]?)(/[^)'"]+)\1\)""")

# First "?" up to a fragment marker or the end of the value.
_QUERY_RE = re.compile(r"\?.*?(?=#|\Z)")

# (selector, attribute) pairs holding a single URL.
_SINGLE_URL_ATTRS = (
    ("link[href]", "href"),
    ("script[src]", "src"),
    ("img[src]", "src"),
)
_SRCSET_SELECTORS = ("img[srcset]", "source[srcset]")


def rewrite_url(url: str, base: str) -> str:
    """Prefix *url* with *base* when it is root-relative."""
    return base + url if url.startswith("/") else url


def rewrite_css_urls(css: str, base: str) -> str:
    """Rewrite root-relative ``url(...)`` references in CSS text."""

    def _replace(match: re.Match[str]) -> str:
        quote, path = match.group(1), match.group(2)
        return f"url({quote}{rewrite_url(path, base)}{quote})"

    return _CSS_URL_RE.sub(_replace, css)


def rewrite_srcset(srcset: str, base: str) -> str:
    """Rewrite each candidate path of a ``srcset`` value.

    Only the first two whitespace-separated tokens of a candidate (path and
    size descriptor such as ``2x`` or ``480w``) are kept.
    """
    candidates: list[str] = []
    for candidate in srcset.split(","):
        tokens = candidate.strip().split()
        path = tokens[0] if tokens else ""
        size = tokens[1] if len(tokens) > 1 else ""
        candidates.append(f"{rewrite_url(path, base)} {size}".strip())
    return ", ".join(candidates)


def rewrite_urls(soup: BeautifulSoup, base: str) -> int:
    """Apply root-relative rewriting to every URL-bearing spot in *soup*.

    Covers ``link[href]``, ``script[src]``, ``img[src]``, ``<style>`` text,
    ``style`` attributes and ``srcset`` on ``img``/``source``.  Returns the
    number of values that changed.  No-op when *base* is empty.
    """
    if not base:
        return 0

    changed = 0

    def _set(tag, attr: str, value: str) -> None:  # noqa: ANN001
        nonlocal changed
        if value != tag[attr]:
            tag[attr] = value
            changed += 1

    for selector, attr in _SINGLE_URL_ATTRS:
        for tag in soup.select(selector):
            if tag[attr]:
                _set(tag, attr, rewrite_url(tag[attr], base))

    for style in soup.select("style"):
        # Joined by hand: get_text() skips strings whose class does not
        # match the tag's expected container type.
        css = "".join(s for s in style.contents if isinstance(s, NavigableString))
        if css:
            updated = rewrite_css_urls(css, base)
            if updated != css:
                style.string = updated
                changed += 1

    for tag in soup.select("[style]"):
        if tag["style"]:
            _set(tag, "style", rewrite_css_urls(tag["style"], base))

    for selector in _SRCSET_SELECTORS:
        for tag in soup.select(selector):
            if tag["srcset"]:
                _set(tag, "srcset", rewrite_srcset(tag["srcset"], base))

    return changed


def strip_query(url: str) -> str:
    """Drop the query string from *url*, keeping any ``#fragment``."""
    return _QUERY_RE.sub("", url, count=1)


def strip_query_params(soup: BeautifulSoup) -> int:
    """Strip query strings from every ``href`` and ``src`` attribute."""
    changed = 0
    for tag in soup.select("[href], [src]"):
        for attr in ("href", "src"):
            url = tag.get(attr)
            if not url:
                continue
            cleaned = strip_query(url)
            if cleaned != url:
                tag[attr] = cleaned
                changed += 1
    return changed
