"""Document loading for the cleaning pipeline.

Parses raw HTML with BeautifulSoup's ``html5lib`` builder, which follows
the browser parsing algorithm: fragments are wrapped into an implicit
``html``/``head``/``body`` document, unclosed tags are closed, and SVG
content keeps its namespace (including ``xlink:href`` attributes).

Because the parsed tree always contains the wrapper elements, whether the
*source text* had them is recorded separately as shape flags.  Those flags
decide what gets serialized at the end of the pipeline.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

_HTML_TAG_RE = re.compile(r"<html[\s>]", re.IGNORECASE)
_HEAD_TAG_RE = re.compile(r"<head[\s>]", re.IGNORECASE)
_BODY_TAG_RE = re.compile(r"<body[\s>]", re.IGNORECASE)


@dataclass(frozen=True)
class LoadedDocument:
    """A parsed tree plus the wrapper tags seen in the original text."""

    soup: BeautifulSoup
    has_html_tag: bool
    has_head_tag: bool
    has_body_tag: bool


def load_document(raw_html: str) -> LoadedDocument:
    """Parse *raw_html* into a fresh tree.

    Never raises on malformed markup -- the parser always produces some
    tree.  Attribute values are kept as plain strings (no splitting of
    ``class`` into lists) so they serialize back unchanged.
    """
    soup = BeautifulSoup(raw_html, "html5lib", multi_valued_attributes=None)
    return LoadedDocument(
        soup=soup,
        has_html_tag=bool(_HTML_TAG_RE.search(raw_html)),
        has_head_tag=bool(_HEAD_TAG_RE.search(raw_html)),
        has_body_tag=bool(_BODY_TAG_RE.search(raw_html)),
    )


def document_element(soup: BeautifulSoup) -> Tag | None:
    """Return the top-level ``<html>`` element."""
    return soup.find("html", recursive=False)


def head_element(soup: BeautifulSoup) -> Tag | None:
    root = document_element(soup)
    if root is None:
        return None
    return root.find("head", recursive=False)


def body_element(soup: BeautifulSoup) -> Tag | None:
    root = document_element(soup)
    if root is None:
        return None
    return root.find("body", recursive=False)
