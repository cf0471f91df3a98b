"""Scope extraction and serialization of the cleaned tree.

Serialization mirrors what a browser's ``outerHTML``/``innerHTML`` gives:
attributes stay in source order and are always double-quoted, void
elements have no trailing slash, only ``&``, ``<``, ``>`` and non-breaking
spaces are escaped in text, and a leading newline inside ``<pre>``,
``<textarea>`` or ``<listing>`` is written twice so reparsing keeps it.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.element import PreformattedString
from bs4.formatter import HTMLFormatter

from parsing.loader import LoadedDocument, body_element, document_element, head_element

# The parser drops one newline right after these start tags.
NEWLINE_EATING_TAGS = ("pre", "textarea", "listing")


def _escape(value: str) -> str:
    return EntitySubstitution.substitute_xml(value).replace("\xa0", "&nbsp;")


class _SourceOrderFormatter(HTMLFormatter):
    """HTML formatter that keeps attributes in the order they were parsed."""

    def attributes(self, tag: Tag):  # noqa: ANN201
        return list(tag.attrs.items())

    def quoted_attribute_value(self, value: str) -> str:
        return '"' + value.replace('"', "&quot;") + '"'


_FORMATTER = _SourceOrderFormatter(
    entity_substitution=_escape,
    void_element_close_prefix=None,
    empty_attributes_are_booleans=False,
)


def restore_leading_newlines(soup: BeautifulSoup) -> int:
    """Double the leading newline of ``pre``/``textarea``/``listing`` text.

    Mutates *soup* and returns the number of strings changed.  Call it once,
    right before serializing.
    """
    changed = 0
    for tag in soup.find_all(NEWLINE_EATING_TAGS):
        first = tag.contents[0] if tag.contents else None
        if (
            isinstance(first, NavigableString)
            and not isinstance(first, PreformattedString)
            and first.startswith("\n")
        ):
            first.replace_with(type(first)("\n" + first))
            changed += 1
    return changed


def outer_html(tag: Tag | None) -> str:
    if tag is None:
        return ""
    return tag.decode(formatter=_FORMATTER)


def inner_html(tag: Tag | None) -> str:
    if tag is None:
        return ""
    return tag.decode_contents(formatter=_FORMATTER)


def extract_scope(document: LoadedDocument, scoped: bool) -> str:
    """Serialize the part of the document the output should contain.

    Strict priority chain:

    1. *scoped* (target selectors were applied) -- body contents
    2. source had ``<html>`` -- the whole ``<html>`` element
    3. source had ``<head>`` -- the ``<head>`` element
    4. source had ``<body>`` -- the ``<body>`` element
    5. otherwise -- body contents

    Leading newlines in preformatted text are restored in the tree first.
    """
    soup = document.soup
    restore_leading_newlines(soup)
    if scoped:
        return inner_html(body_element(soup))
    if document.has_html_tag:
        return outer_html(document_element(soup))
    if document.has_head_tag:
        return outer_html(head_element(soup))
    if document.has_body_tag:
        return outer_html(body_element(soup))
    return inner_html(body_element(soup))
