"""Tree-pruning passes: scoping, element and attribute removal, comments.

Every function here **mutates** the soup in place and returns the number of
nodes it touched, which the pipeline logs at debug level.

Elements are detached with ``extract()`` rather than ``decompose()``: a
selector can match both an element and one of its descendants, and the
descendant must still be usable after its ancestor has been removed.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence

from bs4 import BeautifulSoup, Comment, Tag

from parsing.loader import body_element

UNUSED_META_SELECTOR = 'meta:not([charset]):not([name="viewport"])'


def select_targets(soup: BeautifulSoup, selectors: Sequence[str]) -> int:
    """Reduce the body to deep copies of the elements matched by *selectors*.

    Matches are collected selector by selector (document order within each
    selector) and concatenated.  An element matched twice, or matched
    together with one of its ancestors, is copied each time.  When nothing
    matches the body is left empty.
    """
    if not selectors:
        return 0

    body = body_element(soup)
    if body is None:
        return 0

    targets: list[Tag] = []
    for selector in selectors:
        targets.extend(soup.select(selector))

    # Copy before clearing: a match may be the body itself or one of its
    # ancestors.
    clones = [copy.copy(el) for el in targets]
    body.clear()
    for clone in clones:
        body.append(clone)
    return len(clones)


def remove_elements(soup: BeautifulSoup, selectors: Sequence[str]) -> int:
    """Detach every element matching each selector, in selector order.

    Each selector runs against the tree as left by the previous one.
    """
    removed = 0
    for selector in selectors:
        for el in soup.select(selector):
            el.extract()
            removed += 1
    return removed


def remove_attributes(soup: BeautifulSoup, names: Sequence[str]) -> int:
    """Delete the named attributes from every element carrying any of them.

    Names compare case-insensitively, as HTML attribute names do.  Missing
    attributes are ignored.
    """
    if not names:
        return 0

    wanted = {name.lower() for name in names}

    def _carries_any(tag: Tag) -> bool:
        return any(attr.lower() in wanted for attr in tag.attrs)

    removed = 0
    for tag in soup.find_all(_carries_any):
        for attr in [a for a in tag.attrs if a.lower() in wanted]:
            del tag[attr]
            removed += 1
    return removed


def prune_meta(soup: BeautifulSoup) -> int:
    """Remove ``<meta>`` tags other than charset and viewport declarations."""
    elements = soup.select(UNUSED_META_SELECTOR)
    for el in elements:
        el.extract()
    return len(elements)


def strip_comments(soup: BeautifulSoup) -> int:
    """Remove every HTML comment in the document, at any depth.

    Comments are collected first and detached afterwards, so adjacent
    comments are all removed.  The search starts at the document root and
    therefore also covers comments outside ``<html>``.
    """
    comments = soup.find_all(string=lambda text: isinstance(text, Comment))
    for comment in comments:
        comment.extract()
    return len(comments)
