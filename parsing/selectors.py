"""CSS selector validation for user-typed selector lists.

The editor surface collects selectors as one comma-separated string.  Each
candidate is trimmed and compiled with soupsieve (the engine behind
``BeautifulSoup.select``); anything that does not compile is dropped so an
invalid selector never reaches the cleaning pipeline.
"""

from __future__ import annotations

from collections.abc import Iterable

import soupsieve
from soupsieve import SelectorSyntaxError


def is_valid_selector(selector: str) -> bool:
    """Return True if *selector* compiles as a CSS selector."""
    try:
        soupsieve.compile(selector)
    except SelectorSyntaxError:
        return False
    return True


def parse_selector_list(text: str) -> list[str]:
    """Split a comma-separated selector string into valid selectors.

    Empty and invalid candidates are silently skipped.
    """
    if not text:
        return []
    selectors: list[str] = []
    for candidate in text.split(","):
        candidate = candidate.strip()
        if candidate and is_valid_selector(candidate):
            selectors.append(candidate)
    return selectors


def format_selector_list(items: Iterable[str]) -> str:
    """Join selectors back into the comma-separated form shown to users."""
    return ", ".join(items)
