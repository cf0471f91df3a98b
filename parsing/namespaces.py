"""SVG namespace normalization.

``xlink:href`` is deprecated in SVG 2; modern browsers accept a plain
``href`` on ``<use>``, ``<image>``, ``<a>`` and friends.
"""

from __future__ import annotations

from bs4 import BeautifulSoup

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_HREF = "xlink:href"


def convert_xlink_hrefs(soup: BeautifulSoup) -> int:
    """Move ``xlink:href`` values to ``href`` on all SVG-namespace elements.

    Elements without the attribute (or with an empty value) are untouched.
    """
    converted = 0
    for tag in soup.find_all(True):
        if tag.namespace != SVG_NAMESPACE:
            continue
        href = tag.get(XLINK_HREF)
        if href:
            tag["href"] = href
            del tag[XLINK_HREF]
            converted += 1
    return converted
