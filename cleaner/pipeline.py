"""The HTML cleaning pipeline behind the /clean endpoint.

Orchestrates loading, the tree passes, scope extraction and formatting
into a single ``clean_html()`` function.  Each call builds its own tree,
so calls are independent and safe to run from several threads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from formatting.beautifier import FormatOptions, HtmlBeautifier, MarkupFormatter
from models.options import CleanOptions, merge_options
from parsing.extraction import extract_scope
from parsing.loader import load_document
from parsing.namespaces import convert_xlink_hrefs
from parsing.pruning import (
    prune_meta,
    remove_attributes,
    remove_elements,
    select_targets,
    strip_comments,
)
from parsing.urls import rewrite_urls, strip_query_params

logger = logging.getLogger("htmlmock")

_DEFAULT_FORMATTER = HtmlBeautifier()


def _log_pass(pass_name: str, count: int) -> None:
    logger.debug(
        "pass %s touched %d nodes",
        pass_name,
        count,
        extra={"pass_name": pass_name, "count": count},
    )


def clean_html(
    html: str,
    options: CleanOptions | Mapping[str, Any] | None = None,
    *,
    formatter: MarkupFormatter | None = None,
) -> str:
    """Clean and re-indent a captured HTML fragment.

    Orchestrates:
    1. Parsing (records whether ``<html>``/``<head>``/``<body>`` were present)
    2. Scoping the body to the target selectors
    3. Element and attribute removal
    4. Root-relative URL rewriting
    5. ``xlink:href`` to ``href`` conversion on SVG elements
    6. Unused ``<meta>`` removal
    7. Query-string stripping from ``href``/``src``
    8. Comment removal
    9. Choosing the part of the document to serialize
    10. Re-indentation through *formatter*

    Args:
        html: Raw HTML text; fragments and malformed markup are fine.
        options: A ``CleanOptions`` or a partial mapping merged over the
            defaults.  Selectors are trusted to be valid.
        formatter: Re-indentation strategy, ``HtmlBeautifier`` by default.

    Returns:
        The cleaned, formatted markup.
    """
    opts = merge_options(options)
    document = load_document(html)
    soup = document.soup

    if opts.target_selectors:
        _log_pass("target_selectors", select_targets(soup, opts.target_selectors))

    if opts.delete_selectors:
        _log_pass("delete_selectors", remove_elements(soup, opts.delete_selectors))

    if opts.delete_attrs:
        _log_pass("delete_attrs", remove_attributes(soup, opts.delete_attrs))

    if opts.absolute_path:
        _log_pass("absolute_path", rewrite_urls(soup, opts.absolute_path))

    if opts.convert_xlink:
        _log_pass("convert_xlink", convert_xlink_hrefs(soup))

    if opts.remove_unused_meta:
        _log_pass("remove_unused_meta", prune_meta(soup))

    if opts.remove_unused_params:
        _log_pass("remove_unused_params", strip_query_params(soup))

    if opts.remove_unused_comments:
        _log_pass("remove_unused_comments", strip_comments(soup))

    markup = extract_scope(document, scoped=bool(opts.target_selectors))

    if formatter is None:
        formatter = _DEFAULT_FORMATTER
    format_options = FormatOptions.create(opts.indent_size, opts.inline_tags)
    try:
        return formatter.format(markup, format_options)
    except Exception:  # noqa: BLE001
        logger.warning("formatter failed, returning unformatted markup", exc_info=True)
        return markup
