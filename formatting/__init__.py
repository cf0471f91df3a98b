"""Markup formatter interface and the default HTML beautifier."""

from formatting.beautifier import FormatOptions, HtmlBeautifier, MarkupFormatter

__all__ = ["FormatOptions", "HtmlBeautifier", "MarkupFormatter"]
