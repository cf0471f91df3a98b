"""HTML capture cleaner: parse, prune, rewrite and re-indent markup."""

from cleaner.pipeline import clean_html

__version__ = "0.1.0"

__all__ = ["clean_html", "__version__"]
