"""Public re-exports of all model types."""

from models.options import (
    DEFAULT_DELETE_SELECTORS,
    DEFAULT_INLINE_TAGS,
    DEFAULT_OPTIONS,
    CleanOptions,
    merge_options,
)
from models.request import CleanRequest, OptionsForm, coerce_indent_size, form_values
from models.response import CleanResponse, DemoResponse

__all__ = [
    # Options
    "CleanOptions",
    "DEFAULT_OPTIONS",
    "DEFAULT_DELETE_SELECTORS",
    "DEFAULT_INLINE_TAGS",
    "merge_options",
    # Form sanitization
    "OptionsForm",
    "coerce_indent_size",
    "form_values",
    # Request/Response
    "CleanRequest",
    "CleanResponse",
    "DemoResponse",
]
