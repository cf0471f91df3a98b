"""Request models for the POST /clean endpoint.

``OptionsForm`` holds option values exactly as the editor form sends them:
selector lists as comma-separated strings and the indent as free text.
Validators sanitize them before anything reaches the cleaning pipeline --
invalid selectors are dropped and bad indent input becomes 0.
"""

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from models.options import DEFAULT_OPTIONS, CleanOptions, merge_options
from parsing.selectors import format_selector_list, is_valid_selector, parse_selector_list

_LIST_FIELDS = ("target_selectors", "delete_selectors", "delete_attrs", "inline_tags")


def coerce_indent_size(value: Any) -> int:
    """Coerce user indent input to a non-negative int.

    Non-numeric, non-finite and negative values give 0; fractions are
    floored.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number < 0:
        return 0
    return math.floor(number)


class OptionsForm(BaseModel):
    """Raw option values from the editor; every field is optional.

    Only the fields present in the request override the defaults.
    """

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    target_selectors: Optional[list[str]] = None
    delete_selectors: Optional[list[str]] = None
    delete_attrs: Optional[list[str]] = None
    inline_tags: Optional[list[str]] = None
    absolute_path: Optional[str] = None
    convert_xlink: Optional[bool] = None
    remove_unused_meta: Optional[bool] = None
    remove_unused_params: Optional[bool] = None
    remove_unused_comments: Optional[bool] = None
    indent_size: Optional[int] = None

    @field_validator(*_LIST_FIELDS, mode="before")
    @classmethod
    def sanitize_selector_list(cls, v):
        if v is None:
            return None
        if isinstance(v, str):
            return parse_selector_list(v)
        if isinstance(v, (list, tuple)):
            items = (item.strip() for item in v if isinstance(item, str))
            return [item for item in items if item and is_valid_selector(item)]
        return v

    @field_validator("indent_size", mode="before")
    @classmethod
    def sanitize_indent_size(cls, v):
        if v is None:
            return None
        return coerce_indent_size(v)

    def to_options(self, base: CleanOptions = DEFAULT_OPTIONS) -> CleanOptions:
        """Merge the values given in this form over *base*."""
        return merge_options(self.model_dump(exclude_none=True), base)


def form_values(options: CleanOptions) -> dict[str, Any]:
    """Render *options* the way the editor form displays them."""
    values = options.model_dump(by_alias=True)
    for name in _LIST_FIELDS:
        values[to_camel(name)] = format_selector_list(getattr(options, name))
    return values


class CleanRequest(BaseModel):
    """Incoming request body for the POST /clean endpoint.

    Extra fields are rejected with a 422 response.
    """

    model_config = ConfigDict(extra="forbid")

    html: str
    options: OptionsForm = Field(default_factory=OptionsForm)
