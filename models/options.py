"""Cleaning options as an immutable Pydantic v2 model.

Field names are snake_case in Python; the camelCase aliases
(``targetSelectors``, ``indentSize`` ...) are what the editor surface and
the HTTP API send.  Both spellings are accepted on input.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_DELETE_SELECTORS = ("script", "noscript", "iframe", "style")
DEFAULT_INLINE_TAGS = ("span", "strong", "b", "small", "del", "s", "code", "br", "wbr")


class CleanOptions(BaseModel):
    """Configuration for one ``clean_html`` call.

    Selector strings are trusted as-is; sanitizing user input is the job of
    ``models.request.OptionsForm``.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    target_selectors: tuple[str, ...] = ()
    delete_selectors: tuple[str, ...] = DEFAULT_DELETE_SELECTORS
    delete_attrs: tuple[str, ...] = ()
    absolute_path: str = ""
    convert_xlink: bool = True
    remove_unused_meta: bool = True
    remove_unused_params: bool = True
    remove_unused_comments: bool = True
    indent_size: int = Field(default=2, ge=0)
    inline_tags: tuple[str, ...] = DEFAULT_INLINE_TAGS


DEFAULT_OPTIONS = CleanOptions()


def merge_options(
    overrides: Optional[Union[CleanOptions, Mapping[str, Any]]] = None,
    base: Optional[CleanOptions] = None,
) -> CleanOptions:
    """Merge a partial configuration over *base* field by field.

    Only fields that were explicitly given in *overrides* replace the base
    values.  Mapping keys may use field names or camelCase aliases.
    """
    if base is None:
        base = DEFAULT_OPTIONS
    if overrides is None:
        return base

    if not isinstance(overrides, CleanOptions):
        overrides = CleanOptions.model_validate(dict(overrides))

    changes = {name: getattr(overrides, name) for name in overrides.model_fields_set}
    if not changes:
        return base
    return base.model_copy(update=changes)
