"""
Module: merge.py
Description: Combine per-call options with client defaults.

Rules, applied field by field:
- an unset (zero) call field takes the default value;
- a set scalar or identifier keeps the call value;
- a set mapping or sequence keeps the call value, unless append mode is on:
  mappings then receive every default entry (the default wins on a key
  collision) and sequences get the default entries appended, duplicates
  included.

The merge is pure: neither input is modified and a new options value is
returned.
"""

from collections.abc import Mapping
from typing import Any, Optional, TypeVar

from pydantic import BaseModel

from ..utils.zero import is_zero

OptionsT = TypeVar("OptionsT", bound=BaseModel)


def merge_options(
    call_options: Optional[OptionsT],
    default_options: Optional[OptionsT],
    append_attributes: bool = False
) -> Optional[OptionsT]:
    """
    Resolve the effective options for one call.

    Args:
        call_options: Options passed to the call, or None
        default_options: Client default options of the same kind, or None
        append_attributes: Merge collection fields instead of replacing them

    Returns:
        Effective options. If call_options is None the defaults are returned
        as-is; if default_options is None the call options are returned.
    """
    if call_options is None:
        return default_options
    if default_options is None:
        return call_options

    updates = {}
    for name in type(call_options).model_fields:
        updates[name] = _merge_field(
            getattr(call_options, name),
            getattr(default_options, name, None),
            append_attributes
        )

    return call_options.model_copy(update=updates)


def _merge_field(value: Any, default: Any, append_attributes: bool) -> Any:
    if is_zero(value):
        return _copy_collection(default)

    if not append_attributes:
        return value

    if isinstance(value, Mapping):
        merged = dict(value)
        merged.update(default or {})
        return merged

    if isinstance(value, (list, tuple)):
        return list(value) + list(default or [])

    return value


def _copy_collection(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (list, tuple)):
        return list(value)
    return value
