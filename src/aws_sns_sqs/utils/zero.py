"""
Module: zero.py
Description: Zero-value detection for option fields.

An option field is "unset" when it holds its type's zero value; there is
no separate presence flag. is_zero() decides that with a small set of typed
predicates instead of reflective deep-equality.
"""

import dataclasses
from collections.abc import Sized
from datetime import timedelta
from decimal import Decimal
from numbers import Number
from typing import Any

from pydantic import BaseModel


def is_zero(value: Any) -> bool:
    """
    Return True if value is the zero value of its type.

    None, False, 0, empty strings and empty collections are zero. Structs
    (pydantic models and dataclasses) are zero when every field is zero.
    Objects may define their own ``is_zero()`` predicate.

    Args:
        value: Any value

    Returns:
        True if the value counts as unset
    """
    if value is None:
        return True

    predicate = getattr(value, "is_zero", None)
    if callable(predicate) and not isinstance(value, type):
        return bool(predicate())

    if isinstance(value, bool):
        return not value
    if isinstance(value, (Number, Decimal)):
        return value == 0
    if isinstance(value, timedelta):
        return value == timedelta(0)
    if isinstance(value, (str, bytes, bytearray)):
        return len(value) == 0

    if isinstance(value, BaseModel):
        return all(is_zero(getattr(value, name)) for name in type(value).model_fields)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(is_zero(getattr(value, f.name)) for f in dataclasses.fields(value))

    if isinstance(value, Sized):
        return len(value) == 0

    return False
