"""Runtime value helpers for Lox.

Lox values map directly onto Python objects:

* nil      -> None
* booleans -> bool
* numbers  -> float (every number is a double, there is no integer type)
* strings  -> str
* callables -> instances of `lox.callables.LoxCallable`

This module holds the conversions that need to know about that mapping,
chiefly the rule used to turn a value into the text `print` writes.
"""

from __future__ import annotations

import math
from typing import Any

from .callables import LoxCallable


def format_number(value: float) -> str:
    """Render a number the way Lox prints it.

    Integral values drop the trailing ".0" so that `3 + 4` prints `7`.
    Infinities and NaN print as `Infinity`, `-Infinity` and `NaN`.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    text = repr(value)
    if text.endswith('.0'):
        text = text[:-2]
    return text


def to_string(value: Any) -> str:
    """Convert a Lox value to its printed representation."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, LoxCallable):
        return repr(value)
    raise TypeError(f"not a Lox value: {value!r}")
