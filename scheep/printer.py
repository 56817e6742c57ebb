"""External representation of Scheep values."""

from __future__ import annotations

import math
from io import StringIO

from scheep import LispValue
from scheep.types.symbol import Symbol

_STRING_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def to_string(value: LispValue, write: bool = True) -> str:
    """Render `value`; with write=False strings are shown without quotes (display)."""
    with StringIO() as buffer:
        _write(buffer, value, write)
        return buffer.getvalue()


def _write(buffer: StringIO, value: LispValue, write: bool) -> None:
    if value is True:
        buffer.write("#t")
    elif value is False:
        buffer.write("#f")
    elif isinstance(value, str):
        if write:
            buffer.write('"')
            buffer.write("".join(_STRING_ESCAPES.get(c, c) for c in value))
            buffer.write('"')
        else:
            buffer.write(value)
    elif value is None:
        # host functions returning nothing
        buffer.write("#<unspecified>")
    elif isinstance(value, float) and not math.isfinite(value):
        buffer.write("+nan.0" if math.isnan(value) else ("+inf.0" if value > 0 else "-inf.0"))
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, list):
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(buffer, item, write)
        buffer.write(")")
    else:
        # numbers, procedures and syntax carry their own repr
        buffer.write(repr(value))
