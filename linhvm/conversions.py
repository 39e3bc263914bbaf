"""Type names, text rendering and conversions between runtime values."""

from __future__ import annotations

import math
import re
from typing import Any

from .values import UINT64_MASK, FunctionObject, UInt

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_INT_PREFIX = re.compile(r"\s*([+-]?)(\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?)((?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _wrap_int64(number: int) -> int:
    number &= UINT64_MASK
    return number - (1 << 64) if number > _INT64_MAX else number


def type_of(value: Any) -> str:
    """Return the language's name for the type of ``value``."""
    if value is None:
        return "sol"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, UInt):
        return "uint"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "str"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "map"
    if isinstance(value, FunctionObject):
        return "function"
    return "unknown"


def _significant_digits(text: str) -> int:
    count = 0
    found_non_zero = False
    for char in text:
        if char == ".":
            continue
        if char != "0":
            found_non_zero = True
        if found_non_zero:
            count += 1
    return count


def _cut_position(text: str, keep: int) -> int:
    current = 0
    for index, char in enumerate(text):
        if char == ".":
            continue
        if char != "0" or current > 0:
            current += 1
            if current > keep:
                return index
    return 0


def format_float_linh(value: float) -> str:
    """Render a float with trailing zeros trimmed and at most 15 significant digits."""
    text = f"{value:.17f}"
    dot = text.find(".")
    if dot < 0:
        return text

    end = len(text) - 1
    while end > dot + 1 and text[end] == "0":
        end -= 1
    if end == dot + 1 and text[end] == "0":
        return text[: end + 1]

    result = text[: end + 1]
    if _significant_digits(result) > 15:
        cut = _cut_position(result, 15)
        if cut > 0:
            result = result[:cut]
            while result.endswith("0") and len(result) > dot + 2:
                result = result[:-1]
    return result


def _function_signature(fn: FunctionObject) -> str:
    params = []
    for param in fn.params:
        text = ("vas " if param.is_static else "") + param.name
        if param.type is not None:
            text += f": {param.type}"
        params.append(text)
    return f"<function {fn.name}({', '.join(params)})>"


def to_str(value: Any) -> str:
    """Render a value as the text the language prints for it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return format(value, ".6g")
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "[" + ", ".join(to_str(item) for item in value) + "]"
    if isinstance(value, dict):
        return "{" + ", ".join(f"{to_str(k)}: {to_str(v)}" for k, v in value.items()) + "}"
    if isinstance(value, FunctionObject):
        return _function_signature(value)
    return "<unknown>"


def _parse_int_prefix(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(text)
    sign, digits = match.groups()
    return -int(digits) if sign == "-" else int(digits)


def to_int(value: Any) -> int:
    """Convert a value to a signed 64-bit integer; unconvertible values give 0."""
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, UInt):
        return _wrap_int64(int(value))
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return _wrap_int64(int(value))
    if isinstance(value, str):
        try:
            number = _parse_int_prefix(value)
        except ValueError:
            return 0
        return number if _INT64_MIN <= number <= _INT64_MAX else 0
    return 0


def _parse_float_prefix(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(text)
    sign, body = match.groups()
    number = float(body)
    if math.isinf(number) and not body.lower().startswith("inf"):
        raise OverflowError(text)
    return -number if sign == "-" else number


def to_float(value: Any) -> float:
    """Convert a value to a float; unconvertible values give 0.0."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        return float(value)
    if isinstance(value, str):
        try:
            return _parse_float_prefix(value)
        except (ValueError, OverflowError):
            return 0.0
    return 0.0


def to_uint(value: Any) -> UInt:
    """Convert a value to an unsigned 64-bit integer; negatives clamp to 0."""
    if isinstance(value, bool):
        return UInt(1 if value else 0)
    if isinstance(value, UInt):
        return value
    if isinstance(value, int):
        return UInt(max(0, value))
    if isinstance(value, float):
        if math.isnan(value):
            return UInt(0)
        if math.isinf(value):
            return UInt(0) if value < 0 else UInt(UINT64_MASK)
        return UInt(int(max(0.0, value)))
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if match is None:
            return UInt(0)
        sign, digits = match.groups()
        number = int(digits)
        if number > UINT64_MASK:
            return UInt(0)
        return UInt(-number if sign == "-" else number)
    return UInt(0)


def to_bool(value: Any) -> bool:
    """Convert a value to a truth value; unsigned integers are always false."""
    if isinstance(value, bool):
        return value
    if isinstance(value, UInt):
        return False
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        return value != 0.0
    if isinstance(value, str):
        return value != ""
    return False


def length(value: Any) -> int:
    """Element count of an array or map, byte length of a string, else 0."""
    if isinstance(value, (list, dict)):
        return len(value)
    if isinstance(value, str):
        return len(value.encode("utf-8"))
    return 0