"""The ``math`` package: named constants and one-argument math functions."""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Optional

from .values import UINT64_MASK, UInt

MathFunction = Callable[[Any], Any]

_INT64_MAX = (1 << 63) - 1

_CONSTANTS: Dict[str, float] = {
    "pi": 3.141592653589793,
    "e": 2.718281828459045,
    "tau": 6.283185307179586,
    "phi": 1.618033988749895,
}


def _wrap_int64(number: int) -> int:
    number &= UINT64_MASK
    return number - (1 << 64) if number > _INT64_MAX else number


def _is_signed_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, (bool, UInt))


def _as_float(value: Any) -> Optional[float]:
    """Numeric operand as a float, or None when the value is not a number."""
    if isinstance(value, UInt):
        return float(int(value))
    if _is_signed_int(value):
        return float(value)
    if isinstance(value, float):
        return value
    return None


def _keep_zero_sign(result: float, source: float) -> float:
    return math.copysign(0.0, source) if result == 0.0 else result


def _integral(rounder: Callable[[float], float]) -> MathFunction:
    """Integers pass through unchanged; floats are rounded to a float."""

    def apply(value: Any) -> Any:
        if isinstance(value, UInt) or _is_signed_int(value):
            return value
        if isinstance(value, float):
            if not math.isfinite(value):
                return value
            return _keep_zero_sign(float(rounder(value)), value)
        return None

    return apply


def _round_half_away(x: float) -> float:
    whole = float(math.trunc(x))
    if abs(x - whole) >= 0.5:
        whole += math.copysign(1.0, x)
    return whole


def _unary(fn: Callable[[float], float]) -> MathFunction:
    """Apply ``fn`` to any numeric operand converted to float."""

    def apply(value: Any) -> Any:
        number = _as_float(value)
        if number is None:
            return None
        return fn(number)

    return apply


def _guarded(fn: Callable[[float], float], allowed: Callable[[float], bool]) -> MathFunction:
    """Like ``_unary`` but yields None when the operand is outside ``allowed``."""

    def apply(value: Any) -> Any:
        number = _as_float(value)
        if number is None or not allowed(number):
            return None
        return fn(number)

    return apply


def _abs(value: Any) -> Any:
    if isinstance(value, UInt):
        return value
    if _is_signed_int(value):
        return _wrap_int64(abs(value))
    if isinstance(value, float):
        return abs(value)
    return None


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _expm1(x: float) -> float:
    try:
        return math.expm1(x)
    except OverflowError:
        return math.inf


def _sinh(x: float) -> float:
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def _cosh(x: float) -> float:
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def _tan(x: float) -> float:
    try:
        return math.tan(x)
    except ValueError:
        return math.nan


def _sin(x: float) -> float:
    try:
        return math.sin(x)
    except ValueError:
        return math.nan


def _cos(x: float) -> float:
    try:
        return math.cos(x)
    except ValueError:
        return math.nan


def _acosh(x: float) -> float:
    try:
        return math.acosh(x)
    except ValueError:
        return math.nan


def _atanh(x: float) -> float:
    if x in (1.0, -1.0):
        return math.copysign(math.inf, x)
    try:
        return math.atanh(x)
    except ValueError:
        return math.nan


def _cbrt(x: float) -> float:
    native = getattr(math, "cbrt", None)
    if native is not None:
        return native(x)
    if x == 0.0 or not math.isfinite(x):
        return x
    root = math.copysign(abs(x) ** (1.0 / 3.0), x)
    return root - (root * root * root - x) / (3.0 * root * root)


def _radians(x: float) -> float:
    return x * _CONSTANTS["pi"] / 180.0


def _positive(x: float) -> bool:
    return not x <= 0


_FUNCTIONS: Dict[str, MathFunction] = {
    "abs": _abs,
    "ceil": _integral(math.ceil),
    "floor": _integral(math.floor),
    "round": _integral(_round_half_away),
    "trunc": _integral(math.trunc),
    "sin": _unary(_sin),
    "cos": _unary(_cos),
    "tan": _unary(_tan),
    "asin": _guarded(math.asin, lambda x: not (x < -1.0 or x > 1.0)),
    "acos": _guarded(math.acos, lambda x: not (x < -1.0 or x > 1.0)),
    "atan": _unary(math.atan),
    "radians": _unary(_radians),
    "sinh": _unary(_sinh),
    "cosh": _unary(_cosh),
    "tanh": _unary(math.tanh),
    "asinh": _unary(math.asinh),
    "acosh": _unary(_acosh),
    "atanh": _unary(_atanh),
    "sqrt": _guarded(math.sqrt, lambda x: not x < 0),
    "cbrt": _unary(_cbrt),
    "exp": _unary(_exp),
    "expm1": _unary(_expm1),
    "log": _guarded(math.log, _positive),
    "log1p": _guarded(math.log1p, lambda x: not x <= -1),
    "log10": _guarded(math.log10, _positive),
    "log2": _guarded(math.log2, _positive),
}


def get_math_function(name: str) -> Optional[MathFunction]:
    """Return the math function called ``name``, or None if there is none."""
    return _FUNCTIONS.get(name)


def get_math_functions() -> List[str]:
    """Names of every math function."""
    return list(_FUNCTIONS)


def get_math_constant(name: str) -> float:
    """Value of the named math constant, or 0.0 if it is unknown."""
    return _CONSTANTS.get(name, 0.0)


def get_math_constants() -> List[str]:
    """Names of every math constant."""
    return list(_CONSTANTS)