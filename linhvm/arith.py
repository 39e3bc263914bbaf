"""Binary arithmetic, bitwise and comparison operations on runtime values."""

from __future__ import annotations

import math
import operator
from typing import Any, Callable, Dict, List

from .bytecode import OpCode
from .conversions import to_str
from .values import UINT64_MASK, UInt

_INT64_MAX = (1 << 63) - 1

_COMPARISONS: Dict[OpCode, Callable[[Any, Any], bool]] = {
    OpCode.LT: operator.lt,
    OpCode.LTE: operator.le,
    OpCode.GT: operator.gt,
    OpCode.GTE: operator.ge,
    OpCode.EQ: operator.eq,
    OpCode.NEQ: operator.ne,
}

_BITWISE: Dict[OpCode, Callable[[int, int], int]] = {
    OpCode.AMP: operator.and_,
    OpCode.PIPE: operator.or_,
    OpCode.CARET: operator.xor,
}


class DivisionByZero(ZeroDivisionError):
    """Raised when a division, modulo or floor division has a zero divisor."""


def _wrap_int64(number: int) -> int:
    number &= UINT64_MASK
    return number - (1 << 64) if number > _INT64_MAX else number


def _is_uint(value: Any) -> bool:
    return isinstance(value, UInt)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, (bool, UInt))


def _is_float(value: Any) -> bool:
    return isinstance(value, float)


def _concat_piece(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return to_str(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return str(int(value))
    return ""


def _uint_op(opcode: OpCode, av: int, bv: int) -> Any:
    if opcode == OpCode.ADD:
        return UInt(av + bv)
    if opcode == OpCode.SUB:
        return UInt(av - bv)
    if opcode == OpCode.MUL:
        return UInt(av * bv)
    if opcode == OpCode.DIV:
        if bv == 0:
            raise DivisionByZero("Division by zero (uint)")
        return UInt(av // bv)
    if opcode == OpCode.MOD:
        if bv == 0:
            raise DivisionByZero("Modulo by zero (uint)")
        return UInt(av % bv)
    if opcode == OpCode.HASH:
        if bv == 0:
            raise DivisionByZero("Floor division by zero (uint)")
        return UInt(av // bv)
    if opcode in _BITWISE:
        return UInt(_BITWISE[opcode](av, bv))
    if opcode == OpCode.LT_LT:
        return UInt(av << (bv & 63))
    if opcode == OpCode.GT_GT:
        return UInt(av >> (bv & 63))
    if opcode in _COMPARISONS:
        return _COMPARISONS[opcode](av, bv)
    return NotImplemented


def _trunc_div(av: int, bv: int) -> int:
    quotient = abs(av) // abs(bv)
    return -quotient if (av < 0) != (bv < 0) else quotient


def _int_op(opcode: OpCode, av: int, bv: int) -> Any:
    if opcode == OpCode.ADD:
        return _wrap_int64(av + bv)
    if opcode == OpCode.SUB:
        return _wrap_int64(av - bv)
    if opcode == OpCode.MUL:
        return _wrap_int64(av * bv)
    if opcode in (OpCode.DIV, OpCode.MOD):
        if bv == 0:
            raise DivisionByZero("Division by zero (int)")
        quotient = _trunc_div(av, bv)
        if opcode == OpCode.DIV:
            return _wrap_int64(quotient)
        return _wrap_int64(av - bv * quotient)
    if opcode == OpCode.HASH:
        if bv == 0:
            raise DivisionByZero("Floor division by zero (int)")
        return _wrap_int64(av // bv)
    if opcode in _BITWISE:
        return _wrap_int64(_BITWISE[opcode](av, bv))
    if opcode == OpCode.LT_LT:
        return _wrap_int64(av << (bv & 63))
    if opcode == OpCode.GT_GT:
        return av >> (bv & 63)
    if opcode in _COMPARISONS:
        return _COMPARISONS[opcode](av, bv)
    return NotImplemented


def _fmod(av: float, bv: float) -> float:
    try:
        return math.fmod(av, bv)
    except ValueError:
        return math.nan


def _floor(number: float) -> float:
    if not math.isfinite(number):
        return number
    result = float(math.floor(number))
    if result == 0.0 and math.copysign(1.0, number) < 0:
        return -0.0
    return result


def _float_op(opcode: OpCode, av: float, bv: float, kind: str) -> Any:
    if opcode == OpCode.ADD:
        return av + bv
    if opcode == OpCode.SUB:
        return av - bv
    if opcode == OpCode.MUL:
        return av * bv
    if opcode == OpCode.DIV:
        if bv == 0.0:
            raise DivisionByZero(f"Division by zero ({kind})")
        return av / bv
    if opcode == OpCode.MOD:
        if bv == 0.0:
            raise DivisionByZero(f"Modulo by zero ({kind})")
        return _fmod(av, bv)
    if opcode == OpCode.HASH:
        if bv == 0.0:
            raise DivisionByZero(f"Floor division by zero ({kind})")
        return _floor(av / bv)
    if opcode in _COMPARISONS:
        return _COMPARISONS[opcode](av, bv)
    return NotImplemented


def apply_binary(opcode: OpCode, a: Any, b: Any) -> Any:
    """Apply a binary opcode to ``a`` and ``b``.

    Returns the value the operation produces (``None`` for an invalid
    combination of operand types), or ``NotImplemented`` when the operation
    produces nothing at all. Raises DivisionByZero for a zero divisor.
    """
    opcode = OpCode(opcode)

    if opcode == OpCode.ADD:
        if isinstance(a, bool) or isinstance(b, bool):
            return None
        if isinstance(a, str) or isinstance(b, str):
            return _concat_piece(a) + _concat_piece(b)

    if _is_uint(a) and _is_uint(b):
        return _uint_op(opcode, int(a), int(b))
    if _is_int(a) and _is_int(b):
        return _int_op(opcode, int(a), int(b))
    if (_is_int(a) or _is_float(a)) and (_is_int(b) or _is_float(b)):
        return _float_op(opcode, float(a), float(b), "float")
    if (_is_uint(a) or _is_float(a)) and (_is_uint(b) or _is_float(b)):
        return _float_op(opcode, float(a), float(b), "float/uint")
    if isinstance(a, str) and isinstance(b, str):
        if opcode in _COMPARISONS:
            return _COMPARISONS[opcode](a, b)
        return None
    if isinstance(a, bool) and isinstance(b, bool):
        if opcode == OpCode.EQ:
            return a == b
        if opcode == OpCode.NEQ:
            return a != b
        return None
    return None


def binary_op(stack: List[Any], opcode: OpCode) -> None:
    """Pop two operands from ``stack``, apply ``opcode`` and push the result."""
    if len(stack) < 2:
        raise IndexError("VM stack underflow for binary operation")
    b = stack.pop()
    a = stack.pop()
    result = apply_binary(opcode, a, b)
    if result is not NotImplemented:
        stack.append(result)