"""Condition evaluation and instruction-pointer updates for jumps."""

from __future__ import annotations

from typing import Any, List

from .bytecode import Instruction, OpCode
from .values import UInt


def eval_condition(value: Any) -> bool:
    """Truth value used by conditional jumps; unsigned integers count as false."""
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


def next_ip(stack: List[Any], instr: Instruction, ip: int) -> int:
    """Return the instruction pointer after ``instr``; conditional jumps pop the stack."""
    if instr.opcode is OpCode.JMP:
        return int(instr.operand)
    if instr.opcode is OpCode.JMP_IF_FALSE:
        taken = not eval_condition(stack.pop())
        return int(instr.operand) if taken else ip + 1
    if instr.opcode is OpCode.JMP_IF_TRUE:
        taken = eval_condition(stack.pop())
        return int(instr.operand) if taken else ip + 1
    return ip + 1