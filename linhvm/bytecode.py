"""Bytecode instruction set: opcodes, instructions and try-block targets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Any, List, NamedTuple


class OpCode(IntEnum):
    """Operation codes understood by the virtual machine."""

    NOP = 0
    PUSH_INT = auto()
    PUSH_UINT = auto()
    PUSH_FLOAT = auto()
    PUSH_STR = auto()
    PUSH_BOOL = auto()
    POP = auto()
    SWAP = auto()
    DUP = auto()

    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    MOD = auto()
    HASH = auto()

    AMP = auto()
    PIPE = auto()
    CARET = auto()
    LT_LT = auto()
    GT_GT = auto()

    AND = auto()
    OR = auto()
    NOT = auto()

    EQ = auto()
    NEQ = auto()
    LT = auto()
    GT = auto()
    LTE = auto()
    GTE = auto()

    LOAD_VAR = auto()
    STORE_VAR = auto()

    JMP = auto()
    JMP_IF_FALSE = auto()
    JMP_IF_TRUE = auto()

    CALL = auto()
    RET = auto()
    PUSH_FUNCTION = auto()

    PRINT = auto()
    PRINT_MULTIPLE = auto()
    INPUT = auto()
    TYPEOF = auto()
    HALT = auto()
    PRINTF = auto()
    PUSH_ARRAY = auto()
    PUSH_MAP = auto()
    ARRAY_GET = auto()
    ARRAY_SET = auto()
    MAP_GET = auto()
    MAP_SET = auto()
    ARRAY_LEN = auto()
    ARRAY_APPEND = auto()
    ARRAY_REMOVE = auto()
    ARRAY_CLEAR = auto()
    ARRAY_CLONE = auto()
    ARRAY_POP = auto()
    MAP_KEYS = auto()
    MAP_VALUES = auto()
    MAP_DELETE = auto()
    MAP_CLEAR = auto()

    TRY = auto()
    END_TRY = auto()
    ID = auto()

    LOAD_PACKAGE_CONST = auto()


class TryTarget(NamedTuple):
    """Operand of a TRY instruction: jump targets and the error variable's name."""

    catch_pos: int
    finally_pos: int
    end_pos: int
    error_var: str


@dataclass
class Instruction:
    """One bytecode instruction with its operand and source position."""

    opcode: OpCode
    operand: Any = None
    line: int = 0
    col: int = 0


BytecodeChunk = List[Instruction]