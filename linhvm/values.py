"""Runtime value types: unsigned integers, function objects and string interning."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

UINT64_MASK = (1 << 64) - 1


class UInt(int):
    """An unsigned 64-bit integer, kept apart from ordinary signed integers."""

    __slots__ = ()

    def __new__(cls, value: int = 0) -> "UInt":
        return super().__new__(cls, int(value) & UINT64_MASK)

    def __repr__(self) -> str:
        return f"UInt({int(self)})"


@dataclass
class FunctionParameter:
    """A declared parameter of a function; ``is_static`` marks a ``vas`` parameter."""

    name: str
    type: Optional[str] = None
    is_static: bool = False


@dataclass(eq=False)
class FunctionObject:
    """A callable value: a name, its parameters and its compiled body."""

    name: str
    params: List[FunctionParameter] = field(default_factory=list)
    body: List[Any] = field(default_factory=list)


Value = Union[
    None,
    bool,
    int,
    UInt,
    float,
    str,
    List[Any],
    Dict[str, Any],
    FunctionObject,
]


def create_function(name: str, params: List[FunctionParameter], body: List[Any]) -> FunctionObject:
    """Build a function object from a name, parameters and a bytecode body."""
    return FunctionObject(name=name, params=list(params), body=list(body))


def intern_string(text: str) -> str:
    """Return the single shared copy of ``text``."""
    return sys.intern(text)