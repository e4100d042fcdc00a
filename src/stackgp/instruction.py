"""Stack machine instruction representation and display helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .enums import Opcode

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def wrap_int32(value: int) -> int:
    """Reduce ``value`` modulo 2**32 into signed int32 range."""
    return ((int(value) + _INT32_SIGN) & _INT32_MASK) - _INT32_SIGN


@dataclass(frozen=True)
class Instruction:
    """
    One stack machine instruction.

    ``value`` is only meaningful for ``Opcode.INTEGER``; every other opcode
    stores 0 so that structurally equal programs compare equal.
    """

    op: Opcode
    value: int = 0

    def __post_init__(self):
        op = Opcode(self.op)
        value = wrap_int32(self.value) if op == Opcode.INTEGER else 0
        object.__setattr__(self, "op", op)
        object.__setattr__(self, "value", value)

    @classmethod
    def integer(cls, value: int) -> "Instruction":
        return cls(Opcode.INTEGER, value)

    def __str__(self) -> str:
        if self.op == Opcode.INTEGER:
            return f"Integer({self.value})"
        return self.op.label

    def __repr__(self) -> str:
        return str(self)


Program = List[Instruction]

NEG = Instruction(Opcode.NEG)
SUM = Instruction(Opcode.SUM)
MULTIPLY = Instruction(Opcode.MULTIPLY)
DUPLICATE = Instruction(Opcode.DUPLICATE)
SWAP = Instruction(Opcode.SWAP)


def format_program(program: Iterable[Instruction]) -> str:
    """Render a program as ``[Integer(2), Sum, Duplicate]``."""
    return "[" + ", ".join(str(instr) for instr in program) + "]"


__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "wrap_int32",
    "Instruction",
    "Program",
    "NEG",
    "SUM",
    "MULTIPLY",
    "DUPLICATE",
    "SWAP",
    "format_program",
]
