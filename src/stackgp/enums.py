"""Opcodes and opcode groupings for the stack machine."""

from enum import IntEnum
from typing import Set, Tuple


class Opcode(IntEnum):
    """Stack machine opcodes as integer indices."""

    INTEGER = 0  # push literal
    NEG = 1
    SUM = 2
    MULTIPLY = 3
    DUPLICATE = 4
    SWAP = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


# Alphabet for random generation and addition mutation. INTEGER and SWAP
# are only reachable through hand-built programs.
RANDOM_OPCODES: Tuple[Opcode, ...] = (
    Opcode.NEG,
    Opcode.SUM,
    Opcode.DUPLICATE,
    Opcode.MULTIPLY,
)

BINARY_OPS: Set[Opcode] = {
    Opcode.SUM,
    Opcode.MULTIPLY,
    Opcode.SWAP,
}

UNARY_OPS: Set[Opcode] = {
    Opcode.NEG,
    Opcode.DUPLICATE,
}


__all__ = [
    "Opcode",
    "RANDOM_OPCODES",
    "BINARY_OPS",
    "UNARY_OPS",
]
