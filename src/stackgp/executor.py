"""Execution engine for stack machine programs."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .enums import Opcode
from .errors import EmptyStackError
from .instruction import Instruction, wrap_int32


class StackExecutor:
    """Executes stack programs against an input vector."""

    def __init__(self):
        self.reset()

    def reset(self):
        """Reset execution state."""
        self.stack: List[int] = []
        self.execution_trace: List[Tuple[Instruction, Tuple[int, ...]]] = []

    def execute(
        self,
        program: Sequence[Instruction],
        inputs: Iterable[int] = (),
        trace: bool = False,
    ) -> int:
        """
        Execute ``program`` and return the bottom of the final stack.

        Args:
            program: Instructions to run in order
            inputs: Initial stack contents, pushed in order (last input on top)
            trace: Record ``(instruction, stack after)`` pairs in ``execution_trace``

        Raises:
            EmptyStackError: if nothing is left on the stack at the end
        """
        self.reset()
        self.stack = [wrap_int32(v) for v in inputs]

        for instr in program:
            self._execute_instruction(instr)
            if trace:
                self.execution_trace.append((instr, tuple(self.stack)))

        if not self.stack:
            raise EmptyStackError(program)
        return self.stack[0]

    def _execute_instruction(self, instr: Instruction):
        """Execute a single instruction; operators short of operands are no-ops."""
        stack = self.stack
        op = instr.op

        if op == Opcode.INTEGER:
            stack.append(instr.value)
        elif op == Opcode.NEG:
            if stack:
                stack.append(wrap_int32(-stack.pop()))
        elif op == Opcode.SUM:
            if len(stack) >= 2:
                stack.append(wrap_int32(stack.pop() + stack.pop()))
        elif op == Opcode.MULTIPLY:
            if len(stack) >= 2:
                stack.append(wrap_int32(stack.pop() * stack.pop()))
        elif op == Opcode.DUPLICATE:
            if stack:
                stack.append(stack[-1])
        elif op == Opcode.SWAP:
            if len(stack) >= 2:
                stack[-1], stack[-2] = stack[-2], stack[-1]
        else:
            raise ValueError(f"unknown opcode: {op!r}")


def evaluate_program(program: Sequence[Instruction], inputs: Iterable[int] = ()) -> int:
    """Run ``program`` on ``inputs`` with a throwaway executor."""
    return StackExecutor().execute(program, inputs)


__all__ = ["StackExecutor", "evaluate_program"]
