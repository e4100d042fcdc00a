"""Exception hierarchy for stackgp."""

from __future__ import annotations

from typing import Sequence


class StackGPError(Exception):
    """Base class for every error raised by stackgp."""


class EvaluationError(StackGPError):
    """A program could not produce an output."""


class EmptyStackError(EvaluationError):
    """The stack was empty once the program finished."""

    def __init__(self, program: Sequence[object], message: str = "stack is empty at end of program"):
        self.program = list(program)
        super().__init__(f"{message}: {[str(instr) for instr in self.program]}")


class CrossoverError(StackGPError, ValueError):
    """Crossover was asked to cut an empty parent."""


class ConfigurationError(StackGPError, ValueError):
    """Invalid run configuration."""


class DatasetError(StackGPError, ValueError):
    """Dataset rows are missing, ragged or have no target column."""


__all__ = [
    "StackGPError",
    "EvaluationError",
    "EmptyStackError",
    "CrossoverError",
    "ConfigurationError",
    "DatasetError",
]
