"""Individuals: a stack program plus its cached fitness."""

from __future__ import annotations

import random
from typing import Iterable, Optional, Sequence, Tuple

from .enums import RANDOM_OPCODES
from .errors import CrossoverError
from .evaluator import Dataset, Fitness
from .executor import evaluate_program
from .instruction import Instruction, Program, format_program


def random_instruction(rng: random.Random) -> Instruction:
    """Draw one instruction uniformly from the random-generation alphabet."""
    return Instruction(rng.choice(RANDOM_OPCODES))


def random_program(rng: random.Random, range_up: int, range_down: int) -> Program:
    """Draw a program whose length is uniform in ``[range_down, range_up)``."""
    length = rng.randrange(range_down, range_up)
    return [random_instruction(rng) for _ in range(length)]


class Individual:
    """
    One candidate program and its fitness cache.

    Every operation that changes ``program`` marks the cache dirty, so the
    next ``compute_fitness`` call rescores it.
    """

    # Removal mutation never shrinks a program to fewer instructions than this.
    MIN_REMOVAL_LENGTH = 3

    def __init__(self, program: Iterable[Instruction], fitness: Optional[Fitness] = None):
        self.program: Program = list(program)
        self._fitness = fitness if fitness is not None else Fitness()

    @classmethod
    def random(cls, rng: random.Random, range_up: int, range_down: int) -> "Individual":
        return cls(random_program(rng, range_up, range_down))

    def reproduce(self) -> "Individual":
        """Copy the program and the fitness cache as they stand."""
        return Individual(self.program, self._fitness.copy())

    def crossover(self, other: "Individual", rng: random.Random) -> Tuple["Individual", "Individual"]:
        """
        Single-point crossover with independent cut points.

        ``child0`` is ``other`` from its cut onwards followed by the head of
        ``self``; ``child1`` is the tail of ``self`` followed by the head of
        ``other``. Together the children hold every parent instruction once.
        """
        if not self.program or not other.program:
            raise CrossoverError("crossover requires two non-empty parents")

        cut0 = rng.randrange(len(self.program))
        cut1 = rng.randrange(len(other.program))
        child0 = Individual(other.program[cut1:] + self.program[:cut0])
        child1 = Individual(self.program[cut0:] + other.program[:cut1])
        return child0, child1

    def mutate_add(self, rng: random.Random):
        """Append one random instruction."""
        self.program.append(random_instruction(rng))
        self._fitness.invalidate()

    def mutate_remove(self) -> bool:
        """Drop the last instruction when the program is long enough."""
        if len(self.program) <= self.MIN_REMOVAL_LENGTH:
            return False
        self.program.pop()
        self._fitness.invalidate()
        return True

    def evaluate(self, inputs: Sequence[int]) -> int:
        return evaluate_program(self.program, inputs)

    def compute_fitness(self, dataset: Dataset) -> float:
        return self._fitness.update(self.program, dataset)

    @property
    def fitness(self) -> Optional[float]:
        """Cached score; ``None`` until first computed."""
        return self._fitness.score

    @property
    def fitness_is_stale(self) -> bool:
        return self._fitness.is_stale

    @property
    def complexity(self) -> int:
        return len(self.program)

    def __len__(self) -> int:
        return len(self.program)

    def __repr__(self) -> str:
        return f"Individual(fitness={self.fitness!r}, program={format_program(self.program)})"


__all__ = ["Individual", "random_instruction", "random_program"]
