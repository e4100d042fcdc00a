"""Example workflows: the quadratic dataset, an interpreter self-check and a demo run."""

from __future__ import annotations

import random
from typing import Optional

import numpy as np

from .config import GeneticProperties
from .evaluator import Dataset, as_dataset
from .evolver import GeneticEvolver
from .executor import evaluate_program
from .instruction import DUPLICATE, MULTIPLY, NEG, SUM, SWAP, Instruction, format_program


def build_quadratic_dataset(n: int = 100) -> Dataset:
    """Rows ``[i, 2*i*i]`` for ``i`` in ``range(n)``."""
    xs = np.arange(n, dtype=np.int64)
    return as_dataset(np.stack([xs, 2 * xs * xs], axis=1))


def self_check():
    """Smoke-test the interpreter on hand-built programs."""
    program = [Instruction.integer(2), Instruction.integer(3), SUM, Instruction.integer(2), NEG, MULTIPLY]
    assert evaluate_program(program) == -10, format_program(program)
    program += [DUPLICATE, MULTIPLY]
    assert evaluate_program(program) == 100, format_program(program)
    # SWAP with a single value on the stack leaves it alone.
    program += [Instruction.integer(-1), SUM, SWAP]
    assert evaluate_program(program) == 99, format_program(program)
    assert evaluate_program([SUM], [2, -2]) == 0
    assert evaluate_program([Instruction.integer(7), SWAP]) == 7


def example_quadratic_discovery(
    props: Optional[GeneticProperties] = None,
    generations: int = 200,
    seed: Optional[int] = None,
    samples: int = 100,
) -> GeneticEvolver:
    """Evolve a program approximating ``y = 2*x*x``."""
    print("=== Stack program discovery: y = 2*x^2 ===\n")

    print("Testing the interpreter...")
    self_check()
    print("Interpreter OK\n")

    dataset = build_quadratic_dataset(samples)
    evolver = GeneticEvolver(props or GeneticProperties(), random.Random(seed))

    def progress_callback(gen, best, best_fitness):
        if gen % 20 == 0:
            print(f"Gen {gen:03d} | population={len(evolver.population)} | fitness={best_fitness:.6f}")

    evolver.run(generations, dataset, progress_callback)

    best = evolver.fittest(dataset)
    print("\n=== Best program by fitness ===")
    print(f"Fitness: {best.fitness:.6f}")
    print(format_program(best.program))

    evolver.sort_population_by_complexity()
    print("\n=== Simplest program ===")
    print(format_program(evolver.population[0].program))

    print("\n=== Spot checks ===")
    for x in [0, 3, 10, 42]:
        print(f"  x={x}: result={best.evaluate([x])}, expected={2 * x * x}")

    return evolver


__all__ = ["build_quadratic_dataset", "self_check", "example_quadratic_discovery"]
