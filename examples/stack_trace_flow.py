#!/usr/bin/env python3
"""
Build a stack program by hand, trace it, then evolve one for y = 2*x^2.
"""

import random
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = ROOT / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from stackgp import (
    DUPLICATE,
    MULTIPLY,
    SUM,
    GeneticEvolver,
    GeneticProperties,
    Individual,
    ReproductionSelection,
    StackExecutor,
    build_quadratic_dataset,
    format_program,
)


def trace_program(program, x: int) -> None:
    executor = StackExecutor()
    result = executor.execute(program, [x], trace=True)
    print(f"x={x} -> {result}")
    for instr, stack in executor.execution_trace:
        print(f"  {str(instr):<10} {list(stack)}")


def main() -> None:
    dataset = build_quadratic_dataset(50)

    hand_built = Individual([DUPLICATE, MULTIPLY, DUPLICATE, SUM])
    print("Hand-built:", format_program(hand_built.program))
    trace_program(hand_built.program, 3)
    print(f"Fitness: {hand_built.compute_fitness(dataset)}\n")

    props = GeneticProperties(
        population_size=200,
        reproduction_selection=ReproductionSelection.BEST,
        max_population=400,
    )
    evolver = GeneticEvolver(props, random.Random(7))
    evolver.run(30, dataset)

    best = evolver.fittest(dataset)
    print("Evolved:", format_program(best.program))
    print(f"Fitness: {best.fitness}")
    trace_program(best.program, 3)


if __name__ == "__main__":
    main()
