"""Evolution engine for stack programs."""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional

from .config import GeneticProperties, ReproductionSelection
from .evaluator import Dataset, as_dataset
from .genome import Individual

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, Individual, float], None]


def _fitness_key(individual: Individual):
    score = individual.fitness
    return (score is not None, score if score is not None else 0.0)


class GeneticEvolver:
    """
    Population plus the generational loop.

    All randomness comes from ``rng``, so a seeded ``random.Random`` makes a
    run reproducible.
    """

    def __init__(self, props: GeneticProperties, rng: Optional[random.Random] = None):
        self.props = props
        self.rng = rng if rng is not None else random.Random()
        self.generation = 0
        self.population: List[Individual] = [
            Individual.random(self.rng, props.range_up, props.range_down)
            for _ in range(props.population_size)
        ]

    def compute_fitness(self, dataset: Dataset):
        """Refresh every stale fitness cache."""
        dataset = as_dataset(dataset)
        for individual in self.population:
            individual.compute_fitness(dataset)

    def sort_population_by_fitness(self, dataset: Dataset):
        """Sort ascending by score, computing stale scores first."""
        self.compute_fitness(dataset)
        self.population.sort(key=_fitness_key)

    def sort_population_by_complexity(self):
        """Sort ascending by program length."""
        self.population.sort(key=lambda ind: ind.complexity)

    def fittest(self, dataset: Dataset) -> Individual:
        """Highest-scoring individual."""
        self.compute_fitness(dataset)
        return max(self.population, key=_fitness_key)

    def simplest(self) -> Individual:
        """Shortest program; the earliest one wins ties."""
        return min(self.population, key=lambda ind: ind.complexity)

    def _crossover_offspring(self, count: int) -> List[Individual]:
        offspring: List[Individual] = []
        while len(offspring) <= count:
            parent1 = self.rng.choice(self.population)
            parent2 = self.rng.choice(self.population)
            offspring.extend(parent1.crossover(parent2, self.rng))
        return offspring

    def _reproduce(self, count: int) -> List[Individual]:
        if count <= 0:
            return []
        if self.props.reproduction_selection == ReproductionSelection.BEST:
            selected = self.population[-count:]
        else:
            selected = self.population[:count]
        return [ind.reproduce() for ind in selected]

    def step(self, dataset: Dataset, progress_callback: Optional[ProgressCallback] = None):
        """Run one generation."""
        props = self.props

        offspring = self._crossover_offspring(props.cross_over_count())

        addition_count = props.addition_mutation_count()
        for individual in self.population[:addition_count]:
            individual.mutate_add(self.rng)

        quarter = props.population_size // 4
        start = addition_count + (self.rng.randrange(quarter) if quarter > 0 else 0)
        for individual in self.population[start:start + props.removal_mutation_count()]:
            individual.mutate_remove()

        self.population.extend(offspring)
        self.sort_population_by_fitness(dataset)
        self.population.extend(self._reproduce(props.reproduction_count()))

        if props.max_population is not None and len(self.population) > props.max_population:
            # Reproduced copies sit past the sorted block; re-sort before keeping the top.
            self.population.sort(key=_fitness_key)
            self.population = self.population[-props.max_population:]

        best = max(self.population, key=_fitness_key)
        logger.info(
            "Gen %03d: population=%d best fitness=%s size=%d",
            self.generation,
            len(self.population),
            best.fitness,
            best.complexity,
        )
        if progress_callback:
            progress_callback(self.generation, best, best.fitness)
        self.generation += 1

    def run(
        self,
        generations: int,
        dataset: Dataset,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        """
        Main evolution loop.

        Args:
            generations: Number of generations to run
            dataset: Example rows, last column is the expected output
            progress_callback: Optional callback(generation, best_individual, best_fitness)
        """
        if generations < 0:
            raise ValueError("generations must be >= 0")
        dataset = as_dataset(dataset)
        for _ in range(generations):
            self.step(dataset, progress_callback)


__all__ = ["GeneticEvolver", "ProgressCallback"]
