"""Run configuration for the evolutionary engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ConfigurationError


class ReproductionSelection(str, Enum):
    """Which end of the ascending fitness order gets reproduced."""

    WORST = "worst"
    BEST = "best"


@dataclass(frozen=True)
class GeneticProperties:
    """
    Immutable settings for one run.

    Rates are fractions of ``population_size``; per-generation operator
    counts are truncated to integers. Initial program lengths are drawn from
    the half-open range ``[range_down, range_up)``.
    """

    range_up: int = 7
    range_down: int = 2
    population_size: int = 1000
    removal_mutation_rate: float = 0.01
    addition_mutation_rate: float = 0.01
    cross_over_rate: float = 0.9
    reproduction_rate: float = 0.05
    reproduction_selection: ReproductionSelection = ReproductionSelection.WORST
    max_population: Optional[int] = None

    def __post_init__(self):
        try:
            selection = ReproductionSelection(self.reproduction_selection)
        except ValueError as exc:
            raise ConfigurationError(f"unknown reproduction_selection: {self.reproduction_selection!r}") from exc
        object.__setattr__(self, "reproduction_selection", selection)
        if self.population_size <= 0:
            raise ConfigurationError("population_size must be > 0")
        if self.range_down < 1:
            raise ConfigurationError("range_down must be >= 1")
        if self.range_up <= self.range_down:
            raise ConfigurationError("range_up must be greater than range_down")
        for name in (
            "removal_mutation_rate",
            "addition_mutation_rate",
            "cross_over_rate",
            "reproduction_rate",
        ):
            rate = getattr(self, name)
            if not 0.0 <= rate <= 1.0:
                raise ConfigurationError(f"{name} must be in [0, 1], got {rate}")
        if self.max_population is not None and self.max_population < self.population_size:
            raise ConfigurationError("max_population must be >= population_size")

    def _count(self, rate: float) -> int:
        return int(rate * self.population_size)

    def cross_over_count(self) -> int:
        return self._count(self.cross_over_rate)

    def reproduction_count(self) -> int:
        return self._count(self.reproduction_rate)

    def addition_mutation_count(self) -> int:
        return self._count(self.addition_mutation_rate)

    def removal_mutation_count(self) -> int:
        return self._count(self.removal_mutation_rate)


__all__ = ["GeneticProperties", "ReproductionSelection"]
