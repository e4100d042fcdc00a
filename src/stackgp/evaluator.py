"""Dataset handling, fitness scoring and the per-individual fitness cache."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

import numpy as np

from .errors import DatasetError, EvaluationError
from .executor import StackExecutor
from .instruction import INT32_MAX, INT32_MIN, Instruction

logger = logging.getLogger(__name__)

Dataset = np.ndarray

# Zero aggregate error would divide by zero; a perfect fit gets the largest
# float32 instead so orderings stay well defined.
PERFECT_SCORE = float(np.finfo(np.float32).max)
# Programs that cannot be evaluated rank below every finite score.
UNRATED_SCORE = 0.0


def as_dataset(rows: Union[Dataset, Sequence[Sequence[int]]]) -> Dataset:
    """
    Convert example rows into a read-only 2-D int64 array.

    Every row holds the inputs followed by the expected output, so a row
    needs at least one column. Arrays already produced here are returned as-is.
    """
    if isinstance(rows, np.ndarray) and rows.dtype == np.int64 and rows.ndim == 2 and not rows.flags.writeable:
        return rows
    try:
        data = np.array(rows, dtype=np.int64)
    except (TypeError, ValueError) as exc:
        raise DatasetError(f"dataset rows must be equal-length integer rows: {exc}") from exc

    if data.ndim != 2:
        raise DatasetError(f"dataset must be two-dimensional, got shape {data.shape}")
    if data.shape[0] == 0:
        raise DatasetError("dataset has no examples")
    if data.shape[1] == 0:
        raise DatasetError("dataset rows need at least a target column")
    if data.min() < INT32_MIN or data.max() > INT32_MAX:
        raise DatasetError("dataset values must fit in int32")

    data.setflags(write=False)
    return data


def score_program(
    program: Sequence[Instruction],
    dataset: Dataset,
    executor: Optional[StackExecutor] = None,
) -> float:
    """
    Score ``program`` as ``len(dataset) / sum(|predicted - expected|)``.

    Higher is better. A zero total error yields ``PERFECT_SCORE``; a program
    that fails to evaluate on any example yields ``UNRATED_SCORE``.
    """
    dataset = as_dataset(dataset)
    executor = executor or StackExecutor()
    predicted = np.empty(dataset.shape[0], dtype=np.int64)
    try:
        for idx, row in enumerate(dataset):
            predicted[idx] = executor.execute(program, row[:-1])
    except EvaluationError as exc:
        logger.debug("Unratable program: %s", exc)
        return UNRATED_SCORE

    total_error = int(np.abs(predicted - dataset[:, -1]).sum())
    if total_error == 0:
        return PERFECT_SCORE
    return len(dataset) / total_error


class Fitness:
    """
    Cached score for one program.

    The cache is stale when ``dirty`` is set or it was never computed; the
    owning individual sets ``dirty`` whenever its program changes.
    """

    __slots__ = ("score", "dirty")

    def __init__(self, score: Optional[float] = None, dirty: bool = True):
        self.score = score
        self.dirty = dirty

    @property
    def is_stale(self) -> bool:
        return self.dirty or self.score is None

    def invalidate(self):
        self.dirty = True

    def update(self, program: Sequence[Instruction], dataset: Dataset) -> float:
        """Recompute the score if stale and return it."""
        if self.is_stale:
            self.score = score_program(program, dataset)
            self.dirty = False
        return self.score

    def copy(self) -> "Fitness":
        return Fitness(self.score, self.dirty)

    def __repr__(self) -> str:
        return f"Fitness(score={self.score!r}, dirty={self.dirty})"


__all__ = [
    "Dataset",
    "PERFECT_SCORE",
    "UNRATED_SCORE",
    "as_dataset",
    "score_program",
    "Fitness",
]
