"""Genetic programming over integer stack-machine programs."""

from .enums import Opcode, RANDOM_OPCODES, BINARY_OPS, UNARY_OPS
from .errors import (
    StackGPError,
    EvaluationError,
    EmptyStackError,
    CrossoverError,
    ConfigurationError,
    DatasetError,
)
from .instruction import (
    INT32_MIN,
    INT32_MAX,
    wrap_int32,
    Instruction,
    Program,
    NEG,
    SUM,
    MULTIPLY,
    DUPLICATE,
    SWAP,
    format_program,
)
from .executor import StackExecutor, evaluate_program
from .evaluator import Dataset, PERFECT_SCORE, UNRATED_SCORE, as_dataset, score_program, Fitness
from .genome import Individual, random_instruction, random_program
from .config import GeneticProperties, ReproductionSelection
from .evolver import GeneticEvolver, ProgressCallback
from .demos import build_quadratic_dataset, self_check, example_quadratic_discovery

__all__ = [
    "Opcode",
    "RANDOM_OPCODES",
    "BINARY_OPS",
    "UNARY_OPS",
    "StackGPError",
    "EvaluationError",
    "EmptyStackError",
    "CrossoverError",
    "ConfigurationError",
    "DatasetError",
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
    "StackExecutor",
    "evaluate_program",
    "Dataset",
    "PERFECT_SCORE",
    "UNRATED_SCORE",
    "as_dataset",
    "score_program",
    "Fitness",
    "Individual",
    "random_instruction",
    "random_program",
    "GeneticProperties",
    "ReproductionSelection",
    "GeneticEvolver",
    "ProgressCallback",
    "build_quadratic_dataset",
    "self_check",
    "example_quadratic_discovery",
]
