"""Tests for the stack machine interpreter."""

import random

import pytest

from stackgp import (
    DUPLICATE,
    INT32_MAX,
    INT32_MIN,
    MULTIPLY,
    NEG,
    SUM,
    SWAP,
    EmptyStackError,
    EvaluationError,
    Instruction,
    Opcode,
    StackExecutor,
    evaluate_program,
)


def integer(value):
    return Instruction.integer(value)


class TestEvaluateProgram:
    """Per-instruction semantics and the reference programs."""

    def test_reference_program(self):
        program = [integer(2), integer(3), SUM, integer(2), NEG, MULTIPLY]
        assert evaluate_program(program, []) == -10

        program += [DUPLICATE, MULTIPLY]
        assert evaluate_program(program, []) == 100

    def test_swap_with_single_value_is_noop(self):
        program = [integer(2), integer(3), SUM, integer(2), NEG, MULTIPLY, DUPLICATE, MULTIPLY]
        program += [integer(-1), SUM, SWAP]
        assert evaluate_program(program, []) == 99

    def test_sum_of_inputs(self):
        assert evaluate_program([SUM], [2, -2]) == 0

    def test_inputs_pushed_in_order(self):
        # Last input is on top, so SWAP brings the first input up and leaves
        # the second at the bottom.
        assert evaluate_program([SWAP], [1, 2]) == 2
        assert evaluate_program([], [1, 2]) == 1

    def test_result_is_bottom_of_stack(self):
        assert evaluate_program([integer(5), integer(6), integer(7)]) == 5

    def test_neg_and_duplicate(self):
        assert evaluate_program([NEG], [4]) == -4
        assert evaluate_program([DUPLICATE, SUM], [4]) == 8
        assert evaluate_program([DUPLICATE, MULTIPLY], [-3]) == 9

    @pytest.mark.parametrize("op", [SUM, MULTIPLY, SWAP])
    def test_binary_ops_short_of_operands_are_noops(self, op):
        assert evaluate_program([op], [9]) == 9

    @pytest.mark.parametrize("op", [NEG, DUPLICATE, SUM, MULTIPLY, SWAP])
    def test_operators_on_empty_stack_do_not_fail_midway(self, op):
        assert evaluate_program([op, integer(1)]) == 1


class TestWrapping:
    """Arithmetic wraps into int32 instead of raising."""

    def test_sum_overflow_wraps(self):
        assert evaluate_program([SUM], [INT32_MAX, 1]) == INT32_MIN

    def test_multiply_overflow_wraps(self):
        assert evaluate_program([MULTIPLY], [2**16, 2**16]) == 0
        assert evaluate_program([DUPLICATE, MULTIPLY], [INT32_MAX]) == 1

    def test_neg_of_min_wraps_to_itself(self):
        assert evaluate_program([NEG], [INT32_MIN]) == INT32_MIN

    def test_integer_payload_is_normalised(self):
        assert Instruction.integer(2**31).value == INT32_MIN

    def test_random_programs_stay_in_range(self):
        rng = random.Random(1234)
        ops = list(Opcode)
        for _ in range(200):
            program = []
            for _ in range(rng.randrange(1, 30)):
                op = rng.choice(ops)
                program.append(Instruction(op, rng.randint(INT32_MIN, INT32_MAX)))
            inputs = [rng.randint(INT32_MIN, INT32_MAX) for _ in range(rng.randrange(1, 4))]
            result = evaluate_program(program, inputs)
            assert INT32_MIN <= result <= INT32_MAX


class TestEmptyStack:
    """An empty final stack is reported, not defaulted."""

    def test_empty_program_without_inputs(self):
        with pytest.raises(EmptyStackError):
            evaluate_program([])

    def test_error_carries_program(self):
        program = [NEG, SUM]
        with pytest.raises(EvaluationError) as excinfo:
            evaluate_program(program, [])
        assert excinfo.value.program == program
        assert "Neg" in str(excinfo.value)


class TestStackExecutor:
    """Executor state and tracing."""

    def test_trace_records_stack_after_each_instruction(self):
        executor = StackExecutor()
        executor.execute([DUPLICATE, SUM], [3], trace=True)
        assert executor.execution_trace == [(DUPLICATE, (3, 3)), (SUM, (6,))]

    def test_reset_between_runs(self):
        executor = StackExecutor()
        executor.execute([DUPLICATE], [3], trace=True)
        assert executor.execute([], [5]) == 5
        assert executor.execution_trace == []
        assert executor.stack == [5]
