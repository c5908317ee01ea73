"""
tests/test_validators.py
Self-repeated number validation for both strategies.
"""
import random

import pytest

from numbers_validator import (
    NOT_FOUND,
    FrequencyNumbersValidator,
    NumbersValidation,
    RepeatedNumbersValidator,
    VALIDATOR_REGISTRY,
    build_record,
    compute_summary,
    count_repeat,
    get_validator,
    get_validator_class,
)

STRATEGIES = sorted(VALIDATOR_REGISTRY)


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize(
    "numbers, expected",
    [
        ([], NOT_FOUND),
        ([5, 5, 5], NOT_FOUND),
        ([1, 1, 2, 2, 3, 3, 3], 3),
        ([2, 2, 3, 3, 3, 4, 4, 4, 4], 4),
        ([0], NOT_FOUND),
        ([1], 1),
        ([-1, -1, -3], NOT_FOUND),
        ([3, 1, 3, 2, 3, 2], 3),
        ([2, 2, 2, 1], 1),
    ],
)
def test_validated_number(strategy, numbers, expected):
    assert get_validator(strategy, numbers).get_validated_number() == expected


def test_partition_is_disjoint_and_complete():
    numbers = [1, 1, 2, 2, 3, 3, 3, 0, -4]
    v = RepeatedNumbersValidator(numbers)

    assert v.repeated_numbers == {2, 3}
    assert v.numbers_not_repeated == {0, 1, -4}
    assert not v.repeated_numbers & v.numbers_not_repeated
    assert v.repeated_numbers | v.numbers_not_repeated == set(numbers)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_query_is_idempotent(strategy):
    v = get_validator(strategy, [2, 2, 3, 3, 3])
    assert [v.get_validated_number() for _ in range(3)] == [3, 3, 3]


def test_input_is_copied_on_construction():
    numbers = [1, 2, 2]
    v = RepeatedNumbersValidator(numbers)
    numbers.append(2)
    assert v.get_validated_number() == 2


def test_accepts_any_iterable():
    assert RepeatedNumbersValidator(iter([2, 2])).get_validated_number() == 2
    assert FrequencyNumbersValidator(n for n in (2, 2)).get_validated_number() == 2


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("bad", [[1, "1"], [1.0], [True]])
def test_rejects_non_integers(strategy, bad):
    with pytest.raises(TypeError):
        get_validator(strategy, bad)


def test_count_repeat():
    assert count_repeat((1, 2, 2, 3), 2) == 2
    assert count_repeat((), 7) == 0


def test_strategies_agree_on_random_inputs():
    rng = random.Random(1234)
    for _ in range(200):
        numbers = [rng.randint(-2, 8) for _ in range(rng.randint(0, 30))]
        expected = RepeatedNumbersValidator(numbers).get_validated_number()
        assert FrequencyNumbersValidator(numbers).get_validated_number() == expected

        # result is the sentinel or the largest self-repeated value
        qualifying = [n for n in set(numbers) if numbers.count(n) == n]
        assert expected == max(qualifying, default=NOT_FOUND)


def test_unknown_strategy():
    with pytest.raises(ValueError, match="frequency"):
        get_validator("nope", [1])
    with pytest.raises(ValueError, match="Unknown strategy: nope"):
        get_validator_class("nope")


def test_base_is_abstract():
    with pytest.raises(TypeError):
        NumbersValidation()


def test_base_exposes_only_the_query():
    public = {attr for attr in vars(NumbersValidation) if not attr.startswith("_")}
    assert public == {"get_validated_number", "name"}


def test_validate_record():
    assert build_record(RepeatedNumbersValidator([1])) == {
        "self_repeat_strategy": "repeated_numbers",
        "self_repeat_number": 1,
        "self_repeat_valid": True,
    }
    assert build_record(FrequencyNumbersValidator([]))["self_repeat_valid"] is False


def test_compute_summary():
    results = [
        build_record(RepeatedNumbersValidator([1])),
        build_record(RepeatedNumbersValidator([3, 3, 3])),
        build_record(RepeatedNumbersValidator([5])),
        {"status": "failed"},
    ]
    summary = compute_summary(results)

    assert summary == {
        "self_repeat_checked_count": 3,
        "self_repeat_valid_count": 2,
        "self_repeat_invalid_count": 1,
        "self_repeat_max_number": 3,
    }
