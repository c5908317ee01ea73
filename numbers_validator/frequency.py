from collections import Counter
from collections.abc import Iterable

from numbers_validator.base import NumbersValidation, NOT_FOUND, check_numbers


class FrequencyNumbersValidator(NumbersValidation):
    """Single-pass variant: counts every value once, then picks the largest match."""

    def __init__(self, numbers: Iterable[int]):
        counts = Counter(check_numbers(numbers))
        self._validated_number = max(
            (number for number, count in counts.items() if number == count),
            default=NOT_FOUND,
        )

    @property
    def name(self) -> str:
        return "frequency"

    def get_validated_number(self) -> int:
        return self._validated_number
