from collections.abc import Iterable

from numbers_validator.base import NumbersValidation, NOT_FOUND, check_numbers


def count_repeat(numbers: tuple[int, ...], number: int) -> int:
    return sum(1 for n in numbers if n == number)


class RepeatedNumbersValidator(NumbersValidation):
    """
    Splits the distinct input values into those repeated exactly as many
    times as their value and those that are not.

    Classification runs once, on construction. Every new value costs a full
    scan of the input; values already classified are skipped.
    """

    def __init__(self, numbers: Iterable[int]):
        self._numbers = check_numbers(numbers)
        self._repeated_numbers: set[int] = set()
        self._numbers_not_repeated: set[int] = set()
        self._validate_numbers()

    @property
    def name(self) -> str:
        return "repeated_numbers"

    @property
    def repeated_numbers(self) -> frozenset[int]:
        return frozenset(self._repeated_numbers)

    @property
    def numbers_not_repeated(self) -> frozenset[int]:
        return frozenset(self._numbers_not_repeated)

    def get_validated_number(self) -> int:
        return next(iter(sorted(self._repeated_numbers, reverse=True)), NOT_FOUND)

    def _validate_numbers(self):
        for number in self._numbers:
            if self._is_already_validated(number):
                continue
            if count_repeat(self._numbers, number) == number:
                self._repeated_numbers.add(number)
            else:
                self._numbers_not_repeated.add(number)

    def _is_already_validated(self, number: int) -> bool:
        return number in self._repeated_numbers or number in self._numbers_not_repeated
