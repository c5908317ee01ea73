from abc import abstractmethod, ABC

NOT_FOUND = -1


class NumbersValidation(ABC):
    """Base class for all self-repeated number validators."""

    @abstractmethod
    def get_validated_number(self) -> int:
        """
        Return the largest self-repeated number of the input.

        A self-repeated number is a value that occurs in the input exactly
        as many times as its own value.

        Returns:
            The largest such value, or NOT_FOUND (-1) when none exists.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this validator."""
        pass


def check_numbers(numbers) -> tuple[int, ...]:
    """Copy the input into a tuple, rejecting anything that is not an int."""
    numbers = tuple(numbers)
    for number in numbers:
        # bool is an int subclass but never a meaningful count
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"Expected integers, got {number!r}")
    return numbers
