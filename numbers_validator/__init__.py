from collections.abc import Iterable

from .base import NumbersValidation, NOT_FOUND
from .repeated_numbers import RepeatedNumbersValidator, count_repeat
from .frequency import FrequencyNumbersValidator
from .report import build_record, compute_summary

# Global validator registry
VALIDATOR_REGISTRY: dict[str, type[NumbersValidation]] = {
    "repeated_numbers": RepeatedNumbersValidator,
    "frequency": FrequencyNumbersValidator,
}


def get_validator_class(strategy: str) -> type[NumbersValidation]:
    """Look up the validator class registered under ``strategy``."""
    if strategy not in VALIDATOR_REGISTRY:
        raise ValueError(
            f"Unknown strategy: {strategy} (choose from {', '.join(VALIDATOR_REGISTRY)})"
        )
    return VALIDATOR_REGISTRY[strategy]


def get_validator(strategy: str, numbers: Iterable[int]) -> NumbersValidation:
    """Build the validator registered under ``strategy`` for ``numbers``."""
    return get_validator_class(strategy)(numbers)


__all__ = [
    "NOT_FOUND",
    "NumbersValidation",
    "RepeatedNumbersValidator",
    "FrequencyNumbersValidator",
    "VALIDATOR_REGISTRY",
    "build_record",
    "compute_summary",
    "count_repeat",
    "get_validator",
    "get_validator_class",
]
