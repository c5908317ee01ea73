from numbers_validator.base import NumbersValidation, NOT_FOUND


def build_record(validator: NumbersValidation) -> dict:
    """
    Wrap the validated number in a result record.

    Keys are prefixed with "self_repeat_" so the record can be merged into
    a larger one.
    """
    number = validator.get_validated_number()
    return {
        "self_repeat_strategy": validator.name,
        "self_repeat_number": number,
        "self_repeat_valid": number != NOT_FOUND,
    }


def compute_summary(results: list[dict]) -> dict:
    """Compute summary statistics from all result records."""
    summary = {
        "self_repeat_checked_count": 0,
        "self_repeat_valid_count": 0,
        "self_repeat_invalid_count": 0,
        "self_repeat_max_number": NOT_FOUND,
    }

    for r in results:
        if "self_repeat_number" not in r:
            continue
        summary["self_repeat_checked_count"] += 1
        if r.get("self_repeat_valid"):
            summary["self_repeat_valid_count"] += 1
            summary["self_repeat_max_number"] = max(
                summary["self_repeat_max_number"], r["self_repeat_number"]
            )
        else:
            summary["self_repeat_invalid_count"] += 1

    return summary
