import argparse
import json
import time
from datetime import datetime
from typing import Optional

import megfile
from loguru import logger
from tqdm import tqdm

from numbers_validator import (
    NumbersValidation,
    VALIDATOR_REGISTRY,
    build_record,
    compute_summary,
    get_validator,
    get_validator_class,
)

SAMPLE_NUMBERS = [1, 1, 2, 2, 3, 3, 3]


def parse_numbers(raw) -> list[int]:
    """Accept either a JSON array of integers or an object with a "numbers" array."""
    if isinstance(raw, dict):
        raw = raw.get("numbers")
    if not isinstance(raw, list):
        raise TypeError(f"Expected a list of integers, got {type(raw).__name__}")
    return raw


class ValidatorRunner:
    """Runner that validates every integer sequence of a JSONL file."""

    def __init__(
        self,
        strategy: str = "repeated_numbers",
        output_file: str = "results.jsonl",
        summary_file: str = "summary.json",
    ):
        self.validator_class = get_validator_class(strategy)
        self.strategy = strategy
        self.output_file = output_file
        self.summary_file = summary_file

        self.results: list[dict] = []
        self.summary: Optional[dict] = None

        logger.info(f"Initialized with strategy: {self.strategy}")
        logger.info(f"Results will be saved to {self.output_file}")
        logger.info(f"Summary will be saved to {self.summary_file}")

    def read_jsonl(self, file_path: str) -> list[dict]:
        """Load JSONL lines, keeping the unparsed ones so they show up as failures."""
        requests = []
        with megfile.smart_open(file_path, "rb") as f:
            for line_num, raw_line in enumerate(f, 1):
                if not raw_line.strip():
                    continue
                try:
                    line = raw_line.decode("utf-8").strip()
                    raw = json.loads(line)
                    requests.append({"data_index": line_num, "raw": raw, "error": None})
                except (UnicodeDecodeError, json.JSONDecodeError) as e:
                    logger.error(f"Error parsing line {line_num}: {e}")
                    requests.append({"data_index": line_num, "raw": None, "error": str(e)})
        return requests

    def process_request(self, request: dict) -> dict:
        """Validate a single sequence and build its result record."""
        result = {
            "data_index": request["data_index"],
            "numbers": None,
            "status": "failed",
            "last_run_at": datetime.now().isoformat(),
        }

        if request["error"]:
            result["error"] = request["error"]
            return result

        start_time = time.time()
        try:
            numbers = parse_numbers(request["raw"])
            validator: NumbersValidation = self.validator_class(numbers)
        except TypeError as e:
            logger.warning(f"Skipping line {request['data_index']}: {e}")
            result["error"] = str(e)
            return result

        result["numbers"] = numbers
        result["status"] = "success"
        result.update(build_record(validator))
        result["duration_ms"] = int((time.time() - start_time) * 1000)
        return result

    def validate_file(self, file_path: str):
        """Validate all sequences from a file and save results and summary."""
        requests = self.read_jsonl(file_path)

        self.results = []
        for req in tqdm(requests, desc="Processing", unit="seq"):
            self.results.append(self.process_request(req))

        with megfile.smart_open(self.output_file, "w", encoding="utf-8") as f:
            for r in self.results:
                f.write(json.dumps(r, ensure_ascii=False) + "\n")

        self.compute_summary()
        with megfile.smart_open(self.summary_file, "w", encoding="utf-8") as f:
            json.dump(self.summary, f, ensure_ascii=False, indent=4)

        logger.info(f"Results saved to {self.output_file}")
        logger.info(f"Summary saved to {self.summary_file}")

    def compute_summary(self) -> dict:
        """Compute summary from all results."""
        summary = {
            "strategy": self.strategy,
            "success_count": 0,
            "failure_count": 0,
            "all_count": len(self.results),
        }

        for r in self.results:
            if r.get("status") == "success":
                summary["success_count"] += 1
            else:
                summary["failure_count"] += 1

        summary.update(compute_summary(self.results))

        self.summary = summary
        return summary


def main(argv: Optional[list[str]] = None):
    parser = argparse.ArgumentParser(
        description="Find the largest number repeated exactly as many times as its value.\n\n"
        "Without a file, validates the sample sequence [1, 1, 2, 2, 3, 3, 3] and prints the result.\n"
        "Prints -1 when no number qualifies."
    )

    parser.add_argument(
        "file_path",
        nargs="?",
        help=(
            "Path to a JSONL file, one sequence per line.\n"
            "Each line is a JSON array of integers or an object with a \"numbers\" array, e.g.:\n"
            "  [2, 2, 3, 3, 3]\n"
            '  {"numbers": [4, 4, 4, 4]}\n'
        ),
    )
    parser.add_argument(
        "--strategy",
        default="repeated_numbers",
        choices=sorted(VALIDATOR_REGISTRY),
        help="Validation strategy (default: repeated_numbers)",
    )
    parser.add_argument(
        "--output",
        default="results.jsonl",
        help="Path to save detailed results (default: results.jsonl)",
    )
    parser.add_argument(
        "--summary",
        default="summary.json",
        help="Path to save aggregated summary (default: summary.json)",
    )

    args = parser.parse_args(argv)

    if not args.file_path:
        validator = get_validator(args.strategy, SAMPLE_NUMBERS)
        print(validator.get_validated_number())
        return

    runner = ValidatorRunner(
        strategy=args.strategy,
        output_file=args.output,
        summary_file=args.summary,
    )
    runner.validate_file(args.file_path)


if __name__ == "__main__":
    main()
