import argparse
import logging
import time
from typing import List, Optional

from lazy_sequence.collection import EvaluationMode, LazyCollection
from lazy_sequence.stopwatch import time_call

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
NUMBERS = (0, 1, 2, 3, 4)

logger = logging.getLogger(__name__)


def print_value(value):
    print(value, end="")
    return value


def run_functional_operators(mode: EvaluationMode) -> List[int]:
    # filter -> double -> print -> take(1); only the mode differs
    return (LazyCollection(NUMBERS, mode)
            .filter(lambda number: number > 1)
            .map(lambda x: x * 2)
            .map(print_value)
            .take(1)
            .to_list())


def demonstrate_eager_vs_lazy():
    print("=== Functional operators (eager) ===")
    result = run_functional_operators(EvaluationMode.EAGER)
    print(f"\nResult: {result}")  # printed 468, every stage ran to completion

    print("\n=== Lazy operators (pull one element at a time) ===")
    result = run_functional_operators(EvaluationMode.LAZY)
    print(f"\nResult: {result}")  # printed 4 only


def slow_method(delay: float = 0.5):
    time.sleep(delay)


def demonstrate_stopwatch(delay: float = 0.5):
    print("\n=== Stopwatch ===")
    # A lambda as the block
    time_call(lambda: slow_method(delay), label="lambda block", echo=True)
    # Or a plain function reference
    time_call(slow_method, delay, echo=True)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lazy_sequence",
        description="Show lazy vs eager collection pipelines",
    )
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--delay", type=float, default=0.5,
                        help="seconds slept by the stopwatch examples")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    logger.debug(f"Running demo with delay={args.delay}")

    demonstrate_eager_vs_lazy()
    demonstrate_stopwatch(args.delay)
    return 0
