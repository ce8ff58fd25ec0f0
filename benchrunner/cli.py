"""Command line entry point benchmarking the element-wise add kernels."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from benchrunner.elementwise import elementwise_add, elementwise_add_unroll
from benchrunner.runner import Benchmark

DEFAULT_SIZE = 1024 * 1024 * 32


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchrunner",
        description="Benchmark element-wise addition against its unrolled variant.",
    )
    parser.add_argument("--size", type=_non_negative, default=DEFAULT_SIZE, help="number of elements")
    parser.add_argument("--warmup", type=_non_negative, default=10, help="warm-up iterations")
    parser.add_argument("--iterations", type=_non_negative, default=100, help="measured iterations")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the benchmark and print its result table; return the exit status."""
    args = _parser().parse_args(argv)
    benchmark = Benchmark(args.warmup, args.iterations)
    baseline_a = [0.0] * args.size
    baseline_b = [0.0] * args.size
    comparison_a = [0.0] * args.size
    comparison_b = [0.0] * args.size
    benchmark.add_baseline_task("ElementwiseAdd", elementwise_add, baseline_a, baseline_b)
    benchmark.add_comparison_task("ElementwiseAddUnroll", elementwise_add_unroll, comparison_a, comparison_b)
    if not benchmark.run():
        print("Benchmark failed to run.", file=sys.stderr)
        return 1
    print(benchmark.result_string())
    print("Benchmark completed successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())