"""Time fill-and-drain workloads on each container

Run with `python -O` so that the per-mutation sanity checks are skipped.
"""

import argparse
import logging
import time
from typing import Any

from tqdm import tqdm

from patternbook.replay import STRUCTURES, Structure, apply_operation, create
from patternbook.scripts.analysis.operation_cost import fill_and_drain

logger = logging.getLogger(__name__)


def time_workload(structure: Structure, operations: list[tuple[str, list[Any]]]) -> float:
    """Seconds spent applying `operations` to `structure`."""
    t0 = time.perf_counter()
    for name, args in operations:
        apply_operation(structure, name, args)
    t1 = time.perf_counter()
    return t1 - t0


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"{text} is not a positive integer")
    return value


def main(parsed_args: argparse.Namespace) -> None:
    jobs = [
        (structure_name, n, trial)
        for structure_name in parsed_args.structure
        for n in parsed_args.sizes
        for trial in range(parsed_args.repeat)
    ]
    with open(parsed_args.output, "w", encoding="utf-8") as timing_log_file:
        timing_log_file.write("Structure\tSize\tTrial\tSeconds per operation\n")
        for structure_name, n, trial in tqdm(jobs):
            operations = fill_and_drain(structure_name, n)
            if not operations:
                logger.warning("Skipping empty workload for %s", structure_name)
                continue
            duration = time_workload(create(structure_name), operations)
            logger.debug("%s n=%d trial=%d: %f", structure_name, n, trial, duration)
            timing_log_file.write(
                f"{structure_name}\t{n}\t{trial}\t{duration / len(operations)}\n"
            )


if __name__ == "__main__":
    if __debug__:
        logging.basicConfig(level=logging.DEBUG)
        logger.warning("Sanity checks are enabled; timings include them")
    else:
        logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--structure",
        type=str,
        nargs="+",
        default=list(STRUCTURES),
        choices=list(STRUCTURES),
    )
    parser.add_argument(
        "--sizes", type=positive_int, nargs="+", default=[100, 1000, 5000, 10000]
    )
    parser.add_argument("--repeat", type=positive_int, default=5)
    parser.add_argument("--output", required=True, type=str)
    main(parser.parse_args())
