"""Count the primitive steps the containers perform for a workload."""

import argparse
from collections import defaultdict as dd
import io
import json
import logging
import sys
from typing import Any, Iterable, Optional

import timeout_decorator  # type: ignore

from patternbook.logging import OperationStep
from patternbook.logging import VERBOSE
from patternbook.replay import STRUCTURES, Structure, apply_operation, create
from patternbook.utils import read_operations

logger = logging.getLogger(__name__)

# Insert and remove operation used by `fill_and_drain` for each structure
FILL_AND_DRAIN: dict[str, tuple[str, str]] = {
    "array_queue": ("enqueue", "dequeue"),
    "linked_queue": ("enqueue", "dequeue"),
    "singly_linked_list": ("push_back", "pop_front"),
    "doubly_linked_list": ("push_back", "pop_back"),
}


class VerboseFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno == VERBOSE


def fill_and_drain(structure_name: str, n: int) -> list[tuple[str, list[Any]]]:
    """`n` insertions followed by `n` removals."""
    insert, remove = FILL_AND_DRAIN[structure_name]
    operations: list[tuple[str, list[Any]]] = [(insert, [i]) for i in range(n)]
    operations.extend((remove, []) for _ in range(n))
    return operations


def collect_operation_steps(
    structure: Structure,
    operations: Iterable[tuple[str, list[Any]]],
) -> dict[str, int]:
    logger_dict = logging.Logger.manager.loggerDict
    patternbook_loggers = {
        name: patternbook_logger
        for name, patternbook_logger in logger_dict.items()
        if name.startswith("patternbook.more_collections")
        and isinstance(patternbook_logger, logging.Logger)
    }
    patternbook_logger_configs = {
        name: (patternbook_logger.level, patternbook_logger.handlers.copy(),
               patternbook_logger.propagate)
        for name, patternbook_logger in patternbook_loggers.items()
    }
    stream = io.StringIO()
    handler: logging.Handler = logging.StreamHandler(stream)
    handler.addFilter(VerboseFilter())

    for patternbook_logger in patternbook_loggers.values():
        patternbook_logger.setLevel(VERBOSE)
        patternbook_logger.handlers.clear()
        patternbook_logger.addHandler(handler)
        patternbook_logger.propagate = False

    operation_steps: dd[str, int] = dd(int)
    try:
        for i, (name, args) in enumerate(operations):
            apply_operation(structure, name, args)
            operation_steps["OPERATIONS"] += 1
            value = stream.getvalue()
            for operation_step in value.splitlines():
                if operation_step not in OperationStep.__members__:
                    raise ValueError(f"Unknown operation step: {operation_step}")
                operation_steps[operation_step] += 1
            stream.seek(0)
            stream.truncate(0)
            logger.debug("Operation steps %d: %s", i, dict(operation_steps))
    finally:
        handler.close()
        for patternbook_logger, (level, handlers, propagate) in zip(
            patternbook_loggers.values(),
            patternbook_logger_configs.values(),
        ):
            patternbook_logger.setLevel(level)
            patternbook_logger.handlers.clear()
            for previous_handler in handlers:
                patternbook_logger.addHandler(previous_handler)
            patternbook_logger.propagate = propagate
    return dict(operation_steps)


def collect_optional_operation_steps(
    structure: Structure,
    operations: Iterable[tuple[str, list[Any]]],
    timeout: int,
) -> Optional[dict[str, int]]:
    """Like `collect_operation_steps`, but gives up after `timeout` seconds
    (0 disables the limit) and returns None."""
    try:
        return timeout_decorator.timeout(timeout)(collect_operation_steps)(
            structure, operations
        )
    except timeout_decorator.TimeoutError:
        logger.warning(
            "Operation cost timeout for %s", structure.__class__.__name__
        )
        return None


def main(args: argparse.Namespace) -> None:
    stdin_operations = list(read_operations(sys.stdin)) if args.stdin else None
    for structure_name in args.structure:
        workloads: list[tuple[Optional[int], list[tuple[str, list[Any]]]]]
        if stdin_operations is not None:
            workloads = [(None, stdin_operations)]
        else:
            workloads = [(n, fill_and_drain(structure_name, n)) for n in args.sizes]
        for n, operations in workloads:
            logger.info("Structure: %s, size: %s", structure_name, n)
            steps: Optional[dict[str, int]] = None
            try:
                steps = collect_optional_operation_steps(
                    create(structure_name), operations, args.timeout
                )
            except ValueError as e:
                logger.error("Error in structure %s: %s", structure_name, e)
            finally:
                output_dict = {"structure": structure_name, "size": n, "steps": steps}
                print(json.dumps(output_dict))


if __name__ == "__main__":
    if __debug__:
        logging.basicConfig(level=logging.DEBUG)
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
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 100, 1000])
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read the operations from stdin instead of using fill-and-drain",
    )
    parser.add_argument("--timeout", type=int, default=60)
    main(parser.parse_args())
