"""Replay operations read from stdin and print the result of each one"""

import argparse
import json
import logging
import os
import sys
from typing import Any, TextIO

from patternbook.replay import STRUCTURES, Structure, apply_operation, create
from patternbook.utils import read_operations

logger = logging.getLogger(__name__)


def run(structure: Structure, lines: TextIO, output: TextIO) -> int:
    """Apply each operation to `structure`. Malformed lines are logged and
    skipped. Returns the number of rejected lines."""
    errors = 0
    for name, args in read_operations(lines):
        try:
            result = apply_operation(structure, name, args)
        except ValueError as e:
            logger.error("Rejected operation %s %s: %s", name, args, e)
            errors += 1
            continue
        entry: dict[str, Any] = {
            "operation": name,
            "args": args,
            "result": result,
            "values": list(structure),
        }
        output.write(json.dumps(entry, default=str) + "\n")
    return errors


def main(args: argparse.Namespace) -> int:
    structure = create(args.structure)
    logger.info("Replaying operations on %s", args.structure)
    errors = run(structure, sys.stdin, sys.stdout)
    return 1 if errors else 0


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOGLEVEL", "WARNING"))
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--structure",
        type=str,
        required=True,
        choices=list(STRUCTURES),
    )
    sys.exit(main(parser.parse_args()))
