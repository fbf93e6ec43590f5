"""Utility functions for the project."""

import json
import os
import shlex
from typing import Any, Iterable, Union

import numpy as np
import numpy.typing as npt


def get_outlier_bounds(data: npt.NDArray[np.float64]) -> tuple[float, float]:
    q1, q3 = np.percentile(data, [25, 75])
    iqr = q3 - q1
    lower_bound = q1 - 1.5 * iqr
    upper_bound = q3 + 1.5 * iqr
    return float(lower_bound), float(upper_bound)


def escape(text: str) -> str:
    return json.dumps(text)


def unescape(text: str) -> str:
    output = json.loads(text)
    if not isinstance(output, str):
        raise ValueError("Invalid text")
    return output


def parse_argument(text: str) -> Any:
    """Decode an operation argument as JSON, falling back to the raw text.

    >>> parse_argument("3")
    3
    >>> parse_argument("apple")
    'apple'
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def load_operations(
    path: Union[os.PathLike[str], str],
) -> Iterable[tuple[str, list[Any]]]:
    with open(path, "r", encoding="utf-8") as dataset:
        yield from read_operations(dataset)


def read_operations(lines: Iterable[str]) -> Iterable[tuple[str, list[Any]]]:
    """Parse lines of the form `name [arg ...]`. Tab-separated lines are split
    on tabs only; other lines are split on whitespace outside double quotes,
    so `enqueue "hello world"` has one argument. Blank lines and lines
    starting with `#` are skipped."""
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "\t" in line:
            entries = line.split("\t")
        else:
            lexer = shlex.shlex(line, posix=False)
            lexer.whitespace_split = True
            lexer.quotes = '"'
            lexer.commenters = ""
            try:
                entries = list(lexer)
            except ValueError as e:
                raise ValueError(f"Malformed operation line {line!r}") from e
        name = entries[0]
        args = [parse_argument(entry) for entry in entries[1:]]
        yield name, args
