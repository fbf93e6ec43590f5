"""Plot seconds per operation against workload size for each container."""

import argparse
import logging
from pathlib import Path

import matplotlib as mpl
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from patternbook.utils import get_outlier_bounds

logger = logging.getLogger(__name__)


def load_timings(path: Path) -> pd.DataFrame:
    df = pd.read_csv(path, sep="\t")
    return df.rename(
        columns={
            "Structure": "structure",
            "Size": "size",
            "Trial": "trial",
            "Seconds per operation": "seconds",
        }
    )


def drop_outliers(df: pd.DataFrame) -> pd.DataFrame:
    """Drop trials outside the IQR bounds of their (structure, size) group."""
    kept = []
    for (structure, size), group in df.groupby(["structure", "size"]):
        seconds = np.array(group.seconds, dtype=np.float64)
        lower_bound, upper_bound = get_outlier_bounds(seconds)
        inliers = group[(group.seconds >= lower_bound) & (group.seconds <= upper_bound)]
        logger.debug(
            "%s size %d: dropped %d outlier(s)",
            structure,
            size,
            len(group) - len(inliers),
        )
        kept.append(inliers)
    return pd.concat(kept)


def plot(df: pd.DataFrame, output: Path) -> None:
    summary = df.groupby(["structure", "size"]).seconds.median().reset_index()

    plt.figure(figsize=(4, 3))
    ax = plt.gca()
    for structure, group in summary.groupby("structure"):
        label = str(structure).replace("_", " ")
        ax.plot(group["size"], group.seconds * 10**6, marker="o", label=label)
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Workload size")
    ax.set_ylabel("Microseconds per operation")
    linewidth = mpl.rcParams["axes.linewidth"]
    ax.grid(True, which="major", linestyle="--", linewidth=linewidth)
    ax.legend(fontsize="small")
    plt.tight_layout()
    plt.savefig(output)
    logger.info("Saved figure to %s", output)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser()
    parser.add_argument("timings", type=Path)
    parser.add_argument("output", type=Path)
    args = parser.parse_args()

    df = load_timings(args.timings)
    plot(drop_outliers(df), args.output)


if __name__ == "__main__":
    main()
