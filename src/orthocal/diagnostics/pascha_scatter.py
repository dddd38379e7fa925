#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

import orthocal
from orthocal.core.date import CalendarDate


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "orthocal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "orthocal[diagnostics]"') from e


def day_of_year(d: CalendarDate, kind: str = "G") -> int:
    y = d.year(kind)
    return d.cjdn - CalendarDate(y, 1, 1, kind).cjdn + 1


def days_since_equinox(d: CalendarDate) -> int:
    """Days since the Gregorian spring equinox, with Mar 21 = 1."""
    eq = CalendarDate(d.year("G"), 3, 21, "G")
    return d.cjdn - eq.cjdn + 1


def build_series(np, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    years: List[int] = []
    values: List[float] = []
    for Y in range(start_year, end_year + 1):
        d: Optional[CalendarDate] = orthocal.pascha(Y)
        if d is None:
            continue
        years.append(d.year("G"))
        if metric == "doy":
            values.append(float(day_of_year(d)))
        elif metric == "since-equinox":
            values.append(float(days_since_equinox(d)))
        else:
            raise ValueError("metric must be 'doy' or 'since-equinox'")
    return np.asarray(years, dtype=int), np.asarray(values, dtype=float)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Gregorian date of Orthodox Pascha.")
    p.add_argument("--start-year", type=int, default=1600)
    p.add_argument("--end-year", type=int, default=2400)
    p.add_argument("--outbase", default="pascha_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("since-equinox", "doy"),
        default="since-equinox",
        help="Y-axis metric (default: days since Mar 21).",
    )
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.minorticks_off()

    ax.set_xlabel("Gregorian year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Days since Mar 21 (Mar 21 = 1)")
    ax.set_title("Orthodox Pascha in the Gregorian calendar")

    x, y = build_series(np, args.start_year, args.end_year, metric=args.metric)
    ax.scatter(x, y, s=10, marker="o", c="tab:red", linewidths=0.0, alpha=0.45)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
