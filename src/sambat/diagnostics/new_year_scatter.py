#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

import sambat


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "sambat[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "sambat[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def build_series(np) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """BS years, Baisakh 1 day-of-year, and year lengths, one entry per table row."""
    eng = sambat.get_engine()
    recs = list(eng.table)
    years = np.array([r.bs_year for r in recs], dtype=int)
    doy = np.array([day_of_year(r.ad_start_date) for r in recs], dtype=float)
    length = np.array([r.days_in_year for r in recs], dtype=float)
    return years, doy, length


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of BS New Year dates and year lengths.")
    p.add_argument("--outbase", default="bs_new_year_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    years, doy, length = build_series(np)

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(9.2, 6.4), sharex=True, constrained_layout=True)
    for ax in (ax0, ax1):
        ax.set_axisbelow(True)
        ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax0.scatter(years, doy, s=16, c="tab:blue", alpha=0.6)
    ax0.set_ylabel("Baisakh 1 day-of-year")
    ax0.set_title("Bikram Sambat New Year across the year table")

    ax1.bar(years, length - length.min(), bottom=length.min(), color="0.55", width=0.8)
    ax1.set_ylabel("Days in BS year")
    ax1.set_xlabel("BS year")

    mean_len = float(np.mean(length))
    ax1.axhline(mean_len, color="tab:red", linewidth=1.2, label=f"mean {mean_len:.3f}")
    ax1.legend(loc="upper right", frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    plt.close(fig)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
