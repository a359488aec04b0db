from __future__ import annotations

from datetime import date
import argparse

import sambat
from sambat.core.engine import ConversionEngine


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Baisakh 1 (BS New Year) Gregorian date for each supported BS year."
    )
    p.add_argument("--from-year", type=int, default=None, help="First BS year (default: first in the table).")
    p.add_argument("--to-year", type=int, default=None, help="Last BS year (default: last in the table).")
    p.add_argument("--data", default=None, help="Alternative year table CSV.")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the New Year column (default: iso).",
    )
    args = p.parse_args(argv)

    eng = ConversionEngine.default(args.data) if args.data else sambat.get_engine()
    years = eng.supported_years()
    Y0 = years[0] if args.from_year is None else args.from_year
    Y1 = years[-1] if args.to_year is None else args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    headers = ["BS", "New Year", "Days", "Chaitra"]
    colw = [5, 10, 4, 7]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    counts: dict[str, int] = {}
    for Y in range(Y0, Y1 + 1):
        rec = eng.table.by_year(Y)
        if rec is None:
            continue
        d = rec.ad_start_date
        counts[mmdd(d)] = counts.get(mmdd(d), 0) + 1
        row = [str(Y), fmt(d), str(rec.days_in_year), str(rec.month_lengths[-1])]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    print("\nNew Year dates by Gregorian day:")
    for k in sorted(counts):
        print(f"{k}  {counts[k]}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
