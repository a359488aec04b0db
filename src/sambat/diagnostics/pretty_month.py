from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import sambat
from sambat.core.engine import ConversionEngine
from sambat.core.types import BsMonth


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def format_grid(title: str, days: list[tuple[date, str, str]]) -> list[str]:
    """Lay (date, top, bottom) cells out in Sunday-first weeks."""
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (days[0][0].weekday() + 1) % 7  # Sunday=0; Saturday is the Nepali weekend
    for _ in range(pad):
        wk.append(cell("", ""))
    for _, top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    lines = [title, dow_header(), "-" * len(dow_header())]
    for w in weeks:
        lines.append(" ".join(c[0] for c in w).rstrip())
        lines.append(" ".join(c[1] for c in w).rstrip())
    return lines


def bs_month_lines(year: int, month: int, engine: ConversionEngine | None = None) -> list[str]:
    engine = engine or sambat.get_engine()
    m = BsMonth.from_value(month)
    d0, d1 = engine.month_bounds(year, m)

    days = []
    d = d0
    n = 1
    while d <= d1:
        days.append((d, f"{n:2d}", f"{d.month:02d}-{d.day:02d}"))
        d += timedelta(days=1)
        n += 1

    title = f"{m.display_name} {year} BS   ({d0} .. {d1}, {n - 1} days)"
    return format_grid(title, days)


def ad_month_lines(gy: int, gm: int, engine: ConversionEngine | None = None) -> list[str]:
    engine = engine or sambat.get_engine()
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    days = []
    d = first
    while d <= last:
        b = engine.to_bs(d)
        days.append((d, f"{d.day:2d}", f"{b.month.value:02d}-{b.day:02d}"))
        d += timedelta(days=1)

    return format_grid(f"Gregorian month  {gy}-{gm:02d}", days)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a BS-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--bs", nargs=2, type=int, metavar=("Y", "M"),
                   help="BS month to print: Y M (e.g. 2082 1)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 4)")
    p.add_argument("--data", default=None, help="Alternative year table CSV.")
    args = p.parse_args(argv)

    engine = ConversionEngine.default(args.data) if args.data else sambat.get_engine()

    if not args.bs and not args.greg:
        # sensible default demo
        print("\n".join(bs_month_lines(2082, 1, engine)))
        print()
        print("\n".join(ad_month_lines(2025, 4, engine)))
        return 0

    if args.bs:
        print("\n".join(bs_month_lines(*args.bs, engine=engine)))
        print()

    if args.greg:
        print("\n".join(ad_month_lines(*args.greg, engine=engine)))
        print()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
