from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import Iterator, List

import sambat
from sambat.core.engine import ConversionEngine


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def iter_dates(start: date, end: date) -> Iterator[date]:
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


def sample_dates(start: date, end: date, n: int, seed: int) -> List[date]:
    rng = random.Random(seed)
    span = (end - start).days
    return sorted(start + timedelta(days=rng.randint(0, span)) for _ in range(n))


def roundtrip_test(
    engine: ConversionEngine,
    dates: List[date],
    *,
    max_failures: int,
) -> int:
    """AD->BS->AD and BS->AD->BS on every date, plus monotonicity along the (sorted) list."""
    failures = 0
    prev_bs = None

    for d0 in dates:
        b = engine.to_bs(d0)
        back = engine.to_ad(b)
        again = engine.to_bs(back)

        problems = []
        if back != d0:
            problems.append(f"to_ad(to_bs(d)) = {back}")
        if again != b:
            problems.append(f"to_bs(to_ad(b)) = {again}")
        if prev_bs is not None and b < prev_bs:
            problems.append(f"not monotone: previous BS {prev_bs}")
        prev_bs = b

        if problems:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("bs:", b)
            for msg in problems:
                print(" ", msg)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip tests: gregorian -> bikram sambat -> gregorian.")
    p.add_argument("--N", type=int, default=0, help="Random trials (default 0: every day in range).")
    p.add_argument("--start", type=str, default="", help="Start date YYYY-MM-DD (default: first supported).")
    p.add_argument("--end", type=str, default="", help="End date YYYY-MM-DD (default: last supported).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    p.add_argument("--data", default=None, help="Alternative year table CSV.")
    args = p.parse_args(argv)

    engine = ConversionEngine.default(args.data) if args.data else sambat.get_engine()
    start = parse_date(args.start) if args.start else engine.min_supported_ad_date()
    end = parse_date(args.end) if args.end else engine.max_supported_ad_date()

    if end < start:
        raise SystemExit("--end must be >= --start")

    dates = sample_dates(start, end, args.N, args.seed) if args.N > 0 else list(iter_dates(start, end))
    print(f"Testing {len(dates)} dates in {start} .. {end} ...")
    failures = roundtrip_test(engine, dates, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
