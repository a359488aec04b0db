from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

EXIT_CONVERSION_ERROR = 2
EXIT_DATASET_ERROR = 3


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _engine(data: str | None):
    if data:
        from sambat.core.engine import ConversionEngine
        return ConversionEngine.default(data)
    import sambat
    return sambat.get_engine()


def _guarded(fn, argv: list[str]) -> int:
    """Run a conversion command, mapping library errors to exit codes."""
    from sambat.core.errors import ConversionError, DatasetError

    try:
        return fn(argv)
    except DatasetError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_DATASET_ERROR
    except (ConversionError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR


def cmd_to_bs(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="sambat to-bs", description="Gregorian -> Bikram Sambat")
    p.add_argument("date", help="AD date YYYY-MM-DD")
    p.add_argument("--data", default=None, help="Alternative year table CSV")
    args = p.parse_args(argv)

    b = _engine(args.data).to_bs(_parse_ymd(args.date))
    print(f"{b.format()}  ({b.month.display_name} {b.day}, {b.year} BS)")
    return 0


def cmd_to_ad(argv: list[str]) -> int:
    from sambat.core.types import BsDate

    p = argparse.ArgumentParser(prog="sambat to-ad", description="Bikram Sambat -> Gregorian")
    p.add_argument("date", help="BS date YYYY-MM-DD")
    p.add_argument("--data", default=None, help="Alternative year table CSV")
    args = p.parse_args(argv)

    d = _engine(args.data).to_ad(BsDate.fromisoformat(args.date))
    print(d.isoformat())
    return 0


def cmd_range(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="sambat range", description="Print the supported date range")
    p.add_argument("--data", default=None, help="Alternative year table CSV")
    args = p.parse_args(argv)

    info = _engine(args.data).info()
    print(f"BS years : {info['years'][0]} .. {info['years'][1]} ({info['records']} years)")
    print(f"BS dates : {info['min_bs']} .. {info['max_bs']}")
    print(f"AD dates : {info['min_ad']} .. {info['max_ad']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `sambat YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return _guarded(cmd_to_bs, argv)

    p = argparse.ArgumentParser(prog="sambat", description="Bikram Sambat <-> Gregorian date converter.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-bs", help="Gregorian -> Bikram Sambat", add_help=False)
    sub.add_parser("to-ad", help="Bikram Sambat -> Gregorian", add_help=False)
    sub.add_parser("range", help="Print the supported date range", add_help=False)

    p_month = sub.add_parser("month", help="Print a BS month calendar with AD dates")
    p_month.add_argument("year", type=int)
    p_month.add_argument("month", type=int)

    sub.add_parser("new-years", help="Print the BS New Year table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "to-bs":
        return _guarded(cmd_to_bs, rest)

    if args.cmd == "to-ad":
        return _guarded(cmd_to_ad, rest)

    if args.cmd == "range":
        return _guarded(cmd_range, rest)

    if args.cmd == "month":
        month_argv = ["--bs", str(args.year), str(args.month)] + rest
        return _guarded(lambda a: _run_module_main("sambat.diagnostics.pretty_month", a), month_argv)

    if args.cmd == "new-years":
        return _guarded(lambda a: _run_module_main("sambat.diagnostics.new_years_table", a), rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "sambat.diagnostics.round_trip",
            "scatter": "sambat.diagnostics.new_year_scatter",
        }
        return _guarded(lambda a: _run_module_main(tool_map[args.tool], a), rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
