from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import OrthocalError

_DATE_RE = re.compile(r"^(\d+)-(\d{1,2})-(\d{1,2})$")
_KIND_CHOICES = ["J", "M", "G"]


def _parse_ymd(s: str, kind: str = "J"):
    from .core.date import CalendarDate

    m = _DATE_RE.match(s.strip())
    if not m:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    return CalendarDate(m.group(1), int(m.group(2)), int(m.group(3)), kind)


def _parse_marker(p: argparse.ArgumentParser, s: str) -> int:
    from .reference.markers import parse_marker

    try:
        return parse_marker(s)
    except ValueError as e:
        p.error(str(e))
        raise  # unreachable: error() exits


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


def cmd_pascha(argv: list[str]) -> int:
    import orthocal

    p = argparse.ArgumentParser(prog="orthocal pascha", description="Date of Pascha for a year")
    p.add_argument("year")
    p.add_argument("--kind", choices=_KIND_CHOICES, default="J", help="calendar of the year (default: J)")
    p.add_argument("--fmt", default="%JY-%JQ-%JD (G %GY-%GQ-%GD)")
    args = p.parse_args(argv)

    d = orthocal.pascha(args.year, args.kind)
    if d is None:
        print(f"no Pascha inside {args.kind} year {args.year}")
        return 1
    print(d.format(args.fmt))
    return 0


def cmd_day(argv: list[str]) -> int:
    import orthocal

    p = argparse.ArgumentParser(prog="orthocal day", description="Liturgical properties of one day")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--kind", choices=_KIND_CHOICES, default="J")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date, args.kind)
    info = orthocal.day_info(d, attributes=tuple(args.attr))
    print(orthocal.get_description_for_date(d, "%WD, %JY-%JQ-%JD (G %GY-%GQ-%GD)"))
    for k, v in (info.attributes or {}).items():
        print(f"  {k}: {v}")
    return 0


def cmd_find(argv: list[str]) -> int:
    import orthocal

    p = argparse.ArgumentParser(prog="orthocal find", description="Dates carrying a marker in a year")
    p.add_argument("marker", help="name (PASCHA, FixedDay.JAN_06) or numeric value")
    p.add_argument("year")
    p.add_argument("--kind", choices=_KIND_CHOICES, default="J")
    p.add_argument("--all", action="store_true", help="list every date, not just the first")
    p.add_argument("--fmt", default="%JY-%JQ-%JD (G %GY-%GQ-%GD)")
    args = p.parse_args(argv)

    m = _parse_marker(p, args.marker)
    if args.all:
        dates = orthocal.get_alldates_with(args.year, m, args.kind)
    else:
        d = orthocal.get_date_with(args.year, m, args.kind)
        dates = [d] if d is not None else []
    if not dates:
        print(f"{orthocal.marker_title(m) or m}: not in {args.kind} year {args.year}")
        return 1
    for d in dates:
        print(d.format(args.fmt))
    return 0


def cmd_describe(argv: list[str]) -> int:
    import orthocal

    p = argparse.ArgumentParser(prog="orthocal describe", description="Text description of a day or a range of days")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--to", default=None, help="last day of the range, YYYY-MM-DD")
    p.add_argument("--kind", choices=_KIND_CHOICES, default="J")
    p.add_argument("--fmt", default="%Jd %JM %JY г.")
    args = p.parse_args(argv)

    first = _parse_ymd(args.date, args.kind)
    last = _parse_ymd(args.to, args.kind) if args.to else first
    if last < first:
        first, last = last, first
    days = [first.inc_by_days(i) for i in range(last.cjdn - first.cjdn + 1)]
    print(orthocal.get_description_for_dates(days, args.fmt, "\n"))
    return 0


def cmd_indents(argv: list[str]) -> int:
    import orthocal

    p = argparse.ArgumentParser(prog="orthocal indents", description="Reading indents of a year")
    p.add_argument("year")
    args = p.parse_args(argv)

    print(f"winter indent       : {orthocal.winter_indent(args.year)}")
    print(f"spring indent       : {orthocal.spring_indent(args.year)}")
    print(f"Apostles' fast days : {orthocal.apostol_post_length(args.year)}")
    return 0


def cmd_options(argv: list[str]) -> int:
    import orthocal

    p = argparse.ArgumentParser(prog="orthocal options", description="Current indent configuration")
    p.parse_args(argv)

    weeks, apostol = orthocal.get_options()
    print(" ".join(str(w) for w in weeks))
    print(f"spring indent applies to Apostol: {apostol}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `orthocal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="orthocal", description="Orthodox church calendar CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("pascha", help="Date of Pascha", add_help=False)
    sub.add_parser("day", help="Liturgical properties of one day", add_help=False)
    sub.add_parser("find", help="Dates carrying a marker", add_help=False)
    sub.add_parser("describe", help="Text description of days", add_help=False)
    sub.add_parser("indents", help="Reading indents of a year", add_help=False)
    sub.add_parser("options", help="Current indent configuration", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["pascha-table", "pascha-scatter", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    commands = {
        "pascha": cmd_pascha,
        "day": cmd_day,
        "find": cmd_find,
        "describe": cmd_describe,
        "indents": cmd_indents,
        "options": cmd_options,
    }
    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "pascha-table": "orthocal.diagnostics.pascha_table",
                "pascha-scatter": "orthocal.diagnostics.pascha_scatter",
                "round-trip": "orthocal.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except OrthocalError as e:
        print(f"orthocal: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
