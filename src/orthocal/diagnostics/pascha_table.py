from __future__ import annotations

import argparse
from typing import List, Optional

import orthocal
from orthocal.core.date import CalendarDate


def mmdd(d: CalendarDate, kind: str) -> str:
    _, m, dd = d.ymd(kind)
    return f"{m:02d}-{dd:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a table of Pascha dates (Julian year) in the three calendars.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=5,
        help="After the table, list the years whose Gregorian Pascha falls in this month (default: 5=May).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: CalendarDate, kind: str) -> str:
        if args.dates == "mmdd":
            return mmdd(d, kind)
        y, m, dd = d.ymd(kind)
        return f"{y}-{m:02d}-{dd:02d}"

    kinds = [("Julian", "J"), ("Milankovic", "M"), ("Gregorian", "G")]
    headers = ["Year"] + [name for name, _ in kinds] + ["Wint", "Spr"]
    colw = [5] + [max(10, len(h)) for h in headers[1:4]] + [4, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: List[int] = []
    for Y in range(Y0, Y1 + 1):
        d: Optional[CalendarDate] = orthocal.pascha(Y)
        if d is None:
            continue
        row = [str(Y).ljust(colw[0])]
        for (_, kind), w in zip(kinds, colw[1:4]):
            row.append(fmt(d, kind).ljust(w))
        row.append(str(orthocal.winter_indent(Y)).rjust(colw[4]))
        row.append(str(orthocal.spring_indent(Y)).rjust(colw[5]))
        print("  ".join(row))
        if d.month("G") == args.list_month:
            hits.append(Y)

    print(f"\nGregorian Pascha in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0
    print(" ".join(str(Y) for Y in hits))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
