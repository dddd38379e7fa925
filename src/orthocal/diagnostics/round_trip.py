from __future__ import annotations

import argparse
import random

from orthocal.core.date import CalendarDate
from orthocal.core.types import CalendarKind

KINDS = (CalendarKind.JULIAN, CalendarKind.MILANKOVIC, CalendarKind.GREGORIAN)


def parse_date(s: str) -> CalendarDate:
    y, m, d = s.split("-")
    return CalendarDate(int(y), int(m), int(d), CalendarKind.GREGORIAN)


def roundtrip_test(N: int, start: CalendarDate, end: CalendarDate, seed: int, *, max_failures: int) -> int:
    """Random days: every kind's (y, m, d) must rebuild the same CJDN, and +1 day must advance the weekday."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = CalendarDate.from_cjdn(random.randint(start.cjdn, end.cjdn))
        for kind in KINDS:
            y, m, d = d0.ymd(kind)
            back = CalendarDate(y, m, d, kind)
            if back != d0:
                failures += 1
                print("\nFAIL (ymd)")
                print("kind:", kind.name)
                print("d0:", repr(d0), d0.cjdn)
                print("back:", repr(back), back.cjdn)
                if failures >= max_failures:
                    return failures

        d1 = d0.inc_by_days(1)
        if d1 and (d1.cjdn != d0.cjdn + 1 or d1.weekday != (d0.weekday + 1) % 7):
            failures += 1
            print("\nFAIL (increment)")
            print("d0:", repr(d0), "d1:", repr(d1))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: (y, m, d) -> CJDN -> (y, m, d) in J/M/G.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD (Gregorian).")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD (Gregorian).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
