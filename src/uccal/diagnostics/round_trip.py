from __future__ import annotations

import argparse
import random

from uccal import UCCDate
from uccal.engines.specs import ONE_DAY


def roundtrip_test(N: int, lo_year: int, hi_year: int, seed: int, *, max_failures: int) -> int:
    """Random instants -> (year, triad, day, time) -> instant, and the same through strings."""
    random.seed(seed)
    failures = 0
    lo = UCCDate.from_components(lo_year, 0, 1).instant
    hi = UCCDate.from_components(hi_year, 0, 1).instant

    for _ in range(N):
        ms = random.randint(lo, hi)
        d0 = UCCDate(ms)
        t = ms % ONE_DAY
        back = UCCDate.from_components(
            d0.year, d0.triad, d0.day,
            t // 3_600_000, t // 60_000 % 60, t // 1000 % 60, t % 1000,
        )
        by_str = UCCDate.from_string(d0.sortable)
        if back.instant != ms or by_str.days != d0.days:
            failures += 1
            print("\nFAIL")
            print("ms:", ms)
            print("mapped:", d0.mapped)
            print("components ->", back.instant)
            print("sortable ->", d0.sortable, by_str.instant)
            if failures >= max_failures:
                return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip UCC instants through components and strings.")
    p.add_argument("--n", type=int, default=20000)
    p.add_argument("--from-year", type=int, default=1)
    p.add_argument("--to-year", type=int, default=24000)
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    failures = roundtrip_test(args.n, args.from_year, args.to_year, args.seed, max_failures=args.max_failures)
    print(f"round-trip: N={args.n} failures={failures}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
