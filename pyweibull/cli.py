"""
Command line entry point.

    pyweibull data.txt --nboot 1000 --conf 0.9 --seed 1 --cpm 100 --ccm 1000

Reads ``time,code`` records from a file (or stdin with ``-``), prints the
fit, optionally the bootstrap intervals and the cost-optimal PM interval,
and optionally writes the cost grid as text.
"""

from __future__ import annotations

import argparse
import sys

from pyweibull.core.exceptions import PyWeibullError
from pyweibull.maintenance import cost_grid
from pyweibull.montecarlo import bootstrap_ci
from pyweibull.weibull import fit, parse_records


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyweibull",
        description="Censored Weibull fit, bootstrap CI and PM interval optimisation",
    )
    parser.add_argument("records", help="record file (time,F|S per line), or - for stdin")
    parser.add_argument("--nboot", type=int, default=0,
                        help="bootstrap replicates (0 skips the bootstrap)")
    parser.add_argument("--conf", type=float, default=0.90, help="confidence level")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--cpm", type=float, default=None, help="preventive replacement cost")
    parser.add_argument("--ccm", type=float, default=None, help="corrective replacement cost")
    parser.add_argument("--grid", default=None,
                        help="write the cost grid (t,CPUT,CPM,CCM) to this path")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.cpm is None) != (args.ccm is None):
        parser.error("--cpm and --ccm must be given together")
    if args.grid and args.cpm is None:
        parser.error("--grid requires --cpm and --ccm")

    if args.records == "-":
        text = sys.stdin.read()
    else:
        with open(args.records, encoding="utf-8") as fh:
            text = fh.read()

    parsed = parse_records(text)
    if parsed.n_dropped:
        lines = ", ".join(str(i) for i in parsed.dropped_lines[:10])
        more = " ..." if parsed.n_dropped > 10 else ""
        print(f"dropped {parsed.n_dropped} malformed line(s): {lines}{more}",
              file=sys.stderr)

    try:
        solution = fit(parsed.design)
        print(solution.summary())

        if args.nboot > 0:
            boot = bootstrap_ci(parsed.design, nboot=args.nboot,
                                conf=args.conf, seed=args.seed)
            if boot is None:
                print("\nBootstrap skipped: fewer than 3 observations")
            else:
                print(boot.summary())

        if args.cpm is not None and args.ccm is not None:
            costs = cost_grid(solution.beta, solution.eta, args.cpm, args.ccm)
            print(costs.summary())
            if args.grid:
                with open(args.grid, "w", encoding="utf-8") as fh:
                    fh.write(costs.to_csv())
    except PyWeibullError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0
