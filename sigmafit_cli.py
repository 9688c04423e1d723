"""
Command-line front end for sigma fitting.

Usage:
    python sigmafit_cli.py calculate --min 10 --max 30 --mean_value 10 \
        --from 10 --to 20 --ratio 60
    python sigmafit_cli.py select --min 10 --max 30 --mode medium

Notes:
- calculate: every request parameter is given directly; --ratio is a percentage.
- select:    mean, band and ratio are derived from --min/--max by a named preset
             (super_low, low, medium, high, super_high).
- Solver:    --bisect-iterations, --newton-iterations, --tolerance.
- Output:    inputs, the solved deviation, and the x1000 values; --show-mass adds
             the per-integer probability table.
"""

import argparse
import logging
import sys

from sigmafit import SigmaFitError, SigmaSolver
from sigmafit.presets import get_preset, list_presets
from sigmafit.report import format_mass_table, format_preset, format_request, format_result
from sigmafit.request import FitRequest
from utils.logger import configure, log_debug, log_error


def add_solver_args(p):
    p.add_argument("--bisect-iterations", type=int, default=20, help="Log-space bisection steps")
    p.add_argument("--newton-iterations", type=int, default=50, help="Maximum Newton steps")
    p.add_argument("--tolerance", type=float, default=1e-12, help="Newton step size treated as converged")
    p.add_argument("--show-mass", action="store_true", help="Print the per-integer probability table")
    p.add_argument("--verbose", action="store_true", help="Print solver diagnostics")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    p.add_argument("--log-dir", default=None, help="Write a timestamped log file to this directory")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sigmafit",
        description="Find the standard deviation of a discretized Gaussian that puts a "
                    "target share of its mass in a given range")
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calculate", help="Solve for explicitly given parameters")
    calc.add_argument("--min", dest="min_value", type=int, default=10, help="minimum discount")
    calc.add_argument("--max", dest="max_value", type=int, default=30, help="maximum discount")
    calc.add_argument("--mean_value", type=float, default=10.0, help="mean value")
    calc.add_argument("--from", dest="from_value", type=int, default=10, help="from discount for the ratio")
    calc.add_argument("--to", dest="to_value", type=int, default=30, help="to discount for the ratio")
    calc.add_argument("--ratio", type=float, default=60.0,
                      help="ratio between 'from' and 'to', in percentage")
    add_solver_args(calc)

    select = sub.add_parser("select", help="Solve for a named preset")
    select.add_argument("--min", dest="min_value", type=int, default=10, help="minimum discount")
    select.add_argument("--max", dest="max_value", type=int, default=30, help="maximum discount")
    select.add_argument("--mode", default="",
                        help="mode of random distribution, is one of values: " + ", ".join(list_presets()))
    add_solver_args(select)

    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)


def build_request(args):
    """Return (request, header text) for the parsed arguments."""
    if args.command == "select":
        preset = get_preset(args.mode, args.min_value, args.max_value)
        return preset.to_request(), format_preset(preset)

    request = FitRequest.from_percentage(args.min_value, args.max_value, args.mean_value,
                                         args.from_value, args.to_value, args.ratio)
    return request, format_request(request, ratio_percent=args.ratio)


def main(argv=None):
    args = parse_args(argv)
    configure(log_dir=args.log_dir, log_level=getattr(logging, args.log_level))

    try:
        request, header = build_request(args)
        print(header)
        solver = SigmaSolver(bisect_iterations=args.bisect_iterations,
                             newton_iterations=args.newton_iterations,
                             step_tolerance=args.tolerance)
        result = solver.solve(request)
    except SigmaFitError as e:
        log_debug(f"{type(e).__name__}: {e}")
        print(f"[ERROR] {e}")
        return 1
    except ValueError as e:
        log_error(f"Invalid solver configuration: {e}")
        return 1

    print(format_result(result, verbose=args.verbose))
    if args.show_mass:
        print(format_mass_table(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
