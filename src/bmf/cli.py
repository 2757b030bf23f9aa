"""
Benchmark Function Command-Line Interface

Lists, inspects, evaluates and samples catalog functions from the shell.
"""

import sys
import argparse
import json
import logging
import numpy as np

from . import __version__
from .catalog import get_all_families
from .resolver import ResolveError, resolve
from .sampling import SobolSampler
from .utils import input_domain


def _resolve_or_report(spec: str):
    result = resolve(spec)
    if isinstance(result, ResolveError):
        print(f"Error: {result.message}")
        return None
    return result


def _format_point(x: np.ndarray) -> str:
    return f"{x[:min(5, len(x))]}{'...' if len(x) > 5 else ''}"


def cmd_list(args):
    """List catalog families."""
    families = get_all_families()
    if args.fixed_arity:
        families = [f for f in families if f.is_fixed_arity]
    elif args.any_dimension:
        families = [f for f in families if not f.is_fixed_arity]

    print(f"{'name':18} {'arity':>5}  {'domain':>26}  {'known optimum':>16}")
    print("-" * 70)
    for family in families:
        arity = str(family.arity) if family.arity is not None else "n"
        lower, upper = family.domain
        domain = f"[{lower:.4g}, {upper:.4g}]"
        print(f"{family.name:18} {arity:>5}  {domain:>26}  {family.known_optimum:>16.8g}")
    print(f"\nTotal: {len(families)} functions")
    return 0


def cmd_info(args):
    """Show metadata of a resolved specification."""
    function = _resolve_or_report(args.spec)
    if function is None:
        return 1

    lower, upper = function.domain_unscaled()
    print(f"Function: {function.name}")
    print(f"Dimension: {function.dimension}")
    print(f"Domain: [{lower}, {upper}]")
    print(f"Known optimum: {function.known_optimum_raw()}")
    return 0


def cmd_eval(args):
    """Evaluate a function at one point."""
    function = _resolve_or_report(args.spec)
    if function is None:
        return 1

    x = np.array(args.x, dtype=np.float64)
    if len(x) != function.dimension:
        print(f"Error: point length ({len(x)}) must match dimension ({function.dimension})")
        return 1

    try:
        if args.normalized:
            lower, upper = function.domain
            native = input_domain(x, lower, upper)
            value = function.objective(x)
        else:
            native = x
            value = function.evaluate(x)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"x: {_format_point(native)}")
    print(f"f(x): {value:.12g}")
    print(f"Gap to known optimum: {function.optimality_gap(value):.6e}")
    return 0


def cmd_sample(args):
    """Probe a function with Sobol samples."""
    function = _resolve_or_report(args.spec)
    if function is None:
        return 1
    if args.n_points < 1:
        print(f"Error: number of points must be >= 1, got {args.n_points}")
        return 1

    print("=" * 60)
    print(f"Sobol probe: {function.name}<{function.dimension}>")
    print("=" * 60)

    sampler = SobolSampler(function, seed=args.seed)
    try:
        report = sampler.sample(args.n_points)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"Points: {report.n_points}")
    print(f"Best value: {report.best_value:.6e}")
    print(f"Best point: {_format_point(report.best_point)}")
    print(f"Mean value: {report.mean_value:.6e}")
    print(f"Known optimum: {report.known_optimum:.6e}")
    print(f"Gap: {report.gap:.6e}")

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(report.to_dict(), f, indent=2)
        print(f"\nResults saved to: {args.output}")
    return 0


def cmd_version(args):
    """Print version information."""
    print(f"bmf {__version__}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bmf',
        description='Continuous benchmark functions for optimization'
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    list_parser = subparsers.add_parser('list', help='List benchmark functions')
    group = list_parser.add_mutually_exclusive_group()
    group.add_argument('--fixed-arity', action='store_true',
                       help='Only functions with a fixed number of variables')
    group.add_argument('--any-dimension', action='store_true',
                       help='Only functions defined for any dimension')
    list_parser.set_defaults(func=cmd_list)

    info_parser = subparsers.add_parser('info', help='Show function metadata')
    info_parser.add_argument('spec', help="Specification 'name<dimension>'")
    info_parser.set_defaults(func=cmd_info)

    eval_parser = subparsers.add_parser('eval', help='Evaluate a function at a point')
    eval_parser.add_argument('spec', help="Specification 'name<dimension>'")
    eval_parser.add_argument('x', type=float, nargs='+',
                             help='Point coordinates')
    eval_parser.add_argument('--normalized', action='store_true',
                             help='Coordinates are given in [-1, 1]')
    eval_parser.set_defaults(func=cmd_eval)

    sample_parser = subparsers.add_parser('sample', help='Probe a function with Sobol samples')
    sample_parser.add_argument('spec', help="Specification 'name<dimension>'")
    sample_parser.add_argument('--n-points', '-n', type=int, default=256,
                               help='Number of samples (default: 256)')
    sample_parser.add_argument('--seed', type=int, default=42,
                               help='Scrambling seed (default: 42)')
    sample_parser.add_argument('--output', '-o', type=str,
                               help='Output JSON file')
    sample_parser.set_defaults(func=cmd_sample)

    ver_parser = subparsers.add_parser('version', help='Print version')
    ver_parser.set_defaults(func=cmd_version)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
