"""
Command-line entry point.

    python -m permstat control.dat treatment.dat --trials 1000000

Each file holds one number per line. Prints the permutation test report
and exits 1 with a message on any PermStat error.
"""

import argparse
import sys

from permstat.core.datasource import load_sample
from permstat.core.exceptions import PermStatError
from permstat.montecarlo.design import DEFAULT_BATCH_SIZE, DEFAULT_TRIALS
from permstat.montecarlo.solvers import run_permutation_test


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='permstat',
        description='Two-sided permutation test of a difference in means '
                    '(treatment minus control).',
    )
    parser.add_argument('control', help='Control sample file, one number per line')
    parser.add_argument('treatment', help='Treatment sample file, one number per line')
    parser.add_argument(
        '--trials', '-n',
        type=int,
        default=DEFAULT_TRIALS,
        help=f'Number of permutation trials (default: {DEFAULT_TRIALS})',
    )
    parser.add_argument(
        '--workers', '-j',
        type=int,
        default=None,
        help='Parallel workers (default: all available CPUs)',
    )
    parser.add_argument(
        '--batch-size',
        type=int,
        default=DEFAULT_BATCH_SIZE,
        help=f'Trials per vectorized batch (default: {DEFAULT_BATCH_SIZE})',
    )
    parser.add_argument('--seed', type=int, default=None, help='Root random seed')
    parser.add_argument(
        '--backend',
        choices=('cpu', 'gpu', 'auto'),
        default='cpu',
        help='Compute backend (default: cpu)',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        control = load_sample(args.control)
        treatment = load_sample(args.treatment)
        result = run_permutation_test(
            control,
            treatment,
            args.trials,
            n_workers=args.workers,
            batch_size=args.batch_size,
            seed=args.seed,
            backend=args.backend,
        )
    except PermStatError as e:
        print(f"permstat: error: {e}", file=sys.stderr)
        return 1

    print(result.summary())
    return 0


if __name__ == '__main__':
    sys.exit(main())
