"""
HilbertSort CLI - Convert between lattice points and Hilbert curve indices.

Usage:
    python -m HilbertSort encode 30 2 1000 [--dimension D] [--iterations B]
    python -m HilbertSort decode 153400678 [--dimension D] [--iterations B]
    python -m HilbertSort demo
"""

import argparse
import logging
import sys

from .example import run_example
from .hilbert_curve import HilbertCurve


def _add_curve_arguments(parser):
    parser.add_argument(
        '--dimension', '-d',
        type=int,
        default=3,
        help='Number of lattice axes (default: 3)'
    )
    parser.add_argument(
        '--iterations', '-b',
        type=int,
        default=10,
        help='Bits of precision per axis (default: 10)'
    )


def _encode(args):
    curve = HilbertCurve(args.dimension, args.iterations)
    if len(args.coords) != curve.dimension:
        raise ValueError(f"Expected {curve.dimension} coordinates, got {len(args.coords)}")
    print(curve.hilbert_number_from_point(args.coords))


def _decode(args):
    curve = HilbertCurve(args.dimension, args.iterations)
    point = curve.point_from_hilbert_number(args.index)
    print(' '.join(str(c) for c in point))


def _demo(args):
    for line in run_example():
        print(line)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Convert between lattice points and Hilbert curve indices.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
    python -m HilbertSort encode 30 2 1000
    python -m HilbertSort decode 153400678
    python -m HilbertSort encode 3 5 -d 2 -b 3
    python -m HilbertSort demo
        '''
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    encode_parser = subparsers.add_parser('encode', help='Hilbert index of a lattice point')
    encode_parser.add_argument('coords', type=int, nargs='+', help='Point coordinates')
    _add_curve_arguments(encode_parser)
    encode_parser.set_defaults(func=_encode)

    decode_parser = subparsers.add_parser('decode', help='Lattice point at a Hilbert index')
    decode_parser.add_argument('index', type=int, help='Hilbert index')
    _add_curve_arguments(decode_parser)
    decode_parser.set_defaults(func=_decode)

    demo_parser = subparsers.add_parser('demo', help='Sort sample entities by Hilbert value')
    demo_parser.set_defaults(func=_demo)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        args.func(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
