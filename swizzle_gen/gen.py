"""
Generates the `with_swizzling_for_dim` and `with_swizzling_for_dim_unique`
macros used to build swizzling getters and setters.

Usage:
    swizzle-gen                       # writes src/dim_macros.rs
    swizzle-gen -o - --format listing # prints every table
    swizzle-gen --axes rgba -o src/rgba_macros.rs
"""
import argparse
import logging
import sys

from .axes import AXES, MAX_DIM, SwizzleConfig
from .gen_macros import FILE, gen_dim_macros, gen_swizzling_listing, write_text
from .gen_swizzle import gen_swizzling_tables


def main(argv=None):
    parser = argparse.ArgumentParser(prog='swizzle-gen', description='Generate swizzling tables.')
    parser.add_argument('-o', '--output', default=FILE,
                        help='output file, or - for stdout (default: %(default)s)')
    parser.add_argument('--axes', default=''.join(AXES),
                        help='ordered axis symbols (default: %(default)s)')
    parser.add_argument('--max-dim', type=int, default=MAX_DIM,
                        help='largest base dimension (default: %(default)s)')
    parser.add_argument('--format', choices=['macros', 'listing'], default='macros')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s: %(message)s')

    try:
        config = SwizzleConfig(tuple(args.axes), args.max_dim)
    except ValueError as e:
        parser.error(str(e))

    if args.format == 'listing':
        s = gen_swizzling_listing(gen_swizzling_tables(config))
    else:
        s = gen_dim_macros(config)

    if args.output == '-':
        sys.stdout.write(s)
    else:
        write_text(args.output, s)
    return 0


if __name__ == '__main__':
    sys.exit(main())
