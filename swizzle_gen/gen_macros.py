import logging
import os
from typing import Dict, List, Tuple

from .axes import DEFAULT_CONFIG, SwizzleConfig
from .gen_swizzle import Swizzle, gen_swizzling_tables

logger = logging.getLogger(__name__)

FILE = 'src/dim_macros.rs'
INDENT_SIZE = 4
WARNING = 'THIS IS AN AUTO-GENERATED FILE. DO NOT EDIT IT DIRECTLY!'

Tables = Dict[Tuple[int, bool], List[Swizzle]]


def indent(level: int) -> str:
    return ' ' * (level * INDENT_SIZE)


def format_swizzle(sw: Swizzle) -> str:
    return '{} {} {} {}'.format(sw.name, sw.dim, list(sw.source_indices), list(sw.output_positions))


def swizzle_line(sw: Swizzle) -> str:
    return indent(2) + format_swizzle(sw) + '\n'


def gen_swizzling_macro_branch(base_dim: int, listing: List[Swizzle]) -> str:
    s = '{}({}, $f: ident $(,$($args:tt)*)?) => {{ $f! {{ $([$($args)*])? {}\n'.format(
        indent(1), base_dim, base_dim)
    for sw in listing:
        s += swizzle_line(sw)
    s += '{}}}}};\n'.format(indent(1))
    return s


def gen_swizzling_macro(tables: Tables, unique: bool) -> str:
    """
    The generated macro takes the swizzling dimension and the name of another
    macro, which is called with that dimension followed by one
    `name dim [source indices] [output positions]` line per swizzle.
    """
    sfx = '_unique' if unique else ''
    s = '/// Swizzling data for the given dimension.\n'
    s += '/// See the [`build.rs`] file to learn more.\n'
    s += '#[macro_export]\n'
    s += 'macro_rules! with_swizzling_for_dim{} {{\n'.format(sfx)
    branches = sorted(base_dim for base_dim, u in tables if u == unique)
    for base_dim in branches:
        s += gen_swizzling_macro_branch(base_dim, tables[(base_dim, unique)])
    s += '}'
    logger.debug('rendered with_swizzling_for_dim%s with %d branches', sfx, len(branches))
    return s


def gen_dim_macros(config: SwizzleConfig = DEFAULT_CONFIG) -> str:
    tables = gen_swizzling_tables(config)
    border = '!' * len(WARNING)
    s = '//! Macros allowing generation of swizzling getters and setters.\n'
    s += '//! See the docs of [`build.rs`] and usage places to learn more.\n'
    s += '\n// {}\n'.format(border)
    s += '// {}\n'.format(WARNING)
    s += '// {}\n\n\n'.format(border)
    s += gen_swizzling_macro(tables, False)
    s += '\n\n'
    s += gen_swizzling_macro(tables, True)
    s += '\n'
    return s


def gen_swizzling_listing(tables: Tables) -> str:
    s = ''
    for (base_dim, unique), listing in tables.items():
        s += '# base_dim={} unique={} ({} swizzles)\n'.format(
            base_dim, 'true' if unique else 'false', len(listing))
        for sw in listing:
            s += format_swizzle(sw) + '\n'
    return s


def write_text(path: str, s: str) -> str:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'w') as f:
        f.write(s)
    logger.info('wrote %s (%d bytes)', path, len(s))
    return path


def write_dim_macros(path: str = FILE, config: SwizzleConfig = DEFAULT_CONFIG) -> str:
    return write_text(path, gen_dim_macros(config))
