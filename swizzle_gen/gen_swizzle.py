from typing import Dict, List, NamedTuple, Sequence, Tuple

from .axes import AXES, DEFAULT_CONFIG, SwizzleConfig


class Swizzle(NamedTuple):
    name: str
    dim: int
    source_indices: Tuple[int, ...]
    output_positions: Tuple[int, ...]


def swizzle_name(perm: Sequence[int], axes: Sequence[str] = AXES) -> str:
    return ''.join(axes[i] for i in perm)


def gen_swizzling(base_dim: int, dim: int, unique: bool = False,
                  config: SwizzleConfig = DEFAULT_CONFIG) -> List[Swizzle]:
    """
    Generates swizzling data. `base_dim` is the dimension of the source
    vector: with 3, the "x", "y" and "z" axes are combined. `dim` is the
    dimension of the result: with 2, names like "xy" or "zx" are produced.
    With `unique` set, no axis repeats within a swizzle ("xx" is skipped).

    Selections grow one output position at a time. Every partial selection
    is extended with every axis in increasing order, so position 0 varies
    slowest. In unique mode an axis already used by the partial selection
    is never appended.

    For base_dim=3, dim=2, unique=True:

        xy 2 [0, 1] [0, 1]
        xz 2 [0, 2] [0, 1]
        yx 2 [1, 0] [0, 1]
        yz 2 [1, 2] [0, 1]
        zx 2 [2, 0] [0, 1]
        zy 2 [2, 1] [0, 1]
    """
    config.check_base_dim(base_dim)
    if dim < 1:
        raise ValueError('dim must be at least 1, got {}'.format(dim))
    perms = [()]
    for _ in range(dim):
        perms = [perm + (ix,)
                 for perm in perms
                 for ix in range(base_dim)
                 if not (unique and ix in perm)]
    positions = tuple(range(dim))
    return [Swizzle(swizzle_name(perm, config.axes), dim, perm, positions) for perm in perms]


def gen_swizzling_force_dim_component(input_dim: int, dim: int, unique: bool = False,
                                      config: SwizzleConfig = DEFAULT_CONFIG) -> List[Swizzle]:
    """
    Just like `gen_swizzling`, but only keeps swizzles that use the last axis
    of `input_dim` ("z" for 3). Swizzles without it already belong to a
    smaller base dimension.
    """
    axis = input_dim - 1
    return [sw for sw in gen_swizzling(input_dim, dim, unique, config)
            if axis in sw.source_indices]


def gen_swizzling_for_dim(base_dim: int, unique: bool = False,
                          config: SwizzleConfig = DEFAULT_CONFIG) -> List[Swizzle]:
    # lower dimensions first, the full table of base_dim last
    out = []
    for dim in range(1, base_dim):
        out += gen_swizzling_force_dim_component(base_dim, dim, unique, config)
    out += gen_swizzling(base_dim, base_dim, unique, config)
    return out


def gen_swizzling_tables(config: SwizzleConfig = DEFAULT_CONFIG) -> Dict[Tuple[int, bool], List[Swizzle]]:
    tables = {}
    for unique in (False, True):
        for base_dim in config.base_dims():
            tables[(base_dim, unique)] = gen_swizzling_for_dim(base_dim, unique, config)
    return tables
