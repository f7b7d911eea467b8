from .axes import AXES, DEFAULT_CONFIG, MAX_DIM, SwizzleConfig
from .gen_macros import gen_dim_macros, gen_swizzling_listing, write_dim_macros
from .gen_swizzle import (
    Swizzle,
    gen_swizzling,
    gen_swizzling_for_dim,
    gen_swizzling_force_dim_component,
    gen_swizzling_tables,
    swizzle_name,
)

__version__ = '0.1.0'
