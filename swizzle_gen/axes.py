from dataclasses import dataclass
from typing import Tuple

AXES = ('x', 'y', 'z', 'w')
MAX_DIM = 4


@dataclass(frozen=True)
class SwizzleConfig:
    """
    Axis alphabet and the largest base dimension tables are generated for.

    The alphabet is capped at four symbols, matching the largest vector type
    the tables feed. Every symbol is a single character so swizzle names can
    be read back unambiguously.
    """
    axes: Tuple[str, ...] = AXES
    max_dim: int = MAX_DIM

    def __post_init__(self):
        if not 1 <= len(self.axes) <= len(AXES):
            raise ValueError('expected 1 to {} axes, got {}'.format(len(AXES), len(self.axes)))
        for axis in self.axes:
            if len(axis) != 1:
                raise ValueError('axis symbols must be single characters, got {!r}'.format(axis))
        if len(set(self.axes)) != len(self.axes):
            raise ValueError('axis symbols must be distinct, got {!r}'.format(''.join(self.axes)))
        if not 1 <= self.max_dim <= len(self.axes):
            raise ValueError('max_dim must be in 1..{}, got {}'.format(len(self.axes), self.max_dim))

    def check_base_dim(self, base_dim: int):
        if not 1 <= base_dim <= len(self.axes):
            raise ValueError('base_dim must be in 1..{}, got {}'.format(len(self.axes), base_dim))

    def axis(self, index: int) -> str:
        return self.axes[index]

    def base_dims(self):
        return range(1, self.max_dim + 1)


DEFAULT_CONFIG = SwizzleConfig()
