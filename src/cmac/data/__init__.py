from .persistence import read_pairs, write_pairs
from .samples import generate_samples, shuffle_split, x_sin_x

__all__ = [
    "generate_samples",
    "read_pairs",
    "shuffle_split",
    "write_pairs",
    "x_sin_x",
]
