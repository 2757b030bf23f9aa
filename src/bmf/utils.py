"""
Domain Scaling Utilities

Maps coordinates between the normalized box [-1, 1] and a native
input domain [lower, upper]. Both helpers accept scalars or numpy arrays
and are exact inverses of each other up to floating-point rounding.
"""

from typing import Union
import numpy as np

ArrayLike = Union[float, np.ndarray]


def input_domain(value: ArrayLike, lower: float, upper: float) -> ArrayLike:
    """Scale a value from [-1, 1] to the input domain [lower, upper]."""
    return (value + 1.0) / 2.0 * (upper - lower) + lower


def normalized_domain(value: ArrayLike, lower: float, upper: float) -> ArrayLike:
    """Scale a value from the input domain [lower, upper] to [-1, 1]."""
    return 2.0 * (value - lower) / (upper - lower) - 1.0


to_native = input_domain
to_normalized = normalized_domain
