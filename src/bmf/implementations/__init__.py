"""
Benchmark Function Implementations

Pure numeric evaluators, split by arity:
- n_dimensional: families defined for any number of variables
- fixed_arity: families with a fixed number of variables (1, 2 or 3)
"""

from . import n_dimensional
from . import fixed_arity

__all__ = [
    'n_dimensional',
    'fixed_arity',
]
