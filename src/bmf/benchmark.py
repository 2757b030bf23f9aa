"""
Benchmark Function Value Object

A BenchmarkFunction bundles a pure evaluator with its metadata:
- name: canonical lowercase identifier
- dimension: number of input variables (fixed at construction)
- domain: native input interval [lower, upper], identical per coordinate
- known_optimum: documented best objective value of the family

Two coordinate systems are exposed:
- evaluate(x) works in the native domain
- objective(solution) works in the normalized box [-1, 1]^n, which is
  what generic solvers see through the ObjectiveFunction protocol
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Tuple, runtime_checkable
import numpy as np

from .utils import input_domain

Evaluator = Callable[[np.ndarray], float]


@runtime_checkable
class ObjectiveFunction(Protocol):
    """
    Capability set a solver needs from a black-box objective over a
    fixed-size real vector.
    """

    name: str
    dimension: int

    def bounds(self) -> List[Tuple[float, float]]:
        ...

    def objective(self, solution: np.ndarray) -> float:
        ...

    def optimum_value(self) -> float:
        ...


@dataclass(frozen=True)
class BenchmarkFunction:
    """
    An immutable, dimension-parameterized benchmark function.

    Attributes:
        name: Canonical lowercase family name
        dimension: Number of input variables (>= 1)
        domain: Native (unscaled) input interval as (lower, upper)
        known_optimum: Documented global optimum value of the family
        implementation: Pure evaluator over native coordinates
        arity: Number of leading coordinates a fixed-arity evaluator reads
            (None for dimension-generic families)

    The evaluator is defined for vectors of exactly `dimension` entries.
    Passing a vector of another length is a precondition violation and is
    not checked here. A fixed-arity function built with fewer variables
    than its arity raises ValueError on evaluation.
    """
    name: str
    dimension: int
    domain: Tuple[float, float]
    known_optimum: float
    implementation: Evaluator = field(repr=False, compare=False)
    arity: Optional[int] = None

    def __post_init__(self):
        if self.dimension < 1:
            raise ValueError(f"Dimension must be >= 1, got {self.dimension}")
        lower, upper = self.domain
        if not lower < upper:
            raise ValueError(f"Invalid domain: [{lower}, {upper}]")
        object.__setattr__(self, 'domain', (float(lower), float(upper)))

    def _check_arity(self):
        if self.arity is not None and self.dimension < self.arity:
            raise ValueError(
                f"{self.name} is defined for {self.arity} variables, "
                f"dimension {self.dimension} is too small"
            )

    @classmethod
    def from_spec(cls, spec: str) -> 'BenchmarkFunction':
        """Resolve a 'name<dimension>' specification, raising on failure."""
        from .resolver import resolve_or_raise
        return resolve_or_raise(spec)

    def evaluate(self, x) -> float:
        """Evaluate the benchmark function at a point in the native domain."""
        self._check_arity()
        return float(self.implementation(np.asarray(x, dtype=np.float64)))

    def __call__(self, x) -> float:
        return self.evaluate(x)

    def evaluate_batch(self, X) -> np.ndarray:
        """
        Evaluate each row of a 2-D array of native points.

        Args:
            X: Array of shape (n_points, dimension)

        Returns:
            Array of shape (n_points,)
        """
        self._check_arity()
        X = np.atleast_2d(np.asarray(X, dtype=np.float64))
        return np.array([self.implementation(row) for row in X], dtype=np.float64)

    def domain_unscaled(self) -> Tuple[float, float]:
        """Return the native domain as (lower, upper)."""
        return self.domain

    def known_optimum_raw(self) -> float:
        """Return the known optimum objective value."""
        return self.known_optimum

    def optimality_gap(self, value: float) -> float:
        """Distance of an objective value above the known optimum."""
        return float(value) - self.known_optimum

    # ObjectiveFunction capability

    def bounds(self) -> List[Tuple[float, float]]:
        """Normalized search box, one (-1, 1) pair per coordinate."""
        return [(-1.0, 1.0)] * self.dimension

    def objective(self, solution) -> float:
        """Evaluate a solution given in normalized [-1, 1] coordinates."""
        self._check_arity()
        lower, upper = self.domain
        x = input_domain(np.asarray(solution, dtype=np.float64), lower, upper)
        return float(self.implementation(x))

    def optimum_value(self) -> float:
        return self.known_optimum
