"""
bmf - Continuous Benchmark Functions

A fixed catalog of classical scalar test functions (sphere, rastrigin,
ackley, rosenbrock, ...) used to evaluate optimization algorithms.

Key Features:
- 61 families with native domain and known optimum metadata
- Resolution of 'name<dimension>' specifications with tagged errors
- Uniform normalized [-1, 1] view for black-box solvers
- Sobol sampling probe for quick landscape checks
"""

__version__ = "0.1.0"

from .utils import (
    input_domain,
    normalized_domain,
    to_native,
    to_normalized,
)
from .benchmark import (
    BenchmarkFunction,
    ObjectiveFunction,
    Evaluator,
)
from .catalog import (
    CATALOG,
    FunctionFamily,
    register_family,
    get_family,
    get_all_families,
    family_names,
    make,
)
from .resolver import (
    ResolveErrorKind,
    ResolveError,
    MalformedSpec,
    UnknownFunction,
    ResolveResult,
    BenchmarkSpecError,
    ResolverConfig,
    DEFAULT_CONFIG,
    parse_spec,
    resolve,
    resolve_or_raise,
    resolve_many,
)
from .sampling import (
    SobolSampler,
    SamplePoint,
    SampleReport,
)

__all__ = [
    # Scaling
    "input_domain",
    "normalized_domain",
    "to_native",
    "to_normalized",
    # Benchmark function
    "BenchmarkFunction",
    "ObjectiveFunction",
    "Evaluator",
    # Catalog
    "CATALOG",
    "FunctionFamily",
    "register_family",
    "get_family",
    "get_all_families",
    "family_names",
    "make",
    # Resolver
    "ResolveErrorKind",
    "ResolveError",
    "MalformedSpec",
    "UnknownFunction",
    "ResolveResult",
    "BenchmarkSpecError",
    "ResolverConfig",
    "DEFAULT_CONFIG",
    "parse_spec",
    "resolve",
    "resolve_or_raise",
    "resolve_many",
    # Sampling
    "SobolSampler",
    "SamplePoint",
    "SampleReport",
]
