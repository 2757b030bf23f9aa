"""
Benchmark Resolver

Translates textual specifications of the form 'name<dimension>' (e.g.
'rastrigin<20>', 'ackley_n4<5>') into BenchmarkFunction values.

resolve() never raises for bad input. It returns one of:
- BenchmarkFunction: resolution succeeded
- MalformedSpec: the text does not have the 'name<dimension>' shape
- UnknownFunction: the name matches no catalog family

so callers resolving many specs can aggregate failures. Raising forms
(resolve_or_raise, BenchmarkFunction.from_spec) are provided on top.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from .benchmark import BenchmarkFunction
from .catalog import CATALOG

logger = logging.getLogger(__name__)

SEPARATORS = re.compile(r"[<>]")
DIMENSION_LITERAL = re.compile(r"[0-9]+")

EXPECTED_FORMAT = "Expected 'fn_name<dimension>'"


class ResolveErrorKind(Enum):
    """The two ways a specification can fail to resolve."""
    MALFORMED_SPEC = "malformed-spec"
    UNKNOWN_FUNCTION = "unknown-function"


class BenchmarkSpecError(ValueError):
    """Raised by the raising forms of the resolver."""

    def __init__(self, error: 'ResolveError'):
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ResolveErrorKind:
        return self.error.kind


@dataclass(frozen=True)
class ResolveError:
    """Base record of a failed resolution."""
    spec: str
    message: str

    kind = None

    def to_exception(self) -> BenchmarkSpecError:
        return BenchmarkSpecError(self)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class MalformedSpec(ResolveError):
    """The input is not 'name<dimension>' or the dimension is invalid."""
    kind = ResolveErrorKind.MALFORMED_SPEC


@dataclass(frozen=True)
class UnknownFunction(ResolveError):
    """The lower-cased name matches no catalog entry."""
    name: str = ""
    kind = ResolveErrorKind.UNKNOWN_FUNCTION


ResolveResult = Union[BenchmarkFunction, MalformedSpec, UnknownFunction]


@dataclass(frozen=True)
class ResolverConfig:
    """
    Configuration for resolution.

    Attributes:
        strict_arity: Reject dimensions that differ from a fixed-arity
            family's arity instead of ignoring the extra coordinates
        max_dimension: Upper limit on the accepted dimension (None = no limit)
    """
    strict_arity: bool = False
    max_dimension: Optional[int] = None


DEFAULT_CONFIG = ResolverConfig()


def _malformed(spec: str, detail: str) -> MalformedSpec:
    return MalformedSpec(spec=spec, message=f"Invalid bmf format '{spec}': {detail}. {EXPECTED_FORMAT}.")


def parse_spec(spec: str) -> Union[Tuple[str, int], MalformedSpec]:
    """
    Split a specification into its name and dimension.

    Segments after the dimension are ignored. Dimension 0 is rejected.

    Args:
        spec: Text of the form 'name<dimension>'

    Returns:
        (name, dimension) tuple, or MalformedSpec
    """
    parts = SEPARATORS.split(spec)
    name = parts[0]
    if not name:
        return _malformed(spec, "missing function name")
    if len(parts) < 2:
        return _malformed(spec, "missing dimension")

    literal = parts[1]
    if not DIMENSION_LITERAL.fullmatch(literal):
        return _malformed(spec, f"dimension '{literal}' is not a non-negative integer")

    dimension = int(literal)
    if dimension < 1:
        return _malformed(spec, "dimension must be at least 1")
    return name, dimension


def resolve(spec: str, config: Optional[ResolverConfig] = None) -> ResolveResult:
    """
    Resolve a specification to a benchmark function.

    Args:
        spec: Text of the form 'name<dimension>', name matched case-insensitively
        config: Resolver configuration (default: DEFAULT_CONFIG)

    Returns:
        BenchmarkFunction on success, MalformedSpec or UnknownFunction otherwise
    """
    config = config or DEFAULT_CONFIG

    parsed = parse_spec(spec)
    if isinstance(parsed, MalformedSpec):
        logger.info("Rejected benchmark spec: %s", parsed.message)
        return parsed
    name, dimension = parsed

    family = CATALOG.get(name.lower())
    if family is None:
        error = UnknownFunction(spec=spec, message=f"Unknown benchmark function {name}", name=name)
        logger.info("Rejected benchmark spec: %s", error.message)
        return error

    if config.max_dimension is not None and dimension > config.max_dimension:
        return _malformed(spec, f"dimension {dimension} exceeds limit {config.max_dimension}")
    if config.strict_arity and family.arity is not None and dimension != family.arity:
        return _malformed(spec, f"{family.name} is defined for exactly {family.arity} variable(s)")

    logger.debug("Resolved %s to %s with dimension %d", spec, family.name, dimension)
    return family.make(dimension)


def resolve_or_raise(spec: str, config: Optional[ResolverConfig] = None) -> BenchmarkFunction:
    """Resolve a specification, raising BenchmarkSpecError on failure."""
    result = resolve(spec, config)
    if isinstance(result, ResolveError):
        raise result.to_exception()
    return result


def resolve_many(
    specs: Iterable[str],
    config: Optional[ResolverConfig] = None
) -> Tuple[List[BenchmarkFunction], List[ResolveError]]:
    """
    Resolve a batch of specifications.

    Returns:
        (functions, errors): successes and failures, each in input order
    """
    functions = []
    errors = []
    for spec in specs:
        result = resolve(spec, config)
        if isinstance(result, ResolveError):
            errors.append(result)
        else:
            functions.append(result)
    return functions, errors
