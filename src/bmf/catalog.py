"""
Function Catalog

Fixed table of benchmark function families. Each family is registered once
with its evaluator, native domain and known optimum, and builds
BenchmarkFunction values through FunctionFamily.make(dimension).

Families with a fixed arity (e.g. Beale, Easom, Wolfe) accept any
dimension at construction; their evaluators read only the leading `arity`
coordinates and ignore the rest. Resolution never fails on arity (see
ResolverConfig.strict_arity for that), but a function built with fewer
variables than its arity, such as beale<1>, raises ValueError when
evaluated.

Known optima are documented at the family's reference dimension (its
arity, or 2 for dimension-generic families). For families whose optimum
scales with n (Alpine N.2, Styblinski-Tang, Shubert, ...) the stored value
is therefore not attained in other dimensions.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple
import numpy as np

from .benchmark import BenchmarkFunction, Evaluator
from .implementations import fixed_arity as fa
from .implementations import n_dimensional as nd

logger = logging.getLogger(__name__)

Minimizer = Callable[[int], np.ndarray]


@dataclass(frozen=True)
class FunctionFamily:
    """A catalog entry: one benchmark family, independent of dimension."""
    name: str
    evaluator: Evaluator
    domain: Tuple[float, float]
    known_optimum: float
    arity: Optional[int] = None
    minimizer: Optional[Minimizer] = None
    description: str = ""

    @property
    def reference_dimension(self) -> int:
        """Dimension at which `known_optimum` is documented."""
        return self.arity if self.arity is not None else 2

    @property
    def is_fixed_arity(self) -> bool:
        return self.arity is not None

    def make(self, dimension: int) -> BenchmarkFunction:
        """
        Construct the family's benchmark function for a dimension.

        Args:
            dimension: Number of input variables (>= 1)

        Returns:
            BenchmarkFunction with this family's name, domain and optimum
        """
        return BenchmarkFunction(
            name=self.name,
            dimension=dimension,
            domain=self.domain,
            known_optimum=self.known_optimum,
            implementation=self.evaluator,
            arity=self.arity,
        )

    def optimum_location(self, dimension: Optional[int] = None) -> Optional[np.ndarray]:
        """
        Documented optimum input for a dimension.

        Returns None when no location is documented, or when the documented
        point only exists at another dimension (e.g. Ackley N.4 at n = 2).
        """
        if self.minimizer is None:
            return None
        if dimension is None:
            dimension = self.reference_dimension
        point = np.asarray(self.minimizer(dimension), dtype=np.float64)
        if point.size != dimension:
            return None
        return point


# =============================================================================
# Registry
# =============================================================================

CATALOG: Dict[str, FunctionFamily] = {}


def register_family(family: FunctionFamily) -> FunctionFamily:
    """Register a family in the catalog."""
    key = family.name.lower()
    if key != family.name:
        raise ValueError(f"Family names must be lowercase: {family.name}")
    if key in CATALOG:
        raise ValueError(f"Duplicate benchmark family: {family.name}")
    CATALOG[key] = family
    return family


def get_family(name: str) -> FunctionFamily:
    """Get a family by name (case-insensitive)."""
    key = name.lower()
    if key not in CATALOG:
        raise ValueError(f"Unknown benchmark function: {name}")
    return CATALOG[key]


def get_all_families() -> List[FunctionFamily]:
    """Get all registered families in registration order."""
    return list(CATALOG.values())


def family_names() -> List[str]:
    return list(CATALOG)


def make(name: str, dimension: int) -> BenchmarkFunction:
    """Build the benchmark function `name` with the given dimension."""
    family = get_family(name)
    logger.debug("Building %s with dimension %d", family.name, dimension)
    return family.make(dimension)


# =============================================================================
# Minimizer helpers
# =============================================================================

def _zeros(n: int) -> np.ndarray:
    return np.zeros(n)


def _constant(value: float) -> Minimizer:
    return lambda n: np.full(n, value)


def _point(*coords: float) -> Minimizer:
    return lambda n: np.array(coords)


def _ridge_minimizer(n: int) -> np.ndarray:
    x = np.zeros(n)
    x[0] = -5.0
    return x


def _qing_minimizer(n: int) -> np.ndarray:
    return np.sqrt(np.arange(1, n + 1, dtype=np.float64))


def _shubert_minimizer(n: int) -> np.ndarray:
    return np.array([-7.0835, 4.8580])


# =============================================================================
# Dimension-generic families
# =============================================================================

_register = register_family

_register(FunctionFamily("sphere", nd.sphere, (-5.12, 5.12), 0.0,
                         minimizer=_zeros, description="Sphere"))
_register(FunctionFamily("rastrigin", nd.rastrigin, (-5.12, 5.12), 0.0,
                         minimizer=_zeros, description="Rastrigin"))
_register(FunctionFamily("ackley", nd.ackley, (-32.768, 32.768), 0.0,
                         minimizer=_zeros, description="Ackley"))
_register(FunctionFamily("ackley_n4", nd.ackley_n4, (-35.0, 35.0), -4.590101633799122,
                         minimizer=_point(-1.51, -0.755), description="Ackley N.4"))
_register(FunctionFamily("alpine_n1", nd.alpine_n1, (-10.0, 10.0), 0.0,
                         minimizer=_zeros, description="Alpine N.1"))
_register(FunctionFamily("alpine_n2", nd.alpine_n2, (0.0, 10.0), -(2.8081311800070053 ** 2),
                         minimizer=_constant(7.917052684666), description="Alpine N.2"))
_register(FunctionFamily("brown", nd.brown, (-1.0, 4.0), 0.0,
                         minimizer=_zeros, description="Brown"))
_register(FunctionFamily("exponential", nd.exponential, (-1.0, 1.0), -1.0,
                         minimizer=_zeros, description="Exponential"))
_register(FunctionFamily("griewank", nd.griewank, (-600.0, 600.0), 0.0,
                         minimizer=_zeros, description="Griewank"))
_register(FunctionFamily("happy_cat", nd.happy_cat, (-2.0, 2.0), 0.0,
                         minimizer=_constant(-1.0), description="Happy Cat"))
_register(FunctionFamily("periodic", nd.periodic, (-10.0, 10.0), 0.9,
                         minimizer=_zeros, description="Periodic"))
_register(FunctionFamily("powell_sum", nd.powell_sum, (-1.0, 1.0), 0.0,
                         minimizer=_zeros, description="Powell Sum"))
_register(FunctionFamily("qing", nd.qing, (-500.0, 500.0), 0.0,
                         minimizer=_qing_minimizer, description="Qing"))
_register(FunctionFamily("ridge", nd.ridge, (-5.0, 5.0), -5.0,
                         minimizer=_ridge_minimizer, description="Ridge"))
_register(FunctionFamily("rosenbrock", nd.rosenbrock, (-5.0, 10.0), 0.0,
                         minimizer=_constant(1.0), description="Rosenbrock"))
_register(FunctionFamily("salomon", nd.salomon, (-100.0, 100.0), 0.0,
                         minimizer=_zeros, description="Salomon"))
_register(FunctionFamily("schwefel_220", nd.schwefel_220, (-100.0, 100.0), 0.0,
                         minimizer=_zeros, description="Schwefel 2.20"))
_register(FunctionFamily("schwefel_221", nd.schwefel_221, (-100.0, 100.0), 0.0,
                         minimizer=_zeros, description="Schwefel 2.21"))
_register(FunctionFamily("schwefel_222", nd.schwefel_222, (-100.0, 100.0), 0.0,
                         minimizer=_zeros, description="Schwefel 2.22"))
_register(FunctionFamily("schwefel_223", nd.schwefel_223, (-10.0, 10.0), 0.0,
                         minimizer=_zeros, description="Schwefel 2.23"))
_register(FunctionFamily("schwefel", nd.schwefel, (-500.0, 500.0), 0.0,
                         minimizer=_constant(420.968746), description="Schwefel"))
_register(FunctionFamily("shubert_n3", nd.shubert_n3, (-10.0, 10.0), -29.675899,
                         minimizer=_constant(-1.1141), description="Shubert N.3"))
_register(FunctionFamily("shubert_n4", nd.shubert_n4, (-10.0, 10.0), -25.741771,
                         minimizer=_constant(4.85805691), description="Shubert N.4"))
_register(FunctionFamily("shubert", nd.shubert, (-10.0, 10.0), -186.7309,
                         minimizer=_shubert_minimizer, description="Shubert"))
_register(FunctionFamily("styblinski_tang", nd.styblinski_tang, (-5.0, 5.0), -78.33233140754282,
                         minimizer=_constant(-2.903534027771178), description="Styblinski-Tang"))
_register(FunctionFamily("sum_squares", nd.sum_squares, (-10.0, 10.0), 0.0,
                         minimizer=_zeros, description="Sum Squares"))
_register(FunctionFamily("yang_n2", nd.yang_n2, (-2.0 * math.pi, 2.0 * math.pi), 0.0,
                         minimizer=_zeros, description="Xin-She Yang N.2"))
_register(FunctionFamily("yang_n3", nd.yang_n3, (-20.0, 20.0), -1.0,
                         minimizer=_zeros, description="Xin-She Yang N.3"))
_register(FunctionFamily("yang_n4", nd.yang_n4, (-10.0, 10.0), -1.0,
                         minimizer=_zeros, description="Xin-She Yang N.4"))
_register(FunctionFamily("zakharov", nd.zakharov, (-5.0, 10.0), 0.0,
                         minimizer=_zeros, description="Zakharov"))

# =============================================================================
# Fixed-arity families
# =============================================================================

_register(FunctionFamily("ackley_n2", fa.ackley_n2, (-32.0, 32.0), -200.0, arity=2,
                         minimizer=_point(0.0, 0.0), description="Ackley N.2"))
_register(FunctionFamily("ackley_n3", fa.ackley_n3, (-32.0, 32.0), -195.629028238419, arity=2,
                         minimizer=_point(0.682584587365898, -0.36075325513719), description="Ackley N.3"))
# Box is x in [-1, 2], y in [-1, 1]
_register(FunctionFamily("adjiman", fa.adjiman, (-1.0, 2.0), -2.02181, arity=2,
                         minimizer=_point(2.0, 0.10578), description="Adjiman"))
_register(FunctionFamily("bartels_conn", fa.bartels_conn, (-500.0, 500.0), 1.0, arity=2,
                         minimizer=_point(0.0, 0.0), description="Bartels Conn"))
_register(FunctionFamily("beale", fa.beale, (-4.5, 4.5), 0.0, arity=2,
                         minimizer=_point(3.0, 0.5), description="Beale"))
_register(FunctionFamily("bird", fa.bird, (-2.0 * math.pi, 2.0 * math.pi), -106.764537, arity=2,
                         minimizer=_point(4.70104, 3.15294), description="Bird"))
_register(FunctionFamily("bohachevsky_n1", fa.bohachevsky_n1, (-100.0, 100.0), 0.0, arity=2,
                         minimizer=_point(0.0, 0.0), description="Bohachevsky N.1"))
_register(FunctionFamily("bohachevsky_n2", fa.bohachevsky_n2, (-100.0, 100.0), 0.0, arity=2,
                         minimizer=_point(0.0, 0.0), description="Bohachevsky N.2"))
_register(FunctionFamily("booth", fa.booth, (-10.0, 10.0), 0.0, arity=2,
                         minimizer=_point(1.0, 3.0), description="Booth"))
_register(FunctionFamily("brent", fa.brent, (-20.0, 0.0), 0.0, arity=2,
                         minimizer=_point(-10.0, -10.0), description="Brent"))
# Box is x in [-15, -5], y in [-3, 3]
_register(FunctionFamily("bukin_n6", fa.bukin_n6, (-15.0, 3.0), 0.0, arity=2,
                         minimizer=_point(-10.0, 1.0), description="Bukin N.6"))
_register(FunctionFamily("cross_in_tray", fa.cross_in_tray, (-10.0, 10.0), -2.06261218, arity=2,
                         minimizer=_point(1.349406685353340, 1.349406608602084), description="Cross-in-Tray"))
_register(FunctionFamily("deckkers_aarts", fa.deckkers_aarts, (-20.0, 20.0), -24771.09375, arity=2,
                         minimizer=_point(0.0, 15.0), description="Deckkers-Aarts"))
_register(FunctionFamily("drop_wave", fa.drop_wave, (-5.2, 5.2), -1.0, arity=2,
                         minimizer=_point(0.0, 0.0), description="Drop-Wave"))
_register(FunctionFamily("easom", fa.easom, (-100.0, 100.0), -1.0, arity=2,
                         minimizer=_point(math.pi, math.pi), description="Easom"))
_register(FunctionFamily("egg_crate", fa.egg_crate, (-5.0, 5.0), 0.0, arity=2,
                         minimizer=_point(0.0, 0.0), description="Egg Crate"))
_register(FunctionFamily("goldstein_price", fa.goldstein_price, (-2.0, 2.0), 3.0, arity=2,
                         minimizer=_point(0.0, -1.0), description="Goldstein-Price"))
_register(FunctionFamily("gramacy_lee", fa.gramacy_lee, (0.5, 2.5), -0.869011134989500, arity=1,
                         minimizer=_point(0.548563444114526), description="Gramacy & Lee"))
_register(FunctionFamily("himmelblau", fa.himmelblau, (-5.0, 5.0), 0.0, arity=2,
                         minimizer=_point(3.0, 2.0), description="Himmelblau"))
_register(FunctionFamily("holder_table", fa.holder_table, (-10.0, 10.0), -19.2085025678868, arity=2,
                         minimizer=_point(8.05502347573655, 9.66459041970555), description="Holder Table"))
_register(FunctionFamily("keane", fa.keane, (0.0, 10.0), -0.673667521146855, arity=2,
                         minimizer=_point(1.393249070031784, 0.0), description="Keane"))
_register(FunctionFamily("leon", fa.leon, (0.0, 10.0), 0.0, arity=2,
                         minimizer=_point(1.0, 1.0), description="Leon"))
_register(FunctionFamily("levi_n13", fa.levi_n13, (-10.0, 10.0), 0.0, arity=2,
                         minimizer=_point(1.0, 1.0), description="Lévi N.13"))
_register(FunctionFamily("matyas", fa.matyas, (-10.0, 10.0), 0.0, arity=2,
                         minimizer=_point(0.0, 0.0), description="Matyas"))
# Box is x in [-1.5, 4], y in [-3, 3]
_register(FunctionFamily("mccormick", fa.mccormick, (-3.0, 4.0), -1.913222954981037, arity=2,
                         minimizer=_point(-0.54719755119, -1.54719755119), description="McCormick"))
_register(FunctionFamily("schaffer_n1", fa.schaffer_n1, (-100.0, 100.0), 0.0, arity=2,
                         minimizer=_point(0.0, 0.0), description="Schaffer N.1"))
_register(FunctionFamily("schaffer_n2", fa.schaffer_n2, (-100.0, 100.0), 0.0, arity=2,
                         minimizer=_point(0.0, 0.0), description="Schaffer N.2"))
_register(FunctionFamily("schaffer_n3", fa.schaffer_n3, (-100.0, 100.0), 0.00156685, arity=2,
                         minimizer=_point(0.0, 1.253115), description="Schaffer N.3"))
_register(FunctionFamily("schaffer_n4", fa.schaffer_n4, (-100.0, 100.0), 0.292579, arity=2,
                         minimizer=_point(0.0, 1.253115), description="Schaffer N.4"))
_register(FunctionFamily("three_hump_camel", fa.three_hump_camel, (-5.0, 5.0), 0.0, arity=2,
                         minimizer=_point(0.0, 0.0), description="Three-Hump Camel"))
_register(FunctionFamily("wolfe", fa.wolfe, (0.0, 2.0), 0.0, arity=3,
                         minimizer=_point(0.0, 0.0, 0.0), description="Wolfe"))
