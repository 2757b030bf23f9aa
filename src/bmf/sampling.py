"""
Sobol Sampling Probe

Deterministic low-discrepancy sampling of a benchmark function over its
normalized box [-1, 1]^n. Points are mapped to the native domain and
evaluated, giving a quick picture of the landscape (best value found,
mean value, gap to the known optimum). This is a probe, not a solver:
there is no iteration or adaptation.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List
import numpy as np
from scipy.stats import qmc

from .benchmark import BenchmarkFunction
from .utils import input_domain

logger = logging.getLogger(__name__)


@dataclass
class SamplePoint:
    """A sampled point in normalized and native coordinates."""
    normalized: np.ndarray
    native: np.ndarray
    value: float
    index: int


@dataclass
class SampleReport:
    """Summary of a sampling run."""
    function: str
    dimension: int
    n_points: int
    best_value: float
    best_point: np.ndarray
    mean_value: float
    known_optimum: float

    @property
    def gap(self) -> float:
        return self.best_value - self.known_optimum

    def to_dict(self) -> Dict[str, Any]:
        return {
            "function": self.function,
            "dimension": self.dimension,
            "n_points": self.n_points,
            "best_value": self.best_value,
            "best_point": self.best_point.tolist(),
            "mean_value": self.mean_value,
            "known_optimum": self.known_optimum,
            "gap": self.gap,
        }


class SobolSampler:
    """
    Scrambled Sobol sampler for a benchmark function.

    All sequences are reproducible given the same seed.
    """

    def __init__(self, function: BenchmarkFunction, seed: int = 42):
        """
        Args:
            function: Benchmark function to sample
            seed: Seed for scrambling
        """
        self.function = function
        self.seed = seed
        self._engine = qmc.Sobol(d=function.dimension, scramble=True, seed=seed)
        self._index = 0

    def generate(self, n_points: int) -> List[SamplePoint]:
        """
        Draw and evaluate the next n_points of the sequence.

        Args:
            n_points: Number of points to generate

        Returns:
            List of SamplePoint objects
        """
        if n_points < 1:
            raise ValueError(f"n_points must be >= 1, got {n_points}")

        lower, upper = self.function.domain
        unit = self._engine.random(n_points)
        normalized = 2.0 * unit - 1.0
        native = input_domain(normalized, lower, upper)
        values = self.function.evaluate_batch(native)

        points = [
            SamplePoint(normalized=normalized[i], native=native[i], value=float(values[i]), index=self._index + i)
            for i in range(n_points)
        ]
        self._index += n_points
        return points

    def sample(self, n_points: int) -> SampleReport:
        """Draw n_points and summarize them."""
        points = self.generate(n_points)
        values = np.array([p.value for p in points])
        best = points[int(np.argmin(values))]

        report = SampleReport(
            function=self.function.name,
            dimension=self.function.dimension,
            n_points=n_points,
            best_value=best.value,
            best_point=best.native,
            mean_value=float(np.mean(values)),
            known_optimum=self.function.known_optimum,
        )
        logger.debug("Sampled %s<%d>: best=%.6e gap=%.6e",
                     report.function, report.dimension, report.best_value, report.gap)
        return report

    def reset(self):
        """Reset the sampler to the beginning of the sequence."""
        self._engine = qmc.Sobol(d=self.function.dimension, scramble=True, seed=self.seed)
        self._index = 0
