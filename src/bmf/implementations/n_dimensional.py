"""
Dimension-Generic Benchmark Functions

Closed-form evaluators defined for any number of variables n >= 1
(families with a pairwise sum, such as Rosenbrock or Brown, need n >= 2
to be non-trivial and return 0 for n = 1).

Every evaluator takes a float64 vector in the family's native domain
and returns a Python float.
"""

import math
import numpy as np


def sphere(x: np.ndarray) -> float:
    """
    Sphere Function
    f(x) = Σxᵢ²

    Unimodal, separable. f* = 0 at x = 0.
    """
    return float(np.dot(x, x))


def rastrigin(x: np.ndarray) -> float:
    """
    Rastrigin Function
    f(x) = 10n + Σ[xᵢ² - 10cos(2πxᵢ)]

    Highly multimodal with ~10^n local minima. f* = 0 at x = 0.
    """
    n = x.size
    return float(10.0 * n + np.sum(x ** 2 - 10.0 * np.cos(2.0 * math.pi * x)))


def ackley(x: np.ndarray) -> float:
    """
    Ackley Function
    f(x) = -20exp(-0.2√(Σxᵢ²/n)) - exp(Σcos(2πxᵢ)/n) + 20 + e
    """
    n = x.size
    mean_sq = np.dot(x, x) / n
    mean_cos = np.mean(np.cos(2.0 * math.pi * x))
    return float(-20.0 * np.exp(-0.2 * np.sqrt(mean_sq)) - np.exp(mean_cos) + 20.0 + math.e)


def ackley_n4(x: np.ndarray) -> float:
    """
    Ackley N.4
    f(x) = Σᵢ₌₁ⁿ⁻¹ [e^-0.2 √(xᵢ² + xᵢ₊₁²) + 3(cos 2xᵢ + sin 2xᵢ₊₁)]
    """
    a, b = x[:-1], x[1:]
    return float(np.sum(math.exp(-0.2) * np.sqrt(a ** 2 + b ** 2) + 3.0 * (np.cos(2.0 * a) + np.sin(2.0 * b))))


def alpine_n1(x: np.ndarray) -> float:
    """Alpine N.1: f(x) = Σ|xᵢ sin(xᵢ) + 0.1xᵢ|"""
    return float(np.sum(np.abs(x * np.sin(x) + 0.1 * x)))


def alpine_n2(x: np.ndarray) -> float:
    """
    Alpine N.2 (minimization form)
    f(x) = -Π√xᵢ sin(xᵢ)

    f* = -2.808^n at xᵢ = 7.917.
    """
    return float(-np.prod(np.sqrt(x) * np.sin(x)))


def brown(x: np.ndarray) -> float:
    """Brown: f(x) = Σᵢ₌₁ⁿ⁻¹ (xᵢ²)^(xᵢ₊₁²+1) + (xᵢ₊₁²)^(xᵢ²+1)"""
    a, b = x[:-1] ** 2, x[1:] ** 2
    return float(np.sum(np.power(a, b + 1.0) + np.power(b, a + 1.0)))


def exponential(x: np.ndarray) -> float:
    """Exponential: f(x) = -exp(-0.5Σxᵢ²)"""
    return float(-np.exp(-0.5 * np.dot(x, x)))


def griewank(x: np.ndarray) -> float:
    """
    Griewank Function
    f(x) = Σxᵢ²/4000 - Πcos(xᵢ/√i) + 1
    """
    i = np.arange(1, x.size + 1)
    return float(np.dot(x, x) / 4000.0 - np.prod(np.cos(x / np.sqrt(i))) + 1.0)


def happy_cat(x: np.ndarray) -> float:
    """
    Happy Cat
    f(x) = |‖x‖² - n|^(1/4) + (0.5‖x‖² + Σxᵢ)/n + 0.5

    f* = 0 at x = (-1, ..., -1).
    """
    n = x.size
    norm_sq = np.dot(x, x)
    return float(abs(norm_sq - n) ** 0.25 + (0.5 * norm_sq + np.sum(x)) / n + 0.5)


def periodic(x: np.ndarray) -> float:
    """Periodic: f(x) = 1 + Σsin²(xᵢ) - 0.1exp(-Σxᵢ²)"""
    return float(1.0 + np.sum(np.sin(x) ** 2) - 0.1 * np.exp(-np.dot(x, x)))


def powell_sum(x: np.ndarray) -> float:
    """Powell Sum: f(x) = Σ|xᵢ|^(i+1)"""
    i = np.arange(1, x.size + 1)
    return float(np.sum(np.abs(x) ** (i + 1)))


def qing(x: np.ndarray) -> float:
    """
    Qing Function
    f(x) = Σ(xᵢ² - i)²

    f* = 0 at xᵢ = ±√i.
    """
    i = np.arange(1, x.size + 1)
    return float(np.sum((x ** 2 - i) ** 2))


def ridge(x: np.ndarray) -> float:
    """
    Ridge Function (d = 1, α = 0.5)
    f(x) = x₁ + d(Σᵢ₌₂ⁿ xᵢ²)^α
    """
    return float(x[0] + np.sqrt(np.dot(x[1:], x[1:])))


def rosenbrock(x: np.ndarray) -> float:
    """
    Rosenbrock Function
    f(x) = Σᵢ₌₁ⁿ⁻¹ [100(xᵢ₊₁ - xᵢ²)² + (1 - xᵢ)²]

    f* = 0 at x = (1, ..., 1).
    """
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))


def salomon(x: np.ndarray) -> float:
    """Salomon: f(x) = 1 - cos(2π‖x‖) + 0.1‖x‖"""
    norm = np.sqrt(np.dot(x, x))
    return float(1.0 - np.cos(2.0 * math.pi * norm) + 0.1 * norm)


def schwefel_220(x: np.ndarray) -> float:
    """Schwefel 2.20: f(x) = Σ|xᵢ|"""
    return float(np.sum(np.abs(x)))


def schwefel_221(x: np.ndarray) -> float:
    """Schwefel 2.21: f(x) = max|xᵢ|"""
    return float(np.max(np.abs(x)))


def schwefel_222(x: np.ndarray) -> float:
    """Schwefel 2.22: f(x) = Σ|xᵢ| + Π|xᵢ|"""
    abs_x = np.abs(x)
    return float(np.sum(abs_x) + np.prod(abs_x))


def schwefel_223(x: np.ndarray) -> float:
    """Schwefel 2.23: f(x) = Σxᵢ¹⁰"""
    return float(np.sum(x ** 10))


def schwefel(x: np.ndarray) -> float:
    """
    Schwefel Function
    f(x) = 418.9829n - Σxᵢ sin(√|xᵢ|)

    f* ≈ 0 at xᵢ = 420.9687.
    """
    return float(418.9829 * x.size - np.sum(x * np.sin(np.sqrt(np.abs(x)))))


_J = np.arange(1, 6)


def _shubert_terms(x: np.ndarray, trig) -> np.ndarray:
    # rows: coordinates, columns: j = 1..5
    return _J * trig((_J + 1) * x[:, None] + _J)


def shubert(x: np.ndarray) -> float:
    """Shubert: f(x) = ΠᵢΣⱼ₌₁⁵ j cos((j+1)xᵢ + j)"""
    return float(np.prod(np.sum(_shubert_terms(x, np.cos), axis=1)))


def shubert_n3(x: np.ndarray) -> float:
    """Shubert N.3: f(x) = ΣᵢΣⱼ₌₁⁵ j sin((j+1)xᵢ + j)"""
    return float(np.sum(_shubert_terms(x, np.sin)))


def shubert_n4(x: np.ndarray) -> float:
    """Shubert N.4: f(x) = ΣᵢΣⱼ₌₁⁵ j cos((j+1)xᵢ + j)"""
    return float(np.sum(_shubert_terms(x, np.cos)))


def styblinski_tang(x: np.ndarray) -> float:
    """
    Styblinski-Tang Function
    f(x) = 0.5Σ(xᵢ⁴ - 16xᵢ² + 5xᵢ)

    f* = -39.16617n at xᵢ = -2.903534.
    """
    return float(0.5 * np.sum(x ** 4 - 16.0 * x ** 2 + 5.0 * x))


def sum_squares(x: np.ndarray) -> float:
    """Sum Squares: f(x) = Σixᵢ²"""
    i = np.arange(1, x.size + 1)
    return float(np.sum(i * x ** 2))


def yang_n2(x: np.ndarray) -> float:
    """Xin-She Yang N.2: f(x) = Σ|xᵢ| exp(-Σsin(xᵢ²))"""
    return float(np.sum(np.abs(x)) * np.exp(-np.sum(np.sin(x ** 2))))


def yang_n3(x: np.ndarray) -> float:
    """
    Xin-She Yang N.3 (β = 15, m = 3)
    f(x) = exp(-Σ(xᵢ/β)^2m) - 2exp(-Σxᵢ²)Πcos²(xᵢ)
    """
    beta, m = 15.0, 3
    return float(
        np.exp(-np.sum((x / beta) ** (2 * m)))
        - 2.0 * np.exp(-np.dot(x, x)) * np.prod(np.cos(x) ** 2)
    )


def yang_n4(x: np.ndarray) -> float:
    """Xin-She Yang N.4: f(x) = (Σsin²(xᵢ) - exp(-Σxᵢ²)) exp(-Σsin²√|xᵢ|)"""
    return float(
        (np.sum(np.sin(x) ** 2) - np.exp(-np.dot(x, x)))
        * np.exp(-np.sum(np.sin(np.sqrt(np.abs(x))) ** 2))
    )


def zakharov(x: np.ndarray) -> float:
    """
    Zakharov Function
    f(x) = Σxᵢ² + (Σ0.5ixᵢ)² + (Σ0.5ixᵢ)⁴

    Unimodal, non-separable.
    """
    i = np.arange(1, x.size + 1)
    half_sum = np.sum(0.5 * i * x)
    return float(np.dot(x, x) + half_sum ** 2 + half_sum ** 4)
