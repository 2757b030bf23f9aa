"""
Fixed-Arity Benchmark Functions

Evaluators whose mathematical definition has a fixed number of variables
(two for most, one for Gramacy & Lee, three for Wolfe). Each evaluator
reads only its leading coordinates; trailing coordinates are ignored.
"""

import math
import numpy as np


def ackley_n2(x: np.ndarray) -> float:
    """Ackley N.2: f(x, y) = -200exp(-0.02√(x² + y²))"""
    return -200.0 * math.exp(-0.02 * math.sqrt(x[0] ** 2 + x[1] ** 2))


def ackley_n3(x: np.ndarray) -> float:
    """Ackley N.3: f(x, y) = -200exp(-0.02√(x² + y²)) + 5exp(cos 3x + sin 3y)"""
    a, b = x[0], x[1]
    return -200.0 * math.exp(-0.02 * math.sqrt(a ** 2 + b ** 2)) + 5.0 * math.exp(math.cos(3.0 * a) + math.sin(3.0 * b))


def adjiman(x: np.ndarray) -> float:
    """Adjiman: f(x, y) = cos(x)sin(y) - x/(y² + 1)"""
    a, b = x[0], x[1]
    return math.cos(a) * math.sin(b) - a / (b ** 2 + 1.0)


def bartels_conn(x: np.ndarray) -> float:
    """Bartels Conn: f(x, y) = |x² + y² + xy| + |sin x| + |cos y|"""
    a, b = x[0], x[1]
    return abs(a ** 2 + b ** 2 + a * b) + abs(math.sin(a)) + abs(math.cos(b))


def beale(x: np.ndarray) -> float:
    """
    Beale Function
    f(x, y) = (1.5 - x + xy)² + (2.25 - x + xy²)² + (2.625 - x + xy³)²

    f* = 0 at (3, 0.5).
    """
    a, b = x[0], x[1]
    return (1.5 - a + a * b) ** 2 + (2.25 - a + a * b ** 2) ** 2 + (2.625 - a + a * b ** 3) ** 2


def bird(x: np.ndarray) -> float:
    """Bird: f(x, y) = sin(x)e^(1-cos y)² + cos(y)e^(1-sin x)² + (x - y)²"""
    a, b = x[0], x[1]
    return (
        math.sin(a) * math.exp((1.0 - math.cos(b)) ** 2)
        + math.cos(b) * math.exp((1.0 - math.sin(a)) ** 2)
        + (a - b) ** 2
    )


def bohachevsky_n1(x: np.ndarray) -> float:
    """Bohachevsky N.1: f(x, y) = x² + 2y² - 0.3cos(3πx) - 0.4cos(4πy) + 0.7"""
    a, b = x[0], x[1]
    return a ** 2 + 2.0 * b ** 2 - 0.3 * math.cos(3.0 * math.pi * a) - 0.4 * math.cos(4.0 * math.pi * b) + 0.7


def bohachevsky_n2(x: np.ndarray) -> float:
    """Bohachevsky N.2: f(x, y) = x² + 2y² - 0.3cos(3πx)cos(4πy) + 0.3"""
    a, b = x[0], x[1]
    return a ** 2 + 2.0 * b ** 2 - 0.3 * math.cos(3.0 * math.pi * a) * math.cos(4.0 * math.pi * b) + 0.3


def booth(x: np.ndarray) -> float:
    """Booth: f(x, y) = (x + 2y - 7)² + (2x + y - 5)²"""
    a, b = x[0], x[1]
    return (a + 2.0 * b - 7.0) ** 2 + (2.0 * a + b - 5.0) ** 2


def brent(x: np.ndarray) -> float:
    """Brent: f(x, y) = (x + 10)² + (y + 10)² + e^(-x² - y²)"""
    a, b = x[0], x[1]
    return (a + 10.0) ** 2 + (b + 10.0) ** 2 + math.exp(-a ** 2 - b ** 2)


def bukin_n6(x: np.ndarray) -> float:
    """Bukin N.6: f(x, y) = 100√|y - 0.01x²| + 0.01|x + 10|"""
    a, b = x[0], x[1]
    return 100.0 * math.sqrt(abs(b - 0.01 * a ** 2)) + 0.01 * abs(a + 10.0)


def cross_in_tray(x: np.ndarray) -> float:
    """
    Cross-in-Tray Function
    f(x, y) = -0.0001(|sin x sin y exp(|100 - √(x² + y²)/π|)| + 1)^0.1
    """
    a, b = x[0], x[1]
    inner = abs(math.sin(a) * math.sin(b) * math.exp(abs(100.0 - math.sqrt(a ** 2 + b ** 2) / math.pi)))
    return -0.0001 * (inner + 1.0) ** 0.1


def deckkers_aarts(x: np.ndarray) -> float:
    """Deckkers-Aarts: f(x, y) = 10⁵x² + y² - (x² + y²)² + 10⁻⁵(x² + y²)⁴"""
    a, b = x[0], x[1]
    r2 = a ** 2 + b ** 2
    return 1e5 * a ** 2 + b ** 2 - r2 ** 2 + 1e-5 * r2 ** 4


def drop_wave(x: np.ndarray) -> float:
    """Drop-Wave: f(x, y) = -(1 + cos(12√(x² + y²))) / (0.5(x² + y²) + 2)"""
    r2 = x[0] ** 2 + x[1] ** 2
    return -(1.0 + math.cos(12.0 * math.sqrt(r2))) / (0.5 * r2 + 2.0)


def easom(x: np.ndarray) -> float:
    """Easom: f(x, y) = -cos x cos y exp(-(x - π)² - (y - π)²)"""
    a, b = x[0], x[1]
    return -math.cos(a) * math.cos(b) * math.exp(-(a - math.pi) ** 2 - (b - math.pi) ** 2)


def egg_crate(x: np.ndarray) -> float:
    """Egg Crate: f(x, y) = x² + y² + 25(sin²x + sin²y)"""
    a, b = x[0], x[1]
    return a ** 2 + b ** 2 + 25.0 * (math.sin(a) ** 2 + math.sin(b) ** 2)


def goldstein_price(x: np.ndarray) -> float:
    """
    Goldstein-Price Function
    f(x, y) = [1 + (x + y + 1)²(19 - 14x + 3x² - 14y + 6xy + 3y²)]
              × [30 + (2x - 3y)²(18 - 32x + 12x² + 48y - 36xy + 27y²)]

    f* = 3 at (0, -1).
    """
    a, b = x[0], x[1]
    first = 1.0 + (a + b + 1.0) ** 2 * (19.0 - 14.0 * a + 3.0 * a ** 2 - 14.0 * b + 6.0 * a * b + 3.0 * b ** 2)
    second = 30.0 + (2.0 * a - 3.0 * b) ** 2 * (18.0 - 32.0 * a + 12.0 * a ** 2 + 48.0 * b - 36.0 * a * b + 27.0 * b ** 2)
    return first * second


def gramacy_lee(x: np.ndarray) -> float:
    """Gramacy & Lee (1-D): f(x) = sin(10πx)/(2x) + (x - 1)⁴"""
    a = x[0]
    return math.sin(10.0 * math.pi * a) / (2.0 * a) + (a - 1.0) ** 4


def himmelblau(x: np.ndarray) -> float:
    """Himmelblau: f(x, y) = (x² + y - 11)² + (x + y² - 7)²"""
    a, b = x[0], x[1]
    return (a ** 2 + b - 11.0) ** 2 + (a + b ** 2 - 7.0) ** 2


def holder_table(x: np.ndarray) -> float:
    """Holder Table: f(x, y) = -|sin x cos y exp(|1 - √(x² + y²)/π|)|"""
    a, b = x[0], x[1]
    return -abs(math.sin(a) * math.cos(b) * math.exp(abs(1.0 - math.sqrt(a ** 2 + b ** 2) / math.pi)))


def keane(x: np.ndarray) -> float:
    """
    Keane Function
    f(x, y) = -sin²(x - y)sin²(x + y) / √(x² + y²)

    f = 0 at the origin (the limit of the quotient).
    """
    a, b = x[0], x[1]
    r2 = a ** 2 + b ** 2
    if r2 == 0.0:
        return 0.0
    return -(math.sin(a - b) ** 2 * math.sin(a + b) ** 2) / math.sqrt(r2)


def leon(x: np.ndarray) -> float:
    """Leon: f(x, y) = 100(y - x³)² + (1 - x)²"""
    a, b = x[0], x[1]
    return 100.0 * (b - a ** 3) ** 2 + (1.0 - a) ** 2


def levi_n13(x: np.ndarray) -> float:
    """
    Lévi N.13
    f(x, y) = sin²(3πx) + (x - 1)²(1 + sin²(3πy)) + (y - 1)²(1 + sin²(2πy))
    """
    a, b = x[0], x[1]
    return (
        math.sin(3.0 * math.pi * a) ** 2
        + (a - 1.0) ** 2 * (1.0 + math.sin(3.0 * math.pi * b) ** 2)
        + (b - 1.0) ** 2 * (1.0 + math.sin(2.0 * math.pi * b) ** 2)
    )


def matyas(x: np.ndarray) -> float:
    """Matyas: f(x, y) = 0.26(x² + y²) - 0.48xy"""
    a, b = x[0], x[1]
    return 0.26 * (a ** 2 + b ** 2) - 0.48 * a * b


def mccormick(x: np.ndarray) -> float:
    """McCormick: f(x, y) = sin(x + y) + (x - y)² - 1.5x + 2.5y + 1"""
    a, b = x[0], x[1]
    return math.sin(a + b) + (a - b) ** 2 - 1.5 * a + 2.5 * b + 1.0


def _schaffer(numerator_term: float, r2: float) -> float:
    return 0.5 + (numerator_term - 0.5) / (1.0 + 0.001 * r2) ** 2


def schaffer_n1(x: np.ndarray) -> float:
    """Schaffer N.1: f(x, y) = 0.5 + (sin²((x² + y²)²) - 0.5) / (1 + 0.001(x² + y²))²"""
    r2 = x[0] ** 2 + x[1] ** 2
    return _schaffer(math.sin(r2 ** 2) ** 2, r2)


def schaffer_n2(x: np.ndarray) -> float:
    """Schaffer N.2: f(x, y) = 0.5 + (sin²(x² - y²) - 0.5) / (1 + 0.001(x² + y²))²"""
    a, b = x[0], x[1]
    return _schaffer(math.sin(a ** 2 - b ** 2) ** 2, a ** 2 + b ** 2)


def schaffer_n3(x: np.ndarray) -> float:
    """Schaffer N.3: f(x, y) = 0.5 + (sin²(cos|x² - y²|) - 0.5) / (1 + 0.001(x² + y²))²"""
    a, b = x[0], x[1]
    return _schaffer(math.sin(math.cos(abs(a ** 2 - b ** 2))) ** 2, a ** 2 + b ** 2)


def schaffer_n4(x: np.ndarray) -> float:
    """Schaffer N.4: f(x, y) = 0.5 + (cos²(sin|x² - y²|) - 0.5) / (1 + 0.001(x² + y²))²"""
    a, b = x[0], x[1]
    return _schaffer(math.cos(math.sin(abs(a ** 2 - b ** 2))) ** 2, a ** 2 + b ** 2)


def three_hump_camel(x: np.ndarray) -> float:
    """Three-Hump Camel: f(x, y) = 2x² - 1.05x⁴ + x⁶/6 + xy + y²"""
    a, b = x[0], x[1]
    return 2.0 * a ** 2 - 1.05 * a ** 4 + a ** 6 / 6.0 + a * b + b ** 2


def wolfe(x: np.ndarray) -> float:
    """Wolfe (3-D): f(x, y, z) = 4/3(x² + y² - xy)^0.75 + z"""
    a, b, c = x[0], x[1], x[2]
    return 4.0 / 3.0 * (a ** 2 + b ** 2 - a * b) ** 0.75 + c
