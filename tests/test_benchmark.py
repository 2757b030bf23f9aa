"""
Tests for the BenchmarkFunction value object
"""

import dataclasses
import numpy as np
import pytest
from bmf import BenchmarkFunction, BenchmarkSpecError, ObjectiveFunction, make
from bmf.implementations import n_dimensional as nd


class TestConstruction:
    """Test invariants enforced at construction."""

    def test_valid(self):
        """Test direct construction."""
        bmf = BenchmarkFunction("sphere", 3, (-5.12, 5.12), 0.0, nd.sphere)
        assert bmf.dimension == 3
        assert bmf.domain_unscaled() == (-5.12, 5.12)

    def test_zero_dimension(self):
        """Test that dimension 0 is rejected."""
        with pytest.raises(ValueError, match="Dimension"):
            BenchmarkFunction("sphere", 0, (-5.12, 5.12), 0.0, nd.sphere)

    def test_inverted_domain(self):
        """Test that lower >= upper is rejected."""
        with pytest.raises(ValueError, match="Invalid domain"):
            BenchmarkFunction("sphere", 2, (1.0, 1.0), 0.0, nd.sphere)

    def test_immutable(self):
        """Test that fields cannot be reassigned."""
        bmf = make("sphere", 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            bmf.dimension = 5

    def test_equality_and_copy(self):
        """Test value semantics."""
        a = make("ackley", 4)
        b = dataclasses.replace(a)
        assert a == b
        assert hash(a) == hash(b)
        assert a != make("ackley", 5)


class TestEvaluation:
    """Test native and normalized evaluation."""

    def test_evaluate_returns_float(self):
        """Test that evaluate returns a Python float."""
        value = make("beale", 2).evaluate(np.array([1.0, 1.0]))
        assert isinstance(value, float)

    def test_evaluate_accepts_lists(self):
        """Test evaluation of a plain list."""
        assert make("sphere", 2).evaluate([3.0, 4.0]) == pytest.approx(25.0)

    def test_call(self):
        """Test that calling the object evaluates it."""
        bmf = make("sphere", 2)
        assert bmf([1.0, 1.0]) == bmf.evaluate([1.0, 1.0])

    def test_evaluate_batch(self):
        """Test row-wise evaluation."""
        X = np.array([[0.0, 0.0], [1.0, 2.0], [3.0, 4.0]])
        values = make("sphere", 2).evaluate_batch(X)
        np.testing.assert_allclose(values, [0.0, 5.0, 25.0])

    def test_objective_uses_normalized_coordinates(self):
        """Test that objective() maps [-1, 1] into the native domain."""
        bmf = make("rosenbrock", 2)  # domain [-5, 10]
        # -0.2 maps to 1.0 in [-5, 10]
        assert bmf.objective([-0.2, -0.2]) == pytest.approx(0.0, abs=1e-12)
        assert bmf.objective([-1.0, -1.0]) == pytest.approx(bmf.evaluate([-5.0, -5.0]))

    def test_objective_center(self):
        """Test that the normalized origin is the domain center."""
        bmf = make("sphere", 3)
        assert bmf.objective(np.zeros(3)) == pytest.approx(0.0)

    def test_optimality_gap(self):
        """Test the gap to the known optimum."""
        bmf = make("goldstein_price", 2)
        assert bmf.optimality_gap(3.5) == pytest.approx(0.5)


class TestObjectiveFunctionCapability:
    """Test the capability set exposed to solvers."""

    def test_protocol(self):
        """Test that BenchmarkFunction satisfies ObjectiveFunction."""
        assert isinstance(make("rastrigin", 4), ObjectiveFunction)

    def test_bounds(self):
        """Test the normalized search box."""
        assert make("rastrigin", 3).bounds() == [(-1.0, 1.0)] * 3

    def test_optimum_value(self):
        """Test the known optimum accessor."""
        bmf = make("easom", 2)
        assert bmf.optimum_value() == bmf.known_optimum_raw() == -1.0


class TestArity:
    """Test fixed-arity functions built with too few variables."""

    def test_resolves(self):
        """Test that beale<1> can still be constructed."""
        bmf = BenchmarkFunction.from_spec("beale<1>")
        assert bmf.dimension == 1
        assert bmf.arity == 2

    def test_evaluate_raises(self):
        """Test that evaluating at the declared dimension raises ValueError."""
        bmf = make("beale", 1)
        with pytest.raises(ValueError, match="beale is defined for 2 variables"):
            bmf.evaluate([0.0])

    def test_objective_and_batch_raise(self):
        """Test the normalized and batch paths."""
        bmf = make("wolfe", 2)
        with pytest.raises(ValueError, match="dimension 2 is too small"):
            bmf.objective([0.0, 0.0])
        with pytest.raises(ValueError):
            bmf.evaluate_batch(np.zeros((4, 2)))

    def test_at_or_above_arity(self):
        """Test that dimensions at or above the arity evaluate normally."""
        assert make("beale", 2).evaluate([3.0, 0.5]) == pytest.approx(0.0)
        assert make("beale", 3).evaluate([3.0, 0.5, 7.0]) == pytest.approx(0.0)

    def test_dimension_generic_has_no_arity(self):
        """Test that dimension-generic functions accept dimension 1."""
        bmf = make("sphere", 1)
        assert bmf.arity is None
        assert bmf.evaluate([2.0]) == pytest.approx(4.0)


class TestFromSpec:
    """Test the raising constructor."""

    def test_from_spec(self):
        """Test successful resolution."""
        bmf = BenchmarkFunction.from_spec("levi_n13<2>")
        assert bmf.name == "levi_n13"
        assert bmf.dimension == 2

    def test_from_spec_error(self):
        """Test that failures raise BenchmarkSpecError."""
        with pytest.raises(BenchmarkSpecError):
            BenchmarkFunction.from_spec("levi_n13")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
