"""
Tests for the Sobol Sampling Probe
"""

import numpy as np
import pytest
from bmf import SobolSampler, make


class TestSobolSampler:
    """Test Sobol sampling of benchmark functions."""

    def test_generate_points(self):
        """Test that points lie in both coordinate systems."""
        bmf = make("rastrigin", 3)
        sampler = SobolSampler(bmf, seed=7)
        points = sampler.generate(16)
        assert len(points) == 16
        for p in points:
            assert p.normalized.shape == (3,)
            assert np.all(p.normalized >= -1.0) and np.all(p.normalized <= 1.0)
            assert np.all(p.native >= -5.12) and np.all(p.native <= 5.12)
            assert p.value == pytest.approx(bmf.evaluate(p.native))
            assert p.value == pytest.approx(bmf.objective(p.normalized))

    def test_indices_continue(self):
        """Test that indices run across calls."""
        sampler = SobolSampler(make("sphere", 2))
        first = sampler.generate(8)
        second = sampler.generate(8)
        assert [p.index for p in first + second] == list(range(16))

    def test_deterministic(self):
        """Test that the same seed gives the same samples."""
        a = SobolSampler(make("ackley", 4), seed=3).sample(32)
        b = SobolSampler(make("ackley", 4), seed=3).sample(32)
        assert a.best_value == b.best_value
        np.testing.assert_array_equal(a.best_point, b.best_point)

    def test_reset(self):
        """Test that reset restarts the sequence."""
        sampler = SobolSampler(make("griewank", 2), seed=11)
        before = sampler.generate(4)
        sampler.reset()
        after = sampler.generate(4)
        for p1, p2 in zip(before, after):
            np.testing.assert_array_almost_equal(p1.native, p2.native)
            assert p1.index == p2.index

    def test_report(self):
        """Test the summary statistics."""
        bmf = make("sphere", 2)
        report = SobolSampler(bmf).sample(64)
        assert report.function == "sphere"
        assert report.dimension == 2
        assert report.n_points == 64
        assert report.best_value >= bmf.known_optimum
        assert report.best_value <= report.mean_value
        assert report.gap == pytest.approx(report.best_value - 0.0)

    def test_report_to_dict(self):
        """Test JSON-ready conversion."""
        data = SobolSampler(make("booth", 2)).sample(8).to_dict()
        assert data["function"] == "booth"
        assert len(data["best_point"]) == 2
        assert data["gap"] == pytest.approx(data["best_value"] - data["known_optimum"])

    def test_invalid_count(self):
        """Test that at least one point is required."""
        with pytest.raises(ValueError):
            SobolSampler(make("sphere", 2)).generate(0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
