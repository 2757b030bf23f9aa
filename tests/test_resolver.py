"""
Tests for the Benchmark Resolver
"""

import pytest
from bmf import (
    BenchmarkFunction,
    BenchmarkSpecError,
    MalformedSpec,
    ResolveError,
    ResolveErrorKind,
    ResolverConfig,
    UnknownFunction,
    family_names,
    parse_spec,
    resolve,
    resolve_many,
    resolve_or_raise,
)


class TestParseSpec:
    """Test splitting of 'name<dimension>' text."""

    def test_basic(self):
        """Test a well-formed spec."""
        assert parse_spec("rastrigin<20>") == ("rastrigin", 20)

    def test_name_keeps_case(self):
        """Test that parsing does not case-fold."""
        assert parse_spec("ACKLEY_N4<5>") == ("ACKLEY_N4", 5)

    def test_trailing_segments_ignored(self):
        """Test that extra segments are discarded."""
        assert parse_spec("sphere<3>extra<7>") == ("sphere", 3)
        assert parse_spec("sphere<3") == ("sphere", 3)

    @pytest.mark.parametrize("spec", [
        "sphere",
        "sphere<>",
        "sphere<abc>",
        "sphere<-3>",
        "sphere<+3>",
        "sphere< 3>",
        "sphere<3.5>",
        "<3>",
        "",
        "sphere<0>",
    ])
    def test_malformed(self, spec):
        """Test shapes that cannot be parsed."""
        assert isinstance(parse_spec(spec), MalformedSpec)


class TestResolve:
    """Test resolution to BenchmarkFunction values."""

    def test_sphere_20(self):
        """Test resolve('sphere<20>')."""
        bmf = resolve("sphere<20>")
        assert isinstance(bmf, BenchmarkFunction)
        assert bmf.name == "sphere"
        assert bmf.dimension == 20

    @pytest.mark.parametrize("name", family_names())
    @pytest.mark.parametrize("dimension", [1, 2, 3, 10])
    def test_every_family_resolves(self, name, dimension):
        """Test that every name resolves for any dimension >= 1."""
        bmf = resolve(f"{name}<{dimension}>")
        assert isinstance(bmf, BenchmarkFunction)
        assert bmf.name == name.lower()
        assert bmf.dimension == dimension

    @pytest.mark.parametrize("name", family_names())
    def test_upper_case_names(self, name):
        """Test case-insensitive resolution of every family."""
        bmf = resolve(f"{name.upper()}<4>")
        assert isinstance(bmf, BenchmarkFunction)
        assert bmf.name == name

    def test_case_insensitive_equivalence(self):
        """Test that 'SPHERE<3>' and 'sphere<3>' are equivalent."""
        upper = resolve("SPHERE<3>")
        lower = resolve("sphere<3>")
        assert upper == lower
        assert upper.evaluate([1.0, 2.0, 3.0]) == lower.evaluate([1.0, 2.0, 3.0])

    def test_unknown_function(self):
        """Test resolve('unknownfn<3>')."""
        result = resolve("unknownfn<3>")
        assert isinstance(result, UnknownFunction)
        assert result.kind == ResolveErrorKind.UNKNOWN_FUNCTION
        assert result.name == "unknownfn"
        assert "unknownfn" in result.message

    def test_no_prefix_matching(self):
        """Test that near-miss names are unknown."""
        assert isinstance(resolve("sphe<3>"), UnknownFunction)
        assert isinstance(resolve("schaffer<2>"), UnknownFunction)
        assert isinstance(resolve(" sphere<2>"), UnknownFunction)

    def test_missing_dimension(self):
        """Test resolve('sphere')."""
        result = resolve("sphere")
        assert isinstance(result, MalformedSpec)
        assert result.kind == ResolveErrorKind.MALFORMED_SPEC
        assert result.spec == "sphere"

    def test_non_integer_dimension(self):
        """Test resolve('sphere<abc>')."""
        result = resolve("sphere<abc>")
        assert isinstance(result, MalformedSpec)
        assert "abc" in result.message

    def test_zero_dimension(self):
        """Test that dimension 0 is rejected at the boundary."""
        assert isinstance(resolve("sphere<0>"), MalformedSpec)

    def test_malformed_checked_before_name(self):
        """Test that a malformed spec with an unknown name is MalformedSpec."""
        assert isinstance(resolve("unknownfn<x>"), MalformedSpec)


class TestResolverConfig:
    """Test configurable resolution."""

    def test_default_ignores_arity(self):
        """Test that fixed-arity families accept other dimensions by default."""
        bmf = resolve("beale<5>")
        assert isinstance(bmf, BenchmarkFunction)
        assert bmf.dimension == 5

    def test_strict_arity(self):
        """Test rejection of mismatching dimensions."""
        config = ResolverConfig(strict_arity=True)
        assert isinstance(resolve("beale<5>", config), MalformedSpec)
        assert isinstance(resolve("beale<2>", config), BenchmarkFunction)
        assert isinstance(resolve("wolfe<3>", config), BenchmarkFunction)
        assert isinstance(resolve("sphere<9>", config), BenchmarkFunction)

    def test_max_dimension(self):
        """Test the dimension limit."""
        config = ResolverConfig(max_dimension=100)
        assert isinstance(resolve("sphere<100>", config), BenchmarkFunction)
        assert isinstance(resolve("sphere<101>", config), MalformedSpec)


class TestRaisingForms:
    """Test resolve_or_raise and error conversion."""

    def test_resolve_or_raise(self):
        """Test the raising form on success."""
        assert resolve_or_raise("ackley<2>").name == "ackley"

    def test_resolve_or_raise_unknown(self):
        """Test the raised error carries the record."""
        with pytest.raises(BenchmarkSpecError) as excinfo:
            resolve_or_raise("nope<2>")
        assert excinfo.value.kind == ResolveErrorKind.UNKNOWN_FUNCTION
        assert excinfo.value.error.name == "nope"

    def test_is_value_error(self):
        """Test that BenchmarkSpecError is a ValueError."""
        with pytest.raises(ValueError):
            resolve_or_raise("sphere<abc>")


class TestResolveMany:
    """Test batch resolution."""

    def test_aggregates_failures(self):
        """Test that failures are collected instead of stopping the batch."""
        specs = ["sphere<2>", "nope<3>", "rastrigin<4>", "ackley", "BOOTH<2>"]
        functions, errors = resolve_many(specs)
        assert [f.name for f in functions] == ["sphere", "rastrigin", "booth"]
        assert [type(e) for e in errors] == [UnknownFunction, MalformedSpec]
        assert all(isinstance(e, ResolveError) for e in errors)
        assert [e.spec for e in errors] == ["nope<3>", "ackley"]

    def test_empty(self):
        """Test an empty batch."""
        assert resolve_many([]) == ([], [])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
