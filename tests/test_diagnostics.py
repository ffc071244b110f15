"""Tests for exact ESF quantities and vectorised cycle-count sampling."""

import math

import numpy as np
import pytest

from esf_permutations import InvalidParameterError, InvalidSizeError
from esf_permutations.diagnostics import (
    cycle_count_distribution,
    cycle_count_variance,
    cycle_type,
    esf_probability,
    expected_cycle_count,
    harmonic_number,
    sample_cycle_counts,
)

# ------------------------------------------------------------------ #
# Helpers
# ------------------------------------------------------------------ #


def _partitions(n: int, largest: int | None = None):
    """Yield the integer partitions of *n* in decreasing-part order."""
    if largest is None:
        largest = n
    if n == 0:
        yield ()
        return
    for part in range(min(n, largest), 0, -1):
        for rest in _partitions(n - part, part):
            yield (part, *rest)


class TestHarmonicNumber:
    def test_values(self):
        assert harmonic_number(0) == 0.0
        assert harmonic_number(1) == 1.0
        assert harmonic_number(4) == pytest.approx(25 / 12)

    def test_negative_raises(self):
        with pytest.raises(InvalidSizeError):
            harmonic_number(-1)


class TestCycleCountMoments:
    def test_alpha_one_is_harmonic(self):
        for n in (1, 5, 10, 100):
            assert expected_cycle_count(n, 1.0) == pytest.approx(harmonic_number(n))

    def test_closed_form(self):
        n, alpha = 7, 0.3
        expected = sum(alpha / (alpha + i) for i in range(n))
        variance = sum(alpha * i / (alpha + i) ** 2 for i in range(n))
        assert expected_cycle_count(n, alpha) == pytest.approx(expected)
        assert cycle_count_variance(n, alpha) == pytest.approx(variance)

    def test_n_zero(self):
        assert expected_cycle_count(0, 2.0) == 0.0
        assert cycle_count_variance(0, 2.0) == 0.0

    def test_n_one(self):
        assert expected_cycle_count(1, 0.01) == 1.0
        assert cycle_count_variance(1, 0.01) == 0.0

    @pytest.mark.parametrize("alpha", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_alpha(self, alpha):
        with pytest.raises(InvalidParameterError):
            expected_cycle_count(5, alpha)


class TestCycleCountDistribution:
    def test_sums_to_one(self):
        pmf = cycle_count_distribution(12, 0.7)
        assert pmf.shape == (13,)
        assert pmf.sum() == pytest.approx(1.0)

    def test_no_mass_at_zero_for_positive_n(self):
        assert cycle_count_distribution(6, 2.0)[0] == 0.0

    def test_n_zero(self):
        np.testing.assert_allclose(cycle_count_distribution(0, 1.0), [1.0])

    def test_alpha_one_stirling_numbers(self):
        # Unsigned Stirling numbers of the first kind for n=4: 6, 11, 6, 1
        pmf = cycle_count_distribution(4, 1.0)
        np.testing.assert_allclose(pmf, np.array([0, 6, 11, 6, 1]) / 24)

    def test_mean_matches(self):
        pmf = cycle_count_distribution(9, 2.5)
        mean = np.dot(np.arange(10), pmf)
        assert mean == pytest.approx(expected_cycle_count(9, 2.5))

    def test_agrees_with_esf_probability(self):
        n, alpha = 7, 1.7
        pmf = cycle_count_distribution(n, alpha)
        by_count = np.zeros(n + 1)
        for partition in _partitions(n):
            by_count[len(partition)] += esf_probability(partition, alpha)
        np.testing.assert_allclose(by_count, pmf, rtol=1e-10, atol=1e-14)


class TestSampleCycleCounts:
    def test_shape_and_range(self):
        counts = sample_cycle_counts(20, 1.0, 500, random_state=1)
        assert counts.shape == (500,)
        assert counts.min() >= 1
        assert counts.max() <= 20

    def test_n_zero(self):
        counts = sample_cycle_counts(0, 1.0, 5, random_state=1)
        np.testing.assert_array_equal(counts, np.zeros(5))

    def test_n_one(self):
        counts = sample_cycle_counts(1, 0.01, 100, random_state=1)
        np.testing.assert_array_equal(counts, np.ones(100))

    def test_size_zero(self):
        assert sample_cycle_counts(10, 1.0, 0, random_state=1).shape == (0,)

    def test_reproducible(self):
        a = sample_cycle_counts(15, 0.4, 100, random_state=8)
        b = sample_cycle_counts(15, 0.4, 100, random_state=8)
        np.testing.assert_array_equal(a, b)

    def test_chunked_matches_distribution(self, monkeypatch):
        import esf_permutations.diagnostics as diag

        # Force many small chunks.
        monkeypatch.setattr(diag, "_CHUNK_ELEMENTS", 64)
        n, alpha = 8, 0.5
        counts = sample_cycle_counts(n, alpha, 100_000, random_state=3)
        freqs = np.bincount(counts, minlength=n + 1) / len(counts)
        np.testing.assert_allclose(
            freqs, cycle_count_distribution(n, alpha), atol=0.01
        )

    def test_mean_is_harmonic_number(self):
        counts = sample_cycle_counts(10, 1.0, 10_000, random_state=2018)
        assert abs(counts.mean() - harmonic_number(10)) < 0.1

    def test_rejects_non_numpy_source(self):
        class Source:
            def random(self):
                return 0.5

            def integers(self, high):
                return 0

        with pytest.raises(TypeError, match="numpy.random.Generator"):
            sample_cycle_counts(5, 1.0, 10, Source())

    def test_negative_size_raises(self):
        with pytest.raises(InvalidSizeError):
            sample_cycle_counts(5, 1.0, -1, random_state=0)


class TestEsfProbability:
    def test_cycle_type(self):
        assert cycle_type([2, 5, 1, 2]) == (5, 2, 2, 1)
        assert cycle_type([]) == ()

    @pytest.mark.parametrize("alpha", [0.2, 1.0, 4.0])
    @pytest.mark.parametrize("n", [1, 4, 8])
    def test_sums_to_one_over_partitions(self, n, alpha):
        total = sum(esf_probability(p, alpha) for p in _partitions(n))
        assert total == pytest.approx(1.0)

    def test_alpha_one_is_class_size_over_n_factorial(self):
        # At alpha=1, P(type) = 1 / z_type.  A single 4-cycle: 1/4.
        assert esf_probability((4,), 1.0) == pytest.approx(1 / 4)
        assert esf_probability((1, 1, 1, 1), 1.0) == pytest.approx(1 / 24)
        # (2, 1, 1): z = 2 * 2! = 4
        assert esf_probability((2, 1, 1), 1.0) == pytest.approx(1 / 4)

    def test_order_irrelevant(self):
        assert esf_probability((1, 3, 2), 0.6) == pytest.approx(
            esf_probability((3, 2, 1), 0.6)
        )

    def test_empty_type(self):
        assert esf_probability((), 2.0) == pytest.approx(1.0)

    def test_large_n_finite(self):
        p = esf_probability((1000,), 0.5)
        assert 0.0 < p < 1.0
        # P(single n-cycle) = (n-1)! * alpha / alpha^(n)
        expected = math.exp(
            math.lgamma(1000) + math.log(0.5) + math.lgamma(0.5) - math.lgamma(1000.5)
        )
        assert p == pytest.approx(expected, rel=1e-9)

    @pytest.mark.parametrize("bad", [(0, 2), (-1,), (1.5,), (True,)])
    def test_invalid_lengths(self, bad):
        with pytest.raises(ValueError, match="positive integers"):
            esf_probability(bad, 1.0)
