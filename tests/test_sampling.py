import math

import numpy as np
import pytest

from sampling import RandomSource, sample_standard_normal


def test_box_muller_known_draw():
    draws = iter([math.exp(-0.5), 0.5])
    # u = e^-0.5 -> sqrt(1) = 1; v = 0.5 -> cos(pi) = -1
    assert sample_standard_normal(lambda: next(draws)) == pytest.approx(-1.0)


def test_zero_uniform_draws_are_redrawn():
    draws = iter([0.0, 0.0, math.exp(-2.0), 0.0, 0.5])
    # u skips two zeros -> sqrt(4) = 2; v skips one zero -> cos(pi) = -1
    assert sample_standard_normal(lambda: next(draws)) == pytest.approx(-2.0)


def test_random_source_moments():
    src = RandomSource(seed=7)
    xs = np.array([src.normal() for _ in range(20_000)])
    assert abs(xs.mean()) < 0.05
    assert abs(xs.std() - 1.0) < 0.05


def test_seeded_sources_repeat():
    a, b = RandomSource(seed=42), RandomSource(seed=42)
    assert [a.normal() for _ in range(5)] == [b.normal() for _ in range(5)]


def test_uniform_stays_in_band():
    src = RandomSource(seed=3)
    vals = [src.uniform(-0.02, 0.02) for _ in range(1_000)]
    assert min(vals) >= -0.02
    assert max(vals) < 0.02
