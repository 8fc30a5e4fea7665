"""Tests for noise generation functions."""

import numpy as np
import pytest

from biomegen.terrain.noise import (
    GradientNoiseField,
    fbm,
    ridged_fbm,
    to_unit_range,
    warped_fbm,
)


@pytest.fixture
def grid() -> tuple[np.ndarray, np.ndarray]:
    """Off-lattice sample coordinates."""
    ys, xs = np.meshgrid(
        np.linspace(-20.3, 20.7, 61), np.linspace(-15.1, 25.9, 53), indexing="ij"
    )
    return xs, ys


class TestGradientNoiseField:
    """Tests for the seeded gradient noise field."""

    def test_permutation_is_duplicated_shuffle(self) -> None:
        """Permutation holds 0..255 once, repeated for wraparound."""
        perm = GradientNoiseField(7).permutation
        assert perm.shape == (512,)
        assert sorted(perm[:256].tolist()) == list(range(256))
        np.testing.assert_array_equal(perm[:256], perm[256:])

    def test_permutation_read_only(self) -> None:
        """Permutation table cannot be modified."""
        perm = GradientNoiseField(7).permutation
        with pytest.raises(ValueError):
            perm[0] = 1

    def test_deterministic_with_same_seed(self, grid) -> None:
        """Same seed produces identical output."""
        xs, ys = grid
        result1 = GradientNoiseField(123).sample(xs, ys)
        result2 = GradientNoiseField(123).sample(xs, ys)
        np.testing.assert_array_equal(result1, result2)

    @pytest.mark.parametrize(
        "seed, x, y, expected",
        [
            (3581, 1.3, 2.7, 0.5268274907251214),
            (3581, -3.7, 12.1, -0.7381853638756186),
            (8080, 1.3, 2.7, 0.4521789874832428),
        ],
    )
    def test_known_values(self, seed: int, x: float, y: float, expected: float) -> None:
        """Samples match recorded values, so maps replay across processes."""
        assert GradientNoiseField(seed).sample(x, y) == pytest.approx(expected, abs=1e-12)

    def test_known_values_vectorized(self) -> None:
        """Array sampling reproduces the recorded values."""
        values = GradientNoiseField(3581).sample(np.array([1.3, -3.7]), np.array([2.7, 12.1]))
        np.testing.assert_allclose(
            values, [0.5268274907251214, -0.7381853638756186], rtol=0, atol=1e-12
        )

    def test_different_seed_different_output(self, grid) -> None:
        """Different seeds produce different output."""
        xs, ys = grid
        result1 = GradientNoiseField(123).sample(xs, ys)
        result2 = GradientNoiseField(456).sample(xs, ys)
        assert not np.allclose(result1, result2)

    def test_scalar_returns_float(self, noise_field: GradientNoiseField) -> None:
        """Scalar coordinates give a plain float."""
        value = noise_field.sample(1.3, 2.7)
        assert isinstance(value, float)

    def test_array_matches_scalar(self, noise_field: GradientNoiseField, grid) -> None:
        """Vectorized sampling agrees with per-point sampling."""
        xs, ys = grid
        values = noise_field.sample(xs, ys)
        assert values.shape == xs.shape
        for idx in [(0, 0), (10, 20), (30, 5), (60, 52)]:
            assert values[idx] == pytest.approx(
                noise_field.sample(float(xs[idx]), float(ys[idx])), abs=1e-12
            )

    def test_lattice_origin_is_zero(self) -> None:
        """Noise vanishes at the lattice origin for any seed."""
        for seed in (0, 1, 99, 123456):
            assert GradientNoiseField(seed).sample(0.0, 0.0) == 0.0

    def test_output_range(self, noise_field: GradientNoiseField, grid) -> None:
        """Output stays within [-1, 1]."""
        xs, ys = grid
        values = noise_field.sample(xs * 0.37, ys * 0.41)
        assert values.min() >= -1.0
        assert values.max() <= 1.0

    def test_continuous(self, noise_field: GradientNoiseField) -> None:
        """Nearby points give nearby values."""
        a = noise_field.sample(3.21, 4.56)
        b = noise_field.sample(3.21 + 1e-6, 4.56)
        assert abs(a - b) < 1e-4

    def test_not_constant(self, noise_field: GradientNoiseField, grid) -> None:
        """Field varies over space."""
        xs, ys = grid
        assert np.std(noise_field.sample(xs, ys)) > 0.05


class TestFbm:
    """Tests for fBm."""

    def test_single_octave_is_scaled_sample(self, noise_field: GradientNoiseField) -> None:
        """One octave is the raw sample at the base frequency."""
        value = fbm(noise_field, 3.0, 7.0, 0.1, 1)
        assert value == pytest.approx(noise_field.sample(3.0 * 0.1, 7.0 * 0.1))

    def test_two_octaves_weighted(self, noise_field: GradientNoiseField) -> None:
        """Second octave has half amplitude and double frequency."""
        expected = (
            noise_field.sample(3.0 * 0.1, 7.0 * 0.1)
            + 0.5 * noise_field.sample(3.0 * 0.2, 7.0 * 0.2)
        ) / 1.5
        assert fbm(noise_field, 3.0, 7.0, 0.1, 2) == pytest.approx(expected)

    def test_output_range(self, noise_field: GradientNoiseField, grid) -> None:
        """Output stays within [-1, 1]."""
        xs, ys = grid
        values = fbm(noise_field, xs, ys, 0.05, 4)
        assert values.min() >= -1.0
        assert values.max() <= 1.0


class TestRidgedFbm:
    """Tests for ridged fBm."""

    def test_single_octave_transform(self, noise_field: GradientNoiseField) -> None:
        """One octave is (1 - |n|)^2."""
        n = noise_field.sample(5.0 * 0.05, 13.0 * 0.05)
        value = ridged_fbm(noise_field, 5.0, 13.0, 0.05, 1)
        assert value == pytest.approx((1.0 - abs(n)) ** 2)

    def test_output_range(self, noise_field: GradientNoiseField, grid) -> None:
        """Output is in [0, 1]."""
        xs, ys = grid
        values = ridged_fbm(noise_field, xs, ys, 0.05, 3)
        assert values.min() >= 0.0
        assert values.max() <= 1.0

    def test_peaks_at_lattice_origin(self, noise_field: GradientNoiseField) -> None:
        """Zero-crossings become ridge crests."""
        assert ridged_fbm(noise_field, 0.0, 0.0, 0.05, 1) == 1.0


class TestWarpedFbm:
    """Tests for domain-warped fBm."""

    def test_zero_warp_is_plain_fbm(self, grid) -> None:
        """Zero warp scale returns plain fBm."""
        xs, ys = grid
        field = GradientNoiseField(1)
        warp = GradientNoiseField(2)
        np.testing.assert_array_almost_equal(
            warped_fbm(field, warp, xs, ys, 0.04, 4, warp_scale=0.0),
            fbm(field, xs, ys, 0.04, 4),
        )

    def test_warp_changes_output(self, grid) -> None:
        """Non-zero warp distorts the field."""
        xs, ys = grid
        field = GradientNoiseField(1)
        warp = GradientNoiseField(2)
        assert not np.allclose(
            warped_fbm(field, warp, xs, ys, 0.04, 4),
            fbm(field, xs, ys, 0.04, 4),
        )

    def test_deterministic(self, grid) -> None:
        """Same inputs produce same output."""
        xs, ys = grid
        result1 = warped_fbm(GradientNoiseField(1), GradientNoiseField(2), xs, ys, 0.04, 4)
        result2 = warped_fbm(GradientNoiseField(1), GradientNoiseField(2), xs, ys, 0.04, 4)
        np.testing.assert_array_equal(result1, result2)


class TestToUnitRange:
    """Tests for [-1, 1] -> [0, 1] mapping."""

    def test_endpoints(self) -> None:
        """Endpoints map to 0 and 1."""
        assert to_unit_range(-1.0) == 0.0
        assert to_unit_range(1.0) == 1.0
        assert to_unit_range(0.0) == 0.5
