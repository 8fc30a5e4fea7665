"""Noise generation functions for biome map generation.

Provides a seeded 2D simplex-style gradient noise field and the fractal
combinators built on it: fBm (fractal Brownian motion), ridged fBm and
domain-warped fBm.

All functions accept plain floats or numpy arrays of coordinates. Arrays
are broadcast together and evaluated in one pass; scalars return a float.
"""

import math

import numpy as np
from numpy.typing import NDArray

Coordinate = float | NDArray[np.float64]

# Skew/unskew factors for the 2D simplex lattice
F2 = 0.5 * (math.sqrt(3.0) - 1.0)
G2 = (3.0 - math.sqrt(3.0)) / 6.0

NOISE_SCALE = 70.0

# Only the x/y components are used in 2D
GRAD3 = np.array(
    [
        [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
        [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
        [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
    ],
    dtype=np.float64,
)

# Offset applied to the second warp lookup to decorrelate x and y
WARP_DECORRELATION = (5.2, 1.3)


class GradientNoiseField:
    """Deterministic seeded gradient noise over real 2D coordinates.

    The permutation table is shuffled from the seed with a sine-based
    pseudo-random index, so identical seeds give identical fields in every
    process. Instances are immutable after construction.
    """

    def __init__(self, seed: int) -> None:
        """Build the permutation tables for a seed.

        Args:
            seed: Integer seed.
        """
        self.seed = seed

        p = list(range(256))
        for i in range(256):
            r = abs(math.sin(seed + i)) * 10000
            k = int((r - math.floor(r)) * 256)
            p[i], p[k] = p[k], p[i]

        perm = np.array(p + p, dtype=np.int64)
        perm_mod12 = perm % 12
        perm.flags.writeable = False
        perm_mod12.flags.writeable = False

        self._perm = perm
        self._perm_mod12 = perm_mod12

    @property
    def permutation(self) -> NDArray[np.int64]:
        """Read-only 512-entry permutation table."""
        return self._perm

    def sample(self, x: Coordinate, y: Coordinate) -> Coordinate:
        """Sample the noise field.

        Args:
            x: X coordinate(s).
            y: Y coordinate(s).

        Returns:
            Noise value(s), approximately in [-1, 1].
        """
        xin = np.asarray(x, dtype=np.float64)
        yin = np.asarray(y, dtype=np.float64)

        # Locate the simplex cell containing the point
        s = (xin + yin) * F2
        i = np.floor(xin + s)
        j = np.floor(yin + s)
        t = (i + j) * G2
        x0 = xin - (i - t)
        y0 = yin - (j - t)

        # Middle corner depends on which triangle of the cell we are in
        i1 = (x0 > y0).astype(np.int64)
        j1 = 1 - i1

        x1 = x0 - i1 + G2
        y1 = y0 - j1 + G2
        x2 = x0 - 1.0 + 2.0 * G2
        y2 = y0 - 1.0 + 2.0 * G2

        ii = i.astype(np.int64) & 255
        jj = j.astype(np.int64) & 255
        perm = self._perm
        perm_mod12 = self._perm_mod12

        gi0 = perm_mod12[ii + perm[jj]]
        gi1 = perm_mod12[ii + i1 + perm[jj + j1]]
        gi2 = perm_mod12[ii + 1 + perm[jj + 1]]

        total = (
            _corner(gi0, x0, y0)
            + _corner(gi1, x1, y1)
            + _corner(gi2, x2, y2)
        )
        result = NOISE_SCALE * total

        if result.ndim == 0:
            return float(result)
        return result


def _corner(
    gi: NDArray[np.int64],
    dx: NDArray[np.float64],
    dy: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Contribution of one simplex corner (zero outside its radius)."""
    t = 0.5 - dx * dx - dy * dy
    t2 = t * t
    grad = GRAD3[gi]
    contribution = t2 * t2 * (grad[..., 0] * dx + grad[..., 1] * dy)
    return np.where(t >= 0, contribution, 0.0)


def fbm(
    field: GradientNoiseField,
    x: Coordinate,
    y: Coordinate,
    freq: float,
    octaves: int,
) -> Coordinate:
    """Fractal Brownian motion.

    Sums octaves of noise, doubling frequency and halving amplitude each
    round, and divides by the total amplitude.

    Args:
        field: Noise source.
        x: X coordinate(s).
        y: Y coordinate(s).
        freq: Frequency of the first octave.
        octaves: Number of octaves.

    Returns:
        Value(s) roughly in [-1, 1].
    """
    value: Coordinate = 0.0
    amplitude = 1.0
    frequency = freq
    total_amplitude = 0.0

    for _ in range(octaves):
        value = value + amplitude * field.sample(x * frequency, y * frequency)
        total_amplitude += amplitude
        amplitude *= 0.5
        frequency *= 2.0

    return value / total_amplitude


def ridged_fbm(
    field: GradientNoiseField,
    x: Coordinate,
    y: Coordinate,
    freq: float,
    octaves: int,
) -> Coordinate:
    """Ridged fBm for mountain-chain features.

    Each sample n becomes (1 - |n|)^2, which peaks at the zero-crossings
    of the underlying field.

    Args:
        field: Noise source.
        x: X coordinate(s).
        y: Y coordinate(s).
        freq: Frequency of the first octave.
        octaves: Number of octaves.

    Returns:
        Value(s) in [0, 1].
    """
    value: Coordinate = 0.0
    amplitude = 1.0
    frequency = freq
    total_amplitude = 0.0

    for _ in range(octaves):
        n = field.sample(x * frequency, y * frequency)
        ridge = 1.0 - abs(n)
        value = value + amplitude * ridge * ridge
        total_amplitude += amplitude
        amplitude *= 0.5
        frequency *= 2.0

    return value / total_amplitude


def warped_fbm(
    field: GradientNoiseField,
    warp_field: GradientNoiseField,
    x: Coordinate,
    y: Coordinate,
    freq: float,
    octaves: int,
    warp_scale: float = 2.5,
) -> Coordinate:
    """Domain-warped fBm for organic, non-circular blobs.

    Offsets the sample coordinates with fBm from a second field before
    sampling the first.

    Args:
        field: Noise source that is sampled.
        warp_field: Noise source for the coordinate offsets.
        x: X coordinate(s).
        y: Y coordinate(s).
        freq: Frequency of the first octave.
        octaves: Number of octaves.
        warp_scale: Offset magnitude multiplier.

    Returns:
        Value(s) roughly in [-1, 1].
    """
    dx, dy = WARP_DECORRELATION
    wx = warp_scale * fbm(warp_field, x, y, freq, octaves)
    wy = warp_scale * fbm(warp_field, x + dx, y + dy, freq, octaves)
    return fbm(field, x + wx, y + wy, freq, octaves)


def to_unit_range(value: Coordinate) -> Coordinate:
    """Map a value from [-1, 1] to [0, 1]."""
    return (value + 1.0) * 0.5
