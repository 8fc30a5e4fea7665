"""Field generation for biome maps: elevation and vegetation."""

import logging
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from .config import ElevationConfig, VegetationConfig
from .noise import (
    Coordinate,
    GradientNoiseField,
    fbm,
    ridged_fbm,
    to_unit_range,
    warped_fbm,
)

logger = logging.getLogger(__name__)

SampleFn = Callable[[NDArray[np.float64], NDArray[np.float64]], Coordinate]


def build_normalized(
    cols: int,
    rows: int,
    sample_fn: SampleFn,
) -> NDArray[np.float32]:
    """Sample a function over every cell and rescale to [0, 1].

    ``sample_fn(col, row)`` receives broadcast coordinate grids of shape
    (rows, cols). A flat field (max == min) becomes all zeros.

    Args:
        cols: Grid width in cells.
        rows: Grid height in cells.
        sample_fn: Function of (col, row) coordinates.

    Returns:
        2D array of shape (rows, cols) in [0, 1].
    """
    row_grid, col_grid = np.meshgrid(
        np.arange(rows, dtype=np.float64),
        np.arange(cols, dtype=np.float64),
        indexing="ij",
    )
    raw = np.broadcast_to(
        np.asarray(sample_fn(col_grid, row_grid), dtype=np.float64),
        (rows, cols),
    )

    low = float(raw.min())
    high = float(raw.max())
    span = high - low
    if span == 0:
        logger.debug(f"Degenerate {cols}x{rows} field (constant {low:.4f})")
        span = 1.0

    return ((raw - low) / span).astype(np.float32)


def make_elevation(
    cols: int,
    rows: int,
    elevation_field: GradientNoiseField,
    mask_field: GradientNoiseField,
    config: ElevationConfig,
) -> NDArray[np.float32]:
    """Generate the normalized elevation field.

    Ridged noise gives mountain chains; a low-frequency fBm mask scaled to
    [0, 1] breaks them into separate ranges.

    Args:
        cols: Grid width in cells.
        rows: Grid height in cells.
        elevation_field: Noise source for the ridges.
        mask_field: Noise source for the mask.
        config: Elevation layer parameters.

    Returns:
        2D elevation array of shape (rows, cols) in [0, 1].
    """

    def sample(col: NDArray[np.float64], row: NDArray[np.float64]) -> Coordinate:
        ridged = ridged_fbm(
            elevation_field,
            col,
            row,
            config.ridged.frequency,
            config.ridged.octaves,
        )
        mask = to_unit_range(
            fbm(mask_field, col, row, config.mask.frequency, config.mask.octaves)
        )
        return ridged * mask

    return build_normalized(cols, rows, sample)


def make_vegetation(
    cols: int,
    rows: int,
    vegetation_field: GradientNoiseField,
    warp_field: GradientNoiseField,
    config: VegetationConfig,
) -> NDArray[np.float32]:
    """Generate the normalized vegetation field from domain-warped fBm.

    Args:
        cols: Grid width in cells.
        rows: Grid height in cells.
        vegetation_field: Noise source that is sampled.
        warp_field: Noise source for the warp offsets.
        config: Vegetation layer parameters.

    Returns:
        2D vegetation array of shape (rows, cols) in [0, 1].
    """
    return build_normalized(
        cols,
        rows,
        lambda col, row: warped_fbm(
            vegetation_field,
            warp_field,
            col,
            row,
            config.noise.frequency,
            config.noise.octaves,
            config.warp_scale,
        ),
    )
