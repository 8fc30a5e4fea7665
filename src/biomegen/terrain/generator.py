"""Main biome map generation orchestration."""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..biomes import Biome
from ..exceptions import (
    GenerationInProgressError,
    InvalidDimensionsError,
    NoTileAvailableError,
)
from .classification import biome_value, biome_value_to_type, classify_grid
from .config import GenerationConfig
from .fields import make_elevation, make_vegetation
from .noise import GradientNoiseField
from .seeds import (
    ELEVATION_MASK_OFFSET,
    ELEVATION_OFFSET,
    VEGETATION_OFFSET,
    VEGETATION_WARP_OFFSET,
    resolve_seed,
)
from .tiles import TilePoolSet, default_tile_pools, resolve_tile

logger = logging.getLogger(__name__)


@dataclass
class GenerationContext:
    """Per-caller state threaded through generation.

    Holds the random source for seed and tile choice, the cached built-in
    tile set, and the in-progress guard. The guard is checked and set under
    ``lock``, so a context shared between threads runs one generation at a
    time and rejects the others. Separate contexts never share state.
    """

    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    default_pools: TilePoolSet | None = None
    generating: bool = False
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @classmethod
    def seeded(cls, seed: int) -> "GenerationContext":
        """Context whose tile choices are reproducible."""
        return cls(rng=np.random.default_rng(seed))

    def tile_pools(self, config: GenerationConfig) -> TilePoolSet:
        """Tile set for a configuration, building the default set once."""
        if isinstance(config.tile_pools, TilePoolSet):
            return config.tile_pools
        if self.default_pools is None:
            self.default_pools = default_tile_pools()
        return self.default_pools


class Cell(BaseModel):
    """One classified grid cell."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    row: int
    col: int
    elevation: float
    vegetation: float
    biome: Biome
    tile_path: str | None


class GenerationResult:
    """Result of biome map generation."""

    def __init__(
        self,
        seed_used: int,
        seed_text: str | None,
        cols: int,
        rows: int,
        cells: list[Cell],
        elevation: NDArray[np.float32],
        vegetation: NDArray[np.float32],
    ):
        self.seed_used = seed_used
        self.seed_text = seed_text
        self.cols = cols
        self.rows = rows
        self.cells = cells
        self.elevation = elevation
        self.vegetation = vegetation

    def cell(self, row: int, col: int) -> Cell:
        """Cell at a grid position."""
        return self.cells[row * self.cols + col]

    @property
    def missing_tiles(self) -> list[Cell]:
        """Cells for which no tile was available."""
        return [c for c in self.cells if c.tile_path is None]

    def require_tiles(self) -> None:
        """Raise if any cell has no tile.

        Raises:
            NoTileAvailableError: If at least one cell has no tile.
        """
        missing = self.missing_tiles
        if missing:
            first = missing[0]
            raise NoTileAvailableError(
                f"{len(missing)} cells have no tile "
                f"(first: {first.biome.value} at row {first.row}, col {first.col})"
            )

    def biome_grid(self) -> NDArray[np.uint8]:
        """Biome codes as a (rows, cols) uint8 array."""
        codes = np.array([biome_value(c.biome) for c in self.cells], dtype=np.uint8)
        return codes.reshape(self.rows, self.cols)

    def biome_counts(self) -> dict[Biome, int]:
        """Number of cells per biome (biomes with no cells omitted)."""
        counts: dict[Biome, int] = {}
        for c in self.cells:
            counts[c.biome] = counts.get(c.biome, 0) + 1
        return counts

    def to_payload(self) -> dict[str, Any]:
        """Serializable output: resolved seed and row-major cells."""
        return {
            "seedUsed": self.seed_used,
            "cells": [c.model_dump(mode="json", by_alias=True) for c in self.cells],
        }


def generate_map(
    config: GenerationConfig,
    context: GenerationContext | None = None,
) -> GenerationResult:
    """Generate a biome map from configuration.

    Args:
        config: Generation configuration.
        context: Random source and caches (a fresh one if omitted).

    Returns:
        GenerationResult with one Cell per grid position.

    Raises:
        InvalidDimensionsError: If cols or rows is not positive.
        GenerationInProgressError: If the context is already generating.
        InvalidSeedError: If an integer seed is outside the supported range.
    """
    if config.cols <= 0 or config.rows <= 0:
        raise InvalidDimensionsError(
            f"Grid must have positive dimensions, got {config.cols}x{config.rows}"
        )

    if context is None:
        context = GenerationContext()
    with context.lock:
        if context.generating:
            raise GenerationInProgressError("Context is already generating a map")
        context.generating = True

    try:
        return _generate(config, context)
    finally:
        context.generating = False


def _generate(config: GenerationConfig, context: GenerationContext) -> GenerationResult:
    cols, rows = config.cols, config.rows
    seed, seed_text = resolve_seed(config.seed, context.rng)

    params = config.params
    out_of_range = params.out_of_range()
    if out_of_range:
        logger.warning(f"Clamping sliders outside [-0.5, 0.5]: {', '.join(out_of_range)}")
        params = params.clamped()

    logger.info(f"Generating {cols}x{rows} biome map with seed {seed}")

    # Stage A: noise sources
    logger.info("Stage A: Seeding noise sources...")
    elevation_noise = GradientNoiseField(seed + ELEVATION_OFFSET)
    mask_noise = GradientNoiseField(seed + ELEVATION_MASK_OFFSET)
    vegetation_noise = GradientNoiseField(seed + VEGETATION_OFFSET)
    warp_noise = GradientNoiseField(seed + VEGETATION_WARP_OFFSET)

    # Stage B: normalized fields (global min/max, so complete before classifying)
    logger.info("Stage B: Building elevation and vegetation fields...")
    elevation = make_elevation(cols, rows, elevation_noise, mask_noise, config.elevation)
    vegetation = make_vegetation(
        cols, rows, vegetation_noise, warp_noise, config.vegetation
    )

    # Stage C: classification and tile resolution
    logger.info("Stage C: Classifying cells...")
    codes = classify_grid(elevation, vegetation, params)
    pools = context.tile_pools(config)

    cells: list[Cell] = []
    for row in range(rows):
        for col in range(cols):
            biome = biome_value_to_type(codes[row, col])
            cells.append(
                Cell(
                    row=row,
                    col=col,
                    elevation=float(elevation[row, col]),
                    vegetation=float(vegetation[row, col]),
                    biome=biome,
                    tile_path=resolve_tile(biome, pools, context.rng),
                )
            )

    result = GenerationResult(
        seed_used=seed,
        seed_text=seed_text,
        cols=cols,
        rows=rows,
        cells=cells,
        elevation=elevation,
        vegetation=vegetation,
    )

    _log_biome_stats(result)
    return result


def _log_biome_stats(result: GenerationResult) -> None:
    """Log biome distribution and missing tiles."""
    total = len(result.cells)
    logger.info(f"Biome stats ({total:,} cells):")
    for biome, count in sorted(result.biome_counts().items(), key=lambda kv: -kv[1]):
        logger.info(f"  {biome.value}: {count:,} ({count / total * 100:.1f}%)")

    missing = len(result.missing_tiles)
    if missing:
        logger.warning(f"{missing:,} cells have no tile available")
