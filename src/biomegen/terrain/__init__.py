"""Procedural biome map generation package.

This package implements seeded gradient noise, fractal combinators,
elevation and vegetation fields, rule-based biome classification and
tile resolution.
"""

from .classification import BIOME_RULES, BiomeThresholds, classify, classify_grid
from .config import GenerationConfig, GenerationParameters
from .fields import build_normalized
from .generator import Cell, GenerationContext, GenerationResult, generate_map
from .noise import GradientNoiseField, fbm, ridged_fbm, warped_fbm
from .tiles import TileCategory, TilePoolSet, default_tile_pools, resolve_tile

__all__ = [
    "BIOME_RULES",
    "BiomeThresholds",
    "Cell",
    "GenerationConfig",
    "GenerationContext",
    "GenerationParameters",
    "GenerationResult",
    "GradientNoiseField",
    "TileCategory",
    "TilePoolSet",
    "build_normalized",
    "classify",
    "classify_grid",
    "default_tile_pools",
    "fbm",
    "generate_map",
    "resolve_tile",
    "ridged_fbm",
    "warped_fbm",
]
