"""Seeded biome map generation."""

from .biomes import BIOME_TINTS, Biome, biome_tint
from .config import find_config, list_configs, load_config
from .exceptions import (
    BiomeGenError,
    GenerationInProgressError,
    InvalidDimensionsError,
    InvalidSeedError,
    NoTileAvailableError,
)
from .terrain import (
    Cell,
    GenerationConfig,
    GenerationContext,
    GenerationParameters,
    GenerationResult,
    TilePoolSet,
    classify,
    generate_map,
)

__all__ = [
    # Biomes
    "Biome",
    "BIOME_TINTS",
    "biome_tint",
    # Configuration
    "GenerationConfig",
    "GenerationParameters",
    "TilePoolSet",
    "load_config",
    "find_config",
    "list_configs",
    # Generation
    "Cell",
    "GenerationContext",
    "GenerationResult",
    "classify",
    "generate_map",
    # Exceptions
    "BiomeGenError",
    "InvalidDimensionsError",
    "InvalidSeedError",
    "GenerationInProgressError",
    "NoTileAvailableError",
]
