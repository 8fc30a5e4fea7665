"""Custom exceptions for biome map generation."""


class BiomeGenError(Exception):
    """Base exception for generation errors."""

    pass


class InvalidDimensionsError(BiomeGenError):
    """Raised when the requested grid has no cells."""

    pass


class GenerationInProgressError(BiomeGenError):
    """Raised when a context is reused while it is still generating."""

    pass


class NoTileAvailableError(BiomeGenError):
    """Raised when a caller requires a tile for every cell and one is missing."""

    pass


class InvalidSeedError(BiomeGenError):
    """Raised when an integer seed is outside the supported range."""

    pass
