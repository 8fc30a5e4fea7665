"""Biome map generation configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

from .tiles import TilePoolSet

SLIDER_MIN = -0.5
SLIDER_MAX = 0.5


class GenerationParameters(BaseModel, frozen=True):
    """User sliders that shift the biome thresholds.

    Each slider is documented for [-0.5, 0.5]. Values outside that domain
    are accepted here; callers clamp with ``clamped()`` before classifying.
    """

    water: float = Field(default=0.0, description="Raises the water line")
    green: float = Field(default=0.0, description="Boosts vegetation")
    mountain: float = Field(default=0.0, description="Lowers hill and mountain lines")
    desert: float = Field(default=0.0, description="Raises the dry vegetation ceiling")
    swamp: float = Field(default=0.0, description="Widens the swamp band")
    badlands: float = Field(default=0.0, description="Share of desert that is badlands")
    snow: float = Field(default=0.0, description="Lowers the snow line")

    def out_of_range(self) -> list[str]:
        """Names of sliders outside [-0.5, 0.5]."""
        return [
            name
            for name, value in self.model_dump().items()
            if not SLIDER_MIN <= value <= SLIDER_MAX
        ]

    def clamped(self) -> "GenerationParameters":
        """Copy with every slider clamped to [-0.5, 0.5]."""
        return GenerationParameters(
            **{
                name: min(SLIDER_MAX, max(SLIDER_MIN, value))
                for name, value in self.model_dump().items()
            }
        )


class NoiseLayerConfig(BaseModel):
    """Frequency and octave count for one fractal noise layer."""

    frequency: float = Field(default=0.05, description="Base frequency per cell")
    octaves: int = Field(default=3, ge=1, description="Number of octaves")


class ElevationConfig(BaseModel):
    """Elevation field: ridged noise scaled by a low-frequency mask."""

    ridged: NoiseLayerConfig = Field(
        default_factory=lambda: NoiseLayerConfig(frequency=0.05, octaves=3)
    )
    mask: NoiseLayerConfig = Field(
        default_factory=lambda: NoiseLayerConfig(frequency=0.03, octaves=2)
    )


class VegetationConfig(BaseModel):
    """Vegetation field: domain-warped fBm."""

    noise: NoiseLayerConfig = Field(
        default_factory=lambda: NoiseLayerConfig(frequency=0.04, octaves=4)
    )
    warp_scale: float = Field(default=2.5, description="Warp offset scale in cells")


class GenerationConfig(BaseModel):
    """Complete biome map generation configuration."""

    seed: int | str | None = Field(
        default=None, description="Map seed; None picks one at random"
    )
    cols: int = Field(default=40, description="Grid width in cells")
    rows: int = Field(default=30, description="Grid height in cells")

    params: GenerationParameters = Field(default_factory=GenerationParameters)
    elevation: ElevationConfig = Field(default_factory=ElevationConfig)
    vegetation: VegetationConfig = Field(default_factory=VegetationConfig)
    tile_pools: Literal["default"] | TilePoolSet = Field(
        default="default", description="Built-in pools or a caller-supplied set"
    )
