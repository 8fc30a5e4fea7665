"""Biome classification from elevation, vegetation and user sliders.

Classification is an ordered list of rules evaluated top to bottom; the
first rule that matches decides the biome. Rule order is part of the
contract: swamp is only reachable below the swamp line once water has been
ruled out, snow only once the cell is known to be mountainous, and so on.
"""

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel

from ..biomes import Biome
from .config import GenerationParameters

SWAMP_VEGETATION = 0.35
FOREST_COVER = 0.50
GRASSLAND_CEILING = 0.45
LIGHT_FOREST_CEILING = 0.65


class BiomeThresholds(BaseModel, frozen=True):
    """Classification thresholds derived from the sliders."""

    water_line: float
    swamp_line: float
    hill_line: float
    mountain_line: float
    snow_line: float
    desert_vegetation: float
    badlands_cut: float
    green_boost: float

    @classmethod
    def from_params(cls, params: GenerationParameters) -> "BiomeThresholds":
        """Derive thresholds from slider values."""
        water_line = 0.12 + params.water * 0.30
        desert_vegetation = 0.20 + params.desert * 0.50
        return cls(
            water_line=water_line,
            swamp_line=water_line + 0.06 + params.swamp * 0.30,
            hill_line=0.60 - params.mountain * 0.50,
            mountain_line=0.75 - params.mountain * 0.50,
            snow_line=0.92 - params.snow * 0.30,
            desert_vegetation=desert_vegetation,
            badlands_cut=desert_vegetation * (0.5 + params.badlands),
            green_boost=params.green * 0.80,
        )

    def boost(self, vegetation: Any) -> Any:
        """Vegetation after the green slider is applied."""
        return vegetation + self.green_boost


Predicate = Callable[[BiomeThresholds, Any, Any], Any]


@dataclass(frozen=True)
class BiomeRule:
    """A single classification rule.

    ``applies(thresholds, elevation, boosted_vegetation)`` works on floats
    and on numpy arrays alike.
    """

    biome: Biome
    applies: Predicate
    description: str


BIOME_RULES: tuple[BiomeRule, ...] = (
    BiomeRule(
        Biome.WATER,
        lambda th, e, v: e < th.water_line,
        "below the water line",
    ),
    BiomeRule(
        Biome.SWAMP,
        lambda th, e, v: (e < th.swamp_line) & (v > SWAMP_VEGETATION),
        "low and wet",
    ),
    BiomeRule(
        Biome.SNOWY_MOUNTAINS,
        lambda th, e, v: (e >= th.mountain_line) & (e > th.snow_line) & (v < FOREST_COVER),
        "mountain above the snow line without forest",
    ),
    BiomeRule(
        Biome.MOUNTAINS_FOREST,
        lambda th, e, v: (e >= th.mountain_line) & (v > FOREST_COVER),
        "forested mountain",
    ),
    BiomeRule(
        Biome.MOUNTAINS,
        lambda th, e, v: e >= th.mountain_line,
        "mountain",
    ),
    BiomeRule(
        Biome.HILLS_FOREST,
        lambda th, e, v: (e >= th.hill_line) & (v > FOREST_COVER),
        "forested hills",
    ),
    BiomeRule(
        Biome.HILLS,
        lambda th, e, v: e >= th.hill_line,
        "hills",
    ),
    BiomeRule(
        Biome.BADLANDS,
        lambda th, e, v: (v < th.desert_vegetation) & (v < th.badlands_cut),
        "driest part of the dry band",
    ),
    BiomeRule(
        Biome.DESERT,
        lambda th, e, v: v < th.desert_vegetation,
        "dry band",
    ),
    BiomeRule(
        Biome.GRASSLAND,
        lambda th, e, v: v < GRASSLAND_CEILING,
        "sparse vegetation",
    ),
    BiomeRule(
        Biome.FOREST_LIGHT,
        lambda th, e, v: v < LIGHT_FOREST_CEILING,
        "moderate vegetation",
    ),
    BiomeRule(
        Biome.FOREST,
        lambda th, e, v: np.ones(np.shape(e), dtype=bool),
        "dense vegetation",
    ),
)


def classify(
    elevation: float,
    vegetation: float,
    params: GenerationParameters | None = None,
) -> Biome:
    """Classify a single cell.

    Sliders are not validated; behaviour outside [-0.5, 0.5] is whatever the
    threshold formulas give.

    Args:
        elevation: Normalized elevation in [0, 1].
        vegetation: Normalized vegetation in [0, 1].
        params: Slider values (defaults to all zero).

    Returns:
        The biome of the first matching rule.
    """
    thresholds = BiomeThresholds.from_params(params or GenerationParameters())
    boosted = thresholds.boost(vegetation)
    return next(
        rule.biome
        for rule in BIOME_RULES
        if rule.applies(thresholds, elevation, boosted)
    )


def classify_grid(
    elevation: NDArray[np.floating],
    vegetation: NDArray[np.floating],
    params: GenerationParameters | None = None,
) -> NDArray[np.uint8]:
    """Classify every cell of a grid.

    Evaluates the same rule list as ``classify``; ``np.select`` keeps the
    first matching rule per cell.

    Args:
        elevation: Elevation field in [0, 1].
        vegetation: Vegetation field in [0, 1], same shape.
        params: Slider values (defaults to all zero).

    Returns:
        Array of biome codes (see ``biome_value``) as uint8.
    """
    thresholds = BiomeThresholds.from_params(params or GenerationParameters())
    elev, veg = np.broadcast_arrays(
        np.asarray(elevation, dtype=np.float64),
        np.asarray(vegetation, dtype=np.float64),
    )
    boosted = thresholds.boost(veg)

    conditions = [
        np.broadcast_to(rule.applies(thresholds, elev, boosted), elev.shape)
        for rule in BIOME_RULES
    ]
    choices = [biome_value(rule.biome) for rule in BIOME_RULES]
    return np.select(conditions, choices).astype(np.uint8)


_BIOME_CODES: dict[Biome, int] = {biome: i for i, biome in enumerate(Biome)}
_CODE_BIOMES: dict[int, Biome] = {i: biome for biome, i in _BIOME_CODES.items()}


def biome_value(biome: Biome) -> int:
    """Convert a Biome to its uint8 storage code."""
    return _BIOME_CODES[biome]


def biome_value_to_type(value: int) -> Biome:
    """Convert a uint8 storage code back to a Biome."""
    return _CODE_BIOMES[int(value)]
