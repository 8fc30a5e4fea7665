"""Biome categories and their display properties."""

from enum import Enum


class Biome(str, Enum):
    """Terrain/vegetation categories assigned to grid cells."""

    WATER = "water"
    SWAMP = "swamp"
    GRASSLAND = "grassland"
    FOREST_LIGHT = "forestLight"
    FOREST = "forest"
    HILLS = "hills"
    HILLS_FOREST = "hillsForest"
    MOUNTAINS = "mountains"
    MOUNTAINS_FOREST = "mountainsForest"
    DESERT = "desert"
    BADLANDS = "badlands"
    SNOWY_MOUNTAINS = "snowyMountains"

    @property
    def mountainous(self) -> bool:
        """Whether this biome sits at or above the mountain line."""
        return self in _MOUNTAIN_BIOMES

    @property
    def elevated(self) -> bool:
        """Whether this biome sits at or above the hill line."""
        return self in _ELEVATED_BIOMES


_MOUNTAIN_BIOMES = frozenset({
    Biome.MOUNTAINS,
    Biome.MOUNTAINS_FOREST,
    Biome.SNOWY_MOUNTAINS,
})

_ELEVATED_BIOMES = _MOUNTAIN_BIOMES | frozenset({
    Biome.HILLS,
    Biome.HILLS_FOREST,
})


# Base tint per biome as "#rrggbb"
BIOME_TINTS: dict[Biome, str] = {
    Biome.WATER: "#5b8aa0",
    Biome.BADLANDS: "#89828c",
    Biome.SWAMP: "#667257",
    Biome.GRASSLAND: "#769f76",
    Biome.FOREST_LIGHT: "#7ba163",
    Biome.FOREST: "#576b4d",
    Biome.HILLS: "#75946a",
    Biome.HILLS_FOREST: "#758664",
    Biome.MOUNTAINS: "#878786",
    Biome.MOUNTAINS_FOREST: "#636363",
    Biome.DESERT: "#ebdcb0",
    Biome.SNOWY_MOUNTAINS: "#b3b3b3",
}


def biome_tint(biome: Biome, elevation: float) -> str:
    """Tint colour for a cell, brightened with elevation.

    Brightness ranges from 0.8 at elevation 0 to 1.2 at elevation 1;
    channels are clipped to 255.

    Args:
        biome: Cell biome.
        elevation: Normalized elevation in [0, 1].

    Returns:
        Hex colour string "#rrggbb".
    """
    base = BIOME_TINTS[biome]
    brightness = 0.8 + elevation * 0.4
    channels = (int(base[i:i + 2], 16) for i in (1, 3, 5))
    scaled = (min(255, max(0, round(c * brightness))) for c in channels)
    return "#" + "".join(f"{c:02x}" for c in scaled)
