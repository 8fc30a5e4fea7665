"""Tile pools and biome-to-tile resolution."""

from enum import Enum

import numpy as np
from pydantic import BaseModel, Field

from ..biomes import Biome

TILE_FOLDER = "assets/tiles"


class TileCategory(str, Enum):
    """Named tile pools a tile set may provide."""

    WATER = "water"
    VEGETATION = "vegetation"
    MOUNTAINS = "mountains"
    DESERT = "desert"
    SWAMP = "swamp"
    BADLANDS = "badlands"
    SNOW = "snow"
    OTHER = "other"


BIOME_CATEGORIES: dict[Biome, TileCategory] = {
    Biome.WATER: TileCategory.WATER,
    Biome.SWAMP: TileCategory.SWAMP,
    Biome.GRASSLAND: TileCategory.VEGETATION,
    Biome.FOREST_LIGHT: TileCategory.VEGETATION,
    Biome.FOREST: TileCategory.VEGETATION,
    Biome.HILLS: TileCategory.MOUNTAINS,
    Biome.HILLS_FOREST: TileCategory.MOUNTAINS,
    Biome.MOUNTAINS: TileCategory.MOUNTAINS,
    Biome.MOUNTAINS_FOREST: TileCategory.MOUNTAINS,
    Biome.DESERT: TileCategory.DESERT,
    Biome.BADLANDS: TileCategory.BADLANDS,
    Biome.SNOWY_MOUNTAINS: TileCategory.MOUNTAINS,
}

# Last-resort search order once the mapped pool and "other" are empty
FALLBACK_ORDER: tuple[TileCategory, ...] = (
    TileCategory.VEGETATION,
    TileCategory.WATER,
    TileCategory.MOUNTAINS,
    TileCategory.DESERT,
    TileCategory.SWAMP,
    TileCategory.BADLANDS,
    TileCategory.SNOW,
)

# Built-in tile file names per biome
BIOME_TILES: dict[Biome, list[str]] = {
    Biome.WATER: ["ocean.png", "ocean2.png", "waves.png"],
    Biome.SWAMP: [
        "hex-tile-swamp1.png", "hex-tile-swamp2.png", "hex-tile-swamp3.png",
        "swamp.png", "swamp2.png", "swampmeadows.png",
    ],
    Biome.GRASSLAND: [
        "hex-tile-grassland1.png", "hex-tile-grassland2.png",
        "hex-tile-grassland3.png", "hex-tile-grassland4.png",
        "meadow1.png",
    ],
    Biome.FOREST_LIGHT: [
        "hex-tile-forestlight1.png", "hex-tile-forestmixed1.png",
        "hex-tile-forestmixed2.png", "hex-tile-forestmixed3.png",
        "hex-tile-forestmixed4.png",
    ],
    Biome.FOREST: [
        "hex-tile-forest1.png", "hex-tile-forest2.png", "hex-tile-forest3.png",
        "hex-tile-forest4.png", "hex-tile-forest5.png",
        "hex-tile-evergreen1.png", "hex-tile-evergreen2.png",
        "hex-tile-evergreen3.png",
    ],
    Biome.HILLS: [
        "hex-tile-hills1.png", "hex-tile-hills2.png", "hex-tile-hills3.png",
        "hills.png", "hills2.png",
    ],
    Biome.HILLS_FOREST: [
        "hex-tile-hills-forest1.png", "hex-tile-hills-forest2.png",
        "hex-tile-hills-forest3.png",
        "hex-tile-hills-evergreen1.png", "hex-tile-hills-evergreen2.png",
        "hex-tile-hills-evergreen3.png",
    ],
    Biome.MOUNTAINS: [
        "hex-tile-mountains1.png", "hex-tile-mountains2.png",
        "hex-tile-mountains3.png", "hex-tile-mountains4.png",
        "mountains5.png", "mountains6.png", "mountains7.png",
        "mountains8.png", "mountains9.png",
    ],
    Biome.MOUNTAINS_FOREST: [
        "hex-tile-mountains-forest1.png", "hex-tile-mountains-forest2.png",
        "hex-tile-mountains-forest3.png",
        "hex-tile-mountains-evergreen1.png", "hex-tile-mountains-evergreen2.png",
        "hex-tile-mountains-evergreen3.png",
    ],
    Biome.DESERT: [
        "hex-tile-desert1.png", "hex-tile-desert2.png", "hex-tile-desert3.png",
        "desert.png", "desert3.png",
    ],
    Biome.BADLANDS: [
        "hex-tile-badlands1.png", "hex-tile-badlands2.png",
        "hex-tile-badlands3.png", "badlands.png",
    ],
    Biome.SNOWY_MOUNTAINS: ["snowymountains.png", "wintertrees.png"],
}

# Landmark tiles, used as the default "other" pool
SPECIAL_TILES: list[str] = [
    "crater.png", "crystals.png", "monolith.png", "skulls.png",
    "statue.png", "stones.png", "hut.png", "grasslandtower.png",
    "mountaindungeon.png", "mountainlake.png", "mountainruins.png",
    "valley.png", "tree.png", "canyon.png", "plateau.png", "drysoil.png",
]


class TilePoolSet(BaseModel):
    """Asset paths grouped by tile category.

    ``biomes`` optionally holds pools for individual biomes, which are
    preferred over the category pools.
    """

    water: list[str] = Field(default_factory=list)
    vegetation: list[str] = Field(default_factory=list)
    mountains: list[str] = Field(default_factory=list)
    desert: list[str] = Field(default_factory=list)
    swamp: list[str] = Field(default_factory=list)
    badlands: list[str] = Field(default_factory=list)
    snow: list[str] = Field(default_factory=list)
    other: list[str] = Field(default_factory=list)
    biomes: dict[Biome, list[str]] = Field(
        default_factory=dict, description="Per-biome pools, tried first"
    )

    def pool(self, category: TileCategory) -> list[str]:
        """Paths in a category pool."""
        return getattr(self, category.value)

    def is_empty(self) -> bool:
        """Whether no pool holds any path."""
        return not any(self.pool(c) for c in TileCategory) and not any(
            self.biomes.values()
        )


def default_tile_pools(folder: str = TILE_FOLDER) -> TilePoolSet:
    """Build the built-in tile set.

    Every category pool and every biome pool is non-empty.

    Args:
        folder: Directory prefix for the tile file names.

    Returns:
        TilePoolSet with category and per-biome pools.
    """
    biomes = {
        biome: [f"{folder}/{name}" for name in names]
        for biome, names in BIOME_TILES.items()
    }

    categories: dict[str, list[str]] = {c.value: [] for c in TileCategory}
    for biome, paths in biomes.items():
        if biome is Biome.SNOWY_MOUNTAINS:
            categories[TileCategory.SNOW.value].extend(paths)
        else:
            categories[BIOME_CATEGORIES[biome].value].extend(paths)
    categories[TileCategory.OTHER.value] = [f"{folder}/{name}" for name in SPECIAL_TILES]

    return TilePoolSet(**categories, biomes=biomes)


def category_for(biome: Biome, pools: TilePoolSet) -> TileCategory:
    """Category pool a biome draws from.

    Snowy mountains use the snow pool when the set provides one and the
    mountains pool otherwise.
    """
    if biome is Biome.SNOWY_MOUNTAINS and pools.snow:
        return TileCategory.SNOW
    return BIOME_CATEGORIES[biome]


def resolve_tile(
    biome: Biome,
    pools: TilePoolSet,
    rng: np.random.Generator | None = None,
) -> str | None:
    """Pick a tile path for a biome.

    Tries, in order: the biome's own pool, its category pool, the "other"
    pool, then the first non-empty pool in ``FALLBACK_ORDER``. Selection
    within the chosen pool is uniform.

    Args:
        biome: Biome to resolve.
        pools: Available tile pools.
        rng: Random source for the pick (system entropy if omitted).

    Returns:
        Tile path, or None when every pool is empty.
    """
    if rng is None:
        rng = np.random.default_rng()

    candidates = [
        pools.biomes.get(biome, []),
        pools.pool(category_for(biome, pools)),
        pools.other,
        *(pools.pool(c) for c in FALLBACK_ORDER),
    ]
    for pool in candidates:
        if pool:
            return pool[int(rng.integers(len(pool)))]
    return None
