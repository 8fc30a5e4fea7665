"""Seed resolution and per-channel seed derivation."""

import numpy as np

from ..exceptions import InvalidSeedError

# Per-channel offsets from the resolved map seed
ELEVATION_OFFSET = 0
VEGETATION_OFFSET = 1
VEGETATION_WARP_OFFSET = 2
ELEVATION_MASK_OFFSET = 99

RANDOM_SEED_LIMIT = 999_999

# Largest integer seed magnitude that float arithmetic represents exactly
MAX_SEED = 2**53 - 1


def hash_seed_text(text: str) -> int:
    """Reduce a seed string to an integer.

    Sums UTF-16 code units weighted by their 1-based position. Anagrams of
    equal weight collide; any string still yields a usable map.

    Args:
        text: Seed string.

    Returns:
        Non-negative integer seed.
    """
    units = np.frombuffer(text.encode("utf-16-le"), dtype="<u2").astype(np.int64)
    weights = np.arange(1, len(units) + 1, dtype=np.int64)
    return int(np.dot(units, weights))


def random_seed_text(rng: np.random.Generator) -> str:
    """Pick a random decimal seed string in [0, 999999)."""
    return str(int(rng.integers(0, RANDOM_SEED_LIMIT)))


def resolve_seed(
    seed: int | str | None,
    rng: np.random.Generator,
) -> tuple[int, str | None]:
    """Resolve a user seed to the integer used for noise fields.

    Integers are used as-is. Strings are hashed. A missing or empty seed is
    replaced by a random decimal string, which is then hashed.

    Args:
        seed: User-supplied seed.
        rng: Random source used when a seed must be chosen.

    Returns:
        Tuple of (integer seed, seed string that was hashed or None).

    Raises:
        InvalidSeedError: If an integer seed is outside [-MAX_SEED, MAX_SEED].
    """
    if isinstance(seed, int):
        if abs(seed) > MAX_SEED:
            raise InvalidSeedError(
                f"Integer seed must be within +/-{MAX_SEED}, got {seed}"
            )
        return seed, None
    text = seed or random_seed_text(rng)
    return hash_seed_text(text), text
