"""Command-line interface for biome map generation."""

import argparse
import json
import logging
import sys
import time
import tomllib
from pathlib import Path

SLIDERS = ("water", "green", "mountain", "desert", "swamp", "badlands", "snow")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the ``biomegen`` command."""
    parser = argparse.ArgumentParser(
        description="Generate a procedural biome map"
    )
    parser.add_argument(
        "--config", "-c", type=str, default=None,
        help="Config name in configs/ or path to a TOML file",
    )
    parser.add_argument("--cols", type=int, default=None, help="Grid width in cells")
    parser.add_argument("--rows", type=int, default=None, help="Grid height in cells")
    seed = parser.add_mutually_exclusive_group()
    seed.add_argument("--seed", type=str, default=None, help="Seed text (hashed)")
    seed.add_argument(
        "--seed-value", type=int, default=None,
        help="Integer seed used as-is (e.g. a previous seedUsed)",
    )
    for name in SLIDERS:
        parser.add_argument(
            f"--{name}", type=float, default=None,
            help=f"{name.capitalize()} slider in [-0.5, 0.5]",
        )
    parser.add_argument(
        "--tile-seed", type=int, default=None,
        help="Seed for tile choice (random if omitted)",
    )
    parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Write the map as JSON here (stdout if omitted)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for biome map generation."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    from pydantic import ValidationError

    from ..config import find_config, load_config
    from ..exceptions import BiomeGenError
    from .config import GenerationConfig
    from .generator import GenerationContext, generate_map

    try:
        config = (
            load_config(find_config(args.config)) if args.config else GenerationConfig()
        )
    except (FileNotFoundError, tomllib.TOMLDecodeError, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    updates: dict = {}
    if args.cols is not None:
        updates["cols"] = args.cols
    if args.rows is not None:
        updates["rows"] = args.rows
    if args.seed is not None:
        updates["seed"] = args.seed
    if args.seed_value is not None:
        updates["seed"] = args.seed_value
    sliders = {name: getattr(args, name) for name in SLIDERS if getattr(args, name) is not None}
    if sliders:
        updates["params"] = config.params.model_copy(update=sliders)
    config = config.model_copy(update=updates)

    context = (
        GenerationContext.seeded(args.tile_seed)
        if args.tile_seed is not None
        else GenerationContext()
    )

    start_time = time.time()
    try:
        result = generate_map(config, context)
    except BiomeGenError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    gen_time = time.time() - start_time

    payload = json.dumps(result.to_payload())
    if args.output is None:
        print(payload)
        return 0

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(payload)

    print(f"Generated {config.cols}x{config.rows} map with seed {result.seed_used} "
          f"in {gen_time:.2f}s")
    for biome, count in sorted(result.biome_counts().items(), key=lambda kv: -kv[1]):
        print(f"  {biome.value}: {count}")
    if result.missing_tiles:
        print(f"  (no tile for {len(result.missing_tiles)} cells)")
    print(f"Saved to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
