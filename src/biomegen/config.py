"""Generation configuration loading from TOML files."""

import tomllib
from pathlib import Path

from .terrain.config import GenerationConfig

CONFIGS_DIR = Path(__file__).parent / "configs"


def load_config(config_path: Path) -> GenerationConfig:
    """Load a generation configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed GenerationConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values have the wrong shape.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return GenerationConfig.model_validate(data)


def find_config(name: str, configs_dir: Path = CONFIGS_DIR) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains a path separator or ends with .toml
    2. {configs_dir}/{name}.toml

    Args:
        name: Config name or path.
        configs_dir: Directory holding named configs.

    Returns:
        Path to the config file.

    Raises:
        FileNotFoundError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {name}")

    config_path = configs_dir / f"{name}.toml"
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"Config '{name}' not found in {configs_dir}. "
        f"Available configs: {list_configs(configs_dir)}"
    )


def list_configs(configs_dir: Path = CONFIGS_DIR) -> list[str]:
    """List available config names."""
    if not configs_dir.exists():
        return []
    return sorted(p.stem for p in configs_dir.glob("*.toml"))
