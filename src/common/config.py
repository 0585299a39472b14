"""YAML config lookup."""

import os
from pathlib import Path
import yaml


def find_config_path(
    config_name: str | None,
    config_dir: Path,
    default_name: str = "prod",
    env_var: str | None = None,
) -> Path:
    """Resolve a config name to a YAML file.

    `config_name` may be a bare name looked up in `config_dir`, or a path
    ending in .yaml/.yml. When it is None the name comes from `env_var`,
    falling back to `default_name`.

    Raises:
        FileNotFoundError: If the resolved file does not exist
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    if config_name.endswith((".yaml", ".yml")):
        config_path = Path(config_name)
    else:
        config_path = config_dir / f"{config_name}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load a YAML mapping; an empty file is an empty dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}

