"""Project-level configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "tabexpr.yaml"

ALL_BINDING_GROUPS = [
    "array",
    "aggregate",
    "conditional",
    "datetime",
    "duration",
    "math",
    "string",
    "type",
]

DEFAULT_CONFIG: dict[str, Any] = {
    "discover_native_functions": True,
    "binding_groups": list(ALL_BINDING_GROUPS),
    "logging_fsync": False,
}


def load_config(project_dir: Path | None = None) -> dict[str, Any]:
    """Load configuration from ``tabexpr.yaml``, with defaults.

    Args:
        project_dir: Directory to look in; ``None`` returns the defaults.

    Returns:
        Merged configuration dict.
    """
    config = dict(DEFAULT_CONFIG)
    config["binding_groups"] = list(ALL_BINDING_GROUPS)
    if project_dir is None:
        return config
    config_path = Path(project_dir) / CONFIG_FILENAME
    if config_path.exists():
        user_config = yaml.safe_load(config_path.read_text()) or {}
        config.update(user_config)
    return config
