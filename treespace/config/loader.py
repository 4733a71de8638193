"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import TreespaceConfig


def load_config(cli_path: str | None = None) -> TreespaceConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./treespace.yaml"),
        Path.home() / ".treespace" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                raw = _expand_env_vars(raw)
                return TreespaceConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e
            except TypeError as e:
                raise ValueError(f"Invalid config in {path}: expected a mapping") from e

    return TreespaceConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `treespace config init`
DEFAULT_CONFIG_TEMPLATE = """\
# treespace.yaml

# Name and path bounds (longer input is truncated silently)
limits:
  path_max: 511                # working copy of the input path
  dir_name_max: 511            # directory prefix
  base_name_max: 63            # final component
  node_name_max: 63            # stored node name
  # max_nodes: 1024            # node capacity, root included (unbounded if unset)

# Output
output:
  show_tree: true
  color: true

# Logging
log_level: "warn"              # debug | info | warn | error
log_format: "text"             # text | json
"""
