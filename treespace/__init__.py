"""treespace - in-memory namespace tree with path resolution and directory creation."""

from treespace.config import TreespaceConfig, load_config
from treespace.namespace import (
    DirectoryCreator,
    NamespaceContext,
    PathResolver,
    lookup,
    mkdir,
    split_path,
)

__version__ = "0.1.0"

__all__ = [
    "DirectoryCreator",
    "NamespaceContext",
    "PathResolver",
    "TreespaceConfig",
    "load_config",
    "lookup",
    "mkdir",
    "split_path",
]
