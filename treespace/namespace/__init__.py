"""In-memory namespace tree: path resolution and directory creation."""

from treespace.namespace.context import NamespaceContext
from treespace.namespace.creator import DirectoryCreator
from treespace.namespace.models import (
    AllocationFailureError,
    DuplicateNameError,
    InvalidPathError,
    MissingSegmentError,
    MkdirResult,
    NamespaceError,
    Node,
    NodeKind,
    Resolution,
)
from treespace.namespace.resolver import PathResolver


def split_path(ctx: NamespaceContext, path: str | None) -> Resolution:
    """Convenience wrapper around PathResolver.resolve()."""
    return PathResolver(ctx).resolve(path)


def lookup(ctx: NamespaceContext, path: str | None) -> Node | None:
    """Convenience wrapper around PathResolver.lookup()."""
    return PathResolver(ctx).lookup(path)


def mkdir(ctx: NamespaceContext, path: str | None) -> MkdirResult:
    """Convenience wrapper around DirectoryCreator.create()."""
    return DirectoryCreator(ctx).create(path)


__all__ = [
    "AllocationFailureError",
    "DirectoryCreator",
    "DuplicateNameError",
    "InvalidPathError",
    "MissingSegmentError",
    "MkdirResult",
    "NamespaceContext",
    "NamespaceError",
    "Node",
    "NodeKind",
    "PathResolver",
    "Resolution",
    "lookup",
    "mkdir",
    "split_path",
]
