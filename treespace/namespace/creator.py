"""Directory creation on top of PathResolver."""

from __future__ import annotations

import logging

from treespace.namespace.context import NamespaceContext
from treespace.namespace.models import (
    ROOT_MARKER,
    AllocationFailureError,
    DuplicateNameError,
    InvalidPathError,
    MkdirResult,
    NamespaceError,
    Node,
)
from treespace.namespace.resolver import PathResolver

logger = logging.getLogger(__name__)


class DirectoryCreator:
    """Validates a path and appends a new directory node under its parent."""

    def __init__(self, ctx: NamespaceContext, resolver: PathResolver | None = None) -> None:
        self.ctx = ctx
        self.resolver = resolver or PathResolver(ctx)

    def create(self, path: str | None) -> MkdirResult:
        """Create a directory at *path*.

        Never raises for bad input: every failure comes back as
        ``MkdirResult.error`` with the tree left untouched.
        """
        try:
            node = self._create(path)
        except NamespaceError as e:
            logger.debug("mkdir %r rejected: %s", path, e.message)
            return MkdirResult(path=path, error=e)
        logger.info("created directory %s", self.ctx.path_of(node))
        return MkdirResult(path=path, node=node)

    def _create(self, path: str | None) -> Node:
        if path is None or path == ROOT_MARKER:
            raise InvalidPathError()

        resolution = self.resolver.resolve(path)
        if resolution.error is not None:
            raise resolution.error
        if not resolution.base_name:
            raise InvalidPathError()

        parent = resolution.parent
        name = resolution.base_name[: self.ctx.limits.node_name_max]

        # Any kind of entry blocks the name, not just directories
        if self.ctx.find_child(parent, name) is not None:
            raise DuplicateNameError(resolution.base_name)

        try:
            node = self.ctx.allocate(name, "dir", parent)
        except MemoryError as e:
            raise AllocationFailureError(name) from e
        self.ctx.attach(node)
        return node
