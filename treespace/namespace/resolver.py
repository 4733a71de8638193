"""Path splitting and directory-prefix resolution."""

from __future__ import annotations

import logging

from treespace.namespace.context import NamespaceContext
from treespace.namespace.models import (
    ROOT_MARKER,
    SEPARATOR,
    MissingSegmentError,
    Node,
    Resolution,
)

logger = logging.getLogger(__name__)


class PathResolver:
    """Splits a path into (directory prefix, final component) and walks the prefix."""

    def __init__(self, ctx: NamespaceContext) -> None:
        self.ctx = ctx

    def resolve(self, path: str | None) -> Resolution:
        """Find the node the final component of *path* belongs under.

        Empty and root-only paths resolve to the root with no final
        component. Absolute paths walk from the root, relative ones from
        the current directory. Trailing separators are ignored, and every
        string involved is truncated to its configured bound.

        Only the directory prefix has to exist; whether the final component
        exists is left to the caller.
        """
        if not path or path == ROOT_MARKER:
            return Resolution(base_name="", dir_name=ROOT_MARKER, parent=self.ctx.root)

        start = self.ctx.root if path.startswith(ROOT_MARKER) else self.ctx.current
        base_name, dir_name = self._split(path)

        if not dir_name or dir_name == ROOT_MARKER:
            return Resolution(base_name=base_name, dir_name=dir_name, parent=start)

        try:
            parent = self._walk(start, dir_name)
        except MissingSegmentError as e:
            logger.debug("resolution of %r stopped at %r", path, e.segment)
            return Resolution(base_name=base_name, dir_name=dir_name, error=e)
        return Resolution(base_name=base_name, dir_name=dir_name, parent=parent)

    def lookup(self, path: str | None) -> Node | None:
        """Return the existing directory *path* names, or None."""
        resolution = self.resolve(path)
        if resolution.parent is None:
            return None
        if not resolution.base_name:
            return resolution.parent
        return self.ctx.find_child(resolution.parent, resolution.base_name, kind="dir")

    def _split(self, path: str) -> tuple[str, str]:
        limits = self.ctx.limits
        work = path[: limits.path_max]

        # Drop trailing separators but keep a lone "/"
        while len(work) > 1 and work.endswith(SEPARATOR):
            work = work[:-1]

        idx = work.rfind(SEPARATOR)
        if idx == -1:
            return work[: limits.base_name_max], ""

        base_name = work[idx + 1 :][: limits.base_name_max]
        if idx == 0:
            return base_name, ROOT_MARKER
        return base_name, work[:idx][: limits.dir_name_max]

    def _walk(self, start: Node, dir_name: str) -> Node:
        cur = start
        for token in dir_name.split(SEPARATOR):
            if not token:
                continue
            found = self.ctx.find_child(cur, token, kind="dir")
            if found is None:
                raise MissingSegmentError(token)
            cur = found
        return cur
