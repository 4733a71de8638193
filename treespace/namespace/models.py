"""Data models for the namespace tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

NodeKind = Literal["dir", "file"]

ROOT_MARKER = "/"
SEPARATOR = "/"


@dataclass
class Node:
    """One entry in the namespace. Children are node ids in insertion order."""

    node_id: int
    name: str
    kind: NodeKind
    parent_id: int | None = None
    children: list[int] = field(default_factory=list)

    @property
    def is_dir(self) -> bool:
        return self.kind == "dir"


# ── Errors ───────────────────────────────────────────────────────────


class NamespaceError(Exception):
    """Base class for namespace failures. ``message`` is user-facing."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidPathError(NamespaceError):
    def __init__(self) -> None:
        super().__init__("MKDIR ERROR: no path provided")


class MissingSegmentError(NamespaceError):
    """An intermediate directory of the prefix does not exist."""

    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"ERROR: directory {segment} does not exist")


class DuplicateNameError(NamespaceError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"MKDIR ERROR: directory {name} already exists")


class AllocationFailureError(NamespaceError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"MKDIR ERROR: cannot allocate node {name}")


# ── Results ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Resolution:
    """Outcome of splitting a path and walking its directory prefix.

    ``base_name`` and ``dir_name`` are always set, even when the walk fails.
    ``parent`` is the node the final component belongs under, or None when
    a prefix segment is missing (see ``error``).
    """

    base_name: str
    dir_name: str
    parent: Node | None = None
    error: MissingSegmentError | None = None

    @property
    def ok(self) -> bool:
        return self.parent is not None


@dataclass(frozen=True)
class MkdirResult:
    """Outcome of a single mkdir call."""

    path: str | None
    node: Node | None = None
    error: NamespaceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error.message
        return f"MKDIR SUCCESS: node {self.path} successfully created"
