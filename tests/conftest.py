"""Shared test fixtures for treespace."""

import pytest

from treespace.config.models import LimitsConfig, TreespaceConfig
from treespace.namespace import NamespaceContext


@pytest.fixture
def ctx():
    """A namespace holding only the root."""
    return NamespaceContext()


@pytest.fixture
def sample_ctx():
    """Root with directories a, a/b and b, plus a file a/notes.txt.

    /
    ├── a/
    │   ├── b/
    │   └── notes.txt
    └── b/
    """
    ns = NamespaceContext()
    a = ns.add_node(ns.root, "a")
    ns.add_node(a, "b")
    ns.add_node(a, "notes.txt", kind="file")
    ns.add_node(ns.root, "b")
    return ns


@pytest.fixture
def small_limits():
    return LimitsConfig(path_max=16, dir_name_max=8, base_name_max=4, node_name_max=4)


@pytest.fixture
def sample_config():
    return TreespaceConfig()
