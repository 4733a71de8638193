"""Tests for PathResolver: splitting paths and walking directory prefixes."""

from __future__ import annotations

import pytest

from treespace.namespace import (
    MissingSegmentError,
    NamespaceContext,
    PathResolver,
    lookup,
    split_path,
)


def _child(ns: NamespaceContext, parent, name: str):
    found = ns.find_child(parent, name)
    assert found is not None, name
    return found


# ── Root and empty paths ─────────────────────────────────────────────


@pytest.mark.parametrize("path", ["", "/", None])
def test_root_and_empty_resolve_to_root(ctx, path):
    res = split_path(ctx, path)
    assert res.ok
    assert res.parent is ctx.root
    assert res.dir_name == "/"
    assert res.base_name == ""


def test_root_ignores_current_directory(sample_ctx):
    sample_ctx.chdir(_child(sample_ctx, sample_ctx.root, "a"))
    assert split_path(sample_ctx, "/").parent is sample_ctx.root
    assert split_path(sample_ctx, "").parent is sample_ctx.root


# ── Single-token paths ───────────────────────────────────────────────


@pytest.mark.parametrize("token", ["x", "notes", "a", "with space", "UPPER"])
def test_single_token_resolves_to_current(sample_ctx, token):
    a = _child(sample_ctx, sample_ctx.root, "a")
    sample_ctx.chdir(a)
    res = split_path(sample_ctx, token)
    assert res.parent is a
    assert res.dir_name == ""
    assert res.base_name == token


def test_single_token_at_root(ctx):
    res = split_path(ctx, "x")
    assert res.parent is ctx.root
    assert res.dir_name == ""
    assert res.base_name == "x"


# ── Absolute paths ───────────────────────────────────────────────────


def test_absolute_top_level(ctx):
    res = split_path(ctx, "/x")
    assert res.parent is ctx.root
    assert res.dir_name == "/"
    assert res.base_name == "x"


def test_absolute_nested(sample_ctx):
    a = _child(sample_ctx, sample_ctx.root, "a")
    b = _child(sample_ctx, a, "b")
    res = split_path(sample_ctx, "/a/b/c")
    assert res.parent is b
    assert res.dir_name == "/a/b"
    assert res.base_name == "c"


def test_absolute_ignores_current(sample_ctx):
    a = _child(sample_ctx, sample_ctx.root, "a")
    sample_ctx.chdir(a)
    res = split_path(sample_ctx, "/b/x")
    assert res.parent is _child(sample_ctx, sample_ctx.root, "b")


def test_existing_final_component_is_not_an_error(sample_ctx):
    res = split_path(sample_ctx, "/a/b")
    assert res.ok
    assert res.parent is _child(sample_ctx, sample_ctx.root, "a")
    assert res.base_name == "b"


# ── Relative paths ───────────────────────────────────────────────────


def test_relative_walks_from_current(sample_ctx):
    a = _child(sample_ctx, sample_ctx.root, "a")
    sample_ctx.chdir(a)
    res = split_path(sample_ctx, "b/c")
    assert res.parent is _child(sample_ctx, a, "b")
    assert res.dir_name == "b"
    assert res.base_name == "c"


def test_relative_does_not_fall_back_to_root(sample_ctx):
    sample_ctx.chdir(_child(sample_ctx, sample_ctx.root, "b"))
    res = split_path(sample_ctx, "a/x")
    assert not res.ok
    assert res.error.segment == "a"


def test_repeated_inner_separators_are_skipped(sample_ctx):
    res = split_path(sample_ctx, "/a//b/c")
    assert res.parent is _child(sample_ctx, _child(sample_ctx, sample_ctx.root, "a"), "b")
    assert res.dir_name == "/a//b"


# ── Trailing separators ──────────────────────────────────────────────


@pytest.mark.parametrize("path", ["/a/b", "a/b", "/x", "x", "/a/b/c"])
@pytest.mark.parametrize("trailer", ["/", "//", "///"])
def test_trailing_separators_equivalent(sample_ctx, path, trailer):
    plain = split_path(sample_ctx, path)
    padded = split_path(sample_ctx, path + trailer)
    assert padded.base_name == plain.base_name
    assert padded.dir_name == plain.dir_name
    assert padded.parent is plain.parent


@pytest.mark.parametrize("path", ["//", "///", "////"])
def test_only_separators_give_empty_final_component(ctx, path):
    res = split_path(ctx, path)
    assert res.parent is ctx.root
    assert res.base_name == ""
    assert res.dir_name == "/"


# ── Missing segments ─────────────────────────────────────────────────


def test_missing_segment_reports_leftmost(sample_ctx):
    res = split_path(sample_ctx, "/a/zz/yy/c")
    assert not res.ok
    assert res.parent is None
    assert isinstance(res.error, MissingSegmentError)
    assert res.error.segment == "zz"
    assert res.error.message == "ERROR: directory zz does not exist"


def test_missing_segment_first_level(ctx):
    ctx.add_node(ctx.root, "a")
    res = split_path(ctx, "/a/b/c")
    assert res.error.segment == "b"


def test_missing_segment_keeps_split_strings(ctx):
    res = split_path(ctx, "/q/r")
    assert res.dir_name == "/q"
    assert res.base_name == "r"


def test_files_are_not_traversed(sample_ctx):
    res = split_path(sample_ctx, "/a/notes.txt/x")
    assert not res.ok
    assert res.error.segment == "notes.txt"


def test_matching_is_case_sensitive(sample_ctx):
    res = split_path(sample_ctx, "/A/x")
    assert res.error.segment == "A"


def test_resolution_does_not_mutate(sample_ctx):
    before = len(sample_ctx)
    split_path(sample_ctx, "/a/zz/c")
    split_path(sample_ctx, "/a/b/c")
    assert len(sample_ctx) == before


# ── Truncation ───────────────────────────────────────────────────────


def test_final_component_truncated(small_limits):
    ns = NamespaceContext(small_limits)
    res = split_path(ns, "/abcdefgh")
    assert res.base_name == "abcd"
    assert res.dir_name == "/"


def test_directory_prefix_truncated(small_limits):
    ns = NamespaceContext(small_limits)
    res = split_path(ns, "abcdefghij/x")
    assert res.dir_name == "abcdefgh"
    assert res.error.segment == "abcdefgh"


def test_working_copy_truncated_before_split(small_limits):
    ns = NamespaceContext(small_limits)
    # Only the first 16 characters are considered: "/aaaaa/bbbbb/ccc"
    res = split_path(ns, "/aaaaa/bbbbb/cccccccccc/ddd")
    assert res.base_name == "ccc"
    assert res.dir_name == "/aaaaa/b"


def test_default_base_name_bound(ctx):
    long_name = "n" * 100
    res = split_path(ctx, "/" + long_name)
    assert res.base_name == "n" * 63


# ── Lookup ───────────────────────────────────────────────────────────


class TestLookup:
    def test_lookup_existing_directory(self, sample_ctx):
        a = _child(sample_ctx, sample_ctx.root, "a")
        assert lookup(sample_ctx, "/a/b") is _child(sample_ctx, a, "b")

    def test_lookup_root(self, sample_ctx):
        assert lookup(sample_ctx, "/") is sample_ctx.root
        assert lookup(sample_ctx, None) is sample_ctx.root

    def test_lookup_trailing_separator(self, sample_ctx):
        assert lookup(sample_ctx, "/a/") is _child(sample_ctx, sample_ctx.root, "a")

    def test_lookup_missing(self, sample_ctx):
        assert lookup(sample_ctx, "/a/zz") is None
        assert lookup(sample_ctx, "/zz/b") is None

    def test_lookup_file_is_none(self, sample_ctx):
        assert lookup(sample_ctx, "/a/notes.txt") is None

    def test_resolver_instance_reusable(self, sample_ctx):
        resolver = PathResolver(sample_ctx)
        assert resolver.lookup("a") is not None
        sample_ctx.chdir(resolver.lookup("a"))
        assert resolver.lookup("b") is not None
        assert resolver.lookup("a") is None
