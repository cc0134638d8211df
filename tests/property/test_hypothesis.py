"""Property-based tests using Hypothesis."""
import pytest

pytest.importorskip("hypothesis")

import hypothesis.strategies as st  # noqa: E402
from hypothesis import given, settings  # noqa: E402

from virtfs import BytesVirtualFile, VirtualFileStore
from virtfs._glob import GlobMatcher
from virtfs._path import normalize_dir_path, normalize_path

segment = st.text(alphabet="abcdefgh.-_", min_size=1, max_size=6)
rel_paths = st.lists(segment, min_size=1, max_size=4).map("/".join)
raw_paths = st.text(alphabet="/\\abc. ", max_size=30)


@given(path=raw_paths)
@settings(max_examples=100)
def test_normalize_path_idempotent(path):
    normalized = normalize_path(path)
    assert normalize_path(normalized) == normalized
    assert normalized.startswith("/")
    assert not normalized.startswith("//")


@given(path=raw_paths)
@settings(max_examples=100)
def test_normalize_dir_path_shape(path):
    d = normalize_dir_path(path)
    assert d.startswith("/") and d.endswith("/")
    assert "//" not in d


@given(paths=st.lists(rel_paths, min_size=1, max_size=10, unique=True))
@settings(max_examples=50)
def test_added_paths_are_found_and_others_are_not(paths):
    store = VirtualFileStore()
    for p in paths:
        store.add(p, BytesVirtualFile(p.encode()))
    for p in paths:
        info = store.get_file_info(p)
        assert info.exists
        with info.create_read_stream() as s:
            assert s.read() == p.encode()
    assert not store.get_file_info("/zzz-never-added").exists


@given(paths=st.lists(rel_paths, min_size=1, max_size=15, unique=True))
@settings(max_examples=50)
def test_enumeration_sorted(paths):
    store = VirtualFileStore()
    for p in paths:
        store.add(p, BytesVirtualFile(b""))
    listed = list(store)
    assert listed == sorted(listed)
    assert listed == list(store)


@given(paths=st.lists(rel_paths, min_size=1, max_size=15, unique=True))
@settings(max_examples=50)
def test_root_listing_is_one_level_and_unique(paths):
    store = VirtualFileStore()
    for p in paths:
        store.add(p, BytesVirtualFile(b""))
    children = list(store.get_directory_contents("/"))
    dirs = [c.name for c in children if c.is_directory]
    files = [c.name for c in children if not c.is_directory]
    assert len(dirs) == len(set(dirs))
    assert all("/" not in name for name in dirs + files)
    expected_dirs = {normalize_path(p).split("/")[1] for p in paths if normalize_path(p).count("/") > 1}
    expected_files = {normalize_path(p)[1:] for p in paths if normalize_path(p).count("/") == 1}
    assert set(dirs) == expected_dirs
    assert set(files) == expected_files


@given(path=rel_paths)
@settings(max_examples=50)
def test_literal_pattern_matches_itself(path):
    assert GlobMatcher(path).match(path)
    assert GlobMatcher("**").match(path)
