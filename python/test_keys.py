#!/usr/bin/env python3
"""オブジェクトキー正規化のテスト"""
import ntpath
import posixpath

import pytest

from spaces_uploader.core.keys import normalize_key


def test_keeps_folder_structure_under_target():
    files = ["/build/out/a.txt", "/build/out/img/b.png"]
    keys = [normalize_key(f, "/build/out", "release", False, posixpath) for f in files]
    assert keys == ["release/a.txt", "release/img/b.png"]


def test_flatten_keeps_only_file_name():
    files = ["/build/out/a.txt", "/build/out/img/b.png"]
    keys = [normalize_key(f, "/build/out", "release", True, posixpath) for f in files]
    assert keys == ["release/a.txt", "release/b.png"]


def test_without_target_folder_has_no_leading_separator():
    assert normalize_key("/build/out/img/b.png", "/build/out", None, False, posixpath) == "img/b.png"
    assert normalize_key("/build/out/img/b.png", "/build/out", "", False, posixpath) == "img/b.png"
    assert normalize_key("/build/out/img/b.png", "/build/out", None, True, posixpath) == "b.png"


def test_source_folder_with_trailing_separator():
    assert normalize_key("/build/out/img/b.png", "/build/out/", "release", False, posixpath) == "release/img/b.png"


def test_target_folder_with_leading_slash_is_not_kept():
    assert normalize_key("/build/out/a.txt", "/build/out", "/release", False, posixpath) == "release/a.txt"


def test_windows_separators_become_slashes():
    key = normalize_key(r"C:\build\out\img\icons\b.png", r"C:\build\out", r"release\v1", False, ntpath)
    assert key == "release/v1/img/icons/b.png"
    assert "\\" not in key

    flat = normalize_key(r"C:\build\out\img\icons\b.png", r"C:\build\out", "release", True, ntpath)
    assert flat == "release/b.png"


def test_is_deterministic():
    args = ("/build/out/img/b.png", "/build/out", "release", False, posixpath)
    assert normalize_key(*args) == normalize_key(*args)


def test_flatten_collides_on_same_file_name():
    first = normalize_key("/build/out/a/readme.md", "/build/out", "docs", True, posixpath)
    second = normalize_key("/build/out/a/b/c/readme.md", "/build/out", "docs", True, posixpath)
    assert first == second == "docs/readme.md"


def test_structure_preserving_keys_are_distinct():
    files = [
        "/build/out/readme.md",
        "/build/out/a/readme.md",
        "/build/out/a/b/readme.md",
        "/build/out/b/readme.md",
    ]
    keys = {normalize_key(f, "/build/out", "docs", False, posixpath) for f in files}
    assert len(keys) == len(files)


@pytest.mark.parametrize("target_folder", ["./release", "release//", "release/.", "a/../release"])
def test_target_folder_is_normalized(target_folder):
    assert normalize_key("/build/out/a.txt", "/build/out", target_folder, False, posixpath) == "release/a.txt"
    assert normalize_key("/build/out/img/b.png", "/build/out", target_folder, True, posixpath) == "release/b.png"


def test_windows_target_folder_is_normalized():
    key = normalize_key(r"C:\build\out\img\b.png", r"C:\build\out", "release\\.\\v1\\", False, ntpath)
    assert key == "release/v1/img/b.png"
