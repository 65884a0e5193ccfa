#!/usr/bin/env python3
"""ファイル探索のテスト"""
import os

import pytest

from spaces_uploader.errors import DiscoveryError
from spaces_uploader.utils.file_utils import FileScanner, compile_pattern


@pytest.fixture
def source(tmp_path):
    """テスト用のビルド出力ディレクトリ"""
    for relative in ["a.txt", "index.html", "img/b.png", "img/icons/c.png", "docs/readme.md", "docs/draft.tmp"]:
        path = tmp_path.joinpath(*relative.split("/"))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * 10)
    (tmp_path / "empty-dir").mkdir()
    return tmp_path


def relative_paths(files):
    return [f.relative_path.replace(os.sep, "/") for f in files]


def test_double_star_matches_everything(source):
    files = FileScanner(["**"]).find_files(str(source))
    assert relative_paths(files) == [
        "a.txt", "docs/draft.tmp", "docs/readme.md", "img/b.png", "img/icons/c.png", "index.html",
    ]


def test_only_regular_files_are_returned(source):
    files = FileScanner(["**"]).find_files(str(source))
    assert all(os.path.isfile(f.path) for f in files)
    assert "empty-dir" not in relative_paths(files)


def test_paths_start_with_source_folder(source):
    files = FileScanner(["**"]).find_files(str(source))
    assert all(f.path.startswith(str(source)) for f in files)
    assert all(f.size == 10 for f in files)


def test_single_star_stays_in_one_folder(source):
    assert relative_paths(FileScanner(["*.png"]).find_files(str(source))) == []
    assert relative_paths(FileScanner(["img/*.png"]).find_files(str(source))) == ["img/b.png"]


def test_double_star_slash_also_matches_root(source):
    files = FileScanner(["**/*.png", "**/*.txt"]).find_files(str(source))
    assert relative_paths(files) == ["a.txt", "img/b.png", "img/icons/c.png"]


def test_negated_patterns_exclude(source):
    files = FileScanner(["**", "!**/*.tmp", "!img/icons/**"]).find_files(str(source))
    assert relative_paths(files) == ["a.txt", "docs/readme.md", "img/b.png", "index.html"]


def test_no_match_returns_empty_list(source):
    assert FileScanner(["**/*.zip"]).find_files(str(source)) == []


def test_missing_folder_raises(tmp_path):
    with pytest.raises(DiscoveryError):
        FileScanner(["**"]).find_files(str(tmp_path / "missing"))


def test_file_as_source_raises(source):
    with pytest.raises(DiscoveryError):
        FileScanner(["**"]).find_files(str(source / "a.txt"))


@pytest.mark.parametrize("pattern", ["img/[a-z.png", "!"])
def test_malformed_pattern_raises(pattern):
    with pytest.raises(DiscoveryError):
        FileScanner([pattern])


def test_compile_pattern_character_classes():
    assert compile_pattern("file[0-9].txt").match("file1.txt")
    assert not compile_pattern("file[!0-9].txt").match("file1.txt")
    assert compile_pattern("file?.txt").match("fileA.txt")
    assert not compile_pattern("file?.txt").match("dir/file.txt")
    assert compile_pattern("./docs/*.md").match("docs/readme.md")
