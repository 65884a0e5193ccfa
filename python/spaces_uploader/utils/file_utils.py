"""ファイル探索のユーティリティ"""
import os
import re
from typing import List, Pattern, Tuple
from dataclasses import dataclass

from ..errors import DiscoveryError


@dataclass
class FileInfo:
    """ファイル情報"""
    path: str
    size: int
    relative_path: str

    @property
    def name(self) -> str:
        return os.path.basename(self.path)


def compile_pattern(pattern: str) -> Pattern:
    """globパターンを正規表現に変換

    `**` はディレクトリをまたぎ、`*` と `?` は1セグメント内のみマッチする。
    パスは `/` 区切りの相対パスとして比較する。
    """
    if os.sep != "/":
        pattern = pattern.replace(os.sep, "/")
    if pattern.startswith("./"):
        pattern = pattern[2:]

    parts = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            if pattern.startswith("**", i):
                i += 2
                if pattern.startswith("/", i):
                    i += 1
                    parts.append("(?:.*/)?")
                else:
                    parts.append(".*")
                continue
            parts.append("[^/]*")
        elif c == "?":
            parts.append("[^/]")
        elif c == "[":
            end = pattern.find("]", i + 2)
            if end == -1:
                raise DiscoveryError(f"Unterminated character class in pattern: {pattern}")
            body = pattern[i + 1:end].replace("\\", "\\\\")
            if body.startswith("!"):
                body = "^" + body[1:]
            elif body.startswith("^"):
                body = "\\" + body
            parts.append(f"[{body}]")
            i = end + 1
            continue
        else:
            parts.append(re.escape(c))
        i += 1

    try:
        return re.compile("(?s:" + "".join(parts) + r")\Z")
    except re.error as e:
        raise DiscoveryError(f"Malformed pattern {pattern}: {e}") from e


class FileScanner:
    """パターンに一致するファイルを探索"""

    def __init__(self, patterns: List[str]):
        self.includes, self.excludes = self._split_patterns(patterns)

    @staticmethod
    def _split_patterns(patterns: List[str]) -> Tuple[List[Pattern], List[Pattern]]:
        """`!` で始まるパターンを除外として分離"""
        includes: List[Pattern] = []
        excludes: List[Pattern] = []
        for pattern in patterns:
            if pattern.startswith("!"):
                negated = pattern[1:].strip()
                if not negated:
                    raise DiscoveryError(f"Empty negation pattern: {pattern!r}")
                excludes.append(compile_pattern(negated))
            else:
                includes.append(compile_pattern(pattern))
        return includes, excludes

    def matches(self, relative_path: str) -> bool:
        """相対パス（`/` 区切り）がパターンに一致するか"""
        if not any(p.match(relative_path) for p in self.includes):
            return False
        return not any(p.match(relative_path) for p in self.excludes)

    def find_files(self, source_folder: str) -> List[FileInfo]:
        """ディレクトリを再帰的にスキャンして一致するファイルを返す（パス順）"""
        if not os.path.isdir(source_folder):
            raise DiscoveryError(f"Source folder does not exist or is not a directory: {source_folder}")

        found: List[FileInfo] = []
        for root, dirs, files in os.walk(source_folder):
            for file in files:
                file_path = os.path.join(root, file)
                if not os.path.isfile(file_path):
                    continue

                relative_path = os.path.relpath(file_path, source_folder)
                if self.matches(relative_path.replace(os.sep, "/")):
                    found.append(FileInfo(
                        path=file_path,
                        size=os.path.getsize(file_path),
                        relative_path=relative_path
                    ))

        found.sort(key=lambda info: info.path)
        return found
