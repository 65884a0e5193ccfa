"""ローカルパスからオブジェクトキーを求める"""
import os
from typing import Optional


def normalize_key(
    file_path: str,
    source_folder: str,
    target_folder: Optional[str] = None,
    flatten: bool = False,
    pathmod=os.path,
) -> str:
    """ファイルパスを `/` 区切りのオブジェクトキーに変換

    file_path は source_folder で始まっている前提で、先頭の source_folder を
    文字数分だけ取り除いて相対パスとする。flatten の場合はファイル名のみを使う。
    pathmod にはホストのパスモジュール（os.path / ntpath / posixpath）を渡す。
    """
    relative_path = file_path[len(source_folder):]
    if relative_path.startswith(pathmod.sep):
        relative_path = relative_path[1:]

    if flatten:
        name = pathmod.basename(file_path)
    else:
        name = relative_path

    # `./release` や `release//` も同じキーになるよう正規化する
    if target_folder:
        target_path = pathmod.normpath(pathmod.join(target_folder, name))
    else:
        target_path = name

    return target_path.replace(pathmod.sep, "/").lstrip("/")
