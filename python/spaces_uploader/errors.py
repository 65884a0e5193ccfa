"""アップロード処理の例外"""
from typing import Optional


class UploadError(Exception):
    """アップロード処理全体の基底例外"""


class ConfigurationError(UploadError, ValueError):
    """設定の不足・不正（アップロード開始前に検出）"""


class DiscoveryError(UploadError):
    """ソースフォルダの不在やパターン不正"""


class TransferError(UploadError):
    """個別ファイルのアップロード失敗"""

    def __init__(self, file_path: str, key: str, cause: Optional[BaseException] = None):
        self.file_path = file_path
        self.key = key
        self.cause = cause
        super().__init__(f"Failed to upload {file_path} to {key}: {cause}")
