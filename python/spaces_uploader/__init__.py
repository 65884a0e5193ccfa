"""Spaces Uploader パッケージ"""
from typing import List
from .errors import UploadError, ConfigurationError, DiscoveryError, TransferError
from .models.config import Config
from .utils.logger import LoggerManager
from .core.task_runner import TaskRunner
from .core.uploader import UploadResult


class SpacesUploader:
    """DigitalOcean Spacesアップローダーのメインクラス"""

    def __init__(self, config_path: str = "config.json", verbose: bool = False):
        # 設定を読み込み
        self.config = Config.from_file(config_path)

        # ロガーをセットアップ
        self.logger = LoggerManager.setup(
            self.config.logging, level="DEBUG" if verbose else None
        )
        self.logger.info("Spaces Uploader initialized")

        # タスクランナーを作成
        self.task_runner = TaskRunner(self.config)

    def run(self) -> List[UploadResult]:
        """アップロードを実行"""
        return self.task_runner.run()


__all__ = [
    'SpacesUploader',
    'Config',
    'UploadResult',
    'UploadError',
    'ConfigurationError',
    'DiscoveryError',
    'TransferError',
]
