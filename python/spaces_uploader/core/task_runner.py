"""アップロードタスクの実行"""
from typing import List

from ..errors import DiscoveryError
from ..models.config import Config
from ..utils.logger import LoggerManager
from ..utils.messages import loc
from ..utils.file_utils import FileScanner
from .content_types import content_type_strategy
from .keys import normalize_key
from .uploader import UploadExecutor, UploadResult
from .s3_client import S3ClientManager


class TaskRunner:
    """ソースフォルダのファイルを1つずつ順番にアップロード"""

    def __init__(self, config: Config, s3_client=None):
        self.config = config
        self.task = config.upload
        self.logger = LoggerManager.get_logger()

        try:
            self.file_scanner = FileScanner(self.task.contents)
        except DiscoveryError as e:
            self.logger.error(f"Invalid file pattern: {e}")
            raise

        # クライアントは1回の実行で1つだけ作り、全ファイルで使い回す
        if s3_client is None:
            s3_client = S3ClientManager(config.spaces, config.options).get_client()
        self.s3_client = s3_client

        self.executor = UploadExecutor(
            self.s3_client,
            config.options,
            content_type_strategy(self.task.infer_content_type, self.task.content_type),
        )

    def run(self) -> List[UploadResult]:
        """全ファイルをアップロード

        最初の失敗で中断し、TransferError を呼び出し元へ送出する。
        """
        task = self.task
        self.logger.info(
            loc("UploadingFiles", task.source_folder, task.target_label, task.bucket)
        )

        try:
            files = self.file_scanner.find_files(task.source_folder)
        except DiscoveryError as e:
            self.logger.error(f"File discovery failed: {e}")
            raise

        if not files:
            self.logger.info(loc("FileNotFound", task.source_folder))
            return []

        results: List[UploadResult] = []
        for file_info in files:
            key = normalize_key(
                file_info.path,
                task.source_folder,
                task.target_folder,
                task.flatten_folders,
            )
            results.append(
                self.executor.upload_file(file_info, task.bucket, key, task.acl)
            )

        self.logger.info(loc("TaskCompleted", len(results)))
        return results
