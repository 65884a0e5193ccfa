"""S3アップロード実行クラス"""
from typing import Optional
from dataclasses import dataclass

from boto3.s3.transfer import TransferConfig
from ..errors import TransferError
from ..models.config import UploadOptions
from ..utils.logger import LoggerManager
from ..utils.messages import loc
from ..utils.progress import ProgressTracker
from ..utils.file_utils import FileInfo
from .content_types import ContentTypeResolver, resolve_content_type


@dataclass
class UploadResult:
    """アップロード結果（成功分のみ）"""
    file_path: str
    key: str
    size: int
    content_type: Optional[str] = None


def create_transfer_config(options: UploadOptions) -> TransferConfig:
    """UploadOptionsからTransferConfigを作成"""
    return TransferConfig(
        multipart_threshold=options.multipart_threshold,
        multipart_chunksize=options.multipart_chunksize,
        max_concurrency=options.max_concurrency,
        use_threads=options.use_threads,
    )


class UploadExecutor:
    """ファイルアップロードの実行"""

    def __init__(
        self,
        s3_client,
        options: UploadOptions,
        resolve: ContentTypeResolver = resolve_content_type,
    ):
        self.s3_client = s3_client
        self.options = options
        self.resolve = resolve
        self.logger = LoggerManager.get_logger()
        self.transfer_config = create_transfer_config(options)

    def upload_file(self, file_info: FileInfo, bucket: str, key: str, acl: str) -> UploadResult:
        """単一ファイルをアップロード

        失敗時はログを出して TransferError を送出する。
        """
        content_type = self.resolve(file_info.path)

        if content_type:
            self.logger.info(loc("UploadingFileTyped", file_info.path, key, content_type))
        else:
            self.logger.info(loc("UploadingFile", file_info.path, key))

        if self.options.dry_run:
            self.logger.info(loc("DryRun", file_info.path, bucket, key))
            return UploadResult(file_info.path, key, file_info.size, content_type)

        extra_args = {"ACL": acl}
        if content_type:
            extra_args["ContentType"] = content_type

        progress_tracker = None
        if self.options.enable_progress:
            progress_tracker = ProgressTracker(file_info.size, self.logger)

        try:
            with open(file_info.path, "rb") as body:
                self.s3_client.upload_fileobj(
                    Fileobj=body,
                    Bucket=bucket,
                    Key=key,
                    ExtraArgs=extra_args,
                    Callback=progress_tracker,
                    Config=self.transfer_config,
                )
        except Exception as e:
            self.logger.error(loc("FileUploadFailed", file_info.path, e))
            raise TransferError(file_info.path, key, e) from e

        self.logger.info(loc("FileUploadCompleted", file_info.path, key))
        return UploadResult(file_info.path, key, file_info.size, content_type)
