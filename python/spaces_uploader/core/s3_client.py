"""Spaces向けS3クライアント管理"""
import boto3
from typing import Optional
from botocore.config import Config as BotoConfig
from botocore.exceptions import NoCredentialsError
from ..models.config import SpacesConfig, UploadOptions
from ..utils.logger import LoggerManager


SPACES_ENDPOINT_TEMPLATE = "https://{region}.digitaloceanspaces.com"


def spaces_endpoint(region: str) -> str:
    """リージョン名からSpacesのエンドポイントURLを作る"""
    return SPACES_ENDPOINT_TEMPLATE.format(region=region.strip().lower())


class S3ClientManager:
    """S3クライアントの作成と管理"""

    def __init__(self, spaces_config: SpacesConfig, options: Optional[UploadOptions] = None):
        self.spaces_config = spaces_config
        self.options = options or UploadOptions()
        self.logger = LoggerManager.get_logger()
        self._client = None

    @property
    def endpoint_url(self) -> str:
        return self.spaces_config.endpoint_url or spaces_endpoint(self.spaces_config.region)

    def get_client(self):
        """S3クライアントを取得（必要に応じて作成）"""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """S3クライアントを作成"""
        # リトライとタイムアウトはbotocoreに任せる
        boto_config = BotoConfig(
            retries={"max_attempts": self.options.max_retries, "mode": "standard"},
            read_timeout=self.options.timeout_seconds,
        )

        try:
            s3_client = boto3.client(
                's3',
                region_name=self.spaces_config.region.strip().lower(),
                endpoint_url=self.endpoint_url,
                aws_access_key_id=self.spaces_config.access_key_id,
                aws_secret_access_key=self.spaces_config.secret_access_key,
                config=boto_config,
            )
            self.logger.info(f"S3 client created for endpoint {self.endpoint_url}")
            return s3_client

        except NoCredentialsError:
            self.logger.error("Spaces credentials not available.")
            raise
        except Exception as e:
            self.logger.error(f"Error creating S3 client: {e}")
            raise
