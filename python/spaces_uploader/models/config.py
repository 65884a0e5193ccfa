"""設定管理用のデータクラス"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
import json
import os

from ..errors import ConfigurationError


# DigitalOcean Spaces が受け付ける canned ACL
VALID_ACLS = ("private", "public-read")

ACCESS_KEY_ENV = "SPACES_ACCESS_KEY_ID"
SECRET_KEY_ENV = "SPACES_SECRET_ACCESS_KEY"


def _check_text(value, name: str, required: bool = True):
    """文字列項目の型と空文字をチェック"""
    if value is None and not required:
        return
    if not isinstance(value, str):
        raise ConfigurationError(f"{name} must be a string, got {type(value).__name__}")
    if required and not value.strip():
        raise ConfigurationError(f"{name} cannot be empty")


@dataclass
class LoggingConfig:
    """ロギング設定"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class SpacesConfig:
    """Spaces 接続設定"""
    region: str
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    endpoint_url: Optional[str] = None  # S3互換ストレージ向けの上書き

    def __post_init__(self):
        _check_text(self.region, "region")
        _check_text(self.access_key_id, "access_key_id", required=False)
        _check_text(self.secret_access_key, "secret_access_key", required=False)
        _check_text(self.endpoint_url, "endpoint_url", required=False)

        # ファイルに無ければ環境変数から
        if not self.access_key_id:
            self.access_key_id = os.environ.get(ACCESS_KEY_ENV)
        if not self.secret_access_key:
            self.secret_access_key = os.environ.get(SECRET_KEY_ENV)

        if not self.access_key_id or not self.secret_access_key:
            raise ConfigurationError(
                "Spaces credentials are missing. Set access_key_id/secret_access_key "
                f"in the config file or export {ACCESS_KEY_ENV} and {SECRET_KEY_ENV}"
            )


@dataclass
class UploadOptions:
    """アップロードオプション"""
    multipart_threshold: int = 8 * 1024 * 1024  # 8MB
    multipart_chunksize: int = 8 * 1024 * 1024  # 8MB
    max_concurrency: int = 4
    use_threads: bool = True
    max_retries: int = 3
    timeout_seconds: int = 300
    dry_run: bool = False
    enable_progress: bool = True


@dataclass
class UploadTask:
    """アップロード対象と配置先"""
    source_folder: str
    bucket: str

    contents: Union[List[str], str] = field(default_factory=lambda: ["**"])
    target_folder: Optional[str] = None
    acl: str = "private"
    flatten_folders: bool = False
    content_type: Optional[str] = None  # 指定時は常にこれを使う
    infer_content_type: bool = True

    def __post_init__(self):
        _check_text(self.bucket, "bucket")
        _check_text(self.source_folder, "source_folder")
        _check_text(self.target_folder, "target_folder", required=False)
        _check_text(self.content_type, "content_type", required=False)
        self.source_folder = os.path.abspath(self.source_folder)

        if self.acl not in VALID_ACLS:
            raise ConfigurationError(
                f"Invalid acl: {self.acl}. Must be one of {', '.join(VALID_ACLS)}"
            )

        # パイプラインの複数行入力をそのまま受け付ける
        if isinstance(self.contents, str):
            self.contents = self.contents.splitlines()
        if not isinstance(self.contents, list) or not all(isinstance(p, str) for p in self.contents):
            raise ConfigurationError("contents must be a string or a list of strings")
        self.contents = [p.strip() for p in self.contents if p and p.strip()]
        if not self.contents:
            raise ConfigurationError("contents must contain at least one pattern")

    @property
    def target_label(self) -> str:
        return self.target_folder if self.target_folder else "root"


@dataclass
class Config:
    """メイン設定クラス"""
    logging: LoggingConfig
    spaces: SpacesConfig
    options: UploadOptions
    upload: UploadTask

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """辞書から設定を組み立てる"""
        for section in ("spaces", "upload"):
            if section not in data:
                raise ConfigurationError(f"Missing '{section}' section in configuration")

        try:
            return cls(
                logging=LoggingConfig(**data.get("logging", {})),
                spaces=SpacesConfig(**data["spaces"]),
                options=UploadOptions(**data.get("options", {})),
                upload=UploadTask(**data["upload"]),
            )
        except TypeError as e:
            # 未知のキーや必須項目の欠落
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_file(cls, config_path: str) -> 'Config':
        """設定ファイルから読み込み"""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file {config_path} not found.")

        try:
            with open(config_path, "r", encoding="utf-8") as file:
                data = json.load(file)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Error decoding JSON from {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration root must be an object: {config_path}")

        return cls.from_dict(data)
