"""Spaces Uploader コアモジュール"""
from .s3_client import S3ClientManager
from .uploader import UploadExecutor, UploadResult
from .task_runner import TaskRunner
from .keys import normalize_key
from .content_types import resolve_content_type, content_type_strategy

__all__ = [
    'S3ClientManager',
    'UploadExecutor',
    'UploadResult',
    'TaskRunner',
    'normalize_key',
    'resolve_content_type',
    'content_type_strategy',
]
