"""アップロード進捗管理"""
import logging
import math
import threading

from .messages import loc


BYTE_UNITS = ["B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]


def format_bytes(size: int) -> str:
    """バイト数を読みやすい表記に変換（SI単位、有効数字3桁）"""
    if size < 1000:
        return f"{size} B"

    exponent = min(int(math.log10(size) // 3), len(BYTE_UNITS) - 1)
    value = float("%.3g" % (size / 1000 ** exponent))
    return f"{value:g} {BYTE_UNITS[exponent]}"


def format_percent(loaded: int, total: int) -> str:
    """切り捨てたパーセントを小数1桁で"""
    return f"{math.floor(loaded / total * 100):.1f}"


class ProgressTracker:
    """単一ファイルのアップロード進捗をログに出す"""

    def __init__(self, total_size: int, logger: logging.Logger):
        self.total_size = total_size
        self.logger = logger
        self.uploaded_size = 0
        self.lock = threading.Lock()

    def __call__(self, bytes_transferred: int):
        """boto3のコールバック関数として使用（転送スレッドから呼ばれる）"""
        with self.lock:
            self.uploaded_size += bytes_transferred
            self._log_progress()

    def _log_progress(self):
        if self.total_size == 0:
            return

        self.logger.info(
            loc(
                "FileUploadProgress",
                format_bytes(self.uploaded_size),
                format_bytes(self.total_size),
                format_percent(self.uploaded_size, self.total_size),
            )
        )
