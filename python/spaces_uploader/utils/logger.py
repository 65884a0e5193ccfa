"""ロギング設定ユーティリティ"""
import logging
import os
from typing import List, Optional

from ..errors import ConfigurationError
from ..models.config import LoggingConfig


LOGGER_NAME = "spaces_uploader"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: str) -> int:
    """レベル名（DEBUG/INFO/...）をloggingの数値に変換"""
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


def create_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    """コンソールと（指定があれば）ファイルのハンドラー"""
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    return handlers


class LoggerManager:
    """アップローダー用ロガーの管理

    setup() は1回の実行につき1度だけ有効。level を渡すと設定ファイルの
    レベルより優先される（CLIの --verbose 用）。
    """

    _logger: Optional[logging.Logger] = None

    @classmethod
    def setup(cls, config: LoggingConfig, level: Optional[str] = None) -> logging.Logger:
        if cls._logger is not None:
            return cls._logger

        formatter = logging.Formatter(config.format, datefmt=DATE_FORMAT)
        handlers = create_handlers(config.file)
        for handler in handlers:
            handler.setFormatter(formatter)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(resolve_level(level or config.level))
        logger.handlers = handlers

        cls._logger = logger
        return logger

    @classmethod
    def get_logger(cls) -> logging.Logger:
        if cls._logger is None:
            raise RuntimeError("Logger not initialized. Call setup() first.")
        return cls._logger

    @classmethod
    def reset(cls):
        """ハンドラーを閉じて未設定状態に戻す"""
        if cls._logger is not None:
            for handler in cls._logger.handlers:
                handler.close()
            cls._logger.handlers = []
        cls._logger = None
