"""pytest共通フィクスチャ"""
import pytest

from spaces_uploader.models.config import LoggingConfig
from spaces_uploader.utils.logger import LoggerManager


@pytest.fixture(autouse=True)
def logger():
    """テストごとにロガーを初期化"""
    LoggerManager.reset()
    yield LoggerManager.setup(LoggingConfig(level="DEBUG"))
    LoggerManager.reset()


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.delenv("SPACES_ACCESS_KEY_ID", raising=False)
    monkeypatch.delenv("SPACES_SECRET_ACCESS_KEY", raising=False)
    return {"access_key_id": "AKIDEXAMPLE", "secret_access_key": "secret"}
