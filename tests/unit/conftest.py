"""Unit tests configuration

로깅/설정을 건드리는 테스트를 위한 pytest fixtures를 제공합니다.
"""

import logging
import pytest
from config import settings


@pytest.fixture
def clean_logger():
    """lotto_input 로거 핸들러 초기화 픽스처"""
    logger = logging.getLogger("lotto_input")
    saved = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()

    yield logger

    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved
    logger.setLevel(saved_level)


@pytest.fixture
def valid_settings(monkeypatch, tmp_path):
    """유효한 기본 설정값 픽스처 (로그는 임시 디렉토리에 기록)"""
    monkeypatch.setattr(settings, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(settings, "API_PORT", 8000)
    monkeypatch.setattr(settings, "MAX_INPUT_ATTEMPTS", 0)
    return tmp_path / "logs"
