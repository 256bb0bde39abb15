import logging
import sys
from logging.handlers import RotatingFileHandler
import os
from config.settings import VALID_LOG_LEVELS
from utils.exceptions import ConfigurationError


def setup_logging(log_dir="logs", level="INFO"):
    if level.upper() not in VALID_LOG_LEVELS:
        raise ConfigurationError(f"알 수 없는 로그 레벨: {level}")
    level = level.upper()

    # 로그 디렉토리 생성
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # 로거 설정
    logger = logging.getLogger("lotto_input")
    logger.setLevel(level)

    # 재호출 시 핸들러 중복 방지
    if logger.handlers:
        return logger

    # 파일 핸들러
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "lotto_input.log"),
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8"
    )
    file_handler.setLevel(level)

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # 포맷 설정
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    # 핸들러 추가
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
