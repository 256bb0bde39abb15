# config/settings.py
import os
from dotenv import load_dotenv
import logging
from utils.exceptions import ConfigurationError

# .env 파일 로드
load_dotenv()

logger = logging.getLogger("lotto_input")

# 로깅 설정
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# API 서버 설정
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# 입력 재시도 설정 (0 이면 무제한)
MAX_INPUT_ATTEMPTS = int(os.getenv("MAX_INPUT_ATTEMPTS", "0"))

# 로또 설정 (환경 변수로 바꿀 수 없는 도메인 상수)
MIN_NUMBER = 1
MAX_NUMBER = 45
NUMBERS_PER_DRAW = 6
LOTTO_NUMBER_DELIMITER = ","
EMPTY_SPACE = " "

# 정수 입력 허용 범위 (32비트 부호 있는 정수)
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def verify_settings():
    """환경 변수 값 검증"""
    errors = []

    if LOG_LEVEL not in VALID_LOG_LEVELS:
        errors.append(f"LOG_LEVEL={LOG_LEVEL} (허용값: {', '.join(VALID_LOG_LEVELS)})")

    if not 0 < API_PORT < 65536:
        errors.append(f"API_PORT={API_PORT} (1~65535 사이여야 합니다)")

    if MAX_INPUT_ATTEMPTS < 0:
        errors.append(f"MAX_INPUT_ATTEMPTS={MAX_INPUT_ATTEMPTS} (0 이상이어야 합니다)")

    if errors:
        error_msg = f"잘못된 환경 변수 설정: {'; '.join(errors)}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    logger.info("환경 변수 설정이 유효합니다.")
