#!/usr/bin/env python3
# api_server.py - API 서버 실행 스크립트
import uvicorn
from config.logging_config import setup_logging
from config.settings import LOG_DIR, LOG_LEVEL, API_HOST, API_PORT, verify_settings


def main():
    """API 서버 실행을 위한 진입점"""
    verify_settings()

    # 로깅 설정
    logger = setup_logging(LOG_DIR, LOG_LEVEL)
    logger.info("로또 입력 검증 API 서버 시작")

    # FastAPI 애플리케이션 실행
    uvicorn.run(
        "api.main:app",
        host=API_HOST,
        port=API_PORT,
        log_level=LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
