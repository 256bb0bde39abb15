#!/usr/bin/env python3
# cli_runner.py - CLI 실행 스크립트
import sys
from config.logging_config import setup_logging
from config.settings import LOG_DIR, LOG_LEVEL, verify_settings
from cli.commands import CLI
from utils.exceptions import InputValidationError


def main(argv=None):
    """CLI 인터페이스 실행을 위한 진입점

    Raises:
        ConfigurationError: 환경 변수 설정이 잘못된 경우 (로깅 설정 전에 검증)
    """
    verify_settings()

    # 로깅 설정
    logger = setup_logging(LOG_DIR, LOG_LEVEL)
    logger.info("로또 입력 검증 CLI 시작")

    exit_code = 1
    try:
        exit_code = CLI().run(argv)
    except KeyboardInterrupt:
        logger.info("사용자에 의해 종료됨")
    except EOFError:
        print("[ERROR] 입력이 종료되었습니다.")
        logger.error("입력 스트림 종료 (EOF)")
    except InputValidationError as e:
        print(f"[ERROR] {e.message}")
        logger.error(f"입력 시도 횟수 초과: {e.kind.name}")
    except Exception as e:
        logger.exception(f"예상치 못한 오류 발생: {e}")
    finally:
        logger.info("로또 입력 검증 CLI 종료")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
