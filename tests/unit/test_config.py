"""설정 / 로깅 구성 단위 테스트"""
import logging
import pytest
from unittest.mock import MagicMock
import api_server
import cli_runner
from config import settings
from config.logging_config import setup_logging
from utils.exceptions import ConfigurationError


def test_domain_constants():
    assert settings.MIN_NUMBER == 1
    assert settings.MAX_NUMBER == 45
    assert settings.NUMBERS_PER_DRAW == 6
    assert settings.LOTTO_NUMBER_DELIMITER == ","
    assert settings.EMPTY_SPACE == " "
    assert settings.INT_MIN == -2147483648
    assert settings.INT_MAX == 2147483647


def test_verify_settings_defaults_pass(valid_settings):
    settings.verify_settings()


@pytest.mark.parametrize("name, value", [
    ("LOG_LEVEL", "LOUD"),
    ("API_PORT", 0),
    ("API_PORT", 70000),
    ("MAX_INPUT_ATTEMPTS", -1),
])
def test_verify_settings_rejects_bad_values(monkeypatch, valid_settings, name, value):
    monkeypatch.setattr(settings, name, value)

    with pytest.raises(ConfigurationError) as exc_info:
        settings.verify_settings()

    assert name in exc_info.value.message


def test_setup_logging_creates_log_file(tmp_path, clean_logger):
    log_dir = tmp_path / "logs"

    logger = setup_logging(str(log_dir), "DEBUG")
    logger.debug("테스트 로그")

    assert logger is clean_logger
    assert logger.level == logging.DEBUG
    assert (log_dir / "lotto_input.log").exists()


def test_setup_logging_accepts_lowercase_level(tmp_path, clean_logger):
    assert setup_logging(str(tmp_path), "warning").level == logging.WARNING


def test_setup_logging_does_not_duplicate_handlers(tmp_path, clean_logger):
    setup_logging(str(tmp_path))
    setup_logging(str(tmp_path))

    assert len(clean_logger.handlers) == 2


def test_setup_logging_rejects_unknown_level(tmp_path, clean_logger):
    """알 수 없는 로그 레벨은 ValueError 가 아닌 ConfigurationError"""
    with pytest.raises(ConfigurationError):
        setup_logging(str(tmp_path), "LOUD")

    assert clean_logger.handlers == []


def test_cli_runner_bad_log_level_raises_configuration_error(monkeypatch, valid_settings, clean_logger):
    """CLI 실행 시 잘못된 LOG_LEVEL 은 로깅 설정 전에 ConfigurationError"""
    monkeypatch.setattr(settings, "LOG_LEVEL", "LOUD")

    with pytest.raises(ConfigurationError) as exc_info:
        cli_runner.main(["price", "1"])

    assert "LOG_LEVEL" in exc_info.value.message
    assert clean_logger.handlers == []


def test_cli_runner_bad_imported_log_level_raises_configuration_error(monkeypatch, valid_settings, clean_logger):
    """러너에 전달된 레벨 값이 잘못되어도 ConfigurationError"""
    monkeypatch.setattr(cli_runner, "LOG_DIR", str(valid_settings))
    monkeypatch.setattr(cli_runner, "LOG_LEVEL", "LOUD")

    with pytest.raises(ConfigurationError):
        cli_runner.main(["price", "1"])


def test_api_server_bad_log_level_raises_configuration_error(monkeypatch, valid_settings, clean_logger):
    run = MagicMock()
    monkeypatch.setattr(api_server.uvicorn, "run", run)
    monkeypatch.setattr(settings, "LOG_LEVEL", "LOUD")

    with pytest.raises(ConfigurationError):
        api_server.main()

    run.assert_not_called()
