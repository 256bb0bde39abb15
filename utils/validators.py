# utils/validators.py
"""로또 입력 유효성 검증

구입 금액, 당첨 번호, 보너스 번호 입력 문자열을 검사한다.
각 함수는 정해진 순서로 검사하고 첫 번째 실패에서 멈추며,
예외 대신 ValidationResult 를 반환한다.
"""
from typing import List, Optional
import logging

from config.settings import (
    MIN_NUMBER,
    MAX_NUMBER,
    NUMBERS_PER_DRAW,
    LOTTO_NUMBER_DELIMITER,
    EMPTY_SPACE,
)
from models.validation_result import ErrorKind, ValidationResult
from utils.parsers import parse_to_int, parse_delimited_ints

logger = logging.getLogger("lotto_input")


def validate_price(text: str) -> ValidationResult:
    """구입 금액 입력 검증 (금액 범위는 검사하지 않음)"""
    error = _check_empty(text) or _check_space(text)
    if error:
        return _reject("구입 금액", text, error)

    try:
        price = parse_to_int(text)
    except ValueError as e:
        return _reject("구입 금액", text, ErrorKind.NOT_INTEGER, e)

    return ValidationResult.ok(price)


def validate_winning_numbers(text: str) -> ValidationResult:
    """당첨 번호 입력 검증

    Returns:
        성공 시 입력 순서 그대로의 번호 리스트를 담은 결과
    """
    error = _check_empty(text) or _check_last_delimiter(text)
    if error:
        return _reject("당첨 번호", text, error)

    try:
        numbers = parse_delimited_ints(text)
    except ValueError as e:
        return _reject("당첨 번호", text, ErrorKind.NOT_INTEGER, e)

    error = (
        _check_length(numbers)
        or _check_unique(numbers)
        or _check_numbers_range(numbers)
    )
    if error:
        return _reject("당첨 번호", text, error)

    return ValidationResult.ok(numbers)


def validate_bonus(text: str, winning_numbers: List[int]) -> ValidationResult:
    """보너스 번호 입력 검증"""
    error = _check_empty(text) or _check_space(text)
    if error:
        return _reject("보너스 번호", text, error)

    try:
        bonus = parse_to_int(text)
    except ValueError as e:
        return _reject("보너스 번호", text, ErrorKind.NOT_INTEGER, e)

    if not _in_range(bonus):
        return _reject("보너스 번호", text, ErrorKind.OUT_OF_NUMBER_RANGE)

    if bonus in winning_numbers:
        return _reject("보너스 번호", text, ErrorKind.DUPLICATED_NUMBER)

    return ValidationResult.ok(bonus)


def _reject(field: str, text: str, kind: ErrorKind, cause: Optional[Exception] = None) -> ValidationResult:
    logger.debug(f"{field} 입력 거부 ({kind.name}): {text!r}")
    return ValidationResult.err(kind, cause)


def _in_range(number: int) -> bool:
    return MIN_NUMBER <= number <= MAX_NUMBER


def _check_empty(text: str) -> Optional[ErrorKind]:
    if not text:
        return ErrorKind.EMPTY_INPUT
    return None


def _check_space(text: str) -> Optional[ErrorKind]:
    if EMPTY_SPACE in text:
        return ErrorKind.SPACE_INCLUDED
    return None


def _check_last_delimiter(text: str) -> Optional[ErrorKind]:
    # 마지막 구분자 뒤의 빈 항목
    if text.endswith(LOTTO_NUMBER_DELIMITER):
        return ErrorKind.OUT_OF_LENGTH
    return None


def _check_length(numbers: List[int]) -> Optional[ErrorKind]:
    if len(numbers) != NUMBERS_PER_DRAW:
        return ErrorKind.OUT_OF_LENGTH
    return None


def _check_unique(numbers: List[int]) -> Optional[ErrorKind]:
    if len(set(numbers)) != len(numbers):
        return ErrorKind.DUPLICATED_NUMBER
    return None


def _check_numbers_range(numbers: List[int]) -> Optional[ErrorKind]:
    if not all(_in_range(num) for num in numbers):
        return ErrorKind.OUT_OF_NUMBER_RANGE
    return None
