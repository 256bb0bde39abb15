# utils/parsers.py
import re
from typing import List

from config.settings import LOTTO_NUMBER_DELIMITER, INT_MIN, INT_MAX

# 부호 하나와 ASCII 숫자만 허용 (int() 의 공백/밑줄/유니코드 숫자 허용은 배제)
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_to_int(text: str) -> int:
    """10진 정수 문자열을 int 로 변환

    Raises:
        ValueError: 정수 형식이 아니거나 32비트 정수 범위를 벗어난 경우
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"정수 형식이 아닙니다: {text!r}")

    number = int(text)
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"정수 범위({INT_MIN}~{INT_MAX})를 벗어났습니다: {text!r}")
    return number


def parse_delimited_ints(text: str, delimiter: str = LOTTO_NUMBER_DELIMITER) -> List[int]:
    """구분자로 나뉜 정수 목록을 순서대로 변환

    첫 번째 잘못된 토큰에서 ValueError 를 발생시킨다.
    """
    return [parse_to_int(token) for token in text.split(delimiter)]
