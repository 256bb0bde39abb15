"""정수 파서 단위 테스트"""
import pytest
from utils.parsers import parse_to_int, parse_delimited_ints


class TestParseToInt:

    @pytest.mark.parametrize("text, expected", [
        ("0", 0),
        ("42", 42),
        ("-7", -7),
        ("+7", 7),
        ("007", 7),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ])
    def test_valid(self, text, expected):
        assert parse_to_int(text) == expected

    @pytest.mark.parametrize("text", ["", " 1", "1 ", "1_0", "1.0", "0x10", "٣", "-", "1-"])
    def test_invalid(self, text):
        """int() 가 허용하는 공백/밑줄/유니코드 숫자도 거부"""
        with pytest.raises(ValueError):
            parse_to_int(text)


class TestParseDelimitedInts:

    def test_keeps_order(self):
        assert parse_delimited_ints("3,1,2") == [3, 1, 2]

    def test_single_token(self):
        assert parse_delimited_ints("5") == [5]

    def test_custom_delimiter(self):
        assert parse_delimited_ints("1;2;3", delimiter=";") == [1, 2, 3]

    @pytest.mark.parametrize("text", ["1,,2", "1,2,", "1,a", ""])
    def test_fails_on_malformed_token(self, text):
        with pytest.raises(ValueError):
            parse_delimited_ints(text)


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_to_int_rejects_values_outside_32bit_range(text):
    """32비트 정수 범위를 벗어난 값은 형식 오류"""
    with pytest.raises(ValueError):
        parse_to_int(text)


def test_parse_delimited_ints_rejects_oversized_token():
    with pytest.raises(ValueError):
        parse_delimited_ints("1,2,3,4,5,2147483648")
