# utils/exceptions.py
class LottoInputError(Exception):
    """로또 입력 처리 시스템의 기본 예외 클래스"""
    def __init__(self, message, original_error=None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

class ConfigurationError(LottoInputError):
    """설정 오류"""
    pass

class InputValidationError(LottoInputError):
    """사용자 입력 유효성 검증 오류

    하위 클래스마다 대응하는 ErrorKind 이름을 kind_name 으로 가진다.
    """
    kind_name = None

    @property
    def kind(self):
        from models.validation_result import ErrorKind
        return ErrorKind[self.kind_name]

class EmptyInputError(InputValidationError):
    """빈 입력"""
    kind_name = "EMPTY_INPUT"

class SpaceIncludedError(InputValidationError):
    """공백 문자 포함"""
    kind_name = "SPACE_INCLUDED"

class NotIntegerInputError(InputValidationError):
    """정수로 변환할 수 없는 입력"""
    kind_name = "NOT_INTEGER"

class OutOfLengthError(InputValidationError):
    """당첨 번호 개수 불일치"""
    kind_name = "OUT_OF_LENGTH"

class DuplicatedNumberError(InputValidationError):
    """중복 번호"""
    kind_name = "DUPLICATED_NUMBER"

class OutOfNumberRangeError(InputValidationError):
    """번호 범위(1~45) 이탈"""
    kind_name = "OUT_OF_NUMBER_RANGE"
