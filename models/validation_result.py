# models/validation_result.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from utils.exceptions import (
    InputValidationError,
    EmptyInputError,
    SpaceIncludedError,
    NotIntegerInputError,
    OutOfLengthError,
    DuplicatedNumberError,
    OutOfNumberRangeError,
)


class ErrorKind(Enum):
    """입력 검증 실패 유형"""
    EMPTY_INPUT = "입력값이 비어 있습니다."
    SPACE_INCLUDED = "입력값에 공백이 포함되어 있습니다."
    NOT_INTEGER = "정수가 아닌 값이 입력되었습니다."
    OUT_OF_LENGTH = "로또 번호는 6개를 입력해야 합니다."
    DUPLICATED_NUMBER = "중복된 번호가 있습니다."
    OUT_OF_NUMBER_RANGE = "로또 번호는 1부터 45 사이의 숫자여야 합니다."

    @property
    def message(self) -> str:
        return self.value

    @property
    def exception_class(self):
        return _EXCEPTIONS[self]

    def to_exception(self, original_error: Optional[Exception] = None) -> InputValidationError:
        """실패 유형에 대응하는 예외 객체 생성"""
        return self.exception_class(self.message, original_error)


_EXCEPTIONS = {
    ErrorKind.EMPTY_INPUT: EmptyInputError,
    ErrorKind.SPACE_INCLUDED: SpaceIncludedError,
    ErrorKind.NOT_INTEGER: NotIntegerInputError,
    ErrorKind.OUT_OF_LENGTH: OutOfLengthError,
    ErrorKind.DUPLICATED_NUMBER: DuplicatedNumberError,
    ErrorKind.OUT_OF_NUMBER_RANGE: OutOfNumberRangeError,
}


@dataclass(frozen=True)
class ValidationResult:
    """검증 결과 (Ok(value) 또는 Err(kind))

    검증 함수는 예외를 던지지 않고 이 객체를 반환한다.
    호출자는 is_ok 로 분기하거나 unwrap() 으로 예외 방식으로 전환할 수 있다.
    """
    value: Any = None
    error: Optional[ErrorKind] = None
    # 실패 원인 예외 (동등 비교에서 제외)
    cause: Optional[Exception] = field(default=None, compare=False, repr=False)

    @classmethod
    def ok(cls, value: Any = None) -> "ValidationResult":
        return cls(value=value)

    @classmethod
    def err(cls, kind: ErrorKind, cause: Optional[Exception] = None) -> "ValidationResult":
        return cls(error=kind, cause=cause)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_err(self) -> bool:
        return self.error is not None

    @property
    def message(self) -> Optional[str]:
        """실패 시 사용자 안내 메시지, 성공 시 None"""
        return self.error.message if self.error else None

    def unwrap(self) -> Any:
        """성공 값을 반환하고, 실패면 대응하는 예외를 발생시킨다."""
        if self.error is not None:
            raise self.error.to_exception(self.cause) from self.cause
        return self.value

    def to_dict(self):
        """딕셔너리로 변환"""
        if self.error is not None:
            return {"valid": False, "error": self.error.name, "message": self.error.message}
        return {"valid": True, "value": self.value}
