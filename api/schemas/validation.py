from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from config.settings import MIN_NUMBER, MAX_NUMBER, NUMBERS_PER_DRAW


class RawInputRequest(BaseModel):
    """검증할 원본 입력 문자열"""
    input: str = Field(..., description="사용자가 입력한 문자열 (가공하지 않음)")

    model_config = {
        "json_schema_extra": {
            "example": {
                "input": "1,2,3,4,5,6"
            }
        }
    }


class BonusRequest(RawInputRequest):
    """보너스 번호 검증 요청 모델"""
    winning_numbers: List[int] = Field(..., description="이미 검증된 당첨 번호 6개")

    @field_validator("winning_numbers")
    @classmethod
    def validate_winning_numbers(cls, v):
        if len(v) != NUMBERS_PER_DRAW:
            raise ValueError("당첨 번호는 정확히 6개여야 합니다")

        if len(set(v)) != len(v):
            raise ValueError("당첨 번호에 중복이 있습니다")

        if any(n < MIN_NUMBER or n > MAX_NUMBER for n in v):
            raise ValueError("모든 번호는 1~45 사이여야 합니다")

        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "input": "7",
                "winning_numbers": [1, 2, 3, 4, 5, 6]
            }
        }
    }


class ValidationResponse(BaseModel):
    """검증 성공 응답 모델"""
    valid: bool = Field(True, description="검증 통과 여부")
    value: Optional[Any] = Field(None, description="변환된 값 (금액, 번호 목록 또는 보너스 번호)")


class ValidationErrorDetail(BaseModel):
    """검증 실패 상세"""
    error: str = Field(..., description="실패 유형 (예: DUPLICATED_NUMBER)")
    message: str = Field(..., description="사용자 안내 메시지")


class ValidationErrorResponse(BaseModel):
    """검증 실패 응답 모델 (400)"""
    detail: ValidationErrorDetail = Field(..., description="실패 상세")
