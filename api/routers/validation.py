# api/routers/validation.py
import logging
from fastapi import APIRouter, HTTPException, status

from api.schemas.validation import (
    RawInputRequest,
    BonusRequest,
    ValidationResponse,
    ValidationErrorResponse,
)
from models.validation_result import ValidationResult
from utils.validators import validate_price, validate_winning_numbers, validate_bonus

router = APIRouter()
logger = logging.getLogger("lotto_input")

# 검증 실패 시 400 응답 본문 스키마
ERROR_RESPONSES = {400: {"model": ValidationErrorResponse, "description": "입력 검증 실패"}}


def _to_response(result: ValidationResult) -> ValidationResponse:
    """검증 결과를 응답으로 변환, 실패면 400"""
    if result.is_err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": result.error.name, "message": result.message}
        )
    return ValidationResponse(valid=True, value=result.value)


@router.post("/validate/price", response_model=ValidationResponse, responses=ERROR_RESPONSES)
def validate_price_input(request: RawInputRequest):
    """구입 금액 입력 검증"""
    return _to_response(validate_price(request.input))


@router.post("/validate/winning-numbers", response_model=ValidationResponse, responses=ERROR_RESPONSES)
def validate_winning_numbers_input(request: RawInputRequest):
    """당첨 번호 입력 검증"""
    return _to_response(validate_winning_numbers(request.input))


@router.post("/validate/bonus", response_model=ValidationResponse, responses=ERROR_RESPONSES)
def validate_bonus_input(request: BonusRequest):
    """보너스 번호 입력 검증"""
    return _to_response(validate_bonus(request.input, request.winning_numbers))
