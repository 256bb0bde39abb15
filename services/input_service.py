"""사용자 입력 수집 서비스

검증에 실패하면 오류 메시지를 출력하고 같은 항목을 다시 입력받는다.
"""
import logging
from typing import Callable, List, Optional

from config.settings import MAX_INPUT_ATTEMPTS
from models.lotto_input import LottoInput
from models.validation_result import ValidationResult
from utils.validators import validate_price, validate_winning_numbers, validate_bonus

logger = logging.getLogger("lotto_input")

PRICE_PROMPT = "구입금액을 입력해 주세요."
WINNING_NUMBERS_PROMPT = "당첨 번호를 입력해 주세요."
BONUS_PROMPT = "보너스 번호를 입력해 주세요."
ERROR_PREFIX = "[ERROR]"


class InputService:
    """입력 / 검증 / 재입력 루프

    Args:
        input_func: 한 줄을 읽어 반환하는 함수 (기본값: input)
        output_func: 한 줄을 출력하는 함수 (기본값: print)
        max_attempts: 항목당 최대 시도 횟수, None 이면 설정값 사용 (0 은 무제한)
    """

    def __init__(
            self,
            input_func: Callable[[], str] = input,
            output_func: Callable[[str], None] = print,
            max_attempts: Optional[int] = None
    ):
        self.input_func = input_func
        self.output_func = output_func
        self.max_attempts = MAX_INPUT_ATTEMPTS if max_attempts is None else max_attempts

    def read_price(self) -> int:
        return self._read(PRICE_PROMPT, validate_price)

    def read_winning_numbers(self) -> List[int]:
        return self._read(WINNING_NUMBERS_PROMPT, validate_winning_numbers)

    def read_bonus(self, winning_numbers: List[int]) -> int:
        return self._read(BONUS_PROMPT, lambda text: validate_bonus(text, winning_numbers))

    def read_all(self) -> LottoInput:
        """구입 금액, 당첨 번호, 보너스 번호를 차례로 입력받음"""
        price = self.read_price()
        winning_numbers = self.read_winning_numbers()
        bonus = self.read_bonus(winning_numbers)
        return LottoInput(price=price, winning_numbers=winning_numbers, bonus=bonus)

    def _read(self, prompt: str, validate: Callable[[str], ValidationResult]):
        """검증을 통과할 때까지 입력을 반복

        Raises:
            InputValidationError: 최대 시도 횟수를 모두 실패한 경우 마지막 실패 유형
        """
        attempts = 0
        while True:
            attempts += 1
            self.output_func(prompt)
            result = validate(self.input_func())

            if result.is_ok:
                return result.value

            self.output_func(f"{ERROR_PREFIX} {result.message}")

            if self.max_attempts and attempts >= self.max_attempts:
                logger.warning(f"입력 시도 횟수 초과 ({attempts}회): {result.error.name}")
                return result.unwrap()
