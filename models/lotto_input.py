# models/lotto_input.py
from dataclasses import dataclass
from typing import List


@dataclass
class LottoInput:
    """검증을 통과한 사용자 입력 모델"""
    price: int
    winning_numbers: List[int]
    bonus: int

    def to_dict(self):
        """딕셔너리로 변환"""
        return {
            "price": self.price,
            "winning_numbers": self.winning_numbers,
            "bonus": self.bonus
        }
