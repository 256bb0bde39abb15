# cli/commands.py
import argparse
import logging
import json
from services.input_service import InputService, ERROR_PREFIX
from utils.validators import validate_price, validate_winning_numbers, validate_bonus

logger = logging.getLogger("lotto_input")


class CLI:
    """로또 입력 검증 CLI"""

    def __init__(self, input_service: InputService = None):
        self.input_service = input_service or InputService()
        self.parser = self._create_parser()

    def _create_parser(self):
        """명령줄 파서 생성"""
        parser = argparse.ArgumentParser(
            description="로또 입력 검증 도구"
        )

        subparsers = parser.add_subparsers(dest="command", help="명령")

        # 구입 금액 검증
        price_parser = subparsers.add_parser("price", help="구입 금액 입력 검증")
        price_parser.add_argument("text", help="구입 금액 문자열")

        # 당첨 번호 검증
        winning_parser = subparsers.add_parser("winning", help="당첨 번호 입력 검증")
        winning_parser.add_argument("text", help="쉼표로 구분한 당첨 번호 6개")

        # 보너스 번호 검증
        bonus_parser = subparsers.add_parser("bonus", help="보너스 번호 입력 검증")
        bonus_parser.add_argument("text", help="보너스 번호 문자열")
        bonus_parser.add_argument(
            "--winning", required=True,
            help="쉼표로 구분한 당첨 번호 6개 (먼저 검증됨)"
        )

        # 대화형 입력
        play_parser = subparsers.add_parser("play", help="대화형으로 모든 입력 받기")
        play_parser.add_argument(
            "--output", choices=["text", "json"], default="text",
            help="출력 형식 (기본값: text)"
        )

        return parser

    def run(self, argv=None) -> int:
        """CLI 실행, 종료 코드 반환"""
        args = self.parser.parse_args(argv)

        if not args.command:
            self.parser.print_help()
            return 0

        if args.command == "price":
            return self._handle_price(args)
        elif args.command == "winning":
            return self._handle_winning(args)
        elif args.command == "bonus":
            return self._handle_bonus(args)
        elif args.command == "play":
            return self._handle_play(args)
        return 0

    def _handle_price(self, args):
        """구입 금액 검증 명령 처리"""
        result = validate_price(args.text)
        if result.is_err:
            return self._print_error(result)

        print(f"구입 금액: {result.value}")
        return 0

    def _handle_winning(self, args):
        """당첨 번호 검증 명령 처리"""
        result = validate_winning_numbers(args.text)
        if result.is_err:
            return self._print_error(result)

        print(f"당첨 번호: [{', '.join(str(n) for n in result.value)}]")
        return 0

    def _handle_bonus(self, args):
        """보너스 번호 검증 명령 처리"""
        winning = validate_winning_numbers(args.winning)
        if winning.is_err:
            print("당첨 번호가 올바르지 않습니다.")
            return self._print_error(winning)

        result = validate_bonus(args.text, winning.value)
        if result.is_err:
            return self._print_error(result)

        print(f"보너스 번호: {result.value}")
        return 0

    def _handle_play(self, args):
        """대화형 입력 명령 처리"""
        logger.info("대화형 입력 시작")
        lotto_input = self.input_service.read_all()

        if args.output == "json":
            print(json.dumps(lotto_input.to_dict(), ensure_ascii=False))
        else:
            numbers_str = ", ".join(str(n) for n in lotto_input.winning_numbers)
            print(f"구입 금액: {lotto_input.price}")
            print(f"당첨 번호: [{numbers_str}], 보너스 번호: {lotto_input.bonus}")
        return 0

    @staticmethod
    def _print_error(result):
        print(f"{ERROR_PREFIX} {result.message}")
        return 1
