"""CLI bigprime — проверка простоты и арифметика больших чисел.

Команды:
- prime [NUMBER]  — Miller–Rabin; без NUMBER число читается из stdin
- add A B         — сумма
- sub A B         — разность (требует A ≥ B)

Коды возврата:
- 0: результат вычислен
- 2: некорректный ввод (формат числа, A < B для sub, ошибка аргументов)
"""

import argparse
import json
import logging
import random
import sys
from typing import Callable, List, Optional, TextIO

from src.core.contracts import dump_arithmetic_result, dump_primality_verdict
from src.core.domain import ArithmeticOperation, ArithmeticResult, PrimalityVerdict
from src.core.math import (
    BigInt,
    DEFAULT_ROUNDS,
    InvalidFormatError,
    MillerRabinConfig,
    MillerRabinTester,
    PreconditionViolation,
    add,
    format_limbs,
    parse,
    sub,
)
from src.utils.logging import get_logger

EXIT_OK = 0
EXIT_INVALID_INPUT = 2

PROMPT = "Enter a number to check for primality: "


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigprime",
        description="Arbitrary-precision arithmetic and Miller-Rabin primality testing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    parser.add_argument("--json", action="store_true", help="emit a JSON result document")

    subparsers = parser.add_subparsers(dest="command", required=True)

    prime = subparsers.add_parser("prime", help="probabilistic primality test")
    prime.add_argument("number", nargs="?", help="decimal number (read from stdin if omitted)")
    prime.add_argument(
        "-k", "--rounds",
        type=_positive_int,
        default=DEFAULT_ROUNDS,
        help=f"Miller-Rabin rounds, error bound 4^-k (default: {DEFAULT_ROUNDS})",
    )
    prime.add_argument("--seed", type=int, default=None, help="seed for reproducible witnesses")
    prime.add_argument("--show-limbs", action="store_true", help="print the limb layout to stderr")

    for name, help_text in (("add", "sum of two numbers"), ("sub", "difference A - B, requires A >= B")):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("left", help="decimal number A")
        command.add_argument("right", help="decimal number B")

    return parser


def _read_number(stdin: TextIO, stdout: TextIO) -> str:
    if stdin.isatty():
        stdout.write(PROMPT)
        stdout.flush()
    return stdin.readline().strip()


def _run_prime(args: argparse.Namespace, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    text = args.number if args.number is not None else _read_number(stdin, stdout)
    number = parse(text)

    if args.show_limbs:
        stderr.write(f"limbs (most significant first): {format_limbs(number)}\n")

    rng = random.Random(args.seed) if args.seed is not None else None
    tester = MillerRabinTester(MillerRabinConfig(rounds=args.rounds), rng)
    verdict = PrimalityVerdict.from_result(number, tester.evaluate(number))

    if args.json:
        stdout.write(json.dumps(dump_primality_verdict(verdict)) + "\n")
    else:
        stdout.write(verdict.message + "\n")
    return EXIT_OK


def _run_arithmetic(
    operation: ArithmeticOperation,
    func: Callable[[BigInt, BigInt], BigInt],
    args: argparse.Namespace,
    stdout: TextIO,
) -> int:
    left = parse(args.left)
    right = parse(args.right)
    outcome = ArithmeticResult.build(operation, left, right, func(left, right))

    if args.json:
        stdout.write(json.dumps(dump_arithmetic_result(outcome)) + "\n")
    else:
        stdout.write(outcome.result + "\n")
    return EXIT_OK


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Точка входа CLI.

    Args:
        argv: аргументы командной строки (default: sys.argv[1:])
        stdin, stdout, stderr: потоки ввода-вывода (default: sys.*)

    Returns:
        Код возврата процесса
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    logger = get_logger(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "prime":
            return _run_prime(args, stdin, stdout, stderr)
        if args.command == "add":
            return _run_arithmetic(ArithmeticOperation.ADD, add, args, stdout)
        return _run_arithmetic(ArithmeticOperation.SUB, sub, args, stdout)
    except InvalidFormatError as e:
        logger.debug("input rejected: %s", e)
        stderr.write(f"bigprime: invalid number: {e}\n")
        return EXIT_INVALID_INPUT
    except PreconditionViolation as e:
        stderr.write(f"bigprime: {e}\n")
        return EXIT_INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())
