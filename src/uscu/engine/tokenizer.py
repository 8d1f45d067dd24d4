"""
Tokenizer: Упорядоченный токенизатор выражений длин

Сканирует ввод слева направо. На каждой позиции правила пробуются в
фиксированном порядке от самого специфичного к общему, поэтому `1' 2-3/4"`
распознаётся одним токеном Feet_Inches_Fraction, а не Feet + остаток:

1. Feet_Inches_Fraction   1' 2-3/4"
2. Feet_Inches            1' 2"
3. Inches_Fraction        2-3/4"
4. Fraction               3/4"
5. Feet                   1'
6. Inches                 2"
7. Whitespace
8. Operator_Plus          +
9. Operator_Minus         -
10. Paren                 ( ... ), пары скобок находятся одним проходом,
                          глубина вложенности ограничена MAX_PAREN_DEPTH

Литералы сразу разрешаются в Length; дроби проходят через
normalize_to_sixteenths и конструктор с переносом.
Цифры и пробелы: только ASCII (re.ASCII).
"""

import re
from dataclasses import dataclass
from typing import Final, Optional

from uscu.core.domain.length import Length
from uscu.core.errors import InvalidLength, ParseError
from uscu.core.math.sixteenths import INCHES_PER_FOOT, normalize_to_sixteenths
from uscu.engine.tokens import Token, TokenType
from uscu.util.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# PATTERNS
# =============================================================================

_FEET: Final[str] = r"(?P<feet>\d+)'"
_INCHES: Final[str] = r'(?P<inches>\d+)"'
_FRACTION: Final[str] = r'(?P<numerator>\d+)/(?P<denominator>\d+)"'
_INCHES_FRACTION: Final[str] = r"(?P<inches>\d+)-" + _FRACTION


def _literal_patterns(separator: str) -> tuple[tuple[TokenType, re.Pattern[str]], ...]:
    return (
        (
            TokenType.FEET_INCHES_FRACTION,
            re.compile(_FEET + separator + _INCHES_FRACTION, re.ASCII),
        ),
        (TokenType.FEET_INCHES, re.compile(_FEET + separator + _INCHES, re.ASCII)),
        (TokenType.INCHES_FRACTION, re.compile(_INCHES_FRACTION, re.ASCII)),
        (TokenType.FRACTION, re.compile(_FRACTION, re.ASCII)),
        (TokenType.FEET, re.compile(_FEET, re.ASCII)),
        (TokenType.INCHES, re.compile(_INCHES, re.ASCII)),
    )


# Пробел между футами и дюймами: опционален / обязателен
_LITERAL_RULES_LOOSE: Final = _literal_patterns(r"\s*")
_LITERAL_RULES_STRICT: Final = _literal_patterns(r"\s+")

_STRUCTURAL_RULES: Final[tuple[tuple[TokenType, re.Pattern[str]], ...]] = (
    (TokenType.WHITESPACE, re.compile(r"\s+", re.ASCII)),
    (TokenType.OPERATOR_PLUS, re.compile(r"\+")),
    (TokenType.OPERATOR_MINUS, re.compile(r"-")),
)

PAREN_OPEN: Final[str] = "("
PAREN_CLOSE: Final[str] = ")"

# Предел вложенности скобок
MAX_PAREN_DEPTH: Final[int] = 32


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TokenizerConfig:
    """Конфигурация токенизатора.

    require_feet_inches_separator: требовать хотя бы один пробельный символ
    между `F'` и дюймовой частью (`1' 2"`); по умолчанию `1'2"` тоже допустим.
    """

    require_feet_inches_separator: bool = False


# =============================================================================
# TOKENIZER
# =============================================================================


class Tokenizer:
    """Упорядоченный токенизатор: строка → плоский список токенов со скобочными группами."""

    def __init__(self, config: TokenizerConfig | None = None):
        self.config = config or TokenizerConfig()
        self._literal_rules = (
            _LITERAL_RULES_STRICT
            if self.config.require_feet_inches_separator
            else _LITERAL_RULES_LOOSE
        )

    def tokenize(self, text: str) -> list[Token]:
        """
        Токенизация всей строки.

        Args:
            text: Исходное выражение

        Returns:
            Токены верхнего уровня (включая Whitespace); Paren содержит
            вложенные токены

        Raises:
            ParseError: Если подстрока не подходит ни под одно правило,
                скобки не сбалансированы или вложены глубже MAX_PAREN_DEPTH,
                литерал содержит дробь с нулевым знаменателем или слишком
                длинное число
        """
        pairs = _match_parens(text)
        tokens = self._scan(text, 0, len(text), pairs)
        logger.debug("tokenized %r into %d top-level tokens", text, len(tokens))
        return tokens

    def _scan(self, text: str, start: int, end: int, pairs: dict[int, int]) -> list[Token]:
        tokens: list[Token] = []
        pos = start
        while pos < end:
            token = self._match(text, pos, end, pairs)
            if token is None:
                raise ParseError(f"unexpected {text[pos]!r}", pos, text[pos:end])
            tokens.append(token)
            pos += len(token.text)
        return tokens

    def _match(self, text: str, pos: int, end: int, pairs: dict[int, int]) -> Optional[Token]:
        for token_type, pattern in self._literal_rules:
            m = pattern.match(text, pos, end)
            if m:
                return Token(
                    type=token_type,
                    value=self._resolve(m, pos),
                    position=pos,
                    text=m.group(0),
                )

        for token_type, pattern in _STRUCTURAL_RULES:
            m = pattern.match(text, pos, end)
            if m:
                return Token(type=token_type, position=pos, text=m.group(0))

        if text.startswith(PAREN_OPEN, pos):
            return self._match_paren(text, pos, end, pairs)

        return None

    def _match_paren(self, text: str, pos: int, end: int, pairs: dict[int, int]) -> Token:
        close = pairs.get(pos)
        if close is None or close >= end:
            raise ParseError(f"unbalanced {PAREN_OPEN!r}", pos, text[pos:end])

        return Token(
            type=TokenType.PAREN,
            nodes=tuple(self._scan(text, pos + 1, close, pairs)),
            position=pos,
            text=text[pos : close + 1],
        )

    @staticmethod
    def _resolve(m: re.Match, pos: int) -> Length:
        try:
            numbers = {name: int(digits) for name, digits in m.groupdict().items() if digits is not None}
        except ValueError as e:
            # Число длиннее предела int() для десятичных строк
            raise ParseError(f"number too long in literal: {e}", pos, m.group(0)) from e

        whole_inches = numbers.get("feet", 0) * INCHES_PER_FOOT + numbers.get("inches", 0)

        numerator16 = 0
        if "numerator" in numbers:
            try:
                numerator16 = normalize_to_sixteenths(numbers["numerator"], numbers["denominator"])
            except InvalidLength as e:
                raise ParseError(f"invalid fraction in {m.group(0)!r}: {e}", pos, m.group(0)) from e

        return Length.create_from_minimal_fractional_inches(whole_inches, numerator16)


def _match_parens(text: str) -> dict[int, int]:
    """
    Пары скобок за один проход: позиция `(` → позиция парной `)`.

    Непарные скобки в результат не попадают; о них сообщает сканер,
    когда до них доходит.

    Raises:
        ParseError: Если вложенность превышает MAX_PAREN_DEPTH
    """
    pairs: dict[int, int] = {}
    stack: list[int] = []
    for i, ch in enumerate(text):
        if ch == PAREN_OPEN:
            if len(stack) == MAX_PAREN_DEPTH:
                raise ParseError(
                    f"parentheses nested deeper than {MAX_PAREN_DEPTH}", i, text[stack[0] :]
                )
            stack.append(i)
        elif ch == PAREN_CLOSE and stack:
            pairs[stack.pop()] = i
    return pairs


def tokenize(text: str, config: TokenizerConfig | None = None) -> list[Token]:
    """Токенизация строки с конфигурацией по умолчанию (или заданной)."""
    return Tokenizer(config).tokenize(text)
