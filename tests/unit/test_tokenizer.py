"""Тесты для Tokenizer

Покрытие:
- Порядок правил (самый специфичный литерал побеждает)
- Разрешение литералов в Length
- Структурные токены и скобочные группы
- Конфигурация разделителя футов/дюймов
- ParseError с позицией
"""

import pytest

from uscu.core.domain import Length
from uscu.core.errors import ParseError
from uscu.engine import Token, Tokenizer, TokenizerConfig, TokenType, tokenize
from uscu.engine.tokenizer import MAX_PAREN_DEPTH


def _types(tokens: list[Token]) -> list[TokenType]:
    return [token.type for token in tokens]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def tokenizer():
    """Токенизатор с конфигурацией по умолчанию."""
    return Tokenizer()


@pytest.fixture
def strict_tokenizer():
    """Токенизатор, требующий пробел между футами и дюймами."""
    return Tokenizer(TokenizerConfig(require_feet_inches_separator=True))


# =============================================================================
# TOKEN TYPES
# =============================================================================


class TestTokenType:
    def test_value_types(self) -> None:
        values = {t for t in TokenType if t.is_value}
        assert values == {
            TokenType.FEET,
            TokenType.INCHES,
            TokenType.FRACTION,
            TokenType.FEET_INCHES,
            TokenType.INCHES_FRACTION,
            TokenType.FEET_INCHES_FRACTION,
        }

    def test_operator_types(self) -> None:
        operators = {t for t in TokenType if t.is_operator}
        assert operators == {TokenType.OPERATOR_PLUS, TokenType.OPERATOR_MINUS}

    def test_structural_types_are_neither(self) -> None:
        for t in (TokenType.PAREN, TokenType.WHITESPACE):
            assert not t.is_value
            assert not t.is_operator


# =============================================================================
# LITERALS
# =============================================================================


class TestLiterals:
    """Каждая форма литерала даёт один токен с разрешённым значением"""

    def test_feet_inches_fraction(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize("1' 2-3/4\"")
        assert _types(tokens) == [TokenType.FEET_INCHES_FRACTION]
        assert tokens[0].value == Length.of(14, 12)
        assert tokens[0].text == "1' 2-3/4\""

    def test_feet_inches(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize("1' 2\"")
        assert _types(tokens) == [TokenType.FEET_INCHES]
        assert tokens[0].value == Length.of(14, 0)

    def test_inches_fraction(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize('2-3/4"')
        assert _types(tokens) == [TokenType.INCHES_FRACTION]
        assert tokens[0].value == Length.of(2, 12)

    def test_fraction(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize('3/4"')
        assert _types(tokens) == [TokenType.FRACTION]
        assert tokens[0].value == Length.of(0, 12)

    def test_feet(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize("3'")
        assert _types(tokens) == [TokenType.FEET]
        assert tokens[0].value == Length.of(36, 0)

    def test_inches(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize('13"')
        assert _types(tokens) == [TokenType.INCHES]
        assert tokens[0].value == Length.of(13, 0)

    def test_fraction_is_floor_quantized(self, tokenizer: Tokenizer) -> None:
        """7/32 → 3/16"""
        assert tokenizer.tokenize('7/32"')[0].value == Length.of(0, 3)

    def test_whole_fraction_carries(self, tokenizer: Tokenizer) -> None:
        """16/16 → 1 дюйм через конструктор с переносом"""
        assert tokenizer.tokenize('16/16"')[0].value == Length.of(1, 0)
        assert tokenizer.tokenize('1-16/16"')[0].value == Length.of(2, 0)

    def test_fraction_above_one_is_capped(self, tokenizer: Tokenizer) -> None:
        """p > 1 квантуется в 16/16"""
        assert tokenizer.tokenize('17/16"')[0].value == Length.of(1, 0)


# =============================================================================
# SEPARATOR CONFIG
# =============================================================================


class TestFeetInchesSeparator:
    def test_separator_optional_by_default(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize("1'2-3/4\"")
        assert _types(tokens) == [TokenType.FEET_INCHES_FRACTION]

    def test_any_whitespace_separates(self, tokenizer: Tokenizer) -> None:
        assert _types(tokenizer.tokenize("1'\t 2\"")) == [TokenType.FEET_INCHES]

    def test_strict_requires_separator(self, strict_tokenizer: Tokenizer) -> None:
        tokens = strict_tokenizer.tokenize("1'2\"")
        assert _types(tokens) == [TokenType.FEET, TokenType.INCHES]

    def test_strict_accepts_separated(self, strict_tokenizer: Tokenizer) -> None:
        tokens = strict_tokenizer.tokenize("1' 2\"")
        assert _types(tokens) == [TokenType.FEET_INCHES]


# =============================================================================
# STRUCTURE
# =============================================================================


class TestStructure:
    def test_binary_expression(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize('1/16" + 2/16"')
        assert _types(tokens) == [
            TokenType.FRACTION,
            TokenType.WHITESPACE,
            TokenType.OPERATOR_PLUS,
            TokenType.WHITESPACE,
            TokenType.FRACTION,
        ]
        assert [token.position for token in tokens] == [0, 5, 6, 7, 8]

    def test_minus_after_inches(self, tokenizer: Tokenizer) -> None:
        """`-` после закрытого литерала: оператор, не часть Inches_Fraction"""
        tokens = tokenizer.tokenize('2"-1/16"')
        assert _types(tokens) == [
            TokenType.INCHES,
            TokenType.OPERATOR_MINUS,
            TokenType.FRACTION,
        ]

    def test_paren_group(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize('(1" + 2")')
        assert _types(tokens) == [TokenType.PAREN]
        paren = tokens[0]
        assert paren.text == '(1" + 2")'
        assert _types(list(paren.nodes)) == [
            TokenType.INCHES,
            TokenType.WHITESPACE,
            TokenType.OPERATOR_PLUS,
            TokenType.WHITESPACE,
            TokenType.INCHES,
        ]
        # Позиции внутри скобки: абсолютные
        assert paren.nodes[0].position == 1

    def test_nested_paren(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize('((1"))')
        assert _types(tokens) == [TokenType.PAREN]
        inner = tokens[0].nodes
        assert _types(list(inner)) == [TokenType.PAREN]
        assert _types(list(inner[0].nodes)) == [TokenType.INCHES]

    def test_paren_followed_by_operator(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize('(1/16" + 2/16") + 2/16"')
        assert _types(tokens) == [
            TokenType.PAREN,
            TokenType.WHITESPACE,
            TokenType.OPERATOR_PLUS,
            TokenType.WHITESPACE,
            TokenType.FRACTION,
        ]

    def test_empty_input(self, tokenizer: Tokenizer) -> None:
        assert tokenizer.tokenize("") == []

    def test_module_level_tokenize(self) -> None:
        assert _types(tokenize("1'")) == [TokenType.FEET]


# =============================================================================
# ERRORS
# =============================================================================


class TestParseErrors:
    def test_unknown_text(self, tokenizer: Tokenizer) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenizer.tokenize("abc")
        assert exc_info.value.position == 0

    def test_trailing_garbage(self, tokenizer: Tokenizer) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenizer.tokenize('1" x')
        assert exc_info.value.position == 3
        assert exc_info.value.text == "x"

    def test_bare_number_without_unit(self, tokenizer: Tokenizer) -> None:
        with pytest.raises(ParseError, match="position 0"):
            tokenizer.tokenize("12")

    def test_unbalanced_open_paren(self, tokenizer: Tokenizer) -> None:
        with pytest.raises(ParseError, match="unbalanced") as exc_info:
            tokenizer.tokenize('(1" + 2"')
        assert exc_info.value.position == 0

    def test_stray_close_paren(self, tokenizer: Tokenizer) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenizer.tokenize('1")')
        assert exc_info.value.position == 2

    def test_error_inside_paren_reports_absolute_position(self, tokenizer: Tokenizer) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenizer.tokenize('(1" * 2")')
        assert exc_info.value.position == 4

    def test_zero_denominator(self, tokenizer: Tokenizer) -> None:
        with pytest.raises(ParseError, match="invalid fraction"):
            tokenizer.tokenize('1/0"')


class TestInputLimits:
    def test_overlong_number_is_parse_error(self, tokenizer: Tokenizer) -> None:
        """Число длиннее предела int() даёт ParseError, а не ValueError"""
        with pytest.raises(ParseError, match="number too long") as exc_info:
            tokenizer.tokenize('1" + ' + "1" * 5000 + '"')
        assert exc_info.value.position == 5

    def test_overlong_fraction_is_parse_error(self, tokenizer: Tokenizer) -> None:
        with pytest.raises(ParseError, match="number too long"):
            tokenizer.tokenize("1/" + "3" * 5000 + '"')

    def test_long_but_convertible_number(self, tokenizer: Tokenizer) -> None:
        tokens = tokenizer.tokenize("9" * 100 + '"')
        assert tokens[0].value == Length.of(int("9" * 100), 0)

    def test_non_ascii_digits_rejected(self, tokenizer: Tokenizer) -> None:
        """Только ASCII-цифры: арабско-индийские цифры не литерал"""
        with pytest.raises(ParseError) as exc_info:
            tokenizer.tokenize('١٢"')
        assert exc_info.value.position == 0
        with pytest.raises(ParseError):
            tokenizer.tokenize("１'")

    def test_non_ascii_whitespace_rejected(self, tokenizer: Tokenizer) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenizer.tokenize("1\"\u00a0+ 2\"")
        assert exc_info.value.position == 2

    def test_nesting_up_to_limit(self, tokenizer: Tokenizer) -> None:
        text = "(" * MAX_PAREN_DEPTH + '1"' + ")" * MAX_PAREN_DEPTH
        tokens = tokenizer.tokenize(text)
        for _ in range(MAX_PAREN_DEPTH):
            assert _types(tokens) == [TokenType.PAREN]
            tokens = list(tokens[0].nodes)
        assert _types(tokens) == [TokenType.INCHES]

    def test_nesting_beyond_limit(self, tokenizer: Tokenizer) -> None:
        depth = MAX_PAREN_DEPTH + 1
        with pytest.raises(ParseError, match="nested deeper") as exc_info:
            tokenizer.tokenize("(" * depth + '1"' + ")" * depth)
        assert exc_info.value.position == MAX_PAREN_DEPTH

    def test_very_deep_nesting_is_parse_error(self, tokenizer: Tokenizer) -> None:
        with pytest.raises(ParseError):
            tokenizer.tokenize("(" * 2000 + '1"' + ")" * 2000)

    def test_unbalanced_inner_paren(self, tokenizer: Tokenizer) -> None:
        with pytest.raises(ParseError, match="unbalanced") as exc_info:
            tokenizer.tokenize('((1" + 2")')
        assert exc_info.value.position == 0
