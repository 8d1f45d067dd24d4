"""
Tokens: Типы токенов и узлы дерева разбора

TokenType: закрытый набор вариантов с двумя производными предикатами
(is_value, is_operator). Token - узел дерева; литерал несёт Length,
скобка несёт вложенный список узлов.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from uscu.core.domain.length import Length


# =============================================================================
# ENUMS
# =============================================================================


class TokenType(str, Enum):
    """Тип токена"""

    FEET = "Feet"
    INCHES = "Inches"
    FRACTION = "Fraction"
    FEET_INCHES = "Feet_Inches"
    INCHES_FRACTION = "Inches_Fraction"
    FEET_INCHES_FRACTION = "Feet_Inches_Fraction"
    OPERATOR_PLUS = "Operator_Plus"
    OPERATOR_MINUS = "Operator_Minus"
    PAREN = "Paren"
    WHITESPACE = "Whitespace"

    @property
    def is_value(self) -> bool:
        """Литерал, разрешающийся в Length"""
        return self in _VALUE_TYPES

    @property
    def is_operator(self) -> bool:
        return self in _OPERATOR_TYPES


_VALUE_TYPES = frozenset(
    {
        TokenType.FEET,
        TokenType.INCHES,
        TokenType.FRACTION,
        TokenType.FEET_INCHES,
        TokenType.INCHES_FRACTION,
        TokenType.FEET_INCHES_FRACTION,
    }
)

_OPERATOR_TYPES = frozenset({TokenType.OPERATOR_PLUS, TokenType.OPERATOR_MINUS})


# =============================================================================
# TOKEN
# =============================================================================


@dataclass(frozen=True)
class Token:
    """Узел дерева разбора."""

    type: TokenType

    # Только для литералов
    value: Optional[Length] = None

    # Только для Paren: внутренние токены
    nodes: tuple["Token", ...] = ()

    # Смещение в исходной строке и совпавший текст
    position: int = 0
    text: str = ""

    def describe(self) -> str:
        """Компактное описание для сообщений об ошибках: Type('text')@pos"""
        return f"{self.type.value}({self.text!r})@{self.position}"


def describe_nodes(nodes: Sequence[Token]) -> str:
    return "[" + ", ".join(node.describe() for node in nodes) + "]"
