"""
Evaluator: Вычисление плоских последовательностей узлов

Грамматика рекурсивна только через скобки; приоритетов операторов нет.
На каждом уровне (после удаления Whitespace) поддерживаются:
- 1 узел: значение или скобка (рекурсия внутрь)
- 3 узла: a op b, где a и b: значения или скобки

Цепочки `a + b + c` не сводятся (UnsupportedArity): это известное
ограничение, а не повод молча вводить левую ассоциативность.
"""

from typing import Sequence

from uscu.core.domain.length import Length
from uscu.core.errors import (
    ExpectedOperator,
    MalformedExpression,
    OperatorNotImplemented,
    UnknownNode,
    UnsupportedArity,
)
from uscu.engine.tokens import Token, TokenType, describe_nodes
from uscu.util.logging import get_logger

logger = get_logger(__name__)


class ExpressionEvaluator:
    """Рекурсивный вычислитель дерева токенов в одно значение Length."""

    def evaluate(self, nodes: Sequence[Token]) -> Length:
        """
        Вычисление одного уровня дерева.

        Args:
            nodes: Токены одного уровня (Whitespace допускается и отбрасывается)

        Returns:
            Итоговая длина

        Raises:
            UnknownNode: Одиночный узел не является ни значением, ни скобкой
            MalformedExpression: 2 или 4 узла
            ExpectedOperator: Средний из 3 узлов не оператор
            OperatorNotImplemented: Вычитание
            UnsupportedArity: 0 или 5+ узлов
        """
        nodes = [node for node in nodes if node.type != TokenType.WHITESPACE]
        logger.debug("evaluating %d nodes: %s", len(nodes), describe_nodes(nodes))

        count = len(nodes)
        if count == 1:
            return self._value_or_paren(nodes[0])

        if count == 3:
            lhs, operator, rhs = nodes
            if not operator.type.is_operator:
                raise ExpectedOperator(
                    f"Expected operator, got {operator.describe()} in {describe_nodes(nodes)}"
                )
            return self._apply(self._value_or_paren(lhs), operator, self._value_or_paren(rhs))

        if count in (2, 4):
            raise MalformedExpression(
                f"No expression form has {count} nodes: {describe_nodes(nodes)}"
            )

        raise UnsupportedArity(
            f"Cannot reduce {count} nodes (chained operators are not supported): "
            f"{describe_nodes(nodes)}",
            count,
        )

    def _value_or_paren(self, node: Token) -> Length:
        if node.type == TokenType.PAREN:
            return self.evaluate(node.nodes)

        if node.type.is_value and node.value is not None:
            return node.value

        raise UnknownNode(f"Not a value or parenthesized expression: {node.describe()}")

    @staticmethod
    def _apply(lhs: Length, operator: Token, rhs: Length) -> Length:
        if operator.type == TokenType.OPERATOR_PLUS:
            return lhs.add(rhs)

        # Operator_Minus: отрицательные длины не представимы
        raise OperatorNotImplemented(
            f"Subtraction is not supported: {lhs} {operator.text} {rhs} "
            f"at position {operator.position}"
        )
