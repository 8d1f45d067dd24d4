"""
Expression: точки входа (строка → Length → каноническая строка)
"""

from uscu.core.domain.length import Length
from uscu.engine.evaluator import ExpressionEvaluator
from uscu.engine.tokenizer import Tokenizer, TokenizerConfig


def evaluate_expression(text: str, config: TokenizerConfig | None = None) -> Length:
    """
    Токенизация и вычисление выражения.

    Args:
        text: Выражение, например `1/16" + 2/16"` или `(1' + 2") + 3/4"`
        config: Конфигурация токенизатора (опционально)

    Returns:
        Итоговая длина

    Raises:
        ParseError: Ошибка токенизации
        EvaluationError: Ошибка вычисления (см. uscu.core.errors)
    """
    tokens = Tokenizer(config).tokenize(text)
    return ExpressionEvaluator().evaluate(tokens)


def usc(text: str, config: TokenizerConfig | None = None) -> str:
    """
    Вычисление выражения с рендерингом результата.

    Examples:
        >>> usc('2-12/16"')
        '2-3/4"'
        >>> usc('1/16" + 2/16"')
        '3/16"'
    """
    return evaluate_expression(text, config).render()
