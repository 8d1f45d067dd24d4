"""
Errors: Исключения модели длин и движка выражений

Все ошибки терминальны для одного вызова: движок не пытается восстановиться,
не возвращает частичный результат и ничего не логирует. Вызывающий код
получает исключение синхронно и решает сам (например, запросить ввод заново).

Иерархия:
- LengthExpressionError
  - InvalidLength           : нарушен инвариант Length
  - ParseError              : токенизация не смогла поглотить ввод
  - EvaluationError
    - MalformedExpression   : 2 или 4 узла на одном уровне
    - ExpectedOperator      : средний из трёх узлов не оператор
    - OperatorNotImplemented: вычитание (отрицательные длины не представимы)
    - UnsupportedArity      : 0 или 5+ узлов (цепочки операторов)
    - UnknownNode           : узел не является ни значением, ни скобкой
"""


class LengthExpressionError(Exception):
    """Базовое исключение пакета uscu."""

    pass


# =============================================================================
# LENGTH VALUE
# =============================================================================


class InvalidLength(LengthExpressionError):
    """
    Нарушен инвариант Length.

    Поля отрицательные, не int, либо numerator16 вне [0, 15]
    для не-переносящего конструктора.

    Не наследуется от ValueError: pydantic оборачивает ValueError
    в ValidationError, а InvalidLength должен дойти до вызывающего как есть.
    """

    pass


# =============================================================================
# TOKENIZER
# =============================================================================


class ParseError(LengthExpressionError):
    """
    Ошибка токенизации: подстрока не подошла ни под одно правило,
    скобки не сбалансированы или ввод не поглощён целиком.
    """

    def __init__(self, message: str, position: int, text: str = ""):
        super().__init__(f"{message} at position {position}")
        self.position = position
        self.text = text


# =============================================================================
# EVALUATOR
# =============================================================================


class EvaluationError(LengthExpressionError):
    """Базовое исключение вычислителя выражений."""

    pass


class MalformedExpression(EvaluationError):
    pass


class ExpectedOperator(EvaluationError):
    pass


class OperatorNotImplemented(EvaluationError, NotImplementedError):
    """Оператор распознан, но не поддерживается (вычитание)."""

    pass


class UnsupportedArity(EvaluationError):
    """
    Число узлов на уровне вне {1, 2, 3, 4}.

    Цепочки вида `a + b + c` грамматикой не сводятся: это известное
    ограничение, а не ошибка, которую нужно молча обходить.
    """

    def __init__(self, message: str, count: int):
        super().__init__(message)
        self.count = count


class UnknownNode(EvaluationError):
    pass
