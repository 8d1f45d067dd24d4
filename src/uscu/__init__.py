"""
uscu: длины в единицах USCU (футы, дюймы, шестнадцатые) и сложение выражений

    >>> from uscu import usc, Length
    >>> usc('1/16" + 2/16"')
    '3/16"'
    >>> str(Length.create_from_minimal_fractional_inches(14, 20))
    '1\\' 3-1/4"'
"""

from uscu.core.domain.length import Length
from uscu.core.errors import (
    EvaluationError,
    ExpectedOperator,
    InvalidLength,
    LengthExpressionError,
    MalformedExpression,
    OperatorNotImplemented,
    ParseError,
    UnknownNode,
    UnsupportedArity,
)
from uscu.engine.expression import evaluate_expression, usc
from uscu.engine.tokenizer import TokenizerConfig
from uscu.util.logging import configure_logging

__all__ = [
    # Value
    "Length",
    # Entry points
    "evaluate_expression",
    "usc",
    "TokenizerConfig",
    # Logging
    "configure_logging",
    # Errors
    "LengthExpressionError",
    "InvalidLength",
    "ParseError",
    "EvaluationError",
    "MalformedExpression",
    "ExpectedOperator",
    "OperatorNotImplemented",
    "UnsupportedArity",
    "UnknownNode",
]
