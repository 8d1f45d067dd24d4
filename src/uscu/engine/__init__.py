"""Engine: токенизатор и вычислитель выражений длин.

- tokens: TokenType / Token
- tokenizer: упорядоченные правила + сбалансированный скан скобок
- evaluator: сведение плоских последовательностей 1/3 узлов
- expression: evaluate_expression / usc
"""

from .evaluator import ExpressionEvaluator
from .expression import evaluate_expression, usc
from .tokenizer import Tokenizer, TokenizerConfig, tokenize
from .tokens import Token, TokenType

__all__ = [
    "Token",
    "TokenType",
    "Tokenizer",
    "TokenizerConfig",
    "tokenize",
    "ExpressionEvaluator",
    "evaluate_expression",
    "usc",
]
