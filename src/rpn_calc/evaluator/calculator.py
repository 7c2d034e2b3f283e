"""Evaluate RPN expressions."""
from typing import List, Optional

from rpn_calc.common.logger import logger
from rpn_calc.common.operations import OperationRequest, OperationResult
from rpn_calc.common.tokens import Invalid, NumericValue, Token
from rpn_calc.evaluator.reducer import reduce
from rpn_calc.evaluator.tokenizer import tokenize


def calc(expression: str) -> Optional[float]:
    """
    Evaluate an RPN expression.

    Malformed input is an expected outcome, not an error: an unparseable
    field, too many operands or a missing operand all give None. Division by
    zero is not a failure and yields inf or nan.

    :param str expression: Space-separated RPN expression, e.g. "1 2 +"

    :return: The computed value, or None when there is no result
    :rtype: Optional[float]
    :raises TypeError: If expression is not a string
    """
    if not isinstance(expression, str):
        raise TypeError(f"expression must be a str, not {type(expression).__name__}")

    tokens: List[Token] = tokenize(expression)
    if any(isinstance(token, Invalid) for token in tokens):
        return None

    remaining: List[Token] = reduce(tokens[::-1])
    if len(remaining) == 1 and isinstance(remaining[0], NumericValue):
        return remaining[0].value

    logger.debug(f"🧮❌ {expression!r} left {len(remaining)} token(s) unreduced")
    return None


class ExpressionEvaluator:
    """
    Evaluate RPN expressions carried by request models.

    Algorithm:
        1. Tokenize on single spaces
        2. Reverse the tokens so the last-written operator comes first
        3. Fold operator/value/value triples until nothing more reduces

    Examples:
        - "1 2 3 + *" reduces 2 + 3 = 5, then 1 * 5 = 5
        - "1 2 3 +" leaves two values and has no result
    """

    @staticmethod
    def evaluate(request: OperationRequest) -> OperationResult:
        """
        Evaluate the expression of a request.

        :param OperationRequest request: Expression to evaluate

        :return: Result model, with result None when there is no result
        :rtype: OperationResult
        """
        return OperationResult(expression=request.expression, result=calc(request.expression))
