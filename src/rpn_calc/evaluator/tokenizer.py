"""Split an RPN expression into typed tokens."""
import math
import re
from typing import List

from rpn_calc.common.logger import logger
from rpn_calc.common.tokens import Invalid, NumericValue, Operator, OperatorKind, Token


# Unsigned ASCII decimal literal: "1", "1.", ".5", "2.5e-3"
NUMBER_PATTERN: re.Pattern = re.compile(r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Mapping of operator symbols to their kind
OPERATOR_SYMBOLS: dict[str, OperatorKind] = {kind.value: kind for kind in OperatorKind}


def _parse_number(field: str) -> Token:
    """
    Parse a whole field as a finite float.

    :param str field: One space-separated field of the expression

    :return: NumericValue on success, Invalid otherwise
    :rtype: Token
    """
    if NUMBER_PATTERN.fullmatch(field) is None:
        return Invalid()
    value: float = float(field)
    # "1e400" matches the grammar but overflows
    if not math.isfinite(value):
        return Invalid()
    return NumericValue(value=value)


def tokenize(expression: str) -> List[Token]:
    """
    Convert an RPN expression into a list of tokens, in input order.

    Fields are separated by exactly one space: two spaces in a row yield an
    empty field, which is Invalid. A field whose first character is an
    operator symbol is that operator, whatever follows it ("+5" is Add).

    :param str expression: Raw RPN expression

    :return: List of tokens
    :rtype: List[Token]
    """
    tokens: List[Token] = []
    for field in expression.split(" "):
        kind = OPERATOR_SYMBOLS.get(field[:1])
        if kind is not None:
            tokens.append(Operator(kind=kind))
            continue

        token = _parse_number(field)
        if isinstance(token, Invalid):
            logger.debug(f"🔤❌ Rejected field {field!r} in {expression!r}")
        tokens.append(token)
    return tokens
