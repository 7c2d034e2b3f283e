"""Fold a reversed RPN token sequence down to its value."""
import math
import operator
from typing import Callable, List, Optional, Tuple

from rpn_calc.common.tokens import NumericValue, Operator, OperatorKind, Token


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]


def _divide(a: float, b: float) -> float:
    """Float division following IEEE-754 for a zero divisor instead of raising."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        # 1 / -0.0 is -inf
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# Mapping of operator kinds to their function
OPERATORS: dict[OperatorKind, OperatorFn] = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUB: operator.sub,
    OperatorKind.MUL: operator.mul,
    OperatorKind.DIV: _divide,
}


def apply_operator(kind: OperatorKind, a: float, b: float) -> float:
    """
    Apply a binary operator to its left and right operands.

    :param OperatorKind kind: Operator to apply
    :param float a: Left operand
    :param float b: Right operand

    :return: a <op> b
    :rtype: float
    :raises KeyError: If kind is not a known operator
    """
    return OPERATORS[kind](float(a), float(b))


def _is_value(tokens: List[Token], index: int) -> bool:
    return index < len(tokens) and isinstance(tokens[index], NumericValue)


def _is_operator(tokens: List[Token], index: int) -> bool:
    return index < len(tokens) and isinstance(tokens[index], Operator)


def _fold_front(tokens: List[Token]) -> List[Token]:
    """Apply rule 1 at the front of the sequence until it no longer matches."""
    while _is_operator(tokens, 0) and _is_value(tokens, 1) and _is_value(tokens, 2):
        b: float = tokens[1].value
        a: float = tokens[2].value
        folded = NumericValue(value=apply_operator(tokens[0].kind, a, b))
        tokens = [folded] + tokens[3:]
    return tokens


def _pending_prefix(tokens: List[Token]) -> Optional[List[Token]]:
    """Return the tokens kept aside while the tail is reduced, or None if neither rule 2 nor 3 applies."""
    if not _is_operator(tokens, 0):
        return None
    if _is_operator(tokens, 1):
        return tokens[:1]
    if _is_value(tokens, 1) and _is_operator(tokens, 2):
        return tokens[:2]
    return None


def reduce(tokens: List[Token]) -> List[Token]:
    """
    Reduce a reversed token sequence as far as possible.

    The head of ``tokens`` is the rightmost token of the original expression.
    Rules, tried in order against the front of the sequence:

        1. Operator, Value(b), Value(a), ...  ->  Value(a <op> b), ...
        2. Operator, Operator, ...            ->  reduce the tail from the
           second operator first, then reduce again.
        3. Operator, Value, Operator, ...     ->  same as 2, with the value
           kept in front of the reduced tail.
        4. Anything else is returned unchanged.

    Rules 2 and 3 only reduce again when the tail got shorter, so a tail
    that cannot be reduced stops the reduction.

    Sub-reductions are tracked on an explicit list instead of the call
    stack, so the Python recursion limit does not bound expression length.

    :param List[Token] tokens: Tokens in reversed order

    :return: Remaining tokens; a single NumericValue on success
    :rtype: List[Token]
    """
    # (prefix, length of the tail being reduced) for each open sub-reduction
    pending: List[Tuple[List[Token], int]] = []
    current: List[Token] = list(tokens)

    while True:
        current = _fold_front(current)
        prefix = _pending_prefix(current)
        if prefix is not None:
            pending.append((prefix, len(current) - len(prefix)))
            current = current[len(prefix):]
            continue

        # current is irreducible: hand it back to the enclosing sub-reductions
        while pending:
            prefix, tail_length = pending.pop()
            progressed: bool = len(current) < tail_length
            current = prefix + current
            if progressed:
                break
        else:
            return current
