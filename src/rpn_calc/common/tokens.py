"""Token types produced by the tokenizer and consumed by the reducer."""
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class OperatorKind(str, Enum):
    """The four binary operators, valued by their symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class NumericValue(BaseModel):
    """A number, either parsed from the input or computed by a reduction."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="64-bit floating point value")


class Operator(BaseModel):
    """A binary operator token."""

    model_config = ConfigDict(frozen=True)

    kind: OperatorKind = Field(..., description="Which arithmetic operation to apply")


class Invalid(BaseModel):
    """Marker for an input field that is neither an operator nor a number."""

    model_config = ConfigDict(frozen=True)


Token = Union[NumericValue, Operator, Invalid]
