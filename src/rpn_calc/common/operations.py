"""Pydantic models for evaluation requests and results."""
from typing import Optional

from pydantic import BaseModel, Field


class OperationRequest(BaseModel):
    """Represents a single RPN expression to evaluate."""

    expression: str = Field(..., description="RPN expression as a string")


class OperationResult(BaseModel):
    """Represents the outcome of an evaluated RPN expression."""

    expression: str = Field(..., description="Original RPN expression")
    result: Optional[float] = Field(..., description="Evaluated value, or None when there is no result")

    @property
    def succeeded(self) -> bool:
        """True when the expression produced a value."""
        return self.result is not None
