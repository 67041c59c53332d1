"""Pydantic models for expression evaluation requests and results."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from expr_tree.common.tree import Notation


class EvaluationRequest(BaseModel):
    """Represents a single arithmetic expression to evaluate."""

    expression: str = Field(..., description="Arithmetic expression as a string")
    notation: Optional[Notation] = Field(default=None, description="Notation to render the tree in, if any")

    @field_validator("expression")
    def expression_must_not_be_empty(cls, v: str) -> str:
        """Ensure that the expression is not empty."""
        if not v.strip():
            raise ValueError("Expression cannot be empty")
        return v


class EvaluationResult(BaseModel):
    """Represents the result of an evaluated arithmetic expression."""

    expression: str = Field(..., description="Original arithmetic expression")
    result: int = Field(..., description="Integer value of the expression")
    size: int = Field(..., ge=1, description="Number of nodes in the expression tree")
    notation: Optional[Notation] = Field(default=None, description="Notation of the rendered tree, if any")
    rendered: Optional[str] = Field(default=None, description="Tree rendered in the requested notation")
