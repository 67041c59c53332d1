"""Worker evaluating a single arithmetic expression."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from expr_tree.common.errors import ExpressionError
from expr_tree.common.logger import logger
from expr_tree.common.models import EvaluationRequest, EvaluationResult
from expr_tree.common.tree import ExprTree


class ExpressionWorker(BaseModel):
    """
    Worker responsible for evaluating a single arithmetic expression.

    Lifecycle:
        - Created by the batch runner for one input line
        - Builds the expression tree and evaluates it
        - Returns the computed result or the error as a payload dictionary
    """

    # Make the Pydantic instance immutable (read-only) for safety
    model_config = ConfigDict(frozen=True)

    request: EvaluationRequest = Field(..., description="Expression to evaluate and notation to render")
    line_number: int = Field(..., ge=1, description="Line number in the input file")

    def evaluate(self) -> EvaluationResult:
        """
        Build the expression tree and compute its value.

        :return: Evaluation result
        :rtype: EvaluationResult
        :raises ExpressionError: If the expression is malformed or divides by zero
        """
        tree = ExprTree.from_expression(self.request.expression)
        rendered: Optional[str] = None
        if self.request.notation is not None:
            rendered = tree.render(self.request.notation)
        return EvaluationResult(
            expression=self.request.expression,
            result=tree.evaluate_whole_tree(),
            size=tree.size,
            notation=self.request.notation,
            rendered=rendered,
        )

    def run(self) -> Dict[str, Any]:
        """
        Evaluate the arithmetic expression and return the result or error payload.

        :return: Payload with "line" and "expression", plus "result" on success or "error" on failure
        :rtype: Dict[str, Any]
        """
        expression = self.request.expression
        logger.debug(f"👷🏁 Worker started on line {self.line_number}: {expression}")

        try:
            evaluation = self.evaluate()
        except ExpressionError as exc:
            logger.error(
                f"👷❌ Worker failed on line {self.line_number}: {exc}\n"
                f"Invalid arithmetic expression, could not evaluate: {expression!r}"
            )
            return {
                "line": self.line_number,
                "expression": expression,
                "error": str(exc),
            }

        logger.debug(f"👷✅ Worker finished on line {self.line_number}: {evaluation.result}")
        return {"line": self.line_number, **evaluation.model_dump()}
