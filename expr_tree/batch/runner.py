"""Sequential batch evaluation of arithmetic expressions."""
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from pydantic import BaseModel, Field

from expr_tree.batch.worker import ExpressionWorker
from expr_tree.common.logger import logger
from expr_tree.common.models import EvaluationRequest
from expr_tree.common.tree import Notation


class BatchRunner(BaseModel):
    """
    Evaluate a list of arithmetic expressions and write one result line per expression.

    Features:
        - Creates one worker per expression, in input order.
        - Writes each result to disk as soon as it is computed.
        - Reports malformed expressions in the output instead of stopping the batch.
    """

    output_file: Path = Field(..., description="Path to write computation results")
    notation: Optional[Notation] = Field(default=None, description="Notation to render each tree in, if any")

    def _spawn_worker(self, expr: str, line_number: int) -> ExpressionWorker:
        """
        Create the worker evaluating the given expression.

        :param str expr: Arithmetic expression
        :param int line_number: Line number of expression in input

        :return: Worker for the expression
        :rtype: ExpressionWorker
        """
        request = EvaluationRequest(expression=expr, notation=self.notation)
        return ExpressionWorker(request=request, line_number=line_number)

    def format_payload(self, payload: Dict[str, Any]) -> str:
        """
        Format a worker payload as a single output line, without the trailing newline.

        :param dict payload: Payload returned by ExpressionWorker.run

        :return: "<expr> = <result>", optionally followed by the rendered tree, or "<expr> -> ERROR: <message>"
        :rtype: str
        """
        if "error" in payload:
            return f"{payload['expression']} -> ERROR: {payload['error']}"
        line = f"{payload['expression']} = {payload['result']}"
        rendered = payload.get("rendered")
        if rendered is None:
            return line
        notation = payload.get("notation")
        if notation is None:
            return f"{line} [{rendered}]"
        return f"{line} [{Notation(notation).value}: {rendered}]"

    def _write_payload(self, payload: Dict[str, Any], f_out: TextIO) -> None:
        f_out.write(self.format_payload(payload) + "\n")
        f_out.flush()

    def run(self, expressions: List[str]) -> List[Dict[str, Any]]:
        """
        Evaluate every expression and write the results to the output file.

        :param List[str] expressions: Non-empty arithmetic expressions

        :return: Worker payloads, in input order
        :rtype: List[Dict[str, Any]]
        """
        logger.info(f"🧮 Evaluating {len(expressions)} expression(s)")

        payloads: List[Dict[str, Any]] = []
        with self.output_file.open("w", encoding="utf-8") as f_out:
            for line_number, expr in enumerate(expressions, start=1):
                payload = self._spawn_worker(expr, line_number).run()
                self._write_payload(payload, f_out)
                payloads.append(payload)

        failed = sum(1 for payload in payloads if "error" in payload)
        logger.info(f"✉️ Results written to {self.output_file} ({failed} failed)")
        return payloads
