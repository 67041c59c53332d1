"""Unit tests for ExpressionWorker."""
from pydantic import ValidationError
import pytest

from expr_tree.batch.worker import ExpressionWorker
from expr_tree.common.errors import DivisionByZeroError
from expr_tree.common.models import EvaluationRequest
from expr_tree.common.tree import Notation


def make_worker(expr: str, line_number: int = 1, notation=None) -> ExpressionWorker:
    return ExpressionWorker(request=EvaluationRequest(expression=expr, notation=notation), line_number=line_number)


@pytest.mark.parametrize(
    "expr,expected",
    [
        ("2 + 3", 5),
        ("10 - 4", 6),
        ("3 * 4", 12),
        ("8 / 3", 2),
        ("(3 + 4) * 2", 14),
    ],
)
def test_worker_returns_result_for_valid_expression(expr: str, expected: int) -> None:
    """Worker returns the computed result for valid expressions."""
    msg = make_worker(expr).run()
    assert msg["line"] == 1
    assert msg["expression"] == expr
    assert msg["result"] == expected
    assert msg["rendered"] is None
    assert "error" not in msg


def test_worker_renders_requested_notation() -> None:
    """Worker renders the tree when a notation is requested."""
    msg = make_worker("3+4*2", notation=Notation.PREFIX).run()
    assert msg["result"] == 11
    assert msg["size"] == 5
    assert msg["rendered"] == "+ 3 * 4 2"


@pytest.mark.parametrize(
    "expr",
    [
        "2 +",         # Trailing operator
        "+ 3 4",       # Leading operator
        "(3) (4 + 5)", # Extra operand remaining
        "(1 + 2",      # Unbalanced parentheses
        "2 ^ 3",       # Unknown operator
        "1 / 0",       # Division by zero
        "()",          # No operand at all
    ],
)
def test_worker_returns_error_for_invalid_expression(expr: str) -> None:
    """Worker returns an error message for malformed arithmetic expressions."""
    msg = make_worker(expr, line_number=2).run()
    assert msg["line"] == 2
    assert msg["expression"] == expr
    assert "error" in msg
    assert "result" not in msg
    assert isinstance(msg["error"], str)


def test_worker_evaluate_raises() -> None:
    """evaluate propagates expression errors instead of building a payload."""
    with pytest.raises(DivisionByZeroError):
        make_worker("4 / (2 - 2)").evaluate()


def test_worker_rejects_empty_expression() -> None:
    """Pydantic validation prevents creating a worker with empty expression."""
    with pytest.raises(ValueError):
        make_worker("")


def test_worker_rejects_invalid_line_number() -> None:
    """Line numbers start at 1."""
    with pytest.raises(ValidationError):
        make_worker("1 + 1", line_number=0)


def test_worker_payload_carries_notation() -> None:
    """The payload names the notation the tree was rendered in."""
    msg = make_worker("1+2", notation="infix").run()
    assert msg["notation"] == Notation.INFIX
    assert msg["rendered"] == "1 + 2"
