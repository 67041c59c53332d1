"""Test classes EvaluationRequest and EvaluationResult."""
from pydantic import ValidationError
import pytest

from expr_tree.common.models import EvaluationRequest, EvaluationResult
from expr_tree.common.tree import Notation


def test_evaluation_request_valid() -> None:
    """Test that a valid EvaluationRequest can be created."""
    req = EvaluationRequest(expression="2 + 2 * 3")
    assert req.expression == "2 + 2 * 3"
    assert req.notation is None

def test_evaluation_request_notation_from_string() -> None:
    """Test that the notation is parsed from its name."""
    req = EvaluationRequest(expression="1", notation="prefix")
    assert req.notation is Notation.PREFIX

def test_evaluation_request_invalid_type() -> None:
    """Test that non-string expressions raise a validation error."""
    with pytest.raises(ValidationError):
        # int instead of str
        EvaluationRequest(expression=123)

def test_evaluation_request_empty_expression() -> None:
    """Test that blank expressions raise a validation error."""
    with pytest.raises(ValidationError):
        EvaluationRequest(expression="   ")

def test_evaluation_request_invalid_notation() -> None:
    """Test that unknown notations raise a validation error."""
    with pytest.raises(ValidationError):
        EvaluationRequest(expression="1 + 1", notation="polish")

def test_evaluation_result_valid() -> None:
    """Test that a valid EvaluationResult can be created."""
    res = EvaluationResult(expression="2 + 2 * 3", result=8, size=5)
    assert res.expression == "2 + 2 * 3"
    assert res.result == 8
    assert isinstance(res.result, int)
    assert res.rendered is None

def test_evaluation_result_invalid_result_type() -> None:
    """Test that invalid result type raises a validation error."""
    with pytest.raises(ValidationError):
        EvaluationResult(expression="2 + 2", result="not an int", size=3)

def test_evaluation_result_invalid_size() -> None:
    """Test that a result must come from a non-empty tree."""
    with pytest.raises(ValidationError):
        EvaluationResult(expression="2 + 2", result=4, size=0)
