"""Binary expression tree built from arithmetic tokens."""
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from expr_tree.common.errors import (
    DivisionByZeroError,
    EmptyTreeError,
    ExcessOperandsError,
    InsufficientOperandsError,
)
from expr_tree.common.nodes import Operator, TreeNode
from expr_tree.common.parser import ExpressionParser


class Notation(str, Enum):
    """Order in which a tree can be rendered."""

    PREFIX = "prefix"
    INFIX = "infix"
    POSTFIX = "postfix"


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise DivisionByZeroError(f"Division by zero: {a} / {b}")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


class ExprTree(BaseModel):
    """
    Expression tree owning a single root node.

    The tree is immutable: its size is counted once at construction.

    Examples:
        >>> tree = ExprTree.from_expression("3 + 4 * 2")
        >>> tree.evaluate_whole_tree()
        11
        >>> tree.prefix_order()
        '+ 3 * 4 2'
    """

    model_config = ConfigDict(frozen=True)

    root: Optional[TreeNode] = Field(default=None, description="Root node, None for an empty tree")

    _size: int = PrivateAttr(default=0)

    def model_post_init(self, __context: Any) -> None:
        self._size = self.root.count() if self.root is not None else 0

    @property
    def size(self) -> int:
        """Number of nodes in the tree."""
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    @classmethod
    def from_postfix(cls, postfix: List[str]) -> "ExprTree":
        """
        Build a tree from a list of tokens in postfix order.

        :param List[str] postfix: Tokens in postfix order

        :return: Built tree, empty if there are no tokens
        :rtype: ExprTree
        :raises UnknownOperatorError: If a token is not a number nor an arithmetic operator
        :raises InsufficientOperandsError: If an operator has fewer than two operands
        :raises ExcessOperandsError: If operands remain without an operator
        """
        stack: List[TreeNode] = []

        for token in postfix:
            if ExpressionParser.is_number(token):
                stack.append(TreeNode.number(ExpressionParser.to_number(token)))
            else:
                operator = Operator.from_symbol(token)
                if len(stack) < 2:
                    raise InsufficientOperandsError(
                        f"Operator {token!r} needs two operands: {' '.join(postfix)}"
                    )
                # The first pop is the right operand
                right: TreeNode = stack.pop()
                left: TreeNode = stack.pop()
                stack.append(TreeNode(operator=operator, left=left, right=right))

        if not stack:
            return cls()
        if len(stack) > 1:
            raise ExcessOperandsError(f"Operands left without operator: {' '.join(postfix)}")
        return cls(root=stack[0])

    @classmethod
    def build_tree(cls, tokens: List[str]) -> "ExprTree":
        """
        Build a tree from a list of tokens in infix order, as produced by tokenize.

        :param List[str] tokens: Tokens in infix order

        :return: Built tree, empty if there are no tokens
        :rtype: ExprTree
        :raises ExpressionError: If the tokens do not form a valid expression
        """
        return cls.from_postfix(ExpressionParser.to_postfix(tokens))

    @classmethod
    def from_expression(cls, expr: str) -> "ExprTree":
        """Tokenize an expression string and build its tree."""
        return cls.build_tree(ExpressionParser.tokenize(expr))

    @staticmethod
    def evaluate(node: TreeNode) -> int:
        """
        Compute the value of the subtree rooted at node.

        Division truncates toward zero. Operands are reduced on an explicit stack in post-order.

        :param TreeNode node: Subtree root

        :return: Value of the subtree
        :rtype: int
        :raises DivisionByZeroError: If a divisor evaluates to zero
        """
        values: List[int] = []
        for current in node.walk_postorder():
            if current.operator is Operator.VALUE:
                values.append(current.value)
                continue
            right = values.pop()
            left = values.pop()
            if current.operator is Operator.PLUS:
                values.append(left + right)
            elif current.operator is Operator.MINUS:
                values.append(left - right)
            elif current.operator is Operator.TIMES:
                values.append(left * right)
            else:
                values.append(_truncating_div(left, right))
        return values[0]

    def _require_root(self) -> TreeNode:
        if self.root is None:
            raise EmptyTreeError("Operation requires a non-empty tree")
        return self.root

    def evaluate_whole_tree(self) -> int:
        """Compute the value of the expression represented by the whole tree."""
        return ExprTree.evaluate(self._require_root())

    @staticmethod
    def _render(node: TreeNode, notation: Notation) -> str:
        rendered: List[str] = []
        for current in node.walk_postorder():
            if current.is_leaf():
                rendered.append(str(current))
                continue
            right = rendered.pop()
            left = rendered.pop()
            if notation is Notation.PREFIX:
                rendered.append(f"{current} {left} {right}")
            elif notation is Notation.INFIX:
                rendered.append(f"{left} {current} {right}")
            else:
                rendered.append(f"{left} {right} {current}")
        return rendered[0]

    def render(self, notation: Notation) -> str:
        """
        Render the tree as a space-separated string.

        :param Notation notation: Prefix, infix or postfix

        :return: Rendered expression
        :rtype: str
        :raises EmptyTreeError: If the tree is empty
        """
        return ExprTree._render(self._require_root(), Notation(notation))

    def prefix_order(self) -> str:
        return self.render(Notation.PREFIX)

    def infix_order(self) -> str:
        return self.render(Notation.INFIX)

    def postfix_order(self) -> str:
        return self.render(Notation.POSTFIX)
