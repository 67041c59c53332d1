"""Nodes of an arithmetic expression tree."""
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from expr_tree.common.errors import UnknownOperatorError


class Operator(str, Enum):
    """Kind of a tree node, the value is the symbol it renders as."""

    VALUE = "value"
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDE = "/"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """
        Return the arithmetic operator matching a symbol.

        :param str symbol: One of "+", "-", "*", "/"

        :return: Matching operator
        :rtype: Operator
        :raises UnknownOperatorError: If the symbol is not an arithmetic operator
        """
        if symbol == cls.VALUE.value:
            raise UnknownOperatorError(f"Unknown operator: {symbol!r}")
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperatorError(f"Unknown operator: {symbol!r}") from None


class TreeNode(BaseModel):
    """
    A node of an expression tree.

    A VALUE node holds an integer and has no children.
    Any other node holds no value and exactly two children, which it owns.
    """

    # Nodes are never mutated once the tree is built
    model_config = ConfigDict(frozen=True)

    operator: Operator = Field(..., description="Node kind")
    value: Optional[int] = Field(default=None, description="Payload of a VALUE node")
    left: Optional["TreeNode"] = Field(default=None, description="Left operand of an operator node")
    right: Optional["TreeNode"] = Field(default=None, description="Right operand of an operator node")

    @model_validator(mode="after")
    def check_shape(self) -> "TreeNode":
        """Ensure VALUE nodes are leaves with a payload and operator nodes have both children."""
        if self.operator is Operator.VALUE:
            if self.value is None:
                raise ValueError("Value node requires a value")
            if self.left is not None or self.right is not None:
                raise ValueError("Value node cannot have children")
        else:
            if self.value is not None:
                raise ValueError(f"Operator node {self.operator.value!r} cannot hold a value")
            if self.left is None or self.right is None:
                raise ValueError(f"Operator node {self.operator.value!r} requires two children")
        return self

    @classmethod
    def number(cls, value: int) -> "TreeNode":
        """Create a VALUE node."""
        return cls(operator=Operator.VALUE, value=value)

    @classmethod
    def binary(cls, symbol: str, left: "TreeNode", right: "TreeNode") -> "TreeNode":
        """
        Create an operator node from its symbol and operands.

        :param str symbol: One of "+", "-", "*", "/"
        :param TreeNode left: Left operand
        :param TreeNode right: Right operand

        :return: New operator node
        :rtype: TreeNode
        :raises UnknownOperatorError: If the symbol is not an arithmetic operator
        """
        return cls(operator=Operator.from_symbol(symbol), left=left, right=right)

    def is_leaf(self) -> bool:
        return self.operator is Operator.VALUE

    def walk_postorder(self) -> Iterator["TreeNode"]:
        """
        Yield the nodes of the subtree rooted here, children before their parent.

        The walk uses an explicit stack rather than recursion.

        :return: Iterator over the nodes, left subtree first
        :rtype: Iterator[TreeNode]
        """
        stack: List[Tuple["TreeNode", bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded or node.is_leaf():
                yield node
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))

    def count(self) -> int:
        """Return the number of nodes in the subtree rooted here."""
        return sum(1 for _ in self.walk_postorder())

    def __str__(self) -> str:
        if self.is_leaf():
            return str(self.value)
        return self.operator.value
