"""Exceptions raised for malformed arithmetic expressions and trees."""


class ExpressionError(ValueError):
    """Base class for every failure reported while parsing or evaluating an expression."""


class UnbalancedParenthesesError(ExpressionError):
    """A closing parenthesis has no opening match, or an opening one is never closed."""


class InsufficientOperandsError(ExpressionError):
    """An operator was reached with fewer than two operands available."""


class ExcessOperandsError(ExpressionError):
    """Operands remain after every operator has been applied."""


class UnknownOperatorError(ExpressionError):
    """A token is neither a number, a parenthesis nor one of + - * /."""


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
    """The right operand of a division evaluated to zero."""


class EmptyTreeError(ExpressionError):
    """An operation needing a root node was called on an empty tree."""
