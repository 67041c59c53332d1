"""Tokenize arithmetic expressions and convert them to postfix notation."""
from typing import Dict, List

from expr_tree.common.errors import UnbalancedParenthesesError


OPEN_PAREN: str = "("
CLOSE_PAREN: str = ")"
DIGITS: str = "0123456789"

# Mapping of tokens to precedence level, lower binds weaker.
# The open parenthesis is the lowest level so it acts as a barrier on the stack.
PRECEDENCE: Dict[str, int] = {
    OPEN_PAREN: 0,
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}

# Level of every token missing from PRECEDENCE (close parenthesis, numbers, unknown symbols)
MAX_PRECEDENCE: int = 3

# Pop stacked operators of equal precedence before pushing a new one (left-associativity)
DRAIN_ON_EQUAL_PRECEDENCE: bool = True


class ExpressionParser:
    """
    Parse arithmetic expressions into postfix token sequences.

    Algorithm:
        1. Tokenize character by character, merging consecutive digits
        2. Convert to postfix notation using the Shunting-yard algorithm

    The Shunting-yard algorithm converts an infix expression into postfix notation (RPN).
    It handles operator precedence by temporarily storing operators on a stack and outputting them in the correct order.
    Parentheses are resolved during conversion and never appear in the output.

    Examples:
        - Infix expression (standard notation): (3 + 4) * 2
        - Corresponding postfix notation: 3 4 + 2 *
    """

    @staticmethod
    def tokenize(expr: str) -> List[str]:
        """
        Split an arithmetic expression into tokens.

        Whitespace is dropped and consecutive digits are merged into a single number token,
        every other character becomes a token of its own. No validation happens here.

        :param str expr: Arithmetic expression as a string

        :return: List of tokens
        :rtype: List[str]
        """
        tokens: List[str] = []
        for char in expr:
            if char.isspace():
                continue
            if tokens and char in DIGITS and ExpressionParser.is_number(tokens[-1]):
                tokens[-1] += char
            else:
                tokens.append(char)
        return tokens

    @staticmethod
    def is_number(token: str) -> bool:
        """
        Determine if a token is a non-negative integer literal.

        :param str token: Token string

        :return: True if token is a non-empty run of decimal digits, else False
        :rtype: bool
        """
        return bool(token) and all(char in DIGITS for char in token)

    @staticmethod
    def to_number(token: str) -> int:
        """Convert a number token to an int."""
        return int(token)

    @staticmethod
    def precedence(token: str) -> int:
        """
        Return the precedence level of a token.

        :param str token: Token string

        :return: 0 for "(", 1 for "+" and "-", 2 for "*" and "/", 3 for anything else
        :rtype: int
        """
        return PRECEDENCE.get(token, MAX_PRECEDENCE)

    @staticmethod
    def _should_drain(top: str, token: str) -> bool:
        """Tell whether the operator on top of the stack must be output before pushing token."""
        top_prec = ExpressionParser.precedence(top)
        token_prec = ExpressionParser.precedence(token)
        if DRAIN_ON_EQUAL_PRECEDENCE:
            return top_prec >= token_prec
        return top_prec > token_prec

    @staticmethod
    def to_postfix(tokens: List[str]) -> List[str]:
        """
        Convert a list of infix tokens into postfix notation using the Shunting-yard algorithm.

        :param List[str] tokens: List of arithmetic tokens in infix order

        :return: List of tokens in postfix order
        :rtype: List[str]
        :raises UnbalancedParenthesesError: If parentheses do not match
        """
        output: List[str] = []
        stack: List[str] = []

        for token in tokens:
            if token == OPEN_PAREN:
                stack.append(token)
            elif token == CLOSE_PAREN:
                # Output everything down to the matching "(" which is discarded
                while stack and stack[-1] != OPEN_PAREN:
                    output.append(stack.pop())
                if not stack:
                    raise UnbalancedParenthesesError(f"Unmatched '{CLOSE_PAREN}' in: {' '.join(tokens)}")
                stack.pop()
            elif ExpressionParser.is_number(token):
                # Numbers are added directly to the output
                output.append(token)
            else:
                while stack and ExpressionParser._should_drain(stack[-1], token):
                    output.append(stack.pop())
                stack.append(token)

        # Append remaining operators in reverse order (stack top first)
        while stack:
            token = stack.pop()
            if token == OPEN_PAREN:
                raise UnbalancedParenthesesError(f"Unmatched '{OPEN_PAREN}' in: {' '.join(tokens)}")
            output.append(token)
        return output
