from .errors import (ExpressionError, LexingError, UnknownCharacterError, NumberOverflowError,
                     ParsingError, MismatchedParenthesesError, MalformedExpressionError,
                     EvaluationError, DivisionByZeroError, GrammarError, HistoryWarning)
from .box import Token, Number, Operator, LeftParen, RightParen, SourcePosition
from .nodes import Node, NumberNode, BinaryOpNode
from .lexer import Lexer, tokenize
from .parser import ShuntingYardParser, PRECEDENCE
from .evaluator import evaluate
from .render import render, format_tree
from .pipeline import parse, process

__version__ = '0.1.0'

__all__ = [
    "ExpressionError", "LexingError", "UnknownCharacterError", "NumberOverflowError",
    "ParsingError", "MismatchedParenthesesError", "MalformedExpressionError",
    "EvaluationError", "DivisionByZeroError", "GrammarError", "HistoryWarning",
    "Token", "Number", "Operator", "LeftParen", "RightParen", "SourcePosition",
    "Node", "NumberNode", "BinaryOpNode",
    "Lexer", "tokenize", "ShuntingYardParser", "PRECEDENCE",
    "evaluate", "render", "format_tree", "parse", "process",
]
