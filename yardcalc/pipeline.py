from .errors import MalformedExpressionError
from .evaluator import evaluate
from .lexer import Lexer
from .parser import ShuntingYardParser


def parse(expression, lexer=None, parser=None):
    """
    词法分析 + 语法分析，返回语法树。
    空白输入在切分前即被拒绝；先完整切分，再进行语法分析。
    """
    if not expression.strip(" \t\n\r\f\v"):
        raise MalformedExpressionError("empty expression")
    if lexer is None:
        lexer = Lexer()
    if parser is None:
        parser = ShuntingYardParser()
    return parser.parse(lexer.tokenize(expression))


def process(expression, lexer=None, parser=None):
    """计算表达式的值；任一阶段失败都会抛出 ExpressionError 的子类。"""
    return evaluate(parse(expression, lexer, parser))
