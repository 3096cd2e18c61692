from .box import OPERATORS, Number, Operator, LeftParen, RightParen
from .errors import GrammarError, MismatchedParenthesesError, MalformedExpressionError
from .nodes import NumberNode, BinaryOpNode

# 由低到高排列，同一组内的运算符优先级相同
PRECEDENCE = [
    ("left", ["+", "-"]),
    ("left", ["*", "/"]),
]


def build_precedence(precedence):
    """
    把优先级列表转换为 {运算符: (结合性, 优先级等级)} 的字典。
    :param precedence: 元组列表，每个元组由结合性（left、right 或 non_assoc）和一组运算符组成，等级从 1 开始递增。
    """
    table = {}
    for idx, (assoc, ops) in enumerate(precedence, 1):
        if assoc not in ["left", "right", "non_assoc"]:
            raise GrammarError(f"Precedence must be one of left, right, non_assoc; not {assoc!r}")
        for op in ops:
            if op not in OPERATORS:
                raise GrammarError(f"Unknown operator {op!r}")
            if op in table:
                raise GrammarError(f"Precedence already specified for {op!r}")
            table[op] = (assoc, idx)
    missing = [op for op in OPERATORS if op not in table]
    if missing:
        raise GrammarError(f"No precedence specified for {', '.join(missing)}")
    return table


class ShuntingYardParser:
    """
    调度场（shunting-yard）算法的语法分析器。
    输出栈保存已经完成的子树，运算符栈保存尚未归约的运算符和左括号；
    两个栈都只在一次 parse() 调用内部存在。
    :param precedence: 运算符优先级列表，格式同 PRECEDENCE。
    """

    def __init__(self, precedence=PRECEDENCE):
        self.precedence = build_precedence(precedence)

    def parse(self, tokens):
        output_stack = []    # 已完成的子树
        operator_stack = []  # 待处理的运算符 / 左括号

        for token in tokens:
            if isinstance(token, Number):
                output_stack.append(NumberNode(token.value))
            elif isinstance(token, Operator):
                # 栈顶运算符优先级不低于当前运算符时先归约（左结合）
                while operator_stack and self._should_reduce(operator_stack[-1], token.op):
                    self._reduce(operator_stack.pop(), output_stack)
                operator_stack.append(token)
            elif isinstance(token, LeftParen):
                operator_stack.append(token)
            elif isinstance(token, RightParen):
                while operator_stack and not isinstance(operator_stack[-1], LeftParen):
                    self._reduce(operator_stack.pop(), output_stack)
                if not operator_stack:
                    raise MismatchedParenthesesError("unmatched ')'")
                operator_stack.pop()  # 丢弃左括号
            else:
                raise MalformedExpressionError(f"unexpected token {token!r}")

        while operator_stack:
            top = operator_stack.pop()
            if isinstance(top, LeftParen):
                raise MismatchedParenthesesError("unmatched '('")
            self._reduce(top, output_stack)

        if len(output_stack) != 1:
            if not output_stack:
                raise MalformedExpressionError("empty expression")
            raise MalformedExpressionError("missing operator")
        return output_stack[0]

    def _should_reduce(self, top, op):
        if not isinstance(top, Operator):
            return False
        top_assoc, top_level = self.precedence[top.op]
        assoc, level = self.precedence[op]
        if top_level > level:
            return True
        if top_level < level:
            return False
        if assoc == "non_assoc":
            raise MalformedExpressionError(f"operator {op!r} is non-associative")
        return assoc == "left"

    def _reduce(self, token, output_stack):
        if len(output_stack) < 2:
            raise MalformedExpressionError(f"missing operand for {token.op!r}")
        # 先弹出的是右操作数
        right = output_stack.pop()
        left = output_stack.pop()
        output_stack.append(BinaryOpNode(token.op, left, right))
