from .errors import DivisionByZeroError
from .nodes import NumberNode, BinaryOpNode


def truncdiv(a, b):
    """向零取整的整数除法（与 C 的 `/` 一致，而不是 Python 的 `//`）。"""
    if b == 0:
        raise DivisionByZeroError()
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


op_map = {
    "+": lambda x, y: x + y,
    "-": lambda x, y: x - y,
    "*": lambda x, y: x * y,
    "/": truncdiv,
}


def evaluate(node):
    """
    后序遍历语法树并计算整数结果：先左子树，再右子树，最后合并。
    使用显式栈，长运算链生成的左深树不会触发递归深度限制。
    """
    values = []
    stack = [(node, False)]
    while stack:
        node, visited = stack.pop()
        if isinstance(node, NumberNode):
            values.append(node.value)
        elif isinstance(node, BinaryOpNode):
            if visited:
                right = values.pop()
                left = values.pop()
                values.append(op_map[node.op](left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        else:
            raise TypeError(f"Unknown node type: {type(node).__name__}")
    return values.pop()
