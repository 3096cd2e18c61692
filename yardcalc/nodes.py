from .box import BaseBox, OPERATORS


def preorder(node):
    """先序遍历（显式栈，不受递归深度限制）。"""
    stack = [node]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, BinaryOpNode):
            stack.append(node.right)
            stack.append(node.left)


class Node(BaseBox):
    """语法树节点的基类，只有 NumberNode 和 BinaryOpNode 两种。"""
    __slots__ = ()

    def _signature(self):
        # 先序序列加上每个节点的种类，足以唯一确定一棵二叉运算树
        return tuple(n._key() for n in preorder(self))

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self._signature() == other._signature()

    def __hash__(self):
        return hash(self._signature())


class NumberNode(Node):
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"NumberNode({self.value})"

    def _key(self):
        return ("number", self.value)


class BinaryOpNode(Node):
    """二元运算节点，独占其左右子树。"""
    __slots__ = ("op", "left", "right")

    def __init__(self, op, left, right):
        if op not in OPERATORS:
            raise ValueError(f"Unknown operator {op!r}")
        self.op = op
        self.left = left
        self.right = right

    def __repr__(self):
        return f"BinaryOpNode({self.op!r}, {self.left!r}, {self.right!r})"

    def _key(self):
        return ("binary", self.op)
