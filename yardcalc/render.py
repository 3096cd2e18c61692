from .nodes import NumberNode, BinaryOpNode


def render(node, prefix="", is_left=False):
    """
    以方框字符绘制语法树，先序遍历：当前节点，然后左子树，最后右子树。
    :param prefix: 当前层级的缩进前缀，反映祖先节点的分支情况。
    :param is_left: 当前节点是否为左子节点。
    :return: 文本行列表。
    """
    lines = []
    stack = [(node, prefix, is_left)]
    while stack:
        node, prefix, is_left = stack.pop()
        branch = "├" if is_left else "└"
        stem = "│" if is_left else " "
        if isinstance(node, NumberNode):
            lines.extend([
                f"{prefix}{branch}┬────┐",
                f"{prefix}{stem}│ {node.value:>2} │",
                f"{prefix}{stem}└────┘",
            ])
        elif isinstance(node, BinaryOpNode):
            lines.extend([
                f"{prefix}{branch}┬────┐",
                f"{prefix}{stem}│ {node.op}  │",
                f"{prefix}{stem}└──┬─┘",
            ])
            new_prefix = prefix + ("│   " if is_left else "    ")
            stack.append((node.right, new_prefix, False))
            stack.append((node.left, new_prefix, True))
        else:
            raise TypeError(f"Unknown node type: {type(node).__name__}")
    return lines


def format_tree(node):
    return "\n".join(render(node))
