OPERATORS = ("+", "-", "*", "/")


class BaseBox:
    """词法单元与语法树节点的公共基类。"""
    __slots__ = ()


class SourcePosition:
    """封装源位置信息（索引，行号，列号）"""

    def __init__(self, idx, lineno, colno):
        self.idx = idx
        self.lineno = lineno
        self.colno = colno

    def __repr__(self):
        return f"SourcePosition(idx={self.idx}, lineno={self.lineno}, colno={self.colno})"

    def __eq__(self, other):
        if not isinstance(other, SourcePosition):
            return NotImplemented
        return (self.idx, self.lineno, self.colno) == (other.idx, other.lineno, other.colno)


class Token(BaseBox):
    """
    词法单元的基类，共四种：Number、Operator、LeftParen、RightParen。
    词法单元不携带位置信息，创建后不再修改。
    """
    __slots__ = ()

    def __eq__(self, other):
        if not isinstance(other, Token):
            # 尝试other的比较方法
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))

    def _key(self):
        return None


class Number(Token):
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Number({self.value})"

    def _key(self):
        return self.value


class Operator(Token):
    __slots__ = ("op",)

    def __init__(self, op):
        if op not in OPERATORS:
            raise ValueError(f"Unknown operator {op!r}")
        self.op = op

    def __repr__(self):
        return f"Operator({self.op!r})"

    def _key(self):
        return self.op


class LeftParen(Token):
    __slots__ = ()

    def __repr__(self):
        return "LeftParen()"


class RightParen(Token):
    __slots__ = ()

    def __repr__(self):
        return "RightParen()"
