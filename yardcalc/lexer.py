import re

from .box import SourcePosition, Number, Operator, LeftParen, RightParen
from .errors import UnknownCharacterError, NumberOverflowError

INT_MAX = 2 ** 31 - 1


class Match:
    """封装匹配索引"""

    __slots__ = ("start", "end")

    def __init__(self, start, end):
        self.start = start
        self.end = end


class Rule:
    """封装匹配的名称和正则表达式对象"""

    def __init__(self, name, pattern, flags=0):
        self.name = name
        self.re = re.compile(pattern, flags=flags)

    def matches(self, s, pos):
        """
        从位置pos开始解析字符串s
        :return: 如果规则匹配，则返回一个`Match`对象；如果不匹配，则返回None
        """
        m = self.re.match(s, pos)
        return Match(*m.span(0)) if m is not None else None


# 只接受 ASCII 数字和 C 语言 isspace() 认可的空白字符
RULES = [
    Rule("NUMBER", r"[0-9]+"),
    Rule("OPERATOR", r"[-+*/]"),
    Rule("LPAREN", r"\("),
    Rule("RPAREN", r"\)"),
]
IGNORE_RULES = [
    Rule("", r"[ \t\n\r\f\v]+"),
]


class Lexer:
    """词法分析器，lex()获取 Token 流"""

    def __init__(self, max_value=INT_MAX, rules=RULES, ignore_rules=IGNORE_RULES):
        self.max_value = max_value
        self.rules = rules
        self.ignore_rules = ignore_rules

    def lex(self, s):
        return LexerStream(self, s)

    def tokenize(self, s):
        return list(self.lex(s))

    def make_token(self, name, text, source_pos):
        if name == "NUMBER":
            # 先比较位数，超长数字不交给 int() 转换
            digits = text.lstrip("0") or "0"
            if self.max_value is not None and len(digits) > len(str(self.max_value)):
                raise NumberOverflowError(text, self.max_value, source_pos)
            try:
                value = int(digits)
            except ValueError:
                raise NumberOverflowError(text, self.max_value, source_pos)
            if self.max_value is not None and value > self.max_value:
                raise NumberOverflowError(text, self.max_value, source_pos)
            return Number(value)
        elif name == "OPERATOR":
            return Operator(text)
        elif name == "LPAREN":
            return LeftParen()
        elif name == "RPAREN":
            return RightParen()
        raise ValueError(f"Unknown rule {name!r}")


class LexerStream:
    """词法分析器流，逐个产生 Token，遇到第一个非法字符即失败"""

    def __init__(self, lexer, s):
        self.lexer = lexer  # 词法分析器（包含匹配规则）
        self.s = s          # 输入字符串
        self.idx = 0
        self._lineno = 1
        self._colno = 1

    def __iter__(self):
        return self

    def _update_pos(self, match):
        # 更新当前索引到匹配结束位置
        self.idx = match.end
        # 统计匹配范围内的换行符数量，更新行号
        self._lineno += self.s.count("\n", match.start, match.end)
        # 计算最后一个换行符的位置，用于更新列号
        last_nl = self.s.rfind("\n", 0, match.start)
        if last_nl < 0:
            return match.start + 1
        else:
            return match.start - last_nl

    def _current_pos(self):
        last_nl = self.s.rfind("\n", 0, self.idx)
        return SourcePosition(self.idx, self._lineno, self.idx - last_nl if last_nl >= 0 else self.idx + 1)

    def __next__(self):
        # 第一步：跳过空白
        while True:
            if self.idx >= len(self.s):
                raise StopIteration
            for rule in self.lexer.ignore_rules:
                match = rule.matches(self.s, self.idx)
                if match:
                    self._update_pos(match)
                    break
            else:
                break

        # 第二步：匹配有效 Token 规则
        for rule in self.lexer.rules:
            match = rule.matches(self.s, self.idx)
            if match:
                lineno = self._lineno
                self._colno = self._update_pos(match)
                source_pos = SourcePosition(match.start, lineno, self._colno)
                return self.lexer.make_token(rule.name, self.s[match.start:match.end], source_pos)
        else:
            raise UnknownCharacterError(self.s[self.idx], self._current_pos())


def tokenize(s, max_value=INT_MAX):
    """把表达式字符串切分为 Token 列表。"""
    return Lexer(max_value=max_value).tokenize(s)
