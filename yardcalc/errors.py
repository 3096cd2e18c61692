class GrammarError(Exception):
    pass


class HistoryWarning(Warning):
    pass


class ExpressionError(Exception):
    def __init__(self, message, source_pos=None):
        super().__init__(message)
        self.message = message
        self.source_pos = source_pos

    def get_source_pos(self):
        return self.source_pos

    def __repr__(self):
        return f'{type(self).__name__}({self.message!r}, {self.source_pos!r})'


class LexingError(ExpressionError):
    pass


class UnknownCharacterError(LexingError):
    def __init__(self, char, source_pos):
        super().__init__(f"unknown character: {char!r}", source_pos)
        self.char = char


class NumberOverflowError(LexingError):
    def __init__(self, text, limit, source_pos):
        shown = text if len(text) <= 20 else f"{text[:20]}..."
        if limit is None:
            super().__init__(f"number {shown} is too large", source_pos)
        else:
            super().__init__(f"number {shown} exceeds {limit}", source_pos)
        self.text = text
        self.limit = limit


class ParsingError(ExpressionError):
    pass


class MismatchedParenthesesError(ParsingError):
    def __init__(self, message="mismatched parentheses", source_pos=None):
        super().__init__(message, source_pos)


class MalformedExpressionError(ParsingError):
    def __init__(self, message="malformed expression", source_pos=None):
        super().__init__(message, source_pos)


class EvaluationError(ExpressionError):
    pass


class DivisionByZeroError(EvaluationError):
    def __init__(self, message="division by zero", source_pos=None):
        super().__init__(message, source_pos)
