class RecordingLexer:
    def __init__(self, record, tokens):
        self.tokens = iter(tokens)
        self.record = record

    def __iter__(self):
        return self

    def __next__(self):
        token = next(self.tokens)
        self.record.append(f"token:{token!r}")
        return token
