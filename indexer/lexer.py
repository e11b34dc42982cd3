class Lexer:
    """Splits text into number runs, letter runs and single-character tokens"""

    def __init__(self, content):
        self.content = content
        self.pos = 0

    def _trim_left(self):
        while self.pos < len(self.content) and self.content[self.pos].isspace():
            self.pos += 1

    def _chop(self, n):
        token = self.content[self.pos:self.pos + n]
        self.pos += n
        return token

    def _chop_while(self, predicate):
        n = 0
        while self.pos + n < len(self.content) and predicate(self.content[self.pos + n]):
            n += 1
        return self._chop(n)

    def next_token(self):
        self._trim_left()

        if self.pos >= len(self.content):
            return None

        current = self.content[self.pos]
        if current.isnumeric():
            return self._chop_while(str.isnumeric)
        if current.isalpha():
            return self._chop_while(str.isalpha)

        return self._chop(1)

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token


def to_term(token):
    """Upper-case ASCII letters only; other characters are kept as they are"""
    return "".join(c.upper() if c.isascii() else c for c in token)


def tokenize(content):
    return list(Lexer(content))


def query_terms(text):
    """Upper-cased word and number terms of a query, first occurrence order"""
    terms = []
    for token in Lexer(text):
        if not token.isalnum():
            continue
        term = to_term(token)
        if term not in terms:
            terms.append(term)
    return terms
