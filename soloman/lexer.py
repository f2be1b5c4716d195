"""
Soloman lexer.

Tokens are pulled one at a time with ``Lexer.next_token``; the lexer keeps a
single cursor into the source and never backtracks.
"""

import re
from typing import NamedTuple, Optional, Union

from .errors import InvalidCharacter, LiteralOverflow, MalformedKeyword
from .nodes import INT64_MAX

KEYWORD = 'print'

SYMBOLS = {
    '+': 'PLUS',
    '-': 'MINUS',
    '*': 'MUL',
    '/': 'DIV',
    '(': 'LPAREN',
    ')': 'RPAREN',
    ';': 'SEMI',
}

NUMBER_RE = re.compile(r'[0-9]+')


class Token(NamedTuple):
    kind: str
    value: Optional[Union[int, str]] = None


EOF = Token('EOF')


class Lexer:
    def __init__(self, code):
        self.code = code
        self.pos = 0

    def skip_whitespace(self):
        while self.pos < len(self.code) and self.code[self.pos].isspace():
            self.pos += 1

    def lex_number(self):
        mo = NUMBER_RE.match(self.code, self.pos)
        text = mo.group()
        self.pos = mo.end()
        value = int(text)
        if value > INT64_MAX:
            raise LiteralOverflow(f'Integer literal out of range: {text}')
        return Token('NUMBER', value)

    def lex_keyword(self):
        if not self.code.startswith(KEYWORD, self.pos):
            text = self.code[self.pos:self.pos + len(KEYWORD)]
            raise MalformedKeyword(f'Unexpected token: {text!r}')
        self.pos += len(KEYWORD)
        return Token('PRINT', KEYWORD)

    def next_token(self) -> Token:
        self.skip_whitespace()
        if self.pos >= len(self.code):
            return EOF

        char = self.code[self.pos]
        # str.isdigit() also accepts non-ASCII digits
        if '0' <= char <= '9':
            return self.lex_number()
        if char == 'p':
            return self.lex_keyword()
        if char in SYMBOLS:
            self.pos += 1
            return Token(SYMBOLS[char], char)
        raise InvalidCharacter(f'Unexpected character: {char!r}')

    def __iter__(self):
        while True:
            token = self.next_token()
            yield token
            if token.kind == 'EOF':
                return
