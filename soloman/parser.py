from .errors import UnexpectedToken
from .lexer import Lexer
from .nodes import BinOp, Num, Print, Program

ADDITIVE = ('PLUS', 'MINUS')
MULTIPLICATIVE = ('MUL', 'DIV')


class Parser:
    """Recursive descent parser holding a single token of lookahead."""

    def __init__(self, lexer):
        self.lexer = lexer
        self.current = lexer.next_token()

    def eat(self, kind):
        token = self.current
        if token.kind != kind:
            raise UnexpectedToken(f'Unexpected token: expected {kind}, found {token.kind}')
        self.current = self.lexer.next_token()
        return token

    def parse(self):
        print("Parsing")
        return self.program()

    def program(self):
        statements = []
        while self.current.kind == 'PRINT':
            statements.append(self.statement())
        self.eat('EOF')
        return Program(tuple(statements))

    def statement(self):
        self.eat('PRINT')
        node = self.expr()
        self.eat('SEMI')
        return Print(node)

    def expr(self):
        node = self.term()
        while self.current.kind in ADDITIVE:
            op = self.eat(self.current.kind).value
            node = BinOp(node, op, self.term())
        return node

    def term(self):
        node = self.factor()
        while self.current.kind in MULTIPLICATIVE:
            op = self.eat(self.current.kind).value
            node = BinOp(node, op, self.factor())
        return node

    def factor(self):
        token = self.current
        if token.kind == 'NUMBER':
            self.eat('NUMBER')
            return Num(token.value)
        if token.kind == 'LPAREN':
            self.eat('LPAREN')
            node = self.expr()
            self.eat('RPAREN')
            return node
        raise UnexpectedToken(f'Unexpected token: {token.kind}')


def parse(code):
    return Parser(Lexer(code)).parse()
