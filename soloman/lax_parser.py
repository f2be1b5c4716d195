"""
Line-oriented parser that splits expressions on the first ``+`` and then on
the first ``*`` in the raw text instead of climbing token precedence.

It only knows ``+`` and ``*``, has no parentheses, and nests chains of the
same operator to the right. Kept for sources written against the early
demonstration compiler; use ``parser.parse`` for everything else.
"""

import re

from .errors import InvalidCharacter, LiteralOverflow, UnexpectedToken
from .nodes import INT64_MAX, INT64_MIN, BinOp, Num, Print, Program

PREFIX = 'print '
LITERAL_RE = re.compile(r'-?[0-9]+')


def parse_expr(text):
    pos = text.find('+')
    if pos != -1:
        return BinOp(parse_expr(text[:pos]), '+', parse_expr(text[pos + 1:]))

    pos = text.find('*')
    if pos != -1:
        return BinOp(parse_expr(text[:pos]), '*', parse_expr(text[pos + 1:]))

    literal = text.strip()
    if not LITERAL_RE.fullmatch(literal):
        raise InvalidCharacter(f'Invalid integer literal: {literal!r}')
    value = int(literal)
    if not INT64_MIN <= value <= INT64_MAX:
        raise LiteralOverflow(f'Integer literal out of range: {literal}')
    return Num(value)


def parse_lax(code):
    print("Parsing (lax)")
    statements = []
    for line in code.splitlines():
        line = line.strip()
        if not line.startswith(PREFIX):
            continue
        body = line[len(PREFIX):]
        if not body.endswith(';'):
            raise UnexpectedToken(f'Unexpected token: expected SEMI at end of {line!r}')
        statements.append(Print(parse_expr(body[:-1])))
    return Program(tuple(statements))
