from dataclasses import dataclass
from typing import Tuple, Union

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1

OPERATORS = ('+', '-', '*', '/')


class ASTNode:
    pass


@dataclass(frozen=True)
class Num(ASTNode):
    value: int


@dataclass(frozen=True)
class BinOp(ASTNode):
    left: 'Expr'
    op: str
    right: 'Expr'


Expr = Union[Num, BinOp]


@dataclass(frozen=True)
class Print(ASTNode):
    expr: Expr


@dataclass(frozen=True)
class Program(ASTNode):
    statements: Tuple[Print, ...] = ()
