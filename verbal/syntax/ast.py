from dataclasses import dataclass, field
from typing import List, Optional
from ..lexing import Token

# ======================================
# AST Nodes
# ======================================

class Node:
    token: Token

    def token_literal(self) -> str:
        return self.token.lexeme

class Stmt(Node): pass
class Expr(Node): pass

# --- Expressions ---

@dataclass
class Identifier(Expr):
    token: Token
    value: str
    def __str__(self): return self.value

@dataclass
class IntegerLiteral(Expr):
    token: Token
    value: int
    def __str__(self): return self.token.lexeme

@dataclass
class Boolean(Expr):
    token: Token
    value: bool
    def __str__(self): return self.token.lexeme

@dataclass
class PrefixExpression(Expr):
    token: Token
    operator: str
    right: Optional[Expr] = None
    def __str__(self): return f"({self.operator}{self.right})"

@dataclass
class InfixExpression(Expr):
    token: Token
    operator: str
    left: Expr
    right: Optional[Expr] = None
    def __str__(self): return f"({self.left} {self.operator} {self.right})"

# --- Statements ---

@dataclass
class LetStatement(Stmt):
    token: Token
    name: Identifier
    value: Optional[Expr] = None

    def __str__(self):
        value = "" if self.value is None else str(self.value)
        return f"{self.token_literal()} {self.name} = {value};"

@dataclass
class ReturnStatement(Stmt):
    token: Token
    return_value: Optional[Expr] = None

    def __str__(self):
        if self.return_value is None:
            return f"{self.token_literal()};"
        return f"{self.token_literal()} {self.return_value};"

@dataclass
class ExpressionStatement(Stmt):
    token: Token
    expression: Optional[Expr] = None
    def __str__(self): return "" if self.expression is None else str(self.expression)

@dataclass
class BlockStatement(Stmt):
    token: Token
    statements: List[Stmt] = field(default_factory=list)
    def __str__(self): return "{ " + "".join(str(s) for s in self.statements) + " }"

@dataclass
class IfStatement(Stmt):
    token: Token
    condition: Optional[Expr] = None
    consequence: Optional[BlockStatement] = None
    alternative: Optional[BlockStatement] = None
    else_token: Optional[Token] = None

    def __str__(self):
        out = f"{self.token_literal()}{self.condition} {self.consequence}"
        if self.alternative is not None:
            else_literal = "else" if self.else_token is None else self.else_token.lexeme
            out += f" {else_literal} {self.alternative}"
        return out

# --- Root ---

@dataclass
class Program(Node):
    statements: List[Stmt] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self): return "".join(str(s) for s in self.statements)
