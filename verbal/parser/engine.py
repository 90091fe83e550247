from typing import Callable, Dict, List, Optional
from ..lexing import Lexer, Token, TokenKind
from ..syntax import ast
from ..z3_ops import bitvec

# ======================================
# Precedence
# ======================================

LOWEST = 1
EQUALS = 2       # == !=
LESSGREATER = 3  # < >
SUM = 4          # + -
PRODUCT = 5      # * /
PREFIX = 6       # -x !x
CALL = 7         # f(x), reserved

PRECEDENCES: Dict[str, int] = {
    TokenKind.EQ: EQUALS,
    TokenKind.NOT_EQ: EQUALS,
    TokenKind.LT: LESSGREATER,
    TokenKind.GT: LESSGREATER,
    TokenKind.PLUS: SUM,
    TokenKind.MINUS: SUM,
    TokenKind.ASTERISK: PRODUCT,
    TokenKind.SLASH: PRODUCT,
}

PrefixFn = Callable[[], Optional[ast.Expr]]
InfixFn = Callable[[ast.Expr], Optional[ast.Expr]]

# ======================================
# Pratt Parser
# ======================================

class Parser:
    def __init__(self, lexer: Lexer, debug: bool = False):
        self.lexer = lexer
        self.debug = debug
        self.errors: List[str] = []

        self.cur_token: Token = lexer.next_token()
        self.peek_token: Token = lexer.next_token()

        self.prefix_fns: Dict[str, PrefixFn] = {
            TokenKind.IDENTIFIER: self.parse_identifier,
            TokenKind.INT: self.parse_integer_literal,
            TokenKind.TRUE: self.parse_boolean,
            TokenKind.FALSE: self.parse_boolean,
            TokenKind.BANG: self.parse_prefix_expression,
            TokenKind.MINUS: self.parse_prefix_expression,
            TokenKind.LPAREN: self.parse_grouped_expression,
        }
        self.infix_fns: Dict[str, InfixFn] = {
            kind: self.parse_infix_expression for kind in PRECEDENCES
        }

    def log(self, msg: str):
        if self.debug:
            print(f"[PARSE] {msg}")

    # --- token cursor ---

    def next_token(self):
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, kind: str) -> bool:
        return self.cur_token.kind == kind

    def peek_token_is(self, kind: str) -> bool:
        return self.peek_token.kind == kind

    def expect_peek(self, kind: str) -> bool:
        if self.peek_token_is(kind):
            self.next_token()
            return True
        self.peek_error(kind)
        return False

    def peek_error(self, kind: str):
        self.errors.append(f"expected next token to be {kind}, got {self.peek_token.kind} instead")

    def peek_precedence(self) -> int:
        return PRECEDENCES.get(self.peek_token.kind, LOWEST)

    def cur_precedence(self) -> int:
        return PRECEDENCES.get(self.cur_token.kind, LOWEST)

    # --- statements ---

    def parse_program(self) -> ast.Program:
        program = ast.Program()
        while not self.cur_token_is(TokenKind.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                self.log(f"statement: {stmt}")
                program.statements.append(stmt)
            self.next_token()
        return program

    def parse_statement(self) -> Optional[ast.Stmt]:
        kind = self.cur_token.kind
        if kind == TokenKind.LET:
            return self.parse_let_statement()
        if kind == TokenKind.RETURN:
            return self.parse_return_statement()
        if kind == TokenKind.IF:
            return self.parse_if_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self) -> Optional[ast.LetStatement]:
        tok = self.cur_token
        if not self.expect_peek(TokenKind.IDENTIFIER):
            return None
        name = ast.Identifier(self.cur_token, self.cur_token.lexeme)
        if not self.expect_peek(TokenKind.ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(LOWEST)
        if self.peek_token_is(TokenKind.SEMICOLON):
            self.next_token()
        if value is None:
            return None
        return ast.LetStatement(tok, name, value)

    def parse_return_statement(self) -> ast.ReturnStatement:
        stmt = ast.ReturnStatement(self.cur_token)
        if self.peek_token_is(TokenKind.SEMICOLON) or self.peek_token_is(TokenKind.EOF) \
                or self.peek_token_is(TokenKind.RBRACE):
            if self.peek_token_is(TokenKind.SEMICOLON):
                self.next_token()
            return stmt

        self.next_token()
        stmt.return_value = self.parse_expression(LOWEST)
        if self.peek_token_is(TokenKind.SEMICOLON):
            self.next_token()
        return stmt

    def parse_expression_statement(self) -> Optional[ast.ExpressionStatement]:
        tok = self.cur_token
        expr = self.parse_expression(LOWEST)
        if self.peek_token_is(TokenKind.SEMICOLON):
            self.next_token()
        if expr is None:
            return None
        return ast.ExpressionStatement(tok, expr)

    def parse_if_statement(self) -> Optional[ast.IfStatement]:
        stmt = ast.IfStatement(self.cur_token)
        if not self.expect_peek(TokenKind.LPAREN):
            return None
        self.next_token()
        stmt.condition = self.parse_expression(LOWEST)
        if not self.expect_peek(TokenKind.RPAREN):
            return None
        if not self.expect_peek(TokenKind.LBRACE):
            return None
        stmt.consequence = self.parse_block_statement()

        if self.peek_token_is(TokenKind.ELSE):
            self.next_token()
            stmt.else_token = self.cur_token
            if not self.expect_peek(TokenKind.LBRACE):
                return None
            stmt.alternative = self.parse_block_statement()

        if self.peek_token_is(TokenKind.SEMICOLON):
            self.next_token()
        if stmt.condition is None:
            return None
        return stmt

    def parse_block_statement(self) -> ast.BlockStatement:
        block = ast.BlockStatement(self.cur_token)
        self.next_token()
        while not self.cur_token_is(TokenKind.RBRACE) and not self.cur_token_is(TokenKind.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                block.statements.append(stmt)
            self.next_token()
        if self.cur_token_is(TokenKind.EOF):
            self.errors.append(f"expected next token to be {TokenKind.RBRACE}, got {TokenKind.EOF} instead")
        return block

    # --- expressions ---

    def parse_expression(self, precedence: int) -> Optional[ast.Expr]:
        prefix = self.prefix_fns.get(self.cur_token.kind)
        if prefix is None:
            self.errors.append(f"no prefix parse function for {self.cur_token.kind}")
            return None
        left = prefix()

        while not self.peek_token_is(TokenKind.SEMICOLON) and precedence < self.peek_precedence():
            infix = self.infix_fns.get(self.peek_token.kind)
            if infix is None or left is None:
                return left
            self.next_token()
            left = infix(left)
        return left

    def parse_identifier(self) -> ast.Expr:
        return ast.Identifier(self.cur_token, self.cur_token.lexeme)

    def parse_integer_literal(self) -> Optional[ast.Expr]:
        lit = self.cur_token.lexeme
        try:
            value = int(lit, 10)
        except ValueError:
            value = None
        if value is None or not bitvec.fits_int64(value):
            self.errors.append(f'could not parse "{lit}" as integer')
            return None
        return ast.IntegerLiteral(self.cur_token, value)

    def parse_boolean(self) -> ast.Expr:
        return ast.Boolean(self.cur_token, self.cur_token_is(TokenKind.TRUE))

    def parse_prefix_expression(self) -> Optional[ast.Expr]:
        expr = ast.PrefixExpression(self.cur_token, self.cur_token.lexeme)
        self.next_token()
        expr.right = self.parse_expression(PREFIX)
        if expr.right is None:
            return None
        return expr

    def parse_infix_expression(self, left: ast.Expr) -> Optional[ast.Expr]:
        expr = ast.InfixExpression(self.cur_token, self.cur_token.lexeme, left)
        precedence = self.cur_precedence()
        self.next_token()
        expr.right = self.parse_expression(precedence)
        if expr.right is None:
            return None
        return expr

    def parse_grouped_expression(self) -> Optional[ast.Expr]:
        self.next_token()
        expr = self.parse_expression(LOWEST)
        if not self.expect_peek(TokenKind.RPAREN):
            return None
        return expr
