from typing import Dict, Iterator, List, Optional

# ======================================
# Token Definition
# ======================================

class TokenKind:
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    IDENTIFIER = "IDENTIFIER"
    INT = "INT"

    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    FUNCTION = "FUNCTION"
    LET = "LET"
    IF = "IF"
    ELSE = "ELSE"
    TRUE = "TRUE"
    FALSE = "FALSE"
    RETURN = "RETURN"


class Token:
    __slots__ = ("kind", "s")

    def __init__(self, kind: str, s: str):
        self.kind = kind
        self.s = s

    @property
    def lexeme(self) -> str:
        return self.s

    @property
    def literal(self) -> str:
        return self.s

    def __repr__(self):
        return f"Token({self.kind}, {self.s!r})"

    def __eq__(self, other):
        return isinstance(other, Token) and self.kind == other.kind and self.s == other.s

    def __hash__(self):
        return hash((self.kind, self.s))

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS: Dict[str, str] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}

WHITESPACE = " \t\n\r"

# ======================================
# Lexer Configuration
# ======================================

class LexerConfig:
    def __init__(self, keywords: Dict[str, str]):
        self.keywords = keywords

    def lookup_ident(self, ident: str) -> str:
        return self.keywords.get(ident, TokenKind.IDENTIFIER)

    @staticmethod
    def default() -> 'LexerConfig':
        return LexerConfig(
            keywords={
                "karya": TokenKind.FUNCTION,
                "manau": TokenKind.LET,
                "yadi": TokenKind.IF,
                "natra": TokenKind.ELSE,
                "satya": TokenKind.TRUE,
                "jhuth": TokenKind.FALSE,
                "firta": TokenKind.RETURN,
                # English aliases
                "fn": TokenKind.FUNCTION,
                "let": TokenKind.LET,
                "if": TokenKind.IF,
                "else": TokenKind.ELSE,
                "true": TokenKind.TRUE,
                "false": TokenKind.FALSE,
                "return": TokenKind.RETURN,
            }
        )

# ======================================
# Main Lexer
# ======================================

def is_letter(ch: str) -> bool:
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")

def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    def __init__(self, input_str: str, config: Optional[LexerConfig] = None):
        self.input = input_str
        self.config = config if config is not None else LexerConfig.default()
        self.pos = 0

    def peek_char(self) -> str:
        if self.pos + 1 >= len(self.input):
            return ""
        return self.input[self.pos + 1]

    def skip_whitespace(self):
        while self.pos < len(self.input) and self.input[self.pos] in WHITESPACE:
            self.pos += 1

    def read_while(self, pred) -> str:
        start = self.pos
        while self.pos < len(self.input) and pred(self.input[self.pos]):
            self.pos += 1
        return self.input[start:self.pos]

    def next_token(self) -> Token:
        self.skip_whitespace()
        if self.pos >= len(self.input):
            return Token(TokenKind.EOF, "")

        ch = self.input[self.pos]

        if ch == "=" or ch == "!":
            if self.peek_char() == "=":
                self.pos += 2
                return Token(TokenKind.EQ if ch == "=" else TokenKind.NOT_EQ, ch + "=")
            self.pos += 1
            return Token(TokenKind.ASSIGN if ch == "=" else TokenKind.BANG, ch)

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            self.pos += 1
            return Token(kind, ch)

        if is_letter(ch):
            ident = self.read_while(is_letter)
            return Token(self.config.lookup_ident(ident), ident)

        if is_digit(ch):
            return Token(TokenKind.INT, self.read_while(is_digit))

        self.pos += 1
        return Token(TokenKind.ILLEGAL, ch)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            if tok.kind == TokenKind.EOF:
                return
            yield tok

# ======================================
# Helpers
# ======================================

def lex(input_str: str, config: Optional[LexerConfig] = None) -> Lexer:
    return Lexer(input_str, config)

def tokenize(input_str: str, config: Optional[LexerConfig] = None) -> List[Token]:
    lexer = Lexer(input_str, config)
    tokens = list(lexer)
    tokens.append(lexer.next_token())
    return tokens

def show_tokens(tokens: List[Token]) -> str:
    return " ".join(t.lexeme for t in tokens if t.kind != TokenKind.EOF)
