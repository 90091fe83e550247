from typing import Optional

from .lexing import Token, TokenKind, Lexer, LexerConfig, lex, tokenize
from .runtime import (
    Object, Integer, Boolean, Null, ReturnValue, Error, Environment, ParseFailure,
    TRUE, FALSE, NULL, new_environment, new_enclosed_environment, evaluate,
)
from .parser import Parser, parse
from .syntax import ast

def run(source: str, env: Optional[Environment] = None) -> Object:
    program, errors = parse(source)
    if errors:
        raise ParseFailure(errors)
    return evaluate(program, env if env is not None else new_environment())

__all__ = [
    "Token", "TokenKind", "Lexer", "LexerConfig", "lex", "tokenize",
    "Parser", "parse", "ast",
    "Object", "Integer", "Boolean", "Null", "ReturnValue", "Error",
    "TRUE", "FALSE", "NULL",
    "Environment", "new_environment", "new_enclosed_environment",
    "evaluate", "run", "ParseFailure",
]
