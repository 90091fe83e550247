from typing import List, Tuple, Union
from ..lexing import Lexer
from ..syntax import ast
from .engine import Parser

def parse(source: Union[Lexer, str], debug: bool = False) -> Tuple[ast.Program, List[str]]:
    lexer = source if isinstance(source, Lexer) else Lexer(source)
    parser = Parser(lexer, debug=debug)
    program = parser.parse_program()
    return program, parser.errors
