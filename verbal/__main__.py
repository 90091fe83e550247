import sys
import os
import time
from typing import List, Optional, TextIO

from . import lexing, parser, runtime
from .runtime import evaluator as runtime_evaluator

PROMPT = ">> "
EXIT = "exit"
HELP = "help"

OPTIONS = {"debug", "tokens", "ast"}

def print_tokens(source: str, out: TextIO):
    print("== Lexing ==", file=out)
    for tok in lexing.tokenize(source):
        print(f"  {tok.kind:<10} {tok.lexeme!r}", file=out)
    print(file=out)

def print_errors(errors: List[str], out: TextIO):
    print("Parser errors:", file=out)
    for msg in errors:
        print(f"\t{msg}", file=out)

def run_source(source: str, env: runtime.Environment, options: set, out: TextIO) -> Optional[runtime.Object]:
    use_debug = "debug" in options

    if "tokens" in options:
        print_tokens(source, out)
    if use_debug:
        print(f"  Tokens: {lexing.show_tokens(lexing.tokenize(source))}", file=out)

    parse_start = time.time() * 1000
    program, errors = parser.parse(source, debug=use_debug)
    parse_end = time.time() * 1000
    if errors:
        print_errors(errors, out)
        return None

    if "ast" in options:
        print("== Parsing ==", file=out)
        print(f"  {program}", file=out)
        print(file=out)
    if use_debug:
        print(f"  Parse time: {int(parse_end - parse_start)}ms", file=out)

    result = runtime.evaluate(program, env)
    if use_debug:
        print(f"  Eval time: {int(time.time() * 1000 - parse_end)}ms", file=out)
    print(result.inspect(), file=out)
    return result

def repl(options: set, stdin: TextIO = sys.stdin, out: TextIO = sys.stdout):
    env = runtime.new_environment()
    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            print(file=out)
            return
        line = line.strip()
        if line == EXIT:
            print("Exiting interpreter. Goodbye!", file=out)
            return
        if line == HELP:
            print("Available commands:", file=out)
            print("  help       - Show this help message", file=out)
            print("  exit       - Exit the interpreter", file=out)
            continue
        if not line:
            continue
        run_source(line, env, options, out)

def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    options = {a for a in args if a in OPTIONS}
    paths = [a for a in args if a not in OPTIONS]

    if "debug" in options:
        runtime_evaluator.DEBUG_EVAL = True

    if not paths:
        repl(options)
        return 0

    input_path = os.path.abspath(paths[0])
    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            source = f.read()
    except OSError as e:
        print(f"Failed to read file: {input_path}")
        print(f"Error: {e}")
        return 1

    result = run_source(source, runtime.new_environment(), options, sys.stdout)
    if result is None or isinstance(result, runtime.Error):
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
