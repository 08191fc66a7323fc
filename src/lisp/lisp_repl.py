"""
Interactive read-parse-print loop for LISP text.

Each entry is read until its parentheses balance (continuation lines are prompted with
`... ` and joined with single spaces), then parsed and printed with the selected
formatter. Nothing is evaluated.

Commands:
    exit, quit      Leave the REPL.
    verbose-mode    Toggle printing of the token list before each result.
    ; ...           Comment line, ignored.
"""

import io
import traceback

from lisp.lisp_constants import CLOSE_PAREN, OPEN_PAREN
from lisp.lisp_format import Formatter
from lisp.lisp_lexer import tokenize
from lisp.lisp_parser import Parser
from lisp.lisp_result import ParseSuccess


def print_traceback() -> None:
    buf = io.StringIO()
    traceback.print_exc(file=buf)
    print("[error] >>>")
    print(buf.getvalue())


def paren_balance(line: str) -> int:
    return line.count(OPEN_PAREN) - line.count(CLOSE_PAREN)


def start_repl(fmt: str = "list", verbose: bool = False) -> None:
    formatter = Formatter(fmt)
    print(f"Lisp REPL [format={formatter.target}]. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            src_lines: list[str] = []
            depth = 0
            while True:
                prompt = ">>> " if not src_lines else "... "
                line = input(prompt)
                if line.strip() in ("exit", "quit") and not src_lines:
                    print("Exiting Lisp REPL.")
                    return
                if line.lstrip().startswith(";"):
                    continue
                src_lines.append(line)
                depth += paren_balance(line)
                if depth <= 0:
                    break
            src = " ".join(src_lines).strip()
            if not src:
                continue
            if src.lower() == "verbose-mode":
                verbose = not verbose
                print(f"[mode] >>> Verbose mode {'ON' if verbose else 'OFF'}")
                continue

            try:
                tokens = tokenize(src)
                if verbose:
                    print(f"[tokens] >>> {tokens}")
                result = Parser(tokens).parse_all()
            except Exception:
                print_traceback()
                continue

            if not result.is_success():
                print("[error] >>>")
                print(formatter.format(result))
                continue

            for node in result.node:
                print(formatter.format(ParseSuccess(node)))

        except (KeyboardInterrupt, EOFError):
            print("\nExiting Lisp REPL.")
            break
