"""
LISP CLI Entrypoint.

This module provides the command-line interface for reading LISP source.
It supports parsing inline strings or `.lisp` files and an interactive REPL mode.

Features:
    - Read source from `.lisp` files or inline strings.
    - Tokenize and parse, then print the result in the selected output format.
    - Output to console or file.
    - Launch an interactive REPL with optional verbosity.

Example usage:
    lisp program.lisp
    lisp -s "((1 2) ((2) 3))"
    lisp -s "(a b) (c)" --all -f sexpr
    lisp program.lisp -f json -o tree.json
    lisp --repl --verbose

Functions:
    read_source(source: str, is_string: bool = False) -> str:
        Returns the text to parse, loading it from a `.lisp` file when needed.

    run_lisp(source: str, is_string: bool = False, fmt: str = "list", out: str | None = None,
             all_data: bool = False) -> int:
        Runs the reader pipeline and returns the process exit status.

    main() -> None:
        Parses CLI arguments and invokes the appropriate action (REPL or one-shot parse).
"""

import argparse
import logging
import os
import sys

from lisp.lisp_format import EMITTERS, Formatter
from lisp.lisp_interpreter import interpret, interpret_all

logger = logging.getLogger(__name__)


def _get_log_level(verbose: bool = False) -> int:
    """
    Determine the log level: DEBUG when verbose, otherwise the LOGLEVEL environment
    variable, defaulting to WARNING.
    """
    if verbose:
        return logging.DEBUG
    loglevel_env = os.getenv("LOGLEVEL", "").upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=_get_log_level(verbose), format="%(message)s", stream=sys.stderr
    )


def read_source(source: str, is_string: bool = False) -> str:
    """
    Return the text to parse.

    Args:
        source (str): Raw LISP text, or a path to a `.lisp` file.
        is_string (bool): If True, `source` is returned unchanged.

    Raises:
        ValueError: If `is_string` is False and the path does not end with '.lisp'.

    Only spaces separate atoms, so file lines are joined with single spaces.
    """
    if is_string:
        return source
    if not source.endswith(".lisp"):
        raise ValueError("Only .lisp files are supported.")
    with open(source, encoding="utf-8") as f:
        lines = f.read().splitlines()
    logger.debug("Read %d line(s) from %s", len(lines), source)
    return " ".join(lines)


def run_lisp(
    source: str,
    is_string: bool = False,
    fmt: str = "list",
    out: str | None = None,
    all_data: bool = False,
) -> int:
    """
    Run the reader: tokenize, parse, format, then print or write the output.

    Args:
        source (str): LISP text or path to a `.lisp` file.
        is_string (bool): If True, treats `source` as raw text. Defaults to False.
        fmt (str): Output format ('list', 'sexpr' or 'json'). Defaults to 'list'.
        out (str | None): Optional path to write the formatted tree to.
        all_data (bool): Parse every top-level datum instead of only the first.

    Returns:
        int: 0 if the input parsed, 1 on a syntax error.

    Side Effects:
        - Prints the tree to stdout or writes it to `out`.
        - Prints syntax errors to stderr.
    """
    formatter = Formatter(fmt)
    text = read_source(source, is_string=is_string)
    result = interpret_all(text) if all_data else interpret(text)

    if not result.is_success():
        print(f"[error] >>> {formatter.format(result)}", file=sys.stderr)
        return 1

    output = formatter.format(result)
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(output + "\n")
        logger.info("Wrote %s output to %s", formatter.target, out)
    else:
        print(output)
    return 0


def main() -> None:
    """
    Entry point for the LISP CLI.

    Launches the REPL when no arguments are passed or `--repl` is given; otherwise
    parses one source and exits with the status returned by `run_lisp`.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-f`, `--format`: Output format ('list', 'sexpr', 'json'), default is 'list'.
        - `-a`, `--all`: Parse every top-level datum.
        - `-o`, `--out`: Write the formatted tree to a file.
        - `--repl`: Launch the interactive REPL.
        - `--verbose`: Debug logging, and token echo in the REPL.
    """
    if len(sys.argv) == 1:
        from lisp.lisp_repl import start_repl

        configure_logging()
        start_repl()
        return
    parser = argparse.ArgumentParser(prog="lisp")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="fmt",
        choices=tuple(EMITTERS),
        default="list",
        help="Output format (default: list)",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="all_data",
        action="store_true",
        help="Parse every top-level datum, not only the first",
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "--repl", action="store_true", help="Launch interactive REPL instead of parsing"
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args()
    configure_logging(args.verbose)

    if args.repl or args.source is None:
        from lisp.lisp_repl import start_repl

        start_repl(fmt=args.fmt, verbose=args.verbose)
        return

    try:
        status = run_lisp(
            source=args.source,
            is_string=args.string,
            fmt=args.fmt,
            out=args.out,
            all_data=args.all_data,
        )
    except (OSError, ValueError) as e:
        print(f"[error] >>> {e}", file=sys.stderr)
        status = 1
    sys.exit(status)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
