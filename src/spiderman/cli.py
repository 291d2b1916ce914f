"""Spiderman CLI — inspect a SpiderMonkey AST read as JSON."""

from __future__ import annotations

import json
import logging
import sys

from .errors import SpidermanError
from .grammar import validate
from .node import Node, wrap
from .serialize import kinds, raw_to_json, scopes_to_dict, to_json

logger = logging.getLogger(__name__)

SHOW: list[str] = [
    "identifiers",
    "children",
    "descendants",
    "ast",
]

USAGE: str = """\
spiderman [OPTIONS] [INPUT] [-o OUTPUT]

Read a SpiderMonkey Parser API AST as JSON (e.g. `esprima --json` output)
from INPUT or stdin and print what was asked for.

Options:
  --show WHAT         identifiers (default), children, descendants, ast
  --strict            Check the whole tree before anything else
  -v, --verbose       Log debug output to stderr
  -o, --output FILE   Write output to FILE instead of stdout
  --help              Show this help message
"""


def read_source(input_file: str | None) -> tuple[str, int]:
    """Read source from file or stdin. Returns (source, exit_code) where exit_code 0 means OK."""
    if input_file is not None:
        try:
            with open(input_file, "rb") as f:
                raw = f.read()
        except OSError:
            print("error: cannot open '" + input_file + "'", file=sys.stderr)
            return ("", 1)
    else:
        raw = sys.stdin.buffer.read()
    try:
        source = raw.decode("utf-8")
    except ValueError:
        print("error: invalid utf-8 in input", file=sys.stderr)
        return ("", 1)
    return (source, 0)


def write_output(output: str, output_file: str | None) -> int:
    """Write output to file or stdout. Returns 0 on success, 1 on error."""
    if output_file is not None:
        try:
            with open(output_file, "w") as f:
                f.write(output + "\n")
        except OSError:
            print("error: cannot write '" + output_file + "'", file=sys.stderr)
            return 1
        return 0
    print(output)
    return 0


def render(root: Node, show: str) -> str:
    """Produce the requested view of a wrapped tree as JSON text."""
    if show == "children":
        return to_json(kinds(root.children()))
    if show == "descendants":
        return to_json(kinds(root.descendants()))
    if show == "ast":
        return raw_to_json(root)
    return to_json(scopes_to_dict(root))


def run(source: str, show: str, strict: bool) -> tuple[int, str]:
    """Load, wrap and render. Returns (exit_code, output)."""
    try:
        ast = json.loads(source)
    except ValueError as e:
        print("error: invalid json: " + str(e), file=sys.stderr)
        return (1, "")
    except RecursionError:
        print("error: json nested too deeply to load", file=sys.stderr)
        return (1, "")
    if not isinstance(ast, dict) or "type" not in ast:
        print("error: input is not an AST node", file=sys.stderr)
        return (1, "")
    try:
        if strict:
            validate(ast)
        return (0, render(wrap(ast), show))
    except SpidermanError as e:
        print("error: " + str(e), file=sys.stderr)
        return (1, "")
    except RecursionError:
        print("error: ast nested too deeply to serialize", file=sys.stderr)
        return (1, "")


def parse_args(argv: list[str]) -> tuple[str, bool, bool, str | None, str | None]:
    """Parse command-line arguments. Returns (show, strict, verbose, input_file, output_file)."""
    show = "identifiers"
    strict = False
    verbose = False
    input_file: str | None = None
    output_file: str | None = None
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            sys.exit(0)
        elif arg == "--show":
            if i + 1 >= len(argv):
                print("error: --show requires an argument", file=sys.stderr)
                sys.exit(2)
            show = argv[i + 1]
            i += 2
        elif arg == "-o" or arg == "--output":
            if i + 1 >= len(argv):
                print("error: " + arg + " requires an argument", file=sys.stderr)
                sys.exit(2)
            output_file = argv[i + 1]
            i += 2
        elif arg == "--strict":
            strict = True
            i += 1
        elif arg == "-v" or arg == "--verbose":
            verbose = True
            i += 1
        elif arg.startswith("-"):
            print("error: unknown flag '" + arg + "'", file=sys.stderr)
            sys.exit(2)
        else:
            if input_file is not None:
                print("error: unexpected argument '" + arg + "'", file=sys.stderr)
                sys.exit(2)
            input_file = arg
            i += 1
    if show not in SHOW:
        print("error: unknown view '" + show + "'", file=sys.stderr)
        sys.exit(2)
    return (show, strict, verbose, input_file, output_file)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    show, strict, verbose, input_file, output_file = parse_args(
        argv if argv is not None else sys.argv[1:]
    )
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    source, err = read_source(input_file)
    if err != 0:
        return err
    if len(source.strip()) == 0:
        print("error: no input provided", file=sys.stderr)
        return 2
    logger.debug("read %d bytes from %s", len(source), input_file or "<stdin>")
    exit_code, output = run(source, show, strict)
    if exit_code != 0:
        return exit_code
    return write_output(output, output_file)
