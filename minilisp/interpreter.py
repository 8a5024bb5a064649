"""Front end: run whole programs from text, files, or an interactive prompt.

Every program is evaluated against a fresh default ScopeStack, so nothing
defined by one REPL line or file is visible to the next. Programs with
several statements wrap them in one list, e.g. ((let x 5) (print x)).
"""

from __future__ import annotations

import logging
from pathlib import Path

import minilisp
from minilisp.config import get_prompt
from minilisp.errors import LispLexError, LispSyntaxError
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import lex, parse
from minilisp.types.result import Error, EvalResult
from minilisp.types.scope import ScopeStack

try:
    import readline  # noqa
except ImportError:
    pass

logger = logging.getLogger(__name__)


def run_interpreter(program: str) -> EvalResult:
    """Lexes, parses, and evaluates the given program."""
    try:
        tokens = list(lex(program))
    except LispLexError as e:
        return Error(f"Lex error: {e}")
    try:
        expr = parse(tokens)
    except LispSyntaxError as e:
        return Error(f"Parse error: {e}")

    logger.info("running program of %d tokens", len(tokens))
    result = evaluate(expr, ScopeStack.default())
    if isinstance(result, Error):
        logger.error("program failed: %s", result.message)
    return result


def run_file(path: str | Path) -> int:
    """Interpret a file; prints the error, if any. Returns a process exit status."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read %s: %s", path, e)
        print("Unable to open the file!")
        return 1

    result = run_interpreter(content)
    if isinstance(result, Error):
        print(result.message)
    return 0


def repl() -> None:
    """Interactive REPL; each line is its own program."""
    print(f"Welcome to minilisp {minilisp.__version__}!")
    prompt = get_prompt()
    try:
        while True:
            try:
                text = input(prompt)
            except KeyboardInterrupt:
                print("")
                continue

            if not text.strip():
                continue
            result = run_interpreter(text.strip())
            if isinstance(result, Error):
                print(result.message)
    except EOFError:
        print("")
