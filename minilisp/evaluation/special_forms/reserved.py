from minilisp.errors import LispNameError

# Keywords handled by special forms; let/fn may not rebind them.
RESERVED_WORDS = frozenset(
    ["+", "-", "*", "/", "or", "and", "not", "=", "!=", "if", "let", "fn", "print"]
)


def check_reserved(name: str) -> None:
    if name in RESERVED_WORDS:
        raise LispNameError(f"Reserved variable or function name: {name}!")
