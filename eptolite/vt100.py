import sys
from typing import TextIO


RED = "\033[31m"
CYAN = "\033[36m"
YELLOW = "\033[33m"

FAINT = "\033[2m"
RESET = "\033[0m"


def isTty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def paint(text: str, color: str, stream: TextIO) -> str:
    """Colors `text` only when it is going to a terminal."""
    if not isTty(stream):
        return text
    return f"{color}{text}{RESET}"


def indent(text: str, indent: int = 4) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def error(prefix: str, msg: str) -> None:
    print(f"{paint(prefix + ':', RED, sys.stderr)} {msg}", file=sys.stderr)
