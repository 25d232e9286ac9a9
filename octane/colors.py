"""ANSI terminal colours and styled text helpers."""

from __future__ import annotations

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
UNDERLINE = "\033[4m"

BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
PURPLE = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"

BRIGHT_BLACK = "\033[90m"
BRIGHT_RED = "\033[91m"
BRIGHT_GREEN = "\033[92m"
BRIGHT_YELLOW = "\033[93m"
BRIGHT_BLUE = "\033[94m"
BRIGHT_PURPLE = "\033[95m"
BRIGHT_CYAN = "\033[96m"
BRIGHT_WHITE = "\033[97m"

BG_BLACK = "\033[40m"
BG_RED = "\033[41m"
BG_GREEN = "\033[42m"
BG_YELLOW = "\033[43m"
BG_BLUE = "\033[44m"
BG_PURPLE = "\033[45m"
BG_CYAN = "\033[46m"
BG_WHITE = "\033[47m"


def colorize(text: str, color: str) -> str:
    """Wrap text in a colour code followed by a reset."""
    return f"{color}{text}{RESET}"


def colorize_with_style(text: str, color: str, style: str) -> str:
    """Wrap text in a style and a colour code followed by a reset."""
    return f"{style}{color}{text}{RESET}"


def color_print(text: str, color: str) -> None:
    """Print coloured text without a trailing newline."""
    print(colorize(text, color), end="")


def color_println(text: str, color: str) -> None:
    """Print coloured text followed by a newline."""
    print(colorize(text, color))


def header(text: str) -> str:
    return colorize_with_style(text, BRIGHT_CYAN, BOLD)


def success(text: str) -> str:
    return colorize(text, BRIGHT_GREEN)


def warning(text: str) -> str:
    return colorize(text, BRIGHT_YELLOW)


def error(text: str) -> str:
    return colorize(text, BRIGHT_RED)


def info(text: str) -> str:
    return colorize(text, BRIGHT_BLUE)


def value(text: str) -> str:
    return colorize(text, BRIGHT_WHITE)


def label(text: str) -> str:
    return colorize(text, CYAN)


def highlight(text: str) -> str:
    return colorize_with_style(text, BRIGHT_YELLOW, BOLD)