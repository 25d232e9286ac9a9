import pytest

from octane import colors


def test_colorize_wraps_with_reset():
    assert colors.colorize("hello", colors.RED) == colors.RED + "hello" + colors.RESET


def test_reset_code_is_ansi_zero():
    assert colors.colorize("", "") == "\033[0m"


def test_colorize_with_style_puts_style_first():
    result = colors.colorize_with_style("x", colors.GREEN, colors.UNDERLINE)
    assert result == colors.UNDERLINE + colors.GREEN + "x" + colors.RESET


@pytest.mark.parametrize(
    "func, color",
    [
        (colors.success, colors.BRIGHT_GREEN),
        (colors.warning, colors.BRIGHT_YELLOW),
        (colors.error, colors.BRIGHT_RED),
        (colors.info, colors.BRIGHT_BLUE),
        (colors.value, colors.BRIGHT_WHITE),
        (colors.label, colors.CYAN),
    ],
)
def test_plain_helpers(func, color):
    assert func("text") == color + "text" + colors.RESET


@pytest.mark.parametrize(
    "func, color",
    [(colors.header, colors.BRIGHT_CYAN), (colors.highlight, colors.BRIGHT_YELLOW)],
)
def test_bold_helpers(func, color):
    assert func("text") == colors.BOLD + color + "text" + colors.RESET


def test_header_uses_bright_cyan_code():
    assert colors.header("T").startswith("\033[1m\033[96m")


def test_color_print_has_no_newline(capsys):
    colors.color_print("abc", colors.BLUE)
    assert capsys.readouterr().out == colors.colorize("abc", colors.BLUE)


def test_color_println_adds_newline(capsys):
    colors.color_println("abc", colors.BLUE)
    assert capsys.readouterr().out == colors.colorize("abc", colors.BLUE) + "\n"