"""
Cheap pattern-based syntax checks run before any toolchain is spawned.

These are heuristics, not parsers: they catch the most common trivial mistakes
(empty input, unclosed braces, unterminated strings, missing entry point) and
will both miss real errors and flag some valid programs.
"""

import re
from typing import Optional, Tuple

from .models import SyntaxCheckResult
from .registry import normalize_language

EMPTY_CODE_MESSAGE = "No code to compile. Please enter some code."

_DOUBLE_QUOTED = re.compile(r'"[^"\\]*(?:\\.[^"\\]*)*"')
_SINGLE_QUOTED = re.compile(r"'[^'\\]*(?:\\.[^'\\]*)*'")
_LINE_COMMENT = re.compile(r'//.*$', re.MULTILINE)
_BLOCK_COMMENT = re.compile(r'/\*[\s\S]*?\*/')

_QUOTE_KINDS = {
    "'": 'single quote',
    '"': 'double quote',
    '`': 'template literal',
}


def strip_strings_and_comments(code: str) -> str:
    """
    Blank out string/char literals, then drop line and block comments.
    Order matters: a '//' inside a string must not start a comment.
    """
    stripped = _DOUBLE_QUOTED.sub('""', code)
    stripped = _SINGLE_QUOTED.sub("''", stripped)
    stripped = _LINE_COMMENT.sub('', stripped)
    return _BLOCK_COMMENT.sub('', stripped)


def has_unclosed_brace(code: str) -> bool:
    """True if there are more '{' than '}' outside strings and comments"""
    stripped = strip_strings_and_comments(code)
    return stripped.count('{') > stripped.count('}')


def find_unterminated_string(code: str) -> Optional[Tuple[str, int]]:
    """
    Scan once for a quote that is never closed.

    Returns:
        (kind, line) of the string still open at the end of the code, or None
    """
    open_quote = None
    escape_next = False
    start_line = 0
    line = 1

    for char in code:
        if char == '\n':
            line += 1

        if escape_next:
            escape_next = False
            continue

        if char == '\\':
            escape_next = True
            continue

        if open_quote is None:
            if char in _QUOTE_KINDS:
                open_quote = char
                start_line = line
        elif char == open_quote:
            open_quote = None

    if open_quote is None:
        return None
    return _QUOTE_KINDS[open_quote], start_line


def _leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip())


def has_inconsistent_indentation(code: str) -> bool:
    """
    Flag indents that are multiples of neither 2 nor 4, or indent increases
    whose step is a multiple of neither. Only compared once a previous indented
    line has been seen.
    """
    previous_indent = 0

    for line in code.split('\n'):
        if not line.strip() or line.strip().startswith('#'):
            continue

        indent = _leading_whitespace(line)

        if indent > 0 and previous_indent > 0:
            if indent % 4 != 0 and indent % 2 != 0:
                return True

            step = indent - previous_indent
            if step > 0 and step % 2 != 0 and step % 4 != 0:
                return True

        if indent > 0:
            previous_indent = indent

    return False


def _error(message: str) -> SyntaxCheckResult:
    return SyntaxCheckResult(hasError=True, errorMessage=message)


def _check_c_family(code: str) -> Optional[SyntaxCheckResult]:
    if 'main(' not in code and 'main (' not in code:
        return _error("Error: missing 'main' function. Every C/C++ program must have a main function.")

    # Crude: only catches a program with no semicolon at all
    if 'printf(' in code and ';' not in code:
        return _error("Syntax Error: missing semicolon ';'")

    if has_unclosed_brace(code):
        return _error("Error: missing closing curly brace '}'")

    return None


def _check_python(code: str) -> Optional[SyntaxCheckResult]:
    if has_inconsistent_indentation(code):
        return _error("IndentationError: inconsistent indentation detected")
    return None


def _check_javascript(code: str) -> Optional[SyntaxCheckResult]:
    if has_unclosed_brace(code):
        return _error("SyntaxError: missing closing curly brace '}'")

    unterminated = find_unterminated_string(code)
    if unterminated:
        kind, line = unterminated
        return _error(f"SyntaxError: unterminated {kind} starting at line {line}")

    return None


_CHECKERS = {
    'c': _check_c_family,
    'cpp': _check_c_family,
    'python': _check_python,
    'javascript': _check_javascript,
    'typescript': _check_javascript,
}


def check_syntax(code: str, language: str) -> SyntaxCheckResult:
    """
    Check for basic syntax errors

    Args:
        code: Source snippet
        language: Language id (normalized here)

    Returns:
        SyntaxCheckResult; languages without a heuristic always pass
    """
    if not code.strip():
        return _error(EMPTY_CODE_MESSAGE)

    checker = _CHECKERS.get(normalize_language(language))
    if checker:
        result = checker(code)
        if result:
            return result

    return SyntaxCheckResult(hasError=False, errorMessage=None)
