"""
Output simulation for languages without a runnable toolchain.

Only literal print arguments are echoed; nothing is evaluated, so this is an
approximation of the program's output and never a faithful interpreter.
"""

import re
import time

from .models import ExecutionResult
from .registry import normalize_language

_C_PRINT = re.compile(r'printf\s*\(\s*"([^"]*)"')
_CPP_PRINT = re.compile(r'cout\s*<<\s*"([^"]*)"')
_PYTHON_PRINT = re.compile(r'''print\s*\(\s*(?:f?["']([^"']*)["']|([^)]*)\s*)\)''')
_CONSOLE_LOG = re.compile(r'''console\.log\s*\(\s*(?:["']([^"']*)["']|([^)]*)\s*)\)''')

FRONTEND_MESSAGE = "Frontend code doesn't produce console output directly.\nRendering in the preview panel."
UNSUPPORTED_MESSAGE = "Language execution simulation not implemented yet.\nProgram executed successfully."
NO_OUTPUT_MESSAGE = "Program executed successfully with no output."


def _literal_lines(pattern: re.Pattern, code: str) -> str:
    return ''.join(match.group(1) + '\n' for match in pattern.finditer(code))


def _argument_lines(pattern: re.Pattern, code: str) -> str:
    # Prefer the quoted literal, fall back to the raw expression text
    return ''.join(
        (match.group(1) or match.group(2) or '') + '\n'
        for match in pattern.finditer(code)
    )


def simulate_execution(code: str, language: str) -> ExecutionResult:
    """
    Approximate the output of a snippet without running it

    Args:
        code: Source snippet
        language: Language id (normalized here)

    Returns:
        ExecutionResult with error always None
    """
    start_time = time.monotonic()
    language = normalize_language(language)

    if language == 'c':
        output = _literal_lines(_C_PRINT, code)
    elif language == 'cpp':
        output = _literal_lines(_CPP_PRINT, code)
    elif language == 'python':
        output = _argument_lines(_PYTHON_PRINT, code)
    elif language in ('javascript', 'typescript'):
        output = _argument_lines(_CONSOLE_LOG, code)
    elif language in ('html', 'css'):
        output = FRONTEND_MESSAGE
    else:
        output = UNSUPPORTED_MESSAGE

    if not output and language not in ('html', 'css'):
        output = NO_OUTPUT_MESSAGE

    return ExecutionResult(
        output=output,
        error=None,
        executionTime=int((time.monotonic() - start_time) * 1000)
    )
