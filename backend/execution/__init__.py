"""
Code execution module for compiled and interpreted languages
"""

from .config import ExecutionConfig
from .executor import execute_code, execute_request
from .models import ExecuteRequest, ExecutionResult, SyntaxCheckResult
from .registry import SUPPORTED_LANGUAGES, is_supported_language, normalize_language
from .simulator import simulate_execution
from .syntax import check_syntax

__all__ = [
    'ExecutionConfig',
    'execute_code',
    'execute_request',
    'ExecuteRequest',
    'ExecutionResult',
    'SyntaxCheckResult',
    'SUPPORTED_LANGUAGES',
    'is_supported_language',
    'normalize_language',
    'simulate_execution',
    'check_syntax',
]
