"""
Language-specific executors
"""

from . import (
    c_executor,
    cpp_executor,
    go_executor,
    java_executor,
    javascript_executor,
    php_executor,
    python_executor,
    typescript_executor,
)
from .c_executor import execute_c
from .cpp_executor import execute_cpp
from .go_executor import execute_go
from .java_executor import execute_java
from .javascript_executor import execute_javascript
from .php_executor import execute_php
from .python_executor import execute_python
from .typescript_executor import execute_typescript

# Binary that must be on PATH for each language's executor to work
TOOLCHAINS = {
    'c': c_executor.TOOLCHAIN,
    'cpp': cpp_executor.TOOLCHAIN,
    'python': python_executor.TOOLCHAIN,
    'javascript': javascript_executor.TOOLCHAIN,
    'typescript': typescript_executor.TOOLCHAIN,
    'java': java_executor.TOOLCHAIN,
    'php': php_executor.TOOLCHAIN,
    'go': go_executor.TOOLCHAIN,
}

__all__ = [
    'execute_c',
    'execute_cpp',
    'execute_go',
    'execute_java',
    'execute_javascript',
    'execute_php',
    'execute_python',
    'execute_typescript',
    'TOOLCHAINS',
]
