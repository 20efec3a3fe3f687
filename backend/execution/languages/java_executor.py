"""
Java language executor
"""

import re
import time
from typing import Optional

from ..config import ExecutionConfig
from ..models import ExecutionResult
from ..sandbox import execute_with_sandbox

TOOLCHAIN = 'javac'

_PUBLIC_CLASS = re.compile(r'public\s+class\s+(\w+)')


def find_public_class(code: str) -> Optional[str]:
    """Return the first declared public class name, which must match the file name"""
    match = _PUBLIC_CLASS.search(code)
    return match.group(1) if match else None


async def execute_java(code: str, config: ExecutionConfig) -> ExecutionResult:
    """
    Execute Java code

    Args:
        code: Java source with a public class, written to <Class>.java
        config: Timeout and buffer limits

    Returns:
        ExecutionResult with execution results
    """
    start_time = time.monotonic()

    main_class = find_public_class(code)
    if not main_class:
        return ExecutionResult(
            output='',
            error='No public class found in the code',
            executionTime=int((time.monotonic() - start_time) * 1000)
        )

    return await execute_with_sandbox(
        code=code,
        filename=f'{main_class}.java',
        compile_command=[TOOLCHAIN, '{source}'],
        # Run command: java with the main class from the workspace classpath
        run_command=['java', '-cp', '{workspace}', main_class],
        config=config,
        prefix='java-compiler-'
    )
