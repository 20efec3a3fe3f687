"""
C language executor
"""

from ..config import ExecutionConfig
from ..models import ExecutionResult
from ..sandbox import execute_with_sandbox

TOOLCHAIN = 'gcc'


async def execute_c(code: str, config: ExecutionConfig) -> ExecutionResult:
    """
    Compile C code with gcc (linking libm) and run the binary

    Args:
        code: C source, written to main.c
        config: Timeout and buffer limits

    Returns:
        ExecutionResult with execution results
    """
    return await execute_with_sandbox(
        code=code,
        filename='main.c',
        compile_command=[TOOLCHAIN, '{source}', '-o', '{binary}', '-lm'],
        run_command=['{binary}'],
        config=config,
        prefix='c-compiler-'
    )
