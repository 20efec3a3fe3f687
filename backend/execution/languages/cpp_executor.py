"""
C++ language executor
"""

from ..config import ExecutionConfig
from ..models import ExecutionResult
from ..sandbox import execute_with_sandbox

TOOLCHAIN = 'g++'


async def execute_cpp(code: str, config: ExecutionConfig) -> ExecutionResult:
    """
    Compile C++17 code with g++ and run the binary

    Args:
        code: C++ source, written to main.cpp
        config: Timeout and buffer limits

    Returns:
        ExecutionResult with execution results
    """
    return await execute_with_sandbox(
        code=code,
        filename='main.cpp',
        compile_command=[TOOLCHAIN, '{source}', '-o', '{binary}', '-std=c++17'],
        run_command=['{binary}'],
        config=config,
        prefix='cpp-compiler-'
    )
