"""
Go language executor
"""

from ..config import ExecutionConfig
from ..models import ExecutionResult
from ..sandbox import execute_with_sandbox

TOOLCHAIN = 'go'


async def execute_go(code: str, config: ExecutionConfig) -> ExecutionResult:
    """
    Execute Go code with `go run`

    Compilation and execution happen in one invocation, so a build failure and
    a runtime failure share the same error branch.

    Args:
        code: Go source, written to main.go
        config: Timeout and buffer limits

    Returns:
        ExecutionResult with execution results
    """
    return await execute_with_sandbox(
        code=code,
        filename='main.go',
        compile_command=None,
        run_command=[TOOLCHAIN, 'run', '{source}'],
        config=config,
        failure_message='Compilation or runtime error',
        prefix='go-compiler-'
    )
