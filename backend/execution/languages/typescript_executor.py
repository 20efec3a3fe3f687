"""
TypeScript language executor
"""

from ..config import ExecutionConfig
from ..models import ExecutionResult
from ..sandbox import execute_with_sandbox

TOOLCHAIN = 'npx'


async def execute_typescript(code: str, config: ExecutionConfig) -> ExecutionResult:
    """
    Run TypeScript code with ts-node (no separate emit step)

    Args:
        code: TypeScript source, written to main.ts
        config: Timeout and buffer limits

    Returns:
        ExecutionResult with execution results
    """
    return await execute_with_sandbox(
        code=code,
        filename='main.ts',
        compile_command=None,
        run_command=[TOOLCHAIN, 'ts-node', '{source}'],
        config=config,
        prefix='typescript-runner-'
    )
