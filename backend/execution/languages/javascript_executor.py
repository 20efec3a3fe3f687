"""
JavaScript language executor
"""

from ..config import ExecutionConfig
from ..models import ExecutionResult
from ..sandbox import execute_with_sandbox

TOOLCHAIN = 'node'


async def execute_javascript(code: str, config: ExecutionConfig) -> ExecutionResult:
    """Run JavaScript code using Node.js"""
    return await execute_with_sandbox(
        code=code,
        filename='main.js',
        compile_command=None,
        run_command=[TOOLCHAIN, '{source}'],
        config=config,
        prefix='javascript-runner-'
    )
