"""
Python language executor
"""

from ..config import ExecutionConfig
from ..models import ExecutionResult
from ..sandbox import execute_with_sandbox

TOOLCHAIN = 'python3'


async def execute_python(code: str, config: ExecutionConfig) -> ExecutionResult:
    """Run Python code with python3"""
    return await execute_with_sandbox(
        code=code,
        filename='main.py',
        compile_command=None,
        run_command=[TOOLCHAIN, '{source}'],
        config=config,
        prefix='python-runner-'
    )
