"""
PHP language executor
"""

from ..config import ExecutionConfig
from ..models import ExecutionResult
from ..sandbox import execute_with_sandbox

TOOLCHAIN = 'php'


async def execute_php(code: str, config: ExecutionConfig) -> ExecutionResult:
    """Run PHP code"""
    return await execute_with_sandbox(
        code=code,
        filename='main.php',
        compile_command=None,
        run_command=[TOOLCHAIN, '{source}'],
        config=config,
        prefix='php-runner-'
    )
