"""
Main executor that routes to language-specific executors
"""

import logging
import shutil
import time
from typing import Optional

from .config import ExecutionConfig
from .models import ExecuteRequest, ExecutionResult
from .registry import EXECUTABLE_LANGUAGES, normalize_language
from .simulator import simulate_execution
from .languages import (
    TOOLCHAINS,
    execute_c,
    execute_cpp,
    execute_go,
    execute_java,
    execute_javascript,
    execute_php,
    execute_python,
    execute_typescript,
)

logger = logging.getLogger(__name__)

EXECUTORS = {
    'c': execute_c,
    'cpp': execute_cpp,
    'python': execute_python,
    'javascript': execute_javascript,
    'typescript': execute_typescript,
    'java': execute_java,
    'php': execute_php,
    'go': execute_go,
}


def _toolchain_available(language: str) -> bool:
    return shutil.which(TOOLCHAINS[language]) is not None


async def execute_code(
    code: str,
    language: str,
    config: Optional[ExecutionConfig] = None
) -> ExecutionResult:
    """
    Execute code based on language

    Args:
        code: Source snippet
        language: Language id, any case; unknown ids are simulated
        config: Execution limits; read from the environment when omitted

    Returns:
        ExecutionResult stamped with the total elapsed time; never raises
    """
    start_time = time.monotonic()

    try:
        config = config or ExecutionConfig.from_env()
        language = normalize_language(language)
        executor = EXECUTORS[language] if language in EXECUTABLE_LANGUAGES else None

        if executor and config.simulate_missing_toolchains and not _toolchain_available(language):
            logger.warning(f"No {TOOLCHAINS[language]} on PATH, simulating {language} output")
            executor = None

        logger.info(f"Executing {language} code ({len(code)} chars)")

        if executor:
            result = await executor(code, config)
        else:
            result = simulate_execution(code, language)

    except Exception as e:
        logger.error(f"Execution error for {language}: {e}", exc_info=True)
        result = ExecutionResult(
            output='',
            error=str(e) or 'Unknown execution error'
        )

    return result.model_copy(
        update={'executionTime': int((time.monotonic() - start_time) * 1000)}
    )


async def execute_request(
    request: ExecuteRequest,
    config: Optional[ExecutionConfig] = None
) -> ExecutionResult:
    """Execute an ExecuteRequest"""
    return await execute_code(request.code, request.language, config)
