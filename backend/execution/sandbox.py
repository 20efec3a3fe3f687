"""
Workspace and process utilities shared by every language executor
"""

import os
import shutil
import signal
import tempfile
import asyncio
import logging
import time
from typing import List, NamedTuple, Optional

from .config import ExecutionConfig
from .models import ExecutionResult

logger = logging.getLogger(__name__)

# Read size for the stdout/stderr pumps
_CHUNK_SIZE = 64 * 1024


class ProcessResult(NamedTuple):
    """Normalized outcome of one toolchain invocation"""
    returncode: Optional[int]
    stdout: str
    stderr: str
    timed_out: bool = False
    overflowed: bool = False

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and not self.timed_out and not self.overflowed


def create_workspace(files: dict, prefix: str = 'exec_') -> str:
    """
    Create a uniquely named temporary directory with the source files

    Args:
        files: Mapping of bare filename to file content
        prefix: Directory name prefix, usually the language

    Returns:
        Path to the temporary directory
    """
    temp_dir = tempfile.mkdtemp(prefix=prefix)

    try:
        for filename, content in files.items():
            if os.path.basename(filename) != filename:
                raise ValueError(f"Invalid file name: {filename}")

            with open(os.path.join(temp_dir, filename), 'w', encoding='utf-8') as f:
                f.write(content)

        return temp_dir

    except Exception:
        # Clean up on error
        shutil.rmtree(temp_dir, ignore_errors=True)
        raise


def cleanup_workspace(temp_dir: str) -> None:
    """
    Clean up the temporary directory

    Args:
        temp_dir: Path to the temporary directory
    """
    try:
        shutil.rmtree(temp_dir)
    except Exception as e:
        logger.warning(f"Failed to cleanup temp directory {temp_dir}: {e}")


def _kill_process_group(process: asyncio.subprocess.Process) -> None:
    """Kill the child and anything it spawned (go run, npx)"""
    try:
        if os.name == 'posix':
            os.killpg(process.pid, signal.SIGKILL)
        elif process.returncode is None:
            process.kill()
    except (ProcessLookupError, PermissionError):
        pass


async def run_process(
    args: List[str],
    cwd: str,
    config: ExecutionConfig
) -> ProcessResult:
    """
    Run a command without a shell, bounded by wall-clock time and output size

    Args:
        args: Command and arguments
        cwd: Working directory (the workspace)
        config: Timeout and buffer limits

    Returns:
        ProcessResult with whatever output was captured, even on timeout

    Raises:
        OSError: If the executable cannot be spawned
    """
    process = await asyncio.create_subprocess_exec(
        *args,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=cwd,
        start_new_session=(os.name == 'posix'),
    )

    stdout = bytearray()
    stderr = bytearray()
    overflowed = False
    timed_out = False

    async def pump(stream: asyncio.StreamReader, sink: bytearray) -> None:
        nonlocal overflowed
        while not overflowed:
            chunk = await stream.read(_CHUNK_SIZE)
            if not chunk:
                break
            sink.extend(chunk)
            if len(stdout) + len(stderr) > config.max_buffer_size:
                overflowed = True
                _kill_process_group(process)

    async def communicate() -> None:
        await asyncio.gather(
            pump(process.stdout, stdout),
            pump(process.stderr, stderr),
        )
        await process.wait()

    try:
        await asyncio.wait_for(communicate(), timeout=config.timeout_seconds)
    except asyncio.TimeoutError:
        timed_out = True
    finally:
        # Also runs when the awaiting task is cancelled
        if timed_out or process.returncode is None:
            _kill_process_group(process)
        if process.returncode is None:
            await process.wait()

    return ProcessResult(
        returncode=process.returncode,
        stdout=stdout.decode('utf-8', errors='replace'),
        stderr=stderr.decode('utf-8', errors='replace'),
        timed_out=timed_out,
        overflowed=overflowed,
    )


def build_command(template: List[str], **paths: str) -> List[str]:
    """
    Fill {workspace}, {source} and {binary} placeholders in an argv template

    Args:
        template: Command template (e.g., ["gcc", "{source}", "-o", "{binary}"])
        paths: Values for the placeholders

    Returns:
        Argument list ready for run_process
    """
    return [part.format(**paths) for part in template]


def _elapsed_ms(start_time: float) -> int:
    return max(0, int((time.monotonic() - start_time) * 1000))


def _log_abnormal_exit(filename: str, phase: str, result: ProcessResult, config: ExecutionConfig) -> None:
    if result.timed_out:
        logger.warning(f"{phase} of {filename} timed out after {config.timeout_ms} ms")
    elif result.overflowed:
        logger.warning(f"{phase} of {filename} exceeded max buffer of {config.max_buffer_size} bytes")


async def execute_with_sandbox(
    code: str,
    filename: str,
    compile_command: Optional[List[str]],
    run_command: List[str],
    config: ExecutionConfig,
    failure_message: str = 'Runtime error',
    prefix: str = 'exec_'
) -> ExecutionResult:
    """
    Write the code to a fresh workspace, optionally compile it, then run it

    Args:
        code: Source written verbatim to the workspace
        filename: Canonical source filename (e.g., "main.c")
        compile_command: Optional compilation command template
        run_command: Command template to run the program
        config: Timeout and buffer limits
        failure_message: Error reported when the run fails without stderr
        prefix: Workspace directory prefix

    Returns:
        ExecutionResult; never raises
    """
    temp_dir = None
    start_time = time.monotonic()

    try:
        # Create temp directory with source file
        temp_dir = create_workspace({filename: code}, prefix=prefix)
        paths = {
            'workspace': temp_dir,
            'source': os.path.join(temp_dir, filename),
            'binary': os.path.join(temp_dir, 'main.out'),
        }

        # Compile if needed
        if compile_command:
            compiled = await run_process(build_command(compile_command, **paths), temp_dir, config)

            if not compiled.ok:
                _log_abnormal_exit(filename, 'Compilation', compiled, config)
                logger.info(f"Compilation failed for {filename} (exit code {compiled.returncode})")
                return ExecutionResult(
                    output='',
                    error=compiled.stderr or 'Compilation error',
                    executionTime=_elapsed_ms(start_time)
                )

        result = await run_process(build_command(run_command, **paths), temp_dir, config)
        execution_time = _elapsed_ms(start_time)
        _log_abnormal_exit(filename, 'Run', result, config)

        if result.ok:
            return ExecutionResult(
                output=result.stdout,
                error=result.stderr or None,
                executionTime=execution_time
            )

        return ExecutionResult(
            output=result.stdout,
            error=result.stderr or failure_message,
            executionTime=execution_time
        )

    except Exception as e:
        logger.error(f"Sandbox error while executing {filename}: {e}")
        return ExecutionResult(
            output='',
            error=str(e) or type(e).__name__,
            executionTime=_elapsed_ms(start_time)
        )

    finally:
        if temp_dir:
            cleanup_workspace(temp_dir)
