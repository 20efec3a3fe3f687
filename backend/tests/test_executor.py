"""Tests for language routing and the dispatcher's result contract."""

import asyncio
import os
import shutil
import time

import pytest

import execution.executor as dispatcher
from execution import sandbox
from execution import ExecuteRequest, ExecutionConfig, execute_code, execute_request
from execution.languages import TOOLCHAINS
from execution.languages.java_executor import find_public_class
from execution.registry import EXECUTABLE_LANGUAGES
from execution.sandbox import ProcessResult, execute_with_sandbox
from execution.simulator import FRONTEND_MESSAGE, UNSUPPORTED_MESSAGE

requires_gcc = pytest.mark.skipif(shutil.which("gcc") is None, reason="gcc not installed")
requires_python3 = pytest.mark.skipif(shutil.which("python3") is None, reason="python3 not installed")
requires_gxx = pytest.mark.skipif(shutil.which("g++") is None, reason="g++ not installed")
requires_go = pytest.mark.skipif(shutil.which("go") is None, reason="go not installed")
requires_node = pytest.mark.skipif(shutil.which("node") is None, reason="node not installed")
requires_java = pytest.mark.skipif(
    shutil.which("javac") is None or shutil.which("java") is None, reason="JDK not installed"
)
requires_php = pytest.mark.skipif(shutil.which("php") is None, reason="php not installed")
requires_ts_node = pytest.mark.skipif(
    shutil.which("npx") is None or shutil.which("ts-node") is None, reason="ts-node not installed"
)


def test_every_executable_language_has_an_executor():
    assert set(dispatcher.EXECUTORS) == EXECUTABLE_LANGUAGES
    assert set(TOOLCHAINS) == EXECUTABLE_LANGUAGES


def test_find_public_class():
    assert find_public_class("public  class HelloWorld {\n}") == "HelloWorld"
    assert find_public_class("class Hidden {}") is None


@pytest.mark.asyncio
async def test_java_without_public_class(config, created_workspaces):
    result = await execute_code("class Main { }", "java", config)
    assert result.output == ""
    assert result.error == "No public class found in the code"
    assert result.executionTime >= 0
    assert created_workspaces == []


@pytest.mark.asyncio
@pytest.mark.parametrize("language", ["html", "CSS", " html "])
async def test_markup_languages_are_simulated(config, language):
    result = await execute_code("<h1>hi</h1>", language, config)
    assert result.output == FRONTEND_MESSAGE
    assert result.error is None


@pytest.mark.asyncio
async def test_unknown_language_is_simulated_not_raised(config):
    result = await execute_code("puts 'hi'", "ruby", config)
    assert result.output == UNSUPPORTED_MESSAGE
    assert result.error is None


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_result(monkeypatch, config):
    async def broken_executor(code, config):
        raise RuntimeError("disk full")

    monkeypatch.setitem(dispatcher.EXECUTORS, "python", broken_executor)

    result = await execute_code("print(1)", "python", config)

    assert result.output == ""
    assert result.error == "disk full"
    assert result.executionTime >= 0


@pytest.mark.asyncio
async def test_dispatcher_stamps_total_elapsed_time(monkeypatch, config):
    async def slow_executor(code, config):
        await asyncio.sleep(0.1)
        return dispatcher.ExecutionResult(output="done", executionTime=0)

    monkeypatch.setitem(dispatcher.EXECUTORS, "php", slow_executor)

    result = await execute_code("<?php echo 1;", "PHP", config)

    assert result.output == "done"
    assert result.executionTime >= 50


@pytest.mark.asyncio
async def test_missing_toolchain_falls_back_to_simulation(monkeypatch):
    monkeypatch.setattr(dispatcher.shutil, "which", lambda name: None)
    config = ExecutionConfig(simulate_missing_toolchains=True)

    result = await execute_code('print("hello")\nprint(x)', "python", config)

    assert result.output == "hello\nx\n"
    assert result.error is None


@pytest.mark.asyncio
async def test_missing_toolchain_without_simulation_reports_error(monkeypatch, config):
    async def missing(code, config):
        return await execute_with_sandbox(
            code, "main.go", None, ["definitely-not-a-real-toolchain", "run", "{source}"], config
        )

    monkeypatch.setitem(dispatcher.EXECUTORS, "go", missing)

    result = await execute_code("package main", "go", config)

    assert result.output == ""
    assert result.error


@requires_python3
@pytest.mark.asyncio
async def test_python_execution(config, created_workspaces):
    result = await execute_request(ExecuteRequest(code="print(6 * 7)", language="Python"), config)
    assert result.output == "42\n"
    assert result.error is None
    assert not os.path.exists(created_workspaces[0])


@requires_python3
@pytest.mark.asyncio
async def test_python_runtime_error_keeps_output(config):
    result = await execute_code("print('before')\n1 / 0\n", "python", config)
    assert result.output == "before\n"
    assert "ZeroDivisionError" in result.error


@requires_python3
@pytest.mark.asyncio
async def test_timeout_resolves_promptly():
    config = ExecutionConfig(timeout_ms=1000)

    started = time.monotonic()
    result = await execute_code("while True:\n    pass\n", "python", config)

    assert result.error
    assert time.monotonic() - started < 6


@requires_python3
@pytest.mark.asyncio
async def test_concurrent_executions_do_not_interfere(config, created_workspaces):
    first, second = await asyncio.gather(
        execute_code("import time\ntime.sleep(0.2)\nprint('first')", "python", config),
        execute_code("print('second')", "python", config),
    )
    assert first.output == "first\n"
    assert second.output == "second\n"
    assert len(set(created_workspaces)) == 2
    assert not any(os.path.exists(path) for path in created_workspaces)


@requires_gcc
@pytest.mark.asyncio
async def test_c_hello_world(config):
    code = '#include <stdio.h>\nint main(){printf("hi\\n");return 0;}'
    result = await execute_code(code, "c", config)
    assert result.output == "hi\n"
    assert result.error is None


@requires_gcc
@pytest.mark.asyncio
async def test_c_compile_error(config, created_workspaces):
    code = "#include <stdio.h>\nint main(){ return undeclared_value; }"
    result = await execute_code(code, "c", config)
    assert result.output == ""
    assert "undeclared_value" in result.error
    assert not os.path.exists(created_workspaces[0])


@pytest.fixture
def recorded_commands(monkeypatch):
    """Replace process spawning with a stub that records argv and file names"""
    recorded = {"files": [], "commands": []}
    real_create_workspace = sandbox.create_workspace

    def recording_create_workspace(files, prefix="exec_"):
        recorded["files"].extend(files)
        return real_create_workspace(files, prefix=prefix)

    async def fake_run_process(args, cwd, config):
        recorded["commands"].append(args)
        recorded["workspace"] = cwd
        return ProcessResult(returncode=0, stdout="ok\n", stderr="")

    monkeypatch.setattr(sandbox, "create_workspace", recording_create_workspace)
    monkeypatch.setattr(sandbox, "run_process", fake_run_process)
    return recorded


@pytest.mark.asyncio
@pytest.mark.parametrize("language, source, compile_argv, run_argv", [
    ("c", "main.c", ["gcc", "{source}", "-o", "{binary}", "-lm"], ["{binary}"]),
    ("cpp", "main.cpp", ["g++", "{source}", "-o", "{binary}", "-std=c++17"], ["{binary}"]),
    ("go", "main.go", None, ["go", "run", "{source}"]),
    ("python", "main.py", None, ["python3", "{source}"]),
    ("javascript", "main.js", None, ["node", "{source}"]),
    ("typescript", "main.ts", None, ["npx", "ts-node", "{source}"]),
    ("php", "main.php", None, ["php", "{source}"]),
])
async def test_backend_commands(recorded_commands, config, language, source, compile_argv, run_argv):
    result = await execute_code("snippet", language, config)

    workspace = recorded_commands["workspace"]
    paths = {
        "source": os.path.join(workspace, source),
        "binary": os.path.join(workspace, "main.out"),
    }
    expected = [[part.format(**paths) for part in argv] for argv in (compile_argv, run_argv) if argv]

    assert result.output == "ok\n"
    assert recorded_commands["files"] == [source]
    assert recorded_commands["commands"] == expected


@pytest.mark.asyncio
async def test_java_source_named_after_public_class(recorded_commands, config):
    result = await execute_code("public class Hello { }", "java", config)

    workspace = recorded_commands["workspace"]
    assert result.output == "ok\n"
    assert recorded_commands["files"] == ["Hello.java"]
    assert recorded_commands["commands"] == [
        ["javac", os.path.join(workspace, "Hello.java")],
        ["java", "-cp", workspace, "Hello"],
    ]


@pytest.mark.asyncio
async def test_go_failure_uses_combined_label(monkeypatch, config):
    async def failing_run_process(args, cwd, config):
        return ProcessResult(returncode=1, stdout="", stderr="")

    monkeypatch.setattr(sandbox, "run_process", failing_run_process)

    result = await execute_code("package main", "go", config)

    assert result.output == ""
    assert result.error == "Compilation or runtime error"


@requires_gxx
@pytest.mark.asyncio
async def test_cpp_hello_world(config):
    code = '#include <iostream>\nint main() { auto s = "cpp"; std::cout << s << std::endl; return 0; }'
    result = await execute_code(code, "cpp", config)
    assert result.output == "cpp\n"
    assert result.error is None


@requires_go
@pytest.mark.asyncio
async def test_go_hello_world():
    config = ExecutionConfig(timeout_ms=60000)
    code = 'package main\n\nimport "fmt"\n\nfunc main() { fmt.Println("go") }\n'
    result = await execute_code(code, "go", config)
    assert result.output == "go\n"
    assert result.error is None


@requires_go
@pytest.mark.asyncio
async def test_go_build_failure():
    config = ExecutionConfig(timeout_ms=60000)
    code = 'package main\n\nfunc main() { println(x) }\n'
    result = await execute_code(code, "go", config)
    assert result.output == ""
    assert "undefined: x" in result.error


@requires_node
@pytest.mark.asyncio
async def test_javascript_console_log(config):
    result = await execute_code("console.log('js');", "javascript", config)
    assert result.output == "js\n"
    assert result.error is None


@requires_node
@pytest.mark.asyncio
async def test_javascript_runtime_error(config):
    result = await execute_code("console.log('before');\nthrow new Error('boom');", "javascript", config)
    assert result.output == "before\n"
    assert "boom" in result.error


@requires_ts_node
@pytest.mark.asyncio
async def test_typescript_console_log():
    config = ExecutionConfig(timeout_ms=60000)
    result = await execute_code("const n: number = 2;\nconsole.log(n * 21);", "typescript", config)
    assert result.output == "42\n"


@requires_php
@pytest.mark.asyncio
async def test_php_echo(config):
    result = await execute_code('<?php echo "php\\n";', "php", config)
    assert result.output == "php\n"
    assert result.error is None


@requires_java
@pytest.mark.asyncio
async def test_java_hello_world():
    config = ExecutionConfig(timeout_ms=60000)
    code = 'public class Hello {\n    public static void main(String[] args) {\n        System.out.println("java");\n    }\n}\n'
    result = await execute_code(code, "java", config)
    assert result.output == "java\n"
    assert result.error is None


@requires_java
@pytest.mark.asyncio
async def test_java_compile_error():
    config = ExecutionConfig(timeout_ms=60000)
    code = "public class Broken {\n    public static void main(String[] args) { int x = ; }\n}\n"
    result = await execute_code(code, "java", config)
    assert result.output == ""
    assert "Broken.java" in result.error
