from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from models import HealthResponse, CompileRequest, CompileResponse, ErrorResponse, MessageResponse
from execution import (
    ExecutionConfig,
    ExecuteRequest,
    check_syntax,
    execute_request,
    is_supported_language,
)
import logging
import os
import json
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

"""
FastAPI server for the code playground compiler
Runs user snippets with the host toolchains and returns their output
"""

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

app = FastAPI(
    title="Playground Compiler",
    description="Multi-language code execution service for the online editor",
    version=VERSION
)

# Execution limits are read once at startup and passed to every request
app.state.execution_config = ExecutionConfig.from_env()

# CORS middleware to allow requests from frontend
cors_origins = os.getenv(
    "CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in cors_origins.split(",") if origin.strip()],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Incoming request: {request.method} {request.url.path}")
    response = await call_next(request)
    return response


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump()
    )


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint
    Returns the service status
    """
    return HealthResponse(status="ok", version=VERSION)


@app.get("/api/compiler", response_model=MessageResponse)
async def compiler_root():
    """Liveness probe for the compiler API"""
    return MessageResponse(message="Hello from the backend!")


@app.post("/api/compiler/compile", response_model=CompileResponse)
async def compile_code(request: Request):
    """
    Compile and execute code

    Request-level problems (missing fields, unsupported language, heuristic
    syntax errors) are 400s. A toolchain failure is still a 200 with `error` set.

    Example:
        POST /api/compiler/compile
        {
            "code": "print('hi')",
            "language": "python"
        }

        Response:
        {
            "success": true,
            "output": "hi\\n",
            "error": null,
            "executionTime": 42
        }
    """
    try:
        # Parse request body manually so bad payloads get the same envelope
        try:
            body = await request.json()
        except json.JSONDecodeError as e:
            logger.error(f"JSON decode error: {e}")
            body = None

        try:
            payload = CompileRequest(**body) if isinstance(body, dict) else CompileRequest()
        except ValidationError as e:
            logger.error(f"Invalid compile request: {e}")
            payload = CompileRequest()

        # Validation
        if not payload.code or not payload.language:
            return error_response(400, "Code and language are required")

        # Check if the language is supported
        if not is_supported_language(payload.language):
            return error_response(
                400, f"Language '{payload.language}' is not supported")

        # Basic syntax check
        syntax_check = check_syntax(payload.code, payload.language)
        if syntax_check.hasError:
            logger.info(
                f"Syntax check rejected {payload.language} code: {syntax_check.errorMessage}")
            return error_response(400, syntax_check.errorMessage)

        # Compile and execute the code
        result = await execute_request(
            ExecuteRequest(code=payload.code, language=payload.language),
            config=request.app.state.execution_config
        )

        return CompileResponse(
            success=True,
            output=result.output,
            error=result.error,
            executionTime=result.executionTime
        )

    except Exception as e:
        logger.error(f"Error compiling code: {e}", exc_info=True)
        return error_response(500, str(e) or "An unexpected error occurred")


if __name__ == "__main__":
    import uvicorn

    # Get port from environment or default to 8001
    port = int(os.getenv("PORT", 8001))

    logger.info(f"Starting Playground Compiler on port {port}")
    uvicorn.run(
        "main:app",  # Use string import path instead of app object
        host="0.0.0.0",
        port=port,
        log_level="info",
        access_log=True
    )
