"""
Pydantic models for code execution
"""

from pydantic import BaseModel, Field
from typing import Optional


class ExecuteRequest(BaseModel):
    """Request to execute a single snippet"""
    model_config = {'frozen': True}

    code: str
    language: str


class SyntaxCheckResult(BaseModel):
    """Outcome of the pre-execution heuristic check"""
    hasError: bool = False
    errorMessage: Optional[str] = None


class ExecutionResult(BaseModel):
    """Result of running (or simulating) a snippet"""
    output: str = ''
    error: Optional[str] = None
    executionTime: int = Field(default=0, ge=0)  # milliseconds
