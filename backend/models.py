from __future__ import annotations

from pydantic import BaseModel
from typing import Optional

"""
Pydantic models for request/response validation
"""

class HealthResponse(BaseModel):
    status: str
    version: str = "0.1.0"

class CompileRequest(BaseModel):
    code: Optional[str] = None
    language: Optional[str] = None

class CompileResponse(BaseModel):
    success: bool = True
    output: str
    error: Optional[str] = None
    executionTime: int  # milliseconds

class ErrorResponse(BaseModel):
    success: bool = False
    error: str

class MessageResponse(BaseModel):
    message: str
