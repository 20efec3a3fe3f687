"""
Execution limits, read from the environment once and passed around explicitly
"""

import os
from pydantic import BaseModel, Field

DEFAULT_TIMEOUT_MS = 10000
DEFAULT_MAX_BUFFER_SIZE = 5 * 1024 * 1024  # 5MB


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class ExecutionConfig(BaseModel):
    """Limits applied to every toolchain invocation"""
    model_config = {'frozen': True}

    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    max_buffer_size: int = Field(default=DEFAULT_MAX_BUFFER_SIZE, gt=0)  # bytes, stdout + stderr
    simulate_missing_toolchains: bool = False

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_env(cls) -> 'ExecutionConfig':
        """
        Build a config from TIMEOUT_MS, MAX_BUFFER_SIZE and
        SIMULATE_MISSING_TOOLCHAINS

        Raises:
            ValueError: If a limit is not a positive integer
        """
        return cls(
            timeout_ms=int(os.getenv('TIMEOUT_MS', DEFAULT_TIMEOUT_MS)),
            max_buffer_size=int(os.getenv('MAX_BUFFER_SIZE', DEFAULT_MAX_BUFFER_SIZE)),
            simulate_missing_toolchains=_env_flag('SIMULATE_MISSING_TOOLCHAINS'),
        )
