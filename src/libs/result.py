"""Result value objects

Use cases return a Result instead of raising, so callers can branch on
is_ok()/is_err() and map error codes to responses.
"""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class Error(BaseModel):
    """Error payload carried by a failed Result"""

    code: str = Field(..., description="Machine readable error code")
    message: str = Field(..., description="Human readable message")
    reason: Optional[str] = Field(default=None, description="Underlying cause")


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def __repr__(self) -> str:
        if self.is_ok():
            return f"Result(ok={self.value!r})"
        return f"Result(err={self.error!r})"


class Return:
    """Factory for Result instances"""

    @staticmethod
    def ok(value: T = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
