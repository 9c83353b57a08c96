from typing import Any, Optional

from pydantic import BaseModel


class HoroscopeRequest(BaseModel):
    # Any scalar is accepted and compared by its lowercase text
    sign: Optional[Any] = None


class HoroscopeResponse(BaseModel):
    description: str


class HoroscopeError(BaseModel):
    error: str
