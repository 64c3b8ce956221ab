from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class AuthorsResponse(BaseModel):
    authors: List[str] = Field(default_factory=list)
    default_author: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    type: str
