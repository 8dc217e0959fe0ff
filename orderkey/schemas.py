from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
    requestId: Optional[str] = None


class Health(BaseModel):
    status: str = "ok"


class Version(BaseModel):
    version: str


class KeyBetweenIn(BaseModel):
    before: Optional[str] = None
    after: Optional[str] = None
    digits: Optional[str] = Field(default=None, min_length=2)


class KeyOut(BaseModel):
    key: str


class KeysBetweenIn(KeyBetweenIn):
    count: int = Field(ge=0)


class KeysOut(BaseModel):
    keys: list[str]


class KeyValidateIn(BaseModel):
    key: str
    digits: Optional[str] = Field(default=None, min_length=2)


class KeyValidateOut(BaseModel):
    key: str
    valid: bool
    error: Optional[str] = None
