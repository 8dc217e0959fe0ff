from __future__ import annotations

import os
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from .digits import BASE_62_DIGITS, check_digits
from .errors import InvalidAlphabet


class Settings(BaseModel):
    digits: str = BASE_62_DIGITS
    max_batch: int = Field(default=1000, ge=1)
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = "INFO"

    @field_validator("digits")
    @classmethod
    def _check_digits(cls, value: str) -> str:
        try:
            return check_digits(value)
        except InvalidAlphabet as exc:
            raise ValueError(exc.message) from exc

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {
            "digits": env.get("ORDERKEY_DIGITS"),
            "max_batch": env.get("ORDERKEY_MAX_BATCH"),
            "host": env.get("HOST"),
            "port": env.get("PORT"),
            "log_level": env.get("LOG_LEVEL"),
        }
        return cls(**{k: v for k, v in values.items() if v is not None})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
