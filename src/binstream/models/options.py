from __future__ import annotations
import codecs
from typing import Literal
from pydantic import BaseModel, ConfigDict, field_validator

class StreamOptions(BaseModel):
    """Per-stream text handling for String fields and str construction."""
    model_config = ConfigDict(frozen=True)

    encoding: str = "utf-8"
    errors: Literal["strict", "replace", "ignore", "surrogateescape"] = "strict"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding {v!r}") from e
        return v

DEFAULT_OPTIONS = StreamOptions()
