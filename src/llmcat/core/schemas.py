from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from llmcat.core.filters import normalize_extension

DEFAULT_MAX_SIZE = 10 << 20  # 10 MiB

Outcome = Literal[
    "emitted",
    "listed",
    "access_error",
    "is_directory",
    "walk_error",
    "too_large",
    "binary",
    "io_error",
]

class CatConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    recurse: bool = False
    extension: str = ""
    names_only: bool = False
    max_size: int = Field(DEFAULT_MAX_SIZE, ge=0)

    @field_validator("extension")
    @classmethod
    def _normalize(cls, v: str) -> str:
        return normalize_extension(v)

class PathResult(BaseModel):
    path: str
    outcome: Outcome
    detail: str = ""
    size: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.outcome in ("emitted", "listed")

    @property
    def skipped(self) -> bool:
        return self.outcome in ("too_large", "binary")

    @property
    def failed(self) -> bool:
        return not (self.ok or self.skipped)
