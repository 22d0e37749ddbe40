from typing import Any, Callable, Hashable, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecordedCall(BaseModel):
    """One intercepted invocation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    operation: Hashable
    arguments: Tuple[Any, ...] = Field(default_factory=tuple)

    @field_validator("arguments", mode="before")
    @classmethod
    def _as_tuple(cls, v):
        if v is None:
            return ()
        if isinstance(v, list):
            return tuple(v)
        return v


class Stub(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    operation: Hashable
    action: Callable[..., Any]
    guard: Optional[Callable[[Sequence[Any]], bool]] = Field(
        default=None,
        description="Predicate over the call's arguments. None marks a universal stub.",
    )

    @property
    def is_universal(self) -> bool:
        return self.guard is None

    def accepts(self, arguments: Sequence[Any]) -> bool:
        if self.guard is None:
            return True
        return bool(self.guard(arguments))
