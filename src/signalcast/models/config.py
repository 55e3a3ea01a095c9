from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from signalcast.bootstrap import BUILTIN_CAST_MODULES
from signalcast.core.types import type_key


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class RegistryConfig(BaseModel):
    """Which cast modules to install at bootstrap, and the re-registration policy."""

    casts: List[str] = Field(default_factory=lambda: list(BUILTIN_CAST_MODULES))
    overwrite: bool = False


class SignalConfig(BaseModel):
    name: str = Field(min_length=1)
    type: str
    # Literal in the type's input syntax, e.g. "[3](1,2,3)"; None leaves the signal unset
    value: Optional[str] = None

    @field_validator("type")
    @classmethod
    def _validate_type(cls, v: str) -> str:
        return type_key(v)


class GraphConfig(BaseModel):
    name: str = "graph"
    log_level: LogLevel = "INFO"
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    signals: List[SignalConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_unique_names(self) -> "GraphConfig":
        seen = set()
        for sig in self.signals:
            if sig.name in seen:
                raise ValueError(f"Duplicate signal name: {sig.name!r}")
            seen.add(sig.name)
        return self
