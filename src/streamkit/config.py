"""Stream configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StreamConfig(BaseModel):
    """Settings carried by a Stream and propagated to every downstream stage.

    Attributes:
        name: Label used in log lines, trace events and error messages.
        trace: Attach a fresh enabled Trace when none is passed explicitly.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="stream", min_length=1)
    trace: bool = False
