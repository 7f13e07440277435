from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        frozen=True,
        extra="ignore",
    )


class ScriptBeat(_WireModel):
    """Single timestamped narration unit of the short."""

    timestamp: StrictStr
    narration: StrictStr
    on_screen: StrictStr = Field(description="Visual direction shown while the line plays")
    emphasis: StrictStr = Field(description="Pacing or energy cue for the beat")


class Shot(_WireModel):
    """Camera framing / motion instruction for the shot plan."""

    label: StrictStr
    description: StrictStr
    duration: StrictStr
    notes: StrictStr = ""


class Blueprint(_WireModel):
    """Validated production plan for a single vertical short."""

    title: StrictStr = Field(min_length=1)
    hook: StrictStr = Field(min_length=1)
    summary: StrictStr = Field(min_length=1)
    script: List[ScriptBeat] = Field(min_length=5)
    shot_plan: List[Shot] = Field(min_length=5)
    call_to_action: StrictStr = Field(min_length=1)
    caption: StrictStr = Field(min_length=1)
    hashtags: List[StrictStr] = Field(min_length=6, max_length=12)
    broll: List[StrictStr] = Field(min_length=5)
    sound_design: List[StrictStr] = Field(min_length=3)
    tips: List[StrictStr] = Field(min_length=3)
    production_notes: StrictStr

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
