from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError
from pydantic.alias_generators import to_camel

from shorts_architect.errors import BriefValidationError


class CreativeBrief(BaseModel):
    """User intent forwarded to the blueprint synthesizer."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        frozen=True,
        extra="ignore",
    )

    topic: StrictStr = Field(min_length=4)
    audience: StrictStr = Field(min_length=4)
    goal: StrictStr = Field(min_length=4)
    duration: StrictStr = Field(min_length=2)
    tone: StrictStr = Field(min_length=2)
    call_to_action: StrictStr = Field(min_length=2)
    language: StrictStr = Field(min_length=2)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CreativeBrief":
        if not isinstance(payload, Mapping):
            raise BriefValidationError({"body": ["Request body must be a JSON object"]})
        try:
            return cls.model_validate(dict(payload))
        except ValidationError as exc:
            raise BriefValidationError(field_errors(exc)) from exc

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


def field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by top-level wire field name."""
    grouped: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("body",)
        grouped.setdefault(str(loc[0]), []).append(error["msg"])
    return grouped


DEFAULT_BRIEF = CreativeBrief.model_validate(
    {
        "topic": "3 AI automations that save content creators 10 hours a week",
        "audience": "ambitious solo creators and micro businesses that already post on TikTok or YouTube",
        "goal": "drive newsletter sign-ups by showcasing quick wins and expertise",
        "duration": "55 seconds",
        "tone": "high-energy, trustworthy, story-driven",
        "callToAction": "Invite viewers to download a free workflow template linked in bio",
        "language": "English",
    }
)
