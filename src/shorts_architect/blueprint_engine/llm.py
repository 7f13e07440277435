from __future__ import annotations

import abc
import json
import logging
from typing import Any

from anthropic import Anthropic
from openai import OpenAI

logger = logging.getLogger(__name__)


class LLMClient(abc.ABC):
    """Abstract interface for the text model that drafts blueprints."""

    @abc.abstractmethod
    def complete(self, prompt: str, **kwargs: Any) -> str:
        raise NotImplementedError


class EchoLLM(LLMClient):
    """Offline stub returning a fixed, schema-conforming blueprint."""

    def complete(self, prompt: str, **kwargs: Any) -> str:
        placeholder = {
            "title": "Stub title",
            "hook": "Stub hook",
            "summary": "Stub summary",
            "script": [
                {
                    "timestamp": f"0:{index * 10:02d}",
                    "narration": f"Stub narration {index + 1}",
                    "onScreen": f"Stub visual {index + 1}",
                    "emphasis": "steady",
                }
                for index in range(5)
            ],
            "shotPlan": [
                {
                    "label": f"Shot {index + 1}",
                    "description": "Stub framing",
                    "duration": "10s",
                    "notes": "",
                }
                for index in range(5)
            ],
            "callToAction": "Stub call to action",
            "caption": "Stub caption",
            "hashtags": [f"stub{index}" for index in range(6)],
            "broll": [f"Stub b-roll {index + 1}" for index in range(5)],
            "soundDesign": ["Stub music bed", "Stub whoosh", "Stub mix note"],
            "tips": ["Stub tip 1", "Stub tip 2", "Stub tip 3"],
            "productionNotes": "",
        }
        return json.dumps(placeholder)


def _pop_output_budget(kwargs: dict[str, Any], default: int) -> int:
    # Callers may use either provider's spelling for the output token budget.
    return kwargs.pop("max_output_tokens", kwargs.pop("max_tokens", default))


class OpenAILLM(LLMClient):
    """OpenAI Responses API wrapper."""

    def __init__(
        self,
        client: OpenAI,
        model: str,
        system_prompt: str | None = None,
        max_output_tokens: int = 1400,
        temperature: float = 0.9,
    ) -> None:
        self.client = client
        self.model = model
        self.system_prompt = system_prompt or "You are a creative director for short-form video."
        self.max_output_tokens = max_output_tokens
        self.temperature = temperature

    def complete(self, prompt: str, **kwargs: Any) -> str:
        system = kwargs.pop("system", self.system_prompt)
        params: dict[str, Any] = {
            "model": self.model,
            "input": [
                {"role": "system", "content": [{"type": "input_text", "text": system}]},
                {"role": "user", "content": [{"type": "input_text", "text": prompt}]},
            ],
            "max_output_tokens": _pop_output_budget(kwargs, self.max_output_tokens),
            "temperature": kwargs.pop("temperature", self.temperature),
        }
        params.update(kwargs)
        response = self.client.responses.create(**params)
        if getattr(response, "status", None) == "incomplete":
            logger.warning(
                "OpenAI response incomplete; output may be truncated (max_output_tokens=%s)",
                params["max_output_tokens"],
            )
        return getattr(response, "output_text", None) or ""


class ClaudeLLM(LLMClient):
    """Anthropic Messages API wrapper."""

    def __init__(
        self,
        client: Anthropic,
        model: str,
        system_prompt: str | None = None,
        max_output_tokens: int = 1400,
        temperature: float = 0.9,
    ) -> None:
        self.client = client
        self.model = model
        self.system_prompt = system_prompt or "You are a creative director for short-form video."
        self.max_output_tokens = max_output_tokens
        self.temperature = temperature

    def complete(self, prompt: str, **kwargs: Any) -> str:
        system = kwargs.pop("system", self.system_prompt)
        params: dict[str, Any] = {
            "model": self.model,
            "system": system,
            "messages": [
                {"role": "user", "content": [{"type": "text", "text": prompt}]},
            ],
            "max_tokens": _pop_output_budget(kwargs, self.max_output_tokens),
            "temperature": kwargs.pop("temperature", self.temperature),
        }
        params.update(kwargs)
        response = self.client.messages.create(**params)
        if getattr(response, "stop_reason", None) == "max_tokens":
            logger.warning(
                "Claude response truncated; output may be incomplete (max_tokens=%s)",
                params["max_tokens"],
            )
        return "".join(
            getattr(block, "text", "") for block in response.content if getattr(block, "type", None) == "text"
        )
