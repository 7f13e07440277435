from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from shorts_architect.brief.model import CreativeBrief
from shorts_architect.config import SynthesizerConfig
from shorts_architect.errors import ConfigurationError, SynthesisError

from .llm import LLMClient
from .model import Blueprint
from .prompts import SYSTEM_PROMPT, render_brief_prompt

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to synthesize a short blueprint. Please retry."


class BlueprintSynthesizer:
    """Turns a validated brief into a schema-checked blueprint with one model call."""

    def __init__(
        self,
        llm: LLMClient | None = None,
        config: SynthesizerConfig | None = None,
    ) -> None:
        self.config = config or SynthesizerConfig()
        self._llm = llm

    def synthesize(self, brief: CreativeBrief) -> Blueprint:
        llm = self._llm or self.config.build_llm()
        prompt = render_brief_prompt(brief)

        try:
            raw = llm.complete(
                prompt,
                system=SYSTEM_PROMPT,
                max_output_tokens=self.config.max_output_tokens,
                temperature=self.config.temperature,
            )
        except (ConfigurationError, SynthesisError):
            raise
        except Exception as exc:
            logger.error("Model call failed: %s", exc)
            raise SynthesisError(str(exc) or GENERIC_FAILURE_MESSAGE) from exc

        logger.debug("LLM raw response: %s", raw)
        if not raw or not raw.strip():
            raise SynthesisError("No content returned from model.")

        return parse_blueprint(raw)


def parse_blueprint(raw: str) -> Blueprint:
    """Strictly parse model output as JSON and validate it as a Blueprint."""
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.error("Model output is not valid JSON: %s", exc)
        raise SynthesisError(f"Model output is not valid JSON: {exc}") from exc

    try:
        return Blueprint.model_validate(payload)
    except ValidationError as exc:
        logger.error("Invalid blueprint payload: %s", exc)
        raise SynthesisError(_describe_schema_errors(exc)) from exc


def _describe_schema_errors(exc: ValidationError) -> str:
    details = [
        f"{'.'.join(str(part) for part in error['loc']) or 'root'}: {error['msg']}"
        for error in exc.errors()
    ]
    return "Model output does not match the blueprint schema: " + "; ".join(details)
