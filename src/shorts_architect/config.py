from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import yaml
from anthropic import Anthropic
from openai import OpenAI
from pydantic import BaseModel

from shorts_architect.blueprint_engine.llm import ClaudeLLM, EchoLLM, LLMClient, OpenAILLM
from shorts_architect.blueprint_engine.prompts import SYSTEM_PROMPT
from shorts_architect.errors import ConfigurationError

logger = logging.getLogger(__name__)


class SynthesizerConfig(BaseModel):
    llm_provider: str = "openai"
    llm_model: str = "gpt-4.1-mini"
    openai_api_key_env: str = "OPENAI_API_KEY"
    anthropic_api_key_env: str = "ANTHROPIC_API_KEY"
    max_output_tokens: int = 1400
    temperature: float = 0.9

    @classmethod
    def from_file(cls, path: Path) -> "SynthesizerConfig":
        text = path.read_text(encoding="utf-8")
        try:
            payload = json.loads(text)
        except json.JSONDecodeError:
            try:
                payload = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ValueError(f"{path} is neither JSON nor YAML: {exc}") from exc
        return cls.model_validate(payload or {})

    @property
    def api_key_env(self) -> str | None:
        provider = self.llm_provider.lower()
        if provider == "openai":
            return self.openai_api_key_env
        if provider == "claude":
            return self.anthropic_api_key_env
        return None

    def require_api_key(self) -> str | None:
        """Read the provider credential from the environment, failing when it is absent."""
        env_name = self.api_key_env
        if env_name is None:
            if self.llm_provider.lower() != "echo":
                raise ConfigurationError(f"Unknown llm_provider '{self.llm_provider}'.")
            return None
        api_key = os.getenv(env_name)
        if not api_key:
            raise ConfigurationError(f"{env_name} is not configured on the server.")
        return api_key

    def build_llm(self) -> LLMClient:
        api_key = self.require_api_key()
        provider = self.llm_provider.lower()
        if provider == "openai":
            return OpenAILLM(
                client=OpenAI(api_key=api_key),
                model=self.llm_model,
                system_prompt=SYSTEM_PROMPT,
                max_output_tokens=self.max_output_tokens,
                temperature=self.temperature,
            )
        if provider == "claude":
            return ClaudeLLM(
                client=Anthropic(api_key=api_key),
                model=self.llm_model,
                system_prompt=SYSTEM_PROMPT,
                max_output_tokens=self.max_output_tokens,
                temperature=self.temperature,
            )
        logger.warning("Using EchoLLM; blueprints will be placeholder content")
        return EchoLLM()
