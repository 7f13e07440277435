from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from shorts_architect.config import SynthesizerConfig


@dataclass(frozen=True)
class ApiSettings:
    synthesizer_config_path: Path | None = None
    openai_api_key_parameter: Optional[str] = None
    anthropic_api_key_parameter: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ApiSettings":
        return cls(
            synthesizer_config_path=Path(os.environ["SYNTHESIZER_CONFIG_PATH"])
            if os.environ.get("SYNTHESIZER_CONFIG_PATH")
            else None,
            openai_api_key_parameter=os.environ.get("OPENAI_API_KEY_PARAMETER"),
            anthropic_api_key_parameter=os.environ.get("ANTHROPIC_API_KEY_PARAMETER"),
        )

    def load_synthesizer_config(self) -> SynthesizerConfig:
        if self.synthesizer_config_path:
            return SynthesizerConfig.from_file(self.synthesizer_config_path)
        return SynthesizerConfig()

    def credential_parameters(self, config: SynthesizerConfig) -> dict[str, Optional[str]]:
        """Map each provider's API key env var to the SSM parameter that backs it."""
        return {
            config.openai_api_key_env: self.openai_api_key_parameter,
            config.anthropic_api_key_env: self.anthropic_api_key_parameter,
        }
