from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from generate_api.config import ApiSettings
from generate_api.http import (
    HttpRequestParser,
    bad_request,
    cors_preflight_response,
    ok,
    server_error,
)
from shorts_architect.blueprint_engine.engine import GENERIC_FAILURE_MESSAGE, BlueprintSynthesizer
from shorts_architect.brief.model import CreativeBrief
from shorts_architect.config import SynthesizerConfig
from shorts_architect.errors import BriefValidationError, ConfigurationError, SynthesisError
from shorts_architect.ssm import hydrate_credentials

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

SynthesizerFactory = Callable[[SynthesizerConfig], BlueprintSynthesizer]


class GenerateApplication:
    """Coordinates configuration checks, brief validation, and blueprint synthesis."""

    def __init__(
        self,
        settings: ApiSettings | None = None,
        request_parser: HttpRequestParser | None = None,
        synthesizer_factory: SynthesizerFactory | None = None,
    ) -> None:
        self._settings = settings
        self._parser = request_parser or HttpRequestParser()
        self._synthesizer_factory = synthesizer_factory or (
            lambda config: BlueprintSynthesizer(config=config)
        )

    def handle_event(self, event: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("Generate event received")
        if event.get("httpMethod") == "OPTIONS":
            return cors_preflight_response()

        try:
            config = self._load_config()
            config.require_api_key()
        except ConfigurationError as exc:
            logger.error("Generate endpoint misconfigured: %s", exc)
            return server_error(str(exc))

        try:
            payload = self._parser.parse(event)
            brief = CreativeBrief.from_payload(payload)
        except BriefValidationError as exc:
            logger.info("Rejected creative brief: %s", sorted(exc.field_errors))
            return bad_request(exc.field_errors)

        synthesizer = self._synthesizer_factory(config)
        try:
            blueprint = synthesizer.synthesize(brief)
        except ConfigurationError as exc:
            logger.error("Generate endpoint misconfigured: %s", exc)
            return server_error(str(exc))
        except SynthesisError as exc:
            logger.exception("Blueprint synthesis failed for topic %r", brief.topic)
            return server_error(str(exc) or GENERIC_FAILURE_MESSAGE)

        return ok(blueprint.to_payload())

    def _load_config(self) -> SynthesizerConfig:
        settings = self._settings or ApiSettings.from_env()
        try:
            config = settings.load_synthesizer_config()
        except (OSError, ValueError) as exc:
            raise ConfigurationError(f"Unable to load synthesizer config: {exc}") from exc

        hydrate_credentials(settings.credential_parameters(config))
        return config


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:  # pragma: no cover - AWS entry
    return GenerateApplication().handle_event(event)
