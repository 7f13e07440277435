from __future__ import annotations

import abc
import logging
from typing import Any, Mapping

import requests
from pydantic import ValidationError

from shorts_architect.blueprint_engine.engine import BlueprintSynthesizer
from shorts_architect.blueprint_engine.model import Blueprint
from shorts_architect.brief.model import CreativeBrief
from shorts_architect.errors import (
    BriefValidationError,
    ConfigurationError,
    SynthesisError,
    TransportError,
)

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Unable to generate plan"


class BlueprintTransport(abc.ABC):
    """Delivers a brief to a synthesizer and returns the resulting blueprint."""

    @abc.abstractmethod
    def generate(self, brief: Mapping[str, str]) -> Blueprint:
        raise NotImplementedError


class HttpBlueprintTransport(BlueprintTransport):
    """Posts briefs to the deployed generate endpoint."""

    def __init__(
        self,
        endpoint: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers = {"Content-Type": "application/json", **dict(headers or {})}

    def generate(self, brief: Mapping[str, str]) -> Blueprint:
        try:
            response = self.session.post(
                self.endpoint,
                json=dict(brief),
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(str(exc) or DEFAULT_FAILURE_MESSAGE) from exc

        if not response.ok:
            raise TransportError(_error_message(response))

        try:
            return Blueprint.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise TransportError(f"Unexpected response from generate endpoint: {exc}") from exc


class LocalBlueprintTransport(BlueprintTransport):
    """Runs validation and synthesis in-process, without HTTP."""

    def __init__(self, synthesizer: BlueprintSynthesizer | None = None) -> None:
        self.synthesizer = synthesizer or BlueprintSynthesizer()

    def generate(self, brief: Mapping[str, str]) -> Blueprint:
        try:
            creative_brief = CreativeBrief.from_payload(brief)
            return self.synthesizer.synthesize(creative_brief)
        except BriefValidationError as exc:
            raise TransportError(format_field_errors(exc.field_errors)) from exc
        except (ConfigurationError, SynthesisError) as exc:
            raise TransportError(str(exc)) from exc


def format_field_errors(field_errors: Mapping[str, Any]) -> str:
    parts = []
    for name, messages in field_errors.items():
        if isinstance(messages, (list, tuple)):
            parts.append(f"{name}: {', '.join(str(message) for message in messages)}")
        else:
            parts.append(f"{name}: {messages}")
    return "; ".join(parts)


def _error_message(response: requests.Response) -> str:
    text = response.text
    try:
        body = response.json()
    except ValueError:
        return text or DEFAULT_FAILURE_MESSAGE

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict) and error:
        return format_field_errors(error)
    return text or DEFAULT_FAILURE_MESSAGE
