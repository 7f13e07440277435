from __future__ import annotations

from typing import Mapping, Sequence


class BriefValidationError(ValueError):
    """Raised when a creative brief payload fails field checks."""

    def __init__(self, field_errors: Mapping[str, Sequence[str]]) -> None:
        self.field_errors: dict[str, list[str]] = {
            name: list(messages) for name, messages in field_errors.items()
        }
        summary = ", ".join(sorted(self.field_errors)) or "payload"
        super().__init__(f"Invalid creative brief: {summary}")


class ConfigurationError(RuntimeError):
    """Raised when the model service cannot be configured (e.g. missing API key)."""


class SynthesisError(RuntimeError):
    """Raised when the model call or its output cannot produce a blueprint."""


class TransportError(RuntimeError):
    """Raised by client transports when a generation request fails."""


class SubmissionInFlightError(RuntimeError):
    """Raised when a submission is attempted while another is still running."""


class ClipboardError(RuntimeError):
    """Raised when the package text cannot be written to the clipboard."""
