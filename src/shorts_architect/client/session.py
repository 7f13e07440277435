from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Callable, Optional

from shorts_architect.blueprint_engine.model import Blueprint
from shorts_architect.brief.model import DEFAULT_BRIEF
from shorts_architect.content_package.builder import render_package_text
from shorts_architect.errors import ClipboardError, SubmissionInFlightError

from .clipboard import ClipboardWriter, SystemClipboard
from .transport import BlueprintTransport

logger = logging.getLogger(__name__)

COPY_SUCCESS_MESSAGE = "Copied to clipboard"
COPY_FAILURE_MESSAGE = "Copy failed. Try manually."
NOTICE_CLEAR_DELAY_SEC = 3.0
UNKNOWN_ERROR_MESSAGE = "Unknown error"

TimerFactory = Callable[[float, Callable[[], None]], "threading.Timer"]


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


class SubmissionSession:
    """Client-side brief form with a single in-flight generation request.

    The copy notice runs on its own timer and never touches the submission
    state; posting a new notice cancels the pending clear of the previous one.
    """

    def __init__(
        self,
        transport: BlueprintTransport,
        clipboard: ClipboardWriter | None = None,
        notice_delay: float = NOTICE_CLEAR_DELAY_SEC,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self.transport = transport
        self.clipboard = clipboard or SystemClipboard()
        self.notice_delay = notice_delay
        self._timer_factory = timer_factory or threading.Timer
        self._lock = threading.Lock()
        self._notice_timer: Optional[threading.Timer] = None

        self.form: dict[str, str] = DEFAULT_BRIEF.to_payload()
        self.state = SubmissionState.IDLE
        self.blueprint: Blueprint | None = None
        self.error: str | None = None
        self.copy_message: str | None = None

    @property
    def is_submitting(self) -> bool:
        return self.state is SubmissionState.SUBMITTING

    @property
    def package_text(self) -> str:
        if self.blueprint is None:
            return ""
        return render_package_text(self.blueprint)

    def update_field(self, name: str, value: str) -> None:
        if name not in self.form:
            raise KeyError(name)
        self.form[name] = value
        self._settle()

    def reset_form(self) -> None:
        self.form = DEFAULT_BRIEF.to_payload()
        self._settle()

    def submit(self) -> SubmissionState:
        with self._lock:
            if self.state is SubmissionState.SUBMITTING:
                raise SubmissionInFlightError("A generation request is already in flight")
            self.state = SubmissionState.SUBMITTING
            self.blueprint = None
            self.error = None
            brief = dict(self.form)

        try:
            blueprint = self.transport.generate(brief)
        except Exception as exc:
            logger.error("Blueprint generation failed: %s", exc)
            with self._lock:
                self.error = str(exc) or UNKNOWN_ERROR_MESSAGE
                self.state = SubmissionState.FAILED
            return self.state

        with self._lock:
            self.blueprint = blueprint
            self.state = SubmissionState.SUCCESS
        return self.state

    def copy_package(self) -> str | None:
        text = self.package_text
        if not text:
            return None
        try:
            self.clipboard.write(text)
        except ClipboardError as exc:
            logger.warning("Clipboard write failed: %s", exc)
            self._show_notice(COPY_FAILURE_MESSAGE)
        else:
            self._show_notice(COPY_SUCCESS_MESSAGE)
        return self.copy_message

    def close(self) -> None:
        with self._lock:
            if self._notice_timer is not None:
                self._notice_timer.cancel()
                self._notice_timer = None

    def _settle(self) -> None:
        with self._lock:
            if self.state in (SubmissionState.SUCCESS, SubmissionState.FAILED):
                self.state = SubmissionState.IDLE

    def _show_notice(self, message: str) -> None:
        with self._lock:
            if self._notice_timer is not None:
                self._notice_timer.cancel()
            self.copy_message = message
            timer = self._timer_factory(self.notice_delay, lambda: self._clear_notice(timer))
            timer.daemon = True
            self._notice_timer = timer
            timer.start()

    def _clear_notice(self, timer: threading.Timer) -> None:
        with self._lock:
            if self._notice_timer is timer:
                self.copy_message = None
                self._notice_timer = None
