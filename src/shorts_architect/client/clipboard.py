from __future__ import annotations

import abc
import shutil
import subprocess
import sys
from typing import Sequence

from shorts_architect.errors import ClipboardError


class ClipboardWriter(abc.ABC):
    @abc.abstractmethod
    def write(self, text: str) -> None:
        raise NotImplementedError


class SystemClipboard(ClipboardWriter):
    """Pipes text into the platform's clipboard utility."""

    _CANDIDATES: Sequence[Sequence[str]] = (
        ("pbcopy",),
        ("wl-copy",),
        ("xclip", "-selection", "clipboard"),
        ("xsel", "--clipboard", "--input"),
    )

    def __init__(self, command: Sequence[str] | None = None) -> None:
        self.command = list(command) if command else self._detect()

    def write(self, text: str) -> None:
        if not self.command:
            raise ClipboardError("No clipboard utility available")
        try:
            subprocess.run(self.command, input=text, text=True, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ClipboardError(str(exc)) from exc

    @classmethod
    def _detect(cls) -> list[str]:
        if sys.platform.startswith("win"):
            return ["clip"]
        for candidate in cls._CANDIDATES:
            if shutil.which(candidate[0]):
                return list(candidate)
        return []
