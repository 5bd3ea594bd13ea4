"""Root of the ts-analyzer exception hierarchy."""

from typing import Any, Mapping, Optional


class TsAnalyzerError(Exception):
    """Every error ts-analyzer raises deliberately derives from this.

    ``details`` holds structured context (paths, config keys, reasons) and is
    appended to the message when the error is printed.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
