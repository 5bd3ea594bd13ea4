"""Errors in user-supplied settings: paths, TOML files, env vars, flags."""

from pathlib import Path
from typing import Any, Union

from .base import TsAnalyzerError


class ConfigurationError(TsAnalyzerError):
    """A configuration source is missing, malformed or inconsistent."""


class InvalidPathError(ConfigurationError):
    """The project root does not exist or is not a directory."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid path: {self.path}", details={"path": self.path, "reason": reason})


class InvalidConfigError(ConfigurationError):
    """A single setting holds a value outside its allowed range."""

    def __init__(self, key: str, value: Any, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid configuration for {key}: {value!r}",
            details={"key": key, "reason": reason},
        )
