"""Run configuration: analysis toggles, ignore globs, thresholds, workers.

Later sources override earlier ones:
    1. Defaults (AnalysisConfig field defaults)
    2. Global config (~/.ts-analyzer.toml)
    3. Project config (./ts-analyzer.toml)
    4. Explicit config file
    5. Environment variables (TS_ANALYZER_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(complexity=True, workers=4)
    >>> config.options.complexity
    True
    >>> config.options.duplicates
    False
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Literal, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

DEFAULT_IGNORE_PATTERNS = (
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.next/**",
    "**/coverage/**",
    "**/*.d.ts",
    "**/*.spec.ts",
    "**/*.spec.tsx",
    "**/*.test.ts",
    "**/*.test.tsx",
)

# UI-framework core packages that every component imports; listing them adds noise.
DEFAULT_EXCLUDED_DEPENDENCIES = (
    "react",
    "react-dom",
    "react-redux",
    "react-router",
    "react-router-dom",
)

ENV_PREFIX = "TS_ANALYZER_"


@dataclass(frozen=True)
class AnalysisOptions:
    """Which analyses a run performs.

    Content hashing, line counts and dependency extraction always run; these
    toggles only control the optional detectors and duplicate grouping.
    """

    duplicates: bool = True
    complexity: bool = True
    functions: bool = True

    @classmethod
    def resolve(
        cls, duplicates: bool = False, complexity: bool = False, functions: bool = False
    ) -> "AnalysisOptions":
        """Build options from requested flags, enabling everything when none are set."""
        if not (duplicates or complexity or functions):
            return cls(duplicates=True, complexity=True, functions=True)
        return cls(duplicates=duplicates, complexity=complexity, functions=functions)


@dataclass(frozen=True)
class ThresholdConfig:
    """Upper bounds (inclusive) of the project complexity bands.

    Totals above ``high_max`` are rated "Very High".
    """

    low_max: int = 500
    medium_max: int = 1500
    high_max: int = 3000

    def __post_init__(self) -> None:
        if self.low_max < 0:
            raise ValueError("low_max must be non-negative")
        if not self.low_max < self.medium_max < self.high_max:
            raise ValueError(
                "complexity thresholds must be strictly increasing "
                f"(got {self.low_max}, {self.medium_max}, {self.high_max})"
            )

    @property
    def bands(self) -> tuple[tuple[int, str], ...]:
        return (
            (self.low_max, "Low"),
            (self.medium_max, "Medium"),
            (self.high_max, "High"),
        )


DEFAULT_THRESHOLDS = ThresholdConfig()


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        Analysis toggles:
            duplicates: Group files with identical content
            complexity: Score decision points per file
            functions: Detect declared functions and classes
            (when none is set, all three run)

        File filtering:
            ignore_patterns: Glob patterns excluded from the scan
            extra_ignore_patterns: Additional patterns appended to the defaults

        Detection tuning:
            excluded_dependencies: Module specifiers never reported as dependencies
            thresholds: Complexity rating bands

        Execution and output:
            workers: Parallel file-analysis workers (1 = sequential)
            output_path: HTML report location, relative to the project root
            verbosity: Logging verbosity level
    """

    # Analysis toggles
    duplicates: bool = False
    complexity: bool = False
    functions: bool = False

    # File filtering
    ignore_patterns: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS))
    extra_ignore_patterns: list[str] = field(default_factory=list)

    # Detection tuning
    excluded_dependencies: list[str] = field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_DEPENDENCIES)
    )
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)

    # Execution and output
    workers: int = 1
    output_path: str = "analysis_report.html"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if not isinstance(self.thresholds, ThresholdConfig):
            raise InvalidConfigError("thresholds", self.thresholds, "expected a [thresholds] table")
        if not self.output_path:
            raise InvalidConfigError("output_path", self.output_path, "must not be empty")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def options(self) -> AnalysisOptions:
        return AnalysisOptions.resolve(
            duplicates=self.duplicates,
            complexity=self.complexity,
            functions=self.functions,
        )

    @property
    def all_ignore_patterns(self) -> list[str]:
        return [*self.ignore_patterns, *self.extra_ignore_patterns]


def load_config(config_file: Optional[Union[str, Path]] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options never mask file settings.
            ``verbose``/``quiet`` booleans are mapped onto ``verbosity``.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config source is invalid or missing

    Example:
        >>> config = load_config(config_file=Path("ts-analyzer.toml"), verbose=True)
        >>> config.verbosity
        'verbose'
    """
    sources = [
        (Path.home() / ".ts-analyzer.toml", "global config"),
        (Path.cwd() / "ts-analyzer.toml", "project config"),
    ]
    if config_file is not None:
        config_file = Path(config_file)
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        sources.append((config_file, "config file"))

    merged: Dict[str, Any] = {}
    for path, label in sources:
        if path.is_file():
            merged.update(_read_toml(path, label))

    merged.update(_load_env_vars())
    merged.update(_cli_overrides(overrides))

    thresholds = merged.pop("thresholds", None)
    if isinstance(thresholds, dict):
        try:
            thresholds = ThresholdConfig(**thresholds)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid [thresholds] config: {e}")
    if thresholds is not None:
        merged["thresholds"] = thresholds

    unknown = sorted(set(merged) - set(AnalysisConfig.__dataclass_fields__))
    if unknown:
        raise ConfigurationError(f"Unknown configuration key(s): {', '.join(unknown)}")

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Wrong value type, e.g. workers = "four"
        raise ConfigurationError(f"Invalid configuration: {e}")


def _cli_overrides(overrides: Dict[str, Any]) -> Dict[str, Any]:
    result = {k: v for k, v in overrides.items() if v is not None and k not in ("verbose", "quiet")}
    if overrides.get("quiet"):
        result["verbosity"] = "quiet"
    elif overrides.get("verbose"):
        result["verbosity"] = "verbose"
    return result


def _read_toml(path: Path, label: str) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


# ── Environment ──────────────────────────────────────────────────

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"expected true/false, got '{value}'")


def _parse_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


# Fields readable from TS_ANALYZER_<FIELD>; lists are comma-separated.
_ENV_PARSERS: Dict[str, Callable[[str], Any]] = {
    "duplicates": _parse_bool,
    "complexity": _parse_bool,
    "functions": _parse_bool,
    "extra_ignore_patterns": _parse_list,
    "excluded_dependencies": _parse_list,
    "workers": int,
    "output_path": str,
    "verbosity": str,
}


def _load_env_vars() -> Dict[str, Any]:
    """Collect ``TS_ANALYZER_*`` settings that are present in the environment."""
    result: Dict[str, Any] = {}
    for field_name, parse in _ENV_PARSERS.items():
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        raw = os.environ.get(env_key)
        if raw is None:
            continue
        try:
            result[field_name] = parse(raw)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
    return result
