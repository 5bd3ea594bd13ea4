"""Renderers for an AnalysisResult: rich terminal tables and JSON."""

from typing import Dict, Type

from .base import BaseFormatter
from .json_formatter import JsonFormatter, result_to_dict
from .rich_formatter import RichFormatter

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "rich": RichFormatter,
    "json": JsonFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Instantiate the formatter registered under ``name``.

    Raises:
        ValueError: If no formatter has that name
    """
    try:
        return FORMATTERS[name]()
    except KeyError:
        choices = ", ".join(sorted(FORMATTERS))
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {choices}") from None


__all__ = [
    "FORMATTERS",
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "result_to_dict",
    "get_formatter",
]
