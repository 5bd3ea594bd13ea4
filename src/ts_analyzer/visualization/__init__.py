"""HTML report generation."""

from .report import generate_report

__all__ = ["generate_report"]
