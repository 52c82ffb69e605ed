"""Presenters that format validation results for the terminal."""

from .report import ReportPresenter

__all__ = ["ReportPresenter"]
