"""Presenters for CLI output formatting."""

from .summary import SummaryPresenter

__all__ = ["SummaryPresenter"]
