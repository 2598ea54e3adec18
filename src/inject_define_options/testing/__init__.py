"""Testing utilities for code that reports through a Reporter."""

from .fakes import FakeReporter

__all__ = ["FakeReporter"]
