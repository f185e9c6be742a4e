# logger_utils.py - logging setup and timing helpers

from __future__ import annotations

import logging
import time
from typing import Optional

from rich.logging import RichHandler

from multitrie.utils.metrics_tracker import Metrics

metrics_logger = logging.getLogger("multitrie.metrics")


def setup_logging(level: str = "WARNING") -> None:
    """Route the multitrie loggers through Rich. Safe to call twice."""
    root = logging.getLogger("multitrie")
    root.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(show_path=False, markup=False))


class Log:
    """Metric helpers shared by the CLI and profiling tools."""

    @staticmethod
    def metric(tag: str, value, unit: str = "") -> None:
        """Example: 'search done: 0.000123s' at INFO on multitrie.metrics."""
        metrics_logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label: str, metrics: Optional[Metrics] = None) -> "_Timer":
        """
        Measure a block:
            with Log.time_block("search", metrics):
                trie.find_all("abc")
        The duration is logged and, when given, recorded in `metrics`.
        """
        return _Timer(label, metrics)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str, metrics: Optional[Metrics] = None):
        self.label = label
        self.metrics = metrics
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        if self.metrics is not None:
            self.metrics.record(self.label, self.elapsed)
        Log.metric(f"{self.label} done", round(self.elapsed, 6), "s")
        return False
