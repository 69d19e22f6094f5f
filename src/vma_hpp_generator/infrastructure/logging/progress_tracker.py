#!/usr/bin/env python3

"""Per-phase timing and declaration counts for a generation run."""

import logging
from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from time import time

import psutil


class ProgressTracker:
    """
    Times the enum, struct and handle phases and counts what each one emits.

    Phases may nest. Declarations counted while a phase is open are attributed
    to the innermost phase as well as to the run totals.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.start_time = time()
        self.counts: Counter[str] = Counter()
        self.phase_times: dict[str, float] = {}
        self.operation_stack: list[tuple[str, Counter[str]]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Time one phase and log what it emitted.

        Args:
            operation_name: Phase name, e.g. ``"enums"``

        Yields:
            None
        """
        emitted: Counter[str] = Counter()
        self.operation_stack.append((operation_name, emitted))
        self.logger.debug(f"Starting operation: {operation_name}")
        start_time = time()

        try:
            yield
        except Exception as e:
            self.logger.error(
                f"Failed operation: {operation_name} after {time() - start_time:.3f}s: {e}"
            )
            raise
        else:
            elapsed = time() - start_time
            self.phase_times[operation_name] = self.phase_times.get(operation_name, 0.0) + elapsed
            self.logger.debug(
                f"Completed operation: {operation_name} in {elapsed:.3f}s "
                f"({self._format_counts(emitted)})"
            )
        finally:
            self.operation_stack.pop()

    def count_declaration(self, kind: str) -> None:
        """Count one emitted declaration of ``kind`` (``"enums"``, ``"functions"``, ...)."""
        self.counts[kind] += 1
        if self.operation_stack:
            self.operation_stack[-1][1][kind] += 1

    @staticmethod
    def _format_counts(counts: Counter[str]) -> str:
        return ", ".join(f"{count} {kind}" for kind, count in sorted(counts.items())) or "nothing emitted"

    def report_summary(self) -> None:
        total_time = time() - self.start_time
        message = f"Generation complete: {self._format_counts(self.counts)} in {total_time:.2f}s"
        if self.phase_times:
            slowest = max(self.phase_times, key=self.phase_times.__getitem__)
            message += f" (slowest phase: {slowest}, {self.phase_times[slowest]:.3f}s)"
        self.logger.info(message)

    def get_current_context(self) -> str:
        """Names of the open phases, outermost first, or ``"idle"``."""
        if not self.operation_stack:
            return "idle"
        return " -> ".join(name for name, _ in self.operation_stack)

    def log_memory_usage(self) -> None:
        """Log resident memory of the current process."""
        try:
            memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.debug(f"Could not get memory usage: {e}")
            return
        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")

    def reset(self) -> None:
        """Forget all counts and phase timings."""
        self.start_time = time()
        self.counts.clear()
        self.phase_times.clear()
        self.operation_stack.clear()
