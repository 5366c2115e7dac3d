"""
Solution Context Module - Deadline and cancellation for exhaustive searches.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class SolutionContext:
    """
    Shared context passed to long-running searches containing
    cancellation, deadline and progress reporting.

    Cancellation is budget-based: searches poll is_cancelled() at
    each expansion and unwind as soon as it returns True.

    Attributes:
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = unbounded)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if the search should stop
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and time.time() - self.start_time > self.timeout_sec:
            return True
        return False

    def cancel(self) -> None:
        self.cancel_flag.set()

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """Get seconds elapsed since computation started."""
        return time.time() - self.start_time

    def remaining_time(self) -> Optional[float]:
        """
        Get seconds remaining before timeout.

        Returns:
            Remaining time in seconds (may be negative if exceeded),
            or None when there is no timeout
        """
        if self.timeout_sec is None:
            return None
        return self.timeout_sec - self.elapsed_time()
