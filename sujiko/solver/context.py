"""
Analysis Context Module - Cancellation, timeout and progress for batch runs.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class AnalysisContext:
    """
    Shared context passed to run_analysis.

    Attributes:
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum run time in seconds, None for no limit
        start_time: When the run started
        progress_callback: Optional callback receiving (fraction, message)
        progress_interval: Puzzles between progress reports
    """
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None
    progress_interval: int = 1000

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if the run should stop
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def cancel(self) -> None:
        """Request the run to stop before the next puzzle."""
        self.cancel_flag.set()

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Forward progress to the callback, if any.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """Seconds elapsed since start_time."""
        return time.time() - self.start_time
