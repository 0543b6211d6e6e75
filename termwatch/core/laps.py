"""Stopwatch lap recording."""

import threading

from ..common.duration import format_seconds
from ..common.pydantic import Lap


class LapRecorder:
    """Records laps against a running stopwatch total."""

    def __init__(self) -> None:
        """Initialize the lap recorder."""
        self._laps: list[Lap] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        """Number of recorded laps."""
        with self._lock:
            return len(self._laps)

    @property
    def laps(self) -> list[Lap]:
        """Recorded laps, newest first."""
        with self._lock:
            return self._laps[::-1]

    def add_lap(self, total_seconds: int) -> Lap:
        """Record a lap ending at total_seconds on the stopwatch."""
        with self._lock:
            previous_total = self._laps[-1].total_seconds if self._laps else 0
            if total_seconds < previous_total:
                raise ValueError("Lap total cannot be lower than the previous lap's total")
            lap = Lap(
                number=len(self._laps) + 1,
                lap_seconds=total_seconds - previous_total,
                total_seconds=total_seconds,
            )
            self._laps.append(lap)
            return lap

    def clear(self) -> None:
        """Forget all laps."""
        with self._lock:
            self._laps.clear()

    def export_text(self) -> str:
        """Render laps as plain text, oldest first, one lap per line."""
        with self._lock:
            laps = list(self._laps)
        return "".join(
            f"{lap.number:2d} {format_seconds(lap.lap_seconds)} {format_seconds(lap.total_seconds)}\n" for lap in laps
        )
