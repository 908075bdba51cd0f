"""Counters collected during a lint pass."""
import time
from dataclasses import dataclass, field


@dataclass
class LintMetrics:
    """Metrics collected during a lint pass."""

    # Timing
    start_time: float = field(default_factory=time.time)
    end_time: float | None = None

    # Files
    files_seen: int = 0
    default_library_files: int = 0
    dependency_files: int = 0
    files_scanned: int = 0
    pinned_files_skipped: int = 0
    files_linted: int = 0

    def finish(self) -> None:
        """Mark the pass as finished."""
        self.end_time = time.time()

    @property
    def elapsed_seconds(self) -> float:
        """Get elapsed time in seconds."""
        end = self.end_time or time.time()
        return end - self.start_time

    def to_dict(self) -> dict:
        """Convert metrics to dictionary."""
        return {
            "elapsed_seconds": round(self.elapsed_seconds, 2),
            "files_seen": self.files_seen,
            "default_library_files": self.default_library_files,
            "dependency_files": self.dependency_files,
            "files_scanned": self.files_scanned,
            "pinned_files_skipped": self.pinned_files_skipped,
            "files_linted": self.files_linted,
        }
