"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/progress.py
Progress plumbing between scanners and their callers.

- ProgressTracker: thread-safe running totals shared by parallel subtree walks
- ProgressChannel: bounded, never-blocking progress sink; drops the oldest
  event when full so a slow consumer cannot stall a scan
"""

import logging
import queue
import threading
from typing import List, Optional

from reclaimer.core.models import ProgressEvent, ScanConfig
from reclaimer.core.interfaces import ProgressCallback

logger = logging.getLogger(__name__)


class ProgressTracker:
    """
    Accumulates files/folders/bytes from any number of threads and
    forwards a snapshot to the callback after every update.
    """

    def __init__(self, progress_callback: Optional[ProgressCallback] = None, stage: str = "scanning"):
        self.progress_callback = progress_callback
        self.stage = stage
        self.files = 0
        self.folders = 0
        self.bytes = 0
        self._lock = threading.Lock()

    def update(self, current_path: str, files: int = 0, folders: int = 0, size_bytes: int = 0) -> None:
        with self._lock:
            self.files += files
            self.folders += folders
            self.bytes += size_bytes
            event = ProgressEvent(
                stage=self.stage,
                files_scanned=self.files,
                folders_scanned=self.folders,
                current_path=current_path,
                bytes_so_far=self.bytes,
            )
            # Emitting under the lock keeps the totals seen by the caller monotonic
            if self.progress_callback:
                self.progress_callback(event)


class ProgressChannel:
    """
    Bounded queue of ProgressEvent usable directly as a progress_callback.

    Usage:
        channel = ProgressChannel()
        command.execute(params, progress_callback=channel)   # worker thread
        for event in channel.drain(): ...                      # UI thread
    """

    def __init__(self, maxsize: int = ScanConfig.PROGRESS_QUEUE_SIZE):
        if maxsize <= 0:
            raise ValueError("Channel size must be positive")
        self._queue: "queue.Queue[ProgressEvent]" = queue.Queue(maxsize=maxsize)
        self.dropped = 0

    def __call__(self, event: ProgressEvent) -> None:
        self.publish(event)

    def publish(self, event: ProgressEvent) -> None:
        """Enqueue without blocking; evicts the oldest event if the channel is full."""
        while True:
            try:
                self._queue.put_nowait(event)
                return
            except queue.Full:
                try:
                    self._queue.get_nowait()
                    self.dropped += 1
                except queue.Empty:
                    pass

    def get(self, timeout: Optional[float] = None) -> Optional[ProgressEvent]:
        """Next event, or None if nothing arrives within timeout."""
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def drain(self) -> List[ProgressEvent]:
        """All currently queued events, oldest first."""
        events = []
        while True:
            try:
                events.append(self._queue.get_nowait())
            except queue.Empty:
                return events

    def latest(self) -> Optional[ProgressEvent]:
        """Most recent queued event, discarding the older ones."""
        events = self.drain()
        return events[-1] if events else None
