"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception types raised by the scanning core.
Per-entry I/O problems never surface through these; they are recovered locally.
"""


class ReclaimerError(Exception):
    """Base class for all errors raised by the core."""


class InvalidModeError(ReclaimerError, ValueError):
    """Unknown duplicate match mode requested by the caller."""


class ChecksumError(ReclaimerError, OSError):
    """A file could not be read while computing its content hash."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot hash {path}: {reason}")
        self.path = path
        self.reason = reason
